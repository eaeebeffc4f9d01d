"""Collaborator interfaces (ports to third-party services).

Gateways must be swappable; the purchase service depends only on these.
"""

from abc import ABC, abstractmethod


class TicketPaymentService(ABC):
    """Interface for the payment provider."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        """Charge the amount to the account. May raise on failure."""
        ...


class SeatReservationService(ABC):
    """Interface for the seat reservation system."""

    @abstractmethod
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        """Reserve the number of seats for the account. May raise on failure."""
        ...
