"""In-process gateway implementations.

Both accept every call and only log it. They stand in for the real
payment provider and reservation system outside production.
"""

import logging

from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService

logger = logging.getLogger(__name__)


class LocalTicketPaymentService(TicketPaymentService):
    """Payment service that records nothing."""

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        logger.info("Payment of %s taken from account %s", total_amount_to_pay, account_id)


class LocalSeatReservationService(SeatReservationService):
    """Reservation service that records nothing."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        logger.info("Reserved %s seats for account %s", total_seats_to_allocate, account_id)
