"""Tests for the local gateway implementations.

Run with: pytest tests/test_gateways.py -v
"""

import pytest

from purchases.domain import TicketType, TicketTypeRequest
from purchases.gateways import (
    LocalSeatReservationService,
    LocalTicketPaymentService,
    SeatReservationService,
    TicketPaymentService,
)
from purchases.services import TicketService


class TestInterfaces:
    """Tests for the gateway interfaces."""

    def test_interfaces_cannot_be_instantiated(self):
        """Gateways must implement the abstract methods."""
        with pytest.raises(TypeError):
            TicketPaymentService()
        with pytest.raises(TypeError):
            SeatReservationService()


class TestLocalGateways:
    """Tests for the logging-only gateways."""

    def test_payment_is_logged(self, caplog):
        """make_payment logs the amount and account."""
        with caplog.at_level("INFO", logger="purchases"):
            LocalTicketPaymentService().make_payment(3, 75)

        assert "Payment of 75 taken from account 3" in caplog.text

    def test_reservation_is_logged(self, caplog):
        """reserve_seat logs the seats and account."""
        with caplog.at_level("INFO", logger="purchases"):
            LocalSeatReservationService().reserve_seat(3, 2)

        assert "Reserved 2 seats for account 3" in caplog.text

    def test_purchase_through_local_gateways(self, caplog):
        """A full purchase logs payment before reservation."""
        service = TicketService(LocalTicketPaymentService(), LocalSeatReservationService())

        with caplog.at_level("INFO", logger="purchases"):
            service.purchase_tickets(9, [TicketTypeRequest(TicketType.ADULT, 2)])

        messages = [record.getMessage() for record in caplog.records]
        assert messages.index("Payment of 50 taken from account 9") < messages.index(
            "Reserved 2 seats for account 9"
        )
