"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from purchases.gateways import SeatReservationService, TicketPaymentService
from purchases.services import TicketService


@pytest.fixture
def gateways() -> Mock:
    """Parent mock recording calls to both gateways in order."""
    manager = Mock()
    manager.attach_mock(Mock(spec=TicketPaymentService), "payment")
    manager.attach_mock(Mock(spec=SeatReservationService), "reservation")
    return manager


@pytest.fixture
def payment_service(gateways: Mock) -> Mock:
    return gateways.payment


@pytest.fixture
def reservation_service(gateways: Mock) -> Mock:
    return gateways.reservation


@pytest.fixture
def ticket_service(payment_service: Mock, reservation_service: Mock) -> TicketService:
    return TicketService(payment_service, reservation_service)
