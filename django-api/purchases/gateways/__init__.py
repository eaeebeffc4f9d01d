from purchases.gateways.interfaces import SeatReservationService, TicketPaymentService
from purchases.gateways.local import LocalSeatReservationService, LocalTicketPaymentService

__all__ = [
    "TicketPaymentService",
    "SeatReservationService",
    "LocalTicketPaymentService",
    "LocalSeatReservationService",
]
