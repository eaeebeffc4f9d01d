from purchases import conf
from purchases.services.purchase_service import TicketService


def build_ticket_service() -> TicketService:
    """Return a TicketService wired from the ``PURCHASES`` setting."""
    return TicketService(
        payment_service=conf.get_payment_service(),
        reservation_service=conf.get_reservation_service(),
        policy=conf.get_ticket_policy(),
    )


__all__ = ["TicketService", "build_ticket_service"]
