"""Typed access to the ``PURCHASES`` Django setting.

Every key is optional:

    PURCHASES = {
        "MAX_TICKETS_PER_PURCHASE": 25,
        "TICKET_PRICES": {"ADULT": 25, "CHILD": 15, "INFANT": 0},
        "PAYMENT_SERVICE": "purchases.gateways.local.LocalTicketPaymentService",
        "RESERVATION_SERVICE": "purchases.gateways.local.LocalSeatReservationService",
    }
"""

from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from purchases.domain import TicketPolicy, TicketType
from purchases.domain.policy import DEFAULT_PRICES, MAX_TICKETS_PER_PURCHASE
from purchases.gateways import SeatReservationService, TicketPaymentService

DEFAULTS: dict[str, Any] = {
    "MAX_TICKETS_PER_PURCHASE": MAX_TICKETS_PER_PURCHASE,
    "TICKET_PRICES": {ticket_type.value: price for ticket_type, price in DEFAULT_PRICES.items()},
    "PAYMENT_SERVICE": "purchases.gateways.local.LocalTicketPaymentService",
    "RESERVATION_SERVICE": "purchases.gateways.local.LocalSeatReservationService",
}


def get_setting(name: str) -> Any:
    """Return a ``PURCHASES`` value, falling back to its default."""
    overrides = getattr(settings, "PURCHASES", None) or {}
    return overrides.get(name, DEFAULTS[name])


def get_ticket_policy() -> TicketPolicy:
    """Build the ticket policy from settings.

    Raises:
        ImproperlyConfigured: If a ticket type name is unknown or a value is invalid.
    """
    prices = dict(DEFAULT_PRICES)
    for name, price in get_setting("TICKET_PRICES").items():
        try:
            prices[TicketType[name]] = price
        except KeyError:
            raise ImproperlyConfigured(f"PURCHASES['TICKET_PRICES'] has unknown ticket type {name!r}") from None

    try:
        return TicketPolicy(
            max_tickets_per_purchase=get_setting("MAX_TICKETS_PER_PURCHASE"),
            prices=prices,
        )
    except ValueError as exc:
        raise ImproperlyConfigured(f"Invalid PURCHASES setting: {exc}") from exc


def _load_service(name: str, interface: type) -> Any:
    path = get_setting(name)
    try:
        service_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"PURCHASES[{name!r}] could not import {path!r}") from exc
    if not (isinstance(service_class, type) and issubclass(service_class, interface)):
        raise ImproperlyConfigured(f"PURCHASES[{name!r}] must be a {interface.__name__} subclass")
    return service_class()


def get_payment_service() -> TicketPaymentService:
    return _load_service("PAYMENT_SERVICE", TicketPaymentService)


def get_reservation_service() -> SeatReservationService:
    return _load_service("RESERVATION_SERVICE", SeatReservationService)
