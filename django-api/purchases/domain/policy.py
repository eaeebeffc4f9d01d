"""Pricing and seating rules applied to every purchase."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from purchases.domain.models import TicketTally, TicketType

MAX_TICKETS_PER_PURCHASE = 25

DEFAULT_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 25,
        TicketType.CHILD: 15,
        TicketType.INFANT: 0,
    }
)

# Infants sit on an adult's lap.
DEFAULT_SEATS: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.ADULT: 1,
        TicketType.CHILD: 1,
        TicketType.INFANT: 0,
    }
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class TicketPolicy:
    """Lookup table of price and seats per ticket type, plus the purchase limit."""

    max_tickets_per_purchase: int = MAX_TICKETS_PER_PURCHASE
    prices: Mapping[TicketType, int] = field(default_factory=lambda: DEFAULT_PRICES)
    seats: Mapping[TicketType, int] = field(default_factory=lambda: DEFAULT_SEATS)

    def __post_init__(self) -> None:
        if not _is_int(self.max_tickets_per_purchase):
            raise ValueError("Maximum tickets per purchase must be an integer")
        if self.max_tickets_per_purchase <= 0:
            raise ValueError("Maximum tickets per purchase must be positive")
        for name, table in (("price", self.prices), ("seat count", self.seats)):
            missing = [t.value for t in TicketType if t not in table]
            if missing:
                raise ValueError(f"Missing {name} for ticket types: {', '.join(missing)}")
            if not all(_is_int(value) for value in table.values()):
                raise ValueError(f"Ticket {name} must be an integer")
            if any(value < 0 for value in table.values()):
                raise ValueError(f"Ticket {name} cannot be negative")
        object.__setattr__(self, "prices", MappingProxyType(dict(self.prices)))
        object.__setattr__(self, "seats", MappingProxyType(dict(self.seats)))

    def amount_for(self, tally: TicketTally) -> int:
        return sum(self.prices[t] * tally.count(t) for t in TicketType)

    def seats_for(self, tally: TicketTally) -> int:
        return sum(self.seats[t] * tally.count(t) for t in TicketType)
