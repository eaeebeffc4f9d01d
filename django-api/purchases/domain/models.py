"""Domain models for a single ticket purchase.

These are pure domain objects; nothing here is persisted.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Self

from purchases.domain.value_objects import AccountId, TicketCount


class TicketType(Enum):
    """Ticket classification determining price and seat requirement."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


@dataclass(frozen=True)
class TicketTypeRequest:
    """Request for a number of tickets of one type."""

    ticket_type: TicketType
    no_of_tickets: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise ValueError(f"Unknown ticket type: {self.ticket_type!r}")
        TicketCount(self.no_of_tickets)


@dataclass(frozen=True)
class TicketTally:
    """Per-type ticket totals of one purchase request."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        """Sum the requests per ticket type.

        Raises:
            ValueError: If requests is None or holds anything but TicketTypeRequest.
        """
        if requests is None:
            raise ValueError("Ticket type requests are required")
        counts = dict.fromkeys(TicketType, 0)
        for request in requests:
            if not isinstance(request, TicketTypeRequest):
                raise ValueError(f"Not a ticket type request: {request!r}")
            counts[request.ticket_type] += request.no_of_tickets
        return cls(
            adult=counts[TicketType.ADULT],
            child=counts[TicketType.CHILD],
            infant=counts[TicketType.INFANT],
        )

    def count(self, ticket_type: TicketType) -> int:
        return getattr(self, ticket_type.name.lower())

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant


@dataclass(frozen=True)
class PurchaseSummary:
    """Outcome of a completed purchase."""

    account_id: AccountId
    tally: TicketTally
    amount_to_pay: int
    seats_to_reserve: int
