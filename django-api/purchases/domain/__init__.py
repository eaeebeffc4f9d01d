from purchases.domain.errors import (
    AdultRequiredError,
    DomainError,
    ErrorCode,
    InvalidAccountError,
    InvalidPurchaseError,
    TooManyTicketsError,
)
from purchases.domain.models import PurchaseSummary, TicketTally, TicketType, TicketTypeRequest
from purchases.domain.policy import TicketPolicy
from purchases.domain.value_objects import AccountId, TicketCount

__all__ = [
    "TicketType",
    "TicketTypeRequest",
    "TicketTally",
    "PurchaseSummary",
    "TicketPolicy",
    "AccountId",
    "TicketCount",
    "ErrorCode",
    "DomainError",
    "InvalidPurchaseError",
    "InvalidAccountError",
    "TooManyTicketsError",
    "AdultRequiredError",
]
