"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    ADULT_REQUIRED = "ADULT_REQUIRED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase request breaks a purchase rule."""


class InvalidAccountError(InvalidPurchaseError):
    """Raised when the account ID is missing or not positive."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT,
            message="Invalid account ID",
        )
        self.account_id = account_id


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a purchase asks for more tickets than allowed."""

    def __init__(self, total: int, maximum: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Cannot purchase more than {maximum} tickets at a time",
        )
        self.total = total
        self.maximum = maximum


class AdultRequiredError(InvalidPurchaseError):
    """Raised when child tickets are requested without an adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="Child tickets cannot be purchased without an adult ticket",
        )
