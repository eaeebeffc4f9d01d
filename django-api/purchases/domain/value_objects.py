"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class AccountId:
    """Positive integer identifying the purchaser."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be positive")

    @classmethod
    def from_value(cls, value: object) -> Self:
        if value is None:
            raise ValueError("Account ID is required")
        return cls(value=value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class TicketCount:
    """Non-negative integer number of tickets."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Ticket count must be an integer")
        if self.value < 0:
            raise ValueError("Ticket count cannot be negative")
