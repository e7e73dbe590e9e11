"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self
from uuid import UUID

from events.domain.errors import InvalidEmailError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.\S+")


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a Booking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EmailAddress:
    """Trimmed, lowercased email that passed the local@domain.tld check."""

    value: str

    def __post_init__(self) -> None:
        if not EMAIL_PATTERN.fullmatch(self.value):
            raise InvalidEmailError()

    @classmethod
    def parse(cls, raw: object) -> Self:
        if not isinstance(raw, str):
            raise InvalidEmailError()
        return cls(value=raw.strip().lower())

    def __str__(self) -> str:
        return self.value
