"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    SLUG_UNDERIVABLE = "SLUG_UNDERIVABLE"
    REFERENCED_EVENT_MISSING = "REFERENCED_EVENT_MISSING"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found.",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found.",
        )
        self.booking_id = booking_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid eventId.",
        )


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format.",
        )


class RequiredFieldError(DomainError):
    """Raised when a required event field is missing or blank."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(code=ErrorCode.REQUIRED_FIELD, message=message)
        self.field = field


class InvalidDateError(DomainError):
    """Raised when an event date cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid date format. Expected a calendar date with year, month and day.",
        )
        self.value = value


class InvalidTimeError(DomainError):
    """Raised when an event time has an unknown shape or out-of-range parts."""

    def __init__(self, value: str, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TIME, message=message)
        self.value = value


class InvalidEmailError(DomainError):
    """Raised when a booking email fails the syntax check."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="Invalid email format.",
        )


class DuplicateSlugError(DomainError):
    """Raised when another event already owns the derived slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message=f"An event with slug '{slug}' already exists.",
        )
        self.slug = slug


class SlugDerivationError(DomainError):
    """Raised when a title yields an empty slug."""

    def __init__(self, title: str) -> None:
        super().__init__(
            code=ErrorCode.SLUG_UNDERIVABLE,
            message="Unable to generate slug from title.",
        )
        self.title = title


class ReferencedEventNotFoundError(DomainError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.REFERENCED_EVENT_MISSING,
            message="Referenced event does not exist.",
        )
        self.event_id = event_id
