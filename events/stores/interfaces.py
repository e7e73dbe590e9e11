"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They persist whatever
they are given: validation and normalization happen in the services before
any store method that writes is called.
"""

from abc import ABC, abstractmethod

from events.domain import Booking, BookingId, EmailAddress, Event, EventFields, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        """Check if any event other than ``exclude`` uses the slug."""
        ...

    @abstractmethod
    def add_event(self, fields: EventFields) -> Event:
        """Insert a new event.

        Raises:
            DuplicateSlugError: If the slug is already taken.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, fields: EventFields) -> Event:
        """Replace the writable fields of an existing event.

        Raises:
            EventNotFoundError: If the event does not exist.
            DuplicateSlugError: If the slug is already taken.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings for an event ordered by created_at ascending."""
        ...

    @abstractmethod
    def add_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        """Insert a new booking.

        Raises:
            ReferencedEventNotFoundError: If the store itself can tell the
                event is gone at write time.
        """
        ...

    @abstractmethod
    def update_booking(
        self, booking_id: BookingId, event_id: EventId, email: EmailAddress
    ) -> Booking:
        """Replace the event reference and email of an existing booking.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            ReferencedEventNotFoundError: If the store itself can tell the
                event is gone at write time.
        """
        ...
