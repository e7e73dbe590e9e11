"""In-memory stores for tests and local runs without a database.

Records live in plain dicts owned by the store instances. The booking store
checks event existence through the event store it was given, so the guard is
best-effort: nothing stops an event from disappearing between the check and
the write.
"""

import uuid
from dataclasses import replace
from datetime import datetime, timezone

from events.domain import Booking, BookingId, EmailAddress, Event, EventFields, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DuplicateSlugError,
    EventNotFoundError,
    ReferencedEventNotFoundError,
)
from events.stores.interfaces import BookingStore, EventStore


def _now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}

    def list_events(self) -> list[Event]:
        return sorted(self._events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self._events.get(event_id)

    def get_event_by_slug(self, slug: str) -> Event | None:
        return next((e for e in self._events.values() if e.slug == slug), None)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self._events

    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        return any(e.slug == slug and e.id != exclude for e in self._events.values())

    def add_event(self, fields: EventFields) -> Event:
        if self.slug_exists(fields.slug):
            raise DuplicateSlugError(fields.slug)
        now = _now()
        event = Event(
            id=EventId(uuid.uuid4()),
            created_at=now,
            updated_at=now,
            **vars(fields),
        )
        self._events[event.id] = event
        return event

    def update_event(self, event_id: EventId, fields: EventFields) -> Event:
        current = self._events.get(event_id)
        if current is None:
            raise EventNotFoundError(str(event_id))
        if self.slug_exists(fields.slug, exclude=event_id):
            raise DuplicateSlugError(fields.slug)
        event = replace(current, updated_at=_now(), **vars(fields))
        self._events[event_id] = event
        return event

    def remove_event(self, event_id: EventId) -> None:
        self._events.pop(event_id, None)


class InMemoryBookingStore(BookingStore):
    def __init__(self, events: InMemoryEventStore) -> None:
        self._events = events
        self._bookings: dict[BookingId, Booking] = {}

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        found = [b for b in self._bookings.values() if b.event_id == event_id]
        return sorted(found, key=lambda b: b.created_at)

    def add_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        if not self._events.event_exists(event_id):
            raise ReferencedEventNotFoundError(str(event_id))
        now = _now()
        booking = Booking(
            id=BookingId(uuid.uuid4()),
            event_id=event_id,
            email=email,
            created_at=now,
            updated_at=now,
        )
        self._bookings[booking.id] = booking
        return booking

    def update_booking(
        self, booking_id: BookingId, event_id: EventId, email: EmailAddress
    ) -> Booking:
        current = self._bookings.get(booking_id)
        if current is None:
            raise BookingNotFoundError(str(booking_id))
        if current.event_id != event_id and not self._events.event_exists(event_id):
            raise ReferencedEventNotFoundError(str(event_id))
        booking = replace(current, event_id=event_id, email=email, updated_at=_now())
        self._bookings[booking_id] = booking
        return booking
