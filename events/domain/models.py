"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import BookingId, EmailAddress, EventId


@dataclass(frozen=True)
class EventFields:
    """Normalized, writable event fields ready to be persisted."""

    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    slug: str
    description: str
    overview: str
    image: str
    venue: str
    location: str
    date: str
    time: str
    mode: str
    audience: str
    agenda: tuple[str, ...]
    organizer: str
    tags: tuple[str, ...]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId
    event_id: EventId
    email: EmailAddress
    created_at: datetime
    updated_at: datetime
