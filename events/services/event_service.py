"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every write runs validate-then-persist: ``normalize_event`` produces the
fields to store (or raises), the slug is checked for uniqueness, and only
then is the store asked to write.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from events.domain import Event, EventFields, EventId
from events.domain.errors import (
    DomainError,
    DuplicateSlugError,
    ErrorCode,
    EventNotFoundError,
    InvalidEventIdError,
)
from events.domain.normalization import normalize_event
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


def parse_event_id(event_id: str) -> EventId:
    """Parse a raw event ID.

    Raises:
        InvalidEventIdError: If the event_id is not a valid UUID.
    """
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events, newest first."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has this slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Validate, normalize and insert a new event.

        Raises:
            RequiredFieldError, InvalidDateError, InvalidTimeError,
            SlugDerivationError: If the input does not normalize.
            DuplicateSlugError: If another event already has the slug.
        """
        fields = self._prepare(data)
        event = self._store.add_event(fields)
        logger.info("event_created", event_id=str(event.id), slug=event.slug)
        return event

    def update_event(self, event_id: str, data: Mapping[str, Any]) -> Event:
        """Apply a partial update to an event and re-run normalization.

        The slug is kept unless the title changes.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            DomainError: Any normalization or uniqueness failure.
        """
        current = self.get_event(event_id)
        fields = self._prepare(data, current)
        event = self._store.update_event(current.id, fields)
        logger.info(
            "event_updated",
            event_id=str(event.id),
            slug=event.slug,
            slug_changed=event.slug != current.slug,
        )
        return event

    def _prepare(self, data: Mapping[str, Any], current: Event | None = None) -> EventFields:
        try:
            fields = normalize_event(data, current)
        except DomainError as exc:
            logger.info("event_rejected", code=exc.code.value, reason=exc.message)
            raise
        exclude = current.id if current is not None else None
        if self._store.slug_exists(fields.slug, exclude=exclude):
            logger.info(
                "event_rejected", code=ErrorCode.DUPLICATE_SLUG.value, slug=fields.slug
            )
            raise DuplicateSlugError(fields.slug)
        return fields
