"""Django ORM implementation of the event and booking stores."""

import structlog
from django.db import IntegrityError, transaction

from events import models
from events.domain import Booking, BookingId, EmailAddress, Event, EventFields, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DuplicateSlugError,
    EventNotFoundError,
    ReferencedEventNotFoundError,
)
from events.stores.interfaces import BookingStore, EventStore

logger = structlog.get_logger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=row.mode,
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        email=EmailAddress(row.email),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _apply_fields(row: models.Event, fields: EventFields) -> None:
    row.title = fields.title
    row.slug = fields.slug
    row.description = fields.description
    row.overview = fields.overview
    row.image = fields.image
    row.venue = fields.venue
    row.location = fields.location
    row.date = fields.date
    row.time = fields.time
    row.mode = fields.mode
    row.audience = fields.audience
    row.agenda = list(fields.agenda)
    row.organizer = fields.organizer
    row.tags = list(fields.tags)


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        row = models.Event.objects.filter(slug=slug).first()
        return _to_event(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def slug_exists(self, slug: str, exclude: EventId | None = None) -> bool:
        query = models.Event.objects.filter(slug=slug)
        if exclude is not None:
            query = query.exclude(pk=exclude.value)
        return query.exists()

    def add_event(self, fields: EventFields) -> Event:
        row = models.Event()
        _apply_fields(row, fields)
        try:
            with transaction.atomic():
                row.save(force_insert=True)
        except IntegrityError as exc:
            logger.warning("event_insert_conflict", slug=fields.slug, error=str(exc))
            raise DuplicateSlugError(fields.slug) from exc
        return _to_event(row)

    def update_event(self, event_id: EventId, fields: EventFields) -> Event:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            raise EventNotFoundError(str(event_id))
        _apply_fields(row, fields)
        try:
            with transaction.atomic():
                row.save()
        except IntegrityError as exc:
            logger.warning("event_update_conflict", slug=fields.slug, error=str(exc))
            raise DuplicateSlugError(fields.slug) from exc
        return _to_event(row)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM.

    The event row is locked and re-read inside the write transaction, and the
    foreign key rejects a dangling reference at commit.
    """

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        return _to_booking(row) if row else None

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        rows = models.Booking.objects.filter(event_id=event_id.value)
        return [_to_booking(row) for row in rows]

    def add_booking(self, event_id: EventId, email: EmailAddress) -> Booking:
        try:
            with transaction.atomic():
                self._lock_event(event_id)
                row = models.Booking(event_id=event_id.value, email=email.value)
                row.save(force_insert=True)
        except IntegrityError as exc:
            raise ReferencedEventNotFoundError(str(event_id)) from exc
        return _to_booking(row)

    def update_booking(
        self, booking_id: BookingId, event_id: EventId, email: EmailAddress
    ) -> Booking:
        try:
            with transaction.atomic():
                row = (
                    models.Booking.objects.select_for_update()
                    .filter(pk=booking_id.value)
                    .first()
                )
                if row is None:
                    raise BookingNotFoundError(str(booking_id))
                if row.event_id != event_id.value:
                    self._lock_event(event_id)
                row.event_id = event_id.value
                row.email = email.value
                row.save()
        except IntegrityError as exc:
            raise ReferencedEventNotFoundError(str(event_id)) from exc
        return _to_booking(row)

    @staticmethod
    def _lock_event(event_id: EventId) -> None:
        found = list(
            models.Event.objects.select_for_update()
            .filter(pk=event_id.value)
            .values_list("pk", flat=True)
        )
        if not found:
            raise ReferencedEventNotFoundError(str(event_id))
