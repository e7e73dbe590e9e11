"""Booking service.

A booking is only written after its email normalizes and its event
reference points at an existing event. The existence check is skipped on
updates that keep the same event.
"""

import structlog

from events.domain import Booking, BookingId, EmailAddress, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DomainError,
    EventNotFoundError,
    InvalidBookingIdError,
    ReferencedEventNotFoundError,
)
from events.services.event_service import parse_event_id
from events.stores.interfaces import BookingStore, EventStore

logger = structlog.get_logger(__name__)


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidBookingIdError() from exc


class BookingService:
    """Service for booking operations."""

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def get_booking(self, booking_id: str) -> Booking:
        """Return a booking by ID.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
        """
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._events.event_exists(parsed):
            raise EventNotFoundError(event_id)
        return self._bookings.list_bookings_for_event(parsed)

    def create_booking(self, event_id: str, email: str) -> Booking:
        """Validate and insert a booking.

        Raises:
            InvalidEmailError: If the email fails the syntax check.
            InvalidEventIdError: If the event_id is not a valid UUID.
            ReferencedEventNotFoundError: If the event does not exist.
        """
        try:
            address = EmailAddress.parse(email)
            parsed = self._require_event(event_id)
        except DomainError as exc:
            logger.info("booking_rejected", code=exc.code.value, event_id=str(event_id))
            raise
        booking = self._bookings.add_booking(parsed, address)
        logger.info("booking_created", booking_id=str(booking.id), event_id=str(parsed))
        return booking

    def update_booking(
        self,
        booking_id: str,
        event_id: str | None = None,
        email: str | None = None,
    ) -> Booking:
        """Change the event reference and/or email of a booking.

        Raises:
            InvalidBookingIdError: If the booking_id is not a valid UUID.
            BookingNotFoundError: If the booking does not exist.
            InvalidEmailError: If a new email fails the syntax check.
            InvalidEventIdError: If a new event_id is not a valid UUID.
            ReferencedEventNotFoundError: If a new event reference does not exist.
        """
        current = self.get_booking(booking_id)
        try:
            address = EmailAddress.parse(email) if email is not None else current.email
            target = current.event_id
            if event_id is not None:
                target = parse_event_id(event_id)
                if target != current.event_id:
                    target = self._require_event(event_id)
        except DomainError as exc:
            logger.info("booking_rejected", code=exc.code.value, booking_id=booking_id)
            raise
        booking = self._bookings.update_booking(current.id, target, address)
        logger.info(
            "booking_updated",
            booking_id=str(booking.id),
            event_id=str(booking.event_id),
            event_changed=booking.event_id != current.event_id,
        )
        return booking

    def _require_event(self, event_id: str) -> EventId:
        parsed = parse_event_id(event_id)
        if not self._events.event_exists(parsed):
            raise ReferencedEventNotFoundError(event_id)
        return parsed
