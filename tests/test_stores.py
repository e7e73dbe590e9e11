"""Tests for the store client lifecycle and the Django ORM stores.

Run with: pytest tests/test_stores.py -v
"""

import uuid

import pytest

from events.domain import BookingId, EmailAddress, EventId
from events.domain.errors import (
    BookingNotFoundError,
    DuplicateSlugError,
    ReferencedEventNotFoundError,
)
from events.domain.normalization import normalize_event
from events.services import BookingService, EventService
from events.stores import StoreClient, StoreNotOpenError
from events.stores.django_store import DjangoBookingStore, DjangoEventStore
from events.stores.memory_store import InMemoryEventStore


class TestStoreClient:
    def test_stores_unavailable_before_open(self):
        client = StoreClient(backend="memory")
        with pytest.raises(StoreNotOpenError):
            client.events
        with pytest.raises(StoreNotOpenError):
            client.bookings

    def test_context_manager_opens_and_closes(self):
        with StoreClient(backend="memory") as client:
            assert client.is_open
            assert isinstance(client.events, InMemoryEventStore)
        assert not client.is_open
        with pytest.raises(StoreNotOpenError):
            client.events

    def test_open_is_idempotent(self):
        client = StoreClient(backend="memory")
        client.open()
        events = client.events
        client.open()
        assert client.events is events
        client.close()
        client.close()

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValueError):
            StoreClient(backend="mongo")

    def test_django_backend_hands_out_orm_stores(self):
        client = StoreClient(backend="django")
        client.open()
        assert isinstance(client.events, DjangoEventStore)
        assert isinstance(client.bookings, DjangoBookingStore)

    def test_memory_backend_services_share_events(self, event_payload):
        with StoreClient(backend="memory") as client:
            event = EventService(client.events).create_event(event_payload)
            booking = BookingService(client.bookings, client.events).create_booking(
                str(event.id), "ada@example.com"
            )
            assert booking.event_id == event.id


@pytest.mark.django_db
class TestDjangoEventStore:
    def test_add_and_fetch(self, event_payload):
        store = DjangoEventStore()
        event = store.add_event(normalize_event(event_payload))
        assert store.get_event(event.id) == event
        assert store.get_event_by_slug("react-summit-2026") == event
        assert store.event_exists(event.id)
        assert event.agenda == ("Keynote", "Workshops", "Panel")

    def test_missing_event(self):
        store = DjangoEventStore()
        missing = EventId(uuid.uuid4())
        assert store.get_event(missing) is None
        assert not store.event_exists(missing)

    def test_slug_exists_excludes_owner(self, event_payload):
        store = DjangoEventStore()
        event = store.add_event(normalize_event(event_payload))
        assert store.slug_exists(event.slug)
        assert not store.slug_exists(event.slug, exclude=event.id)

    def test_unique_slug_enforced_by_database(self, event_payload):
        store = DjangoEventStore()
        fields = normalize_event(event_payload)
        store.add_event(fields)
        with pytest.raises(DuplicateSlugError):
            store.add_event(fields)

    def test_update_replaces_fields(self, event_payload):
        store = DjangoEventStore()
        event = store.add_event(normalize_event(event_payload))
        fields = normalize_event({"title": "React Summit Online", "mode": "online"}, event)
        updated = store.update_event(event.id, fields)
        assert updated.slug == "react-summit-online"
        assert updated.mode == "online"
        assert updated.created_at == event.created_at
        assert updated.updated_at >= event.updated_at


@pytest.mark.django_db
class TestDjangoBookingStore:
    def test_add_booking_requires_event(self):
        store = DjangoBookingStore()
        with pytest.raises(ReferencedEventNotFoundError):
            store.add_booking(EventId(uuid.uuid4()), EmailAddress("ada@example.com"))

    def test_add_and_list(self, event_payload):
        event = DjangoEventStore().add_event(normalize_event(event_payload))
        store = DjangoBookingStore()
        booking = store.add_booking(event.id, EmailAddress("ada@example.com"))
        assert store.get_booking(booking.id) == booking
        assert store.list_bookings_for_event(event.id) == [booking]

    def test_update_to_missing_event_rolls_back(self, event_payload):
        event = DjangoEventStore().add_event(normalize_event(event_payload))
        store = DjangoBookingStore()
        booking = store.add_booking(event.id, EmailAddress("ada@example.com"))
        with pytest.raises(ReferencedEventNotFoundError):
            store.update_booking(booking.id, EventId(uuid.uuid4()), EmailAddress("new@example.com"))
        assert store.get_booking(booking.id).email.value == "ada@example.com"

    def test_update_moves_booking_to_existing_event(self, event_payload):
        events = DjangoEventStore()
        first = events.add_event(normalize_event(event_payload))
        event_payload["title"] = "JSConf EU"
        second = events.add_event(normalize_event(event_payload))
        store = DjangoBookingStore()
        booking = store.add_booking(first.id, EmailAddress("ada@example.com"))
        moved = store.update_booking(booking.id, second.id, booking.email)
        assert moved.event_id == second.id
        assert moved.created_at == booking.created_at
        assert store.list_bookings_for_event(first.id) == []
        assert store.list_bookings_for_event(second.id) == [moved]

    def test_update_email_only(self, event_payload):
        event = DjangoEventStore().add_event(normalize_event(event_payload))
        store = DjangoBookingStore()
        booking = store.add_booking(event.id, EmailAddress("ada@example.com"))
        updated = store.update_booking(booking.id, event.id, EmailAddress("grace@example.com"))
        assert updated.event_id == event.id
        assert store.get_booking(booking.id).email.value == "grace@example.com"

    def test_update_missing_booking(self, event_payload):
        event = DjangoEventStore().add_event(normalize_event(event_payload))
        with pytest.raises(BookingNotFoundError):
            DjangoBookingStore().update_booking(
                booking_id=BookingId(uuid.uuid4()),
                event_id=event.id,
                email=EmailAddress("ada@example.com"),
            )
