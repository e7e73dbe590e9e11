"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from events.services import BookingService, EventService
from events.stores.memory_store import InMemoryBookingStore, InMemoryEventStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_payload() -> dict:
    return {
        "title": "React Summit 2026",
        "description": "A premier React conference with workshops and talks.",
        "overview": "Two days of talks from the React core team.",
        "image": "/images/event1.png",
        "venue": "Beurs van Berlage",
        "location": "Amsterdam, NL",
        "date": "March 11, 2026",
        "time": "9:00 AM",
        "mode": "offline",
        "audience": "Frontend developers",
        "agenda": ["Keynote", "Workshops", "Panel"],
        "organizer": "GitNation",
        "tags": ["react", "frontend"],
    }


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store(event_store: InMemoryEventStore) -> InMemoryBookingStore:
    return InMemoryBookingStore(event_store)


@pytest.fixture
def event_service(event_store: InMemoryEventStore) -> EventService:
    return EventService(event_store)


@pytest.fixture
def booking_service(
    booking_store: InMemoryBookingStore, event_store: InMemoryEventStore
) -> BookingService:
    return BookingService(booking_store, event_store)
