"""Integration tests for the events and bookings HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

import uuid

import pytest
from rest_framework.test import APIClient


def create_event(api_client: APIClient, payload: dict) -> dict:
    response = api_client.post("/api/events", payload, format="json")
    assert response.status_code == 201, response.json()
    return response.json()


@pytest.mark.django_db
class TestEventList:
    """Tests for GET/POST /api/events"""

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_list_events_returns_cards(self, api_client: APIClient, event_payload):
        """Given events exist, returns card fields for each."""
        create_event(api_client, event_payload)
        response = api_client.get("/api/events")
        assert response.status_code == 200
        [card] = response.json()["results"]
        assert set(card) == {"id", "title", "slug", "image", "location", "date", "time"}
        assert card["slug"] == "react-summit-2026"

    def test_create_event_normalizes_input(self, api_client: APIClient, event_payload):
        event_payload["time"] = "9:00 PM"
        body = create_event(api_client, event_payload)
        assert body["slug"] == "react-summit-2026"
        assert body["date"] == "2026-03-11"
        assert body["time"] == "21:00"
        assert body["tags"] == ["react", "frontend"]

    def test_create_event_empty_tags_rejected(self, api_client: APIClient, event_payload):
        event_payload["tags"] = []
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 400
        assert response.json() == {
            "error": {"code": "REQUIRED_FIELD", "message": "Event tags are required."}
        }
        assert api_client.get("/api/events").json() == {"results": []}

    def test_create_event_invalid_time_rejected(self, api_client: APIClient, event_payload):
        event_payload["time"] = "13:00 PM"
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_TIME"

    def test_create_event_invalid_date_rejected(self, api_client: APIClient, event_payload):
        event_payload["date"] = "not-a-date"
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_DATE"

    def test_create_event_duplicate_slug_conflicts(self, api_client: APIClient, event_payload):
        create_event(api_client, event_payload)
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "DUPLICATE_SLUG"

    def test_create_event_malformed_payload(self, api_client: APIClient, event_payload):
        event_payload["tags"] = {"not": "a list"}
        response = api_client.post("/api/events", event_payload, format="json")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_PAYLOAD"
        assert "tags" in response.json()["error"]["fields"]


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET/PATCH /api/events/{slug}"""

    def test_get_event_returns_details(self, api_client: APIClient, event_payload):
        """Given event exists, returns event details."""
        created = create_event(api_client, event_payload)
        response = api_client.get("/api/events/react-summit-2026")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get("/api/events/nothing-here")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_patch_without_title_keeps_slug(self, api_client: APIClient, event_payload):
        created = create_event(api_client, event_payload)
        response = api_client.patch(
            "/api/events/react-summit-2026", {"venue": "RAI"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["slug"] == created["slug"]
        assert response.json()["venue"] == "RAI"

    def test_patch_title_regenerates_slug(self, api_client: APIClient, event_payload):
        created = create_event(api_client, event_payload)
        response = api_client.patch(
            "/api/events/react-summit-2026", {"title": "React Summit Online"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["slug"] == "react-summit-online"
        assert response.json()["id"] == created["id"]
        assert api_client.get("/api/events/react-summit-2026").status_code == 404

    def test_patch_blank_field_rejected(self, api_client: APIClient, event_payload):
        create_event(api_client, event_payload)
        response = api_client.patch(
            "/api/events/react-summit-2026", {"organizer": "  "}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Event organizer is required."


@pytest.mark.django_db
class TestBookings:
    """Tests for /api/bookings and /api/events/{slug}/bookings"""

    def test_booking_for_missing_event_then_existing(self, api_client: APIClient, event_payload):
        response = api_client.post(
            "/api/bookings",
            {"event_id": str(uuid.uuid4()), "email": "ada@example.com"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "REFERENCED_EVENT_MISSING",
            "message": "Referenced event does not exist.",
        }

        event = create_event(api_client, event_payload)
        response = api_client.post(
            "/api/bookings",
            {"event_id": event["id"], "email": " Ada@Example.com "},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["email"] == "ada@example.com"
        assert response.json()["event_id"] == event["id"]

    def test_booking_invalid_event_id(self, api_client: APIClient):
        response = api_client.post(
            "/api/bookings", {"event_id": "abc", "email": "ada@example.com"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_EVENT_ID"

    def test_booking_invalid_email(self, api_client: APIClient, event_payload):
        event = create_event(api_client, event_payload)
        response = api_client.post(
            "/api/bookings", {"event_id": event["id"], "email": "ada"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid email format."

    def test_list_bookings_for_event(self, api_client: APIClient, event_payload):
        event = create_event(api_client, event_payload)
        for email in ("ada@example.com", "grace@example.com"):
            api_client.post(
                "/api/bookings", {"event_id": event["id"], "email": email}, format="json"
            )
        response = api_client.get("/api/events/react-summit-2026/bookings")
        assert response.status_code == 200
        emails = sorted(b["email"] for b in response.json()["results"])
        assert emails == ["ada@example.com", "grace@example.com"]

    def test_patch_booking_to_missing_event(self, api_client: APIClient, event_payload):
        event = create_event(api_client, event_payload)
        booking = api_client.post(
            "/api/bookings", {"event_id": event["id"], "email": "ada@example.com"}, format="json"
        ).json()
        response = api_client.patch(
            f"/api/bookings/{booking['id']}",
            {"event_id": str(uuid.uuid4())},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "REFERENCED_EVENT_MISSING"
        assert api_client.get(f"/api/bookings/{booking['id']}").json()["event_id"] == event["id"]

    def test_get_booking_not_found(self, api_client: APIClient):
        response = api_client.get(f"/api/bookings/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "BOOKING_NOT_FOUND"

    def test_patch_booking_moves_event_and_email(self, api_client: APIClient, event_payload):
        first = create_event(api_client, event_payload)
        event_payload["title"] = "JSConf EU"
        second = create_event(api_client, event_payload)
        booking = api_client.post(
            "/api/bookings", {"event_id": first["id"], "email": "ada@example.com"}, format="json"
        ).json()
        response = api_client.patch(
            f"/api/bookings/{booking['id']}",
            {"event_id": second["id"], "email": " Grace@Example.com"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["event_id"] == second["id"]
        assert response.json()["email"] == "grace@example.com"
        assert api_client.get("/api/events/react-summit-2026/bookings").json() == {"results": []}
        [moved] = api_client.get("/api/events/jsconf-eu/bookings").json()["results"]
        assert moved["id"] == booking["id"]

    def test_patch_booking_email_only(self, api_client: APIClient, event_payload):
        event = create_event(api_client, event_payload)
        booking = api_client.post(
            "/api/bookings", {"event_id": event["id"], "email": "ada@example.com"}, format="json"
        ).json()
        response = api_client.patch(
            f"/api/bookings/{booking['id']}", {"email": "grace@example.com"}, format="json"
        )
        assert response.status_code == 200
        assert response.json()["email"] == "grace@example.com"
        assert response.json()["event_id"] == event["id"]
