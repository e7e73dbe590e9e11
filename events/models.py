"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/ and the
services; nothing here validates event or booking content.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.CharField(max_length=500)
    venue = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    # YYYY-MM-DD
    date = models.CharField(max_length=10)
    # HH:mm, 24-hour
    time = models.CharField(max_length=5)
    mode = models.CharField(max_length=50)
    audience = models.CharField(max_length=255)
    agenda = models.JSONField(default=list)
    organizer = models.CharField(max_length=255)
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="events_event_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="bookings")
    email = models.CharField(max_length=254)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event", "created_at"], name="events_booking_event_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event.title}"
