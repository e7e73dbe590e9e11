"""Serializers for request payloads and domain model responses.

Input serializers only check payload shape (types); blank values pass
through so the services can report field-specific errors.
"""

from rest_framework import serializers


def _text(**kwargs) -> serializers.CharField:
    return serializers.CharField(
        required=False, allow_blank=True, trim_whitespace=False, **kwargs
    )


class EventWriteSerializer(serializers.Serializer):
    """Payload for creating or updating an event. Unknown keys are dropped."""

    title = _text()
    description = _text()
    overview = _text()
    image = _text()
    venue = _text()
    location = _text()
    date = _text()
    time = _text()
    mode = _text()
    audience = _text()
    agenda = serializers.ListField(child=_text(), required=False, allow_empty=True)
    organizer = _text()
    tags = serializers.ListField(child=_text(), required=False, allow_empty=True)


class BookingCreateSerializer(serializers.Serializer):
    event_id = serializers.CharField(trim_whitespace=False)
    email = serializers.CharField(trim_whitespace=False)


class BookingUpdateSerializer(serializers.Serializer):
    event_id = serializers.CharField(required=False, trim_whitespace=False)
    email = serializers.CharField(required=False, trim_whitespace=False)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    slug = serializers.CharField()
    description = serializers.CharField()
    overview = serializers.CharField()
    image = serializers.CharField()
    venue = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    mode = serializers.CharField()
    audience = serializers.CharField()
    agenda = serializers.ListField(child=serializers.CharField())
    organizer = serializers.CharField()
    tags = serializers.ListField(child=serializers.CharField())
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)


class EventCardSerializer(serializers.Serializer):
    """Summary fields used by event listings."""

    id = serializers.SerializerMethodField()
    title = serializers.CharField()
    slug = serializers.CharField()
    image = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()

    def get_id(self, obj) -> str:
        return str(obj.id)


class BookingSerializer(serializers.Serializer):
    """Serializer for Booking domain model."""

    id = serializers.SerializerMethodField()
    event_id = serializers.SerializerMethodField()
    email = serializers.SerializerMethodField()
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()

    def get_id(self, obj) -> str:
        return str(obj.id)

    def get_event_id(self, obj) -> str:
        return str(obj.event_id)

    def get_email(self, obj) -> str:
        return str(obj.email)
