"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from django.apps import apps
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.serializers import Serializer
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode
from events.handlers.serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    BookingUpdateSerializer,
    EventCardSerializer,
    EventSerializer,
    EventWriteSerializer,
)
from events.services import BookingService, EventService

_STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.DUPLICATE_SLUG: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=_STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_payload(serializer: Serializer) -> Response:
    return Response(
        {
            "error": {
                "code": "INVALID_PAYLOAD",
                "message": "Request body is malformed.",
                "fields": serializer.errors,
            }
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


def event_service() -> EventService:
    client = apps.get_app_config("events").store_client
    return EventService(client.events)


def booking_service() -> BookingService:
    client = apps.get_app_config("events").store_client
    return BookingService(client.bookings, client.events)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = event_service().list_events()
        return Response({"results": EventCardSerializer(events, many=True).data})

    def post(self, request: Request) -> Response:
        payload = EventWriteSerializer(data=request.data)
        if not payload.is_valid():
            return invalid_payload(payload)
        try:
            event = event_service().create_event(payload.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, slug: str) -> Response:
        payload = EventWriteSerializer(data=request.data, partial=True)
        if not payload.is_valid():
            return invalid_payload(payload)
        service = event_service()
        try:
            current = service.get_event_by_slug(slug)
            event = service.update_event(str(current.id), payload.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{slug}/bookings"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
            bookings = booking_service().list_bookings_for_event(str(event.id))
        except DomainError as exc:
            return error_response(exc)
        return Response({"results": BookingSerializer(bookings, many=True).data})


class BookingListView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        payload = BookingCreateSerializer(data=request.data)
        if not payload.is_valid():
            return invalid_payload(payload)
        try:
            booking = booking_service().create_booking(**payload.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET/PATCH /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        try:
            booking = booking_service().get_booking(booking_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)

    def patch(self, request: Request, booking_id: str) -> Response:
        payload = BookingUpdateSerializer(data=request.data)
        if not payload.is_valid():
            return invalid_payload(payload)
        try:
            booking = booking_service().update_booking(booking_id, **payload.validated_data)
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(booking).data)
