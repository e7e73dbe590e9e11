from django.urls import path

from events.handlers import (
    BookingDetailView,
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<slug:slug>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<slug:slug>/bookings",
        EventBookingListView.as_view(),
        name="event-booking-list",
    ),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path(
        "bookings/<str:booking_id>",
        BookingDetailView.as_view(),
        name="booking-detail",
    ),
]
