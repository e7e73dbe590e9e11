from events.handlers.views import (
    BookingDetailView,
    BookingListView,
    EventBookingListView,
    EventDetailView,
    EventListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventBookingListView",
    "BookingListView",
    "BookingDetailView",
]
