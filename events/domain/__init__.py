from events.domain.models import Booking, Event, EventFields
from events.domain.value_objects import BookingId, EmailAddress, EventId

__all__ = [
    "Event",
    "EventFields",
    "Booking",
    "EventId",
    "BookingId",
    "EmailAddress",
]
