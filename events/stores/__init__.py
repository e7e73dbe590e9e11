from events.stores.client import StoreClient, StoreNotOpenError
from events.stores.interfaces import BookingStore, EventStore

__all__ = [
    "StoreClient",
    "StoreNotOpenError",
    "EventStore",
    "BookingStore",
]
