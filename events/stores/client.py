"""Storage client with an explicit open/close lifecycle.

The client owns one event store and one booking store for the configured
backend and is handed to the services that need them. Nothing here is a
module-level singleton; the app config creates the process-wide instance.
"""

from types import TracebackType
from typing import Self

import structlog
from django.db import connections

from events.stores.interfaces import BookingStore, EventStore

logger = structlog.get_logger(__name__)

BACKENDS = ("django", "memory")


class StoreNotOpenError(RuntimeError):
    """Raised when stores are requested from a client that is not open."""


class StoreClient:
    """Hands out the event and booking stores between open() and close()."""

    def __init__(self, backend: str = "django") -> None:
        if backend not in BACKENDS:
            raise ValueError(
                f"Unknown store backend {backend!r}; expected one of {', '.join(BACKENDS)}"
            )
        self.backend = backend
        self._events: EventStore | None = None
        self._bookings: BookingStore | None = None

    @property
    def is_open(self) -> bool:
        return self._events is not None

    def open(self) -> None:
        if self.is_open:
            return
        if self.backend == "django":
            from events.stores.django_store import DjangoBookingStore, DjangoEventStore

            self._events = DjangoEventStore()
            self._bookings = DjangoBookingStore()
        else:
            from events.stores.memory_store import InMemoryBookingStore, InMemoryEventStore

            events = InMemoryEventStore()
            self._events = events
            self._bookings = InMemoryBookingStore(events)
        logger.info("store_client_opened", backend=self.backend)

    def close(self) -> None:
        if not self.is_open:
            return
        if self.backend == "django":
            connections.close_all()
        self._events = None
        self._bookings = None
        logger.info("store_client_closed", backend=self.backend)

    @property
    def events(self) -> EventStore:
        if self._events is None:
            raise StoreNotOpenError("Store client is not open")
        return self._events

    @property
    def bookings(self) -> BookingStore:
        if self._bookings is None:
            raise StoreNotOpenError("Store client is not open")
        return self._bookings

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
