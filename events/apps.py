import atexit

from django.apps import AppConfig
from django.conf import settings

from events.stores import StoreClient


class EventsConfig(AppConfig):
    """Configuration for the events app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Events and Bookings"

    store_client: StoreClient

    def ready(self) -> None:
        self.store_client = StoreClient(backend=settings.EVENTBOOK_STORE_BACKEND)
        self.store_client.open()
        atexit.register(self.store_client.close)
