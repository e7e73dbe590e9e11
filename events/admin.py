from django.contrib import admin

from events.models import Booking, Event


class ReadOnlyAdminMixin:
    """Writes go through the services so normalization always runs."""

    def has_add_permission(self, request, obj=None) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False


class BookingInline(ReadOnlyAdminMixin, admin.TabularInline):
    model = Booking
    extra = 0
    fields = ["email", "created_at"]
    readonly_fields = ["email", "created_at"]


@admin.register(Event)
class EventAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["title", "slug", "location", "date", "time", "created_at"]
    search_fields = ["title", "slug", "location", "organizer"]
    list_filter = ["mode"]
    inlines = [BookingInline]


@admin.register(Booking)
class BookingAdmin(ReadOnlyAdminMixin, admin.ModelAdmin):
    list_display = ["email", "event", "created_at"]
    list_filter = ["event"]
    search_fields = ["email"]
