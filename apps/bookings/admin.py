"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking, BookingConsumption


class BookingConsumptionInline(admin.TabularInline):
    model = BookingConsumption
    extra = 0
    readonly_fields = ("consumption", "created_at")
    can_delete = False


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    """Bookings are created and changed through the API so every rule is
    checked; the admin only lists and deletes them."""

    list_display = (
        "id",
        "meeting_room",
        "unit",
        "meeting_date",
        "start_time",
        "end_time",
        "total_participants",
        "created_at",
    )
    list_filter = ("meeting_room", "unit", "meeting_date")
    search_fields = ("meeting_room__name", "unit__name", "notes")
    date_hierarchy = "meeting_date"
    inlines = [BookingConsumptionInline]

    def has_add_permission(self, request):  # type: ignore
        return False

    def has_change_permission(self, request, obj=None):  # type: ignore
        return False
