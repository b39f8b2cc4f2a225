"""Admin registration for directory entries."""

from __future__ import annotations

from django.contrib import admin

from .models import Consumption, MeetingRoom, Unit


class DirectoryEntryAdmin(admin.ModelAdmin):
    list_display = ("name", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("name",)
    readonly_fields = ("created_at", "updated_at")
    actions = ["deactivate"]

    @admin.action(description="Deactivate selected entries")
    def deactivate(self, request, queryset):  # type: ignore
        updated = queryset.update(is_active=False)
        self.message_user(request, f"{updated} entries deactivated.")


@admin.register(Unit)
class UnitAdmin(DirectoryEntryAdmin):
    pass


@admin.register(MeetingRoom)
class MeetingRoomAdmin(DirectoryEntryAdmin):
    list_display = ("name", "capacity", "is_active", "created_at")


@admin.register(Consumption)
class ConsumptionAdmin(DirectoryEntryAdmin):
    pass
