"""Directory models: units, meeting rooms and consumption items."""

from __future__ import annotations

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ActiveQuerySet(models.QuerySet):
    def active(self):  # type: ignore
        return self.filter(is_active=True)


class DirectoryEntry(models.Model):
    """Named entry that can be switched off instead of deleted."""

    name = models.CharField(max_length=100, unique=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = ActiveQuerySet.as_manager()

    class Meta:
        abstract = True
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Unit(DirectoryEntry):
    """Organizational unit requesting bookings."""

    class Meta(DirectoryEntry.Meta):
        db_table = "units"
        verbose_name = _("Unit")
        verbose_name_plural = _("Units")


class MeetingRoom(DirectoryEntry):
    """Bookable room. Deactivate rather than delete once it has bookings."""

    capacity = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta(DirectoryEntry.Meta):
        db_table = "meeting_rooms"
        verbose_name = _("Meeting room")
        verbose_name_plural = _("Meeting rooms")
        constraints = [
            models.CheckConstraint(
                condition=models.Q(capacity__gte=1),
                name="meeting_room_positive_capacity",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.capacity})"


class Consumption(DirectoryEntry):
    """Catering or supply item selectable per booking."""

    class Meta(DirectoryEntry.Meta):
        db_table = "consumptions"
        verbose_name = _("Consumption")
        verbose_name_plural = _("Consumptions")
