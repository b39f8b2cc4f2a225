"""Booking models for the meeting room reservation backend."""

from __future__ import annotations

from datetime import datetime

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeOfDay, TimeRange


class Booking(models.Model):
    """Reservation of a meeting room by a unit for one time slot."""

    unit = models.ForeignKey(
        "directory.Unit",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    meeting_room = models.ForeignKey(
        "directory.MeetingRoom",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    meeting_date = models.DateField(
        help_text=_("Calendar date, interpreted in the server time zone."),
    )
    start_time = models.TimeField()
    end_time = models.TimeField()
    total_participants = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    total_consumption = models.PositiveIntegerField(
        default=0,
        help_text=_("Informational count, not checked against the selected items."),
    )
    notes = models.TextField(blank=True, null=True)
    consumptions = models.ManyToManyField(
        "directory.Consumption",
        through="BookingConsumption",
        related_name="bookings",
        blank=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "bookings"
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_valid_time_range",
            ),
            models.CheckConstraint(
                condition=models.Q(total_participants__gte=1),
                name="booking_positive_participants",
            ),
        ]
        indexes = [
            models.Index(
                fields=["meeting_room", "meeting_date", "start_time"],
                name="booking_room_date_start_idx",
            ),
            models.Index(fields=["meeting_date"], name="booking_meeting_date_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} {self.meeting_date} {self.time_range} in room {self.meeting_room_id}"

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(TimeOfDay.from_time(self.start_time), TimeOfDay.from_time(self.end_time))

    def starts_at(self) -> datetime:
        """Start instant in the server time zone."""
        naive = datetime.combine(self.meeting_date, self.start_time)
        return timezone.make_aware(naive, timezone.get_default_timezone())

    def has_started(self, now: datetime | None = None) -> bool:
        return self.starts_at() < (now or timezone.now())


class BookingConsumption(models.Model):
    """Consumption item selected for a booking."""

    booking = models.ForeignKey(
        Booking,
        on_delete=models.CASCADE,
        related_name="consumption_links",
    )
    consumption = models.ForeignKey(
        "directory.Consumption",
        on_delete=models.PROTECT,
        related_name="booking_links",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "booking_consumptions"
        verbose_name = _("Booking consumption")
        verbose_name_plural = _("Booking consumptions")
        constraints = [
            models.UniqueConstraint(
                fields=["booking", "consumption"],
                name="unique_booking_consumption",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.consumption_id} for booking {self.booking_id}"
