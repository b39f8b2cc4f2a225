"""Persistence services for bookings: lookups, overlap query and writes."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from django.db import transaction  # type: ignore
from django.db.models import Q  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.directory.models import MeetingRoom

from .exceptions import BookingAlreadyStarted, BookingNotFound
from .models import Booking, BookingConsumption


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoBookingStore:
    """Booking store backed by the Django ORM.

    Write methods are atomic on their own and join the caller's transaction
    when one is open, so a unit of work around several calls commits or
    rolls back all of them together.
    """

    def find_room_by_id(self, room_id: Any) -> MeetingRoom | None:
        return MeetingRoom.objects.filter(pk=room_id).first()

    def lock_room(self, room_id: Any) -> MeetingRoom | None:
        """Lock the room row so concurrent writers for it run one at a time.

        No-op outside a transaction and on backends without row locks.
        """

        return _lock_queryset_if_possible(MeetingRoom.objects.filter(pk=room_id)).first()

    def find_overlapping_booking(
        self,
        room_id: Any,
        meeting_date: date,
        start_time: time,
        end_time: time,
        *,
        exclude_booking_id: int | None = None,
    ) -> Booking | None:
        """Return a booking of the room on that date intersecting [start_time, end_time)."""

        overlapping_filter = Q(start_time__lt=end_time) & Q(end_time__gt=start_time)

        bookings_qs = Booking.objects.filter(
            meeting_room_id=room_id,
            meeting_date=meeting_date,
        ).filter(overlapping_filter)

        if exclude_booking_id is not None:
            bookings_qs = bookings_qs.exclude(pk=exclude_booking_id)

        return bookings_qs.order_by("start_time", "pk").first()

    def get_booking(self, booking_id: Any, *, lock: bool = False) -> Booking:
        bookings_qs = Booking.objects.filter(pk=booking_id)
        if lock:
            bookings_qs = _lock_queryset_if_possible(bookings_qs)
        booking = bookings_qs.first()
        if booking is None:
            raise BookingNotFound()
        return booking

    @transaction.atomic
    def create_booking(
        self,
        fields: Mapping[str, Any],
        consumption_ids: Iterable[int] = (),
    ) -> Booking:
        booking = Booking.objects.create(**fields)
        self._link_consumptions(booking, consumption_ids)
        return booking

    @transaction.atomic
    def update_booking(
        self,
        booking: Booking,
        fields: Mapping[str, Any],
        consumption_ids: Iterable[int] | None = None,
    ) -> Booking:
        """Apply fields; when consumption_ids is given, replace all links with it."""

        for name, value in fields.items():
            setattr(booking, name, value)
        booking.save()

        if consumption_ids is not None:
            self.replace_consumptions(booking, consumption_ids)
        return booking

    @transaction.atomic
    def replace_consumptions(self, booking: Booking, consumption_ids: Iterable[int]) -> None:
        BookingConsumption.objects.filter(booking=booking).delete()
        self._link_consumptions(booking, consumption_ids)

    @transaction.atomic
    def delete_booking(self, booking: Booking, now: datetime | None = None) -> int:
        """Delete the booking and its consumption links, unless it has started.

        Returns the number of consumption links removed.
        """

        if booking.has_started(now):
            raise BookingAlreadyStarted()

        links_deleted, _ = BookingConsumption.objects.filter(booking=booking).delete()
        booking.delete()
        return links_deleted

    def _link_consumptions(self, booking: Booking, consumption_ids: Iterable[int]) -> None:
        unique_ids = list(dict.fromkeys(consumption_ids))
        if unique_ids:
            BookingConsumption.objects.bulk_create(
                [BookingConsumption(booking=booking, consumption_id=pk) for pk in unique_ids]
            )
