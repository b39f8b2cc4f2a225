"""FilterSet definitions for booking listings."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking


class BookingFilterSet(django_filters.FilterSet):
    """Filters by unit, room and an inclusive meeting date range."""

    unit_id = django_filters.NumberFilter(field_name="unit_id", lookup_expr="exact")
    room_id = django_filters.NumberFilter(field_name="meeting_room_id", lookup_expr="exact")
    date_from = django_filters.DateFilter(field_name="meeting_date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="meeting_date", lookup_expr="lte")

    class Meta:
        model = Booking
        fields = ["unit_id", "room_id", "date_from", "date_to"]
