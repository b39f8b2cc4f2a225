"""Serializers for the booking domain."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.directory.models import Consumption, Unit
from apps.directory.serializers import (
    ConsumptionSummarySerializer,
    MeetingRoomSummarySerializer,
    UnitSummarySerializer,
)

from .application.command_handlers import CreateBookingCommand, UpdateBookingCommand
from .domain.validation import BookingCandidate
from .models import Booking

REQUIRED_FIELDS = (
    "unit_id",
    "meeting_room_id",
    "meeting_date",
    "start_time",
    "end_time",
    "total_participants",
)


def missing_fields(data, names=REQUIRED_FIELDS) -> list[str]:  # type: ignore
    """Names absent from data or given as null/empty string."""

    return [name for name in names if data.get(name) in (None, "")]


class BookingWriteSerializer(serializers.Serializer):
    """Input for creating or updating a booking.

    Times stay strings here: their format, the working-hours window and the
    remaining booking rules are checked by the validation engine so every
    violation comes back with its own code.
    """

    unit_id = serializers.PrimaryKeyRelatedField(queryset=Unit.objects.active(), allow_null=True)
    meeting_room_id = serializers.IntegerField(allow_null=True)
    meeting_date = serializers.DateField(allow_null=True)
    start_time = serializers.CharField(allow_null=True)
    end_time = serializers.CharField(allow_null=True)
    total_participants = serializers.IntegerField(allow_null=True)
    total_consumption = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    notes = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    consumption_ids = serializers.PrimaryKeyRelatedField(
        queryset=Consumption.objects.active(),
        many=True,
        required=False,
    )

    def _values(self) -> dict:
        values = dict(self.validated_data)
        if values.get("unit_id") is not None:
            values["unit_id"] = values["unit_id"].pk
        values.pop("consumption_ids", None)
        return values

    def _consumption_ids(self) -> list[int] | None:
        if "consumption_ids" not in self.validated_data:
            return None
        return [consumption.pk for consumption in self.validated_data["consumption_ids"]]

    def to_create_command(self) -> CreateBookingCommand:
        values = self._values()
        return CreateBookingCommand(
            unit_id=values["unit_id"],
            meeting_room_id=values["meeting_room_id"],
            meeting_date=values["meeting_date"],
            start_time=values["start_time"],
            end_time=values["end_time"],
            total_participants=values["total_participants"],
            total_consumption=values.get("total_consumption") or 0,
            notes=values.get("notes"),
            consumption_ids=self._consumption_ids() or [],
        )

    def to_update_command(self, booking_id: int) -> UpdateBookingCommand:
        return UpdateBookingCommand(
            booking_id=booking_id,
            changes=self._values(),
            consumption_ids=self._consumption_ids(),
        )


class AvailabilityQuerySerializer(serializers.Serializer):
    """Query parameters of the read-only availability probe."""

    room_id = serializers.IntegerField()
    date = serializers.DateField()
    start_time = serializers.CharField()
    end_time = serializers.CharField()
    participants = serializers.IntegerField(required=False, default=1)
    exclude_booking_id = serializers.IntegerField(required=False, allow_null=True, default=None)

    def to_candidate(self) -> BookingCandidate:
        data = self.validated_data
        return BookingCandidate(
            room_id=data["room_id"],
            meeting_date=data["date"],
            start_time=data["start_time"],
            end_time=data["end_time"],
            participants=data["participants"],
            exclude_booking_id=data["exclude_booking_id"],
        )


class BookingSerializer(serializers.ModelSerializer):
    """Detailed booking representation with its unit, room and items."""

    unit_id = serializers.ReadOnlyField(source="unit.id")
    meeting_room_id = serializers.ReadOnlyField(source="meeting_room.id")
    start_time = serializers.TimeField(format="%H:%M")
    end_time = serializers.TimeField(format="%H:%M")
    unit = UnitSummarySerializer(read_only=True)
    meeting_room = MeetingRoomSummarySerializer(read_only=True)
    consumptions = ConsumptionSummarySerializer(many=True, read_only=True)

    class Meta:
        model = Booking
        fields = [
            "id",
            "unit_id",
            "meeting_room_id",
            "meeting_date",
            "start_time",
            "end_time",
            "total_participants",
            "total_consumption",
            "notes",
            "unit",
            "meeting_room",
            "consumptions",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
