"""API views for the booking domain."""

from __future__ import annotations

from django.http import Http404  # type: ignore
from rest_framework import exceptions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore

from apps.core.exceptions import MissingParameters, MissingRequiredFields
from apps.core.pagination import EnvelopePagination
from apps.core.responses import envelope

from .application.command_handlers import (
    CreateBookingHandler,
    DeleteBookingCommand,
    DeleteBookingHandler,
    UpdateBookingHandler,
)
from .domain.validation import BookingValidator
from .domain.working_hours import WorkingHours
from .exceptions import BookingNotFound
from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    AvailabilityQuerySerializer,
    BookingSerializer,
    BookingWriteSerializer,
    missing_fields,
)
from .services import DjangoBookingStore

AVAILABILITY_PARAMETERS = ("room_id", "date", "start_time", "end_time")


class BookingPagination(EnvelopePagination):
    results_key = "bookings"
    message = "Bookings retrieved successfully"


class BookingViewSet(viewsets.ModelViewSet):
    """Lists, creates, updates and deletes meeting room bookings."""

    queryset = (
        Booking.objects.select_related("unit", "meeting_room")
        .prefetch_related("consumptions")
        .order_by("-created_at", "-id")
    )
    serializer_class = BookingSerializer
    pagination_class = BookingPagination
    filterset_class = BookingFilterSet
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):  # type: ignore
        if self.action in ("create", "update", "partial_update"):
            return BookingWriteSerializer
        if self.action == "availability":
            return AvailabilityQuerySerializer
        return BookingSerializer

    def get_object(self):  # type: ignore
        try:
            return super().get_object()
        except Http404:
            raise BookingNotFound()

    def _payload(self, request):  # type: ignore
        if not hasattr(request.data, "get"):
            raise exceptions.ParseError("Expected a JSON object")
        return request.data

    def _read(self, booking: Booking) -> dict:
        fresh = self.get_queryset().get(pk=booking.pk)
        return BookingSerializer(fresh, context=self.get_serializer_context()).data

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        return envelope(self._read(booking), "Booking retrieved successfully")

    def create(self, request, *args, **kwargs):  # type: ignore
        payload = self._payload(request)
        missing = missing_fields(payload)
        if missing:
            raise MissingRequiredFields(missing)

        serializer = BookingWriteSerializer(data=payload)
        serializer.is_valid(raise_exception=True)
        booking = CreateBookingHandler().handle(serializer.to_create_command())

        return envelope(
            self._read(booking),
            "Booking created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        serializer = BookingWriteSerializer(data=self._payload(request), partial=True)
        serializer.is_valid(raise_exception=True)
        booking = UpdateBookingHandler().handle(serializer.to_update_command(booking.pk))
        return envelope(self._read(booking), "Booking updated successfully")

    def destroy(self, request, *args, **kwargs):  # type: ignore
        booking = self.get_object()
        DeleteBookingHandler().handle(DeleteBookingCommand(booking_id=booking.pk))
        return envelope(message="Booking deleted successfully")

    @action(detail=False, methods=["get"])
    def availability(self, request):  # type: ignore
        """Read-only probe: run every booking check without writing anything."""

        missing = [name for name in AVAILABILITY_PARAMETERS if not request.query_params.get(name)]
        if missing:
            raise MissingParameters(missing)

        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        validator = BookingValidator(DjangoBookingStore())
        report = validator.validate(query.to_candidate())

        return envelope(
            {
                "available": report.availability.is_valid,
                "validationsPassed": report.is_valid,
                "validationErrors": report.errors(),
                "workingHours": validator.working_hours.as_dict(),
            },
            "Availability check completed",
        )

    @action(detail=False, methods=["get"], url_path="working-hours")
    def working_hours(self, request):  # type: ignore
        return envelope(WorkingHours.from_settings().as_dict(), "Working hours retrieved successfully")
