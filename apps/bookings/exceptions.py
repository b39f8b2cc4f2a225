"""Booking errors surfaced to API clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import status  # type: ignore

from apps.core.exceptions import ApiError

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .domain.validation import BookingValidationReport


class BookingNotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "BOOKING_NOT_FOUND"
    message = "Booking not found"


class BookingAlreadyStarted(ApiError):
    code = "BOOKING_ALREADY_STARTED"
    message = "Cannot delete bookings that have already started or passed"


class BookingValidationFailed(ApiError):
    """Raised when at least one booking check failed; carries the full report."""

    def __init__(self, report: "BookingValidationReport") -> None:
        self.report = report
        first = report.first_failure
        super().__init__(
            first.message if first else "Booking validation failed",
            code=first.code if first else "VALIDATION_ERROR",
            validation_errors=report.errors(),
        )
