"""
Booking Validation Engine

Decides whether a proposed reservation is admissible. Four independent
checks always run and each yields a ValidationResult:

- future_date:   the meeting date is not before today (server time zone)
- working_hours: working day, HH:MM format, inside the daily window,
                 start before end, duration within bounds
- capacity:      the room exists, is active and fits the participants
- availability:  no other booking of the room overlaps [start, end)

Failed checks are reported, never raised, so a caller can surface every
violation at once. The engine is stateless apart from its injected
configuration and store and is safe to share between requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Any, Callable, Optional, Protocol

import structlog
from django.utils import timezone

from shared.domain.value_objects import TimeOfDay

from .working_hours import DAY_NAMES, WorkingHours

logger = structlog.get_logger(__name__)


class ValidationCode:
    """Machine-readable failure codes"""
    INVALID_DATE_PAST = "INVALID_DATE_PAST"
    INVALID_WORKING_DAY = "INVALID_WORKING_DAY"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    OUTSIDE_WORKING_HOURS = "OUTSIDE_WORKING_HOURS"
    INVALID_TIME_ORDER = "INVALID_TIME_ORDER"
    INVALID_DURATION_TOO_SHORT = "INVALID_DURATION_TOO_SHORT"
    INVALID_DURATION_TOO_LONG = "INVALID_DURATION_TOO_LONG"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"
    ROOM_INACTIVE = "ROOM_INACTIVE"
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    INVALID_PARTICIPANTS_COUNT = "INVALID_PARTICIPANTS_COUNT"
    TIME_CONFLICT = "TIME_CONFLICT"
    VALIDATION_ERROR = "VALIDATION_ERROR"


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def ok(cls) -> 'ValidationResult':
        return cls(is_valid=True)

    @classmethod
    def fail(cls, code: str, message: str) -> 'ValidationResult':
        return cls(is_valid=False, message=message, code=code)

    def as_error(self) -> dict:
        return {'message': self.message, 'code': self.code}


@dataclass(frozen=True)
class BookingCandidate:
    """
    A proposed reservation

    Times are the raw "HH:MM" strings from the request; checking their
    format is part of validation.
    """
    room_id: Any
    meeting_date: date
    start_time: str
    end_time: str
    participants: int
    exclude_booking_id: Optional[int] = None


@dataclass(frozen=True)
class BookingValidationReport:
    """One named result per check"""
    future_date: ValidationResult
    working_hours: ValidationResult
    capacity: ValidationResult
    availability: ValidationResult

    @property
    def results(self) -> tuple:
        return (self.future_date, self.working_hours, self.capacity, self.availability)

    @property
    def failures(self) -> list:
        return [result for result in self.results if not result.is_valid]

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def first_failure(self) -> Optional[ValidationResult]:
        failures = self.failures
        return failures[0] if failures else None

    @property
    def codes(self) -> list:
        return [result.code for result in self.failures]

    def errors(self) -> list:
        return [result.as_error() for result in self.failures]


class BookingStore(Protocol):
    """Lookups the engine needs from persistence"""

    def find_room_by_id(self, room_id: Any) -> Any:
        ...

    def find_overlapping_booking(
        self,
        room_id: Any,
        meeting_date: date,
        start_time: time,
        end_time: time,
        *,
        exclude_booking_id: Optional[int] = None,
    ) -> Any:
        ...


class BookingValidator:
    """
    Runs the four booking checks against an injected store and policy

    Usage:
        validator = BookingValidator(DjangoBookingStore(), WorkingHours.from_settings())
        report = validator.validate(candidate)
        if not report.is_valid:
            ...  # report.first_failure.code, report.errors()
    """

    def __init__(
        self,
        store: BookingStore,
        working_hours: Optional[WorkingHours] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.store = store
        self.working_hours = working_hours or WorkingHours.from_settings()
        self._today = today or timezone.localdate

    def validate(self, candidate: BookingCandidate) -> BookingValidationReport:
        return BookingValidationReport(
            future_date=self.check_future_date(candidate.meeting_date),
            working_hours=self.check_working_hours(
                candidate.meeting_date, candidate.start_time, candidate.end_time
            ),
            capacity=self.check_capacity(candidate.room_id, candidate.participants),
            availability=self.check_availability(
                candidate.room_id,
                candidate.meeting_date,
                candidate.start_time,
                candidate.end_time,
                exclude_booking_id=candidate.exclude_booking_id,
            ),
        )

    def check_future_date(self, meeting_date: date) -> ValidationResult:
        if meeting_date < self._today():
            return ValidationResult.fail(
                ValidationCode.INVALID_DATE_PAST,
                'Meeting date cannot be in the past',
            )
        return ValidationResult.ok()

    def check_working_hours(self, meeting_date: date, start_time: str, end_time: str) -> ValidationResult:
        """Reports only the first failing sub-check"""
        hours = self.working_hours

        if not hours.is_working_day(meeting_date):
            return ValidationResult.fail(
                ValidationCode.INVALID_WORKING_DAY,
                f'Bookings are only allowed on working days ({hours.working_days_label}). '
                f'Selected day: {DAY_NAMES[meeting_date.weekday()]}',
            )

        if not (TimeOfDay.is_valid(start_time) and TimeOfDay.is_valid(end_time)):
            return ValidationResult.fail(
                ValidationCode.INVALID_TIME_FORMAT,
                'Invalid time format. Use HH:MM format (24-hour)',
            )

        start = TimeOfDay.parse(start_time)
        end = TimeOfDay.parse(end_time)

        if start < hours.start or end > hours.end:
            return ValidationResult.fail(
                ValidationCode.OUTSIDE_WORKING_HOURS,
                f'Bookings are only allowed during working hours ({hours.start} - {hours.end})',
            )

        if start >= end:
            return ValidationResult.fail(
                ValidationCode.INVALID_TIME_ORDER,
                'Start time must be before end time',
            )

        duration = end.minutes - start.minutes

        if duration < hours.min_duration_minutes:
            return ValidationResult.fail(
                ValidationCode.INVALID_DURATION_TOO_SHORT,
                f'Minimum booking duration is {_format_minutes(hours.min_duration_minutes)}',
            )

        if duration > hours.max_duration_minutes:
            return ValidationResult.fail(
                ValidationCode.INVALID_DURATION_TOO_LONG,
                f'Maximum booking duration is {_format_minutes(hours.max_duration_minutes)}',
            )

        return ValidationResult.ok()

    def check_capacity(self, room_id: Any, participants: int) -> ValidationResult:
        try:
            room = self.store.find_room_by_id(room_id)
        except Exception as exc:
            logger.error("booking.capacity_lookup_failed", room_id=room_id, error=str(exc), exc_info=exc)
            return ValidationResult.fail(
                ValidationCode.VALIDATION_ERROR,
                'Error validating room capacity',
            )

        if room is None:
            return ValidationResult.fail(ValidationCode.ROOM_NOT_FOUND, 'Meeting room not found')

        if not room.is_active:
            return ValidationResult.fail(ValidationCode.ROOM_INACTIVE, 'Meeting room is currently inactive')

        if participants > room.capacity:
            return ValidationResult.fail(
                ValidationCode.CAPACITY_EXCEEDED,
                f'Number of participants ({participants}) exceeds room capacity ({room.capacity})',
            )

        if participants < 1:
            return ValidationResult.fail(
                ValidationCode.INVALID_PARTICIPANTS_COUNT,
                'Number of participants must be at least 1',
            )

        return ValidationResult.ok()

    def check_availability(
        self,
        room_id: Any,
        meeting_date: date,
        start_time: str,
        end_time: str,
        *,
        exclude_booking_id: Optional[int] = None,
    ) -> ValidationResult:
        # Malformed times never reach the store.
        if not (TimeOfDay.is_valid(start_time) and TimeOfDay.is_valid(end_time)):
            return ValidationResult.fail(
                ValidationCode.VALIDATION_ERROR,
                'Cannot check availability: invalid time format',
            )

        try:
            conflict = self.store.find_overlapping_booking(
                room_id,
                meeting_date,
                TimeOfDay.parse(start_time).to_time(),
                TimeOfDay.parse(end_time).to_time(),
                exclude_booking_id=exclude_booking_id,
            )
        except Exception as exc:
            logger.error(
                "booking.availability_lookup_failed",
                room_id=room_id,
                meeting_date=str(meeting_date),
                error=str(exc),
                exc_info=exc,
            )
            return ValidationResult.fail(
                ValidationCode.VALIDATION_ERROR,
                'Error checking room availability',
            )

        if conflict is not None:
            return ValidationResult.fail(
                ValidationCode.TIME_CONFLICT,
                'Time slot conflicts with existing booking '
                f'({TimeOfDay.from_time(conflict.start_time)} - {TimeOfDay.from_time(conflict.end_time)})',
            )

        return ValidationResult.ok()


def _format_minutes(minutes: int) -> str:
    if minutes % 60 == 0 and minutes >= 60:
        hours = minutes // 60
        return f"{hours} hour{'s' if hours != 1 else ''}"
    return f"{minutes} minutes"
