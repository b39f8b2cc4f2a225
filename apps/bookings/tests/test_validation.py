"""Unit tests for the booking validation engine (no database)."""

from __future__ import annotations

from datetime import date, time
from types import SimpleNamespace

import pytest

from apps.bookings.domain.validation import (
    BookingCandidate,
    BookingValidator,
    ValidationCode,
)
from apps.bookings.domain.working_hours import WorkingHours
from shared.domain.value_objects import TimeOfDay

TODAY = date(2030, 1, 1)  # Tuesday
MONDAY = date(2030, 1, 7)
SATURDAY = date(2030, 1, 12)


class FakeStore:
    def __init__(self, rooms=None, bookings=None):
        self.rooms = rooms or {}
        self.bookings = bookings or []
        self.overlap_calls = 0

    def find_room_by_id(self, room_id):
        return self.rooms.get(room_id)

    def find_overlapping_booking(self, room_id, meeting_date, start_time, end_time, *, exclude_booking_id=None):
        self.overlap_calls += 1
        for booking in self.bookings:
            if booking.pk == exclude_booking_id:
                continue
            if booking.room_id != room_id or booking.meeting_date != meeting_date:
                continue
            if booking.start_time < end_time and booking.end_time > start_time:
                return booking
        return None


class BrokenStore:
    def find_room_by_id(self, room_id):
        raise RuntimeError("database is gone")

    def find_overlapping_booking(self, *args, **kwargs):
        raise RuntimeError("database is gone")


def make_booking(pk, start, end, room_id=1, meeting_date=MONDAY):
    return SimpleNamespace(
        pk=pk,
        room_id=room_id,
        meeting_date=meeting_date,
        start_time=TimeOfDay.parse(start).to_time(),
        end_time=TimeOfDay.parse(end).to_time(),
    )


@pytest.fixture
def store():
    return FakeStore(
        rooms={
            1: SimpleNamespace(capacity=10, is_active=True),
            2: SimpleNamespace(capacity=4, is_active=False),
        },
        bookings=[make_booking(100, "10:00", "11:00")],
    )


@pytest.fixture
def validator(store):
    return BookingValidator(store, WorkingHours(), today=lambda: TODAY)


def candidate(**overrides):
    values = {
        "room_id": 1,
        "meeting_date": MONDAY,
        "start_time": "13:00",
        "end_time": "14:00",
        "participants": 5,
    }
    values.update(overrides)
    return BookingCandidate(**values)


def test_valid_candidate_passes_every_check(validator):
    report = validator.validate(candidate())

    assert report.is_valid
    assert report.errors() == []
    assert report.first_failure is None


def test_past_date_is_rejected(validator):
    result = validator.check_future_date(date(2029, 12, 31))

    assert not result.is_valid
    assert result.code == ValidationCode.INVALID_DATE_PAST
    assert result.message == "Meeting date cannot be in the past"


def test_today_is_not_in_the_past(validator):
    assert validator.check_future_date(TODAY).is_valid


def test_weekend_is_not_a_working_day(validator):
    result = validator.check_working_hours(SATURDAY, "09:00", "10:00")

    assert result.code == ValidationCode.INVALID_WORKING_DAY
    assert result.message == (
        "Bookings are only allowed on working days (Monday-Friday). Selected day: Saturday"
    )


@pytest.mark.parametrize("start,end", [("9:00", "10:00"), ("09:00", "24:00"), ("0900", "10:00"), ("09:60", "10:00")])
def test_malformed_times_are_rejected(validator, start, end):
    result = validator.check_working_hours(MONDAY, start, end)

    assert result.code == ValidationCode.INVALID_TIME_FORMAT
    assert result.message == "Invalid time format. Use HH:MM format (24-hour)"


@pytest.mark.parametrize(
    "start,end,code",
    [
        ("07:59", "09:00", ValidationCode.OUTSIDE_WORKING_HOURS),
        ("17:00", "18:01", ValidationCode.OUTSIDE_WORKING_HOURS),
        ("08:00", "08:30", None),
        ("17:30", "18:00", None),
        ("08:00", "16:00", None),
        ("08:00", "16:01", ValidationCode.INVALID_DURATION_TOO_LONG),
        ("09:00", "09:29", ValidationCode.INVALID_DURATION_TOO_SHORT),
        ("09:00", "09:30", None),
        ("11:00", "10:00", ValidationCode.INVALID_TIME_ORDER),
        ("10:00", "10:00", ValidationCode.INVALID_TIME_ORDER),
    ],
)
def test_working_hours_window_and_duration(validator, start, end, code):
    result = validator.check_working_hours(MONDAY, start, end)

    assert result.code == code
    assert result.is_valid is (code is None)


def test_duration_messages(validator):
    too_short = validator.check_working_hours(MONDAY, "09:00", "09:15")
    too_long = validator.check_working_hours(MONDAY, "08:00", "17:00")

    assert too_short.message == "Minimum booking duration is 30 minutes"
    assert too_long.message == "Maximum booking duration is 8 hours"


def test_outside_working_hours_message_uses_configured_window(store):
    hours = WorkingHours(start=TimeOfDay.parse("09:00"), end=TimeOfDay.parse("17:00"))
    validator = BookingValidator(store, hours, today=lambda: TODAY)

    result = validator.check_working_hours(MONDAY, "08:30", "10:00")

    assert result.code == ValidationCode.OUTSIDE_WORKING_HOURS
    assert result.message == "Bookings are only allowed during working hours (09:00 - 17:00)"


def test_custom_working_days_allow_saturday(store):
    hours = WorkingHours(working_days=(1, 2, 3, 4, 5, 6))
    validator = BookingValidator(store, hours, today=lambda: TODAY)

    assert validator.check_working_hours(SATURDAY, "09:00", "10:00").is_valid


@pytest.mark.parametrize(
    "room_id,participants,code",
    [
        (1, 10, None),
        (1, 11, ValidationCode.CAPACITY_EXCEEDED),
        (1, 0, ValidationCode.INVALID_PARTICIPANTS_COUNT),
        (2, 1, ValidationCode.ROOM_INACTIVE),
        (999, 1, ValidationCode.ROOM_NOT_FOUND),
    ],
)
def test_capacity(validator, room_id, participants, code):
    assert validator.check_capacity(room_id, participants).code == code


def test_capacity_exceeded_message(validator):
    result = validator.check_capacity(1, 12)

    assert result.message == "Number of participants (12) exceeds room capacity (10)"


def test_conflict_names_the_existing_slot(validator):
    result = validator.check_availability(1, MONDAY, "10:30", "11:30")

    assert result.code == ValidationCode.TIME_CONFLICT
    assert result.message == "Time slot conflicts with existing booking (10:00 - 11:00)"


@pytest.mark.parametrize("start,end", [("09:00", "10:00"), ("11:00", "12:00")])
def test_touching_slots_do_not_conflict(validator, start, end):
    assert validator.check_availability(1, MONDAY, start, end).is_valid


@pytest.mark.parametrize("start,end", [("09:30", "10:30"), ("10:15", "10:45"), ("09:00", "12:00")])
def test_overlapping_slots_conflict(validator, start, end):
    assert validator.check_availability(1, MONDAY, start, end).code == ValidationCode.TIME_CONFLICT


def test_other_room_and_other_date_do_not_conflict(validator):
    assert validator.check_availability(3, MONDAY, "10:00", "11:00").is_valid
    assert validator.check_availability(1, date(2030, 1, 8), "10:00", "11:00").is_valid


def test_excluded_booking_is_ignored(validator):
    result = validator.check_availability(1, MONDAY, "10:00", "11:30", exclude_booking_id=100)

    assert result.is_valid


def test_malformed_time_skips_store_lookup(validator, store):
    result = validator.check_availability(1, MONDAY, "10am", "11:00")

    assert result.code == ValidationCode.VALIDATION_ERROR
    assert store.overlap_calls == 0


def test_store_failures_become_validation_errors():
    validator = BookingValidator(BrokenStore(), WorkingHours(), today=lambda: TODAY)

    report = validator.validate(candidate())

    assert report.capacity.code == ValidationCode.VALIDATION_ERROR
    assert report.availability.code == ValidationCode.VALIDATION_ERROR
    assert report.future_date.is_valid
    assert report.working_hours.is_valid


def test_report_collects_every_failure_in_check_order(validator):
    report = validator.validate(
        candidate(meeting_date=date(2029, 12, 29), participants=50, start_time="07:00")
    )

    assert report.codes == [
        ValidationCode.INVALID_DATE_PAST,
        ValidationCode.INVALID_WORKING_DAY,
        ValidationCode.CAPACITY_EXCEEDED,
    ]
    assert report.first_failure.code == ValidationCode.INVALID_DATE_PAST
    assert report.errors()[0] == {
        "message": "Meeting date cannot be in the past",
        "code": ValidationCode.INVALID_DATE_PAST,
    }


def test_working_hours_rejects_inverted_window():
    with pytest.raises(ValueError):
        WorkingHours(start=TimeOfDay.parse("18:00"), end=TimeOfDay.parse("08:00"))


def test_working_hours_from_config():
    hours = WorkingHours.from_config(
        {"START": "09:00", "END": "17:00", "WORKING_DAYS": [5, 1, 2, 3, 4], "MAX_DURATION_MINUTES": "240"}
    )

    assert str(hours.start) == "09:00"
    assert hours.working_days == (1, 2, 3, 4, 5)
    assert hours.max_duration_minutes == 240
    assert hours.min_duration_minutes == 30
    assert hours.as_dict()["working_days_label"] == "Monday-Friday"


def test_working_days_label_for_non_contiguous_days():
    hours = WorkingHours(working_days=(1, 3, 5))

    assert hours.working_days_label == "Monday, Wednesday, Friday"
    assert time(8, 0) == hours.start.to_time()


def test_malformed_time_is_reported_once(validator):
    report = validator.validate(candidate(start_time="9:00"))

    assert report.codes == [ValidationCode.INVALID_TIME_FORMAT, ValidationCode.VALIDATION_ERROR]
    assert report.codes.count(ValidationCode.INVALID_TIME_FORMAT) == 1
