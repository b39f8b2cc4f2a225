from datetime import time

import pytest

from shared.domain.value_objects import TimeOfDay, TimeRange


def test_time_of_day_parses_zero_padded_times():
    assert TimeOfDay.parse("08:05").minutes == 485
    assert str(TimeOfDay.parse("23:59")) == "23:59"
    assert TimeOfDay.parse("00:00").to_time() == time(0, 0)


@pytest.mark.parametrize("value", ["8:00", "24:00", "12:60", "12-00", "", None, 830])
def test_time_of_day_rejects_malformed_values(value):
    assert not TimeOfDay.is_valid(value)
    with pytest.raises(ValueError):
        TimeOfDay.parse(value)


def test_time_of_day_from_time_drops_seconds():
    assert str(TimeOfDay.from_time(time(9, 30, 45))) == "09:30"


def test_time_of_day_ordering_matches_string_ordering():
    values = ["17:00", "08:30", "12:15"]
    assert [str(t) for t in sorted(TimeOfDay.parse(v) for v in values)] == sorted(values)


def test_time_range_requires_start_before_end():
    with pytest.raises(ValueError):
        TimeRange.parse("10:00", "10:00")


def test_time_range_overlap_is_half_open():
    booked = TimeRange.parse("10:00", "11:00")

    assert booked.overlaps_with(TimeRange.parse("10:30", "11:30"))
    assert booked.overlaps_with(TimeRange.parse("09:00", "12:00"))
    assert not booked.overlaps_with(TimeRange.parse("11:00", "12:00"))
    assert not booked.overlaps_with(TimeRange.parse("09:00", "10:00"))


def test_time_range_duration_and_text():
    span = TimeRange.parse("09:15", "10:45")

    assert span.duration_minutes == 90
    assert str(span) == "09:15 - 10:45"
