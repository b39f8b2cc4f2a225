"""
Common Value Objects

Value objects used across multiple domains:
- TimeOfDay: A wall-clock time with minute granularity ("HH:MM")
- TimeRange: A half-open range of wall-clock times within one day
"""

import re
from dataclasses import dataclass
from datetime import time

from shared.domain.base import ValueObject

TIME_PATTERN = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


@dataclass(frozen=True, order=True)
class TimeOfDay(ValueObject):
    """
    Wall-clock time value object

    Stored as minutes since midnight so ordering and arithmetic are plain
    integer operations. The textual form is always zero-padded "HH:MM",
    which keeps string ordering and time ordering identical.
    """
    minutes: int

    def __post_init__(self):
        if not 0 <= self.minutes < 24 * 60:
            raise ValueError(f"Minutes out of range: {self.minutes}")

    @classmethod
    def parse(cls, value: str) -> 'TimeOfDay':
        """
        Parse a 24-hour "HH:MM" string

        Raises:
            ValueError: If the value is not a zero-padded 24-hour time
        """
        match = TIME_PATTERN.match(value) if isinstance(value, str) else None
        if not match:
            raise ValueError(f"Invalid time format: {value!r}. Use HH:MM (24-hour)")
        return cls(int(match.group(1)) * 60 + int(match.group(2)))

    @classmethod
    def from_time(cls, value: time) -> 'TimeOfDay':
        """Build from a datetime.time, dropping seconds"""
        return cls(value.hour * 60 + value.minute)

    @staticmethod
    def is_valid(value: str) -> bool:
        return isinstance(value, str) and TIME_PATTERN.match(value) is not None

    def to_time(self) -> time:
        return time(self.minutes // 60, self.minutes % 60)

    def __str__(self):
        return f"{self.minutes // 60:02d}:{self.minutes % 60:02d}"


@dataclass(frozen=True)
class TimeRange(ValueObject):
    """
    Time range value object

    Represents [start, end) on a single calendar day.
    The end is exclusive, so ranges that only touch do not overlap.
    """
    start: TimeOfDay
    end: TimeOfDay

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time ({self.start}) must be before end time ({self.end})")

    @classmethod
    def parse(cls, start: str, end: str) -> 'TimeRange':
        return cls(TimeOfDay.parse(start), TimeOfDay.parse(end))

    def overlaps_with(self, other: 'TimeRange') -> bool:
        """
        Check if this range overlaps with another

        Examples:
            - TimeRange(09:00, 10:30) overlaps with TimeRange(10:00, 11:00) -> True
            - TimeRange(09:00, 10:00) overlaps with TimeRange(10:00, 11:00) -> False (adjacent)
        """
        if not isinstance(other, TimeRange):
            raise TypeError("Can only check overlap with another TimeRange")

        # Overlap formula: start1 < end2 AND end1 > start2
        return (self.start < other.end and
                self.end > other.start)

    @property
    def duration_minutes(self) -> int:
        return self.end.minutes - self.start.minutes

    def __str__(self):
        return f"{self.start} - {self.end}"

    def __repr__(self):
        return f"TimeRange({self.start}, {self.end})"
