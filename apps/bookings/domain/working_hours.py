"""
Working Hours Policy

Immutable configuration of when rooms may be booked: the daily window,
the working weekdays and the allowed booking duration.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Tuple

from shared.domain.base import ValueObject
from shared.domain.value_objects import TimeOfDay

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(frozen=True)
class WorkingHours(ValueObject):
    """
    Working hours value object

    Days are ISO weekdays (1 = Monday ... 7 = Sunday).
    Built once from settings and injected into BookingValidator, so tests
    can swap in a different window without touching module state.
    """
    start: TimeOfDay = TimeOfDay(8 * 60)
    end: TimeOfDay = TimeOfDay(18 * 60)
    working_days: Tuple[int, ...] = (1, 2, 3, 4, 5)
    min_duration_minutes: int = 30
    max_duration_minutes: int = 480

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Working day start ({self.start}) must be before its end ({self.end})")
        if not self.working_days or any(day not in range(1, 8) for day in self.working_days):
            raise ValueError(f"Working days must be ISO weekdays 1-7, got {self.working_days}")
        if not 0 < self.min_duration_minutes <= self.max_duration_minutes:
            raise ValueError(
                f"Invalid duration bounds: {self.min_duration_minutes}-{self.max_duration_minutes} minutes"
            )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> 'WorkingHours':
        """Build from a WORKING_HOURS style mapping"""
        defaults = cls()
        return cls(
            start=TimeOfDay.parse(config.get('START', str(defaults.start))),
            end=TimeOfDay.parse(config.get('END', str(defaults.end))),
            working_days=tuple(sorted(set(config.get('WORKING_DAYS', defaults.working_days)))),
            min_duration_minutes=int(config.get('MIN_DURATION_MINUTES', defaults.min_duration_minutes)),
            max_duration_minutes=int(config.get('MAX_DURATION_MINUTES', defaults.max_duration_minutes)),
        )

    @classmethod
    def from_settings(cls) -> 'WorkingHours':
        from django.conf import settings

        return cls.from_config(getattr(settings, 'WORKING_HOURS', {}))

    def is_working_day(self, day: date) -> bool:
        return day.isoweekday() in self.working_days

    @property
    def working_days_label(self) -> str:
        """Range label such as Monday-Friday, or the day names when not contiguous"""
        days = sorted(self.working_days)
        if len(days) > 1 and days == list(range(days[0], days[-1] + 1)):
            return f"{DAY_NAMES[days[0] - 1]}-{DAY_NAMES[days[-1] - 1]}"
        return ", ".join(DAY_NAMES[day - 1] for day in days)

    def as_dict(self) -> dict:
        return {
            'start': str(self.start),
            'end': str(self.end),
            'working_days': list(self.working_days),
            'working_days_label': self.working_days_label,
            'min_duration_minutes': self.min_duration_minutes,
            'max_duration_minutes': self.max_duration_minutes,
        }
