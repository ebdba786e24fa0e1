"""
Core data structures for charging and returns calculations.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Tuple

from abstractionlib.errors import InvalidRangeError, ValidationError


@dataclass(frozen=True)
class DateRange:
    """A closed date interval, inclusive of both start and end."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRangeError(
                f"Range end {self.end.isoformat()} is before start {self.start.isoformat()}"
            )

    @property
    def days(self) -> int:
        """Number of calendar days in the range, counting both ends."""
        return (self.end - self.start).days + 1

    def contains(self, dt: date) -> bool:
        return self.start <= dt <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        """True if the ranges share at least one day."""
        return self.start <= other.end and other.start <= self.end

    def to_iso(self) -> Tuple[str, str]:
        return self.start.isoformat(), self.end.isoformat()


# Accepted spellings for each descriptor field
_PERIOD_KEYS = {
    "start_day": ("start_day", "startDay", "periodStartDay"),
    "start_month": ("start_month", "startMonth", "periodStartMonth"),
    "end_day": ("end_day", "endDay", "periodEndDay"),
    "end_month": ("end_month", "endMonth", "periodEndMonth"),
}

_FIELD_LIMITS = {
    "start_day": 31,
    "start_month": 12,
    "end_day": 31,
    "end_month": 12,
}


def _to_int(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid day or month
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.strip().isdigit():
        result = int(value.strip())
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    else:
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    return _check_range(name, result)


def _check_range(name: str, value: int) -> int:
    limit = _FIELD_LIMITS[name]
    if not 1 <= value <= limit:
        raise ValidationError(f"{name} must be between 1 and {limit}, got {value}")
    return value


@dataclass(frozen=True)
class AbstractionPeriod:
    """A recurring yearly window, e.g. 1 April to 31 October every year."""

    start_day: int
    start_month: int
    end_day: int
    end_month: int

    def __post_init__(self):
        for name in _FIELD_LIMITS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{name} must be an integer, got {value!r}")
            _check_range(name, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AbstractionPeriod":
        """
        Build a period from a mapping.

        Accepts snake_case (start_day), camelCase (startDay) and returns-style
        (periodStartDay) keys. Integer strings such as "01" are converted.
        """
        if not isinstance(data, Mapping):
            raise ValidationError(f"Abstraction period must be a mapping, got {data!r}")

        values = {}
        for name, aliases in _PERIOD_KEYS.items():
            raw: Optional[Any] = None
            for key in aliases:
                if data.get(key) is not None:
                    raw = data[key]
                    break
            if raw is None:
                raise ValidationError(f"Abstraction period is missing {name}: {dict(data)!r}")
            values[name] = _to_int(name, raw)
        return cls(**values)

    @property
    def is_cross_year(self) -> bool:
        """True if the window wraps over 31 December."""
        return (self.start_month, self.start_day) > (self.end_month, self.end_day)
