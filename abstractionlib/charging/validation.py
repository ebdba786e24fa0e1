"""
Input validation for the billable days calculations.
"""

from datetime import date
from typing import Any, Iterable, List, Mapping, Union

from abstractionlib.core import AbstractionPeriod
from abstractionlib.errors import ValidationError
from abstractionlib.utils.date import parse_date, to_date

PeriodLike = Union[AbstractionPeriod, Mapping[str, Any]]


def validate_date(value: Any, name: str = "date") -> date:
    """Return a date for a 'YYYY-MM-DD' string or a date/datetime object."""
    if isinstance(value, str):
        return parse_date(value)
    if isinstance(value, date):
        return to_date(value)
    raise ValidationError(f"{name} must be a YYYY-MM-DD string or date, got {value!r}")


def validate_period(period: PeriodLike) -> AbstractionPeriod:
    """Return an AbstractionPeriod, building it from a mapping if needed."""
    if isinstance(period, AbstractionPeriod):
        return period
    return AbstractionPeriod.from_mapping(period)


def validate_periods(periods: Iterable[PeriodLike]) -> List[AbstractionPeriod]:
    """Validate a sequence of abstraction periods."""
    if isinstance(periods, (AbstractionPeriod, Mapping, str)):
        raise ValidationError(
            f"Expected a sequence of abstraction periods, got {periods!r}"
        )
    return [validate_period(period) for period in periods]
