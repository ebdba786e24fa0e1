"""
Tests of dates and periods against abstraction periods.
"""

from datetime import date
from typing import Tuple

from abstractionlib.charging.validation import PeriodLike, validate_period
from abstractionlib.conventions.types import ChargeSeason
from abstractionlib.core import AbstractionPeriod
from abstractionlib.errors import InvalidDateError
from abstractionlib.utils.date import DateLike, to_date

SUMMER = AbstractionPeriod(start_day=1, start_month=4, end_day=31, end_month=10)
WINTER = AbstractionPeriod(start_day=1, start_month=11, end_day=31, end_month=3)

# Leap year, so that 29 February periods resolve
_REFERENCE_YEAR = 2020
_DAYS_IN_YEAR = 366


def is_date_within_abstraction_period(date_like: DateLike, period: PeriodLike) -> bool:
    """Check whether the date falls within the recurring abstraction period."""
    abs_period = validate_period(period)
    dt = to_date(date_like)

    day_month = (dt.month, dt.day)
    start = (abs_period.start_month, abs_period.start_day)
    end = (abs_period.end_month, abs_period.end_day)

    if not abs_period.is_cross_year:
        return start <= day_month <= end
    return day_month >= start or day_month <= end


def _day_of_year(month: int, day: int) -> int:
    """Position of a day/month in a leap year, so 29 February always exists."""
    try:
        return date(_REFERENCE_YEAR, month, day).timetuple().tm_yday
    except ValueError as exc:
        raise InvalidDateError(f"Day {day} month {month} is not a valid date") from exc


def _span(period: AbstractionPeriod) -> Tuple[int, int]:
    """First and last day of the period as day-of-year positions."""
    start = _day_of_year(period.start_month, period.start_day)
    end = _day_of_year(period.end_month, period.end_day)
    if period.is_cross_year:
        end += _DAYS_IN_YEAR
    return start, end


def is_within_abstraction_period(period: PeriodLike, container: PeriodLike) -> bool:
    """
    Check whether the period fits inside the container period, including
    the boundaries.
    """
    inner_start, inner_end = _span(validate_period(period))
    outer_start, outer_end = _span(validate_period(container))
    # The container recurs yearly; try the occurrences either side as well
    for shift in (-_DAYS_IN_YEAR, 0, _DAYS_IN_YEAR):
        if outer_start + shift <= inner_start and inner_end <= outer_end + shift:
            return True
    return False


def get_abstraction_period_season(period: PeriodLike) -> ChargeSeason:
    """
    Default charge season for an abstraction period.

    Summer if it sits within 1 April - 31 October, winter if within
    1 November - 31 March, otherwise all year.
    """
    if is_within_abstraction_period(period, SUMMER):
        return ChargeSeason.SUMMER
    if is_within_abstraction_period(period, WINTER):
        return ChargeSeason.WINTER
    return ChargeSeason.ALL_YEAR
