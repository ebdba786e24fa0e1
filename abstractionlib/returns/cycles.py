"""
Returns cycle dates.

Returns are collected over two overlapping yearly cycles: winter cycles
run from 1 April, summer cycles from 1 November.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from abstractionlib.conventions.defaults import (
    DEFAULT_CYCLE_START,
    RETURNS_DUE_DATE_OVERRIDES,
    RETURNS_DUE_DAYS,
)
from abstractionlib.errors import InvalidRangeError
from abstractionlib.utils.date import DateLike, format_date, to_date

WINTER_START_MONTH = 4
SUMMER_START_MONTH = 11


@dataclass(frozen=True)
class ReturnCycle:
    """A single returns cycle."""

    start_date: date
    end_date: date
    is_summer: bool
    due_date: date


def get_period_start(date_like: DateLike, is_summer: bool) -> date:
    """Start date of the returns cycle the given date lies in."""
    dt = to_date(date_like)
    month = SUMMER_START_MONTH if is_summer else WINTER_START_MONTH
    start_year = dt.year - 1 if dt < date(dt.year, month, 1) else dt.year
    return date(start_year, month, 1)


def get_period_end(date_like: DateLike, is_summer: bool) -> date:
    """End date of the returns cycle the given date lies in."""
    start = get_period_start(date_like, is_summer)
    return start + relativedelta(years=1, days=-1)


def get_due_date(end_date: DateLike) -> date:
    """Due date of a cycle ending on end_date."""
    end = to_date(end_date)
    override = RETURNS_DUE_DATE_OVERRIDES.get(format_date(end))
    if override is not None:
        return to_date(override)
    return end + relativedelta(days=RETURNS_DUE_DAYS)


def _create_cycle(start_date: date, is_summer: bool) -> ReturnCycle:
    end_date = start_date + relativedelta(years=1, days=-1)
    return ReturnCycle(
        start_date=start_date,
        end_date=end_date,
        is_summer=is_summer,
        due_date=get_due_date(end_date),
    )


def get_next_cycle(date_like: DateLike) -> ReturnCycle:
    """The first cycle starting on or after the given date."""
    dt = to_date(date_like)
    winter = date(dt.year, WINTER_START_MONTH, 1)
    summer = date(dt.year, SUMMER_START_MONTH, 1)

    if dt <= winter:
        return _create_cycle(winter, False)
    elif dt <= summer:
        return _create_cycle(summer, True)
    else:
        return _create_cycle(date(dt.year + 1, WINTER_START_MONTH, 1), False)


def create_return_cycles(
    start_date: Optional[DateLike] = None, end_date: Optional[DateLike] = None
) -> List[ReturnCycle]:
    """
    Return cycles that lie between the start and end dates.

    Args:
        start_date: Defaults to the first cycle captured by the service
        end_date: Defaults to today

    Returns:
        Cycles, in start date order, ending on or before end_date
    """
    start = to_date(start_date if start_date is not None else DEFAULT_CYCLE_START)
    end = to_date(end_date) if end_date is not None else date.today()

    if end < start:
        raise InvalidRangeError(
            f"Invalid returns cycle date range {format_date(start)} - {format_date(end)}"
        )

    cycles = []
    cycle = get_next_cycle(start)
    while cycle.end_date <= end:
        cycles.append(cycle)
        cycle = get_next_cycle(cycle.start_date + relativedelta(days=1))
    return cycles
