"""
Required lines for a return, by reporting frequency.
"""

import calendar
from dataclasses import dataclass
from datetime import date
from typing import List, Union

from dateutil.relativedelta import relativedelta

from abstractionlib.conventions.defaults import DEFAULT_WEEK_START
from abstractionlib.conventions.types import ReturnFrequency, Weekday
from abstractionlib.core import DateRange
from abstractionlib.errors import ValidationError
from abstractionlib.utils.date import DateLike, to_date


@dataclass(frozen=True)
class ReturnLine:
    """A single line of a return."""

    start_date: date
    end_date: date
    time_period: ReturnFrequency


def get_week(date_like: DateLike, week_start: Weekday = DEFAULT_WEEK_START) -> DateRange:
    """
    The seven-day week containing the given day.

    NALD weeks start on a Sunday and end on the Saturday; the start day is
    passed explicitly rather than read from a locale.
    """
    dt = to_date(date_like)
    offset = (dt.weekday() - week_start.value) % 7
    start = dt - relativedelta(days=offset)
    return DateRange(start, start + relativedelta(days=6))


def _month_end(dt: date) -> date:
    return date(dt.year, dt.month, calendar.monthrange(dt.year, dt.month)[1])


def is_last_day_of_month(date_like: DateLike) -> bool:
    dt = to_date(date_like)
    return dt == _month_end(dt)


def get_days(start_date: DateLike, end_date: DateLike) -> List[ReturnLine]:
    """Daily lines; always at least one."""
    current = to_date(start_date)
    end = to_date(end_date)
    lines = [ReturnLine(current, current, ReturnFrequency.DAY)]
    current += relativedelta(days=1)
    while current <= end:
        lines.append(ReturnLine(current, current, ReturnFrequency.DAY))
        current += relativedelta(days=1)
    return lines


def get_weeks(
    start_date: DateLike, end_date: DateLike, week_start: Weekday = DEFAULT_WEEK_START
) -> List[ReturnLine]:
    """
    Weekly lines, starting with the week containing start_date and
    continuing while whole weeks end on or before end_date.
    """
    end = to_date(end_date)
    week = get_week(start_date, week_start)
    lines = []
    while True:
        lines.append(ReturnLine(week.start, week.end, ReturnFrequency.WEEK))
        week = get_week(week.start + relativedelta(weeks=1), week_start)
        if week.end > end:
            break
    return lines


def get_months(
    start_date: DateLike, end_date: DateLike, is_final_return: bool = False
) -> List[ReturnLine]:
    """
    Monthly lines covering whole calendar months from start_date.

    A final return (split log) ending part-way through a month leaves out
    that month.
    """
    end = to_date(end_date)
    include_end_month = not (is_final_return and not is_last_day_of_month(end))
    end_month = (end.year, end.month)

    current = to_date(start_date).replace(day=1)
    lines = []
    while True:
        lines.append(ReturnLine(current, _month_end(current), ReturnFrequency.MONTH))
        current += relativedelta(months=1)
        current_month = (current.year, current.month)
        if include_end_month:
            if current_month > end_month:
                break
        elif current_month >= end_month:
            break
    return lines


def get_years(start_date: DateLike, end_date: DateLike) -> List[ReturnLine]:
    """A single line for the whole period."""
    return [ReturnLine(to_date(start_date), to_date(end_date), ReturnFrequency.YEAR)]


def get_required_lines(
    start_date: DateLike,
    end_date: DateLike,
    frequency: Union[ReturnFrequency, str],
    is_final_return: bool = False,
    week_start: Weekday = DEFAULT_WEEK_START,
) -> List[ReturnLine]:
    """
    Lines required in a return.

    Args:
        start_date: Start of the return cycle, YYYY-MM-DD
        end_date: End of the return cycle, YYYY-MM-DD
        frequency: Reporting frequency (day, week, month or year)
        is_final_return: Whether the return covers a partial period (split log)
        week_start: First day of the week for weekly returns

    Returns:
        List of required lines
    """
    try:
        frequency = ReturnFrequency(frequency)
    except ValueError as exc:
        raise ValidationError(f"Unknown frequency {frequency}") from exc

    if frequency == ReturnFrequency.DAY:
        return get_days(start_date, end_date)
    elif frequency == ReturnFrequency.WEEK:
        return get_weeks(start_date, end_date, week_start)
    elif frequency == ReturnFrequency.MONTH:
        return get_months(start_date, end_date, is_final_return)
    else:
        return get_years(start_date, end_date)
