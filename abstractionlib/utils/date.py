import re
from typing import Optional, Union
from datetime import datetime, date
from dateutil.relativedelta import relativedelta
from pandas import Timestamp

from abstractionlib.conventions.defaults import FINANCIAL_YEAR_START_MONTH
from abstractionlib.errors import InvalidDateError

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"
NALD_FMT = "%d/%m/%Y"

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

# Fixed English names so formatting never depends on the process locale
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise InvalidDateError(f"Unsupported date string format: {date_like!r}")
    raise InvalidDateError(f"Unsupported type for date: {type(date_like)}")


def parse_date(value: str) -> date:
    """
    Parse a strict 'YYYY-MM-DD' string.
    Raises InvalidDateError for any other shape or an impossible date.
    """
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        raise InvalidDateError(f"Expected a YYYY-MM-DD date, got {value!r}")
    try:
        return datetime.strptime(value, DATE_FMT).date()
    except ValueError as exc:
        raise InvalidDateError(f"Not a calendar date: {value!r}") from exc


def format_date(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def next_day(date_like: DateLike) -> date:
    return to_date(date_like) + relativedelta(days=1)


def previous_day(date_like: DateLike) -> date:
    return to_date(date_like) - relativedelta(days=1)


def resolve_financial_year(date_like: DateLike) -> int:
    """
    Return the financial year a date falls in, numbered by the year it ends.
    E.g. 2018-03-31 -> 2018, 2018-04-01 -> 2019.
    """
    dt = to_date(date_like)
    return dt.year if dt.month < FINANCIAL_YEAR_START_MONTH else dt.year + 1


def resolve_financial_year_date(day: int, month: int, financial_year: int) -> date:
    """
    Return the concrete date of a day/month within the given financial year.

    Months before April fall in the financial year's own calendar year,
    the rest in the preceding one. Day/month pairs that do not exist in
    that year (31 June, 29 February in a common year) are rejected.
    """
    year = financial_year if month < FINANCIAL_YEAR_START_MONTH else financial_year - 1
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(
            f"Day {day} month {month} is not a valid date in {year}"
        ) from exc


def _reformat(value: Optional[str], input_fmt: str, output_fmt: str) -> Optional[str]:
    """Reformat a date string, returning None if it cannot be parsed."""
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, input_fmt).strftime(output_fmt)
    except ValueError:
        return None


def calendar_to_iso(value: Optional[str]) -> Optional[str]:
    """
    NALD 'DD/MM/YYYY' to 'YYYY-MM-DD', e.g. 31/01/2018 -> 2018-01-31.
    NALD writes missing dates as the string 'null', which gives None.
    """
    return _reformat(value, NALD_FMT, DATE_FMT)


def calendar_to_sortable(value: Optional[str]) -> Optional[str]:
    """NALD 'DD/MM/YYYY' to sortable 'YYYYMMDD'."""
    return _reformat(value, NALD_FMT, COMPACT_FMT)


def returns_to_iso(value: Optional[str]) -> Optional[str]:
    """NALD returns line 'YYYYMMDD' to 'YYYY-MM-DD'."""
    return _reformat(value, COMPACT_FMT, DATE_FMT)


def iso_to_readable(value: Optional[str]) -> Optional[str]:
    """
    'YYYY-MM-DD' to the GDS pattern, e.g. 2018-11-01 -> '1 November 2018'.
    """
    if not isinstance(value, str):
        return None
    try:
        dt = datetime.strptime(value, DATE_FMT).date()
    except ValueError:
        return None
    return f"{dt.day} {MONTH_NAMES[dt.month - 1]} {dt.year}"
