"""
Calendar primitives: date parsing/formatting, financial years, day counts.
"""

from .date import (
    calendar_to_iso,
    calendar_to_sortable,
    format_date,
    iso_to_readable,
    next_day,
    parse_date,
    previous_day,
    resolve_financial_year,
    resolve_financial_year_date,
    returns_to_iso,
    to_date,
)
from .daycount import day_difference, inclusive_day_count

__all__ = [
    "calendar_to_iso",
    "calendar_to_sortable",
    "day_difference",
    "format_date",
    "inclusive_day_count",
    "iso_to_readable",
    "next_day",
    "parse_date",
    "previous_day",
    "resolve_financial_year",
    "resolve_financial_year_date",
    "returns_to_iso",
    "to_date",
]
