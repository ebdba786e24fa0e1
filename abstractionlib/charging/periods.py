"""
Expansion of recurring abstraction periods into concrete date ranges.
"""

import logging
from datetime import date
from typing import Iterable, List

from abstractionlib.core import AbstractionPeriod, DateRange
from abstractionlib.utils.date import resolve_financial_year_date

from .intervals import merge_overlapping

logger = logging.getLogger(__name__)


def financial_year_range(financial_year: int) -> DateRange:
    """Return 1 April of the preceding year to 31 March of financial_year."""
    return DateRange(date(financial_year - 1, 4, 1), date(financial_year, 3, 31))


def expand_abstraction_period(
    period: AbstractionPeriod,
    financial_year: int,
    billing_start: date,
    billing_end: date,
) -> List[DateRange]:
    """
    Expand a recurring abstraction period into concrete date ranges.

    A period within one calendar year gives a single range. A period that
    wraps the financial year boundary gives the part from the billing
    start to the period end, and the part from the period start to the
    billing end. Pieces that would end before they start hold no days and
    are left out.

    Args:
        period: Recurring day/month window
        financial_year: Financial year the window is resolved in
        billing_start: First day of the billing period
        billing_end: Last day of the billing period

    Returns:
        Zero, one or two date ranges
    """
    abs_start = resolve_financial_year_date(
        period.start_day, period.start_month, financial_year
    )
    abs_end = resolve_financial_year_date(
        period.end_day, period.end_month, financial_year
    )

    if abs_end >= abs_start:
        return [DateRange(abs_start, abs_end)]

    pieces = [(billing_start, abs_end), (abs_start, billing_end)]
    ranges = [DateRange(start, end) for start, end in pieces if start <= end]
    if len(ranges) < len(pieces):
        logger.debug(
            "Dropped empty abstraction period piece(s) for %s in FY%s",
            period,
            financial_year,
        )
    return ranges


def expand_abstraction_periods(
    periods: Iterable[AbstractionPeriod],
    financial_year: int,
    billing_start: date,
    billing_end: date,
) -> List[DateRange]:
    """Expand several periods and merge the overlaps between them."""
    ranges: List[DateRange] = []
    for period in periods:
        ranges.extend(
            expand_abstraction_period(period, financial_year, billing_start, billing_end)
        )
    return merge_overlapping(ranges)
