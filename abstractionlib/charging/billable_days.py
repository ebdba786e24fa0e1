"""
Billable days calculation for charging.

The billable days of a billing period are the days that also fall inside
one or more abstraction periods. Abstraction periods recur every year, so
they are first resolved against the financial year of the billing period.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from abstractionlib.conventions.types import FinancialYearBasis
from abstractionlib.core import DateRange
from abstractionlib.errors import ValidationError
from abstractionlib.utils.date import DateLike, resolve_financial_year
from abstractionlib.utils.daycount import inclusive_day_count

from .intervals import intersect
from .periods import expand_abstraction_periods
from .validation import PeriodLike, validate_date, validate_period, validate_periods

logger = logging.getLogger(__name__)

_DEFAULT_BASIS = FinancialYearBasis.END_DATE


def get_total_days(start_date: DateLike, end_date: DateLike) -> int:
    """Total days from start to end inclusive, never negative."""
    start = validate_date(start_date, "start_date")
    end = validate_date(end_date, "end_date")
    return inclusive_day_count(start, end)


def _financial_year(start: date, end: date, basis: FinancialYearBasis) -> int:
    if basis == FinancialYearBasis.END_DATE:
        return resolve_financial_year(end)
    elif basis == FinancialYearBasis.START_DATE:
        return resolve_financial_year(start)
    else:
        raise ValidationError(f"Unknown financial year basis: {basis!r}")


def get_billable_days_for_periods(
    periods: Iterable[PeriodLike],
    start_date: DateLike,
    end_date: DateLike,
    basis: Optional[FinancialYearBasis] = None,
) -> int:
    """
    Get the number of billable days between the start and end date, when
    the abstraction periods are taken into account.

    Days shared by overlapping abstraction periods are counted once.

    Args:
        periods: Abstraction periods, as AbstractionPeriod or mappings
        start_date: Start of the billing period, YYYY-MM-DD
        end_date: End of the billing period, YYYY-MM-DD
        basis: Billing date the financial year is resolved from
            (defaults to the end date)

    Returns:
        Billable days, 0 if no abstraction period falls in the billing period
    """
    # Validate inputs
    abs_periods = validate_periods(periods)
    start = validate_date(start_date, "start_date")
    end = validate_date(end_date, "end_date")
    if basis is None:
        basis = _DEFAULT_BASIS

    if end < start:
        logger.debug("Billing period ends before it starts: %s, %s", start, end)
        return 0

    financial_year = _financial_year(start, end, basis)
    billing_range = DateRange(start, end)
    ranges = expand_abstraction_periods(abs_periods, financial_year, start, end)

    total = 0
    for abs_range in ranges:
        overlap = intersect(billing_range, abs_range)
        if overlap is not None:
            total += inclusive_day_count(overlap.start, overlap.end)
    return total


def get_billable_days(
    period: PeriodLike,
    start_date: DateLike,
    end_date: DateLike,
    basis: Optional[FinancialYearBasis] = None,
) -> int:
    """Billable days for a single abstraction period."""
    return get_billable_days_for_periods(
        [validate_period(period)], start_date, end_date, basis=basis
    )
