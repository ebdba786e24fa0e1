"""
Charging calculations: billable days, interval algebra and date range splitting.
"""

from abstractionlib.core import AbstractionPeriod, DateRange
from abstractionlib.utils.date import resolve_financial_year, resolve_financial_year_date

from .billable_days import get_billable_days, get_billable_days_for_periods, get_total_days
from .date_range_splitter import split_by_overlap
from .history import merge_history
from .intervals import get_intersection, intersect, merge_overlapping
from .periods import (
    expand_abstraction_period,
    expand_abstraction_periods,
    financial_year_range,
)

__all__ = [
    # Types
    "AbstractionPeriod",
    "DateRange",
    # Calendar
    "resolve_financial_year",
    "resolve_financial_year_date",
    "financial_year_range",
    # Billable days
    "get_billable_days",
    "get_billable_days_for_periods",
    "get_total_days",
    # Intervals
    "intersect",
    "get_intersection",
    "merge_overlapping",
    "expand_abstraction_period",
    "expand_abstraction_periods",
    # Splitting and merging
    "split_by_overlap",
    "merge_history",
]
