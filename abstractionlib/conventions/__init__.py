"""
Conventions and default settings for charging and returns calculations.
"""

from .defaults import (
    DEFAULT_CYCLE_START,
    DEFAULT_WEEK_START,
    FINANCIAL_YEAR_START_MONTH,
    RETURNS_DUE_DAYS,
    RETURNS_DUE_DATE_OVERRIDES,
)
from .types import ChargeSeason, FinancialYearBasis, ReturnFrequency, Weekday

__all__ = [
    # Enums
    "ChargeSeason",
    "FinancialYearBasis",
    "ReturnFrequency",
    "Weekday",
    # Defaults
    "DEFAULT_CYCLE_START",
    "DEFAULT_WEEK_START",
    "FINANCIAL_YEAR_START_MONTH",
    "RETURNS_DUE_DAYS",
    "RETURNS_DUE_DATE_OVERRIDES",
]
