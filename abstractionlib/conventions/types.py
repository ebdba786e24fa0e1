"""
Basic types and enums used across the charging and returns modules.
"""

from enum import Enum


class FinancialYearBasis(Enum):
    """Which billing date the financial year is resolved from."""

    END_DATE = "END_DATE"
    START_DATE = "START_DATE"  # Legacy convention


class Weekday(Enum):
    """Days of the week, numbered as in date.weekday()."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


class ReturnFrequency(Enum):
    """Reporting frequencies for return lines."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class ChargeSeason(Enum):
    """Default charge season for an abstraction period."""

    SUMMER = "summer"
    WINTER = "winter"
    ALL_YEAR = "all year"
