"""
Default settings for charging and returns calculations.

These are read-only module constants; functions take per-call overrides
instead of a mutable global.
"""

from .types import Weekday

# UK financial year runs 1 April - 31 March
FINANCIAL_YEAR_START_MONTH = 4

# First returns cycle captured by the service
DEFAULT_CYCLE_START = "2017-11-01"

# Returns are due 28 days after the cycle ends
RETURNS_DUE_DAYS = 28

# Cycle end date -> due date, for cycles with an extended deadline
RETURNS_DUE_DATE_OVERRIDES = {
    "2020-03-31": "2020-10-16",
}

# NALD weeks run Sunday to Saturday
DEFAULT_WEEK_START = Weekday.SUNDAY
