"""
Returns calculations: cycles, abstraction period tests and required lines.
"""

from .abstraction_period import (
    get_abstraction_period_season,
    is_date_within_abstraction_period,
    is_within_abstraction_period,
)
from .cycles import (
    ReturnCycle,
    create_return_cycles,
    get_due_date,
    get_next_cycle,
    get_period_end,
    get_period_start,
)
from .lines import (
    ReturnLine,
    get_days,
    get_months,
    get_required_lines,
    get_week,
    get_weeks,
    get_years,
)

__all__ = [
    # Cycles
    "ReturnCycle",
    "create_return_cycles",
    "get_due_date",
    "get_next_cycle",
    "get_period_end",
    "get_period_start",
    # Abstraction periods
    "get_abstraction_period_season",
    "is_date_within_abstraction_period",
    "is_within_abstraction_period",
    # Lines
    "ReturnLine",
    "get_days",
    "get_months",
    "get_required_lines",
    "get_week",
    "get_weeks",
    "get_years",
]
