"""Day counting for billing periods."""

from __future__ import annotations

from datetime import date

import logging

logger = logging.getLogger(__name__)


def day_difference(start: date, end: date) -> int:
    """Whole days from start to end; negative when end is earlier."""
    return (end - start).days


def inclusive_day_count(start: date, end: date) -> int:
    """Return the number of days from start to end, counting both ends.

    Follows the convention:
        days(d1, d2) = max(0, (d2 - d1) + 1)
    A range that ends before it starts counts as zero days.
    """
    days = day_difference(start, end) + 1
    if days < 0:
        logger.debug("Clamping negative day count to zero: %s, %s", start, end)
        return 0
    return days
