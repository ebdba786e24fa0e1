"""
Merging of date-ranged history records.
"""

import logging
from copy import deepcopy
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from abstractionlib.utils.date import next_day

from .date_range_splitter import get_end_date, get_start_date

logger = logging.getLogger(__name__)

DATE_KEYS = ("startDate", "start_date", "endDate", "end_date")

EqualityFunc = Callable[[Mapping[str, Any], Mapping[str, Any]], bool]


def _without_dates(obj: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in obj.items() if key not in DATE_KEYS}


def is_equal_ignoring_dates(a: Mapping[str, Any], b: Mapping[str, Any]) -> bool:
    """True if the records match on everything but their date range."""
    return _without_dates(a) == _without_dates(b)


def _end_key(obj: Mapping[str, Any]) -> str:
    return "end_date" if "end_date" in obj and "endDate" not in obj else "endDate"


def _is_adjacent(previous: Mapping[str, Any], current: Mapping[str, Any]) -> bool:
    """
    True if current starts the day after previous ends. A previous record
    with no end date is treated as running up to the current one.
    """
    previous_end = get_end_date(previous)
    if previous_end is None:
        return True
    return next_day(previous_end) == get_start_date(current)


def merge_history(
    items: Sequence[Mapping[str, Any]], is_equal: Optional[EqualityFunc] = None
) -> List[Dict[str, Any]]:
    """
    Merge consecutive records whose date ranges are adjacent and which are
    otherwise equal.

    Args:
        items: Records with start/end dates, in date order
        is_equal: Test for whether two records may be merged
            (defaults to comparing everything but the dates)

    Returns:
        New list of records; inputs are not modified
    """
    if is_equal is None:
        is_equal = is_equal_ignoring_dates

    merged: List[Dict[str, Any]] = []
    for item in items:
        if merged and _is_adjacent(merged[-1], item) and is_equal(merged[-1], item):
            previous = merged[-1]
            previous[_end_key(previous)] = item.get("endDate", item.get("end_date"))
            logger.debug("Merged history record ending %s", previous[_end_key(previous)])
        else:
            merged.append(deepcopy(dict(item)))
    return merged
