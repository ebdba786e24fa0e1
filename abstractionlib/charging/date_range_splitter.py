"""
Splits a date-ranged record by the date ranges of a list of other records.

This is useful for example when we have a charge version for a financial
year, and wish to split it by invoice accounts or agreements into a number
of separate date-based configurations.
"""

from copy import deepcopy
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence

from abstractionlib.errors import ValidationError
from abstractionlib.utils.date import format_date, next_day, previous_day, to_date


def get_start_date(obj: Mapping[str, Any]) -> Optional[date]:
    """Start date of a record keyed startDate or start_date."""
    value = obj.get("startDate") or obj.get("start_date")
    return to_date(value) if value else None


def get_end_date(obj: Mapping[str, Any]) -> Optional[date]:
    """End date of a record keyed endDate or end_date, None if open-ended."""
    value = obj.get("endDate") or obj.get("end_date")
    return to_date(value) if value else None


def _contains(start: Optional[date], end: Optional[date], dt: date) -> bool:
    """True if dt lies in [start, end], a missing bound being unbounded."""
    if start is not None and dt < start:
        return False
    if end is not None and dt > end:
        return False
    return True


def _overlaps(
    start: date, end: Optional[date], other_start: Optional[date], other_end: Optional[date]
) -> bool:
    if other_end is not None and other_end < start:
        return False
    if end is not None and other_start is not None and other_start > end:
        return False
    return True


def get_split_dates(parent: Mapping[str, Any], children: Sequence[Mapping[str, Any]]) -> List[date]:
    """Sorted unique dates where the parent range is split by the children."""
    parent_start = get_start_date(parent)
    parent_end = get_end_date(parent)

    split_dates = {parent_start}
    for child in children:
        child_start = get_start_date(child)
        child_end = get_end_date(child)
        candidates = [child_start, next_day(child_end) if child_end else None]
        split_dates.update(
            dt for dt in candidates
            if dt is not None and _contains(parent_start, parent_end, dt)
        )
    return sorted(split_dates)


def _find_overlapping(
    children: Sequence[Mapping[str, Any]], start: date, end: Optional[date]
) -> Optional[Mapping[str, Any]]:
    for child in children:
        if _overlaps(start, end, get_start_date(child), get_end_date(child)):
            return child
    return None


def split_by_overlap(
    parent: Mapping[str, Any],
    children: Sequence[Mapping[str, Any]] = (),
    tag_name: str = "tag",
) -> List[Dict[str, Any]]:
    """
    Split a record with a date range into records with contiguous date
    ranges, split by the date ranges in the provided list.

    Args:
        parent: Record with a start date and an optional end date
        children: Records with date properties as the parent
        tag_name: Key set on each result to the overlapping child (or None)

    Returns:
        Copies of the parent with effective_start_date/effective_end_date
        (YYYY-MM-DD, the last end may be None) and the tag
    """
    if get_start_date(parent) is None:
        raise ValidationError(f"Record to split has no start date: {parent!r}")

    parent_end = get_end_date(parent)
    split_dates = get_split_dates(parent, children)

    results = []
    for i, start in enumerate(split_dates):
        if i == len(split_dates) - 1:
            end = parent_end
        else:
            end = previous_day(split_dates[i + 1])
        record = deepcopy(dict(parent))
        record["effective_start_date"] = format_date(start)
        record["effective_end_date"] = format_date(end) if end else None
        record[tag_name] = _find_overlapping(children, start, end)
        results.append(record)
    return results
