"""
Interval algebra on closed date ranges.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from abstractionlib.core import DateRange
from abstractionlib.utils.date import DateLike, format_date, to_date


def intersect(a: DateRange, b: DateRange) -> Optional[DateRange]:
    """
    Return the overlap of two ranges, or None if they share no day.

    Ranges touching on a single day overlap on that day.
    """
    start = max(a.start, b.start)
    end = min(a.end, b.end)
    if start > end:
        return None
    return DateRange(start, end)


def get_intersection(
    range_a: Sequence[DateLike], range_b: Sequence[DateLike]
) -> Optional[Tuple[str, str]]:
    """
    Intersect two (start, end) pairs of ISO dates.

    Returns the overlapping (start, end) pair as ISO strings, or None.
    """
    overlap = intersect(
        DateRange(to_date(range_a[0]), to_date(range_a[1])),
        DateRange(to_date(range_b[0]), to_date(range_b[1])),
    )
    if overlap is None:
        return None
    return format_date(overlap.start), format_date(overlap.end)


def merge_overlapping(ranges: Iterable[DateRange]) -> List[DateRange]:
    """
    Merge overlapping ranges into the minimal set covering the same days.

    The result is sorted by start date. Merging an already merged list
    returns it unchanged.
    """
    merged: List[DateRange] = []
    for current in sorted(ranges, key=lambda r: (r.start, r.end)):
        if merged and intersect(merged[-1], current) is not None:
            last = merged[-1]
            merged[-1] = DateRange(last.start, max(last.end, current.end))
        else:
            merged.append(current)
    return merged
