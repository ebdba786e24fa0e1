from datetime import date

import pytest

from abstractionlib.charging import DateRange, get_intersection, intersect, merge_overlapping
from abstractionlib.errors import InvalidRangeError, ValidationError


def _range(start, end):
    return DateRange(date.fromisoformat(start), date.fromisoformat(end))


def test_date_range_rejects_end_before_start():
    with pytest.raises(InvalidRangeError):
        _range("2019-01-02", "2019-01-01")


def test_date_range_days_are_inclusive():
    assert _range("2019-01-01", "2019-01-01").days == 1
    assert _range("2019-04-01", "2020-03-31").days == 366


def test_get_intersection_returns_none_when_ranges_do_not_overlap():
    assert get_intersection(("2000-01-01", "2002-01-01"), ("2002-01-02", "2003-01-01")) is None


def test_get_intersection_when_ranges_start_and_end_same_day():
    result = get_intersection(("2000-01-01", "2002-01-01"), ("2002-01-01", "2003-01-01"))
    assert result == ("2002-01-01", "2002-01-01")


def test_get_intersection_when_ranges_overlap():
    result = get_intersection(("2000-01-01", "2002-01-01"), ("2001-01-01", "2003-01-01"))
    assert result == ("2001-01-01", "2002-01-01")


@pytest.mark.parametrize(
    "a, b",
    [
        (("2000-01-01", "2002-01-01"), ("2001-01-01", "2003-01-01")),
        (("2000-01-01", "2002-01-01"), ("2002-01-02", "2003-01-01")),
        (("2001-03-01", "2001-03-31"), ("2000-01-01", "2003-01-01")),
    ],
)
def test_intersect_is_symmetric(a, b):
    assert intersect(_range(*a), _range(*b)) == intersect(_range(*b), _range(*a))


def test_intersect_contained_range():
    outer = _range("2000-01-01", "2003-01-01")
    inner = _range("2001-03-01", "2001-03-31")
    assert intersect(outer, inner) == inner


def test_merge_overlapping_sorts_and_folds():
    ranges = [
        _range("2019-06-01", "2019-09-30"),
        _range("2019-01-01", "2019-03-31"),
        _range("2019-03-31", "2019-04-30"),
        _range("2019-07-01", "2019-07-31"),
    ]
    assert merge_overlapping(ranges) == [
        _range("2019-01-01", "2019-04-30"),
        _range("2019-06-01", "2019-09-30"),
    ]


def test_merge_overlapping_keeps_adjacent_ranges_apart():
    ranges = [_range("2019-01-01", "2019-01-31"), _range("2019-02-01", "2019-02-28")]
    assert merge_overlapping(ranges) == ranges


def test_merge_overlapping_is_idempotent():
    ranges = [
        _range("2019-05-01", "2019-05-10"),
        _range("2019-01-01", "2019-02-01"),
        _range("2019-01-15", "2019-03-01"),
        _range("2019-05-10", "2019-05-10"),
    ]
    once = merge_overlapping(ranges)
    assert merge_overlapping(once) == once


def test_merge_overlapping_empty():
    assert merge_overlapping([]) == []


def test_get_intersection_rejects_non_date_values():
    with pytest.raises(ValidationError):
        get_intersection((20180101, "2018-02-01"), ("2018-01-15", "2018-03-01"))
