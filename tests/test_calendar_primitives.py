from datetime import date, datetime

import pandas as pd
import pytest

from abstractionlib.errors import InvalidDateError, ValidationError
from abstractionlib.utils import (
    calendar_to_iso,
    calendar_to_sortable,
    format_date,
    inclusive_day_count,
    iso_to_readable,
    next_day,
    parse_date,
    previous_day,
    resolve_financial_year,
    resolve_financial_year_date,
    returns_to_iso,
    to_date,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2018-01-01", 2018),
        ("2018-03-31", 2018),
        ("2018-04-01", 2019),
        ("2018-12-31", 2019),
    ],
)
def test_resolve_financial_year(value, expected):
    assert resolve_financial_year(value) == expected


def test_resolve_financial_year_accepts_dates():
    assert resolve_financial_year(date(2020, 2, 29)) == 2020
    assert resolve_financial_year(pd.Timestamp("2020-04-15")) == 2021


def test_financial_year_date_before_april_uses_same_year():
    assert resolve_financial_year_date(1, 1, 2019) == date(2019, 1, 1)
    assert resolve_financial_year_date(31, 3, 2019) == date(2019, 3, 31)


def test_financial_year_date_from_april_uses_preceding_year():
    assert resolve_financial_year_date(1, 4, 2019) == date(2018, 4, 1)
    assert resolve_financial_year_date(31, 12, 2019) == date(2018, 12, 31)


def test_financial_year_date_rejects_impossible_dates():
    with pytest.raises(InvalidDateError):
        resolve_financial_year_date(31, 6, 2019)
    with pytest.raises(InvalidDateError):
        resolve_financial_year_date(29, 2, 2019)
    # 2020 is a leap year
    assert resolve_financial_year_date(29, 2, 2020) == date(2020, 2, 29)


def test_inclusive_day_count():
    assert inclusive_day_count(date(2018, 4, 1), date(2018, 4, 1)) == 1
    assert inclusive_day_count(date(2018, 4, 1), date(2019, 3, 31)) == 365
    assert inclusive_day_count(date(2018, 4, 2), date(2018, 4, 1)) == 0
    assert inclusive_day_count(date(2018, 5, 1), date(2018, 4, 1)) == 0


def test_parse_and_format_date():
    assert parse_date("2019-02-28") == date(2019, 2, 28)
    assert format_date(date(2019, 2, 28)) == "2019-02-28"
    assert format_date(datetime(2019, 2, 28, 13, 30)) == "2019-02-28"


@pytest.mark.parametrize("value", ["2019-2-28", "20190228", "28/02/2019", "2019-02-30", "", None, 20190228])
def test_parse_date_rejects_malformed(value):
    with pytest.raises(InvalidDateError):
        parse_date(value)


def test_invalid_date_error_is_a_validation_error():
    assert issubclass(InvalidDateError, ValidationError)
    assert issubclass(InvalidDateError, ValueError)


def test_to_date_accepts_compact_strings():
    assert to_date("20180131") == date(2018, 1, 31)
    with pytest.raises(InvalidDateError):
        to_date("31-01-2018")
    with pytest.raises(InvalidDateError):
        to_date(1.5)


def test_next_and_previous_day_cross_boundaries():
    assert next_day("2019-12-31") == date(2020, 1, 1)
    assert previous_day("2020-03-01") == date(2020, 2, 29)


def test_nald_date_formatters():
    assert calendar_to_iso("31/01/2018") == "2018-01-31"
    assert calendar_to_sortable("31/01/2018") == "20180131"
    assert returns_to_iso("20180131") == "2018-01-31"
    assert iso_to_readable("2018-11-01") == "1 November 2018"


@pytest.mark.parametrize("value", [None, "null", "31/13/2018", ""])
def test_nald_date_formatters_return_none_for_invalid(value):
    assert calendar_to_iso(value) is None
    assert calendar_to_sortable(value) is None
    assert returns_to_iso(value) is None
    assert iso_to_readable(value) is None
