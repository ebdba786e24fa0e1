# tests/conftest.py
import pytest

from abstractionlib.core import AbstractionPeriod


@pytest.fixture
def abs_periods():
    return {
        "all_year": AbstractionPeriod(start_day=1, start_month=1, end_day=31, end_month=12),
        "single_range": AbstractionPeriod(start_day=1, start_month=4, end_day=31, end_month=10),
        "double_range": AbstractionPeriod(start_day=1, start_month=12, end_day=30, end_month=4),
        "ends_1_april": AbstractionPeriod(start_day=31, start_month=10, end_day=1, end_month=4),
    }


@pytest.fixture
def charge_version():
    return {"startDate": "2018-04-01", "endDate": "2019-03-31"}
