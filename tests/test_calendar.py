import pytest

from timealgebra import MAXYEAR, MINYEAR, days_in_month, is_leap_year
from timealgebra._calendar import (
    MAXORDINAL,
    date_of_ordinal,
    days_before_month,
    days_before_year,
    ordinal_of,
)


@pytest.mark.parametrize(
    "year, expected",
    [(1, False), (4, True), (100, False), (400, True), (1900, False),
     (2000, True), (2023, False), (2024, True), (9999, False)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "year, month, expected",
    [(2021, 1, 31), (2021, 2, 28), (2020, 2, 29), (1900, 2, 28),
     (2000, 2, 29), (2021, 4, 30), (2021, 12, 31)],
)
def test_days_in_month(year, month, expected):
    assert days_in_month(year, month) == expected


def test_days_before_year():
    assert days_before_year(1) == 0
    assert days_before_year(2) == 365
    assert days_before_year(5) == 4 * 365 + 1
    assert days_before_year(401) == 146_097


def test_days_before_month():
    assert days_before_month(2021, 1) == 0
    assert days_before_month(2021, 3) == 59
    assert days_before_month(2020, 3) == 60
    assert days_before_month(2021, 12) == 334


@pytest.mark.parametrize(
    "ymd, ordinal",
    [
        ((1, 1, 1), 1),
        ((1, 12, 31), 365),
        ((4, 12, 31), 1461),
        ((100, 3, 1), 36_219),
        ((400, 12, 31), 146_097),
        ((401, 1, 1), 146_098),
        ((1970, 1, 1), 719_163),
        ((2000, 1, 1), 730_120),
        ((2000, 3, 1), 730_180),
        ((MAXYEAR, 12, 31), 3_652_059),
    ],
)
def test_known_ordinals(ymd, ordinal):
    assert ordinal_of(*ymd) == ordinal
    assert date_of_ordinal(ordinal) == ymd


def test_maxordinal():
    assert MAXORDINAL == 3_652_059


@pytest.mark.parametrize(
    "year",
    [MINYEAR, 3, 4, 99, 100, 101, 399, 400, 1600, 1700, 1800, 1900, 2000,
     2100, 2200, 2300, 2400, MAXYEAR],
)
def test_year_round_trip(year):
    previous = ordinal_of(year, 1, 1) - 1
    for month in range(1, 13):
        for day in range(1, days_in_month(year, month) + 1):
            n = ordinal_of(year, month, day)
            assert n == previous + 1
            assert date_of_ordinal(n) == (year, month, day)
            previous = n


def test_full_range_round_trip():
    previous = (0, 12, 31)
    for n in range(1, MAXORDINAL + 1):
        ymd = date_of_ordinal(n)
        assert ymd > previous
        assert ordinal_of(*ymd) == n
        previous = ymd
    assert previous == (MAXYEAR, 12, 31)
