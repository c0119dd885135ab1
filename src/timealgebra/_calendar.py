# The MIT License (MIT)
#
# Copyright (c) Arie Bovenberg
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""Proleptic Gregorian calendar math.

Ordinals count days with January 1st of year 1 as day 1.
"""
from __future__ import annotations

MINYEAR = 1
MAXYEAR = 9999

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_DAYS_IN_MONTH_LEAP = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def _cumulative(days_per_month: tuple[int, ...]) -> tuple[int, ...]:
    total = 0
    result = [0]
    for days in days_per_month:
        total += days
        result.append(total)
    return tuple(result)


# index N holds the number of days before month N + 1
_DAYS_BEFORE_MONTH = _cumulative(_DAYS_IN_MONTH)
_DAYS_BEFORE_MONTH_LEAP = _cumulative(_DAYS_IN_MONTH_LEAP)

# number of days in 400, 100 and 4 year blocks
_DI400Y = 365 * 303 + 366 * 97
_DI100Y = 365 * 76 + 366 * 24
_DI4Y = 365 * 3 + 366


def is_leap_year(year: int) -> bool:
    """Whether the year is a leap year

    Example
    -------

    >>> is_leap_year(2000)
    True
    >>> is_leap_year(1900)
    False

    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    return (_DAYS_IN_MONTH_LEAP if is_leap_year(year) else _DAYS_IN_MONTH)[
        month - 1
    ]


def days_before_year(year: int) -> int:
    """Number of days before January 1st of the given year"""
    y = year - 1
    leap_years = y // 4 - y // 100 + y // 400
    return leap_years * 366 + (y - leap_years) * 365


def days_before_month(year: int, month: int) -> int:
    """Number of days in the year preceding the first day of the month"""
    return (
        _DAYS_BEFORE_MONTH_LEAP if is_leap_year(year) else _DAYS_BEFORE_MONTH
    )[month - 1]


def ordinal_of(year: int, month: int, day: int) -> int:
    """Convert a (valid) year, month and day to its proleptic ordinal

    Example
    -------

    >>> ordinal_of(1, 1, 1)
    1
    >>> ordinal_of(2000, 3, 1)
    730180

    """
    return days_before_year(year) + days_before_month(year, month) + day


def date_of_ordinal(n: int) -> tuple[int, int, int]:
    """Inverse of :func:`ordinal_of`

    The day count is split into blocks of 400, 100, 4 and 1 years,
    so the cost doesn't depend on the year.
    """
    n400, rem = divmod(n - 1, _DI400Y)
    n100, rem = divmod(rem, _DI100Y)
    n4, rem = divmod(rem, _DI4Y)
    n1, rem = divmod(rem, 365)
    year = 1 + n400 * 400 + n100 * 100 + n4 * 4 + n1
    # Four whole blocks only fit on the last day of a leap year,
    # which the divisions above attribute to the next year.
    if n1 == 4 or n100 == 4:
        return year - 1, 12, 31
    # the fourth year of a block is a leap year, except at the end of a
    # century which isn't also the end of a 400 year cycle.
    leap = n1 == 3 and (n4 != 24 or n100 == 3)
    cumulative = _DAYS_BEFORE_MONTH_LEAP if leap else _DAYS_BEFORE_MONTH
    month = 1
    while month < 12 and rem >= cumulative[month]:
        month += 1
    return year, month, rem - cumulative[month - 1] + 1


MAXORDINAL = ordinal_of(MAXYEAR, 12, 31)
