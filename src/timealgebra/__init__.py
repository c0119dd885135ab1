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

# Maintainer's notes:
#
# - The value types, timezones and the arithmetic functions live in one file.
#   They all 'know' about each other, and this prevents circular imports.
#   Only the calendar math (no dependencies) and the expression engine
#   (depends on everything here) are separate modules.
# - The operators on the value types are thin wrappers around the
#   free functions add(), sub(), neg() and cmp(), which hold all the rules
#   about which combinations of operands are allowed.
# - Timezone identity (``is``) is significant: two values sharing the same
#   timezone instance are compared on their wall clock, without consulting
#   offsets. Don't replace these checks with ``==``.
from __future__ import annotations

__version__ = "0.1.0"

import logging
import math
import time as _time
from datetime import datetime as _datetime, timezone as _timezone
from operator import attrgetter
from typing import TYPE_CHECKING, ClassVar, Literal, Optional, Tuple, Union

from ._calendar import (
    MAXORDINAL,
    MAXYEAR,
    MINYEAR,
    date_of_ordinal,
    days_in_month,
    is_leap_year,
    ordinal_of,
)

__all__ = [
    "MINYEAR",
    "MAXYEAR",
    "Duration",
    "Date",
    "Time",
    "DateTime",
    "TZInfo",
    "Timezone",
    "LocalTimezone",
    "LOCAL",
    "hours",
    "minutes",
    "add",
    "sub",
    "neg",
    "cmp",
    "is_leap_year",
    "days_in_month",
    "TemporalError",
    "TemporalTypeError",
    "TemporalValueError",
    "TemporalNotImplementedError",
    "ExpressionError",
    "ExpressionSyntaxError",
    "ExpressionExecutionError",
    "ExpressionEvaluator",
    "dtexpr",
]

logger = logging.getLogger(__name__)


class NOT_SET:
    pass  # sentinel for when no value is passed


Fold = Literal[0, 1]


class TemporalError(Exception):
    """Base class of all errors raised by this library"""


class TemporalTypeError(TemporalError, TypeError):
    """An operand is of the wrong type, or the combination of operand
    types isn't supported by the operation"""


class TemporalValueError(TemporalError, ValueError):
    """An operand has the right type, but an invalid value"""


class TemporalNotImplementedError(TemporalError, NotImplementedError):
    """A :class:`TZInfo` subclass doesn't implement a required method"""


class _Value:
    """Shared behavior of the immutable value types.

    Comparisons are only defined between values of the same type.
    """

    __slots__ = ()

    if not TYPE_CHECKING:  # pragma: no branch

        def __eq__(self, other: object) -> bool:
            if not isinstance(other, type(self)):
                return NotImplemented
            return cmp(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return cmp(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return cmp(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return cmp(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return cmp(self, other) >= 0

    # We don't need to copy, because it's immutable
    def __copy__(self):
        return self

    def __deepcopy__(self, _: object):
        return self


class Duration(_Value):
    """A signed span of time, normalized to days, seconds and microseconds

    Any combination of (possibly fractional or negative) components may be
    given. They are carried over so that ``0 <= seconds < 86400`` and
    ``0 <= microseconds < 1_000_000``. Only ``days`` carries the sign.

    Example
    -------

    >>> Duration(hours=1, minutes=30)
    Duration(1:30:00)
    >>> Duration(seconds=-1)
    Duration(-1 day, 23:59:59)

    Raises
    ------
    TemporalValueError
        If a component isn't a number,
        or the result is beyond :attr:`Duration.min` or :attr:`Duration.max`
    """

    __slots__ = ("_days", "_seconds", "_microseconds")

    min: ClassVar[Duration]
    """The most negative duration, ``Duration(days=-999_999_999)``"""
    max: ClassVar[Duration]
    """The most positive duration"""
    resolution: ClassVar[Duration]
    """The smallest difference between two durations, one microsecond"""
    ZERO: ClassVar[Duration]
    """A duration of zero"""

    def __init__(
        self,
        *,
        days: float = 0,
        seconds: float = 0,
        microseconds: float = 0,
        milliseconds: float = 0,
        minutes: float = 0,
        hours: float = 0,
        weeks: float = 0,
    ) -> None:
        for name, value in (
            ("days", days),
            ("seconds", seconds),
            ("microseconds", microseconds),
            ("milliseconds", milliseconds),
            ("minutes", minutes),
            ("hours", hours),
            ("weeks", weeks),
        ):
            if not isinstance(value, (int, float)) or value != value:
                raise TemporalValueError(
                    f"Duration component {name}={value!r} is not a number"
                )
            if isinstance(value, float) and math.isinf(value):
                raise TemporalValueError(
                    f"Duration component {name}={value!r} is out of range"
                )

        microseconds += milliseconds * 1000
        seconds += minutes * 60 + hours * 3600
        days += weeks * 7

        # Move fractions down to the next smaller unit
        days, fraction = divmod(days, 1)
        seconds += fraction * 86_400
        seconds, fraction = divmod(seconds, 1)
        microseconds += fraction * 1_000_000
        if not isinstance(microseconds, int):
            # halves round up, towards positive infinity
            microseconds = math.floor(microseconds + 0.5)

        # Floored division keeps the remainders non-negative
        carry, microseconds = divmod(microseconds, 1_000_000)
        carry, seconds = divmod(int(seconds) + carry, 86_400)
        days = int(days) + carry

        if not -999_999_999 <= days <= 999_999_999:
            raise TemporalValueError(
                f"Duration of {days} days is out of range "
                "(must be between -999999999 and 999999999 days)"
            )
        self._days = days
        self._seconds = seconds
        self._microseconds = microseconds

    @classmethod
    def _unchecked(cls, days: int, seconds: int, microseconds: int) -> Duration:
        self = _object_new(cls)
        self._days = days
        self._seconds = seconds
        self._microseconds = microseconds
        return self

    @property
    def days(self) -> int:
        """Between -999_999_999 and 999_999_999 inclusive"""
        return self._days

    @property
    def seconds(self) -> int:
        """Between 0 and 86_399 inclusive"""
        return self._seconds

    @property
    def microseconds(self) -> int:
        """Between 0 and 999_999 inclusive"""
        return self._microseconds

    def total_seconds(self) -> float:
        """The total duration in seconds

        Example
        -------

        >>> Duration(minutes=2, seconds=1, microseconds=500_000).total_seconds()
        121.5

        """
        return self.in_microseconds() / 1_000_000

    def in_microseconds(self) -> int:
        """The total duration in microseconds

        >>> Duration(seconds=2, microseconds=50).in_microseconds()
        2_000_050

        """
        return (
            self._days * 86_400 + self._seconds
        ) * 1_000_000 + self._microseconds

    def _as_tuple(self) -> tuple[int, int, int]:
        return (self._days, self._seconds, self._microseconds)

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __bool__(self) -> bool:
        """True if the duration is non-zero

        Example
        -------

        >>> bool(Duration())
        False
        >>> bool(Duration(minutes=1))
        True

        """
        return bool(self._days or self._seconds or self._microseconds)

    def __add__(self, other: Duration) -> Duration:
        """Add a duration, or shift a date, time or datetime by this duration

        Example
        -------

        >>> Duration(hours=1) + Duration(minutes=30)
        Duration(1:30:00)

        """
        if not isinstance(other, _ARITHMETIC_TYPES):
            return NotImplemented
        return add(self, other)

    def __radd__(self, other: Duration) -> Duration:
        if not isinstance(other, _ARITHMETIC_TYPES):
            return NotImplemented
        return add(other, self)

    def __sub__(self, other: Duration) -> Duration:
        """Subtract two durations

        Example
        -------

        >>> Duration(hours=1, minutes=30) - Duration(minutes=30)
        Duration(1:00:00)

        """
        if not isinstance(other, Duration):
            return NotImplemented
        return sub(self, other)

    def __neg__(self) -> Duration:
        """Negate the duration

        Example
        -------

        >>> -Duration(hours=1, minutes=30)
        Duration(-1 day, 22:30:00)

        """
        return neg(self)

    def __pos__(self) -> Duration:
        return self

    def __abs__(self) -> Duration:
        """The absolute value of the duration"""
        return neg(self) if self._days < 0 else self

    def __str__(self) -> str:
        """Format as ``[D day[s], ]H:MM:SS[.ffffff]``"""
        minutes, seconds = divmod(self._seconds, 60)
        hours, minutes = divmod(minutes, 60)
        s = f"{hours}:{minutes:02}:{seconds:02}"
        if self._microseconds:
            s += f".{self._microseconds:06}"
        if self._days:
            s = f"{self._days} day{'s' * (abs(self._days) != 1)}, {s}"
        return s

    def __repr__(self) -> str:
        return f"Duration({self})"


class Date(_Value):
    """A date in the proleptic Gregorian calendar, without a time component

    Example
    -------

    >>> d = Date(2021, 1, 2)
    Date(2021-01-02)

    Raises
    ------
    TemporalValueError
        If a field is out of range for the calendar
    """

    __slots__ = ("_year", "_month", "_day")

    min: ClassVar[Date]
    """The earliest representable date, ``Date(MINYEAR, 1, 1)``"""
    max: ClassVar[Date]
    """The latest representable date, ``Date(MAXYEAR, 12, 31)``"""
    resolution: ClassVar[Duration]
    """The smallest difference between two dates, one day"""

    def __init__(self, year: int, month: int, day: int) -> None:
        _check_date_fields(year, month, day)
        self._year = year
        self._month = month
        self._day = day

    @classmethod
    def _unchecked(cls, year: int, month: int, day: int) -> Date:
        self = _object_new(cls)
        self._year = year
        self._month = month
        self._day = day
        return self

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def day(self) -> int:
        return self._day

    @classmethod
    def from_ordinal(cls, ordinal: int, /) -> Date:
        """Create from a proleptic Gregorian ordinal,
        where January 1st of year 1 has ordinal 1.
        Inverse of :meth:`to_ordinal`

        Example
        -------

        >>> Date.from_ordinal(730_120)
        Date(2000-01-01)

        """
        _check_int("ordinal", ordinal)
        return cls._unchecked(*_checked_date_of_ordinal(ordinal))

    def to_ordinal(self) -> int:
        """The proleptic Gregorian ordinal of the date

        Example
        -------

        >>> Date(1, 1, 1).to_ordinal()
        1

        """
        return ordinal_of(self._year, self._month, self._day)

    @classmethod
    def today(cls) -> Date:
        """The current date in the system timezone"""
        now = _time.localtime()
        return cls._unchecked(now.tm_year, now.tm_mon, now.tm_mday)

    def weekday(self) -> int:
        """The day of the week, where Monday is 0 and Sunday is 6"""
        return (self.to_ordinal() + 6) % 7

    def isoweekday(self) -> int:
        """The day of the week, where Monday is 1 and Sunday is 7

        Example
        -------

        >>> Date(2021, 1, 2).isoweekday()
        6

        """
        return self.weekday() + 1

    if TYPE_CHECKING:

        def replace(
            self,
            *,
            year: int | NOT_SET = NOT_SET(),
            month: int | NOT_SET = NOT_SET(),
            day: int | NOT_SET = NOT_SET(),
        ) -> Date: ...

    else:

        def replace(self, /, **kwargs) -> Date:
            """Construct a new instance with the given fields replaced.

            Example
            -------

            >>> Date(2020, 2, 29).replace(day=1)
            Date(2020-02-01)

            """
            return Date(
                **{
                    "year": self._year,
                    "month": self._month,
                    "day": self._day,
                    **kwargs,
                }
            )

    def isoformat(self) -> str:
        return f"{self._year:04}-{self._month:02}-{self._day:02}"

    __str__ = isoformat

    def __repr__(self) -> str:
        return f"Date({self})"

    def __hash__(self) -> int:
        return hash((self._year, self._month, self._day))

    def __add__(self, other: Duration) -> Date:
        """Shift the date by the whole days of the duration

        Example
        -------

        >>> Date(2021, 1, 31) + Duration(days=1)
        Date(2021-02-01)

        """
        if not isinstance(other, Duration):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    if TYPE_CHECKING:

        def __sub__(self, other: Duration | Date) -> Date | Duration: ...

    else:

        def __sub__(self, other):
            """Subtract a duration, or another date

            Example
            -------

            >>> Date(2021, 3, 1) - Date(2021, 2, 1)
            Duration(28 days, 0:00:00)

            """
            if not isinstance(other, (Duration, Date)):
                return NotImplemented
            return sub(self, other)


class TZInfo:
    """Base class for timezones.

    Subclasses must implement :meth:`utcoffset`, :meth:`dst` and
    :meth:`tzname`. Calling one that isn't implemented raises
    :class:`TemporalNotImplementedError`.

    The ``dt`` argument is the :class:`DateTime` the question is asked for,
    or ``None`` when there is no date context (for :class:`Time` values).
    """

    __slots__ = ()

    def utcoffset(self, dt: DateTime | None) -> Duration | None:
        """The offset of local time from UTC, positive east of UTC,
        or ``None`` if unknown"""
        raise TemporalNotImplementedError(
            f"{type(self).__name__} must implement utcoffset()"
        )

    def dst(self, dt: DateTime | None) -> Duration | None:
        """The daylight saving time adjustment,
        or ``None`` if DST information isn't known"""
        raise TemporalNotImplementedError(
            f"{type(self).__name__} must implement dst()"
        )

    def tzname(self, dt: DateTime | None) -> str | None:
        raise TemporalNotImplementedError(
            f"{type(self).__name__} must implement tzname()"
        )

    def fromutc(self, dt: DateTime) -> DateTime:
        """Convert a datetime whose fields express UTC time into the
        local time of this timezone.

        ``dt.tzinfo`` must be this very timezone instance.
        The default implementation assumes the standard offset
        (``utcoffset() - dst()``) is the same on both sides of the conversion.
        """
        _check_fromutc_arg(self, dt)
        offset = dt.utcoffset()
        dst = dt.dst()
        if offset is None or dst is None:
            raise TemporalValueError(
                "fromutc() requires utcoffset() and dst() to be known"
            )
        standard = sub(offset, dst)
        if standard:
            dt = add(dt, standard)
            dst = dt.dst()
            if dst is None:
                raise TemporalValueError(
                    "fromutc(): dst() gave inconsistent results"
                )
        return add(dt, dst)


class Timezone(TZInfo):
    """A timezone with a fixed offset from UTC

    Example
    -------

    >>> Timezone(Duration(hours=5))
    Timezone(UTC+05:00)
    >>> Timezone(Duration(hours=-3, minutes=-30), "NST")
    Timezone(NST)

    Raises
    ------
    TemporalValueError
        If the offset isn't strictly between -24 and 24 hours
    """

    __slots__ = ("_offset", "_name")

    utc: ClassVar[Timezone]
    """The UTC timezone, with a zero offset"""

    def __init__(self, offset: Duration, name: str | None = None) -> None:
        if not isinstance(offset, Duration):
            raise TemporalTypeError(
                f'offset must be a Duration, not "{_type_name(offset)}"'
            )
        _check_offset_range("offset", offset)
        if name is None:
            name = "UTC" + _format_offset(offset) if offset else "UTC"
        elif not isinstance(name, str):
            raise TemporalTypeError(
                f'name must be a string, not "{_type_name(name)}"'
            )
        self._offset = offset
        self._name = name

    def utcoffset(self, dt: DateTime | None) -> Duration:
        return self._offset

    def dst(self, dt: DateTime | None) -> None:
        return None

    def tzname(self, dt: DateTime | None) -> str:
        return self._name

    def fromutc(self, dt: DateTime) -> DateTime:
        _check_fromutc_arg(self, dt)
        return add(dt, self._offset)

    def __repr__(self) -> str:
        return f"Timezone({self._name})"


class LocalTimezone(TZInfo):
    """The timezone of the host system.

    Offsets are looked up on every call, so they follow DST transitions.
    The standard offset (without DST) is taken from January 1st, 2000
    when the instance is created.

    Note
    ----
    :data:`LOCAL` is created once on import and lives for the whole process.
    If the system timezone changes afterwards, create a new instance to
    pick up the new standard offset.
    """

    __slots__ = ("_std_offset",)

    def __init__(self) -> None:
        self._std_offset = _system_offset(_datetime(2000, 1, 1))
        logger.debug("System standard offset is %s", self._std_offset)

    def utcoffset(self, dt: DateTime | None) -> Duration:
        if dt is None:
            return self._std_offset
        return _system_offset(
            _datetime(
                dt.year,
                dt.month,
                dt.day,
                dt.hour,
                dt.minute,
                dt.second,
                dt.microsecond,
                fold=dt.fold,
            )
        )

    def dst(self, dt: DateTime | None) -> Duration:
        if dt is None:
            return Duration.ZERO
        return sub(self.utcoffset(dt), self._std_offset)

    def tzname(self, dt: DateTime | None) -> str:
        return _format_offset(self.utcoffset(dt))

    def fromutc(self, dt: DateTime) -> DateTime:
        _check_fromutc_arg(self, dt)
        try:
            local = _datetime(
                dt.year,
                dt.month,
                dt.day,
                dt.hour,
                dt.minute,
                dt.second,
                dt.microsecond,
                tzinfo=_timezone.utc,
            ).astimezone()
        except (OverflowError, OSError, ValueError) as e:
            raise TemporalValueError(
                f"{dt} can't be converted to the system timezone"
            ) from e
        return DateTime._unchecked(
            Date._unchecked(local.year, local.month, local.day),
            local.hour,
            local.minute,
            local.second,
            local.microsecond,
            self,
            0,
        )

    def __repr__(self) -> str:
        return "LocalTimezone()"


class Time(_Value):
    """A time of day, optionally with a timezone

    Without a timezone (or with one which doesn't know its offset),
    the time is *naive*. Otherwise it's *aware*.

    Example
    -------

    >>> Time(12, 30)
    Time(12:30:00)
    >>> Time(12, 30, tzinfo=Timezone(Duration(hours=2)))
    Time(12:30:00+02:00)

    Raises
    ------
    TemporalValueError
        If a field is out of range
    """

    __slots__ = (
        "_hour",
        "_minute",
        "_second",
        "_microsecond",
        "_tzinfo",
        "_fold",
    )

    min: ClassVar[Time]
    """The earliest representable time, ``Time(0, 0, 0, 0)``"""
    max: ClassVar[Time]
    """The latest representable time, ``Time(23, 59, 59, 999_999)``"""
    resolution: ClassVar[Duration]
    """The smallest difference between two times, one microsecond"""

    def __init__(
        self,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        tzinfo: TZInfo | None = None,
        *,
        fold: Fold = 0,
    ) -> None:
        _check_time_fields(hour, minute, second, microsecond, fold)
        _check_tzinfo(tzinfo)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond
        self._tzinfo = tzinfo
        self._fold = fold

    @classmethod
    def _unchecked(
        cls,
        hour: int,
        minute: int,
        second: int,
        microsecond: int,
        tzinfo: TZInfo | None,
        fold: int,
    ) -> Time:
        self = _object_new(cls)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond
        self._tzinfo = tzinfo
        self._fold = fold
        return self

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def microsecond(self) -> int:
        return self._microsecond

    @property
    def tzinfo(self) -> TZInfo | None:
        return self._tzinfo

    @property
    def fold(self) -> int:
        """0 or 1. Disambiguates wall times repeated when clocks are set back.
        0 is the earlier, 1 the later of the two moments."""
        return self._fold

    def utcoffset(self) -> Duration | None:
        """The offset of the timezone, asked without a date context"""
        if self._tzinfo is None:
            return None
        return _checked_offset("utcoffset", self._tzinfo.utcoffset(None))

    def dst(self) -> Duration | None:
        if self._tzinfo is None:
            return None
        return _checked_offset("dst", self._tzinfo.dst(None))

    def tzname(self) -> str | None:
        if self._tzinfo is None:
            return None
        return self._tzinfo.tzname(None)

    if TYPE_CHECKING:

        def replace(
            self,
            *,
            hour: int | NOT_SET = NOT_SET(),
            minute: int | NOT_SET = NOT_SET(),
            second: int | NOT_SET = NOT_SET(),
            microsecond: int | NOT_SET = NOT_SET(),
            tzinfo: TZInfo | None | NOT_SET = NOT_SET(),
            fold: Fold | NOT_SET = NOT_SET(),
        ) -> Time: ...

    else:

        def replace(self, /, **kwargs) -> Time:
            """Construct a new instance with the given fields replaced.

            Note
            ----
            ``tzinfo=None`` makes an aware time naive, without
            converting the time fields. Leaving out ``tzinfo``
            keeps the current timezone.

            Example
            -------

            >>> Time(12, 30, tzinfo=Timezone.utc).replace(tzinfo=None)
            Time(12:30:00)

            """
            return Time(
                **{
                    "hour": self._hour,
                    "minute": self._minute,
                    "second": self._second,
                    "microsecond": self._microsecond,
                    "tzinfo": self._tzinfo,
                    "fold": self._fold,
                    **kwargs,
                }
            )

    def isoformat(self) -> str:
        """Format as ``HH:MM:SS[.ffffff][±HH:MM[:SS[.ffffff]]]``"""
        s = _format_time(
            self._hour, self._minute, self._second, self._microsecond
        )
        offset = self.utcoffset()
        if offset is not None:
            s += _format_offset(offset)
        return s

    __str__ = isoformat

    def __repr__(self) -> str:
        return f"Time({self})"

    if not TYPE_CHECKING:  # pragma: no branch

        def __eq__(self, other: object) -> bool:
            """Compare for equality

            Naive and aware times are never equal.
            Aware times with different timezones are compared by their
            UTC equivalents.
            """
            if not isinstance(other, Time):
                return NotImplemented
            if _mixes_naive_and_aware(self, other):
                return False
            return cmp(self, other) == 0

    def __hash__(self) -> int:
        offset = self.utcoffset()
        total = _time_total(self)
        if offset is not None:
            total = (total - offset.in_microseconds()) % _DAY_MICROSECONDS
        return hash(total)

    def __add__(self, other: Duration) -> Time:
        """Shift the time by a duration, wrapping around midnight

        Example
        -------

        >>> Time(23, 30) + Duration(hours=1)
        Time(00:30:00)

        """
        if not isinstance(other, Duration):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    if TYPE_CHECKING:

        def __sub__(self, other: Duration | Time) -> Time | Duration: ...

    else:

        def __sub__(self, other):
            """Subtract a duration, or another time

            Example
            -------

            >>> Time(1, 0) - Time(0, 30)
            Duration(0:30:00)

            """
            if not isinstance(other, (Duration, Time)):
                return NotImplemented
            return sub(self, other)


class DateTime(_Value):
    """A date and a time of day, optionally with a timezone

    Without a timezone (or with one which doesn't know its offset),
    the datetime is *naive*. Otherwise it's *aware*.

    Example
    -------

    >>> DateTime(2000, 1, 1, 12, tzinfo=Timezone(Duration(hours=5)))
    DateTime(2000-01-01 12:00:00+05:00)

    Raises
    ------
    TemporalValueError
        If a field is out of range
    """

    __slots__ = (
        "_date",
        "_hour",
        "_minute",
        "_second",
        "_microsecond",
        "_tzinfo",
        "_fold",
    )
    _date: Date

    min: ClassVar[DateTime]
    """The earliest representable datetime, ``DateTime(MINYEAR, 1, 1)``"""
    max: ClassVar[DateTime]
    """The latest representable datetime"""
    resolution: ClassVar[Duration]
    """The smallest difference between two datetimes, one microsecond"""

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        tzinfo: TZInfo | None = None,
        *,
        fold: Fold = 0,
    ) -> None:
        self._date = Date(year, month, day)
        _check_time_fields(hour, minute, second, microsecond, fold)
        _check_tzinfo(tzinfo)
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond
        self._tzinfo = tzinfo
        self._fold = fold

    @classmethod
    def _unchecked(
        cls,
        date: Date,
        hour: int,
        minute: int,
        second: int,
        microsecond: int,
        tzinfo: TZInfo | None,
        fold: int,
    ) -> DateTime:
        self = _object_new(cls)
        self._date = date
        self._hour = hour
        self._minute = minute
        self._second = second
        self._microsecond = microsecond
        self._tzinfo = tzinfo
        self._fold = fold
        return self

    if TYPE_CHECKING:

        @property
        def year(self) -> int: ...

        @property
        def month(self) -> int: ...

        @property
        def day(self) -> int: ...

    else:
        year = property(attrgetter("_date.year"))
        month = property(attrgetter("_date.month"))
        day = property(attrgetter("_date.day"))

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @property
    def microsecond(self) -> int:
        return self._microsecond

    @property
    def tzinfo(self) -> TZInfo | None:
        return self._tzinfo

    @property
    def fold(self) -> int:
        """0 or 1. Disambiguates wall times repeated when clocks are set back.
        0 is the earlier, 1 the later of the two moments."""
        return self._fold

    @classmethod
    def combine(
        cls,
        date: Date,
        time: Time,
        tzinfo: TZInfo | None | NOT_SET = NOT_SET(),
    ) -> DateTime:
        """Combine a date and a time. The timezone of the time is used,
        unless ``tzinfo`` is given.

        Example
        -------

        >>> DateTime.combine(Date(2021, 1, 2), Time(3, 4))
        DateTime(2021-01-02 03:04:00)

        """
        if not isinstance(date, Date):
            raise TemporalTypeError(
                f'date must be a Date, not "{_type_name(date)}"'
            )
        if not isinstance(time, Time):
            raise TemporalTypeError(
                f'time must be a Time, not "{_type_name(time)}"'
            )
        if isinstance(tzinfo, NOT_SET):
            tzinfo = time.tzinfo
        else:
            _check_tzinfo(tzinfo)
        return cls._unchecked(
            date,
            time.hour,
            time.minute,
            time.second,
            time.microsecond,
            tzinfo,
            time.fold,
        )

    def date(self) -> Date:
        """The date part of the datetime"""
        return self._date

    def time(self) -> Time:
        """The time part of the datetime, without the timezone"""
        return Time._unchecked(
            self._hour,
            self._minute,
            self._second,
            self._microsecond,
            None,
            self._fold,
        )

    def timetz(self) -> Time:
        """The time part of the datetime, including the timezone"""
        return Time._unchecked(
            self._hour,
            self._minute,
            self._second,
            self._microsecond,
            self._tzinfo,
            self._fold,
        )

    def to_ordinal(self) -> int:
        return self._date.to_ordinal()

    def weekday(self) -> int:
        return self._date.weekday()

    def isoweekday(self) -> int:
        return self._date.isoweekday()

    def utcoffset(self) -> Duration | None:
        """The offset of the timezone at this datetime"""
        if self._tzinfo is None:
            return None
        return _checked_offset("utcoffset", self._tzinfo.utcoffset(self))

    def dst(self) -> Duration | None:
        if self._tzinfo is None:
            return None
        return _checked_offset("dst", self._tzinfo.dst(self))

    def tzname(self) -> str | None:
        if self._tzinfo is None:
            return None
        return self._tzinfo.tzname(self)

    if TYPE_CHECKING:

        def replace(
            self,
            *,
            year: int | NOT_SET = NOT_SET(),
            month: int | NOT_SET = NOT_SET(),
            day: int | NOT_SET = NOT_SET(),
            hour: int | NOT_SET = NOT_SET(),
            minute: int | NOT_SET = NOT_SET(),
            second: int | NOT_SET = NOT_SET(),
            microsecond: int | NOT_SET = NOT_SET(),
            tzinfo: TZInfo | None | NOT_SET = NOT_SET(),
            fold: Fold | NOT_SET = NOT_SET(),
        ) -> DateTime: ...

    else:

        def replace(self, /, **kwargs) -> DateTime:
            """Construct a new instance with the given fields replaced.

            Note
            ----
            ``tzinfo=None`` makes an aware datetime naive, without
            converting the date and time fields. Leaving out ``tzinfo``
            keeps the current timezone.

            Note
            ----
            If you need to shift the datetime by a duration,
            use the addition and subtraction operators instead.

            Example
            -------

            >>> d = DateTime(2020, 8, 15, 23, 12)
            >>> d.replace(year=2021)
            DateTime(2021-08-15 23:12:00)

            """
            return DateTime(
                **{
                    "year": self._date.year,
                    "month": self._date.month,
                    "day": self._date.day,
                    "hour": self._hour,
                    "minute": self._minute,
                    "second": self._second,
                    "microsecond": self._microsecond,
                    "tzinfo": self._tzinfo,
                    "fold": self._fold,
                    **kwargs,
                }
            )

    def as_timezone(self, tz: TZInfo | None = None) -> DateTime:
        """The same moment in time, expressed in another timezone.

        Naive datetimes are assumed to be in the system timezone.
        Without ``tz``, the result is a naive datetime in the system timezone.

        Example
        -------

        >>> d = DateTime(2020, 8, 15, 12, tzinfo=Timezone.utc)
        >>> d.as_timezone(Timezone(Duration(hours=2)))
        DateTime(2020-08-15 14:00:00+02:00)

        """
        _check_tzinfo(tz)
        if self._tzinfo is tz:
            return self
        offset = self.utcoffset()
        if offset is None and tz is None:
            return self
        if offset is None:
            local = self.replace(tzinfo=LOCAL)
            utc = sub(local, local.utcoffset())
        else:
            utc = sub(self, offset)
        target = LOCAL if tz is None else tz
        return target.fromutc(utc.replace(tzinfo=target)).replace(tzinfo=tz)

    def timestamp(self) -> float:
        """The POSIX timestamp. Naive datetimes are assumed to be
        in the system timezone.

        Example
        -------

        >>> DateTime(1970, 1, 1, tzinfo=Timezone.utc).timestamp()
        0.0

        """
        dt = self if self.utcoffset() is not None else self.replace(tzinfo=LOCAL)
        return sub(dt, _EPOCH).total_seconds()

    @classmethod
    def utc_from_timestamp(cls, ts: float, /) -> DateTime:
        """The naive UTC datetime of a POSIX timestamp"""
        return add(_EPOCH_NAIVE, Duration(seconds=ts))

    @classmethod
    def from_timestamp(cls, ts: float, /, tz: TZInfo | None = None) -> DateTime:
        """The datetime of a POSIX timestamp in the given timezone.
        Without ``tz``, the result is a naive datetime in the system timezone.
        Inverse of :meth:`timestamp`.
        """
        _check_tzinfo(tz)
        if tz is None:
            utc = cls.utc_from_timestamp(ts)
            return LOCAL.fromutc(utc.replace(tzinfo=LOCAL)).replace(tzinfo=None)
        return tz.fromutc(cls.utc_from_timestamp(ts).replace(tzinfo=tz))

    @classmethod
    def utcnow(cls) -> DateTime:
        """The current UTC date and time, as a naive datetime"""
        return cls.utc_from_timestamp(_time.time())

    @classmethod
    def now(cls, tz: TZInfo | None = None) -> DateTime:
        """The current date and time in the given timezone.
        Without ``tz``, the same as :meth:`today`.
        """
        return cls.from_timestamp(_time.time(), tz)

    @classmethod
    def today(cls) -> DateTime:
        """The current date and time in the system timezone,
        as a naive datetime"""
        return cls.from_timestamp(_time.time())

    def isoformat(self, sep: str = "T") -> str:
        """Format as ``YYYY-MM-DDTHH:MM:SS[.ffffff][±HH:MM[:SS[.ffffff]]]``"""
        s = self._date.isoformat() + sep
        s += _format_time(
            self._hour, self._minute, self._second, self._microsecond
        )
        offset = self.utcoffset()
        if offset is not None:
            s += _format_offset(offset)
        return s

    def __str__(self) -> str:
        """Same as :meth:`isoformat` with ``sep=" "``"""
        return self.isoformat(" ")

    def __repr__(self) -> str:
        return f"DateTime({self})"

    if not TYPE_CHECKING:  # pragma: no branch

        def __eq__(self, other: object) -> bool:
            """Compare for equality

            Naive and aware datetimes are never equal.
            Aware datetimes with different timezones are compared by
            the moment in time they represent.

            Example
            -------

            >>> DateTime(2000, 1, 1, 12, tzinfo=Timezone(hours(5))) == (
            ...     DateTime(2000, 1, 1, 7, tzinfo=Timezone.utc)
            ... )
            True

            """
            if not isinstance(other, DateTime):
                return NotImplemented
            if _mixes_naive_and_aware(self, other):
                return False
            return cmp(self, other) == 0

    def __hash__(self) -> int:
        offset = self.utcoffset()
        total = _datetime_total(self)
        if offset is not None:
            total -= offset.in_microseconds()
        return hash(total)

    def __add__(self, other: Duration) -> DateTime:
        """Shift the datetime by a duration

        Example
        -------

        >>> DateTime(2020, 12, 31, 23) + Duration(hours=2)
        DateTime(2021-01-01 01:00:00)

        """
        if not isinstance(other, Duration):
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    if TYPE_CHECKING:

        def __sub__(
            self, other: Duration | DateTime
        ) -> DateTime | Duration: ...

    else:

        def __sub__(self, other):
            """Subtract a duration, or another datetime

            Example
            -------

            >>> DateTime(2021, 1, 1) - DateTime(2020, 12, 31, 12)
            Duration(12:00:00)

            """
            if not isinstance(other, (Duration, DateTime)):
                return NotImplemented
            return sub(self, other)


Temporal = Union[Duration, Date, Time, DateTime]
_ARITHMETIC_TYPES = (Duration, Date, Time, DateTime)


def add(a: Temporal, b: Temporal) -> Temporal:
    """Add two values.

    Supported combinations (in either order):

    - duration + duration → duration
    - datetime + duration → datetime
    - date + duration → date (only the whole days are added)
    - time + duration → time (wraps around midnight)

    Raises
    ------
    TemporalTypeError
        For any other combination of operands
    TemporalValueError
        If the result is out of range
    """
    if isinstance(a, Duration):
        if isinstance(b, Duration):
            return Duration(
                days=a._days + b._days,
                seconds=a._seconds + b._seconds,
                microseconds=a._microseconds + b._microseconds,
            )
        elif isinstance(b, DateTime):
            return _shift_datetime(b, a._days, a._seconds, a._microseconds)
        elif isinstance(b, Date):
            return _shift_date(b, a._days)
        elif isinstance(b, Time):
            return _shift_time(b, a._seconds, a._microseconds)
    elif isinstance(b, Duration):
        if isinstance(a, DateTime):
            return _shift_datetime(a, b._days, b._seconds, b._microseconds)
        elif isinstance(a, Date):
            return _shift_date(a, b._days)
        elif isinstance(a, Time):
            return _shift_time(a, b._seconds, b._microseconds)
    raise TemporalTypeError(
        f'Cannot add "{_type_name(a)}" and "{_type_name(b)}"'
    )


def sub(a: Temporal, b: Temporal) -> Temporal:
    """Subtract ``b`` from ``a``.

    Supported combinations:

    - duration - duration → duration
    - datetime - duration → datetime
    - datetime - datetime → duration
    - date - duration → date (only the whole days are subtracted)
    - date - date → duration
    - time - duration → time (wraps around midnight)
    - time - time → duration (less than one day)

    Raises
    ------
    TemporalTypeError
        For any other combination of operands,
        or when mixing naive and aware values
    TemporalValueError
        If the result is out of range
    """
    if isinstance(b, Duration):
        if isinstance(a, Duration):
            return Duration(
                days=a._days - b._days,
                seconds=a._seconds - b._seconds,
                microseconds=a._microseconds - b._microseconds,
            )
        elif isinstance(a, DateTime):
            return _shift_datetime(a, -b._days, -b._seconds, -b._microseconds)
        elif isinstance(a, Date):
            return _shift_date(a, -b._days)
        elif isinstance(a, Time):
            return _shift_time(a, -b._seconds, -b._microseconds)
    elif isinstance(a, DateTime) and isinstance(b, DateTime):
        a_offset, b_offset = _frame_offsets(a, b, "subtract") or (0, 0)
        return Duration(
            microseconds=(_datetime_total(a) - a_offset)
            - (_datetime_total(b) - b_offset)
        )
    elif isinstance(a, Date) and isinstance(b, Date):
        return Duration(days=a.to_ordinal() - b.to_ordinal())
    elif isinstance(a, Time) and isinstance(b, Time):
        a_offset, b_offset = _frame_offsets(a, b, "subtract") or (0, 0)
        # the day component is dropped: the result is less than one day
        seconds, microseconds = divmod(
            ((_time_total(a) - a_offset) - (_time_total(b) - b_offset))
            % _DAY_MICROSECONDS,
            1_000_000,
        )
        return Duration._unchecked(0, seconds, microseconds)
    raise TemporalTypeError(
        f'Cannot subtract "{_type_name(b)}" from "{_type_name(a)}"'
    )


def neg(a: Duration) -> Duration:
    """Negate a duration

    Raises
    ------
    TemporalTypeError
        If the operand isn't a duration
    """
    if isinstance(a, Duration):
        return Duration(
            days=-a._days, seconds=-a._seconds, microseconds=-a._microseconds
        )
    raise TemporalTypeError(f'Cannot negate "{_type_name(a)}"')


def cmp(a: Temporal, b: Temporal) -> int:
    """Compare two values of the same type. Returns -1, 0 or 1.

    Aware times and datetimes with different timezones are compared
    by their UTC equivalents. Otherwise, the ``fold`` breaks ties.

    Raises
    ------
    TemporalTypeError
        If the operands are of different types (or not supported),
        or when comparing naive and aware values
    """
    if isinstance(a, Duration) and isinstance(b, Duration):
        return _cmp(a._as_tuple(), b._as_tuple())
    elif isinstance(a, DateTime) and isinstance(b, DateTime):
        offsets = _frame_offsets(a, b, "compare")
        if offsets is None:
            return _cmp(
                (_datetime_total(a), a._fold), (_datetime_total(b), b._fold)
            )
        # the offsets already reflect the fold
        return _cmp(
            _datetime_total(a) - offsets[0], _datetime_total(b) - offsets[1]
        )
    elif isinstance(a, Date) and isinstance(b, Date):
        return _cmp(a.to_ordinal(), b.to_ordinal())
    elif isinstance(a, Time) and isinstance(b, Time):
        a_offset, b_offset = _frame_offsets(a, b, "compare") or (0, 0)
        return _cmp(
            ((_time_total(a) - a_offset) % _DAY_MICROSECONDS, a._fold),
            ((_time_total(b) - b_offset) % _DAY_MICROSECONDS, b._fold),
        )
    raise TemporalTypeError(
        f'Cannot compare "{_type_name(a)}" to "{_type_name(b)}"'
    )


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


_DAY_MICROSECONDS = 86_400_000_000


def _time_total(t: _Zoned) -> int:
    # microseconds since midnight on the wall clock
    return (
        t._hour * 3600 + t._minute * 60 + t._second
    ) * 1_000_000 + t._microsecond


def _datetime_total(dt: DateTime) -> int:
    # microseconds since the start of ordinal day 0 on the wall clock
    return dt._date.to_ordinal() * _DAY_MICROSECONDS + _time_total(dt)


_Zoned = Union[Time, DateTime]


def _mixes_naive_and_aware(a: _Zoned, b: _Zoned) -> bool:
    return a._tzinfo is not b._tzinfo and (
        (a.utcoffset() is None) != (b.utcoffset() is None)
    )


def _frame_offsets(
    a: _Zoned, b: _Zoned, action: str
) -> Optional[Tuple[int, int]]:
    # Values sharing a timezone instance (or both naive) compare on their
    # wall clock, signalled by None. Otherwise, the UTC offsets
    # (in microseconds) are to be subtracted from both.
    if a._tzinfo is b._tzinfo:
        return None
    a_offset = a.utcoffset()
    b_offset = b.utcoffset()
    if a_offset is None and b_offset is None:
        return None
    if a_offset is None or b_offset is None:
        kind = type(a).__name__
        raise TemporalTypeError(
            f'Cannot {action} naive "{kind}" and aware "{kind}"'
        )
    return a_offset.in_microseconds(), b_offset.in_microseconds()


def _shift_datetime(
    dt: DateTime, days: int, seconds: int, microseconds: int
) -> DateTime:
    carry, microsecond = divmod(dt._microsecond + microseconds, 1_000_000)
    carry, secs = divmod(
        dt._hour * 3600 + dt._minute * 60 + dt._second + seconds + carry,
        86_400,
    )
    hour, secs = divmod(secs, 3600)
    minute, second = divmod(secs, 60)
    return DateTime._unchecked(
        Date._unchecked(
            *_checked_date_of_ordinal(dt._date.to_ordinal() + days + carry)
        ),
        hour,
        minute,
        second,
        microsecond,
        dt._tzinfo,
        0,
    )


def _shift_date(d: Date, days: int) -> Date:
    return Date._unchecked(*_checked_date_of_ordinal(d.to_ordinal() + days))


def _shift_time(t: Time, seconds: int, microseconds: int) -> Time:
    carry, microsecond = divmod(t._microsecond + microseconds, 1_000_000)
    # days are discarded: the time wraps around midnight
    secs = (
        t._hour * 3600 + t._minute * 60 + t._second + seconds + carry
    ) % 86_400
    hour, secs = divmod(secs, 3600)
    minute, second = divmod(secs, 60)
    return Time._unchecked(
        hour, minute, second, microsecond, t._tzinfo, t._fold
    )


def _checked_date_of_ordinal(ordinal: int) -> tuple[int, int, int]:
    if not 1 <= ordinal <= MAXORDINAL:
        raise TemporalValueError(
            f"Date with ordinal {ordinal} is out of range "
            f"(years {MINYEAR}..{MAXYEAR})"
        )
    return date_of_ordinal(ordinal)


def _type_name(obj: object) -> str:
    return "None" if obj is None else type(obj).__name__


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int):
        raise TemporalTypeError(
            f'{name} must be an integer, not "{_type_name(value)}"'
        )


def _check_date_fields(year: int, month: int, day: int) -> None:
    _check_int("year", year)
    _check_int("month", month)
    _check_int("day", day)
    if not MINYEAR <= year <= MAXYEAR:
        raise TemporalValueError(
            f"year must be between {MINYEAR} and {MAXYEAR}, got {year}"
        )
    if not 1 <= month <= 12:
        raise TemporalValueError(f"month must be between 1 and 12, got {month}")
    if not 1 <= day <= days_in_month(year, month):
        raise TemporalValueError(
            f"day {day} is out of range for {year:04}-{month:02}"
        )


def _check_time_fields(
    hour: int, minute: int, second: int, microsecond: int, fold: int
) -> None:
    _check_int("hour", hour)
    _check_int("minute", minute)
    _check_int("second", second)
    _check_int("microsecond", microsecond)
    _check_int("fold", fold)
    if not 0 <= hour <= 23:
        raise TemporalValueError(f"hour must be between 0 and 23, got {hour}")
    if not 0 <= minute <= 59:
        raise TemporalValueError(
            f"minute must be between 0 and 59, got {minute}"
        )
    if not 0 <= second <= 59:
        raise TemporalValueError(
            f"second must be between 0 and 59, got {second}"
        )
    if not 0 <= microsecond <= 999_999:
        raise TemporalValueError(
            f"microsecond must be between 0 and 999999, got {microsecond}"
        )
    if fold not in (0, 1):
        raise TemporalValueError(f"fold must be 0 or 1, got {fold}")


def _check_tzinfo(tz: object) -> None:
    if tz is not None and not isinstance(tz, TZInfo):
        raise TemporalTypeError(
            f'tzinfo must be a TZInfo or None, not "{_type_name(tz)}"'
        )


def _check_offset_range(name: str, offset: Duration) -> None:
    if not _MIN_OFFSET < offset < _MAX_OFFSET:
        raise TemporalValueError(
            f"{name} must be strictly between -24 and 24 hours, got {offset!r}"
        )


def _checked_offset(name: str, offset: object) -> Duration | None:
    if offset is None:
        return None
    if not isinstance(offset, Duration):
        raise TemporalTypeError(
            f'{name}() must return a Duration or None, not "{_type_name(offset)}"'
        )
    _check_offset_range(name, offset)
    return offset


def _check_fromutc_arg(tz: TZInfo, dt: object) -> None:
    if not isinstance(dt, DateTime):
        raise TemporalTypeError(
            f'fromutc() requires a DateTime, not "{_type_name(dt)}"'
        )
    if dt._tzinfo is not tz:
        raise TemporalValueError("fromutc() requires dt.tzinfo to be this timezone")


def _system_offset(naive: _datetime) -> Duration:
    try:
        offset = naive.astimezone().utcoffset()
    except (OverflowError, OSError, ValueError) as e:
        raise TemporalValueError(
            f"Cannot determine the system offset at {naive}"
        ) from e
    if offset is None:
        raise TemporalValueError(f"The system gave no offset at {naive}")
    return Duration(
        days=offset.days,
        seconds=offset.seconds,
        microseconds=offset.microseconds,
    )


def _format_time(hour: int, minute: int, second: int, microsecond: int) -> str:
    s = f"{hour:02}:{minute:02}:{second:02}"
    if microsecond:
        s += f".{microsecond:06}"
    return s


def _format_offset(offset: Duration) -> str:
    # Only valid for offsets strictly between -24 and 24 hours
    sign = "+"
    if offset._days < 0:
        sign = "-"
        offset = neg(offset)
    minutes, seconds = divmod(offset._seconds, 60)
    hours, minutes = divmod(minutes, 60)
    s = f"{sign}{hours:02}:{minutes:02}"
    if offset._microseconds:
        s += f":{seconds:02}.{offset._microseconds:06}"
    elif seconds:
        s += f":{seconds:02}"
    return s


# Helpers that pre-compute/lookup as much as possible
_object_new = object.__new__

Duration.ZERO = Duration()
Duration.min = Duration(days=-999_999_999)
Duration.max = Duration(
    days=999_999_999, hours=23, minutes=59, seconds=59, microseconds=999_999
)
Duration.resolution = Duration(microseconds=1)
_MIN_OFFSET = Duration(hours=-24)
_MAX_OFFSET = Duration(hours=24)

Date.min = Date(MINYEAR, 1, 1)
Date.max = Date(MAXYEAR, 12, 31)
Date.resolution = Duration(days=1)

Time.min = Time(0, 0, 0, 0)
Time.max = Time(23, 59, 59, 999_999)
Time.resolution = Duration(microseconds=1)

DateTime.min = DateTime(MINYEAR, 1, 1)
DateTime.max = DateTime(MAXYEAR, 12, 31, 23, 59, 59, 999_999)
DateTime.resolution = Duration(microseconds=1)

Timezone.utc = Timezone(Duration.ZERO)
_EPOCH = DateTime(1970, 1, 1, tzinfo=Timezone.utc)
_EPOCH_NAIVE = DateTime(1970, 1, 1)

LOCAL: LocalTimezone = LocalTimezone()
"""The timezone of the host system"""


def hours(i: float, /) -> Duration:
    """Create a :class:`Duration` with the given number of hours.
    ``hours(1) == Duration(hours=1)``
    """
    return Duration(hours=i)


def minutes(i: float, /) -> Duration:
    """Create a :class:`Duration` with the given number of minutes.
    ``minutes(1) == Duration(minutes=1)``
    """
    return Duration(minutes=i)


# The expression engine builds on everything above
from ._expression import (  # noqa: E402
    ExpressionError,
    ExpressionEvaluator,
    ExpressionExecutionError,
    ExpressionSyntaxError,
    dtexpr,
)
