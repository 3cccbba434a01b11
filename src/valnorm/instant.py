"""Absolute points in time with nanosecond resolution.

``datetime`` stops at microseconds and carries a wall-clock/zone pair, so the
temporal target produces ``Instant``, a single integer offset in nanoseconds
from the Unix epoch.  Display formatting is the caller's job
(``to_datetime`` / ``isoformat``).

The civil-calendar helpers work on the proleptic Gregorian calendar for any
year, including years ``datetime`` cannot represent.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

NS_PER_SECOND = 1_000_000_000
NS_PER_MILLI = 1_000_000
NS_PER_MICRO = 1_000
SECONDS_PER_DAY = 86_400

_EPOCH = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)

# 0001-01-01T00:00:00Z, the failure value of every temporal coercion.
ZERO_UNIX_SECONDS = -62_135_596_800


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146_097 + doe - 719_468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Inverse of ``days_from_civil``: ``(year, month, day)``."""
    z = days + 719_468
    era = z // 146_097
    doe = z - era * 146_097
    yoe = (doe - doe // 1460 + doe // 36_524 - doe // 146_096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


@dataclass(frozen=True, order=True)
class Instant:
    """An absolute instant: nanoseconds since 1970-01-01T00:00:00Z.

    ``Instant()`` is the zero instant (``0001-01-01T00:00:00Z``).
    """

    unix_nano: int = ZERO_UNIX_SECONDS * NS_PER_SECOND

    # -- construction -------------------------------------------------------

    @classmethod
    def zero(cls) -> Instant:
        return cls()

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> Instant:
        """Build from whole seconds plus a (possibly out-of-range) nanosecond part."""
        return cls(seconds * NS_PER_SECOND + nanoseconds)

    @classmethod
    def from_datetime(cls, value: datetime.datetime) -> Instant:
        """Convert a ``datetime``; naive values are taken as UTC."""
        if value.tzinfo is None or value.utcoffset() is None:
            value = value.replace(tzinfo=datetime.timezone.utc)
        delta = value - _EPOCH
        seconds = delta.days * SECONDS_PER_DAY + delta.seconds
        return cls(seconds * NS_PER_SECOND + delta.microseconds * NS_PER_MICRO)

    @classmethod
    def from_date(cls, value: datetime.date) -> Instant:
        """Midnight UTC of *value*."""
        days = days_from_civil(value.year, value.month, value.day)
        return cls(days * SECONDS_PER_DAY * NS_PER_SECOND)

    # -- accessors ----------------------------------------------------------

    def is_zero(self) -> bool:
        return self.unix_nano == ZERO_UNIX_SECONDS * NS_PER_SECOND

    @property
    def unix(self) -> int:
        """Whole seconds since the epoch (floored)."""
        return self.unix_nano // NS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        """Nanoseconds within the second, in ``[0, 999_999_999]``."""
        return self.unix_nano % NS_PER_SECOND

    @property
    def unix_milli(self) -> int:
        return self.unix_nano // NS_PER_MILLI

    @property
    def unix_micro(self) -> int:
        return self.unix_nano // NS_PER_MICRO

    # -- conversion ---------------------------------------------------------

    def to_datetime(self, tz: datetime.tzinfo = datetime.timezone.utc) -> datetime.datetime:
        """Aware ``datetime`` in *tz*, truncated to microseconds.

        Raises ``OverflowError`` outside the years ``datetime`` supports.
        """
        delta = datetime.timedelta(microseconds=self.unix_nano // NS_PER_MICRO)
        return (_EPOCH + delta).astimezone(tz)

    def isoformat(self) -> str:
        """RFC 3339 in UTC, fractional seconds trimmed of trailing zeros."""
        days, rem = divmod(self.unix, SECONDS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, rem = divmod(rem, 3600)
        minute, second = divmod(rem, 60)
        text = f"{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:{second:02d}"
        if self.nanosecond:
            text += "." + f"{self.nanosecond:09d}".rstrip("0")
        return text + "Z"

    def __str__(self) -> str:
        return self.isoformat()
