"""Time layout constants and the default format registry.

Exports
-------
TIME_FORMAT_*
    Layout strings (see ``layouts`` for the directive language) that callers
    pass as explicit candidate formats, e.g.
    ``to_instant("14/10/2024", TIME_FORMAT_DATE_EU)``.

TIME_FORMAT_UNIX, TIME_FORMAT_UNIX_MILLI, TIME_FORMAT_UNIX_MICRO, TIME_FORMAT_UNIX_NANO
    Pseudo-format tokens: not layouts but epoch-unit selectors.

UNIX_UNITS
    Pseudo-format token → nanoseconds per unit.

DEFAULT_FORMATS
    Ordered, immutable tuple of ``TimeFormat`` tried when no explicit formats
    are given.  Order is the disambiguation rule: US month-first layouts come
    before EU day-first ones, so ``"01/02/2006"`` is January 2.
"""

from __future__ import annotations

from typing import NamedTuple, Tuple

from .instant import NS_PER_MICRO, NS_PER_MILLI, NS_PER_SECOND
from .layouts import compile_layout

# -- standard formats ---------------------------------------------------

TIME_FORMAT_RFC3339 = "%Y-%m-%dT%H:%M:%S%z"              # ISO 8601 / RFC 3339
TIME_FORMAT_RFC3339_NANO = "%Y-%m-%dT%H:%M:%S.%f%z"
TIME_FORMAT_RFC822 = "%d %b %y %H:%M %Z"
TIME_FORMAT_RFC822Z = "%d %b %y %H:%M %z"
TIME_FORMAT_RFC850 = "%A, %d-%b-%y %H:%M:%S %Z"
TIME_FORMAT_RFC1123 = "%a, %d %b %Y %H:%M:%S %Z"
TIME_FORMAT_RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"
TIME_FORMAT_ANSIC = "%a %b %e %H:%M:%S %Y"
TIME_FORMAT_UNIX_DATE = "%a %b %e %H:%M:%S %Z %Y"
TIME_FORMAT_RUBY_DATE = "%a %b %d %H:%M:%S %z %Y"

# -- date-time formats --------------------------------------------------

TIME_FORMAT_DATETIME = "%Y-%m-%d %H:%M:%S"               # YYYY-MM-DD HH:MM:SS
TIME_FORMAT_DATETIME_WITH_TZ = "%Y-%m-%d %H:%M:%S %z"    # YYYY-MM-DD HH:MM:SS -0700
TIME_FORMAT_DATETIME_MILLI = "%Y-%m-%d %H:%M:%S.%f"
TIME_FORMAT_DATETIME_MICRO = "%Y-%m-%d %H:%M:%S.%f"
TIME_FORMAT_DATETIME_NANO = "%Y-%m-%d %H:%M:%S.%f"
TIME_FORMAT_DATETIME_T = "%Y-%m-%dT%H:%M:%S"             # YYYY-MM-DDTHH:MM:SS
TIME_FORMAT_DATETIME_T_MILLI = "%Y-%m-%dT%H:%M:%S.%f"
TIME_FORMAT_DATETIME_TZ = "%Y-%m-%dT%H:%M:%SZ"           # YYYY-MM-DDTHH:MM:SSZ
TIME_FORMAT_DATETIME_T_MILLI_Z = "%Y-%m-%dT%H:%M:%S.%fZ"
TIME_FORMAT_DATETIME_T_MICRO_Z = "%Y-%m-%dT%H:%M:%S.%fZ"
TIME_FORMAT_DATETIME_T_NANO_Z = "%Y-%m-%dT%H:%M:%S.%fZ"
TIME_FORMAT_DATETIME_T_OFFSET = "%Y-%m-%dT%H:%M:%S%z"    # YYYY-MM-DDTHH:MM:SS-07:00

# -- date-only formats --------------------------------------------------

TIME_FORMAT_DATE = "%Y-%m-%d"                 # YYYY-MM-DD
TIME_FORMAT_DATE_SLASH = "%Y/%m/%d"           # YYYY/MM/DD
TIME_FORMAT_DATE_DOT = "%Y.%m.%d"             # YYYY.MM.DD
TIME_FORMAT_DATE_US = "%m/%d/%Y"              # MM/DD/YYYY
TIME_FORMAT_DATE_EU = "%d/%m/%Y"              # DD/MM/YYYY
TIME_FORMAT_DATE_US_WITH_DASH = "%m-%d-%Y"    # MM-DD-YYYY
TIME_FORMAT_DATE_EU_WITH_DASH = "%d-%m-%Y"    # DD-MM-YYYY
TIME_FORMAT_DATE_COMPACT = "%Y%m%d"           # YYYYMMDD
TIME_FORMAT_DATE_READABLE = "%d %b %Y"        # DD Mon YYYY
TIME_FORMAT_DATE_LONG = "%B %-d, %Y"          # Month D, YYYY

# -- time-only formats --------------------------------------------------

TIME_FORMAT_TIME = "%H:%M:%S"
TIME_FORMAT_TIME_MILLI = "%H:%M:%S.%f"
TIME_FORMAT_TIME_MICRO = "%H:%M:%S.%f"
TIME_FORMAT_TIME_SHORT = "%H:%M"
TIME_FORMAT_TIME_12_HOUR = "%I:%M:%S %p"
TIME_FORMAT_TIME_12 = "%I:%M %p"

# -- epoch pseudo-formats -----------------------------------------------

TIME_FORMAT_UNIX = "unix"
TIME_FORMAT_UNIX_MILLI = "unix-milli"
TIME_FORMAT_UNIX_MICRO = "unix-micro"
TIME_FORMAT_UNIX_NANO = "unix-nano"

UNIX_UNITS = {
    TIME_FORMAT_UNIX: NS_PER_SECOND,
    TIME_FORMAT_UNIX_MILLI: NS_PER_MILLI,
    TIME_FORMAT_UNIX_MICRO: NS_PER_MICRO,
    TIME_FORMAT_UNIX_NANO: 1,
}


class TimeFormat(NamedTuple):
    name: str
    layout: str


DEFAULT_FORMATS: Tuple[TimeFormat, ...] = (
    TimeFormat("rfc3339", TIME_FORMAT_RFC3339),
    TimeFormat("rfc3339-nano", TIME_FORMAT_RFC3339_NANO),
    TimeFormat("datetime", TIME_FORMAT_DATETIME),
    TimeFormat("datetime-t", TIME_FORMAT_DATETIME_T),
    TimeFormat("datetime-tz", TIME_FORMAT_DATETIME_TZ),
    TimeFormat("datetime-t-milli", TIME_FORMAT_DATETIME_T_MILLI),
    TimeFormat("datetime-t-milli-z", TIME_FORMAT_DATETIME_T_MILLI_Z),
    TimeFormat("datetime-t-micro-z", TIME_FORMAT_DATETIME_T_MICRO_Z),
    TimeFormat("datetime-t-nano-z", TIME_FORMAT_DATETIME_T_NANO_Z),
    TimeFormat("datetime-t-offset", TIME_FORMAT_DATETIME_T_OFFSET),
    TimeFormat("datetime-with-tz", TIME_FORMAT_DATETIME_WITH_TZ),
    TimeFormat("datetime-milli", TIME_FORMAT_DATETIME_MILLI),
    TimeFormat("datetime-micro", TIME_FORMAT_DATETIME_MICRO),
    TimeFormat("datetime-nano", TIME_FORMAT_DATETIME_NANO),
    TimeFormat("date", TIME_FORMAT_DATE),
    TimeFormat("date-slash", TIME_FORMAT_DATE_SLASH),
    TimeFormat("date-dot", TIME_FORMAT_DATE_DOT),
    TimeFormat("date-us", TIME_FORMAT_DATE_US),
    TimeFormat("date-eu", TIME_FORMAT_DATE_EU),
    TimeFormat("date-us-dash", TIME_FORMAT_DATE_US_WITH_DASH),
    TimeFormat("date-eu-dash", TIME_FORMAT_DATE_EU_WITH_DASH),
    TimeFormat("date-compact", TIME_FORMAT_DATE_COMPACT),
    TimeFormat("date-readable", TIME_FORMAT_DATE_READABLE),
    TimeFormat("date-long", TIME_FORMAT_DATE_LONG),
    TimeFormat("time", TIME_FORMAT_TIME),
    TimeFormat("time-milli", TIME_FORMAT_TIME_MILLI),
    TimeFormat("time-micro", TIME_FORMAT_TIME_MICRO),
    TimeFormat("time-short", TIME_FORMAT_TIME_SHORT),
    TimeFormat("time-12-hour", TIME_FORMAT_TIME_12_HOUR),
    TimeFormat("time-12", TIME_FORMAT_TIME_12),
    TimeFormat("rfc1123", TIME_FORMAT_RFC1123),
    TimeFormat("rfc1123z", TIME_FORMAT_RFC1123Z),
    TimeFormat("rfc822", TIME_FORMAT_RFC822),
    TimeFormat("rfc822z", TIME_FORMAT_RFC822Z),
    TimeFormat("rfc850", TIME_FORMAT_RFC850),
    TimeFormat("ansic", TIME_FORMAT_ANSIC),
    TimeFormat("unix-date", TIME_FORMAT_UNIX_DATE),
    TimeFormat("ruby-date", TIME_FORMAT_RUBY_DATE),
)

DEFAULT_LAYOUTS: Tuple[str, ...] = tuple(fmt.layout for fmt in DEFAULT_FORMATS)

# Compile the registry up front; afterwards it is only read.
for _layout in DEFAULT_LAYOUTS:
    compile_layout(_layout)
