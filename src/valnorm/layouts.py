"""Layout compiler — strftime-style layouts to anchored regular expressions.

``time.strptime`` cannot express nanosecond fractions and is locale
dependent, so layouts are compiled here into ``regex`` patterns and the
matched fields are assembled into an ``Instant`` directly.

Directives
----------
``%Y`` 4-digit year            ``%y`` 2-digit year (69–99 → 19xx, else 20xx)
``%m`` 2-digit month           ``%b`` / ``%B`` month name (abbreviated / full)
``%d`` 2-digit day             ``%-d`` 1–2 digit day
``%e`` day, optional leading space
``%H`` hour 0–23, 1–2 digits   ``%I`` 2-digit 12-hour clock
``%M`` 2-digit minute          ``%S`` 2-digit second
``%f`` 1–9 fractional digits   ``%p`` AM / PM
``%a`` / ``%A`` weekday name (parsed, not validated)
``%z`` ``Z``, ``±HHMM`` or ``±HH:MM``
``%Z`` 1–5 letter zone name    ``%%`` literal ``%``

Names and AM/PM match case-insensitively.  A run of spaces in the layout
matches a run of spaces in the input.  ``%S`` not followed by an explicit
``.%f`` / ``,%f`` accepts an optional fraction anyway.  Fields a layout does
not mention default to 0000-01-01T00:00:00 UTC, so a time-only layout never
yields the zero instant.
"""

from __future__ import annotations

import calendar
import functools
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import regex

from .core import CoercionError
from .instant import NS_PER_SECOND, SECONDS_PER_DAY, Instant, days_from_civil

MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
WEEKDAY_NAMES = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

_MONTHS: Dict[str, int] = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    _MONTHS[_name] = _number
    _MONTHS[_name[:3]] = _number

# RFC 822 §5 zone abbreviations; anything else is read as UTC.
ZONE_OFFSETS: Dict[str, int] = {
    "UT": 0, "UTC": 0, "GMT": 0, "Z": 0,
    "EST": -5 * 3600, "EDT": -4 * 3600,
    "CST": -6 * 3600, "CDT": -5 * 3600,
    "MST": -7 * 3600, "MDT": -6 * 3600,
    "PST": -8 * 3600, "PDT": -7 * 3600,
}


def _alternation(names: Tuple[str, ...]) -> str:
    # Longest first: full names before their abbreviations.
    return "(?i:" + "|".join(sorted(names, key=len, reverse=True)) + ")"


_DIRECTIVES: Dict[str, str] = {
    "Y": r"[0-9]{4}",
    "y": r"[0-9]{2}",
    "m": r"[0-9]{2}",
    "d": r"[0-9]{2}",
    "-d": r"[0-9]{1,2}",
    "e": r" ?[0-9]{1,2}",
    "H": r"[0-9]{1,2}",
    "I": r"[0-9]{2}",
    "M": r"[0-9]{2}",
    "S": r"[0-9]{2}",
    "f": r"[0-9]{1,9}",
    "p": r"(?i:AM|PM)",
    "b": _alternation(tuple(name[:3] for name in MONTH_NAMES)),
    "B": _alternation(MONTH_NAMES),
    "a": _alternation(tuple(name[:3] for name in WEEKDAY_NAMES)),
    "A": _alternation(WEEKDAY_NAMES),
    "z": r"Z|[+-][0-9]{2}:?[0-9]{2}",
    "Z": r"[A-Z]{1,5}",
}


class LayoutError(ValueError):
    """The layout string itself is malformed (unknown or dangling directive)."""


@dataclass(frozen=True)
class CompiledLayout:
    """A layout compiled to a pattern plus the directive behind each group."""

    layout: str
    pattern: regex.Pattern
    fields: Tuple[Tuple[str, str], ...]

    def match(self, text: str) -> Optional[Dict[str, str]]:
        found = self.pattern.fullmatch(text)
        if found is None:
            return None
        return {directive: found.group(group) for group, directive in self.fields
                if found.group(group) is not None}


def _explicit_fraction_follows(layout: str, index: int) -> bool:
    return layout[index:index + 3] in (".%f", ",%f")


@functools.lru_cache(maxsize=256)
def compile_layout(layout: str) -> CompiledLayout:
    """Compile *layout*; memoized, so repeated layouts compile once."""
    parts: List[str] = []
    fields: List[Tuple[str, str]] = []
    i = 0
    while i < len(layout):
        char = layout[i]
        if char == "%":
            directive = layout[i + 1:i + 2]
            if directive == "-":
                directive = layout[i + 1:i + 3]
            if directive == "%":
                parts.append(regex.escape("%"))
                i += 2
                continue
            if directive not in _DIRECTIVES:
                raise LayoutError(f"unsupported directive %{directive} in layout {layout!r}")
            group = f"g{len(fields)}"
            fields.append((group, directive))
            parts.append(f"(?P<{group}>{_DIRECTIVES[directive]})")
            i += 1 + len(directive)
            if directive == "S" and not _explicit_fraction_follows(layout, i):
                group = f"g{len(fields)}"
                fields.append((group, "frac"))
                parts.append(f"(?:[.,](?P<{group}>[0-9]+))?")
            continue
        if char == " ":
            while i < len(layout) and layout[i] == " ":
                i += 1
            parts.append(" +")
            continue
        parts.append(regex.escape(char))
        i += 1
    return CompiledLayout(layout=layout, pattern=regex.compile("".join(parts)), fields=tuple(fields))


def _fraction_to_nanos(digits: str) -> int:
    return int(digits[:9].ljust(9, "0"))


def _zone_offset(value: str) -> int:
    if value == "Z":
        return 0
    sign = -1 if value[0] == "-" else 1
    digits = value[1:].replace(":", "")
    hours, minutes = int(digits[:2]), int(digits[2:])
    if hours > 24 or minutes > 59:
        raise CoercionError(f"zone offset out of range: {value!r}")
    return sign * (hours * 3600 + minutes * 60)


def _check(ok: bool, what: str, value: int) -> None:
    if not ok:
        raise CoercionError(f"{what} out of range: {value}")


def parse_layout(text: str, layout: str) -> Instant:
    """Parse *text* against *layout*; raise ``CoercionError`` on mismatch."""
    try:
        compiled = compile_layout(layout)
    except LayoutError as exc:
        raise CoercionError(str(exc)) from exc

    fields = compiled.match(text)
    if fields is None:
        raise CoercionError(f"text does not match layout {layout!r}")

    year = 0
    if "Y" in fields:
        year = int(fields["Y"])
    elif "y" in fields:
        short = int(fields["y"])
        year = 1900 + short if short >= 69 else 2000 + short

    month = 1
    if "m" in fields:
        month = int(fields["m"])
    for name in ("B", "b"):
        if name in fields:
            month = _MONTHS[fields[name].lower()]
    _check(1 <= month <= 12, "month", month)

    day = 1
    for name in ("d", "-d", "e"):
        if name in fields:
            day = int(fields[name].strip())
    days_in_month = 29 if month == 2 and calendar.isleap(year) else calendar.mdays[month]
    _check(1 <= day <= days_in_month, "day", day)

    hour = 0
    if "H" in fields:
        hour = int(fields["H"])
        _check(hour <= 23, "hour", hour)
    elif "I" in fields:
        hour = int(fields["I"])
        _check(hour <= 12, "hour", hour)
    if "p" in fields:
        meridiem = fields["p"].upper()
        if meridiem == "PM" and hour < 12:
            hour += 12
        elif meridiem == "AM" and hour == 12:
            hour = 0

    minute = int(fields.get("M", 0))
    _check(minute <= 59, "minute", minute)
    second = int(fields.get("S", 0))
    _check(second <= 59, "second", second)

    nanos = 0
    for name in ("f", "frac"):
        if name in fields:
            nanos = _fraction_to_nanos(fields[name])

    offset = 0
    if "z" in fields:
        offset = _zone_offset(fields["z"])
    elif "Z" in fields:
        offset = ZONE_OFFSETS.get(fields["Z"], 0)

    days = days_from_civil(year, month, day)
    seconds = days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second - offset
    return Instant(seconds * NS_PER_SECOND + nanos)
