"""Instant target — absolute time with nanosecond resolution.

Kinds are tried in this order (see ``factory``)::

    Instant / datetime / date   → converted as-is (naive datetime = UTC)
    None                        → fails (zero instant)
    int                         → whole seconds since the epoch, no guessing
    float / Decimal / Fraction  → seconds + fractional nanoseconds
    str                         → parse_instant()
    anything else               → rendered via the text target, then
                                  parse_instant(); "" fails

``parse_instant`` is the heuristic part:

1. trim; empty text fails;
2. explicit formats, in order, are *exclusive*: if none match, fail
   without consulting the default table.  ``unix``, ``unix-milli``,
   ``unix-micro`` and ``unix-nano`` select an epoch unit instead of a layout
   (the unit scales integer text; decimal text is always seconds);
3. otherwise the default layouts, first match wins;
4. then a base-10 integer whose magnitude picks the unit
   (``> 10**18`` ns, ``> 10**15`` µs, ``> 10**12`` ms, else seconds);
5. then a decimal float, as seconds.
"""

from __future__ import annotations

import datetime
import logging
import math
from typing import Any, Iterable, Optional, Sequence

from ..core import CoercionContext, CoercionError, CoercionHandler
from ..formats import DEFAULT_LAYOUTS, UNIX_UNITS
from ..instant import NS_PER_MICRO, NS_PER_MILLI, NS_PER_SECOND, Instant
from ..layouts import parse_layout
from ..numeric import parse_float, parse_int64, wrap_int64

logger = logging.getLogger(__name__)

NANOS_THRESHOLD = 10 ** 18
MICROS_THRESHOLD = 10 ** 15
MILLIS_THRESHOLD = 10 ** 12


def infer_epoch_unit(number: int) -> int:
    """Nanoseconds per unit for a unit-less epoch integer, judged by magnitude.

    The thresholds are exclusive: ``10**12`` itself is still seconds.
    """
    if number > NANOS_THRESHOLD:
        return 1
    if number > MICROS_THRESHOLD:
        return NS_PER_MICRO
    if number > MILLIS_THRESHOLD:
        return NS_PER_MILLI
    return NS_PER_SECOND


def instant_from_fractional(value: Any, unit: int = NS_PER_SECOND) -> Instant:
    """Split *value* (in *unit*) into a truncated whole part and a fraction.

    With the default unit this is "whole seconds + nanosecond remainder".
    """
    if not math.isfinite(value):
        raise CoercionError("not a finite number")
    whole = int(value)
    return Instant(whole * unit + int((value - whole) * unit))


def _parse_epoch(text: str, unit: Optional[int]) -> Instant:
    try:
        number = parse_int64(text)
    except CoercionError:
        return instant_from_fractional(parse_float(text))
    if unit is None:
        unit = infer_epoch_unit(number)
    return Instant(number * unit)


def parse_instant(text: str, formats: Sequence[str] = (), default_layouts: Iterable[str] = DEFAULT_LAYOUTS) -> Instant:
    """Parse *text* as an instant; raise ``CoercionError`` when nothing fits."""
    text = text.strip()
    if not text:
        raise CoercionError("empty text")

    if formats:
        for fmt in formats:
            try:
                if fmt in UNIX_UNITS:
                    return _parse_epoch(text, UNIX_UNITS[fmt])
                return parse_layout(text, fmt)
            except CoercionError as exc:
                logger.debug("format %r rejected %r: %s", fmt, text[:64], exc.reason)
        raise CoercionError("no explicit format matched")

    for layout in default_layouts:
        try:
            return parse_layout(text, layout)
        except CoercionError:
            continue

    try:
        return _parse_epoch(text, None)
    except CoercionError:
        raise CoercionError("no layout or epoch number matched") from None


# -- handlers -----------------------------------------------------------


class InstantPassHandler(CoercionHandler):
    """``Instant`` unchanged; ``datetime`` / ``date`` converted."""

    def execute(self, value: Any, ctx: CoercionContext) -> Instant:
        if isinstance(value, Instant):
            return value
        if isinstance(value, datetime.datetime):
            return Instant.from_datetime(value)
        return Instant.from_date(value)


class EpochSecondsHandler(CoercionHandler):
    """Native integers are seconds; the caller knows the unit."""

    def execute(self, value: Any, ctx: CoercionContext) -> Instant:
        return Instant.from_unix(wrap_int64(int(value)))


class FractionalEpochHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> Instant:
        try:
            return instant_from_fractional(value)
        except CoercionError as exc:
            raise ctx.fail(exc.reason) from None


class TextInstantHandler(CoercionHandler):
    def __init__(self, default_layouts: Optional[Iterable[str]] = None) -> None:
        self._layouts = tuple(default_layouts) if default_layouts is not None else DEFAULT_LAYOUTS

    def parse(self, text: str, ctx: CoercionContext) -> Instant:
        try:
            return parse_instant(text, ctx.formats, self._layouts)
        except CoercionError as exc:
            raise ctx.fail(exc.reason) from None

    def execute(self, value: Any, ctx: CoercionContext) -> Instant:
        return self.parse(value, ctx)


class RenderedInstantHandler(TextInstantHandler):
    """Catch-all: render via the text target and re-enter the string path."""

    def execute(self, value: Any, ctx: CoercionContext) -> Instant:
        text = ctx.coercer.to_text(value)
        if not text:
            raise ctx.fail("empty rendering")
        return self.parse(text, ctx)
