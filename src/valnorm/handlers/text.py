"""Text target — render any value as ``str``.

Priority order in the default registry (see ``factory``)::

    None                          → ""
    str                           → unchanged
    bool / int / float / bytes    → exact scalar rendering
    ObjectId / UUID               → canonical hex / text form
    class with its own __str__    → str(value)
    mapping / sequence / set /
    dataclass                     → compact sorted-key JSON, else repr()
    anything else                 → repr()

Exports
-------
format_float
    Shortest round-tripping positional rendering of a float.

dump_json
    Deterministic JSON used for structured values; raises on failure.

SelfRenderingMatcher
    Fires on values whose class overrides ``object.__str__``.
"""

from __future__ import annotations

import dataclasses
import datetime
import json
import math
import uuid
from decimal import Decimal
from fractions import Fraction
from typing import Any

from bson import ObjectId

from ..core import CoercionContext, CoercionHandler, ValueMatcher
from ..instant import Instant
from ..kinds import ValueKind, is_dataclass_instance


def format_float(value: float) -> str:
    """Shortest representation that round-trips, never in scientific notation.

    ``2.0`` → ``"2"``, ``1e16`` → ``"10000000000000000"``,
    ``1.5e-07`` → ``"0.00000015"``; ``nan`` → ``"NaN"``, infinities →
    ``"+Inf"`` / ``"-Inf"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _json_default(value: Any) -> Any:
    if isinstance(value, Instant):
        return value.isoformat()
    if is_dataclass_instance(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (ObjectId, uuid.UUID, Fraction)):
        return str(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def dump_json(value: Any) -> str:
    """Compact JSON with sorted keys.

    Raises ``TypeError`` / ``ValueError`` / ``RecursionError`` when *value*
    has no JSON form (mixed-type keys, NaN, cycles, unknown classes).
    """
    return json.dumps(
        value,
        default=_json_default,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


# -- matcher ------------------------------------------------------------


class SelfRenderingMatcher(ValueMatcher):
    """Match values whose class defines its own ``__str__``.

    Builtin containers inherit ``object.__str__`` and therefore do not match;
    enums, exceptions, ``Instant`` and ``datetime`` do.
    """

    def matches(self, value: Any, kind: ValueKind) -> bool:
        return type(value).__str__ is not object.__str__


# -- handlers -----------------------------------------------------------


class BooleanTextHandler(CoercionHandler):
    """``True`` → ``"true"``, ``False`` → ``"false"``."""

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        return "true" if value else "false"


class IntegerTextHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> str:
        return str(int(value))


class FloatTextHandler(CoercionHandler):
    """Floats via ``format_float``; ``Decimal`` exactly; ``Fraction`` as ``n/d``."""

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        if isinstance(value, Decimal):
            return format(value, "f")
        if isinstance(value, Fraction):
            return str(value)
        return format_float(float(value))


class BytesTextHandler(CoercionHandler):
    """UTF-8 decode; invalid sequences become U+FFFD."""

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        return bytes(value).decode("utf-8", errors="replace")


class StrHandler(CoercionHandler):
    """``str(value)`` for identifiers and self-rendering values."""

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        return str(value)


class StructuredTextHandler(CoercionHandler):
    """Deterministic JSON; ``repr()`` when the value has no JSON form.

    Values nested too deeply for ``repr()`` render as ``<TypeName>``.
    """

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        try:
            return dump_json(value)
        except (TypeError, ValueError, RecursionError):
            pass
        try:
            return repr(value)
        except RecursionError:
            return f"<{type(value).__qualname__}>"


class ReprHandler(CoercionHandler):
    """Catch-all placeholder rendering."""

    def execute(self, value: Any, ctx: CoercionContext) -> str:
        try:
            return repr(value)
        except RecursionError:
            return f"<{type(value).__qualname__}>"
