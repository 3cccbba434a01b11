"""Module-level functions backed by a lazily built default Coercer.

Total functions never raise; the ``try_to_*`` variants raise
``CoercionError`` where the total ones would return a default.
"""

from __future__ import annotations

import functools
from typing import Any

from bson import ObjectId

from .core import Coercer
from .factory import build_default_coercer
from .handlers.text import dump_json
from .instant import Instant
from .rounding import RoundingMode, round_float

__all__ = [
    "default_coercer",
    "to_text",
    "to_integer",
    "to_float",
    "round_float",
    "to_rounded_float",
    "round_up",
    "round_down",
    "round_auto",
    "to_boolean",
    "to_instant",
    "to_object_id",
    "to_json",
    "cast",
    "try_to_integer",
    "try_to_float",
    "try_to_boolean",
    "try_to_instant",
    "try_to_object_id",
]


@functools.lru_cache(maxsize=None)
def default_coercer() -> Coercer:
    """The shared Coercer; built on first use, read-only afterwards."""
    return build_default_coercer()


# -- total --------------------------------------------------------------


def to_text(value: Any) -> str:
    return default_coercer().to_text(value)


def to_integer(value: Any) -> int:
    return default_coercer().to_integer(value)


def to_float(value: Any) -> float:
    return default_coercer().to_float(value)


def to_rounded_float(value: Any, mode: RoundingMode | str = RoundingMode.NONE, places: int = 0) -> float:
    return default_coercer().to_rounded_float(value, mode, places)


def round_up(value: Any, places: int = 0) -> float:
    """Coerce to float, then ceiling at *places* decimals."""
    return to_rounded_float(value, RoundingMode.UP, places)


def round_down(value: Any, places: int = 0) -> float:
    """Coerce to float, then floor at *places* decimals."""
    return to_rounded_float(value, RoundingMode.DOWN, places)


def round_auto(value: Any, places: int = 0) -> float:
    """Coerce to float, then round half away from zero at *places* decimals."""
    return to_rounded_float(value, RoundingMode.AUTO, places)


def to_boolean(value: Any) -> bool:
    return default_coercer().to_boolean(value)


def to_instant(value: Any, *formats: str) -> Instant:
    """Coerce to an ``Instant``; *formats*, if given, are tried exclusively."""
    return default_coercer().to_instant(value, *formats)


def to_object_id(value: Any) -> ObjectId:
    return default_coercer().to_object_id(value)


def to_json(value: Any) -> str:
    """Compact sorted-key JSON, or ``""`` when *value* has no JSON form."""
    try:
        return dump_json(value)
    except (TypeError, ValueError, RecursionError):
        return ""


def cast(value: Any, type_name: str, *formats: str) -> Any:
    """Total coercion by caster name; ``KeyError`` for unknown names."""
    return default_coercer().cast(value, type_name, *formats)


# -- fallible -----------------------------------------------------------


def try_to_integer(value: Any) -> int:
    return default_coercer().try_to_integer(value)


def try_to_float(value: Any) -> float:
    return default_coercer().try_to_float(value)


def try_to_boolean(value: Any) -> bool:
    return default_coercer().try_to_boolean(value)


def try_to_instant(value: Any, *formats: str) -> Instant:
    return default_coercer().try_to_instant(value, *formats)


def try_to_object_id(value: Any) -> ObjectId:
    return default_coercer().try_to_object_id(value)
