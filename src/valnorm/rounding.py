"""Rounding stage applied after float coercion.

Exports
-------
RoundingMode
    ``NONE`` (pass-through), ``UP`` (ceiling), ``DOWN`` (floor), ``AUTO``
    (nearest, half away from zero).

round_float
    ``(value, mode, places) → float``.
"""

from __future__ import annotations

import math
from enum import Enum


class RoundingMode(Enum):
    NONE = "none"
    UP = "up"
    DOWN = "down"
    AUTO = "auto"

    @classmethod
    def parse(cls, mode: RoundingMode | str) -> RoundingMode:
        """Accept a member or its name/value (case-insensitive)."""
        if isinstance(mode, cls):
            return mode
        try:
            return cls(str(mode).strip().lower())
        except ValueError:
            raise ValueError(f"unknown rounding mode: {mode!r}") from None


def round_half_away_from_zero(value: float) -> float:
    """Nearest integer, ties away from zero (``round()`` would tie to even)."""
    whole = math.trunc(value)
    if abs(value - whole) >= 0.5:
        whole += 1 if value > 0 else -1
    return float(whole)


def round_float(value: float, mode: RoundingMode | str, places: int = 0) -> float:
    """Round *value* to *places* decimal places under *mode*.

    Negative *places* clamp to 0.  ``NONE`` ignores *places*.  Non-finite
    values, and values whose scaled form overflows, come back unchanged.
    """
    mode = RoundingMode.parse(mode)
    if mode is RoundingMode.NONE or not math.isfinite(value):
        return value
    places = max(places, 0)
    if places > 308:
        return value
    multiplier = 10.0 ** places
    scaled = value * multiplier
    if not math.isfinite(scaled):
        return value

    if mode is RoundingMode.UP:
        return math.ceil(scaled) / multiplier
    if mode is RoundingMode.DOWN:
        return math.floor(scaled) / multiplier
    return round_half_away_from_zero(scaled) / multiplier
