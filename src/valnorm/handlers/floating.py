"""Float target — unrounded ``float``.

Rounding is a separate stage (``rounding.round_float``) applied by
``Coercer.to_rounded_float``.
"""

from __future__ import annotations

from typing import Any

from ..core import CoercionContext, CoercionHandler
from ..numeric import parse_float


class NumericFloatHandler(CoercionHandler):
    """Integers and floats convert directly; ints too large for a float fail."""

    def execute(self, value: Any, ctx: CoercionContext) -> float:
        try:
            return float(value)
        except OverflowError:
            raise ctx.fail("number out of float range") from None


class TextFloatHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> float:
        return parse_float(value)


class BooleanFloatHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> float:
        return 1.0 if value else 0.0


class RenderedFloatHandler(CoercionHandler):
    """Render through the text target, then parse the rendering."""

    def execute(self, value: Any, ctx: CoercionContext) -> float:
        return parse_float(ctx.coercer.to_text(value))
