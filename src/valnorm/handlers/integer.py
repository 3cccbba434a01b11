"""Integer target — signed 64-bit ``int``.

* integers pass through, narrowed to 64 bits (two's complement);
* floats, ``Decimal`` and ``Fraction`` truncate toward zero
  (``2.9`` → ``2``, ``-2.9`` → ``-2``);
* text must be a strict base-10 numeral (``" 42"``, ``"4.0"``, ``"1_000"``
  all fail);
* every other kind, ``bool`` included, fails.
"""

from __future__ import annotations

import math
from typing import Any

from ..core import CoercionContext, CoercionHandler
from ..numeric import INT64_MAX, INT64_MIN, parse_int64, wrap_int64


class IntegerPassHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> int:
        return wrap_int64(int(value))


class TruncatingIntegerHandler(CoercionHandler):
    """Drop the fractional part; non-finite or out-of-range values fail."""

    def execute(self, value: Any, ctx: CoercionContext) -> int:
        if not math.isfinite(value):
            raise ctx.fail("not a finite number")
        number = int(value)
        if not INT64_MIN <= number <= INT64_MAX:
            raise ctx.fail("number out of 64-bit range")
        return number


class TextIntegerHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> int:
        return parse_int64(value)
