"""ObjectId target — 12-byte ``bson.ObjectId``.

Values that are not already an ``ObjectId`` are rendered through the text
target and parsed as exactly 24 hex digits (surrounding whitespace is not
trimmed); the all-zero id is the failure value.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from ..core import CoercionContext, CoercionHandler

ZERO_OBJECT_ID = ObjectId(b"\x00" * 12)


class HexObjectIdHandler(CoercionHandler):
    def execute(self, value: Any, ctx: CoercionContext) -> ObjectId:
        text = ctx.coercer.to_text(value)
        if len(text) != 24 or not ObjectId.is_valid(text):
            raise ctx.fail("not a 24-digit hex object id")
        return ObjectId(text)
