"""Strict numeric grammars shared by the integer, float, boolean and temporal
handlers.

Python's ``int()`` and ``float()`` accept surrounding whitespace, digit
separators (``1_000``) and non-ASCII digits.  The coercion contract is
stricter: text must be a plain ASCII base-10 numeral, so every parse goes
through an anchored pattern first.
"""

from __future__ import annotations

import math

import regex

from .core import CoercionError

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

_INT_PATTERN = regex.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = regex.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|(?i:[+-]?inf(?:inity)?|nan)"
)


def wrap_int64(value: int) -> int:
    """Narrow an arbitrary int into the signed 64-bit range (two's complement)."""
    return ((value - INT64_MIN) % (1 << 64)) + INT64_MIN


def parse_int64(text: str) -> int:
    """Strict base-10 integer within the signed 64-bit range."""
    if not _INT_PATTERN.fullmatch(text):
        raise CoercionError(f"not a base-10 integer: {text[:64]!r}")
    number = int(text)
    if not INT64_MIN <= number <= INT64_MAX:
        raise CoercionError(f"integer out of 64-bit range: {text[:64]!r}")
    return number


def parse_float(text: str) -> float:
    """Strict decimal float; overflow to infinity counts as failure."""
    if not _FLOAT_PATTERN.fullmatch(text):
        raise CoercionError(f"not a decimal number: {text[:64]!r}")
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise CoercionError(f"number out of float range: {text[:64]!r}")
    return number
