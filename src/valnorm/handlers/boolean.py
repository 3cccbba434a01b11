"""Boolean target.

Text is trimmed and lower-cased, then looked up in the true tokens, then in
the false tokens, then parsed as a number (nonzero → ``True``).  Text that
passes none of these fails, which ``coerce`` turns into ``False``.

Kinds without an explicit rule fall back to ``not is_zero_value(value)``:
this is the only place where emptiness, rather than explicit tokens,
decides the result.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Iterable, Optional

from ..core import CoercionContext, CoercionError, CoercionHandler
from ..kinds import is_zero_value
from ..numeric import parse_float

TRUE_TOKENS = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_TOKENS = frozenset({"false", "f", "no", "n", "off", "0", ""})


class NonZeroHandler(CoercionHandler):
    """Numbers: nonzero → ``True`` (NaN is nonzero)."""

    def execute(self, value: Any, ctx: CoercionContext) -> bool:
        return value != 0


class TokenBooleanHandler(CoercionHandler):
    def __init__(
            self,
            true_tokens: Optional[Iterable[str]] = None,
            false_tokens: Optional[Iterable[str]] = None,
    ) -> None:
        self._true: AbstractSet[str] = (
            frozenset(t.lower() for t in true_tokens) if true_tokens is not None else TRUE_TOKENS
        )
        self._false: AbstractSet[str] = (
            frozenset(t.lower() for t in false_tokens) if false_tokens is not None else FALSE_TOKENS
        )

    def execute(self, value: Any, ctx: CoercionContext) -> bool:
        token = value.strip().lower()
        if token in self._true:
            return True
        if token in self._false:
            return False
        try:
            return parse_float(token) != 0
        except CoercionError:
            raise ctx.fail(f"unrecognised boolean token: {token[:64]!r}") from None


class NonEmptyHandler(CoercionHandler):
    """Catch-all: ``False`` for the type's empty/default value, else ``True``."""

    def execute(self, value: Any, ctx: CoercionContext) -> bool:
        return not is_zero_value(value)
