"""Pass-through, constant, and rejecting handlers shared by every target."""

from __future__ import annotations

from typing import Any

from ..core import CoercionContext, CoercionHandler


class IdentityHandler(CoercionHandler):
    """Return the value unchanged (it already has the target type)."""

    def execute(self, value: Any, ctx: CoercionContext) -> Any:
        return value


class ConstantHandler(CoercionHandler):
    """Return a fixed result, e.g. ``None`` → ``""`` for the text target.

    This is a genuine conversion, not a failure: ``try_coerce`` returns the
    constant too.
    """

    def __init__(self, result: Any) -> None:
        self._result = result

    def execute(self, value: Any, ctx: CoercionContext) -> Any:
        return self._result


class RejectHandler(CoercionHandler):
    """Fail unconditionally.

    Mounted for kinds a target has no conversion for, typically as the
    priority -999 catch-all, so ``coerce`` yields the default and
    ``try_coerce`` raises.
    """

    def __init__(self, reason: str = "unsupported value kind") -> None:
        self._reason = reason

    def execute(self, value: Any, ctx: CoercionContext) -> Any:
        raise ctx.fail(f"{self._reason} ({ctx.kind.value})")
