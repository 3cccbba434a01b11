"""Shared ValueMatcher implementations.

Only matchers that are genuinely reusable across several targets live here.
Matchers tied to a single handler (e.g. ``SelfRenderingMatcher``) are
co-located with that handler in the ``handlers`` sub-package.

Exports
-------
KindMatcher
    Match by ``ValueKind``.  Most nodes in the default registries use one.

TypeMatcher
    Match by ``isinstance``, for custom handlers keyed on a concrete class.

AlwaysMatcher
    Unconditional match: catch-all / fallback sentinel.
"""

from __future__ import annotations

from typing import Any

from .core import ValueMatcher
from .kinds import ValueKind


class KindMatcher(ValueMatcher):
    """Match a value whose kind is one of *kinds*.

    ::

        KindMatcher(ValueKind.TEXT).matches("x", ValueKind.TEXT)   # True
        KindMatcher(ValueKind.TEXT).matches(1, ValueKind.INTEGER)  # False
    """

    def __init__(self, *kinds: ValueKind) -> None:
        self._kinds = frozenset(kinds)

    def matches(self, value: Any, kind: ValueKind) -> bool:
        return kind in self._kinds


class TypeMatcher(ValueMatcher):
    """Match instances of any of *types*."""

    def __init__(self, *types: type) -> None:
        self._types = tuple(types)

    def matches(self, value: Any, kind: ValueKind) -> bool:
        return isinstance(value, self._types)


class AlwaysMatcher(ValueMatcher):
    """Unconditional match; use as a catch-all / fallback node.

    ::

        AlwaysMatcher().matches(anything, kind)   # True
    """

    def matches(self, value: Any, kind: ValueKind) -> bool:
        return True
