"""Core abstractions, handler registries, and the Coercer.

This module owns every *interface* in the system.  Nothing here depends on a
concrete handler; all concrete classes live in the ``handlers`` sub-package
and are wired together in ``factory``.

Execution flow (``Coercer.coerce`` entry point)::

    value (arbitrary Python object), target name, formats
      │
      ▼
    kinds.classify(value) → ValueKind
      │
      ▼
    HandlerRegistry.resolve(value, kind) → handler    ← select (tree, first-match)
      │
      ▼
    handler.execute(value, ctx)
      │
      ├── returns a value of the target type
      └── raises CoercionError  → coerce():     target default
                                 try_coerce(): propagate
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .casters import (
    BOOLEAN,
    FLOAT,
    INSTANT,
    INTEGER,
    OBJECT_ID,
    TEXT,
    resolve_caster,
)
from .kinds import ValueKind, classify
from .rounding import RoundingMode, round_float

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────


class CoercionError(ValueError):
    """A value could not be converted to the requested target.

    Raised by handlers to signal a parse failure.  ``Coercer.coerce``
    intercepts it and returns the target's default; ``Coercer.try_coerce``
    lets it reach the caller.

    Attributes:
        reason: Short description of what did not match.
        value:  The input value (``None`` until the dispatcher fills it in).
        target: Name of the target registry (e.g. ``"integer"``).
    """

    def __init__(self, reason: str, *, value: Any = None, target: Optional[str] = None) -> None:
        self.reason = reason
        self.value = value
        self.target = target
        super().__init__(reason)

    def __str__(self) -> str:
        if self.target is None:
            return self.reason
        return f"cannot coerce {type(self.value).__name__} to {self.target}: {self.reason}"


# ─────────────────────────────────────────────────────────────────────────────
# CoercionContext
# ─────────────────────────────────────────────────────────────────────────────


@dataclass
class CoercionContext:
    """Per-call state handed to the selected handler.

    Attributes:
        value:    The input value being coerced.
        kind:     Its ``ValueKind`` (computed once by the dispatcher).
        target:   Name of the target registry.
        coercer:  Back-reference to the owning Coercer, so handlers can
                  delegate (e.g. the temporal fallback renders through
                  ``ctx.coercer.to_text``).
        formats:  Explicit candidate formats (only the temporal target reads
                  them).
        metadata: Arbitrary side-channel data for custom handlers.
    """

    value: Any
    kind: ValueKind
    target: str
    coercer: 'Coercer'
    formats: Tuple[str, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict)

    def fail(self, reason: str) -> CoercionError:
        """Build a CoercionError bound to this call (``raise ctx.fail(…)``)."""
        return CoercionError(reason, value=self.value, target=self.target)


# ─────────────────────────────────────────────────────────────────────────────
# Handler system — tree-structured per-kind dispatch
# ─────────────────────────────────────────────────────────────────────────────


class ValueMatcher(ABC):
    """Predicate: does this *value* belong to the given tree node?

    Examples::

        KindMatcher(ValueKind.TEXT)  → kind is TEXT
        AlwaysMatcher()              → True
    """

    @abstractmethod
    def matches(self, value: Any, kind: ValueKind) -> bool: ...


class CoercionHandler(ABC):
    """Convert a single value to the registry's target type.

    Raise ``ctx.fail(reason)`` when the value cannot be converted; never
    return a sentinel.
    """

    @abstractmethod
    def execute(self, value: Any, ctx: CoercionContext) -> Any:
        """Return the converted value."""


@dataclass
class HandlerNode:
    """Node in the handler tree.

    Field combinations::

        handler, no children   → leaf
        no handler, children   → group (no fallback)
        handler + children     → group with fallback handler

    The *fallback* rule: ``handler`` is only selected when
    ``children.resolve()`` finds nothing.
    """

    name: str
    priority: int
    matcher: ValueMatcher
    handler: Optional[CoercionHandler] = None
    children: Optional['HandlerRegistry'] = None


class HandlerRegistry:
    """Hierarchical registry with first-match (``resolve``) dispatch.

    Each instance is one level of the tree and may be nested as the
    ``children`` of a ``HandlerNode``.  Nodes are walked by descending
    priority; nodes of equal priority keep registration order.
    """

    def __init__(self) -> None:
        self._nodes: List[HandlerNode] = []

    # -- registration -------------------------------------------------------

    def register(self, node: HandlerNode) -> None:
        """Add a node to this registry level."""
        self._nodes.append(node)

    def register_group(
            self,
            name: str,
            registry: 'HandlerRegistry',
            *,
            matcher: ValueMatcher,
            priority: int = 0,
            handler: Optional[CoercionHandler] = None,
    ) -> None:
        """Mount a sub-registry as a group node.

        Sugar for ``register(HandlerNode(…, children=registry))``.
        """
        self.register(HandlerNode(
            name=name, priority=priority,
            matcher=matcher, handler=handler,
            children=registry,
        ))

    # -- dispatch -----------------------------------------------------------

    def resolve(self, value: Any, kind: ValueKind) -> Optional[CoercionHandler]:
        """Select the handler for *value*, or ``None`` if nothing matches.

        Algorithm::

            for node by priority desc:
                if matcher matches:
                    if children and children.resolve() → return it
                    if handler → return handler          # fallback
        """
        for node in self.nodes():
            if node.matcher.matches(value, kind):
                if node.children is not None:
                    sub = node.children.resolve(value, kind)
                    if sub is not None:
                        return sub
                if node.handler is not None:
                    return node.handler
        return None

    # -- introspection ------------------------------------------------------

    def nodes(self) -> List[HandlerNode]:
        """Return nodes sorted by descending priority."""
        return sorted(self._nodes, key=lambda n: n.priority, reverse=True)


# ─────────────────────────────────────────────────────────────────────────────
# Coercer — orchestrator / public entry point
# ─────────────────────────────────────────────────────────────────────────────


class Coercer:
    """Holds one ``HandlerRegistry`` and one default value per target.

    * ``coerce``     – total: any failure yields the target's default.
    * ``try_coerce`` – fallible: failures raise ``CoercionError``.

    Unknown *target* names are programming errors and raise ``KeyError`` from
    both entry points.
    """

    def __init__(
            self,
            *,
            registries: Optional[Dict[str, HandlerRegistry]] = None,
            defaults: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._registries: Dict[str, HandlerRegistry] = dict(registries) if registries else {}
        self._defaults: Dict[str, Any] = dict(defaults) if defaults else {}

    # -- registration -------------------------------------------------------

    def register_target(self, name: str, registry: HandlerRegistry, default: Any) -> None:
        """Register (or replace) a target registry and its failure value."""
        self._registries[name] = registry
        self._defaults[name] = default

    def register_handler(self, target: str, node: HandlerNode) -> None:
        """Add a node to an existing target registry."""
        self.registry(target).register(node)

    # -- introspection ------------------------------------------------------

    def registry(self, target: str) -> HandlerRegistry:
        if target not in self._registries:
            raise KeyError(f"target {target!r} not registered")
        return self._registries[target]

    def default(self, target: str) -> Any:
        self.registry(target)
        return self._defaults[target]

    def targets(self) -> List[str]:
        return list(self._registries)

    # -- dispatch -----------------------------------------------------------

    def _dispatch(self, target: str, value: Any, formats: Tuple[str, ...]) -> Any:
        registry = self.registry(target)
        kind = classify(value)
        handler = registry.resolve(value, kind)
        if handler is None:
            raise CoercionError(f"no handler for {kind.value} values", value=value, target=target)
        ctx = CoercionContext(value=value, kind=kind, target=target, coercer=self, formats=formats)
        return handler.execute(value, ctx)

    def coerce(self, target: str, value: Any, *formats: str) -> Any:
        """Convert *value* to *target*; return the target default on any failure."""
        registry_default = self.default(target)
        try:
            return self._dispatch(target, value, formats)
        except CoercionError as exc:
            logger.debug("%s coercion fell back to default: %s", target, exc.reason)
        except Exception:
            logger.debug(
                "%s coercion of %s raised, falling back to default",
                target, type(value).__name__, exc_info=True,
            )
        return registry_default

    def try_coerce(self, target: str, value: Any, *formats: str) -> Any:
        """Convert *value* to *target*; raise ``CoercionError`` on failure."""
        self.registry(target)
        try:
            return self._dispatch(target, value, formats)
        except CoercionError as exc:
            if exc.target is None:
                raise CoercionError(exc.reason, value=value, target=target) from exc
            raise
        except Exception as exc:
            raise CoercionError(f"{type(exc).__name__}: {exc}", value=value, target=target) from exc

    def cast(self, value: Any, type_name: str, *formats: str) -> Any:
        """Total coercion selected by caster name (``"int"``, ``"time"``, …)."""
        return self.coerce(resolve_caster(type_name), value, *formats)

    # -- total shortcuts ----------------------------------------------------

    def to_text(self, value: Any) -> str:
        return self.coerce(TEXT, value)

    def to_integer(self, value: Any) -> int:
        return self.coerce(INTEGER, value)

    def to_float(self, value: Any) -> float:
        return self.coerce(FLOAT, value)

    def to_rounded_float(self, value: Any, mode: RoundingMode | str, places: int) -> float:
        """Float coercion followed by ``round_float`` (the rounding stage)."""
        return round_float(self.to_float(value), mode, places)

    def to_boolean(self, value: Any) -> bool:
        return self.coerce(BOOLEAN, value)

    def to_instant(self, value: Any, *formats: str) -> Any:
        return self.coerce(INSTANT, value, *formats)

    def to_object_id(self, value: Any) -> Any:
        return self.coerce(OBJECT_ID, value)

    # -- fallible shortcuts -------------------------------------------------

    def try_to_integer(self, value: Any) -> int:
        return self.try_coerce(INTEGER, value)

    def try_to_float(self, value: Any) -> float:
        return self.try_coerce(FLOAT, value)

    def try_to_boolean(self, value: Any) -> bool:
        return self.try_coerce(BOOLEAN, value)

    def try_to_instant(self, value: Any, *formats: str) -> Any:
        return self.try_coerce(INSTANT, value, *formats)

    def try_to_object_id(self, value: Any) -> Any:
        return self.try_coerce(OBJECT_ID, value)
