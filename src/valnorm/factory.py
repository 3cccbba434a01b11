"""Coercer factory — the single place where all pieces are assembled.

``build_default_coercer`` is the recommended entry point for users who want a
fully functional Coercer without hand-wiring every registry.

Customisation points:

* **formats**      – replaces the default layout table used when a call gives
                     no explicit formats.
* **true_tokens** /
  **false_tokens** – replace the boolean token tables.
* **handlers**     – extra ``HandlerNode``s per target, registered after the
                     defaults (priority decides precedence).
"""

from __future__ import annotations

from typing import Iterable, Mapping

from bson import ObjectId

from .casters import BOOLEAN, FLOAT, INSTANT, INTEGER, OBJECT_ID, TEXT
from .core import Coercer, HandlerNode, HandlerRegistry
from .formats import TimeFormat
from .handlers.boolean import NonEmptyHandler, NonZeroHandler, TokenBooleanHandler
from .handlers.floating import (
    BooleanFloatHandler, NumericFloatHandler, RenderedFloatHandler, TextFloatHandler,
)
from .handlers.identifier import ZERO_OBJECT_ID, HexObjectIdHandler
from .handlers.identity import ConstantHandler, IdentityHandler, RejectHandler
from .handlers.integer import IntegerPassHandler, TextIntegerHandler, TruncatingIntegerHandler
from .handlers.temporal import (
    EpochSecondsHandler, FractionalEpochHandler, InstantPassHandler,
    RenderedInstantHandler, TextInstantHandler,
)
from .handlers.text import (
    BooleanTextHandler, BytesTextHandler, FloatTextHandler, IntegerTextHandler,
    ReprHandler, SelfRenderingMatcher, StrHandler, StructuredTextHandler,
)
from .instant import Instant
from .kinds import ValueKind
from .matchers import AlwaysMatcher, KindMatcher, TypeMatcher


def _build_text_registry() -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="null", priority=100,
        matcher=KindMatcher(ValueKind.NULL),
        handler=ConstantHandler(""),
    ))
    reg.register(HandlerNode(
        name="text", priority=90,
        matcher=KindMatcher(ValueKind.TEXT),
        handler=IdentityHandler(),
    ))
    reg.register(HandlerNode(
        name="boolean", priority=80,
        matcher=KindMatcher(ValueKind.BOOLEAN),
        handler=BooleanTextHandler(),
    ))
    reg.register(HandlerNode(
        name="integer", priority=80,
        matcher=KindMatcher(ValueKind.INTEGER),
        handler=IntegerTextHandler(),
    ))
    reg.register(HandlerNode(
        name="float", priority=80,
        matcher=KindMatcher(ValueKind.FLOAT),
        handler=FloatTextHandler(),
    ))
    reg.register(HandlerNode(
        name="bytes", priority=80,
        matcher=KindMatcher(ValueKind.BYTES),
        handler=BytesTextHandler(),
    ))
    reg.register(HandlerNode(
        name="identifier", priority=70,
        matcher=KindMatcher(ValueKind.IDENTIFIER),
        handler=StrHandler(),
    ))
    reg.register(HandlerNode(
        name="self-rendering", priority=50,
        matcher=SelfRenderingMatcher(),
        handler=StrHandler(),
    ))
    reg.register(HandlerNode(
        name="structured", priority=40,
        matcher=KindMatcher(ValueKind.STRUCTURED),
        handler=StructuredTextHandler(),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=ReprHandler(),
    ))
    return reg


def _build_integer_registry() -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="integer", priority=80,
        matcher=KindMatcher(ValueKind.INTEGER),
        handler=IntegerPassHandler(),
    ))
    reg.register(HandlerNode(
        name="float", priority=80,
        matcher=KindMatcher(ValueKind.FLOAT),
        handler=TruncatingIntegerHandler(),
    ))
    reg.register(HandlerNode(
        name="text", priority=80,
        matcher=KindMatcher(ValueKind.TEXT),
        handler=TextIntegerHandler(),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=RejectHandler(),
    ))
    return reg


def _build_float_registry() -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="null", priority=90,
        matcher=KindMatcher(ValueKind.NULL),
        handler=RejectHandler("no value"),
    ))
    reg.register(HandlerNode(
        name="numeric", priority=80,
        matcher=KindMatcher(ValueKind.INTEGER, ValueKind.FLOAT),
        handler=NumericFloatHandler(),
    ))
    reg.register(HandlerNode(
        name="text", priority=80,
        matcher=KindMatcher(ValueKind.TEXT),
        handler=TextFloatHandler(),
    ))
    reg.register(HandlerNode(
        name="boolean", priority=80,
        matcher=KindMatcher(ValueKind.BOOLEAN),
        handler=BooleanFloatHandler(),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=RenderedFloatHandler(),
    ))
    return reg


def _build_boolean_registry(
        true_tokens: Iterable[str] | None,
        false_tokens: Iterable[str] | None,
) -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="null", priority=90,
        matcher=KindMatcher(ValueKind.NULL),
        handler=RejectHandler("no value"),
    ))
    reg.register(HandlerNode(
        name="boolean", priority=80,
        matcher=KindMatcher(ValueKind.BOOLEAN),
        handler=IdentityHandler(),
    ))
    reg.register(HandlerNode(
        name="numeric", priority=80,
        matcher=KindMatcher(ValueKind.INTEGER, ValueKind.FLOAT),
        handler=NonZeroHandler(),
    ))
    reg.register(HandlerNode(
        name="text", priority=80,
        matcher=KindMatcher(ValueKind.TEXT),
        handler=TokenBooleanHandler(true_tokens, false_tokens),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=NonEmptyHandler(),
    ))
    return reg


def _build_instant_registry(layouts: tuple[str, ...] | None) -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="instant", priority=90,
        matcher=KindMatcher(ValueKind.INSTANT),
        handler=InstantPassHandler(),
    ))
    reg.register(HandlerNode(
        name="null", priority=90,
        matcher=KindMatcher(ValueKind.NULL),
        handler=RejectHandler("no value"),
    ))
    reg.register(HandlerNode(
        name="integer", priority=80,
        matcher=KindMatcher(ValueKind.INTEGER),
        handler=EpochSecondsHandler(),
    ))
    reg.register(HandlerNode(
        name="float", priority=80,
        matcher=KindMatcher(ValueKind.FLOAT),
        handler=FractionalEpochHandler(),
    ))
    reg.register(HandlerNode(
        name="text", priority=80,
        matcher=KindMatcher(ValueKind.TEXT),
        handler=TextInstantHandler(layouts),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=RenderedInstantHandler(layouts),
    ))
    return reg


def _build_object_id_registry() -> HandlerRegistry:
    reg = HandlerRegistry()
    reg.register(HandlerNode(
        name="objectid", priority=90,
        matcher=TypeMatcher(ObjectId),
        handler=IdentityHandler(),
    ))
    reg.register(HandlerNode(
        name="null", priority=90,
        matcher=KindMatcher(ValueKind.NULL),
        handler=RejectHandler("no value"),
    ))
    reg.register(HandlerNode(
        name="fallback", priority=-999,
        matcher=AlwaysMatcher(),
        handler=HexObjectIdHandler(),
    ))
    return reg


def build_default_coercer(
        *,
        formats: Iterable[str | TimeFormat] | None = None,
        true_tokens: Iterable[str] | None = None,
        false_tokens: Iterable[str] | None = None,
        handlers: Mapping[str, Iterable[HandlerNode]] | None = None,
) -> Coercer:
    """Assemble a Coercer with the standard targets.

    What gets wired
    ---------------
    text      ``None`` → ``""``, scalars, identifiers, self-rendering values,
              structured JSON, ``repr()`` catch-all.
    integer   pass-through, truncation, strict text parse; others fail → ``0``.
    float     numeric, strict text parse, bool → 1.0/0.0, render-then-parse
              catch-all; failure → ``0.0``.
    boolean   identity, nonzero, token table, emptiness catch-all;
              failure → ``False``.
    instant   pass-through, epoch seconds, fractional seconds, layouts +
              magnitude inference, render-then-parse catch-all; failure →
              ``Instant.zero()``.
    objectid  pass-through, hex parse of the text rendering; failure → the
              all-zero ``ObjectId``.

    Args:
        formats:      Default layout table (layout strings or ``TimeFormat``
                      entries), tried in order.  ``None`` → ``DEFAULT_FORMATS``.
        true_tokens:  Boolean true tokens.  ``None`` → ``TRUE_TOKENS``.
        false_tokens: Boolean false tokens.  ``None`` → ``FALSE_TOKENS``.
        handlers:     Extra nodes keyed by target name.

    Returns:
        Fully wired ``Coercer`` ready for use.

    Example::

        coercer = build_default_coercer(formats=["%d.%m.%Y"])
        coercer.to_instant("14.10.2024")
        # → Instant for 2024-10-14T00:00:00Z
    """
    layouts = None
    if formats is not None:
        layouts = tuple(fmt.layout if isinstance(fmt, TimeFormat) else fmt for fmt in formats)

    coercer = Coercer()
    coercer.register_target(TEXT, _build_text_registry(), "")
    coercer.register_target(INTEGER, _build_integer_registry(), 0)
    coercer.register_target(FLOAT, _build_float_registry(), 0.0)
    coercer.register_target(BOOLEAN, _build_boolean_registry(true_tokens, false_tokens), False)
    coercer.register_target(INSTANT, _build_instant_registry(layouts), Instant.zero())
    coercer.register_target(OBJECT_ID, _build_object_id_registry(), ZERO_OBJECT_ID)

    for target, nodes in (handlers or {}).items():
        for node in nodes:
            coercer.register_handler(target, node)

    return coercer
