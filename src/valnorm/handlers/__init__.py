"""Handlers sub-package — concrete CoercionHandler (+ handler-specific
ValueMatcher) implementations, grouped by target.

identity   – pass-through, constant and rejecting handlers (all targets)
text       – text rendering, float formatting, deterministic JSON
integer    – 64-bit integer coercion
floating   – float coercion
boolean    – token table and emptiness fallback
temporal   – instant coercion and the string-parsing heuristics
identifier – ObjectId coercion
"""

from .boolean import FALSE_TOKENS, TRUE_TOKENS, NonEmptyHandler, NonZeroHandler, TokenBooleanHandler
from .floating import BooleanFloatHandler, NumericFloatHandler, RenderedFloatHandler, TextFloatHandler
from .identifier import ZERO_OBJECT_ID, HexObjectIdHandler
from .identity import ConstantHandler, IdentityHandler, RejectHandler
from .integer import IntegerPassHandler, TextIntegerHandler, TruncatingIntegerHandler
from .temporal import (
    EpochSecondsHandler, FractionalEpochHandler, InstantPassHandler,
    RenderedInstantHandler, TextInstantHandler,
    infer_epoch_unit, instant_from_fractional, parse_instant,
)
from .text import (
    BooleanTextHandler, BytesTextHandler, FloatTextHandler, IntegerTextHandler,
    ReprHandler, SelfRenderingMatcher, StrHandler, StructuredTextHandler,
    dump_json, format_float,
)

__all__ = [
    # identity
    "IdentityHandler",
    "ConstantHandler",
    "RejectHandler",
    # text
    "BooleanTextHandler",
    "IntegerTextHandler",
    "FloatTextHandler",
    "BytesTextHandler",
    "StrHandler",
    "StructuredTextHandler",
    "ReprHandler",
    "SelfRenderingMatcher",
    "format_float",
    "dump_json",
    # integer
    "IntegerPassHandler",
    "TruncatingIntegerHandler",
    "TextIntegerHandler",
    # floating
    "NumericFloatHandler",
    "TextFloatHandler",
    "BooleanFloatHandler",
    "RenderedFloatHandler",
    # boolean
    "TRUE_TOKENS",
    "FALSE_TOKENS",
    "NonZeroHandler",
    "TokenBooleanHandler",
    "NonEmptyHandler",
    # temporal
    "InstantPassHandler",
    "EpochSecondsHandler",
    "FractionalEpochHandler",
    "TextInstantHandler",
    "RenderedInstantHandler",
    "infer_epoch_unit",
    "instant_from_fractional",
    "parse_instant",
    # identifier
    "ZERO_OBJECT_ID",
    "HexObjectIdHandler",
]
