"""valnorm — total coercion of untyped values to text, numbers, booleans,
object ids and nanosecond instants."""

from .api import (
    cast,
    default_coercer,
    round_auto,
    round_down,
    round_up,
    to_boolean,
    to_float,
    to_instant,
    to_integer,
    to_json,
    to_object_id,
    to_rounded_float,
    to_text,
    try_to_boolean,
    try_to_float,
    try_to_instant,
    try_to_integer,
    try_to_object_id,
)
from .casters import BUILTIN_CASTERS
from .core import (
    CoercionContext,
    CoercionError,
    CoercionHandler,
    Coercer,
    HandlerNode,
    HandlerRegistry,
    ValueMatcher,
)
from .factory import build_default_coercer
from .formats import DEFAULT_FORMATS, TimeFormat
from .instant import Instant
from .kinds import ValueKind, classify, is_zero_value
from .matchers import AlwaysMatcher, KindMatcher, TypeMatcher
from .records import FieldSpec, normalize_record
from .rounding import RoundingMode, round_float


__all__ = [
    # total API
    "to_text",
    "to_integer",
    "to_float",
    "round_float",
    "to_rounded_float",
    "round_up",
    "round_down",
    "round_auto",
    "to_boolean",
    "to_instant",
    "to_object_id",
    "to_json",
    "cast",
    # fallible API
    "try_to_integer",
    "try_to_float",
    "try_to_boolean",
    "try_to_instant",
    "try_to_object_id",
    # core
    "Coercer",
    "CoercionContext",
    "CoercionError",
    "CoercionHandler",
    "HandlerNode",
    "HandlerRegistry",
    "ValueMatcher",
    "build_default_coercer",
    "default_coercer",
    # matchers / kinds
    "AlwaysMatcher",
    "KindMatcher",
    "TypeMatcher",
    "ValueKind",
    "classify",
    "is_zero_value",
    # values
    "Instant",
    "RoundingMode",
    "TimeFormat",
    "DEFAULT_FORMATS",
    "BUILTIN_CASTERS",
    # records
    "FieldSpec",
    "normalize_record",
]
