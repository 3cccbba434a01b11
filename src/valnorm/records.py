"""Record extraction — pull fields out of untyped documents and coerce them.

A field is described by a ``FieldSpec`` (JMESPath expression + caster name)
or by the shorthand string ``"<caster>:<expression>"``; a bare expression
means the ``str`` caster::

    normalize_record(
        {"user": {"age": "30", "joined": "2024-10-14"}},
        {"age": "int:user.age", "joined": "time:user.joined"},
    )
    # → {"age": 30, "joined": Instant(...)}

Expressions may call the coercion functions of ``jmes_ext``
(``to_int``, ``to_float``, ``to_bool``, ``to_text``, ``to_unix``).
Malformed expressions raise ``jmespath.exceptions.ParseError``; unknown
caster names raise ``KeyError``.  Coercion itself is total.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

import jmespath

from .api import default_coercer
from .casters import BUILTIN_CASTERS, resolve_caster
from .core import Coercer
from .jmes_ext import JP_OPTIONS


@dataclass(frozen=True)
class FieldSpec:
    """How to produce one output field.

    Attributes:
        path:    JMESPath expression evaluated against the source document.
        caster:  Caster name from ``BUILTIN_CASTERS``.
        formats: Explicit candidate formats (``time`` caster only).
        default: Used when *path* yields ``None``; coerced like a match.
    """

    path: str
    caster: str = "str"
    formats: Tuple[str, ...] = ()
    default: Any = None

    @classmethod
    def parse(cls, shorthand: str) -> FieldSpec:
        """``"int:user.age"`` → ``FieldSpec("user.age", "int")``.

        The prefix only counts as a caster when it names one, so slice
        expressions such as ``"items[0:2]"`` are left intact.
        """
        prefix, sep, rest = shorthand.partition(":")
        if sep and prefix in BUILTIN_CASTERS:
            return cls(path=rest, caster=prefix)
        return cls(path=shorthand)


@functools.lru_cache(maxsize=512)
def _compile(expression: str) -> Any:
    return jmespath.compile(expression)


def extract(source: Any, spec: FieldSpec, *, coercer: Optional[Coercer] = None) -> Any:
    """Evaluate one field of *source* and coerce it."""
    coercer = coercer or default_coercer()
    value = _compile(spec.path).search(source, options=JP_OPTIONS)
    if value is None:
        value = spec.default
    return coercer.coerce(resolve_caster(spec.caster), value, *spec.formats)


def normalize_record(
        source: Any,
        fields: Mapping[str, Union[FieldSpec, str]],
        *,
        coercer: Optional[Coercer] = None,
) -> dict[str, Any]:
    """Build a flat dict of coerced fields from *source*."""
    out: dict[str, Any] = {}
    for name, spec in fields.items():
        if isinstance(spec, str):
            spec = FieldSpec.parse(spec)
        out[name] = extract(source, spec, coercer=coercer)
    return out
