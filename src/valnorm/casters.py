"""Built-in target names and the caster-name table.

Target names key the per-target registries of a ``Coercer``.  Caster names
are the short aliases used by ``Coercer.cast`` and by ``FieldSpec.caster`` in
``records`` (``"int:user.age"``).

Exports
-------
TEXT, INTEGER, FLOAT, BOOLEAN, INSTANT, OBJECT_ID
    Target names registered by ``build_default_coercer``.

BUILTIN_CASTERS
    Dictionary mapping caster names to target names.
    Default casters: str, int, float, bool, time, objectid.
"""

from __future__ import annotations

TEXT = "text"
INTEGER = "integer"
FLOAT = "float"
BOOLEAN = "boolean"
INSTANT = "instant"
OBJECT_ID = "objectid"

# ─────────────────────────────────────────────────────────────────────────────
# Built-in casters
# ─────────────────────────────────────────────────────────────────────────────

BUILTIN_CASTERS: dict[str, str] = {
    "str": TEXT,
    "int": INTEGER,
    "float": FLOAT,
    "bool": BOOLEAN,
    "time": INSTANT,
    "objectid": OBJECT_ID,
}


def resolve_caster(name: str) -> str:
    """Return the target registered for caster *name*; ``KeyError`` if unknown."""
    try:
        return BUILTIN_CASTERS[name]
    except KeyError:
        raise KeyError(f"unknown caster: {name!r}") from None
