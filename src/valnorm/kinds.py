"""Closed classification of input values.

Every value handed to a ``Coercer`` is classified exactly once into a
``ValueKind``.  Matchers dispatch on the kind instead of re-running
``isinstance`` chains, and every target registry ends in a catch-all node,
so dispatch over the enumeration is exhaustive.

Exports
-------
ValueKind
    The enumeration of input variants.

classify
    ``value → ValueKind``.

is_zero_value
    Per-kind "is this the type's empty/default value" predicate, used as the
    final boolean fallback.
"""

from __future__ import annotations

import dataclasses
import datetime
import numbers
import uuid
from collections.abc import Mapping, Sequence, Set
from decimal import Decimal
from enum import Enum
from typing import Any

from bson import ObjectId

from .instant import Instant


class ValueKind(Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    TEXT = "text"
    BYTES = "bytes"
    INSTANT = "instant"
    IDENTIFIER = "identifier"
    STRUCTURED = "structured"
    OTHER = "other"


_BYTES_TYPES = (bytes, bytearray, memoryview)
_INSTANT_TYPES = (Instant, datetime.datetime, datetime.date)
_IDENTIFIER_TYPES = (ObjectId, uuid.UUID)


def is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def classify(value: Any) -> ValueKind:
    """Return the ``ValueKind`` of *value*.

    ``bool`` is checked before integers, and ``str`` / bytes before generic
    sequences.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Integral):
        return ValueKind.INTEGER
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, _BYTES_TYPES):
        return ValueKind.BYTES
    if isinstance(value, _INSTANT_TYPES):
        return ValueKind.INSTANT
    if isinstance(value, _IDENTIFIER_TYPES):
        return ValueKind.IDENTIFIER
    if isinstance(value, (Mapping, Sequence, Set)) or is_dataclass_instance(value):
        return ValueKind.STRUCTURED
    return ValueKind.OTHER


def is_zero_value(value: Any) -> bool:
    """True when *value* is its type's empty/default value.

    * ``None``, ``False``, numeric zero, empty text/bytes.
    * The zero ``Instant`` (``0001-01-01T00:00:00Z``), ``date.min``,
      ``datetime.min``.
    * The all-zero ``ObjectId`` and the nil UUID.
    * Empty mappings, sequences and sets.
    * Dataclass instances whose fields are all zero-valued.
    * Other objects: falsy under ``bool()`` when they define ``__bool__`` or
      ``__len__``; otherwise never zero.
    """
    kind = classify(value)
    if kind is ValueKind.NULL:
        return True
    if kind in (ValueKind.BOOLEAN, ValueKind.INTEGER, ValueKind.FLOAT):
        return value == 0
    if kind in (ValueKind.TEXT, ValueKind.BYTES):
        return len(value) == 0
    if kind is ValueKind.INSTANT:
        if isinstance(value, Instant):
            return value.is_zero()
        if isinstance(value, datetime.datetime):
            return value.replace(tzinfo=None) == datetime.datetime.min
        return value == datetime.date.min
    if kind is ValueKind.IDENTIFIER:
        if isinstance(value, ObjectId):
            return value.binary == b"\x00" * 12
        return value.int == 0
    if kind is ValueKind.STRUCTURED:
        if is_dataclass_instance(value):
            return all(
                is_zero_value(getattr(value, f.name))
                for f in dataclasses.fields(value)
            )
        return len(value) == 0
    cls = type(value)
    if hasattr(cls, "__bool__") or hasattr(cls, "__len__"):
        return not bool(value)
    return False
