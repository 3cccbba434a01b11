"""Tests for value classification and zero-value detection."""

import dataclasses
import datetime
import uuid
from collections import OrderedDict, namedtuple
from decimal import Decimal
from fractions import Fraction

import pytest
from bson import ObjectId

from valnorm import Instant, ValueKind, classify, is_zero_value


@dataclasses.dataclass
class Point:
    x: int = 0
    y: int = 0


Pair = namedtuple("Pair", "left right")


class Sized:
    def __init__(self, n):
        self.n = n

    def __len__(self):
        return self.n


class TestClassify:
    """Test classify."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOLEAN),
            (False, ValueKind.BOOLEAN),
            (0, ValueKind.INTEGER),
            (2 ** 80, ValueKind.INTEGER),
            (1.5, ValueKind.FLOAT),
            (Decimal("1.5"), ValueKind.FLOAT),
            (Fraction(1, 3), ValueKind.FLOAT),
            ("", ValueKind.TEXT),
            (b"x", ValueKind.BYTES),
            (bytearray(b"x"), ValueKind.BYTES),
            (memoryview(b"x"), ValueKind.BYTES),
            (Instant(), ValueKind.INSTANT),
            (datetime.datetime(2024, 1, 1), ValueKind.INSTANT),
            (datetime.date(2024, 1, 1), ValueKind.INSTANT),
            (ObjectId(), ValueKind.IDENTIFIER),
            (uuid.uuid4(), ValueKind.IDENTIFIER),
            ({}, ValueKind.STRUCTURED),
            (OrderedDict(), ValueKind.STRUCTURED),
            ([], ValueKind.STRUCTURED),
            ((), ValueKind.STRUCTURED),
            (Pair(1, 2), ValueKind.STRUCTURED),
            ({1}, ValueKind.STRUCTURED),
            (frozenset(), ValueKind.STRUCTURED),
            (Point(), ValueKind.STRUCTURED),
            (object(), ValueKind.OTHER),
            (Point, ValueKind.OTHER),
        ],
    )
    def test_kinds(self, value, kind):
        assert classify(value) is kind

    def test_bool_is_not_an_integer(self):
        """bool is classified before int."""
        assert classify(True) is not ValueKind.INTEGER


class TestIsZeroValue:
    """Test is_zero_value."""

    @pytest.mark.parametrize(
        "value",
        [
            None, False, 0, 0.0, -0.0, Decimal("0"), "", b"",
            Instant(), datetime.date.min, datetime.datetime.min,
            ObjectId(b"\x00" * 12), uuid.UUID(int=0),
            {}, [], (), set(),
            Point(), Sized(0),
        ],
    )
    def test_zero(self, value):
        assert is_zero_value(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            True, 1, -1, 0.1, float("nan"), " ", b"\x00",
            Instant.from_unix(0), datetime.date(1970, 1, 1),
            ObjectId("507f1f77bcf86cd799439011"), uuid.UUID(int=1),
            {"a": 0}, [0], (None,), {0},
            Point(1, 0), Sized(2), object(),
        ],
    )
    def test_non_zero(self, value):
        assert is_zero_value(value) is False

    def test_nested_dataclass(self):
        @dataclasses.dataclass
        class Line:
            start: Point = dataclasses.field(default_factory=Point)
            end: Point = dataclasses.field(default_factory=Point)

        assert is_zero_value(Line()) is True
        assert is_zero_value(Line(end=Point(0, 3))) is False
