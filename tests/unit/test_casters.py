"""Tests for caster names and cast()."""

import pytest
from bson import ObjectId

from valnorm import BUILTIN_CASTERS, Instant, cast
from valnorm.casters import resolve_caster


class TestCasters:
    """Test BUILTIN_CASTERS / resolve_caster."""

    def test_builtin_names(self):
        assert set(BUILTIN_CASTERS) == {"str", "int", "float", "bool", "time", "objectid"}

    def test_resolve(self):
        assert resolve_caster("int") == "integer"
        assert resolve_caster("time") == "instant"

    def test_unknown(self):
        with pytest.raises(KeyError, match="unknown caster"):
            resolve_caster("decimal")


class TestCast:
    """Test cast."""

    def test_each_caster(self):
        assert cast(42, "str") == "42"
        assert cast("42", "int") == 42
        assert cast("2.5", "float") == 2.5
        assert cast("yes", "bool") is True
        assert cast("1697297045", "time") == Instant.from_unix(1697297045)
        assert cast("507f1f77bcf86cd799439011", "objectid") == ObjectId("507f1f77bcf86cd799439011")

    def test_formats_forwarded(self):
        assert cast("14/10/2024", "time", "%d/%m/%Y").isoformat() == "2024-10-14T00:00:00Z"

    def test_total(self):
        assert cast("abc", "int") == 0

    def test_unknown_caster(self):
        with pytest.raises(KeyError):
            cast("1", "nope")
