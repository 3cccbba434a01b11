"""Tests for record extraction."""

import jmespath
import pytest

from valnorm import FieldSpec, Instant, build_default_coercer, normalize_record
from valnorm.instant import NS_PER_MILLI
from valnorm.records import extract


class TestFieldSpec:
    """Test FieldSpec.parse."""

    def test_caster_prefix(self):
        assert FieldSpec.parse("int:user.age") == FieldSpec(path="user.age", caster="int")

    def test_bare_path(self):
        assert FieldSpec.parse("user.name") == FieldSpec(path="user.name")

    def test_slice_is_not_a_caster(self):
        assert FieldSpec.parse("items[0:2]") == FieldSpec(path="items[0:2]")


class TestNormalizeRecord:
    """Test normalize_record."""

    def test_shorthand_fields(self, sample_record):
        out = normalize_record(sample_record, {
            "name": "user.name",
            "age": "int:user.age",
            "active": "bool:user.active",
            "joined": "time:user.joined",
            "score": "float:user.score",
            "first_event": "time:events[0].at",
            "last_event": "time:events[-1].at",
        })

        assert out == {
            "name": "Alice",
            "age": 30,
            "active": True,
            "joined": Instant.from_unix(1728918245),
            "score": 97.456,
            "first_event": Instant(1697297045000 * NS_PER_MILLI),
            "last_event": Instant.from_unix(1697297045),
        }

    def test_missing_fields(self, sample_record):
        out = normalize_record(sample_record, {
            "missing_int": "int:user.missing",
            "missing_text": "user.missing",
            "defaulted": FieldSpec("user.missing", "int", default="7"),
        })

        assert out == {"missing_int": 0, "missing_text": "", "defaulted": 7}

    def test_explicit_formats(self):
        spec = FieldSpec("born", "time", formats=("%d/%m/%Y",))

        assert extract({"born": "14/10/2024"}, spec).isoformat() == "2024-10-14T00:00:00Z"
        assert extract({"born": "2024-10-14"}, spec).is_zero()

    def test_expression_functions(self, sample_record):
        out = normalize_record(sample_record, {
            "joined_unix": "int:to_unix(user.joined)",
            "kinds": "events[].kind",
        })

        assert out == {"joined_unix": 1728918245, "kinds": '["login","logout"]'}

    def test_custom_coercer(self, sample_record):
        coercer = build_default_coercer(true_tokens={"oui"}, false_tokens={"non"})
        out = normalize_record(sample_record, {"active": "bool:user.active"}, coercer=coercer)

        assert out == {"active": False}

    def test_bad_expression(self, sample_record):
        with pytest.raises(jmespath.exceptions.ParseError):
            normalize_record(sample_record, {"x": "user..name"})

    def test_unknown_caster(self, sample_record):
        with pytest.raises(KeyError):
            normalize_record(sample_record, {"x": FieldSpec("user.name", caster="decimal")})
