"""Tests for matcher classes."""

from valnorm import AlwaysMatcher, KindMatcher, TypeMatcher, ValueKind
from valnorm.handlers import SelfRenderingMatcher


class TestKindMatcher:
    """Test KindMatcher."""

    def test_matches_listed_kinds(self):
        matcher = KindMatcher(ValueKind.INTEGER, ValueKind.FLOAT)

        assert matcher.matches(1, ValueKind.INTEGER) is True
        assert matcher.matches(1.5, ValueKind.FLOAT) is True
        assert matcher.matches("1", ValueKind.TEXT) is False

    def test_no_kinds_matches_nothing(self):
        assert KindMatcher().matches(None, ValueKind.NULL) is False


class TestTypeMatcher:
    """Test TypeMatcher."""

    def test_matches_instances(self):
        matcher = TypeMatcher(int, str)

        assert matcher.matches(3, ValueKind.INTEGER) is True
        assert matcher.matches("x", ValueKind.TEXT) is True
        assert matcher.matches(3.0, ValueKind.FLOAT) is False


class TestAlwaysMatcher:
    """Test AlwaysMatcher."""

    def test_always_matches(self):
        matcher = AlwaysMatcher()

        assert matcher.matches({}, ValueKind.STRUCTURED) is True
        assert matcher.matches(None, ValueKind.NULL) is True
        assert matcher.matches(object(), ValueKind.OTHER) is True


class TestSelfRenderingMatcher:
    """Test SelfRenderingMatcher."""

    def test_classes_with_own_str(self):
        class Named:
            def __str__(self):
                return "named"

        matcher = SelfRenderingMatcher()
        assert matcher.matches(Named(), ValueKind.OTHER) is True
        assert matcher.matches(ValueError("x"), ValueKind.OTHER) is True

    def test_containers_do_not_render_themselves(self):
        matcher = SelfRenderingMatcher()
        assert matcher.matches({}, ValueKind.STRUCTURED) is False
        assert matcher.matches([1], ValueKind.STRUCTURED) is False
        assert matcher.matches(object(), ValueKind.OTHER) is False
