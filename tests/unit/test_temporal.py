"""Tests for the instant target."""

import datetime
from decimal import Decimal

import pytest

from valnorm import CoercionError, Instant, TimeFormat, build_default_coercer, to_instant, try_to_instant
from valnorm.formats import (
    DEFAULT_FORMATS,
    TIME_FORMAT_DATE_EU,
    TIME_FORMAT_DATE_EU_WITH_DASH,
    TIME_FORMAT_DATE_US_WITH_DASH,
    TIME_FORMAT_RFC3339,
    TIME_FORMAT_UNIX,
    TIME_FORMAT_UNIX_MICRO,
    TIME_FORMAT_UNIX_MILLI,
    TIME_FORMAT_UNIX_NANO,
)
from valnorm.handlers import infer_epoch_unit, parse_instant
from valnorm.instant import NS_PER_MICRO, NS_PER_MILLI, NS_PER_SECOND


def utc(*args):
    return Instant.from_datetime(datetime.datetime(*args, tzinfo=datetime.timezone.utc))


class Stamp:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


class TestDefaultTable:
    """Parsing without explicit formats."""

    @pytest.mark.parametrize("text, expected", [
        ("2024-10-14T15:04:05Z", utc(2024, 10, 14, 15, 4, 5)),
        ("2024-10-14T15:04:05+02:00", utc(2024, 10, 14, 13, 4, 5)),
        ("2024-10-14 15:04:05", utc(2024, 10, 14, 15, 4, 5)),
        ("2024-10-14 15:04:05 +0200", utc(2024, 10, 14, 13, 4, 5)),
        ("2024-10-14T15:04:05", utc(2024, 10, 14, 15, 4, 5)),
        ("2024-10-14", utc(2024, 10, 14)),
        ("2024/10/14", utc(2024, 10, 14)),
        ("2024.10.14", utc(2024, 10, 14)),
        ("20241014", utc(2024, 10, 14)),
        ("14 Oct 2024", utc(2024, 10, 14)),
        ("October 14, 2024", utc(2024, 10, 14)),
        ("Mon, 14 Oct 2024 15:04:05 GMT", utc(2024, 10, 14, 15, 4, 5)),
        ("  2024-10-14  ", utc(2024, 10, 14)),
    ])
    def test_layouts(self, text, expected):
        assert to_instant(text) == expected

    def test_us_before_eu(self):
        """Ambiguous day/month text reads month-first."""
        assert to_instant("01/02/2006") == utc(2006, 1, 2)
        assert to_instant("01-02-2006") == utc(2006, 1, 2)

    def test_eu_when_us_impossible(self):
        assert to_instant("13/02/2006") == utc(2006, 2, 13)
        assert to_instant("13-02-2006") == utc(2006, 2, 13)

    def test_nanosecond_fraction(self):
        assert to_instant("2024-10-14T15:04:05.123456789Z").nanosecond == 123456789

    def test_time_only(self):
        assert to_instant("15:04").isoformat() == "0000-01-01T15:04:00Z"

    def test_midnight_is_not_zero(self):
        """Time-only text lands in year 0, before the zero instant."""
        midnight = to_instant("00:00:00")
        assert not midnight.is_zero()
        assert midnight.isoformat() == "0000-01-01T00:00:00Z"
        assert try_to_instant("00:00:00") == midnight

    @pytest.mark.parametrize("text", ["", "   ", "garbage", "2023-02-29", "13/13/2024", "24:00:00"])
    def test_unparseable(self, text):
        assert to_instant(text).is_zero()

    def test_try_to_instant_raises(self):
        with pytest.raises(CoercionError, match="instant"):
            try_to_instant("garbage")
        with pytest.raises(CoercionError, match="no value"):
            try_to_instant(None)

    def test_default_formats_registry(self):
        names = [fmt.name for fmt in DEFAULT_FORMATS]

        assert names[0] == "rfc3339"
        assert names.index("date-us") < names.index("date-eu")
        assert names.index("date-us-dash") < names.index("date-eu-dash")
        assert len(set(names)) == len(names)


class TestEpochInference:
    """Unit-less epoch numbers in text."""

    @pytest.mark.parametrize("text, unix_nano", [
        ("0", 0),
        ("-5", -5 * NS_PER_SECOND),
        ("1697297045", 1697297045 * NS_PER_SECOND),
        ("1000000000000", 10 ** 12 * NS_PER_SECOND),
        ("1000000000001", (10 ** 12 + 1) * NS_PER_MILLI),
        ("1697297045000", 1697297045000 * NS_PER_MILLI),
        ("1000000000000000", 10 ** 15 * NS_PER_MILLI),
        ("1000000000000001", (10 ** 15 + 1) * NS_PER_MICRO),
        ("1000000000000000000", 10 ** 18 * NS_PER_MICRO),
        ("1000000000000000001", 10 ** 18 + 1),
        ("1697297045.5", 1697297045 * NS_PER_SECOND + 500_000_000),
    ])
    def test_magnitudes(self, text, unix_nano):
        assert to_instant(text).unix_nano == unix_nano

    def test_infer_epoch_unit(self):
        assert infer_epoch_unit(10 ** 12) == NS_PER_SECOND
        assert infer_epoch_unit(10 ** 12 + 1) == NS_PER_MILLI
        assert infer_epoch_unit(10 ** 18 + 1) == 1


class TestExplicitFormats:
    """Explicit formats are exclusive."""

    def test_layout(self):
        assert to_instant("14/10/2024", TIME_FORMAT_DATE_EU) == utc(2024, 10, 14)

    def test_exclusive(self):
        assert to_instant("2024-10-14", TIME_FORMAT_DATE_EU).is_zero()
        assert to_instant("1697297045", TIME_FORMAT_DATE_EU).is_zero()

    def test_first_match_wins(self):
        formats = (TIME_FORMAT_DATE_US_WITH_DASH, TIME_FORMAT_DATE_EU_WITH_DASH)

        assert to_instant("10-14-2024", *formats) == utc(2024, 10, 14)
        assert to_instant("14-10-2024", *formats) == utc(2024, 10, 14)

    @pytest.mark.parametrize("text, token, unix_nano", [
        ("1697297045", TIME_FORMAT_UNIX, 1697297045 * NS_PER_SECOND),
        ("1697297045000", TIME_FORMAT_UNIX_MILLI, 1697297045000 * NS_PER_MILLI),
        ("1697297045000000", TIME_FORMAT_UNIX_MICRO, 1697297045000000 * NS_PER_MICRO),
        ("1697297045000000000", TIME_FORMAT_UNIX_NANO, 1697297045000000000),
        ("5", TIME_FORMAT_UNIX_MILLI, 5 * NS_PER_MILLI),
        ("1.5", TIME_FORMAT_UNIX_MILLI, 1_500_000_000),
        ("1.5", TIME_FORMAT_UNIX_NANO, 1_500_000_000),
    ])
    def test_epoch_tokens(self, text, token, unix_nano):
        assert to_instant(text, token).unix_nano == unix_nano

    def test_epoch_token_does_not_accept_dates(self):
        assert to_instant("2024-10-14", TIME_FORMAT_UNIX).is_zero()

    def test_bad_layout_fails_softly(self):
        assert to_instant("2024", "%Q").is_zero()
        assert to_instant("2024", "%Q", "%Y") == utc(2024, 1, 1)

    def test_parse_instant_direct(self):
        assert parse_instant("2024-10-14", (TIME_FORMAT_RFC3339, "%Y-%m-%d")) == utc(2024, 10, 14)
        with pytest.raises(CoercionError, match="no explicit format matched"):
            parse_instant("2024-10-14", (TIME_FORMAT_RFC3339,))


class TestNonTextInputs:
    """Native temporal and numeric values."""

    def test_instant_pass_through(self):
        instant = Instant.from_unix(5)
        assert to_instant(instant) is instant

    def test_datetimes(self):
        assert to_instant(datetime.datetime(2024, 10, 14, 15, 4, 5)) == utc(2024, 10, 14, 15, 4, 5)
        assert to_instant(datetime.date(2024, 10, 14)) == utc(2024, 10, 14)

    def test_integers_are_seconds(self):
        """Native integers are never magnitude-inferred."""
        assert to_instant(1697297045) == Instant.from_unix(1697297045)
        assert to_instant(1697297045000) == Instant.from_unix(1697297045000)

    def test_fractional_seconds(self):
        assert to_instant(1.5).unix_nano == 1_500_000_000
        assert to_instant(-2.5).unix_nano == -2_500_000_000
        assert to_instant(Decimal("1.000000001")).unix_nano == NS_PER_SECOND + 1

    def test_non_finite_fails(self):
        assert to_instant(float("nan")).is_zero()
        assert to_instant(float("inf")).is_zero()

    def test_none_and_booleans(self):
        assert to_instant(None).is_zero()
        assert to_instant(True).is_zero()

    def test_rendered_values(self):
        assert to_instant(b"2024-10-14") == utc(2024, 10, 14)
        assert to_instant(Stamp("2024-10-14")) == utc(2024, 10, 14)
        assert to_instant(Stamp("14/10/2024"), TIME_FORMAT_DATE_EU) == utc(2024, 10, 14)
        assert to_instant(Stamp("")).is_zero()
        assert to_instant(["2024-10-14"]).is_zero()


class TestCustomTable:
    """build_default_coercer(formats=...) replaces the default table."""

    def test_custom_layouts(self):
        coercer = build_default_coercer(formats=["%d.%m.%Y"])

        assert coercer.to_instant("14.10.2024") == utc(2024, 10, 14)
        assert coercer.to_instant("2024-10-14").is_zero()
        assert coercer.to_instant("1697297045") == Instant.from_unix(1697297045)

    def test_time_format_entries(self):
        coercer = build_default_coercer(formats=[TimeFormat("dotted", "%d.%m.%Y")])
        assert coercer.to_instant("14.10.2024") == utc(2024, 10, 14)
