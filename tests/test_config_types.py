"""
Unit tests for tripconf.config.types and tripconf.config.version modules.

Tests the domain scalar types and the ordering of release tags.
"""

from __future__ import annotations

from datetime import timedelta
from enum import Enum

import pytest

from tripconf.config.types import (
    DurationForEnum,
    FeedScopedId,
    LinearFunction,
    Locale,
    format_duration,
    parse_duration,
)
from tripconf.config.version import NA, V1_5, V2_0, V2_3, ConfigVersion


class TestDuration:
    """Tests for parse_duration and format_duration."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1h30m", timedelta(hours=1, minutes=30)),
            ("45s", timedelta(seconds=45)),
            ("2d", timedelta(days=2)),
            ("PT1H30M", timedelta(hours=1, minutes=30)),
            ("P1DT2H", timedelta(days=1, hours=2)),
            ("pt10m", timedelta(minutes=10)),
            ("-PT5M", timedelta(minutes=-5)),
            ("-5m", timedelta(minutes=-5)),
            ("90", timedelta(seconds=90)),
            (120, timedelta(minutes=2)),
            (1.5, timedelta(seconds=1.5)),
        ],
    )
    def test_parse(self, raw, expected):
        """Durations are parsed from the supported forms."""
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", ["", "P", "PT", "1x", "h", True, None, []])
    def test_parse_invalid(self, raw):
        """Anything else is rejected with ValueError."""
        with pytest.raises(ValueError):
            parse_duration(raw)

    @pytest.mark.parametrize("raw", [10**20, "99999999999d", float("inf")])
    def test_parse_out_of_range(self, raw):
        """Durations too long for a timedelta are rejected with ValueError."""
        with pytest.raises(ValueError, match="too long for a duration"):
            parse_duration(raw)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (timedelta(0), "0s"),
            (timedelta(minutes=45), "45m"),
            (timedelta(hours=4), "4h"),
            (timedelta(days=1, hours=2, seconds=3), "1d2h3s"),
            (timedelta(seconds=1.5), "1.5s"),
            (timedelta(minutes=-5), "-5m"),
        ],
    )
    def test_format(self, value, expected):
        """Durations are formatted in the compact form."""
        assert format_duration(value) == expected

    def test_format_is_parseable(self):
        """Formatted durations parse back to the same value."""
        value = timedelta(days=3, hours=1, minutes=2, seconds=3)
        assert parse_duration(format_duration(value)) == value


class TestLinearFunction:
    """Tests for LinearFunction."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("600 + 2.0 x", LinearFunction(600, 2)),
            ("0+1x", LinearFunction(0, 1)),
            ("  3600 + 2 x ", LinearFunction(3600, 2)),
            ("-1.5 + 0.5 x", LinearFunction(-1.5, 0.5)),
        ],
    )
    def test_parse(self, text, expected):
        """The A + B x form is parsed."""
        assert LinearFunction.parse(text) == expected

    @pytest.mark.parametrize("text", ["600", "2 x", "a + b x", "600 - 2 x"])
    def test_parse_invalid(self, text):
        """Other forms are rejected."""
        with pytest.raises(ValueError, match="not a linear function"):
            LinearFunction.parse(text)

    def test_call_and_str(self):
        """The function can be evaluated and printed."""
        f = LinearFunction(900, 1.5)
        assert f(100) == 1050.0
        assert str(f) == "900 + 1.5 x"

    def test_frozen(self):
        """Linear functions are immutable values."""
        f = LinearFunction(0, 1)
        with pytest.raises(AttributeError):
            f.constant = 5


class TestFeedScopedId:
    """Tests for FeedScopedId."""

    def test_parse(self):
        """feed:id is split at the first colon."""
        assert FeedScopedId.parse("RB:NSR:Line:1") == FeedScopedId("RB", "NSR:Line:1")
        assert str(FeedScopedId("RB", "R1")) == "RB:R1"

    @pytest.mark.parametrize("text", ["R1", ":R1", "RB:"])
    def test_parse_invalid(self, text):
        """Both parts are needed."""
        with pytest.raises(ValueError):
            FeedScopedId.parse(text)


class TestLocale:
    """Tests for Locale."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("en", Locale("en")),
            ("en_US", Locale("en", "US")),
            ("nb-no", Locale("nb", "NO")),
            ("no_NO_NY", Locale("no", "NO", "NY")),
        ],
    )
    def test_parse(self, text, expected):
        """Language, country and variant are parsed."""
        assert Locale.parse(text) == expected

    @pytest.mark.parametrize("text", ["", "e", "english", "en_US_X_Y", "12"])
    def test_parse_invalid(self, text):
        """Invalid language codes and extra parts are rejected."""
        with pytest.raises(ValueError):
            Locale.parse(text)

    def test_str(self):
        """Locales print in the underscore form."""
        assert str(Locale("en", "US")) == "en_US"
        assert str(Locale("fr")) == "fr"


class TestDurationForEnum:
    """Tests for DurationForEnum."""

    def test_value_of(self):
        """Keys without an override use the default."""

        class Mode(Enum):
            BUS = "bus"
            RAIL = "rail"

        durations = DurationForEnum(timedelta(minutes=1), {Mode.RAIL: timedelta(0)})
        assert durations.value_of(Mode.BUS) == timedelta(minutes=1)
        assert durations.value_of(Mode.RAIL) == timedelta(0)


class TestConfigVersion:
    """Tests for ConfigVersion ordering."""

    def test_ordering(self):
        """Versions are ordered by release, with NA first."""
        assert NA < V1_5 < V2_0 < V2_3
        assert max(V2_0, V2_3, NA) is V2_3
        assert sorted([V2_3, NA, V2_0]) == [NA, V2_0, V2_3]

    def test_str(self):
        """Versions print as their release number."""
        assert str(V2_3) == "2.3"
        assert str(NA) == "na"

    def test_is_tracked(self):
        """Only real releases are tracked."""
        assert not NA.is_tracked
        assert all(v.is_tracked for v in ConfigVersion if v is not NA)
