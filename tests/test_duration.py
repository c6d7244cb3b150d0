"""Tests for duration parsing utilities."""

from datetime import timedelta

import pytest

from easytime._duration import format_duration, parse_duration, to_seconds
from easytime.errors import EasyTimeConfigError


class TestParseDuration:
    def test_none(self):
        assert parse_duration(None) is None

    def test_timedelta_passthrough(self):
        td = timedelta(days=5)
        assert parse_duration(td) is td

    def test_seconds(self):
        assert parse_duration("45s") == timedelta(seconds=45)

    def test_bare_number_is_seconds(self):
        assert parse_duration("45") == timedelta(seconds=45)

    def test_minutes(self):
        assert parse_duration("2m") == timedelta(minutes=2)

    def test_combined(self):
        assert parse_duration("1d12h") == timedelta(days=1, hours=12)

    def test_zero(self):
        assert parse_duration("0") == timedelta(0)

    def test_invalid(self):
        with pytest.raises(EasyTimeConfigError, match="Invalid duration"):
            parse_duration("abc")

    def test_empty(self):
        with pytest.raises(EasyTimeConfigError, match="Invalid duration"):
            parse_duration("   ")

    def test_whitespace(self):
        assert parse_duration("  30s  ") == timedelta(seconds=30)

    def test_full_combo(self):
        assert parse_duration("2d3h15m30s") == timedelta(
            days=2, hours=3, minutes=15, seconds=30
        )


class TestFormatDuration:
    def test_none(self):
        assert format_duration(None) is None

    def test_zero(self):
        assert format_duration(timedelta(0)) == "0s"

    def test_seconds(self):
        assert format_duration(timedelta(seconds=62)) == "1m2s"

    def test_negative(self):
        assert format_duration(timedelta(seconds=-62)) == "-1m2s"

    def test_combined(self):
        assert format_duration(timedelta(days=1, hours=12)) == "1d12h"

    def test_truncates_fraction(self):
        assert format_duration(timedelta(seconds=1, milliseconds=999)) == "1s"


class TestToSeconds:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, 0),
            (60, 60),
            (1.9, 1),
            ("1m", 60),
            ("90", 90),
            (timedelta(minutes=1, milliseconds=500), 60),
        ],
    )
    def test_valid(self, value, expected):
        assert to_seconds(value) == expected

    @pytest.mark.parametrize("value", [-1, -0.5, timedelta(seconds=-1)])
    def test_negative(self, value):
        with pytest.raises(EasyTimeConfigError, match=">= 0"):
            to_seconds(value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        with pytest.raises(EasyTimeConfigError, match="finite"):
            to_seconds(value)

    @pytest.mark.parametrize("value", [True, [60], None])
    def test_wrong_type(self, value):
        with pytest.raises(EasyTimeConfigError):
            to_seconds(value)
