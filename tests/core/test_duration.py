"""Tests for duration string parsing."""

import pytest

from soulswap.core.duration import InvalidDurationError, parse_duration_ms


class TestParseDurationMs:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("500", 500),
            ("500ms", 500),
            ("2s", 2000),
            ("1.5s", 1500),
            ("10m", 600_000),
            ("2h", 7_200_000),
            ("1d", 86_400_000),
            ("  15M  ", 900_000),
            ("0", 0),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_duration_ms(raw) == expected

    def test_default_unit_applies_to_bare_numbers(self):
        assert parse_duration_ms("20", default_unit="m") == 1_200_000
        assert parse_duration_ms("20s", default_unit="m") == 20_000

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "-5m", "5 m", "5w", "1e3", ".5s"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidDurationError):
            parse_duration_ms(raw)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            parse_duration_ms("nope")

    def test_unknown_default_unit(self):
        with pytest.raises(ValueError, match="unknown duration unit"):
            parse_duration_ms("5", default_unit="w")
