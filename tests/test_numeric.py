"""Tests for leading-numeric-prefix parsing."""
import pytest

from fitness_summary.common.numeric import parse_numeric_prefix, parse_strict_number


class TestNumericPrefix:
    """Tolerant parse reads the leading number and ignores the rest."""

    @pytest.mark.parametrize("text, expected", [
        ("30", 30.0),
        ("12.5", 12.5),
        ("30min", 30.0),
        ("1,200", 1.0),   # stops at the comma, does not read 1200
        ("  45", 45.0),
        ("-15", -15.0),
        ("+7", 7.0),
        (".5h", 0.5),
        ("2e1 minutes", 20.0),
    ])
    def test_parses_prefix(self, text, expected):
        parsed = parse_numeric_prefix(text)
        assert parsed.ok
        assert parsed.value == expected

    @pytest.mark.parametrize("text", ["abc", "", "min30", "-", ".", "NaN"])
    def test_no_prefix(self, text):
        parsed = parse_numeric_prefix(text)
        assert not parsed.ok
        assert parsed.value is None
        assert parsed.consumed == 0

    def test_consumed_includes_leading_whitespace(self):
        assert parse_numeric_prefix(" 30min").consumed == 3


class TestStrictNumber:
    def test_accepts_whole_cell(self):
        assert parse_strict_number(" 30 ").value == 30.0

    @pytest.mark.parametrize("text", ["30min", "1,200", "abc"])
    def test_rejects_trailing_text(self, text):
        assert not parse_strict_number(text).ok
