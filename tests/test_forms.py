"""
Unit Tests — Form Values
========================
Integer parsing accepts an optional sign and ASCII digits, nothing else.
"""
import pytest

from app.api.forms import parse_int


class TestParseInt:

    @pytest.mark.parametrize("raw, expected", [("0", 0), ("42", 42), ("+7", 7), ("-3", -3), ("007", 7)])
    def test_accepts_plain_integers(self, raw, expected):
        assert parse_int(raw, "id") == expected

    @pytest.mark.parametrize("raw", ["1_000", " 5 ", "5 ", "٣", "1.0", "0x10", "", "+", "abc"])
    def test_rejects_everything_else(self, raw):
        with pytest.raises(ValueError, match="'id'"):
            parse_int(raw, "id")
