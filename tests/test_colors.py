"""Tests for the colour helpers."""

import pytest

from generator.colors import (
    InvalidColorError,
    adjust_color,
    normalize_color,
    parse_hex,
    to_hex,
)


class TestAdjustColor:
    """Tests for adjust_color()."""

    def test_red_clamps_at_255(self):
        result = adjust_color("#FF0000", 100)
        assert result == "#ff6464"
        assert parse_hex(result)[0] == 255

    def test_black_clamps_at_zero(self):
        assert adjust_color("#000000", -100) == "#000000"

    def test_no_wraparound_into_neighbour_channel(self):
        # 0x00ff00 + 1 must not carry into red.
        assert adjust_color("#00ff00", 1) == "#01ff01"

    def test_clamp_applies_after_offset(self):
        # 0xfa + 20 = 270 -> 255; clamping first would leave 250 + 20 unclamped.
        assert adjust_color("#fafafa", 20) == "#ffffff"
        assert adjust_color("#050505", -20) == "#000000"

    def test_within_range(self):
        assert adjust_color("#102030", 16) == "#203040"
        assert adjust_color("#102030", -16) == "#001020"

    def test_zero_amount_is_identity(self):
        assert adjust_color("#667EEA", 0) == "#667eea"

    def test_malformed_raises(self):
        with pytest.raises(InvalidColorError):
            adjust_color("not-a-color", 10)


class TestParsing:

    def test_shorthand_expands(self):
        assert normalize_color("#abc") == "#aabbcc"
        assert normalize_color("ABC") == "#aabbcc"

    def test_parse_hex(self):
        assert parse_hex("#667eea") == (0x66, 0x7E, 0xEA)

    @pytest.mark.parametrize("bad", ["", "#12", "#12345", "#gggggg", "#1234567"])
    def test_rejects_malformed(self, bad):
        with pytest.raises(InvalidColorError):
            normalize_color(bad)

    def test_invalid_color_is_value_error(self):
        assert issubclass(InvalidColorError, ValueError)

    def test_to_hex_clamps(self):
        assert to_hex(300, -5, 128) == "#ff0080"
