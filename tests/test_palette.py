"""Tests for palette editing bounds and presets."""

import pytest

from palette import DEFAULT_PALETTE, PRESETS, Palette
from generator.colors import InvalidColorError


FIVE = Palette(("#000001", "#000002", "#000003", "#000004", "#000005"))
TWO = Palette(("#000001", "#000002"))


class TestPaletteBounds:

    def test_add_to_full_palette_is_noop(self):
        result = FIVE.add("#abcdef")
        assert result == FIVE
        assert len(result) == 5
        assert result.colors == ("#000001", "#000002", "#000003", "#000004", "#000005")

    def test_remove_from_minimal_palette_is_noop(self):
        result = TWO.remove(0)
        assert result == TWO
        assert result.colors == ("#000001", "#000002")

    def test_add_appends_white_by_default(self):
        result = TWO.add()
        assert result.colors == ("#000001", "#000002", "#ffffff")
        assert TWO.colors == ("#000001", "#000002")  # original untouched

    def test_remove_by_index(self):
        assert FIVE.remove(1).colors == ("#000001", "#000003", "#000004", "#000005")

    def test_remove_bad_index_is_noop(self):
        assert FIVE.remove(9) == FIVE

    def test_can_flags(self):
        assert not FIVE.can_add
        assert FIVE.can_remove
        assert TWO.can_add
        assert not TWO.can_remove


class TestPaletteEdits:

    def test_replace(self):
        assert TWO.replace(1, "#ABC").colors == ("#000001", "#aabbcc")

    def test_replace_malformed_is_noop(self):
        assert TWO.replace(0, "red-ish") == TWO

    def test_add_malformed_is_noop(self):
        assert TWO.add("zzz") == TWO

    def test_of_normalizes(self):
        assert Palette.of(["#FFF", "000000"]).colors == ("#ffffff", "#000000")

    def test_of_rejects_malformed(self):
        with pytest.raises(InvalidColorError):
            Palette.of(["#fff", "nope"])

    def test_sequence_behaviour(self):
        assert list(DEFAULT_PALETTE) == ["#667eea", "#764ba2", "#f093fb"]
        assert DEFAULT_PALETTE[0] == "#667eea"


class TestPresets:

    def test_names(self):
        assert list(PRESETS) == ["Sunset", "Ocean", "Pastel", "Night", "Forest", "Fire"]

    def test_presets_within_bounds(self):
        for preset in PRESETS.values():
            assert 2 <= len(preset) <= 5

    def test_presets_read_only(self):
        with pytest.raises(TypeError):
            PRESETS["Custom"] = TWO
