"""Tests for seed variations and the randomize action."""

from unittest.mock import patch

from generator.scene import Variant, compose_scene
from generator.variations import generate_variations, random_seed
from config import settings

PALETTE = ("#667eea", "#764ba2", "#f093fb")


class TestGenerateVariations:

    def test_consecutive_seeds(self):
        scenes = generate_variations(Variant.BLOB, PALETTE, n=3, base_seed=10)
        assert [s.seed for s in scenes] == [10, 11, 12]
        assert scenes[1] == compose_scene(Variant.BLOB, 11, PALETTE)

    def test_default_count_from_settings(self):
        scenes = generate_variations("peaks", PALETTE)
        assert len(scenes) == settings.NUM_VARIATIONS

    def test_same_style_different_layout(self):
        a, b = generate_variations(Variant.LOW_POLY, PALETTE, {"cell_size": 20}, n=2)
        assert len(a.shapes) == len(b.shapes) == 2 * 5 * 5
        assert a.shapes != b.shapes


class TestRandomSeed:

    def test_in_range(self):
        for _ in range(100):
            assert 0 <= random_seed() < settings.SEED_RANGE

    def test_respects_setting(self):
        with patch.object(settings, "SEED_RANGE", 3):
            assert {random_seed() for _ in range(200)} <= {0, 1, 2}
