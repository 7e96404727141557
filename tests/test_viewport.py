"""Tests for the viewport → pixel transform."""

import pytest

from exporter.viewport import ViewportTransform, fit_viewport


class TestFitViewport:

    def test_non_square_scales_independently(self):
        t = fit_viewport(1920, 1080)
        assert t.scale_x == pytest.approx(19.2)
        assert t.scale_y == pytest.approx(10.8)
        assert t.target_size == (1920, 1080)

    def test_corners_map_to_target_rect(self):
        t = fit_viewport(1920, 1080)
        assert t.apply((0, 0)) == (0, 0)
        assert t.apply((100, 100)) == pytest.approx((1920, 1080))
        assert t.apply((50, 50)) == pytest.approx((960, 540))

    def test_portrait(self):
        t = fit_viewport(300, 900)
        assert t.apply((100, 50)) == pytest.approx((300, 450))

    def test_bleed_points_map_outside(self):
        t = fit_viewport(200, 100)
        x, y = t.apply((-5, 105))
        assert x == pytest.approx(-10)
        assert y == pytest.approx(105)

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (-1, 10)])
    def test_rejects_non_positive(self, size):
        with pytest.raises(ValueError):
            fit_viewport(*size)

    def test_custom_source_size(self):
        t = ViewportTransform(width=500, height=250, source_size=50)
        assert t.apply((50, 50)) == pytest.approx((500, 250))
