"""Tests for the curve interpolator."""

import re

from generator.curves import smooth_path

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]


def _segments(path: str) -> int:
    return path.count(" C")


class TestSmoothPath:
    """Tests for smooth_path()."""

    def test_empty_and_single_point(self):
        assert smooth_path([], closed=True) == ""
        assert smooth_path([(5, 5)], closed=False) == ""

    def test_closed_has_one_segment_per_point(self):
        path = smooth_path(SQUARE, closed=True)
        assert path.startswith("M0,0")
        assert _segments(path) == 4
        assert path.endswith(" Z")

    def test_open_has_no_close_marker(self):
        path = smooth_path(SQUARE, closed=False)
        assert _segments(path) == 3
        assert not path.endswith("Z")
        assert path.endswith(" 0,10")

    def test_two_points_single_segment(self):
        assert _segments(smooth_path([(0, 0), (6, 0)], closed=False)) == 1
        closed = smooth_path([(0, 0), (6, 0)], closed=True)
        assert _segments(closed) == 1
        assert closed.endswith(" Z")

    def test_two_points_is_straight(self):
        # Duplicated end points put both control points on the line.
        assert smooth_path([(0, 0), (6, 0)]) == "M0,0 C1,0 5,0 6,0"

    def test_closed_control_points(self):
        # First segment 0,0 -> 10,0 with neighbours (0,10) and (10,10).
        path = smooth_path(SQUARE, closed=True)
        first = re.search(r"C([^ ]+) ([^ ]+) ([^ ]+)", path).groups()
        cp1 = tuple(float(v) for v in first[0].split(","))
        cp2 = tuple(float(v) for v in first[1].split(","))
        assert cp1 == (10 / 6, -10 / 6)
        assert cp2 == (10 - 10 / 6, -10 / 6)
        assert first[2] == "10,0"

    def test_closed_passes_through_every_point(self):
        path = smooth_path(SQUARE, closed=True)
        endpoints = re.findall(r"C[^ ]+ [^ ]+ ([^ ]+)", path)
        assert endpoints == ["10,0", "10,10", "0,10", "0,0"]

    def test_degenerate_input_does_not_raise(self):
        same = [(3, 3)] * 5
        path = smooth_path(same, closed=True)
        assert path.endswith(" Z")
