"""
Curve interpolation — smooth SVG paths through ordered control points.

Uses a Catmull-Rom style cardinal spline converted to cubic Béziers, so the
path passes through every input point.
"""

from __future__ import annotations

from typing import Sequence

from generator.shapes import Point, fmt


def _segment(p0: Point, p1: Point, p2: Point, p3: Point) -> str:
    cp1 = (p1[0] + (p2[0] - p0[0]) / 6, p1[1] + (p2[1] - p0[1]) / 6)
    cp2 = (p2[0] - (p3[0] - p1[0]) / 6, p2[1] - (p3[1] - p1[1]) / 6)
    return (
        f" C{fmt(cp1[0])},{fmt(cp1[1])}"
        f" {fmt(cp2[0])},{fmt(cp2[1])}"
        f" {fmt(p2[0])},{fmt(p2[1])}"
    )


def smooth_path(points: Sequence[Point], closed: bool = False) -> str:
    """
    Build SVG path data passing through ``points``.

    Closed paths wrap neighbours around the ends and finish with ``Z``;
    open paths duplicate the end points as their own neighbours. Fewer than
    two points give an empty string.
    """
    n = len(points)
    if n < 2:
        return ""

    path = f"M{fmt(points[0][0])},{fmt(points[0][1])}"

    if n == 2:
        # Two points: a single segment, nothing to wrap around.
        path += _segment(points[0], points[0], points[1], points[1])
        return path + " Z" if closed else path

    if closed:
        for i in range(n):
            path += _segment(
                points[(i - 1) % n],
                points[i],
                points[(i + 1) % n],
                points[(i + 2) % n],
            )
        return path + " Z"

    for i in range(n - 1):
        path += _segment(
            points[max(i - 1, 0)],
            points[i],
            points[i + 1],
            points[min(i + 2, n - 1)],
        )
    return path
