"""
Viewport transform — normalized scene units to output pixels.

Generators work in a fixed 100×100 space whatever the output size. Export
stretches that square onto the target rectangle independently per axis
(SVG ``preserveAspectRatio="none"``), so a 1920×1080 export is exactly
1920×1080 pixels.
"""

from __future__ import annotations

from dataclasses import dataclass

from generator.shapes import Point
from config import settings


@dataclass(frozen=True)
class ViewportTransform:
    width: int
    height: int
    source_size: float = 100.0

    @property
    def scale_x(self) -> float:
        return self.width / self.source_size

    @property
    def scale_y(self) -> float:
        return self.height / self.source_size

    @property
    def target_size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def apply(self, point: Point) -> Point:
        """Map a viewport point to pixel coordinates."""
        return (point[0] * self.scale_x, point[1] * self.scale_y)


def fit_viewport(width: int, height: int) -> ViewportTransform:
    """Transform stretching the normalized viewport onto ``width × height``."""
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")
    return ViewportTransform(
        width=int(width),
        height=int(height),
        source_size=float(settings.VIEWPORT_SIZE),
    )
