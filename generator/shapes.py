"""
Shape model — the primitives a generator emits.

All coordinates live in the fixed 100×100 normalized viewport. Shapes are
frozen so a scene can be handed around without anyone editing it in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Optional, Union

Point = tuple[float, float]


def fmt(value: float) -> str:
    """Format a number for markup: integral values without a trailing '.0'."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class PathShape:
    """A filled SVG path."""
    kind: ClassVar[str] = "path"
    d: str
    fill: str
    opacity: Optional[float] = None


@dataclass(frozen=True)
class CircleShape:
    kind: ClassVar[str] = "circle"
    cx: float
    cy: float
    r: float
    fill: str
    opacity: Optional[float] = None
    filter_id: Optional[str] = None  # id of a BlurFilter definition


@dataclass(frozen=True)
class PolygonShape:
    kind: ClassVar[str] = "polygon"
    points: tuple[Point, ...]
    fill: str

    @property
    def points_attr(self) -> str:
        return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in self.points)


@dataclass(frozen=True)
class GroupShape:
    """Nested shapes drawn with a translate-then-scale transform."""
    kind: ClassVar[str] = "group"
    translate: Point
    scale: float
    children: tuple[Shape, ...] = field(default_factory=tuple)


Shape = Union[PathShape, CircleShape, PolygonShape, GroupShape]


# ── Definitions (<defs> entries referenced by id) ───────────────────

@dataclass(frozen=True)
class LinearGradient:
    """Top-left to bottom-right gradient with evenly spaced palette stops."""
    kind: ClassVar[str] = "linearGradient"
    id: str
    colors: tuple[str, ...]

    @property
    def stops(self) -> list[tuple[float, str]]:
        if len(self.colors) < 2:
            return [(0.0, c) for c in self.colors]
        last = len(self.colors) - 1
        return [(i / last * 100, c) for i, c in enumerate(self.colors)]


@dataclass(frozen=True)
class BlurFilter:
    kind: ClassVar[str] = "blurFilter"
    id: str
    std_deviation: float


Definition = Union[LinearGradient, BlurFilter]


@dataclass(frozen=True)
class GeneratorResult:
    """What a shape generator hands back to the composer."""
    shapes: tuple[Shape, ...] = ()
    definitions: tuple[Definition, ...] = ()
