"""
Shape generators — one pure function per background variant.

Every generator takes ``(params, rng, palette)`` and returns a
GeneratorResult. The only shared collaborators are the random source, the
curve interpolator and the colour helpers; generators never look at each
other's state.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from generator.colors import InvalidColorError, adjust_color, normalize_color
from generator.curves import smooth_path
from generator.params import (
    BlobParams,
    CirclesParams,
    LayeredWavesParams,
    LowPolyParams,
    PeaksParams,
    SceneParams,
    ScatterParams,
    WaveParams,
)
from generator.random_source import RandomSource
from generator.shapes import (
    BlurFilter,
    CircleShape,
    GeneratorResult,
    GroupShape,
    LinearGradient,
    PathShape,
    Point,
    PolygonShape,
    fmt,
)

logger = logging.getLogger(__name__)

GRADIENT_ID = "grad"
BLUR_ID = "blur"
CENTER = 50.0


# ── Shared building blocks ───────────────────────────────────────────

def blob_path(complexity: int, smoothness: float, rng: RandomSource) -> str:
    """Closed organic outline: points on a jittered circle around (50, 50)."""
    num_points = int(complexity)
    if num_points < 1:
        return ""
    angle_step = (math.pi * 2) / num_points
    points: list[Point] = []
    for i in range(num_points):
        angle = i * angle_step
        radius = 40 + rng() * 20 * (smoothness / 100)
        points.append((
            CENTER + math.cos(angle) * radius,
            CENTER + math.sin(angle) * radius,
        ))
    return smooth_path(points, closed=True)


def wave_paths(
    layers: int,
    amplitude: float,
    frequency: float,
    height: float = 100,
) -> list[str]:
    """Sine bands stacked from the bottom, each closed along the bottom edge."""
    paths = []
    for layer in range(int(layers)):
        base_y = height - (layer * (height / (layers + 1)))
        amp = amplitude * (1 - layer * 0.15)
        path = f"M0,{fmt(base_y)}"
        for x in range(0, 101, 2):
            wave = math.sin((x / 100) * math.pi * frequency + layer) * amp
            path += f" L{x},{fmt(base_y - wave)}"
        path += f" L100,{fmt(height)} L0,{fmt(height)} Z"
        paths.append(path)
    return paths


def _color(palette: Sequence[str], i: int) -> Optional[str]:
    """Palette entry ``i`` (cyclic) as '#rrggbb', or None when malformed."""
    color = palette[i % len(palette)]
    try:
        return normalize_color(color)
    except InvalidColorError:
        logger.debug(f"Skipping shape with unparseable palette color {color!r}")
        return None


# ── Variants ─────────────────────────────────────────────────────────

def generate_blob(
    params: BlobParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    path = blob_path(params.complexity, params.smoothness, rng)
    stops = tuple(c for c in (_color(palette, i) for i in range(len(palette))) if c)
    if not stops:
        return GeneratorResult()
    return GeneratorResult(
        shapes=(PathShape(d=path, fill=f"url(#{GRADIENT_ID})"),),
        definitions=(LinearGradient(id=GRADIENT_ID, colors=stops),),
    )


def generate_wave(
    params: WaveParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    paths = wave_paths(params.layers, params.amplitude, params.frequency)
    shapes = []
    for i, d in enumerate(paths):
        fill = _color(palette, i)
        if fill:
            shapes.append(PathShape(d=d, fill=fill, opacity=0.5 + i * 0.15))
    return GeneratorResult(shapes=tuple(shapes))


def generate_circles(
    params: CirclesParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    circles = []
    for i in range(int(params.count)):
        # Draw order matters for reproducibility: cx, cy, r, opacity.
        cx = 20 + rng() * 60
        cy = 20 + rng() * 60
        r = 15 + rng() * 25
        opacity = 0.3 + rng() * 0.5
        fill = _color(palette, i)
        if not fill:
            continue
        circles.append(CircleShape(
            cx=cx, cy=cy, r=r,
            fill=fill,
            opacity=opacity,
            filter_id=BLUR_ID,
        ))
    return GeneratorResult(
        shapes=tuple(circles),
        definitions=(BlurFilter(id=BLUR_ID, std_deviation=params.blur / 5),),
    )


def generate_scatter(
    params: ScatterParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    groups = []
    for i in range(int(params.count)):
        size = 5 + rng() * 15 * (params.size_variance / 100)
        x = rng() * 90 + 5
        y = rng() * 90 + 5
        complexity = 5 + math.floor(rng() * 4)
        path = blob_path(complexity, 70, rng.spawn(i))
        opacity = 0.4 + rng() * 0.4
        fill = _color(palette, i)
        if not fill:
            continue
        groups.append(GroupShape(
            translate=(x, y),
            scale=size / 50,
            children=(PathShape(d=path, fill=fill, opacity=opacity),),
        ))
    return GeneratorResult(shapes=tuple(groups))


_DEPTH_SCALES = (0.3, 0.5, 0.7)


def generate_scene(
    params: SceneParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    groups = []
    for i, scale in enumerate(_DEPTH_SCALES):
        path = blob_path(6 + i, 60, rng.spawn(i * 100))
        fill = _color(palette, i)
        if not fill:
            continue
        groups.append(GroupShape(
            translate=(20 + i * 15, 60 - i * 10),
            scale=scale,
            children=(PathShape(d=path, fill=fill, opacity=0.6 + i * 0.15),),
        ))
    return GeneratorResult(shapes=tuple(groups))


def generate_layered_waves(
    params: LayeredWavesParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    paths = wave_paths(params.layers, params.amplitude, params.frequency)
    fills = [_color(palette, i) for i in range(len(paths))]
    return GeneratorResult(shapes=tuple(
        PathShape(d=d, fill=fill) for d, fill in zip(paths, fills) if fill
    ))


def low_poly_grid(cell_size: float, variance: float, rng: RandomSource) -> list[list[Point]]:
    """Jittered grid covering the viewport, ``ceil(100 / cell) + 1`` per side."""
    cols = math.ceil(100 / cell_size) + 1
    rows = math.ceil(100 / cell_size) + 1
    jitter = (variance / 100) * cell_size
    grid = []
    for r in range(rows):
        row = []
        for c in range(cols):
            vx = jitter * (rng() - 0.5)
            vy = jitter * (rng() - 0.5)
            row.append((c * cell_size + vx, r * cell_size + vy))
        grid.append(row)
    return grid


def generate_low_poly(
    params: LowPolyParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    grid = low_poly_grid(params.cell_size, params.variance, rng)

    triangles = []
    for r in range(len(grid) - 1):
        for c in range(len(grid[r]) - 1):
            tl, tr = grid[r][c], grid[r][c + 1]
            bl, br = grid[r + 1][c], grid[r + 1][c + 1]
            triangles.append((tl, tr, bl))
            triangles.append((tr, br, bl))

    # Shading restarts the stream from the same seed.
    shade_rng = rng.spawn(0)
    polygons = []
    for triangle in triangles:
        base = palette[math.floor(shade_rng() * len(palette))]
        offset = math.floor((shade_rng() - 0.5) * 50)
        try:
            fill = adjust_color(base, offset)
        except InvalidColorError:
            logger.debug(f"Skipping triangle with unparseable palette color {base!r}")
            continue
        polygons.append(PolygonShape(points=triangle, fill=fill))
    return GeneratorResult(shapes=tuple(polygons))


def generate_peaks(
    params: PeaksParams, rng: RandomSource, palette: Sequence[str]
) -> GeneratorResult:
    layers = int(params.layers)
    paths = []
    for layer in range(layers):
        base_y = 100 - (layer + 1) * (params.peak_height / layers)
        path = f"M0,100 L0,{fmt(base_y + rng() * 10)}"
        segments = 8 + layer * 2
        for i in range(1, segments + 1):
            x = (i / segments) * 100
            y = base_y + (rng() - 0.5) * params.jaggedness * 0.5
            path += f" L{fmt(x)},{fmt(y)}"
        path += " L100,100 Z"
        fill = _color(palette, layer)
        if fill:
            paths.append(PathShape(d=path, fill=fill))
    return GeneratorResult(shapes=tuple(paths))
