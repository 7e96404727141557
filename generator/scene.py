"""
Scene composer — turns (variant, seed, palette, params) into a Scene.

Composition is pure: every call builds its own random source from the seed
and returns a freshly allocated, immutable Scene. The same inputs always give
the same shapes in the same paint order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

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
from generator.random_source import make_random
from generator.shapes import Definition, GeneratorResult, Shape
from generator import variants

logger = logging.getLogger(__name__)


class Variant(str, Enum):
    BLOB = "blob"
    WAVE = "wave"
    CIRCLES = "circles"
    SCATTER = "scatter"
    SCENE = "scene"
    LAYERED_WAVES = "layeredWaves"
    LOW_POLY = "lowPoly"
    PEAKS = "peaks"

    @classmethod
    def parse(cls, value: Union[Variant, str]) -> Optional[Variant]:
        """Variant for ``value``, or None when it names no known variant."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class _Handler:
    params_type: type
    generate: Callable[..., GeneratorResult]


_HANDLERS: dict[Variant, _Handler] = {
    Variant.BLOB: _Handler(BlobParams, variants.generate_blob),
    Variant.WAVE: _Handler(WaveParams, variants.generate_wave),
    Variant.CIRCLES: _Handler(CirclesParams, variants.generate_circles),
    Variant.SCATTER: _Handler(ScatterParams, variants.generate_scatter),
    Variant.SCENE: _Handler(SceneParams, variants.generate_scene),
    Variant.LAYERED_WAVES: _Handler(LayeredWavesParams, variants.generate_layered_waves),
    Variant.LOW_POLY: _Handler(LowPolyParams, variants.generate_low_poly),
    Variant.PEAKS: _Handler(PeaksParams, variants.generate_peaks),
}

_missing = set(Variant) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"No generator registered for: {sorted(v.value for v in _missing)}")


@dataclass(frozen=True)
class Scene:
    """A generated background: shapes in paint order plus what built them."""
    variant: Optional[Variant]
    seed: int
    palette: tuple[str, ...]
    shapes: tuple[Shape, ...] = ()
    definitions: tuple[Definition, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.shapes


def default_params(variant: Variant):
    """Default knob values for ``variant``."""
    return _HANDLERS[variant].params_type()


def _resolve_params(variant: Variant, params: Any):
    params_type = _HANDLERS[variant].params_type
    if params is None:
        return params_type()
    if isinstance(params, dict):
        return params_type.from_dict(params)
    if not isinstance(params, params_type):
        logger.warning(
            f"{type(params).__name__} given for {variant.value}; using defaults"
        )
        return params_type()
    return params


def compose_scene(
    variant: Union[Variant, str],
    seed: int,
    palette: Sequence[str],
    params: Any = None,
) -> Scene:
    """
    Build the scene for ``variant``.

    Args:
        variant: A Variant or its string name. Unknown names give an empty scene.
        seed: Drives every random draw for this scene.
        palette: 2–5 colours; the caller keeps it in bounds.
        params: Params dataclass for the variant, a dict of its fields,
            or None for the variant defaults.
    """
    colors = tuple(palette)
    resolved = Variant.parse(variant)
    if resolved is None:
        logger.debug(f"Unknown variant {variant!r}; returning empty scene")
        return Scene(variant=None, seed=seed, palette=colors)

    handler = _HANDLERS[resolved]
    rng = make_random(seed)
    result = handler.generate(_resolve_params(resolved, params), rng, colors)

    return Scene(
        variant=resolved,
        seed=seed,
        palette=colors,
        shapes=result.shapes,
        definitions=result.definitions,
    )
