"""Background Generator — seeded, layered vector scenes."""

from generator.random_source import RandomSource, make_random
from generator.curves import smooth_path
from generator.colors import InvalidColorError, adjust_color
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
from generator.scene import Scene, Variant, compose_scene, default_params
from generator.variations import generate_variations, random_seed

__all__ = [
    "RandomSource",
    "make_random",
    "smooth_path",
    "InvalidColorError",
    "adjust_color",
    "BlobParams",
    "CirclesParams",
    "LayeredWavesParams",
    "LowPolyParams",
    "PeaksParams",
    "SceneParams",
    "ScatterParams",
    "WaveParams",
    "Scene",
    "Variant",
    "compose_scene",
    "default_params",
    "generate_variations",
    "random_seed",
]
