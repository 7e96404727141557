"""
Seed variations.

Generates N scenes with identical parameters and palette but consecutive
seeds, giving visually distinct backgrounds of the same style. Also hosts the
"randomize" action, which simply picks a new seed.
"""

from __future__ import annotations

import random
from typing import Any, Optional, Sequence, Union

from generator.scene import Scene, Variant, compose_scene
from config import settings


def random_seed() -> int:
    """A fresh seed in ``[0, settings.SEED_RANGE)``."""
    return random.randrange(settings.SEED_RANGE)


def generate_variations(
    variant: Union[Variant, str],
    palette: Sequence[str],
    params: Any = None,
    n: Optional[int] = None,
    base_seed: int = 0,
) -> list[Scene]:
    """
    Generate N seed variations of one background style.

    Args:
        variant: Which generator to run.
        palette: Colours shared by every variation.
        params: Knobs to hold constant (None for the variant defaults).
        n: Number of variations (defaults to settings.NUM_VARIATIONS).
        base_seed: Starting seed; variations use base_seed + i.

    Returns:
        List of scenes, in seed order.
    """
    if n is None:
        n = settings.NUM_VARIATIONS

    return [
        compose_scene(variant, base_seed + i, palette, params)
        for i in range(n)
    ]
