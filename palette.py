"""
Palette editing and presets.

A Palette is immutable; every edit returns a new Palette. Edits that would
break the 2–5 colour bound, or that carry a malformed colour, are rejected as
no-ops so an out-of-range palette never reaches the generators.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from generator.colors import InvalidColorError, normalize_color
from config import settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    colors: tuple[str, ...]

    @classmethod
    def of(cls, colors: Iterable[str]) -> Palette:
        return cls(tuple(normalize_color(c) for c in colors))

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> str:
        return self.colors[index]

    @property
    def can_add(self) -> bool:
        return len(self.colors) < settings.PALETTE_MAX

    @property
    def can_remove(self) -> bool:
        return len(self.colors) > settings.PALETTE_MIN

    def add(self, color: str = "#ffffff") -> Palette:
        """Append ``color``; no-op when already at the maximum size."""
        if not self.can_add:
            logger.debug(f"Palette full ({len(self.colors)} colors); add ignored")
            return self
        try:
            color = normalize_color(color)
        except InvalidColorError:
            logger.warning(f"Ignoring malformed color {color!r}")
            return self
        return Palette(self.colors + (color,))

    def remove(self, index: int) -> Palette:
        """Drop the colour at ``index``; no-op at the minimum size."""
        if not self.can_remove:
            logger.debug(f"Palette at minimum ({len(self.colors)} colors); remove ignored")
            return self
        if not -len(self.colors) <= index < len(self.colors):
            return self
        colors = list(self.colors)
        del colors[index]
        return Palette(tuple(colors))

    def replace(self, index: int, color: str) -> Palette:
        """Swap the colour at ``index``; malformed colours are ignored."""
        if not -len(self.colors) <= index < len(self.colors):
            return self
        try:
            color = normalize_color(color)
        except InvalidColorError:
            logger.warning(f"Ignoring malformed color {color!r}")
            return self
        colors = list(self.colors)
        colors[index] = color
        return Palette(tuple(colors))


DEFAULT_PALETTE = Palette(("#667eea", "#764ba2", "#f093fb"))

PRESETS: Mapping[str, Palette] = MappingProxyType({
    "Sunset": Palette(("#ff6b6b", "#feca57", "#ff9ff3")),
    "Ocean": Palette(("#0093e9", "#80d0c7", "#1a535c")),
    "Pastel": Palette(("#ffd6e0", "#c9f0ff", "#d4edda")),
    "Night": Palette(("#0f0f23", "#1a1a3e", "#2d2d5a")),
    "Forest": Palette(("#1a472a", "#2d5a27", "#5a8f29")),
    "Fire": Palette(("#ff4500", "#ff6347", "#ffa500")),
})
