"""
Generator parameters — the numeric knobs exposed for each variant.

Each params class documents its valid ranges in ``RANGES``. The engine does
not re-validate; callers run ``clamped()`` before generating.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, ClassVar


@dataclass(frozen=True)
class _Params:
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {}

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]):
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in names})

    def clamped(self):
        """Copy with every field pulled into its documented range."""
        changes = {}
        for name, (low, high) in self.RANGES.items():
            value = getattr(self, name)
            bounded = min(high, max(low, value))
            if bounded != value:
                changes[name] = type(value)(bounded)
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class BlobParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "complexity": (3, 12),
        "smoothness": (20, 100),
    }
    complexity: int = 6
    smoothness: int = 70


@dataclass(frozen=True)
class WaveParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "layers": (1, 5),
        "amplitude": (5, 40),
        "frequency": (1, 5),
    }
    layers: int = 3
    amplitude: float = 15
    frequency: float = 2


@dataclass(frozen=True)
class CirclesParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "count": (2, 10),
        "blur": (0, 100),
    }
    count: int = 5
    blur: float = 40


@dataclass(frozen=True)
class ScatterParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "count": (3, 20),
        "size_variance": (10, 100),
    }
    count: int = 8
    size_variance: float = 50


@dataclass(frozen=True)
class SceneParams(_Params):
    """Fixed three-blob depth composition; only the seed and palette vary."""


@dataclass(frozen=True)
class LayeredWavesParams(_Params):
    """Four opaque wave layers with fixed amplitude and frequency."""
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {}
    layers: ClassVar[int] = 4
    amplitude: ClassVar[float] = 20
    frequency: ClassVar[float] = 3


@dataclass(frozen=True)
class LowPolyParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "cell_size": (8, 30),
        "variance": (0, 80),
    }
    cell_size: float = 15
    variance: float = 40


@dataclass(frozen=True)
class PeaksParams(_Params):
    RANGES: ClassVar[dict[str, tuple[float, float]]] = {
        "layers": (3, 8),
        "peak_height": (30, 90),
        "jaggedness": (10, 80),
    }
    layers: int = 5
    peak_height: float = 60
    jaggedness: float = 40
