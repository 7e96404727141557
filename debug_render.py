"""Render every background variant to outputs/ for a quick visual check."""

import logging
import sys

from config import configure_logging, settings
from exporter import ExportFormat, ExportRequest, RasterizationError, export_scene
from generator import Variant, compose_scene
from palette import DEFAULT_PALETTE

logger = logging.getLogger("debug_render")


def debug_render(seed: int = 0, raster: bool = False):
    configure_logging("DEBUG")
    request = ExportRequest(
        format=ExportFormat.RASTER if raster else ExportFormat.VECTOR,
        width=settings.DEFAULT_WIDTH,
        height=settings.DEFAULT_HEIGHT,
    )

    for variant in Variant:
        scene = compose_scene(variant, seed, DEFAULT_PALETTE)
        logger.info(f"{variant.value}: {len(scene.shapes)} shapes")
        try:
            export_scene(scene, request=request)
        except RasterizationError as e:
            logger.error(f"{variant.value}: raster export failed: {e}")


if __name__ == "__main__":
    args = sys.argv[1:]
    positional = [a for a in args if not a.startswith("--")]
    debug_render(
        seed=int(positional[0]) if positional else 0,
        raster="--png" in args,
    )
