"""Export Pipeline — SVG markup, CSS embedding and sized raster output."""

from exporter.viewport import ViewportTransform, fit_viewport
from exporter.markup import css_background, to_data_uri, to_svg
from exporter.raster import (
    ExportFormat,
    ExportRequest,
    PlaywrightDecoder,
    RasterImage,
    RasterizationError,
    export_scene,
    rasterize,
    rasterize_async,
    rasterize_scene_async,
)

__all__ = [
    "ViewportTransform",
    "fit_viewport",
    "css_background",
    "to_data_uri",
    "to_svg",
    "ExportFormat",
    "ExportRequest",
    "PlaywrightDecoder",
    "RasterImage",
    "RasterizationError",
    "export_scene",
    "rasterize",
    "rasterize_async",
    "rasterize_scene_async",
]
