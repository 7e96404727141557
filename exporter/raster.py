"""
Raster export — SVG markup → pixel buffer of an exact size.

Two steps: a decoder turns the markup into an intermediate image (by default
headless Chromium loads it as an <img>, as a browser would), then that image
is drawn into a fresh RGBA buffer of the requested width and height.
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import numpy as np
from PIL import Image

from exporter.markup import get_template, to_data_uri, to_svg
from exporter.viewport import ViewportTransform, fit_viewport
from generator.scene import Scene
from config import settings

logger = logging.getLogger(__name__)


class RasterizationError(RuntimeError):
    """The markup could not be decoded into an image."""


class ExportFormat(str, Enum):
    VECTOR = "vector"
    RASTER = "raster"

    @property
    def extension(self) -> str:
        return "svg" if self is ExportFormat.VECTOR else "png"


@dataclass(frozen=True)
class ExportRequest:
    format: ExportFormat = ExportFormat.VECTOR
    width: int = field(default_factory=lambda: settings.DEFAULT_WIDTH)
    height: int = field(default_factory=lambda: settings.DEFAULT_HEIGHT)

    def __post_init__(self):
        object.__setattr__(self, "format", ExportFormat(self.format))
        if self.format is ExportFormat.RASTER and (self.width <= 0 or self.height <= 0):
            raise ValueError(f"Raster size must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class RasterImage:
    """A rendered pixel buffer."""
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def pixels(self) -> np.ndarray:
        """RGBA pixel array shaped (height, width, 4)."""
        return np.asarray(self.image)

    def to_png(self) -> bytes:
        return encode_png(self.image)


class PlaywrightDecoder:
    """Decodes SVG markup by loading it as an image in headless Chromium."""

    _CHECK_LOADED = (
        "() => { const img = document.getElementById('scene');"
        " return img.complete && img.naturalWidth > 0; }"
    )

    def __init__(self, timeout_ms: Optional[int] = None, headless: Optional[bool] = None):
        self.timeout_ms = timeout_ms if timeout_ms is not None else settings.RASTER_TIMEOUT_MS
        self.headless = settings.RASTER_HEADLESS if headless is None else headless

    def _build_html(self, markup: str, transform: ViewportTransform) -> str:
        template = get_template("decode_page.html.j2")
        return template.render(
            width=transform.width,
            height=transform.height,
            src=to_data_uri(markup),
        )

    async def decode(self, markup: str, transform: ViewportTransform) -> Image.Image:
        from playwright.async_api import Error as PlaywrightError
        from playwright.async_api import async_playwright

        html = self._build_html(markup, transform)
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self.headless)
                try:
                    page = await browser.new_page(
                        viewport={"width": transform.width, "height": transform.height}
                    )
                    await page.set_content(html, wait_until="load", timeout=self.timeout_ms)
                    if not await page.evaluate(self._CHECK_LOADED):
                        raise RasterizationError("Browser could not decode the SVG markup")
                    screenshot_bytes = await page.screenshot(type="png", omit_background=True)
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise RasterizationError(f"Headless browser failed: {e}") from e

        return Image.open(io.BytesIO(screenshot_bytes)).convert("RGBA")


def draw_to_buffer(resource: Image.Image, transform: ViewportTransform) -> Image.Image:
    """Draw a decoded image into a transparent buffer of the target size."""
    buffer = Image.new("RGBA", transform.target_size, (0, 0, 0, 0))
    if resource.size != transform.target_size:
        logger.debug(f"Resizing decoded image {resource.size} -> {transform.target_size}")
        resource = resource.resize(transform.target_size, Image.Resampling.LANCZOS)
    buffer.alpha_composite(resource.convert("RGBA"))
    return buffer


async def rasterize_async(
    markup: str,
    width: int,
    height: int,
    decoder=None,
) -> RasterImage:
    """
    Rasterize SVG markup to exactly ``width × height`` pixels (async version).

    Pipeline: markup → decoder → intermediate image → sized RGBA buffer
    """
    transform = fit_viewport(width, height)
    decoder = decoder or PlaywrightDecoder()

    try:
        resource = await decoder.decode(markup, transform)
    except RasterizationError:
        raise
    except (OSError, ValueError) as e:
        raise RasterizationError(f"Could not decode SVG markup: {e}") from e

    logger.info(f"Rasterized scene at {width}x{height}")
    return RasterImage(draw_to_buffer(resource, transform))


async def rasterize_scene_async(
    scene: Scene,
    request: Optional[ExportRequest] = None,
    decoder=None,
) -> RasterImage:
    request = request or ExportRequest(format=ExportFormat.RASTER)
    markup = to_svg(scene, request.width, request.height)
    return await rasterize_async(markup, request.width, request.height, decoder)


def rasterize(
    markup: str,
    width: int,
    height: int,
    decoder=None,
) -> RasterImage:
    """
    Rasterize SVG markup (sync wrapper).

    Handles the asyncio event loop for callers that aren't async.
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None

    coro = rasterize_async(markup, width, height, decoder)
    if loop and loop.is_running():
        # We're inside an existing event loop (e.g., a notebook or UI host)
        import concurrent.futures
        with concurrent.futures.ThreadPoolExecutor() as pool:
            future = pool.submit(asyncio.run, coro)
            return future.result()
    else:
        return asyncio.run(coro)


def encode_png(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def default_filename(scene: Scene, fmt: Union[ExportFormat, str]) -> str:
    """Download name such as 'blob-bg.svg'."""
    name = scene.variant.value if scene.variant is not None else "background"
    return f"{name}-bg.{ExportFormat(fmt).extension}"


def export_scene(
    scene: Scene,
    path: Union[str, Path, None] = None,
    request: Optional[ExportRequest] = None,
    decoder=None,
) -> Path:
    """Write ``scene`` to disk as SVG or PNG. Returns the output path."""
    request = request or ExportRequest()
    if path is None:
        path = settings.OUTPUTS_DIR / default_filename(scene, request.format)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if request.format is ExportFormat.VECTOR:
        path.write_text(to_svg(scene), encoding="utf-8")
    else:
        markup = to_svg(scene, request.width, request.height)
        raster = rasterize(markup, request.width, request.height, decoder)
        path.write_bytes(raster.to_png())

    logger.info(f"Exported {request.format.value} background to {path}")
    return path
