"""
Vector markup — Scene → SVG document, plus the CSS background form.

Renders a Jinja2 template with the scene's shapes in paint order. Output is
deterministic: the same scene always produces the same bytes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from generator.scene import Scene
from generator.shapes import fmt
from config import settings

# Jinja2 environment pointing at our templates directory
_TEMPLATE_DIR = Path(__file__).parent / "templates"
_jinja_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    undefined=StrictUndefined,
    autoescape=True,
)
_jinja_env.filters["num"] = fmt


def get_template(name: str):
    return _jinja_env.get_template(name)


SVG_MIME = "image/svg+xml"

# Characters encodeURIComponent leaves alone besides alphanumerics.
_URI_SAFE = "-_.!~*'()"


def to_svg(
    scene: Scene,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> str:
    """
    Serialize ``scene`` to a standalone SVG document.

    Without a size the document is resolution independent. With one, the
    root carries explicit ``width``/``height`` so an image decoder lays it out
    at exactly that pixel size.
    """
    template = get_template("scene.svg.j2")
    return template.render(
        viewport=settings.VIEWPORT_SIZE,
        width=width,
        height=height,
        definitions=scene.definitions,
        shapes=scene.shapes,
    )


def to_data_uri(markup: str) -> str:
    return f"data:{SVG_MIME},{quote(markup, safe=_URI_SAFE)}"


def css_background(markup: str) -> str:
    """CSS declaration embedding ``markup`` as an inline background image."""
    return f'background-image: url("{to_data_uri(markup)}");'
