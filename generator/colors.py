"""Per-channel colour helpers for palette entries ('#RRGGBB' strings)."""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class InvalidColorError(ValueError):
    """Raised when a colour string is not a 3- or 6-digit hex value."""


def normalize_color(color: str) -> str:
    """Return ``color`` as lowercase '#rrggbb'. Accepts '#rgb' shorthand."""
    match = _HEX_RE.match(color.strip()) if isinstance(color, str) else None
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.lower()}"


def parse_hex(color: str) -> tuple[int, int, int]:
    """Convert '#RRGGBB' (or '#RGB') to an (R, G, B) tuple."""
    h = normalize_color(color)[1:]
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def _clamp_channel(value: int) -> int:
    return min(255, max(0, value))


def to_hex(r: int, g: int, b: int) -> str:
    """Assemble clamped channels into '#rrggbb'."""
    r, g, b = (_clamp_channel(int(c)) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def adjust_color(color: str, amount: int) -> str:
    """
    Shift every channel of ``color`` by ``amount``.

    Each channel is clamped to [0, 255] after the shift, so large offsets
    saturate instead of wrapping into a neighbouring channel.
    """
    r, g, b = parse_hex(color)
    amount = int(amount)
    return to_hex(r + amount, g + amount, b + amount)
