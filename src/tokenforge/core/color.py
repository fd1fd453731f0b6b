"""
Pure-Python sRGB hex <-> HSL conversion.

Input colors are edited character by character in the UIs that call this
module, so malformed hex never raises: it converts to black HSL(0, 0, 0).
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)


class HSL(NamedTuple):
    """An HSL color: hue in degrees [0, 360), saturation and lightness in [0, 100]."""

    h: float
    s: float
    l: float  # noqa: E741


def parse_hex(value: str) -> tuple[int, int, int] | None:
    """Parse a 6-digit hex color (``#`` optional) into 0-255 channels.

    Returns:
        ``(r, g, b)`` or None if the value is not a 6-digit hex color.
    """
    match = _HEX_PATTERN.match(value) if isinstance(value, str) else None
    if match is None:
        return None
    return (int(match.group(1), 16), int(match.group(2), 16), int(match.group(3), 16))


def is_valid_hex(value: str) -> bool:
    """Check whether a value is a 6-digit hex color."""
    return parse_hex(value) is not None


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert a hex color to HSL.

    Args:
        hex_color: ``#rrggbb`` or ``rrggbb``, any case.

    Returns:
        HSL tuple. Malformed input yields ``HSL(0, 0, 0)``.
    """
    channels = parse_hex(hex_color)
    if channels is None:
        return HSL(0.0, 0.0, 0.0)

    r, g, b = (c / 255 for c in channels)
    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2
    hue = 0.0
    saturation = 0.0

    if high != low:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == r:
            hue = ((g - b) / d + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / d + 2) / 6
        else:
            hue = ((r - g) / d + 4) / 6

    return HSL(hue * 360, saturation * 100, lightness * 100)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _channel_to_hex(x: float) -> str:
    # Half-up rounding; round() would send 0.5 to the even neighbour.
    return f"{math.floor(x * 255 + 0.5):02x}"


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    """Convert HSL to a lowercase ``#rrggbb`` string.

    Args:
        h: Hue in degrees.
        s: Saturation (0-100).
        l: Lightness (0-100).

    Returns:
        Hex color string.
    """
    h /= 360
    s /= 100
    l /= 100  # noqa: E741

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)

    return f"#{_channel_to_hex(r)}{_channel_to_hex(g)}{_channel_to_hex(b)}"
