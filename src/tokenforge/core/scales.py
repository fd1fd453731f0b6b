"""
Color scale generation.

Builds an 11-step scale (50 through 950) from a single seed color. Each
step fixes lightness and scales the seed saturation, so every seed hue
yields the same lightness ladder and shade 500 is the seed's hue and
saturation at 50% lightness.
"""

from __future__ import annotations

from .color import hex_to_hsl, hsl_to_hex
from .ir.tokens import ColorScale

SHADE_KEYS: tuple[str, ...] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)

# (shade, saturation multiplier, lightness)
SCALE_STEPS: tuple[tuple[str, float, float], ...] = (
    ("50", 0.3, 97),
    ("100", 0.4, 94),
    ("200", 0.5, 86),
    ("300", 0.6, 76),
    ("400", 0.8, 64),
    ("500", 1.0, 50),
    ("600", 1.1, 42),
    ("700", 1.15, 34),
    ("800", 1.2, 26),
    ("900", 1.25, 18),
    ("950", 1.3, 10),
)


def generate_color_scale(seed_hex: str) -> ColorScale:
    """Generate an 11-step color scale from a seed color.

    Args:
        seed_hex: Seed color as ``#rrggbb``. Malformed seeds produce a
            gray scale (hue and saturation 0).

    Returns:
        Dict mapping shade keys to hex colors, lightest first.
    """
    hue, saturation, _ = hex_to_hsl(seed_hex)
    return {
        shade: hsl_to_hex(hue, min(saturation * multiplier, 100), lightness)
        for shade, multiplier, lightness in SCALE_STEPS
    }


def generate_dark_mode_scale(light_scale: ColorScale) -> ColorScale:
    """Mirror a light scale around shade 500 for dark mode.

    Shade 50 takes the light 950 value, 100 takes 900 and so on; 500 is
    unchanged. Applying it twice returns the original scale.
    """
    return {
        shade: light_scale[mirror]
        for shade, mirror in zip(SHADE_KEYS, reversed(SHADE_KEYS), strict=True)
    }
