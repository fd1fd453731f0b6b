"""
Static token tables.

Hand-authored values composed verbatim into every token tree: default
seeds, surface and border colors per mode, typography, spacing, radii,
elevation and font weights. Dark-mode surfaces and borders are tuned by
hand rather than derived from the light tables.
"""

from __future__ import annotations

from typing import Any, Final

# =============================================================================
# Seeds
# =============================================================================

# Defaults for the customizable roles
DEFAULT_SEEDS: Final[dict[str, str]] = {
    "primary": "#2563eb",  # Blue
    "secondary": "#7c3aed",  # Purple
    "accent": "#06b6d4",  # Cyan
}

# Fixed roles, not customizable
FIXED_SEEDS: Final[dict[str, str]] = {
    "neutral": "#64748b",  # Slate
    "success": "#22c55e",  # Green
    "warning": "#f59e0b",  # Amber
    "error": "#ef4444",  # Red
    "info": "#3b82f6",  # Light blue
}

# =============================================================================
# Surfaces & Borders
# =============================================================================

LIGHT_SURFACES: Final[dict[str, str]] = {
    "background": "#ffffff",
    "foreground": "#0f172a",
    "card": "#ffffff",
    "card_foreground": "#0f172a",
    "popover": "#ffffff",
    "popover_foreground": "#0f172a",
    "modal": "#ffffff",
    "modal_foreground": "#0f172a",
    "muted": "#f1f5f9",
    "muted_foreground": "#64748b",
}

DARK_SURFACES: Final[dict[str, str]] = {
    "background": "#0a0a0b",
    "foreground": "#fafafa",
    "card": "#18181b",
    "card_foreground": "#fafafa",
    "popover": "#18181b",
    "popover_foreground": "#fafafa",
    "modal": "#27272a",
    "modal_foreground": "#fafafa",
    "muted": "#27272a",
    "muted_foreground": "#a1a1aa",
}

LIGHT_BORDERS: Final[dict[str, str]] = {
    "default": "rgba(0, 0, 0, 0.08)",
    "muted": "rgba(0, 0, 0, 0.04)",
    "strong": "rgba(0, 0, 0, 0.16)",
    "focus": "#2563eb",
}

DARK_BORDERS: Final[dict[str, str]] = {
    "default": "rgba(255, 255, 255, 0.08)",
    "muted": "rgba(255, 255, 255, 0.04)",
    "strong": "rgba(255, 255, 255, 0.16)",
    "focus": "#3b82f6",
}

# =============================================================================
# Typography
# =============================================================================

FONT_WEIGHTS: Final[dict[str, int]] = {
    "regular": 400,
    "medium": 500,
    "semibold": 600,
    "bold": 700,
}


def _style(size: str, line_height: str, letter_spacing: str, weight: str) -> dict[str, Any]:
    return {
        "font_size": size,
        "line_height": line_height,
        "letter_spacing": letter_spacing,
        "font_weight": FONT_WEIGHTS[weight],
    }


TYPOGRAPHY: Final[dict[str, Any]] = {
    "display": {
        "xl": _style("72px", "1.1", "-0.025em", "bold"),
        "lg": _style("60px", "1.1", "-0.025em", "bold"),
        "md": _style("48px", "1.15", "-0.02em", "bold"),
        "sm": _style("36px", "1.2", "-0.015em", "semibold"),
    },
    "heading": {
        "h1": _style("32px", "1.25", "-0.01em", "semibold"),
        "h2": _style("28px", "1.3", "-0.01em", "semibold"),
        "h3": _style("24px", "1.35", "-0.005em", "semibold"),
        "h4": _style("20px", "1.4", "0", "medium"),
        "h5": _style("18px", "1.4", "0", "medium"),
        "h6": _style("16px", "1.5", "0", "medium"),
    },
    "body": {
        "xl": _style("20px", "1.6", "0", "regular"),
        "lg": _style("18px", "1.6", "0", "regular"),
        "md": _style("16px", "1.6", "0", "regular"),
        "sm": _style("14px", "1.5", "0", "regular"),
        "xs": _style("12px", "1.5", "0.01em", "regular"),
    },
    "caption": _style("12px", "1.4", "0.02em", "regular"),
    "overline": _style("11px", "1.4", "0.08em", "medium"),
}

# =============================================================================
# Spacing
# =============================================================================

SPACING: Final[dict[str, str]] = {
    "0": "0px",
    "px": "1px",
    "0.5": "2px",
    "1": "4px",
    "2": "8px",
    "3": "12px",
    "4": "16px",
    "5": "20px",
    "6": "24px",
    "8": "32px",
    "10": "40px",
    "12": "48px",
    "16": "64px",
    "20": "80px",
    "24": "96px",
    "32": "128px",
}

# Density tiers, each an alias layer over SPACING
SEMANTIC_SPACING: Final[dict[str, dict[str, str]]] = {
    "compact": {
        "xs": SPACING["1"],
        "sm": SPACING["2"],
        "md": SPACING["3"],
        "lg": SPACING["4"],
        "xl": SPACING["6"],
    },
    "default": {
        "xs": SPACING["2"],
        "sm": SPACING["3"],
        "md": SPACING["4"],
        "lg": SPACING["6"],
        "xl": SPACING["8"],
    },
    "comfortable": {
        "xs": SPACING["3"],
        "sm": SPACING["4"],
        "md": SPACING["6"],
        "lg": SPACING["8"],
        "xl": SPACING["12"],
    },
}

# =============================================================================
# Shape
# =============================================================================

BORDER_RADIUS: Final[dict[str, str]] = {
    "none": "0px",
    "sm": "4px",
    "md": "8px",
    "lg": "12px",
    "xl": "16px",
    "2xl": "24px",
    "full": "9999px",
}

ELEVATION: Final[dict[int, dict[str, str]]] = {
    1: {
        "light": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
        "dark": "0 1px 2px 0 rgba(0, 0, 0, 0.4), 0 0 0 1px rgba(255, 255, 255, 0.03)",
    },
    2: {
        "light": "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px -1px rgba(0, 0, 0, 0.1)",
        "dark": (
            "0 1px 3px 0 rgba(0, 0, 0, 0.5), 0 1px 2px -1px rgba(0, 0, 0, 0.5), "
            "0 0 0 1px rgba(255, 255, 255, 0.04)"
        ),
    },
    3: {
        "light": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -2px rgba(0, 0, 0, 0.1)",
        "dark": (
            "0 4px 6px -1px rgba(0, 0, 0, 0.6), 0 2px 4px -2px rgba(0, 0, 0, 0.5), "
            "0 0 0 1px rgba(255, 255, 255, 0.05)"
        ),
    },
    4: {
        "light": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -4px rgba(0, 0, 0, 0.1)",
        "dark": (
            "0 10px 15px -3px rgba(0, 0, 0, 0.7), 0 4px 6px -4px rgba(0, 0, 0, 0.5), "
            "0 0 0 1px rgba(255, 255, 255, 0.06)"
        ),
    },
    5: {
        "light": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 8px 10px -6px rgba(0, 0, 0, 0.1)",
        "dark": (
            "0 20px 25px -5px rgba(0, 0, 0, 0.8), 0 8px 10px -6px rgba(0, 0, 0, 0.5), "
            "0 0 0 1px rgba(255, 255, 255, 0.07)"
        ),
    },
}
