"""
Tailwind CSS config exporter.

Color scales are emitted as literal values. Surface and border aliases
reference the CSS custom properties from the style-sheet export, so dark
mode follows whatever selector toggles those variables.
"""

from __future__ import annotations

import json
from typing import Any

from tokenforge.core.ir import DesignTokens

FONT_FAMILY_SANS = ["Inter", "system-ui", "sans-serif"]

# Body text sizes inherit letter-spacing from the document
_NO_LETTER_SPACING_GROUPS = frozenset({"body"})

_HEADER = """\
// tailwind.config.ts
// Design System Tailwind Configuration
// Generated automatically - customize as needed

import type { Config } from 'tailwindcss';
"""


def _semantic_aliases() -> dict[str, Any]:
    return {
        "background": "var(--surface-background)",
        "foreground": "var(--surface-foreground)",
        "card": {
            "DEFAULT": "var(--surface-card)",
            "foreground": "var(--surface-card-foreground)",
        },
        "popover": {
            "DEFAULT": "var(--surface-popover)",
            "foreground": "var(--surface-popover-foreground)",
        },
        "muted": {
            "DEFAULT": "var(--surface-muted)",
            "foreground": "var(--surface-muted-foreground)",
        },
        "border": {
            "DEFAULT": "var(--border-default)",
            "muted": "var(--border-muted)",
            "strong": "var(--border-strong)",
            "focus": "var(--border-focus)",
        },
    }


def _font_sizes(tokens: DesignTokens) -> dict[str, list[Any]]:
    sizes: dict[str, list[Any]] = {}
    for group, size, style in tokens.typography.styles():
        if group == "heading" or size is None:
            key = size or group
        else:
            key = f"{group}-{size}"
        options: dict[str, str] = {"lineHeight": style.line_height}
        if group not in _NO_LETTER_SPACING_GROUPS:
            options["letterSpacing"] = style.letter_spacing
        sizes[key] = [style.font_size, options]
    return sizes


def build_tailwind_config(tokens: DesignTokens) -> dict[str, Any]:
    """Build the Tailwind config object as plain data."""
    colors: dict[str, Any] = {name: dict(scale) for name, scale in tokens.colors.scales()}
    colors.update(_semantic_aliases())

    return {
        "theme": {
            "extend": {
                "fontFamily": {"sans": list(FONT_FAMILY_SANS)},
                "colors": colors,
                "spacing": dict(tokens.spacing),
                "borderRadius": dict(tokens.border_radius),
                "boxShadow": {str(level): f"var(--shadow-{level})" for level in tokens.elevation},
                "fontSize": _font_sizes(tokens),
                "fontWeight": dict(tokens.font_weights),
            },
        },
    }


def export_to_tailwind(tokens: DesignTokens) -> str:
    """
    Generate a tailwind.config.ts module from a token tree.

    Args:
        tokens: Token tree to serialize.

    Returns:
        TypeScript source exporting the config as its default.
    """
    config = json.dumps(build_tailwind_config(tokens), indent=2)
    return f"{_HEADER}\nconst config: Config = {config};\n\nexport default config;"
