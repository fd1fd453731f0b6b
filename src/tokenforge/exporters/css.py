"""
CSS custom property exporter.

Emits a :root block with every token as a custom property, a dark-mode
override block for surfaces, borders and shadows, and one utility class
per typography entry.
"""

from __future__ import annotations

from tokenforge.core.ir import DesignTokens, TypeStyle
from tokenforge.core.strings import camel_to_kebab

DARK_SELECTOR = '.dark, [data-theme="dark"]'

_HEADER = [
    "/* ============================================================================",
    " * DESIGN SYSTEM CSS CUSTOM PROPERTIES",
    " * Generated automatically - do not edit manually",
    " * ============================================================================ */",
    "",
]


def export_to_css(tokens: DesignTokens) -> str:
    """
    Generate a CSS style sheet from a token tree.

    Args:
        tokens: Token tree to serialize.

    Returns:
        CSS text: :root variables, dark overrides, typography classes.
    """
    lines: list[str] = list(_HEADER)

    lines.append(":root {")
    lines.append("  /* Color Scales */")
    for name, scale in tokens.colors.scales():
        for shade, value in scale.items():
            lines.append(f"  --color-{name}-{shade}: {value};")
        lines.append("")

    lines.extend(_mode_lines(tokens, "light", "Light Mode"))

    lines.append("  /* Typography - Font Weights */")
    for name, weight in tokens.font_weights.items():
        lines.append(f"  --font-weight-{name}: {weight};")
    lines.append("")

    lines.append("  /* Spacing Scale */")
    for key, value in tokens.spacing.items():
        lines.append(f"  --spacing-{key}: {value};")
    lines.append("")

    lines.append("  /* Border Radius */")
    for key, value in tokens.border_radius.items():
        lines.append(f"  --radius-{key}: {value};")
    lines.append("")

    lines.append("  /* Elevation - Light Mode */")
    for level, shadows in tokens.elevation.items():
        lines.append(f"  --shadow-{level}: {shadows.light};")
    lines.append("")
    lines.append("}")
    lines.append("")

    lines.append(f"{DARK_SELECTOR} {{")
    lines.extend(_mode_lines(tokens, "dark", "Dark Mode"))
    lines.append("  /* Elevation - Dark Mode */")
    for level, shadows in tokens.elevation.items():
        lines.append(f"  --shadow-{level}: {shadows.dark};")
    lines.append("}")
    lines.append("")

    lines.append("/* Typography Utility Classes */")
    for group, size, style in tokens.typography.styles():
        lines.extend(_type_rule(_type_class(group, size), style, uppercase=group == "overline"))

    return "\n".join(lines)


def _mode_lines(tokens: DesignTokens, mode: str, label: str) -> list[str]:
    """Surface and border variables for one color mode."""
    lines = [f"  /* Surface Colors - {label} */"]
    surfaces = getattr(tokens.surfaces, mode).model_dump(by_alias=True)
    for key, value in surfaces.items():
        lines.append(f"  --surface-{camel_to_kebab(key)}: {value};")
    lines.append("")

    lines.append(f"  /* Border Colors - {label} */")
    borders = getattr(tokens.borders, mode).model_dump(by_alias=True)
    for key, value in borders.items():
        lines.append(f"  --border-{key}: {value};")
    lines.append("")
    return lines


def _type_class(group: str, size: str | None) -> str:
    """Class name for a typography entry (``text-display-xl``, ``text-h1``, ...)."""
    if group == "heading":
        return f"text-{size}"
    if size is None:
        return f"text-{group}"
    return f"text-{group}-{size}"


def _type_rule(class_name: str, style: TypeStyle, uppercase: bool = False) -> list[str]:
    lines = [
        f".{class_name} {{",
        f"  font-size: {style.font_size};",
        f"  line-height: {style.line_height};",
        f"  letter-spacing: {style.letter_spacing};",
        f"  font-weight: {style.font_weight};",
    ]
    if uppercase:
        lines.append("  text-transform: uppercase;")
    lines.append("}")
    return lines
