"""
Typed theme module exporter.

Emits a TypeScript module holding the full token tree as one ``as const``
literal, plus type aliases derived from it.
"""

from __future__ import annotations

import json

from tokenforge.core.ir import DesignTokens

_HEADER = """\
// Design System Theme Object
// Generated automatically - do not edit manually
"""

# (alias, type expression) in declaration order
CATEGORY_TYPES: tuple[tuple[str, str], ...] = (
    ("Theme", "typeof theme"),
    ("ColorScale", "typeof theme.colors.primary"),
    ("SemanticColors", "typeof theme.colors"),
    ("SurfaceColors", "typeof theme.surfaces.light"),
    ("BorderColors", "typeof theme.borders.light"),
    ("TypographyScale", "typeof theme.typography"),
    ("SpacingScale", "typeof theme.spacing"),
    ("BorderRadiusScale", "typeof theme.borderRadius"),
    ("ElevationScale", "typeof theme.elevation"),
)

KEY_TYPES: tuple[tuple[str, str], ...] = (
    ("ColorName", "keyof SemanticColors"),
    ("ColorShade", "keyof ColorScale"),
    ("SpacingKey", "keyof SpacingScale"),
    ("RadiusKey", "keyof BorderRadiusScale"),
    ("ElevationLevel", "keyof ElevationScale"),
)


def export_to_typescript(tokens: DesignTokens) -> str:
    """
    Generate a typed theme module from a token tree.

    The literal is ``tokens.to_dict()`` rendered as JSON, so parsing the
    text between ``export const theme =`` and ``as const;`` gives back the
    same tree.

    Args:
        tokens: Token tree to serialize.

    Returns:
        TypeScript module source.
    """
    literal = json.dumps(tokens.to_dict(), indent=2)
    lines = [_HEADER, f"export const theme = {literal} as const;", ""]
    lines.extend(f"export type {alias} = {expr};" for alias, expr in CATEGORY_TYPES)
    lines.append("")
    lines.append("// Utility types for component props")
    lines.extend(f"export type {alias} = {expr};" for alias, expr in KEY_TYPES)
    lines.append("")
    lines.append("export default theme;")
    lines.append("")
    return "\n".join(lines)
