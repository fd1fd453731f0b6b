"""
Token tree IR types.

Defines the DesignTokens aggregate produced by the aggregator and read by
every exporter. Attribute names are snake_case; serialization uses camelCase
aliases so exported documents keep the key spelling front-end code expects
(``cardForeground``, ``semanticSpacing``, ...).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

ColorScale = dict[str, str]

# Iteration order for semantic color roles in every export format
COLOR_NAMES: tuple[str, ...] = (
    "primary",
    "secondary",
    "accent",
    "neutral",
    "success",
    "warning",
    "error",
    "info",
)

CUSTOMIZABLE_COLOR_NAMES: tuple[str, ...] = ("primary", "secondary", "accent")


class TokenModel(BaseModel):
    """Frozen base model with camelCase serialization aliases."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Colors
# =============================================================================


class SemanticColors(TokenModel):
    """One 11-step scale per semantic role."""

    primary: ColorScale
    secondary: ColorScale
    accent: ColorScale
    neutral: ColorScale
    success: ColorScale
    warning: ColorScale
    error: ColorScale
    info: ColorScale

    def scales(self) -> Iterator[tuple[str, ColorScale]]:
        """Yield ``(role, scale)`` in COLOR_NAMES order."""
        for name in COLOR_NAMES:
            yield name, getattr(self, name)


class SurfaceColors(TokenModel):
    """Surface fills and their text colors for one mode."""

    background: str
    foreground: str
    card: str
    card_foreground: str
    popover: str
    popover_foreground: str
    modal: str
    modal_foreground: str
    muted: str
    muted_foreground: str


class BorderColors(TokenModel):
    """Border colors for one mode."""

    default: str
    muted: str
    strong: str
    focus: str


class SurfaceModes(TokenModel):
    light: SurfaceColors
    dark: SurfaceColors


class BorderModes(TokenModel):
    light: BorderColors
    dark: BorderColors


# =============================================================================
# Typography
# =============================================================================


class TypeStyle(TokenModel):
    """A single text style."""

    font_size: str
    line_height: str
    letter_spacing: str
    font_weight: int


class DisplayScale(TokenModel):
    xl: TypeStyle
    lg: TypeStyle
    md: TypeStyle
    sm: TypeStyle


class HeadingScale(TokenModel):
    h1: TypeStyle
    h2: TypeStyle
    h3: TypeStyle
    h4: TypeStyle
    h5: TypeStyle
    h6: TypeStyle


class BodyScale(TokenModel):
    xl: TypeStyle
    lg: TypeStyle
    md: TypeStyle
    sm: TypeStyle
    xs: TypeStyle


class TypographyScale(TokenModel):
    """Display sizes, heading levels, body sizes, caption and overline."""

    display: DisplayScale
    heading: HeadingScale
    body: BodyScale
    caption: TypeStyle
    overline: TypeStyle

    def styles(self) -> Iterator[tuple[str, str | None, TypeStyle]]:
        """Yield ``(group, size, style)`` for every entry in export order.

        ``size`` is None for the caption and overline singletons.
        """
        for group in ("display", "heading", "body"):
            scale = getattr(self, group)
            for size in type(scale).model_fields:
                yield group, size, getattr(scale, size)
        yield "caption", None, self.caption
        yield "overline", None, self.overline


# =============================================================================
# Elevation
# =============================================================================


class ElevationLevel(TokenModel):
    """Box-shadow values for one elevation level."""

    light: str
    dark: str


# =============================================================================
# Aggregate
# =============================================================================


class DesignTokens(TokenModel):
    """The complete token tree.

    Built only by ``create_design_tokens``; exporters treat it as read-only.
    """

    colors: SemanticColors
    surfaces: SurfaceModes
    borders: BorderModes
    typography: TypographyScale
    spacing: dict[str, str]
    semantic_spacing: dict[str, dict[str, str]]
    border_radius: dict[str, str]
    elevation: dict[int, ElevationLevel]
    font_weights: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase tree ready for JSON serialization."""
        return self.model_dump(by_alias=True)
