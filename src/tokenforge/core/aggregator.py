"""
Token aggregation.

Assembles the complete DesignTokens tree from up to three seed colors, the
fixed semantic scales and the static tables. Every call builds a fresh tree;
static tables are copied in, never shared.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping

from pydantic import BaseModel

from .ir.tokens import (
    BorderColors,
    BorderModes,
    DesignTokens,
    ElevationLevel,
    SemanticColors,
    SurfaceColors,
    SurfaceModes,
    TypographyScale,
)
from .scales import ColorScale, generate_color_scale
from .tables import (
    BORDER_RADIUS,
    DARK_BORDERS,
    DARK_SURFACES,
    DEFAULT_SEEDS,
    ELEVATION,
    FIXED_SEEDS,
    FONT_WEIGHTS,
    LIGHT_BORDERS,
    LIGHT_SURFACES,
    SEMANTIC_SPACING,
    SPACING,
    TYPOGRAPHY,
)

logger = logging.getLogger(__name__)


class CustomColors(BaseModel):
    """Caller-supplied seeds for the customizable roles.

    Missing or empty seeds fall back to the defaults. Any other string is
    used as-is, so a half-typed color yields a gray scale instead of an error.
    """

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None

    def resolve(self) -> dict[str, str]:
        """Return the effective seed for each customizable role."""
        return {
            name: getattr(self, name) or default for name, default in DEFAULT_SEEDS.items()
        }


def _coerce_custom_colors(
    custom_colors: CustomColors | Mapping[str, str | None] | None,
) -> CustomColors:
    if custom_colors is None:
        return CustomColors()
    if isinstance(custom_colors, CustomColors):
        return custom_colors
    return CustomColors.model_validate(dict(custom_colors))


def _build_colors(seeds: Mapping[str, str]) -> SemanticColors:
    scales: dict[str, ColorScale] = {name: generate_color_scale(seed) for name, seed in seeds.items()}
    for name, seed in FIXED_SEEDS.items():
        scales[name] = generate_color_scale(seed)
    return SemanticColors(**scales)


def create_design_tokens(
    custom_colors: CustomColors | Mapping[str, str | None] | None = None,
) -> DesignTokens:
    """Build the full token tree.

    Args:
        custom_colors: Optional ``primary``/``secondary``/``accent`` seeds,
            as a CustomColors model or a plain mapping.

    Returns:
        A new DesignTokens value. Identical input gives an identical tree.

    Raises:
        pydantic.ValidationError: If a seed is neither a string nor None.
            Malformed strings do not raise; they yield a gray scale.
    """
    seeds = _coerce_custom_colors(custom_colors).resolve()
    logger.debug(
        f"Building design tokens (primary={seeds['primary']}, "
        f"secondary={seeds['secondary']}, accent={seeds['accent']})"
    )

    return DesignTokens(
        colors=_build_colors(seeds),
        surfaces=SurfaceModes(
            light=SurfaceColors(**LIGHT_SURFACES),
            dark=SurfaceColors(**DARK_SURFACES),
        ),
        borders=BorderModes(
            light=BorderColors(**LIGHT_BORDERS),
            dark=BorderColors(**DARK_BORDERS),
        ),
        typography=TypographyScale.model_validate(copy.deepcopy(TYPOGRAPHY)),
        spacing=dict(SPACING),
        semantic_spacing=copy.deepcopy(SEMANTIC_SPACING),
        border_radius=dict(BORDER_RADIUS),
        elevation={level: ElevationLevel(**pair) for level, pair in ELEVATION.items()},
        font_weights=dict(FONT_WEIGHTS),
    )
