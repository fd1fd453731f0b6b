"""
Design-tool variable collection export.

Generates a Figma-style variables document: four collections (Colors,
Spacing, Border Radius, Typography) of ``/``-delimited variables. Colors
are multi-mode (light and dark); the other collections have one mode.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from tokenforge.core.ir import DesignTokens
from tokenforge.core.strings import camel_to_kebab, parse_css_number

FORMAT_VERSION = "1.0.0"

COLOR_MODES = ["light", "dark"]
SINGLE_MODE = ["light"]

# Border radius used for pill shapes
FULL_RADIUS = 9999


def _variable(name: str, var_type: str, **values_by_mode: Any) -> dict[str, Any]:
    return {"name": name, "type": var_type, "valuesByMode": values_by_mode}


def _collection(name: str, modes: list[str], variables: list[dict[str, Any]]) -> dict[str, Any]:
    return {"name": name, "modes": list(modes), "variables": variables}


def _color_collection(tokens: DesignTokens) -> dict[str, Any]:
    variables: list[dict[str, Any]] = []

    # Scales are mode-independent but every color variable carries both modes
    for name, scale in tokens.colors.scales():
        for shade, value in scale.items():
            variables.append(_variable(f"color/{name}/{shade}", "COLOR", light=value, dark=value))

    dark_surfaces = tokens.surfaces.dark.model_dump(by_alias=True)
    for key, light_value in tokens.surfaces.light.model_dump(by_alias=True).items():
        variables.append(
            _variable(
                f"surface/{camel_to_kebab(key)}",
                "COLOR",
                light=light_value,
                dark=dark_surfaces[key],
            )
        )

    dark_borders = tokens.borders.dark.model_dump(by_alias=True)
    for key, light_value in tokens.borders.light.model_dump(by_alias=True).items():
        variables.append(
            _variable(f"border/{key}", "COLOR", light=light_value, dark=dark_borders[key])
        )

    return _collection("Colors", COLOR_MODES, variables)


def _spacing_collection(tokens: DesignTokens) -> dict[str, Any]:
    variables = [
        _variable(f"spacing/{key}", "FLOAT", light=parse_css_number(value))
        for key, value in tokens.spacing.items()
    ]
    for density, sizes in tokens.semantic_spacing.items():
        for size, value in sizes.items():
            variables.append(
                _variable(f"spacing/{density}/{size}", "FLOAT", light=parse_css_number(value))
            )
    return _collection("Spacing", SINGLE_MODE, variables)


def _radius_value(value: str) -> int | float:
    if value.strip() == f"{FULL_RADIUS}px":
        return FULL_RADIUS
    return parse_css_number(value)


def _radius_collection(tokens: DesignTokens) -> dict[str, Any]:
    variables = [
        _variable(f"radius/{key}", "FLOAT", light=_radius_value(value))
        for key, value in tokens.border_radius.items()
    ]
    return _collection("Border Radius", SINGLE_MODE, variables)


def _typography_collection(tokens: DesignTokens) -> dict[str, Any]:
    variables = [
        _variable(f"font-weight/{name}", "FLOAT", light=weight)
        for name, weight in tokens.font_weights.items()
    ]
    for group, size, style in tokens.typography.styles():
        path = f"typography/{group}/{size}" if size else f"typography/{group}"
        variables.append(
            _variable(f"{path}/font-size", "FLOAT", light=parse_css_number(style.font_size))
        )
        variables.append(
            _variable(f"{path}/line-height", "FLOAT", light=parse_css_number(style.line_height))
        )
    return _collection("Typography", SINGLE_MODE, variables)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix.

    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    moment = moment.astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_figma_document(
    tokens: DesignTokens, generated_at: datetime | None = None
) -> dict[str, Any]:
    """Build the variables document as plain data.

    Args:
        tokens: Token tree to serialize.
        generated_at: Timestamp to record; defaults to now.
    """
    return {
        "version": FORMAT_VERSION,
        "generatedAt": format_timestamp(generated_at or datetime.now(UTC)),
        "collections": [
            _color_collection(tokens),
            _spacing_collection(tokens),
            _radius_collection(tokens),
            _typography_collection(tokens),
        ],
    }


def export_to_figma_json(tokens: DesignTokens, generated_at: datetime | None = None) -> str:
    """
    Generate the design-tool variables document as JSON text.

    Args:
        tokens: Token tree to serialize.
        generated_at: Timestamp to record; defaults to now. Pass a fixed
            value for byte-reproducible output.

    Returns:
        JSON string indented by two spaces.
    """
    return json.dumps(build_figma_document(tokens, generated_at), indent=2)
