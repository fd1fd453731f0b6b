"""
tokenforge intermediate representation.

The token tree shared by the aggregator and every exporter.
"""

from .export import EXPORT_FILENAMES, ExportFormat, parse_export_format
from .tokens import (
    COLOR_NAMES,
    CUSTOMIZABLE_COLOR_NAMES,
    BodyScale,
    BorderColors,
    BorderModes,
    ColorScale,
    DesignTokens,
    DisplayScale,
    ElevationLevel,
    HeadingScale,
    SemanticColors,
    SurfaceColors,
    SurfaceModes,
    TypeStyle,
    TypographyScale,
)

__all__ = [
    "EXPORT_FILENAMES",
    "ExportFormat",
    "parse_export_format",
    "COLOR_NAMES",
    "CUSTOMIZABLE_COLOR_NAMES",
    "BodyScale",
    "BorderColors",
    "BorderModes",
    "ColorScale",
    "DesignTokens",
    "DisplayScale",
    "ElevationLevel",
    "HeadingScale",
    "SemanticColors",
    "SurfaceColors",
    "SurfaceModes",
    "TypeStyle",
    "TypographyScale",
]
