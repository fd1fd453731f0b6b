"""
tokenforge - deterministic design tokens from a few seed colors.

Derives accessible color scales, typography, spacing, radius and elevation
tokens, and exports them as CSS variables, a Tailwind config, a design-tool
variables document and a typed TypeScript theme.
"""

from __future__ import annotations

from ._version import get_version
from .core.aggregator import CustomColors, create_design_tokens
from .core.color import HSL, hex_to_hsl, hsl_to_hex, is_valid_hex
from .core.contrast import (
    ContrastResult,
    audit_surface_contrast,
    check_contrast,
    get_contrast_ratio,
    get_luminance,
    is_wcag_aa_compliant,
    is_wcag_aaa_compliant,
)
from .core.errors import ExportError, ManifestError, TokenForgeError
from .core.ir import DesignTokens, ExportFormat
from .core.scales import SHADE_KEYS, generate_color_scale, generate_dark_mode_scale
from .exporters import (
    export_all_formats,
    export_format,
    export_to_css,
    export_to_figma_json,
    export_to_tailwind,
    export_to_typescript,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "HSL",
    "SHADE_KEYS",
    "ContrastResult",
    "CustomColors",
    "DesignTokens",
    "ExportError",
    "ExportFormat",
    "ManifestError",
    "TokenForgeError",
    "audit_surface_contrast",
    "check_contrast",
    "create_design_tokens",
    "export_all_formats",
    "export_format",
    "export_to_css",
    "export_to_figma_json",
    "export_to_tailwind",
    "export_to_typescript",
    "generate_color_scale",
    "generate_dark_mode_scale",
    "get_contrast_ratio",
    "get_luminance",
    "hex_to_hsl",
    "hsl_to_hex",
    "is_valid_hex",
    "is_wcag_aa_compliant",
    "is_wcag_aaa_compliant",
]
