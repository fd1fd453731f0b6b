"""
WCAG 2.x contrast evaluation.

Relative luminance and contrast ratio per WCAG 2.1, plus AA/AAA
predicates and a surface audit over a token tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .color import parse_hex

if TYPE_CHECKING:
    from .ir.tokens import DesignTokens

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

# (surface slot, foreground slot) pairs rendered together
SURFACE_TEXT_PAIRS: tuple[tuple[str, str], ...] = (
    ("background", "foreground"),
    ("card", "card_foreground"),
    ("popover", "popover_foreground"),
    ("modal", "modal_foreground"),
    ("muted", "muted_foreground"),
)


def _linearize(channel: float) -> float:
    if channel <= 0.03928:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def get_luminance(hex_color: str) -> float:
    """Relative luminance of a hex color (0 for black, 1 for white).

    Malformed input has luminance 0.
    """
    channels = parse_hex(hex_color)
    if channels is None:
        return 0.0
    r, g, b = (_linearize(c / 255) for c in channels)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_contrast_ratio(color1: str, color2: str) -> float:
    """Contrast ratio between two colors, from 1 (identical) to 21."""
    l1 = get_luminance(color1)
    l2 = get_luminance(color2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def is_wcag_aa_compliant(foreground: str, background: str, is_large_text: bool = False) -> bool:
    """Check WCAG AA: 4.5:1 for normal text, 3:1 for large text."""
    ratio = get_contrast_ratio(foreground, background)
    return ratio >= (AA_LARGE if is_large_text else AA_NORMAL)


def is_wcag_aaa_compliant(foreground: str, background: str, is_large_text: bool = False) -> bool:
    """Check WCAG AAA: 7:1 for normal text, 4.5:1 for large text."""
    ratio = get_contrast_ratio(foreground, background)
    return ratio >= (AAA_LARGE if is_large_text else AAA_NORMAL)


@dataclass(frozen=True)
class ContrastResult:
    """Contrast verdicts for one foreground/background pair."""

    foreground: str
    background: str
    ratio: float
    aa: bool
    aa_large: bool
    aaa: bool
    aaa_large: bool

    @property
    def level(self) -> str:
        """Highest level met for normal text, or ``AA Large`` / ``Fail``."""
        if self.aaa:
            return "AAA"
        if self.aa:
            return "AA"
        if self.aa_large:
            return "AA Large"
        return "Fail"


@dataclass(frozen=True)
class SurfaceContrastCheck:
    """Contrast of a surface slot against its paired text color in one mode."""

    mode: str
    surface: str
    foreground: str
    result: ContrastResult


def check_contrast(foreground: str, background: str) -> ContrastResult:
    """Evaluate a color pair against every WCAG threshold."""
    ratio = get_contrast_ratio(foreground, background)
    return ContrastResult(
        foreground=foreground,
        background=background,
        ratio=ratio,
        aa=ratio >= AA_NORMAL,
        aa_large=ratio >= AA_LARGE,
        aaa=ratio >= AAA_NORMAL,
        aaa_large=ratio >= AAA_LARGE,
    )


def audit_surface_contrast(tokens: DesignTokens) -> list[SurfaceContrastCheck]:
    """Check every surface/foreground pair of a token tree, light mode first."""
    checks: list[SurfaceContrastCheck] = []
    for mode in ("light", "dark"):
        surfaces = getattr(tokens.surfaces, mode)
        for surface_slot, text_slot in SURFACE_TEXT_PAIRS:
            checks.append(
                SurfaceContrastCheck(
                    mode=mode,
                    surface=surface_slot,
                    foreground=text_slot,
                    result=check_contrast(
                        getattr(surfaces, text_slot), getattr(surfaces, surface_slot)
                    ),
                )
            )
    return checks
