"""
Token tree exporters.

Each format is a plain function ``DesignTokens -> str``; EXPORTERS maps the
closed set of format ids to those functions.

Usage:
    from tokenforge import create_design_tokens
    from tokenforge.exporters import export_all_formats

    bundle = export_all_formats(create_design_tokens({"primary": "#0f766e"}))
    print(bundle["css"])
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from pathlib import Path

from tokenforge.core.errors import ExportError
from tokenforge.core.ir import EXPORT_FILENAMES, DesignTokens, ExportFormat, parse_export_format

from .css import export_to_css
from .figma import export_to_figma_json
from .tailwind import export_to_tailwind
from .typescript import export_to_typescript

logger = logging.getLogger(__name__)

Exporter = Callable[[DesignTokens], str]

EXPORTERS: dict[ExportFormat, Exporter] = {
    ExportFormat.CSS: export_to_css,
    ExportFormat.TAILWIND: export_to_tailwind,
    ExportFormat.FIGMA_JSON: export_to_figma_json,
    ExportFormat.TYPESCRIPT: export_to_typescript,
}


def resolve_format(fmt: ExportFormat | str) -> ExportFormat:
    """Resolve a format id, raising ExportError for unknown names."""
    if isinstance(fmt, ExportFormat):
        return fmt
    resolved = parse_export_format(fmt)
    if resolved is None:
        valid = ", ".join(f.value for f in ExportFormat)
        raise ExportError(f"Unknown export format {fmt!r} (expected one of: {valid})")
    return resolved


def export_format(
    tokens: DesignTokens,
    fmt: ExportFormat | str,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Serialize a token tree to a single format.

    Args:
        tokens: Token tree to serialize.
        fmt: Format id (``css``, ``tailwind``, ``figmaJSON``, ``typescript``).
        generated_at: Timestamp for the design-tool document.

    Raises:
        ExportError: If the format is unknown.
    """
    resolved = resolve_format(fmt)
    if resolved is ExportFormat.FIGMA_JSON:
        return export_to_figma_json(tokens, generated_at)
    return EXPORTERS[resolved](tokens)


def export_all_formats(
    tokens: DesignTokens, *, generated_at: datetime | None = None
) -> dict[str, str]:
    """Serialize a token tree to every format.

    Returns:
        Dict keyed ``css``, ``tailwind``, ``figmaJSON``, ``typescript``.
    """
    return {
        fmt.value: export_format(tokens, fmt, generated_at=generated_at) for fmt in ExportFormat
    }


def write_bundle(
    bundle: dict[str, str],
    output_dir: Path,
    formats: Iterable[ExportFormat | str] | None = None,
) -> list[Path]:
    """Write exported documents under their conventional file names.

    Args:
        bundle: Output of export_all_formats (or a subset of it).
        output_dir: Directory to write into; created if missing.
        formats: Formats to write; defaults to every key in ``bundle``.

    Returns:
        Paths written, in format order.

    Raises:
        ExportError: On an unknown format, a format missing from the bundle,
            or an unwritable directory.
    """
    selected = [resolve_format(f) for f in (formats if formats is not None else bundle)]
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Cannot create output directory: {e}", output_dir) from e

    written: list[Path] = []
    for fmt in selected:
        if fmt.value not in bundle:
            raise ExportError(f"Bundle has no {fmt.value!r} output")
        path = output_dir / EXPORT_FILENAMES[fmt]
        path.write_text(bundle[fmt.value], encoding="utf-8")
        logger.info(f"Wrote {fmt.value} tokens to {path}")
        written.append(path)
    return written


__all__ = [
    "EXPORTERS",
    "EXPORT_FILENAMES",
    "Exporter",
    "ExportFormat",
    "export_all_formats",
    "export_format",
    "export_to_css",
    "export_to_figma_json",
    "export_to_tailwind",
    "export_to_typescript",
    "resolve_format",
    "write_bundle",
]
