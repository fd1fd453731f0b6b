"""
Export target identifiers.

The closed set of formats a token tree can be serialized to, and the file
name each one is written under.
"""

from __future__ import annotations

from enum import StrEnum


class ExportFormat(StrEnum):
    """Serialization targets, valued by their bundle key."""

    CSS = "css"
    TAILWIND = "tailwind"
    FIGMA_JSON = "figmaJSON"
    TYPESCRIPT = "typescript"


EXPORT_FILENAMES: dict[ExportFormat, str] = {
    ExportFormat.CSS: "design-tokens.css",
    ExportFormat.TAILWIND: "tailwind.config.ts",
    ExportFormat.FIGMA_JSON: "figma-variables.json",
    ExportFormat.TYPESCRIPT: "theme.ts",
}


def parse_export_format(value: str) -> ExportFormat | None:
    """Look up a format by bundle key, case-insensitively.

    ``figma`` is accepted as shorthand for ``figmaJSON``.
    """
    lowered = value.strip().lower()
    if lowered == "figma":
        return ExportFormat.FIGMA_JSON
    for fmt in ExportFormat:
        if fmt.value.lower() == lowered:
            return fmt
    return None
