"""
Project manifest (tokenforge.toml) loading.

Example::

    [seeds]
    primary = "#0f766e"
    accent = "#f97316"

    [export]
    output_dir = "build/tokens"
    formats = ["css", "typescript"]

Every section and key is optional.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from .aggregator import CustomColors
from .errors import ManifestError
from .ir.export import ExportFormat, parse_export_format

logger = logging.getLogger(__name__)

MANIFEST_FILE = "tokenforge.toml"


@dataclass
class ExportConfig:
    """Where and what to export."""

    output_dir: Path = Path("tokens")
    formats: list[ExportFormat] = field(default_factory=lambda: list(ExportFormat))


@dataclass
class ProjectManifest:
    """Parsed tokenforge.toml."""

    project_root: Path
    seeds: CustomColors = field(default_factory=CustomColors)
    export: ExportConfig = field(default_factory=ExportConfig)

    @property
    def output_path(self) -> Path:
        """Export directory resolved against the project root."""
        if self.export.output_dir.is_absolute():
            return self.export.output_dir
        return self.project_root / self.export.output_dir


def find_manifest(start_dir: Path) -> Path | None:
    """Walk up from ``start_dir`` looking for tokenforge.toml."""
    current = start_dir.resolve()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_FILE
        if candidate.is_file():
            return candidate
    return None


def _parse_formats(raw: object, path: Path) -> list[ExportFormat]:
    if not isinstance(raw, list):
        raise ManifestError("[export].formats must be a list of format names", path)
    formats: list[ExportFormat] = []
    for item in raw:
        fmt = parse_export_format(item) if isinstance(item, str) else None
        if fmt is None:
            valid = ", ".join(f.value for f in ExportFormat)
            raise ManifestError(f"Unknown export format {item!r} (expected one of: {valid})", path)
        if fmt not in formats:
            formats.append(fmt)
    return formats


def load_manifest(path: Path) -> ProjectManifest:
    """Load and validate a tokenforge.toml file.

    Raises:
        ManifestError: If the file is missing, is not valid TOML or holds
            values of the wrong type.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ManifestError("Manifest not found", path) from e
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", path) from e

    seeds_data = data.get("seeds", {})
    export_data = data.get("export", {})
    if not isinstance(seeds_data, dict) or not isinstance(export_data, dict):
        raise ManifestError("[seeds] and [export] must be tables", path)

    try:
        seeds = CustomColors.model_validate(seeds_data)
    except ValidationError as e:
        raise ManifestError(f"Invalid [seeds]: {e}", path) from e

    export_config = ExportConfig()
    if "output_dir" in export_data:
        output_dir = export_data["output_dir"]
        if not isinstance(output_dir, str):
            raise ManifestError("[export].output_dir must be a string", path)
        export_config.output_dir = Path(output_dir)
    if "formats" in export_data:
        export_config.formats = _parse_formats(export_data["formats"], path)

    manifest = ProjectManifest(
        project_root=path.parent.resolve(),
        seeds=seeds,
        export=export_config,
    )
    logger.debug(f"Loaded manifest {path} ({len(export_config.formats)} export format(s))")
    return manifest
