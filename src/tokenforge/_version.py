"""Package version lookup."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as distribution_version
from pathlib import Path

DISTRIBUTION = "tokenforge"

# Source checkout: src/tokenforge/_version.py -> pyproject.toml
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _source_version(pyproject: Path) -> str | None:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError):
        return None
    project = data.get("project", {})
    if project.get("name") != DISTRIBUTION:
        return None
    return project.get("version")


def get_version(pyproject: Path = _PYPROJECT) -> str:
    """Installed distribution version, else the checkout's pyproject version, else 0.0.0."""
    try:
        return distribution_version(DISTRIBUTION)
    except PackageNotFoundError:
        return _source_version(pyproject) or "0.0.0"
