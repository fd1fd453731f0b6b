"""
Error types for tokenforge manifest loading and export.

Color math never raises: malformed colors degrade to gray or zero
luminance. These errors cover the configuration and export surfaces.
"""

from pathlib import Path


class TokenForgeError(Exception):
    """Base exception for all tokenforge errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending file if available."""
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class ManifestError(TokenForgeError):
    """
    Raised when tokenforge.toml cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - Unknown export format in [export].formats
    - Wrong value types
    """

    pass


class ExportError(TokenForgeError):
    """
    Raised when an export cannot be produced.

    Examples:
    - Unknown export format name
    - Output directory cannot be created
    """

    pass
