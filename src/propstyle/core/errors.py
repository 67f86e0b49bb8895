"""
Error types for loading propstyle input files.

Building and running parsers never raises: malformed props are reported
through a diagnostic sink (see ``propstyle.core.diagnostics``) and malformed
style configs degrade into missing or oddly named style keys. Exceptions are
reserved for theme, system-config and props files that cannot be loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ErrorContext:
    """
    Where a loading error was found.

    Attributes:
        file: Path of the file being loaded, if any
        key_path: Dotted path of the offending entry (e.g. ``screens.md``)
    """

    file: Path | None = None
    key_path: str | None = None

    def format(self) -> str:
        """
        Render the location, e.g. ``theme.yaml at screens.md``.
        """
        where = str(self.file) if self.file is not None else "<input>"
        if self.key_path:
            return f"{where} at {self.key_path}"
        return where


class PropstyleError(Exception):
    """Base exception for all propstyle errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        return f"{self.context.format()}: {self.message}"


class ThemeError(PropstyleError):
    """
    Raised when a theme, system-config or props file cannot be loaded.

    Examples:
    - Missing file
    - Invalid YAML or JSON
    - Top level is not a mapping
    - Breakpoint values that are neither numbers nor strings
    - System-config entries with unknown or mistyped fields
    """


def make_theme_error(
    message: str,
    file: Path | None = None,
    key_path: str | None = None,
) -> ThemeError:
    """
    Build a ThemeError, attaching a location when one is known.
    """
    if file is None and key_path is None:
        return ThemeError(message)
    return ThemeError(message, ErrorContext(file=file, key_path=key_path))
