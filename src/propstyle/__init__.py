"""
propstyle - declarative style props for component styling.

Turns typed style props (``m``, ``color``, ``px`` ...) into style objects,
resolving values against theme token scales and expanding responsive
objects into min-width media queries.
"""

from __future__ import annotations

# Re-export the public engine for convenience
from ._version import get_version
from .attributes import create_sfp, is_prop_valid
from .core.diagnostics import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    LoggingSink,
    RecordingSink,
)
from .core.errors import PropstyleError, ThemeError
from .core.parser import Parser, ValueKind, classify_value, create_parser
from .core.responsive import MOBILE_FIRST_KEY, parse_responsive_object
from .core.style_fn import StyleFn, create_style_fn, default_transform
from .core.system import compose, system
from .core.types import CoreThemeKey, StyleConfig, ThemeKey
from .core.utils import create_media_query, get, is_object, merge

__version__ = get_version()

__all__ = [
    "__version__",
    # Builders
    "system",
    "compose",
    "create_parser",
    "create_style_fn",
    "default_transform",
    "Parser",
    "StyleFn",
    "StyleConfig",
    # Responsive values
    "MOBILE_FIRST_KEY",
    "parse_responsive_object",
    "ValueKind",
    "classify_value",
    # Utilities
    "merge",
    "get",
    "is_object",
    "create_media_query",
    "create_sfp",
    "is_prop_valid",
    # Theme keys
    "CoreThemeKey",
    "ThemeKey",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingSink",
    "RecordingSink",
    # Errors
    "PropstyleError",
    "ThemeError",
]
