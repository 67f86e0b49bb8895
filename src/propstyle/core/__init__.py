"""Core propstyle engine: utilities, style functions, parsers, system/compose builders."""

from .diagnostics import Diagnostic, DiagnosticKind, LoggingSink, RecordingSink
from .errors import ErrorContext, PropstyleError, ThemeError
from .parser import Parser, ValueKind, classify_value, create_parser
from .responsive import MOBILE_FIRST_KEY, parse_responsive_object
from .style_fn import StyleFn, create_style_fn, default_transform
from .system import compose, normalize_system_entry, system
from .theme_loader import load_props, load_system_config, load_theme
from .types import CoreThemeKey, StyleConfig, ThemeKey
from .utils import create_media_query, get, is_object, merge

__all__ = [
    "PropstyleError",
    "ThemeError",
    "ErrorContext",
    "Diagnostic",
    "DiagnosticKind",
    "LoggingSink",
    "RecordingSink",
    "Parser",
    "ValueKind",
    "classify_value",
    "create_parser",
    "MOBILE_FIRST_KEY",
    "parse_responsive_object",
    "StyleFn",
    "create_style_fn",
    "default_transform",
    "system",
    "compose",
    "normalize_system_entry",
    "load_theme",
    "load_system_config",
    "load_props",
    "CoreThemeKey",
    "ThemeKey",
    "StyleConfig",
    "create_media_query",
    "get",
    "is_object",
    "merge",
]
