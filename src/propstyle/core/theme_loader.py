"""
File loading for themes, system configs and props.

Themes are plain mappings of scale name to token scale, with breakpoints
under ``screens``::

    screens:
      sm: 576
      md: 768
      lg: 64em
    space:
      1: .25rem
      1.5: .375rem

System configs map prop names to ``true``, a style property name, or a
style config mapping (``property``/``properties``/``scale``). Transforms
are code and cannot be expressed in files.

YAML (``.yaml``/``.yml``) and JSON (``.json``) are supported.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import ThemeError, make_theme_error
from .system import SystemConfig
from .types import CoreThemeKey

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


# =============================================================================
# Reading
# =============================================================================


def _read_mapping(path: Path, label: str) -> dict[str, Any]:
    """Read a YAML or JSON file whose top level must be a mapping."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES | JSON_SUFFIXES:
        raise make_theme_error(f"Unsupported {label} file type '{suffix}'", file=path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise make_theme_error(f"Cannot read {label} file: {e}", file=path) from e

    try:
        if suffix in JSON_SUFFIXES:
            data = json.loads(content) if content.strip() else None
        else:
            data = yaml.safe_load(content)
    except json.JSONDecodeError as e:
        raise make_theme_error(f"Invalid JSON in {label} file: {e}", file=path) from e
    except yaml.YAMLError as e:
        raise make_theme_error(f"Invalid YAML in {label} file: {e}", file=path) from e

    if data is None:
        logger.warning("Empty %s file at %s", label, path)
        return {}
    if not isinstance(data, Mapping):
        raise make_theme_error(
            f"Top level of {label} file must be a mapping, got {type(data).__name__}",
            file=path,
        )
    return dict(data)


# =============================================================================
# Loading
# =============================================================================


def validate_screens(screens: Any, file: Path | None = None) -> None:
    """Check that a breakpoint scale maps names to numbers or strings.

    Raises:
        ThemeError: If the scale is not a mapping or holds other values
    """
    key = CoreThemeKey.SCREENS.value
    if not isinstance(screens, Mapping):
        raise make_theme_error(
            f"'{key}' must be a mapping of breakpoint names", file=file, key_path=key
        )
    for name, value in screens.items():
        if isinstance(value, bool) or not isinstance(value, int | float | str):
            raise make_theme_error(
                f"Breakpoint must be a number or a CSS length, got {value!r}",
                file=file,
                key_path=f"{key}.{name}",
            )


def load_theme(path: Path) -> dict[str, Any]:
    """Load a theme from a YAML or JSON file.

    Args:
        path: Theme file

    Returns:
        Theme mapping

    Raises:
        ThemeError: If the file is missing, unparsable, or has invalid breakpoints
    """
    theme = _read_mapping(path, "theme")
    if CoreThemeKey.SCREENS.value in theme:
        validate_screens(theme[CoreThemeKey.SCREENS.value], file=Path(path))
    logger.debug("Loaded theme with scales: %s", ", ".join(map(str, theme)))
    return theme


class FileStyleConfig(BaseModel):
    """Style config as written in a system-config file.

    Files are checked strictly so that typos surface at load time, unlike
    in-code configs, which tolerate unknown or mistyped fields.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    property: str | None = None
    properties: list[str] | None = None
    scale: str | None = None


def validate_system_entry(prop: str, entry: Any, file: Path | None = None) -> None:
    """Check one system-config file entry.

    Raises:
        ThemeError: If the entry is not ``true``/``false``/null, a string or
            a style config mapping with known, correctly typed fields
    """
    if entry is None or isinstance(entry, bool | str):
        return
    if not isinstance(entry, Mapping):
        raise make_theme_error(
            f"Expected true, a string or a style config, got {type(entry).__name__}",
            file=file,
            key_path=prop,
        )
    try:
        FileStyleConfig.model_validate(dict(entry))
    except ValidationError as e:
        raise make_theme_error(f"Invalid style config: {e}", file=file, key_path=prop) from e


def load_system_config(path: Path) -> SystemConfig:
    """Load a shorthand system config from a YAML or JSON file.

    Every entry is validated eagerly so that problems surface at load time
    with the file name attached.

    Raises:
        ThemeError: If the file cannot be read or an entry is invalid
    """
    config = _read_mapping(path, "system config")
    for prop, entry in config.items():
        validate_system_entry(str(prop), entry, file=Path(path))
    return config


def load_props(path: Path) -> dict[str, Any]:
    """Load a props mapping from a YAML or JSON file.

    Raises:
        ThemeError: If the file cannot be read or is not a mapping
    """
    return _read_mapping(path, "props")


__all__ = [
    "ThemeError",
    "FileStyleConfig",
    "validate_screens",
    "validate_system_entry",
    "load_theme",
    "load_system_config",
    "load_props",
]
