"""
System and compose builders.

``system`` turns a shorthand config into a parser::

    system({"margin": True, "p": "padding", "my": {"properties": [...], "scale": "space"}})

Each entry is one of three shapes:

- ``True``: the prop name is both the style property and the scale name
- a string: that string is both the style property and the scale name
- a full style config (StyleConfig or mapping of its fields)

``compose`` merges several parsers (or shorthand configs) into one parser;
later arguments win for props they share.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .diagnostics import DiagnosticSink
from .parser import Parser, ParserConfig, create_parser
from .style_fn import create_style_fn
from .types import StyleConfig

logger = logging.getLogger(__name__)

SystemEntry = bool | str | StyleConfig | Mapping[str, Any] | None
SystemConfig = Mapping[str, SystemEntry]


@dataclass(frozen=True)
class Flag:
    """``True`` entry: property and scale named after the prop."""

    prop: str

    def to_style_config(self) -> StyleConfig:
        return StyleConfig(property=self.prop, scale=self.prop)


@dataclass(frozen=True)
class Alias:
    """String entry: property and scale named after the alias."""

    name: str

    def to_style_config(self) -> StyleConfig:
        return StyleConfig(property=self.name, scale=self.name)


@dataclass(frozen=True)
class Full:
    """Complete style config, passed through unchanged."""

    config: StyleConfig

    def to_style_config(self) -> StyleConfig:
        return self.config


def classify_system_entry(prop: str, entry: SystemEntry) -> Flag | Alias | Full:
    """Decode a shorthand system entry into its tagged form.

    ``False`` and ``None`` decode to an empty style config, whose style
    function writes nothing. Entries of any other unsupported type are
    logged and decode the same way.
    """
    if entry is True:
        return Flag(prop)
    if isinstance(entry, str):
        return Alias(entry)
    if isinstance(entry, StyleConfig):
        return Full(entry)
    if entry is None or entry is False:
        return Full(StyleConfig())
    if isinstance(entry, Mapping):
        return Full(StyleConfig.model_validate(_string_keys(entry)))
    logger.warning(
        "Ignoring system entry for prop '%s': expected true, a string or a style config, "
        "got %s",
        prop,
        type(entry).__name__,
    )
    return Full(StyleConfig())


def _string_keys(entry: Mapping[Any, Any]) -> dict[str, Any]:
    return {key: value for key, value in entry.items() if isinstance(key, str)}


def normalize_system_entry(prop: str, entry: SystemEntry) -> StyleConfig:
    """Expand a shorthand system entry into a full StyleConfig."""
    return classify_system_entry(prop, entry).to_style_config()


def system(config: SystemConfig, *, sink: DiagnosticSink | None = None) -> Parser:
    """Build a parser from a shorthand system config.

    Examples:
        >>> system({"margin": True})({"margin": "1rem"})
        {'margin': '1rem'}
    """
    parser_config: ParserConfig = {}
    for prop, entry in config.items():
        parser_config[prop] = create_style_fn(normalize_system_entry(prop, entry))
    return create_parser(parser_config, sink=sink)


def compose(*args: Parser | SystemConfig, sink: DiagnosticSink | None = None) -> Parser:
    """Combine parsers and shorthand configs into a single parser.

    Arguments that are neither parsers nor mappings are logged and skipped.

    Args:
        *args: Parsers (preferred) or shorthand system configs
        sink: Diagnostic sink for the combined parser. Defaults to the sink
            of the last parser argument, or logging when there is none.

    Returns:
        Parser whose config is the union of all arguments' configs

    Examples:
        >>> parser = compose(system({"margin": True}), {"color": True})
        >>> parser({"margin": "1rem", "color": "red"})
        {'margin': '1rem', 'color': 'red'}
    """
    config: ParserConfig = {}
    inherited: DiagnosticSink | None = None
    for arg in args:
        if isinstance(arg, Parser):
            config.update(arg.config)
            inherited = arg.sink
        elif isinstance(arg, Mapping):
            config.update(system(arg).config)
        else:
            logger.warning(
                "compose() skipped an argument of type %s; expected a parser or a system config",
                type(arg).__name__,
            )

    logger.debug("Composed %d argument(s) into %d prop(s)", len(args), len(config))
    return create_parser(config, sink=sink if sink is not None else inherited)


__all__ = [
    "SystemEntry",
    "SystemConfig",
    "Flag",
    "Alias",
    "Full",
    "classify_system_entry",
    "normalize_system_entry",
    "system",
    "compose",
]
