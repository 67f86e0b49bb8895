"""
Parser factory.

A parser is the composed ``props -> style object`` function. It walks the
props it recognizes, resolves each style function's scale in the theme,
routes scalar values straight through the style function and responsive
objects through breakpoint expansion, and deep-merges the partial results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import Any

from .diagnostics import DEFAULT_SINK, Diagnostic, DiagnosticSink
from .responsive import parse_responsive_object
from .types import CoreThemeKey, StyleObject
from .utils import get, is_object, merge

logger = logging.getLogger(__name__)

StyleFunction = Callable[..., StyleObject]
ParserConfig = dict[str, StyleFunction]


class ValueKind(StrEnum):
    """Shape of a raw prop value."""

    SCALAR = "scalar"
    RESPONSIVE = "responsive"
    INVALID = "invalid"


def classify_value(raw: Any) -> ValueKind:
    """Classify a prop value as scalar, responsive object, or invalid.

    Examples:
        >>> classify_value("1rem"), classify_value(4)
        (<ValueKind.SCALAR: 'scalar'>, <ValueKind.SCALAR: 'scalar'>)

        >>> classify_value({"_": 1, "md": 2})
        <ValueKind.RESPONSIVE: 'responsive'>

        >>> classify_value([1, 2]), classify_value(True)
        (<ValueKind.INVALID: 'invalid'>, <ValueKind.INVALID: 'invalid'>)
    """
    # bool is an int subclass but never a style value
    if isinstance(raw, bool):
        return ValueKind.INVALID
    if isinstance(raw, str | int | float):
        return ValueKind.SCALAR
    if is_object(raw):
        return ValueKind.RESPONSIVE
    return ValueKind.INVALID


class Parser:
    """Callable turning a props mapping into a style object.

    Attributes:
        config: Prop name to style function
        prop_names: Recognized prop names, in config order
        sink: Receiver of diagnostics for malformed props
    """

    def __init__(self, config: Mapping[str, StyleFunction], *, sink: DiagnosticSink | None = None):
        self.config: ParserConfig = dict(config)
        self.prop_names: list[str] = list(self.config)
        self.sink = sink if sink is not None else DEFAULT_SINK

    def __call__(self, props: Mapping[str, Any]) -> StyleObject:
        theme = props.get("theme")
        if not is_object(theme):
            theme = {}

        result: StyleObject = {}
        for key, raw in props.items():
            style_fn = self.config.get(key)
            if style_fn is None:
                continue

            scale = get(getattr(style_fn, "scale", None), theme, {})
            if not is_object(scale):
                scale = {}

            kind = classify_value(raw)
            if kind is ValueKind.SCALAR:
                result = merge(result, style_fn(raw, scale))
            elif kind is ValueKind.RESPONSIVE:
                partial = parse_responsive_object(
                    style_fn,
                    raw,
                    screens=theme.get(CoreThemeKey.SCREENS),
                    scale=scale,
                    sink=self.sink,
                )
                result = merge(result, partial)
            else:
                self.sink.report(Diagnostic.invalid_value_type(raw))

        return result

    def __contains__(self, prop_name: object) -> bool:
        return prop_name in self.config

    def __repr__(self) -> str:
        return f"Parser(prop_names={self.prop_names!r})"


def create_parser(
    config: Mapping[str, StyleFunction],
    *,
    sink: DiagnosticSink | None = None,
) -> Parser:
    """Build a parser from a prop name to style function mapping.

    Args:
        config: Style function per prop name
        sink: Diagnostic sink, defaults to logging

    Returns:
        Parser exposing ``config`` and ``prop_names`` for composition
    """
    parser = Parser(config, sink=sink)
    logger.debug("Created parser for props: %s", ", ".join(parser.prop_names))
    return parser


__all__ = [
    "ValueKind",
    "classify_value",
    "StyleFunction",
    "ParserConfig",
    "Parser",
    "create_parser",
]
