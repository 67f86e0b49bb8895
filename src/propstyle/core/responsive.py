"""
Responsive object expansion.

A responsive object maps breakpoint names from ``theme["screens"]`` to prop
values, plus the mobile-first key ``_`` for the unconditional base style::

    {"_": "1rem", "md": "1.5rem"}
    -> {"margin": "1rem", "@media screen and (min-width: 768px)": {"margin": "1.5rem"}}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .diagnostics import DEFAULT_SINK, Diagnostic, DiagnosticSink
from .types import Breakpoint, StyleObject, ThemeScale
from .utils import create_media_query, is_object

MOBILE_FIRST_KEY = "_"


def _is_skipped(value: Any) -> bool:
    return value is None or value is False


def parse_responsive_object(
    style_fn: Callable[..., StyleObject],
    raw: Mapping[str, Any],
    *,
    screens: Mapping[str, Breakpoint] | None = None,
    scale: ThemeScale | None = None,
    sink: DiagnosticSink | None = None,
) -> StyleObject:
    """Expand a responsive object through a style function.

    Entries holding ``None`` or ``False`` are skipped. The mobile-first entry
    is merged into the top level; every other key must name a breakpoint in
    ``screens`` and produces an entry keyed by its media query. Media query
    entries are assigned, so two breakpoints with the same width keep the
    later one. Unknown breakpoint names are reported and skipped.

    Args:
        style_fn: Style function for a single value
        raw: The responsive object
        screens: Breakpoint scale (``theme["screens"]``)
        scale: Token scale passed through to ``style_fn``
        sink: Diagnostic sink for unknown breakpoint names

    Returns:
        Style object with media-query keyed entries
    """
    if screens is None or not is_object(screens):
        screens = {}
    if scale is None:
        scale = {}
    if sink is None:
        sink = DEFAULT_SINK

    result: StyleObject = {}
    for key, value in raw.items():
        if _is_skipped(value):
            continue

        if key == MOBILE_FIRST_KEY:
            result.update(style_fn(value, scale))
            continue

        breakpoint = screens.get(key)
        if breakpoint is None:
            sink.report(Diagnostic.invalid_object_key(key))
            continue
        result[create_media_query(breakpoint)] = style_fn(value, scale)

    return result


__all__ = ["MOBILE_FIRST_KEY", "parse_responsive_object"]
