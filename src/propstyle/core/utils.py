"""
Mapping utilities used by the parser: deep merge, dotted-path lookup and
media query formatting.

Token scales are frequently written with numeric keys (``{1.5: ".375rem"}``)
while prop values and dotted paths arrive as strings, or the other way
round. Lookups therefore treat ``1.5``, ``"1.5"``, ``4``, ``"4"`` and ``4.0``
as the same key.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .types import Breakpoint


class _Missing:
    """Marker for an absent value, distinct from a stored ``None``."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def is_object(value: Any) -> bool:
    """Return True for mappings; lists, strings and None are not objects."""
    return isinstance(value, Mapping)


def merge(a: Mapping[str, Any], b: Mapping[str, Any]) -> dict[str, Any]:
    """Right-biased deep merge of two mappings.

    Nested values are merged recursively only when both sides are mappings;
    otherwise the value from ``b`` wins. Neither input is mutated.

    Examples:
        >>> merge({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}

        >>> merge({"a": 1}, {"a": {"y": 2}})
        {'a': {'y': 2}}
    """
    result = dict(a)
    for key, value in b.items():
        current = a.get(key, MISSING)
        if is_object(current) and is_object(value):
            result[key] = merge(current, value)
        else:
            result[key] = value
    return result


def format_number(value: int | float) -> str:
    """Render a number the way it reads as an object key (``4.0`` -> ``"4"``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _key_variants(key: Any) -> Iterator[Any]:
    yield key
    if isinstance(key, int | float):
        yield format_number(key)
        if isinstance(key, float) and key.is_integer():
            yield int(key)
        return
    if isinstance(key, str):
        try:
            number = float(key)
        except ValueError:
            return
        # Only canonical spellings: "4" and "1.5", not "04", " 4" or "1e0"
        if format_number(number) != key:
            return
        if number.is_integer():
            yield int(number)
        yield number


def lookup(mapping: Mapping[Any, Any], key: Any) -> Any:
    """Read ``key`` from ``mapping``, returning MISSING when absent.

    Booleans are never looked up, since ``True`` would hash equal to ``1``.
    """
    if isinstance(key, bool):
        return MISSING
    for variant in _key_variants(key):
        try:
            if variant in mapping:
                return mapping[variant]
        except TypeError:
            # Unhashable variant
            continue
    return MISSING


def get(
    path: str | int | float | None,
    obj: Mapping[Any, Any] | None = None,
    fallback: Any = None,
) -> Any:
    """Resolve a dotted path inside a mapping.

    ``fallback`` is returned when ``path`` is None or when nothing is found.
    A stored ``None`` (or ``False``) is a result, not a miss. Traversal stops
    at the first non-mapping value and returns whatever was reached.

    Args:
        path: Dotted string path or a single numeric key
        obj: Mapping to search
        fallback: Value returned for a missing result

    Examples:
        >>> get("colors.gray.200", {"colors": {"gray": {200: "#eee"}}})
        '#eee'

        >>> get("space.4", {"space": {4: None}}, "F") is None
        True

        >>> get("a.b", {}, "F")
        'F'
    """
    if path is None:
        return fallback
    if obj is None:
        obj = {}

    # Token keys may contain dots themselves ("1.5")
    if isinstance(path, str) and "." in path and is_object(obj):
        direct = lookup(obj, path)
        if direct is not MISSING:
            return direct

    segments: list[Any] = path.split(".") if isinstance(path, str) else [path]
    result: Any = obj
    for segment in segments:
        if not is_object(result):
            break
        result = lookup(result, segment)

    return fallback if result is MISSING else result


def create_media_query(breakpoint: Breakpoint) -> str:
    """Build the min-width media query for a breakpoint.

    Examples:
        >>> create_media_query(576)
        '@media screen and (min-width: 576px)'

        >>> create_media_query("40em")
        '@media screen and (min-width: 40em)'
    """
    if isinstance(breakpoint, int | float) and not isinstance(breakpoint, bool):
        width = f"{format_number(breakpoint)}px"
    else:
        width = str(breakpoint)
    return f"@media screen and (min-width: {width})"


__all__ = [
    "MISSING",
    "is_object",
    "merge",
    "format_number",
    "lookup",
    "get",
    "create_media_query",
]
