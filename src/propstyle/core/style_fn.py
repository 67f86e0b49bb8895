"""
Style function factory.

A style function maps one raw prop value to a style object covering one or
more style properties, e.g. ``my -> {marginTop, marginBottom}``. It carries
the name of the theme scale it resolves against in its ``scale`` attribute;
the parser looks that scale up and passes it in on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .types import StyleConfig, StyleObject, ThemeScale, Transform
from .utils import get

logger = logging.getLogger(__name__)


def default_transform(raw: Any, scale: ThemeScale | None = None) -> Any:
    """Resolve ``raw`` through the scale, falling back to ``raw`` itself.

    A scale entry holding ``None`` resolves to ``None``; only a missing entry
    falls back.
    """
    return get(raw, scale or {}, raw)


class StyleFn:
    """Callable ``(value, theme_scale) -> style object``."""

    __slots__ = ("targets", "transform", "scale")

    def __init__(
        self,
        targets: tuple[str | None, ...],
        transform: Transform = default_transform,
        scale: str | None = None,
    ):
        self.targets = targets
        self.transform = transform
        self.scale = scale

    def __call__(self, value: Any, theme_scale: ThemeScale | None = None) -> StyleObject:
        if theme_scale is None:
            theme_scale = {}
        result: StyleObject = {}
        for target in self.targets:
            if target is not None:
                result[target] = self.transform(value, theme_scale)
        return result

    def __repr__(self) -> str:
        targets = [t for t in self.targets if t is not None]
        return f"StyleFn(targets={targets!r}, scale={self.scale!r})"


def _coerce_config(
    config: StyleConfig | Mapping[str, Any] | None,
    fields: dict[str, Any],
) -> StyleConfig:
    if isinstance(config, StyleConfig):
        if not fields:
            return config
        data = config.model_dump(exclude_unset=True)
    elif isinstance(config, Mapping):
        data = {key: value for key, value in config.items() if isinstance(key, str)}
    else:
        if config is not None:
            logger.warning("Ignoring style config of type %s", type(config).__name__)
        data = {}
    data.update(fields)
    return StyleConfig.model_validate(data)


def create_style_fn(
    config: StyleConfig | Mapping[str, Any] | None = None,
    **fields: Any,
) -> StyleFn:
    """Build a style function from a style config.

    Args:
        config: A StyleConfig, or a mapping of its fields
        **fields: StyleConfig fields given as keywords; they override ``config``

    Returns:
        StyleFn writing the transformed value to every target property

    Unknown fields are ignored and a non-string ``property`` is written as
    its string form, so ``create_style_fn(property=5)("1rem")`` gives
    ``{"5": "1rem"}``.

    Examples:
        >>> create_style_fn(property="margin")("1.5", {"1.5": ".375rem"})
        {'margin': '.375rem'}

        >>> create_style_fn(properties=["marginTop", "marginBottom"])("1rem")
        {'marginTop': '1rem', 'marginBottom': '1rem'}
    """
    style_config = _coerce_config(config, fields)

    # An explicit properties list wins, even when empty
    if style_config.properties is not None:
        targets: tuple[str | None, ...] = tuple(style_config.properties)
    else:
        targets = (style_config.property,)

    return StyleFn(
        targets,
        transform=style_config.transform or default_transform,
        scale=style_config.scale,
    )


__all__ = ["default_transform", "StyleFn", "create_style_fn"]
