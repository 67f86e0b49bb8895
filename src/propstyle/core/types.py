"""
Core types for style configs and themes.

Themes and token scales stay plain mappings; only the per-prop style config
is a model, since it is the one piece of user input with a fixed shape.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Scalar prop value (bool is deliberately excluded, see classify_value)
Scalar = str | int | float

# Breakpoint value in a theme's ``screens`` scale
Breakpoint = int | float | str

ThemeScale = Mapping[Any, Any]
Theme = Mapping[str, Any]
StyleObject = dict[str, Any]

Transform = Callable[[Any, ThemeScale], Any]


class CoreThemeKey(StrEnum):
    """Theme keys the engine itself reads."""

    SCREENS = "screens"


class ThemeKey(StrEnum):
    """Conventional token scale names."""

    BORDERS = "borders"
    BORDER_WIDTHS = "borderWidths"
    BORDER_STYLES = "borderStyles"
    COLORS = "colors"
    RADII = "radii"
    SPACE = "space"
    SIZES = "sizes"
    Z_INDICES = "zIndices"
    SHADOWS = "shadows"
    FONTS = "fonts"
    FONT_SIZES = "fontSizes"
    FONT_WEIGHTS = "fontWeights"
    LINE_HEIGHTS = "lineHeights"
    LETTER_SPACINGS = "letterSpacings"


def _as_name(value: Any) -> str:
    """Render a property or scale name the way it reads as an object key."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return value if isinstance(value, str) else str(value)


class StyleConfig(BaseModel):
    """Definition of a single style function.

    ``properties`` takes precedence over ``property`` whenever it is set.

    Building a style config never fails: unknown fields are ignored, names
    that are not strings are written as their string form, and a transform
    that is not callable falls back to the default scale lookup. A broken
    config shows up as missing or oddly named keys in the style object.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    property: str | None = Field(default=None, description="Single target style property")
    properties: list[str | None] | None = Field(
        default=None, description="Several target style properties sharing one value"
    )
    scale: str | None = Field(default=None, description="Theme scale name (dotted path allowed)")
    transform: Transform | None = Field(
        default=None, description="Value transform, defaults to scale lookup with fallback"
    )

    @field_validator("property", "scale", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str | None:
        return None if value is None else _as_name(value)

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_names(cls, value: Any) -> list[str | None] | None:
        if value is None:
            return None
        if isinstance(value, str):
            return [value]
        if isinstance(value, Iterable) and not isinstance(value, Mapping):
            return [None if item is None else _as_name(item) for item in value]
        return None

    @field_validator("transform", mode="before")
    @classmethod
    def _callable_transform(cls, value: Any) -> Any:
        return value if callable(value) else None


__all__ = [
    "Scalar",
    "Breakpoint",
    "ThemeScale",
    "Theme",
    "StyleObject",
    "Transform",
    "CoreThemeKey",
    "ThemeKey",
    "StyleConfig",
]
