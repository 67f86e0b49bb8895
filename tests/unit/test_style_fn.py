"""Tests for the style function factory."""

import logging

import pytest

from propstyle.core.style_fn import StyleFn, create_style_fn, default_transform
from propstyle.core.types import StyleConfig


class TestCreateStyleFn:
    """Style functions built from style configs."""

    def test_returns_style_fn(self):
        style_fn = create_style_fn(property="margin")

        assert isinstance(style_fn, StyleFn)
        assert callable(style_fn)
        assert style_fn("1rem") == {"margin": "1rem"}

    def test_many_properties(self):
        style_fn = create_style_fn(
            properties=["marginTop", "marginRight", "marginBottom", "marginLeft"]
        )
        assert style_fn("1rem") == {
            "marginTop": "1rem",
            "marginRight": "1rem",
            "marginBottom": "1rem",
            "marginLeft": "1rem",
        }

    def test_properties_win_over_property(self):
        style_fn = create_style_fn(property="margin", properties=["marginTop"])
        assert style_fn("1rem") == {"marginTop": "1rem"}

    def test_empty_properties_write_nothing(self):
        assert create_style_fn(property="margin", properties=[])("1rem") == {}

    def test_no_target_writes_nothing(self):
        assert create_style_fn()("1rem") == {}

    def test_scale_lookup(self):
        style_fn = create_style_fn(property="margin")
        assert style_fn(1.5, {1.5: ".375rem"}) == {"margin": ".375rem"}

    def test_string_value_resolves_dotted_token(self):
        style_fn = create_style_fn(property="margin")
        assert style_fn("1.5", {"1.5": ".375rem"}) == {"margin": ".375rem"}

    def test_value_is_fallback(self):
        style_fn = create_style_fn(property="margin")
        assert style_fn(1.5, {}) == {"margin": 1.5}

    def test_non_canonical_number_string_is_not_a_token(self):
        style_fn = create_style_fn(property="margin")
        assert style_fn("04", {4: "1rem"}) == {"margin": "04"}

    def test_null_scale_entry_is_kept(self):
        style_fn = create_style_fn(property="margin")
        assert style_fn(1.5, {1.5: None}) == {"margin": None}

    def test_nested_scale_path(self):
        style_fn = create_style_fn(property="color")
        assert style_fn("gray.200", {"gray": {200: "#e5e7eb"}}) == {"color": "#e5e7eb"}

    def test_custom_transform(self):
        style_fn = create_style_fn(
            property="margin",
            transform=lambda raw, scale: f"{raw}px" if isinstance(raw, int | float) else raw,
        )
        assert style_fn(1.5, {}) == {"margin": "1.5px"}
        assert style_fn("auto", {}) == {"margin": "auto"}

    def test_scale_tag(self):
        assert create_style_fn(property="margin", scale="space").scale == "space"
        assert create_style_fn(property="margin").scale is None

    def test_from_style_config(self):
        config = StyleConfig(property="padding", scale="space")
        style_fn = create_style_fn(config)
        assert style_fn.scale == "space"
        assert style_fn(4, {4: "1rem"}) == {"padding": "1rem"}

    def test_keywords_override_config(self):
        config = StyleConfig(property="padding", scale="space")
        style_fn = create_style_fn(config, property="paddingTop")
        assert style_fn("1rem") == {"paddingTop": "1rem"}
        assert style_fn.scale == "space"

    def test_from_mapping(self):
        style_fn = create_style_fn({"properties": ["top", "bottom"], "scale": "space"})
        assert style_fn(0, {0: 0}) == {"top": 0, "bottom": 0}

    def test_unknown_field_ignored(self):
        style_fn = create_style_fn({"property": "margin", "scal": "space"})
        assert style_fn.scale is None
        assert style_fn(4, {4: "1rem"}) == {"margin": "1rem"}

    def test_misspelled_target_writes_nothing(self):
        assert create_style_fn({"propertee": "margin"})("1rem") == {}

    @pytest.mark.parametrize(("target", "key"), [(5, "5"), (1.5, "1.5"), (2.0, "2")])
    def test_non_string_property_becomes_key(self, target, key):
        assert create_style_fn(property=target)("1rem") == {key: "1rem"}

    def test_string_properties_is_single_target(self):
        assert create_style_fn({"properties": "margin"})("1rem") == {"margin": "1rem"}

    def test_unusable_properties_fall_back_to_property(self):
        style_fn = create_style_fn({"property": "margin", "properties": 3})
        assert style_fn("1rem") == {"margin": "1rem"}

    def test_non_callable_transform_uses_scale_lookup(self):
        style_fn = create_style_fn(property="margin", transform="px")
        assert style_fn(4, {4: "1rem"}) == {"margin": "1rem"}

    def test_non_mapping_config_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger="propstyle"):
            assert create_style_fn(12)("1rem") == {}
        assert "Ignoring style config of type int" in caplog.text


class TestDefaultTransform:
    """Scale lookup with the raw value as fallback."""

    def test_without_scale(self):
        assert default_transform("1rem") == "1rem"

    def test_with_scale(self):
        assert default_transform(4, {4: "1rem"}) == "1rem"

    def test_bool_is_not_a_token(self):
        assert default_transform(True, {1: ".25rem"}) is True
