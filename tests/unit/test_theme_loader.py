"""Tests for theme, system config and props file loading."""

import json
from pathlib import Path

import pytest

from propstyle.core.errors import ThemeError
from propstyle.core.system import system
from propstyle.core.theme_loader import load_props, load_system_config, load_theme

THEME_YAML = """\
screens:
  sm: 576
  md: 48em
space:
  1: .25rem
  1.5: .375rem
  4: 1rem
colors:
  primary: "#2563eb"
"""


@pytest.fixture
def theme_file(tmp_path: Path) -> Path:
    path = tmp_path / "theme.yaml"
    path.write_text(THEME_YAML, encoding="utf-8")
    return path


class TestLoadTheme:
    """Theme files in YAML and JSON."""

    def test_yaml(self, theme_file: Path):
        theme = load_theme(theme_file)
        assert theme["screens"] == {"sm": 576, "md": "48em"}
        assert theme["colors"]["primary"] == "#2563eb"

    def test_yaml_numeric_token_keys_resolve(self, theme_file: Path):
        parser = system({"m": {"property": "margin", "scale": "space"}})
        theme = load_theme(theme_file)

        assert parser({"theme": theme, "m": 1.5}) == {"margin": ".375rem"}
        assert parser({"theme": theme, "m": "4"}) == {"margin": "1rem"}

    def test_json(self, tmp_path: Path):
        path = tmp_path / "theme.json"
        path.write_text(json.dumps({"screens": {"md": 768}, "space": {"2": ".5rem"}}))

        theme = load_theme(path)
        assert theme["space"] == {"2": ".5rem"}

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ThemeError, match="Cannot read theme file"):
            load_theme(tmp_path / "nope.yaml")

    def test_unsupported_suffix(self, tmp_path: Path):
        path = tmp_path / "theme.toml"
        path.write_text("")
        with pytest.raises(ThemeError, match="Unsupported"):
            load_theme(path)

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "theme.yaml"
        path.write_text("screens: [unclosed")
        with pytest.raises(ThemeError, match="Invalid YAML"):
            load_theme(path)

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "theme.json"
        path.write_text("{not json")
        with pytest.raises(ThemeError, match="Invalid JSON"):
            load_theme(path)

    def test_top_level_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "theme.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ThemeError, match="must be a mapping"):
            load_theme(path)

    def test_invalid_breakpoint(self, tmp_path: Path):
        path = tmp_path / "theme.yaml"
        path.write_text("screens:\n  md: [768]\n")
        with pytest.raises(ThemeError) as exc_info:
            load_theme(path)
        assert exc_info.value.context.key_path == "screens.md"

    def test_screens_must_be_mapping(self, tmp_path: Path):
        path = tmp_path / "theme.yaml"
        path.write_text("screens: 768\n")
        with pytest.raises(ThemeError, match="mapping of breakpoint names"):
            load_theme(path)

    def test_empty_file(self, tmp_path: Path, caplog):
        path = tmp_path / "theme.yaml"
        path.write_text("")
        assert load_theme(path) == {}
        assert "Empty theme file" in caplog.text


class TestLoadSystemConfig:
    """System-config files and their validation."""

    def test_shorthand_entries(self, tmp_path: Path):
        path = tmp_path / "system.yaml"
        path.write_text(
            "margin: true\n"
            "p: padding\n"
            "my:\n"
            "  properties: [marginTop, marginBottom]\n"
            "  scale: space\n"
        )

        config = load_system_config(path)
        parser = system(config)

        assert parser.prop_names == ["margin", "p", "my"]
        assert parser({"theme": {"space": {2: ".5rem"}}, "my": 2}) == {
            "marginTop": ".5rem",
            "marginBottom": ".5rem",
        }

    def test_invalid_entry(self, tmp_path: Path):
        path = tmp_path / "system.yaml"
        path.write_text("my:\n  propertee: margin\n")

        with pytest.raises(ThemeError) as exc_info:
            load_system_config(path)
        assert exc_info.value.context.key_path == "my"

    @pytest.mark.parametrize(
        "entry", ["m:\n  property: 5\n", "m:\n  properties: margin\n", "m: [margin]\n"]
    )
    def test_mistyped_entry(self, tmp_path: Path, entry: str):
        path = tmp_path / "system.yaml"
        path.write_text(entry)

        with pytest.raises(ThemeError) as exc_info:
            load_system_config(path)
        assert exc_info.value.context.key_path == "m"
        assert str(exc_info.value).startswith(f"{path} at m: ")


class TestLoadProps:
    """Props files."""

    def test_json_props(self, tmp_path: Path):
        path = tmp_path / "props.json"
        path.write_text(json.dumps({"m": {"_": 1, "md": 2}, "href": "/"}))
        assert load_props(path) == {"m": {"_": 1, "md": 2}, "href": "/"}
