"""Shared pytest fixtures for propstyle tests."""

import pytest

from propstyle.core.diagnostics import RecordingSink


@pytest.fixture
def screens() -> dict:
    """Return a three-step breakpoint scale."""
    return {"sm": 576, "md": 768, "lg": 1024}


@pytest.fixture
def theme(screens: dict) -> dict:
    """Return a small theme with spacing, color and breakpoint scales."""
    return {
        "screens": screens,
        "space": {0: 0, 1: ".25rem", 1.5: ".375rem", 4: "1rem"},
        "colors": {
            "primary": "#2563eb",
            "gray": {200: "#e5e7eb", 800: "#1f2937"},
        },
    }


@pytest.fixture
def sink() -> RecordingSink:
    """Return a sink that records diagnostics."""
    return RecordingSink()
