#!/usr/bin/env python3
"""Unit tests for tui_themes module."""

import pytest
from prompt_toolkit.styles import Style

from trackboard.interface.tui_themes import (
    DEFAULT_THEME,
    SPINNER_FRAMES,
    THEMES,
    Theme,
    build_style,
    get_theme_palette,
    load_theme,
)

REQUIRED_KEYS = {
    "",
    "status.ok",
    "status.warn",
    "status.fail",
    "status.review",
    "status.unknown",
    "text",
    "text.dim",
    "text.cont",
    "selected",
    "header",
    "tab",
    "tab.active",
    "border",
    "indicator",
    "input",
    "error",
    "spinner",
}


class TestThemes:
    """Tests for THEMES constant."""

    def test_themes_has_default_theme(self):
        assert DEFAULT_THEME in THEMES

    def test_themes_has_expected_themes(self):
        assert "dark-olive" in THEMES
        assert "dark-contrast" in THEMES

    def test_theme_structure(self):
        """Every palette defines the classes renderers emit."""
        for name, theme in THEMES.items():
            missing = REQUIRED_KEYS - set(theme.palette.keys())
            assert not missing, f"Theme {name} missing keys: {missing}"

    def test_themes_are_read_only(self):
        theme = THEMES[DEFAULT_THEME]
        with pytest.raises(TypeError):
            theme.palette["text"] = "#000000"
        with pytest.raises(TypeError):
            THEMES["new"] = theme
        with pytest.raises(AttributeError):
            theme.name = "other"


class TestLoadTheme:
    def test_known_theme(self):
        assert load_theme("dark-contrast").name == "dark-contrast"

    def test_unknown_theme_falls_back(self):
        assert load_theme("non-existent") is THEMES[DEFAULT_THEME]

    def test_icons(self):
        theme = load_theme(DEFAULT_THEME)
        assert theme.icon("ac.verified") == "✓"
        assert theme.icon("missing", "?") == "?"

    def test_empty_theme_uses_defaults(self):
        theme = Theme(name="bare")
        assert theme.icon("expanded") == " "
        assert isinstance(theme.style(), Style)


class TestGetThemePalette:
    """Tests for get_theme_palette function."""

    def test_get_theme_palette_existing_theme(self):
        palette = get_theme_palette("dark-olive")
        assert isinstance(palette, dict)
        assert palette["selected"].startswith("bg:")

    def test_get_theme_palette_returns_copy(self):
        palette = get_theme_palette(DEFAULT_THEME)
        palette["text"] = "#000000"
        assert THEMES[DEFAULT_THEME].palette["text"] != "#000000"

    def test_unknown_theme_palette_matches_default(self):
        assert get_theme_palette("non-existent") == get_theme_palette(DEFAULT_THEME)


class TestBuildStyle:
    def test_build_style_returns_style(self):
        assert isinstance(build_style("dark-olive"), Style)

    def test_build_style_unknown_theme(self):
        assert isinstance(build_style("non-existent"), Style)


def test_spinner_frames_not_empty():
    assert len(SPINNER_FRAMES) > 1
