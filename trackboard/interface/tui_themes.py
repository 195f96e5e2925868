"""TUI themes and styling."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

from prompt_toolkit.styles import Style


_PALETTES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "status.ok": "#9ad974 bold",
        "status.warn": "#e5c07b bold",
        "status.fail": "#e06c75 bold",
        "status.review": "#61afef bold",
        "status.unknown": "#7a7f85",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "text.cont": "#8d95a0",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "header": "#ffb347 bold",
        "tab": "#97a0a9",
        "tab.active": "#ffb347 bold underline",
        "border": "#4b525a",
        "indicator": "#6d717a italic",
        "input": "bg:#2c313a #d7dfe6",
        "error": "#ff5156 bold",
        "help.key": "#e5c07b bold",
        "help.text": "#97a0a9",
        "spinner": "#61afef bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "status.ok": "#b8f171 bold",
        "status.warn": "#f0c674 bold",
        "status.fail": "#ff6b6b bold",
        "status.review": "#82c8ff bold",
        "status.unknown": "#8a9097",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "text.cont": "#939aa4",
        "selected": "bg:#3d4047 #e8eaec bold",
        "header": "#ffb347 bold",
        "tab": "#a7b0ba",
        "tab.active": "#ffb347 bold underline",
        "border": "#5a6169",
        "indicator": "#6f757d italic",
        "input": "bg:#30343b #e8eaec",
        "error": "#ff6b6b bold",
        "help.key": "#f0c674 bold",
        "help.text": "#a7b0ba",
        "spinner": "#82c8ff bold",
    },
}

_ICONS: Dict[str, str] = {
    "selected": "▸",
    "expanded": "▾",
    "collapsed": "▸",
    "leaf": "•",
    "ac.verified": "✓",
    "ac.failed": "✗",
    "ac.skipped": "⊘",
    "ac.pending": "◷",
    "ac.todo": "○",
}

SPINNER_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")

DEFAULT_THEME = "dark-olive"


@dataclass(frozen=True)
class Theme:
    """Read-only palette and icon set handed to renderers."""
    name: str
    palette: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    icons: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def icon(self, key: str, default: str = " ") -> str:
        return self.icons.get(key, default)

    def style(self) -> Style:
        return Style.from_dict(dict(self.palette))


def _make_theme(name: str) -> Theme:
    return Theme(
        name=name,
        palette=MappingProxyType(dict(_PALETTES[name])),
        icons=MappingProxyType(dict(_ICONS)),
    )


THEMES: Mapping[str, Theme] = MappingProxyType({name: _make_theme(name) for name in _PALETTES})


def load_theme(name: str) -> Theme:
    """Return the named theme, falling back to the default one."""
    return THEMES.get(name) or THEMES[DEFAULT_THEME]


def get_theme_palette(name: str) -> Dict[str, str]:
    """Mutable copy of a theme palette."""
    return dict(load_theme(name).palette)


def build_style(name: str) -> Style:
    """Build Style object from theme name."""
    return load_theme(name).style()


__all__ = [
    "Theme",
    "THEMES",
    "DEFAULT_THEME",
    "SPINNER_FRAMES",
    "load_theme",
    "get_theme_palette",
    "build_style",
]
