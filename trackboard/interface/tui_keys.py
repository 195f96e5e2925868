"""Key tables: raw key names → navigation commands, plus help rows."""

from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple


class Nav(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    TAB = "tab"
    ENTER = "enter"
    JUMP_START = "jump-start"
    JUMP_END = "jump-end"
    START_ACTION = "start-action"
    VERIFY = "verify"
    SKIP = "skip"
    BACK = "back"
    QUIT = "quit"
    HELP = "help"
    REFRESH = "refresh"


# Cyrillic twins are the same physical keys on a Russian layout.
BASE_KEYS: Dict[str, Nav] = {
    "up": Nav.UP,
    "k": Nav.UP,
    "л": Nav.UP,
    "down": Nav.DOWN,
    "j": Nav.DOWN,
    "о": Nav.DOWN,
    "enter": Nav.ENTER,
    "escape": Nav.BACK,
    "q": Nav.QUIT,
    "й": Nav.QUIT,
    "c-c": Nav.QUIT,
    "?": Nav.HELP,
    "r": Nav.REFRESH,
    "к": Nav.REFRESH,
}

LIST_KEYS: Dict[str, Nav] = {
    **BASE_KEYS,
    "pageup": Nav.PAGE_UP,
    "b": Nav.PAGE_UP,
    "pagedown": Nav.PAGE_DOWN,
    "home": Nav.JUMP_START,
    "g": Nav.JUMP_START,
    "end": Nav.JUMP_END,
    "G": Nav.JUMP_END,
}

DETAIL_KEYS: Dict[str, Nav] = {
    **LIST_KEYS,
    "tab": Nav.TAB,
    " ": Nav.VERIFY,
    "s": Nav.SKIP,
    "f": Nav.START_ACTION,
}

DOCUMENT_KEYS: Dict[str, Nav] = {
    **BASE_KEYS,
    "pageup": Nav.PAGE_UP,
    "b": Nav.PAGE_UP,
    "s-up": Nav.PAGE_UP,
    "pagedown": Nav.PAGE_DOWN,
    "s-down": Nav.PAGE_DOWN,
    "home": Nav.JUMP_START,
    "s-left": Nav.JUMP_START,
    "end": Nav.JUMP_END,
    "s-right": Nav.JUMP_END,
}

# (label, i18n key) per command, used by the help footer
HELP_LABELS: Dict[Nav, Tuple[str, str]] = {
    Nav.UP: ("↑/k", "HELP_UP"),
    Nav.DOWN: ("↓/j", "HELP_DOWN"),
    Nav.PAGE_UP: ("pgup/b", "HELP_PAGE_UP"),
    Nav.PAGE_DOWN: ("pgdn", "HELP_PAGE_DOWN"),
    Nav.JUMP_START: ("home", "HELP_JUMP_START"),
    Nav.JUMP_END: ("end", "HELP_JUMP_END"),
    Nav.TAB: ("tab", "HELP_TAB"),
    Nav.ENTER: ("enter", "HELP_ENTER"),
    Nav.START_ACTION: ("f", "HELP_FAIL"),
    Nav.VERIFY: ("space", "HELP_VERIFY"),
    Nav.SKIP: ("s", "HELP_SKIP"),
    Nav.BACK: ("esc", "HELP_BACK"),
    Nav.QUIT: ("q", "HELP_QUIT"),
    Nav.HELP: ("?", "HELP_TOGGLE"),
    Nav.REFRESH: ("r", "HELP_REFRESH"),
}


def resolve(keymap: Dict[str, Nav], key: str) -> Optional[Nav]:
    return keymap.get(key)


def help_rows(commands: Iterable[Nav]) -> List[Tuple[str, str]]:
    """Return ``(key label, i18n key)`` pairs in the given order."""
    return [HELP_LABELS[cmd] for cmd in commands if cmd in HELP_LABELS]


__all__ = [
    "Nav",
    "BASE_KEYS",
    "LIST_KEYS",
    "DETAIL_KEYS",
    "DOCUMENT_KEYS",
    "HELP_LABELS",
    "resolve",
    "help_rows",
]
