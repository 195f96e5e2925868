"""Screen state shared by every reducer: phase, terminal size, help, spinner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from trackboard.interface.tui_keys import Nav
from trackboard.interface.tui_messages import (
    Command,
    GoBack,
    InitMsg,
    Load,
    LoadedMsg,
    LoadFailedMsg,
    Message,
    Quit,
    ResizeMsg,
    Retry,
    Route,
    ScreenPhase,
    TickMsg,
)
from util.responsive import ScreenBudget, detail_content_width, help_height

DEFAULT_WIDTH = 80
DEFAULT_TERM_HEIGHT = 24


@dataclass
class ScreenState:
    route: Route
    phase: ScreenPhase = ScreenPhase.LOADING
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_TERM_HEIGHT
    full_help: bool = False
    spinner: int = 0
    error: str = ""
    notice: str = ""
    reloading: bool = False


def content_width(state: ScreenState) -> int:
    return detail_content_width(state.width)


def viewport_rows(state: ScreenState, budget: ScreenBudget) -> int:
    """Rows left for the scrollable region after header, footer and help."""
    return budget.viewport_height(state.height - help_height(state.full_help))


def fail(state: ScreenState, error: str) -> None:
    state.phase = ScreenPhase.ERROR
    state.error = error or "unknown error"
    state.reloading = False


def handle_lifecycle(
    state: ScreenState,
    msg: Message,
    nav: Optional[Nav],
    relayout: Callable[[], None],
) -> Optional[List[Command]]:
    """
    Handle what every screen does the same way.

    Returns the commands to emit when the message was consumed here, ``None``
    when the screen reducer should handle it. ``relayout`` re-derives viewport
    heights after a resize or a help toggle.
    """
    if isinstance(msg, InitMsg):
        state.phase = ScreenPhase.LOADING
        return [Load(state.route)]
    if isinstance(msg, ResizeMsg):
        state.width = max(1, msg.width)
        state.height = max(1, msg.height)
        relayout()
        return []
    if isinstance(msg, TickMsg):
        if state.phase is ScreenPhase.LOADING:
            state.spinner += 1
        return []
    if isinstance(msg, LoadFailedMsg):
        fail(state, msg.error)
        return []
    if isinstance(msg, LoadedMsg) and state.phase is ScreenPhase.ERROR:
        # only a retry leaves the error screen
        return []
    if nav is None:
        return None
    if state.phase is ScreenPhase.ACTION_INPUT:
        return None
    if nav is Nav.QUIT:
        return [Quit()]
    if nav is Nav.BACK:
        return [GoBack()]
    if state.phase is ScreenPhase.LOADING:
        return []
    if nav is Nav.HELP:
        state.full_help = not state.full_help
        relayout()
        return []
    if state.phase is ScreenPhase.ERROR:
        return [Retry()] if nav is Nav.REFRESH else []
    if nav is Nav.REFRESH:
        state.reloading = True
        return [Load(state.route)]
    return None


__all__ = [
    "ScreenState",
    "content_width",
    "viewport_rows",
    "fail",
    "handle_lifecycle",
]
