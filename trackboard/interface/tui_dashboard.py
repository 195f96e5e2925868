"""Dashboard screen: one flat list of iterations, tracks and backlog tasks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from trackboard.interface.tui_keys import LIST_KEYS, Nav, resolve
from trackboard.interface.tui_messages import (
    Command,
    KeyMsg,
    LoadedMsg,
    Message,
    Navigate,
    Route,
    ScreenPhase,
)
from trackboard.interface.tui_navigation import jump_linear, move_linear, page_linear
from trackboard.interface.tui_state import ScreenState, handle_lifecycle, viewport_rows
from trackboard.interface.tui_viewport import LinearViewport
from trackboard.viewmodels import DashboardView
from util.responsive import ScreenBudget

# title, vision, success criteria, blank | scroll indicator, notice
BUDGET = ScreenBudget(header=4, footer=2)

HELP_COMMANDS = (
    Nav.UP, Nav.DOWN, Nav.PAGE_UP, Nav.PAGE_DOWN, Nav.JUMP_START, Nav.JUMP_END,
    Nav.ENTER, Nav.REFRESH, Nav.HELP, Nav.QUIT,
)


@dataclass
class DashboardState(ScreenState):
    view: Optional[DashboardView] = None
    selected: int = 0
    viewport: LinearViewport = field(default_factory=LinearViewport)

    @property
    def total(self) -> int:
        return len(self.view.rows) if self.view else 0


def new_dashboard(route: Route, width: int, height: int) -> DashboardState:
    state = DashboardState(route=route, width=width, height=height)
    relayout(state)
    return state


def relayout(state: DashboardState) -> None:
    state.viewport.set_height(viewport_rows(state, BUDGET))
    state.viewport.ensure_visible(state.total, state.selected)


def _apply_loaded(state: DashboardState, view: DashboardView) -> None:
    # a refresh keeps the cursor on the same row when it still exists
    keep = None
    if state.reloading and state.view and 0 <= state.selected < state.total:
        row = state.view.rows[state.selected]
        keep = (row.kind, row.ident)
    state.view = view
    state.selected = 0
    if keep:
        for idx, row in enumerate(view.rows):
            if (row.kind, row.ident) == keep:
                state.selected = idx
                break
    state.phase = ScreenPhase.READY
    state.reloading = False
    relayout(state)


def reduce_dashboard(state: DashboardState, msg: Message) -> Tuple[DashboardState, List[Command]]:
    nav = resolve(LIST_KEYS, msg.key) if isinstance(msg, KeyMsg) else None
    handled = handle_lifecycle(state, msg, nav, lambda: relayout(state))
    if handled is not None:
        return state, handled
    if isinstance(msg, LoadedMsg):
        _apply_loaded(state, msg.payload)
        return state, []
    if state.phase is not ScreenPhase.READY or nav is None:
        return state, []

    total = state.total
    if nav is Nav.UP:
        state.selected = move_linear(state.viewport, total, state.selected, -1)
    elif nav is Nav.DOWN:
        state.selected = move_linear(state.viewport, total, state.selected, 1)
    elif nav in (Nav.PAGE_UP, Nav.PAGE_DOWN):
        state.selected = page_linear(state.viewport, total, state.selected, nav is Nav.PAGE_DOWN)
    elif nav in (Nav.JUMP_START, Nav.JUMP_END):
        state.selected = jump_linear(state.viewport, total, nav is Nav.JUMP_END)
    elif nav is Nav.ENTER and total:
        row = state.view.rows[state.selected]
        return state, [Navigate(Route(row.kind, row.ident))]
    return state, []


__all__ = ["DashboardState", "BUDGET", "HELP_COMMANDS", "new_dashboard", "reduce_dashboard"]
