"""
Detail screens for an iteration, a track or a task.

Each detail screen shows a header and one or more sub-lists behind tabs. Task
and document lists are flat; acceptance criteria expand to several lines and
scroll by line. Only one viewport exists at a time: switching tabs builds the
target viewport from scratch.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple, Union

from trackboard.interface.i18n import translate
from trackboard.interface.tui_action_input import ActionInput, InputResult
from trackboard.interface.tui_keys import DETAIL_KEYS, Nav, resolve
from trackboard.interface.tui_lines import criterion_line_counts
from trackboard.interface.tui_messages import (
    ActionDoneMsg,
    Command,
    KeyMsg,
    Load,
    LoadedMsg,
    LoadFailedMsg,
    Message,
    Navigate,
    Route,
    RunAction,
    ScreenPhase,
)
from trackboard.interface.tui_navigation import (
    jump_linear,
    jump_multiline,
    move_linear,
    move_multiline,
    page_linear,
    page_multiline,
)
from trackboard.interface.tui_state import ScreenState, content_width, handle_lifecycle, viewport_rows
from trackboard.interface.tui_viewport import LinearViewport, MultilineViewport
from trackboard.viewmodels import DetailView
from util.responsive import ScreenBudget

TAB_TASKS = "tasks"
TAB_CRITERIA = "criteria"
TAB_DOCUMENTS = "documents"

TABS_BY_KIND = {
    "iteration": (TAB_TASKS, TAB_CRITERIA),
    "track": (TAB_TASKS, TAB_DOCUMENTS),
    "task": (TAB_CRITERIA,),
}

SKIP_NOTE = "Skipped via TUI"

# title, status/progress, meta, tab bar | scroll indicator, notice
BUDGET = ScreenBudget(header=4, footer=2)

HELP_COMMANDS = (
    Nav.UP, Nav.DOWN, Nav.PAGE_UP, Nav.PAGE_DOWN, Nav.JUMP_START, Nav.JUMP_END,
    Nav.TAB, Nav.ENTER, Nav.VERIFY, Nav.SKIP, Nav.START_ACTION,
    Nav.REFRESH, Nav.BACK, Nav.HELP, Nav.QUIT,
)

Viewport = Union[LinearViewport, MultilineViewport]


@dataclass
class DetailState(ScreenState):
    view: Optional[DetailView] = None
    tabs: Tuple[str, ...] = (TAB_TASKS,)
    tab: int = 0
    selected: int = 0
    viewport: Viewport = field(default_factory=LinearViewport)
    action: ActionInput = field(default_factory=ActionInput)

    @property
    def active_tab(self) -> str:
        return self.tabs[self.tab]

    @property
    def items(self) -> Sequence:
        if self.view is None:
            return []
        if self.active_tab == TAB_CRITERIA:
            return self.view.criteria
        if self.active_tab == TAB_DOCUMENTS:
            return self.view.documents
        return self.view.tasks


def new_detail(route: Route, width: int, height: int) -> DetailState:
    tabs = TABS_BY_KIND.get(route.kind, (TAB_TASKS,))
    state = DetailState(route=route, width=width, height=height, tabs=tabs)
    state.viewport = _fresh_viewport(state)
    return state


def line_counts(state: DetailState) -> List[int]:
    """Current per-item line counts of the criteria tab; never cached."""
    if state.view is None:
        return []
    return criterion_line_counts(state.view.criteria, content_width(state))


def _fresh_viewport(state: DetailState) -> Viewport:
    height = viewport_rows(state, BUDGET)
    if state.active_tab == TAB_CRITERIA:
        return MultilineViewport(height)
    return LinearViewport(height)


def ensure_selection_visible(state: DetailState) -> None:
    if isinstance(state.viewport, MultilineViewport):
        state.viewport.ensure_visible(line_counts(state), state.selected)
    else:
        state.viewport.ensure_visible(len(state.items), state.selected)


def relayout(state: DetailState) -> None:
    state.viewport.set_height(viewport_rows(state, BUDGET))
    ensure_selection_visible(state)


def switch_tab(state: DetailState) -> None:
    if len(state.tabs) < 2:
        return
    state.tab = (state.tab + 1) % len(state.tabs)
    state.selected = 0
    state.viewport = _fresh_viewport(state)
    ensure_selection_visible(state)


def toggle_expanded(state: DetailState) -> None:
    if state.active_tab != TAB_CRITERIA or not state.items:
        return
    item = state.items[state.selected]
    if not item.expandable:
        return
    item.expanded = not item.expanded
    ensure_selection_visible(state)


def _selected_ident(state: DetailState) -> Optional[str]:
    items = state.items
    if not items or not 0 <= state.selected < len(items):
        return None
    return items[state.selected].ident


def _apply_loaded(state: DetailState, view: DetailView) -> None:
    """Install fresh data; a reload keeps tab, selected row and expanded criteria."""
    previous = state.view
    keep_id = _selected_ident(state) if state.reloading else None
    keep_index = state.selected
    expanded: Set[str] = set()
    if state.reloading and previous is not None:
        expanded = {ac.ident for ac in previous.criteria if ac.expanded}
    for ac in view.criteria:
        ac.expanded = ac.ident in expanded
    state.view = view
    if state.reloading:
        items = state.items
        ids = [item.ident for item in items]
        if keep_id in ids:
            state.selected = ids.index(keep_id)
        else:
            state.selected = max(0, min(keep_index, len(items) - 1))
    else:
        state.selected = 0
    # a reason being typed survives the reload
    state.phase = ScreenPhase.ACTION_INPUT if state.action.active else ScreenPhase.READY
    state.reloading = False
    relayout(state)


def _move(state: DetailState, nav: Nav) -> None:
    vp = state.viewport
    if isinstance(vp, MultilineViewport):
        counts = line_counts(state)
        if nav is Nav.UP:
            state.selected = move_multiline(vp, counts, state.selected, -1)
        elif nav is Nav.DOWN:
            state.selected = move_multiline(vp, counts, state.selected, 1)
        elif nav in (Nav.PAGE_UP, Nav.PAGE_DOWN):
            state.selected = page_multiline(vp, counts, state.selected, nav is Nav.PAGE_DOWN)
        else:
            state.selected = jump_multiline(vp, counts, nav is Nav.JUMP_END)
        return
    total = len(state.items)
    if nav is Nav.UP:
        state.selected = move_linear(vp, total, state.selected, -1)
    elif nav is Nav.DOWN:
        state.selected = move_linear(vp, total, state.selected, 1)
    elif nav in (Nav.PAGE_UP, Nav.PAGE_DOWN):
        state.selected = page_linear(vp, total, state.selected, nav is Nav.PAGE_DOWN)
    else:
        state.selected = jump_linear(vp, total, nav is Nav.JUMP_END)


def _reduce_action_input(state: DetailState, key: str) -> List[Command]:
    result = state.action.handle_key(key)
    if result is InputResult.SUBMIT:
        target, note = state.action.submit()
        state.phase = ScreenPhase.READY
        return [RunAction("fail", target, note)]
    if result is InputResult.CANCEL:
        state.action.cancel()
        state.phase = ScreenPhase.READY
    return []


def _enter(state: DetailState) -> List[Command]:
    ident = _selected_ident(state)
    if ident is None:
        return []
    if state.active_tab == TAB_CRITERIA:
        toggle_expanded(state)
        return []
    kind = "document" if state.active_tab == TAB_DOCUMENTS else "task"
    return [Navigate(Route(kind, ident))]


def reduce_detail(state: DetailState, msg: Message) -> Tuple[DetailState, List[Command]]:
    if isinstance(msg, KeyMsg) and state.phase is ScreenPhase.ACTION_INPUT:
        return state, _reduce_action_input(state, msg.key)
    if isinstance(msg, LoadFailedMsg):
        state.action.cancel()
    nav = resolve(DETAIL_KEYS, msg.key) if isinstance(msg, KeyMsg) else None
    handled = handle_lifecycle(state, msg, nav, lambda: relayout(state))
    if handled is not None:
        return state, handled
    if isinstance(msg, LoadedMsg):
        _apply_loaded(state, msg.payload)
        return state, []
    if isinstance(msg, ActionDoneMsg):
        if state.phase is ScreenPhase.ERROR:
            return state, []
        state.notice = translate("STATUS_ACTION_DONE", action=msg.action, ident=msg.item_id)
        state.reloading = True
        return state, [Load(state.route)]
    if state.phase is not ScreenPhase.READY or nav is None:
        return state, []

    if nav in (Nav.UP, Nav.DOWN, Nav.PAGE_UP, Nav.PAGE_DOWN, Nav.JUMP_START, Nav.JUMP_END):
        _move(state, nav)
    elif nav is Nav.TAB:
        switch_tab(state)
    elif nav is Nav.ENTER:
        return state, _enter(state)
    elif state.active_tab == TAB_CRITERIA and state.items:
        ident = _selected_ident(state)
        if nav is Nav.START_ACTION:
            state.action.start(ident)
            state.phase = ScreenPhase.ACTION_INPUT
        elif nav is Nav.VERIFY:
            return state, [RunAction("verify", ident)]
        elif nav is Nav.SKIP:
            return state, [RunAction("skip", ident, SKIP_NOTE)]
    return state, []


__all__ = [
    "DetailState",
    "BUDGET",
    "HELP_COMMANDS",
    "TAB_TASKS",
    "TAB_CRITERIA",
    "TAB_DOCUMENTS",
    "SKIP_NOTE",
    "new_detail",
    "line_counts",
    "switch_tab",
    "toggle_expanded",
    "reduce_detail",
]
