"""Document reader: wrapped content scrolled by line with a pager position."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from trackboard.interface.tui_keys import DOCUMENT_KEYS, Nav, resolve
from trackboard.interface.tui_lines import document_lines
from trackboard.interface.tui_messages import Command, KeyMsg, LoadedMsg, Message, Route, ScreenPhase
from trackboard.interface.tui_state import ScreenState, content_width, handle_lifecycle, viewport_rows
from trackboard.interface.tui_viewport import DocumentViewport
from trackboard.viewmodels import DocumentView
from util.responsive import ScreenBudget

# title, type/status, rule | position
BUDGET = ScreenBudget(header=3, footer=1)

HELP_COMMANDS = (
    Nav.UP, Nav.DOWN, Nav.PAGE_UP, Nav.PAGE_DOWN, Nav.JUMP_START, Nav.JUMP_END,
    Nav.REFRESH, Nav.BACK, Nav.HELP, Nav.QUIT,
)


@dataclass
class DocumentState(ScreenState):
    view: Optional[DocumentView] = None
    lines: List[str] = field(default_factory=list)
    viewport: DocumentViewport = field(default_factory=DocumentViewport)

    @property
    def total(self) -> int:
        return len(self.lines)


def new_document(route: Route, width: int, height: int) -> DocumentState:
    state = DocumentState(route=route, width=width, height=height)
    relayout(state)
    return state


def relayout(state: DocumentState) -> None:
    """Re-wrap for the current width and keep the offset in range."""
    state.viewport.set_height(viewport_rows(state, BUDGET))
    if state.view is not None:
        state.lines = document_lines(state.view.content, content_width(state))
    state.viewport.clamp(state.total)


def reduce_document(state: DocumentState, msg: Message) -> Tuple[DocumentState, List[Command]]:
    nav = resolve(DOCUMENT_KEYS, msg.key) if isinstance(msg, KeyMsg) else None
    handled = handle_lifecycle(state, msg, nav, lambda: relayout(state))
    if handled is not None:
        return state, handled
    if isinstance(msg, LoadedMsg):
        if not state.reloading:
            state.viewport.scroll_to_start()
        state.view = msg.payload
        state.phase = ScreenPhase.READY
        state.reloading = False
        relayout(state)
        return state, []
    if state.phase is not ScreenPhase.READY or nav is None:
        return state, []

    vp, total = state.viewport, state.total
    if nav is Nav.UP:
        vp.scroll_line_up(total)
    elif nav is Nav.DOWN:
        vp.scroll_line_down(total)
    elif nav is Nav.PAGE_UP:
        vp.scroll_page_up(total)
    elif nav is Nav.PAGE_DOWN:
        vp.scroll_page_down(total)
    elif nav is Nav.JUMP_START:
        vp.scroll_to_start()
    elif nav is Nav.JUMP_END:
        vp.scroll_to_end(total)
    return state, []


__all__ = ["DocumentState", "BUDGET", "HELP_COMMANDS", "new_document", "reduce_document"]
