"""
Screen stack and message loop.

The router is the only place that talks to the loader. Each Load or RunAction
command is stamped with a fresh token remembered against the screen that asked;
a completion is delivered only while that screen is still the active one.
Action completions for a screen covered by another are held and delivered
when it is shown again, so its reload and any failure are not lost.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional, Set, Tuple

from prompt_toolkit.formatted_text import FormattedText

from trackboard.interface.tui_dashboard import new_dashboard, reduce_dashboard
from trackboard.interface.tui_detail import new_detail, reduce_detail
from trackboard.interface.tui_document import new_document, reduce_document
from trackboard.interface.tui_messages import (
    ActionDoneMsg,
    Command,
    GoBack,
    InitMsg,
    Load,
    LoadedMsg,
    LoadFailedMsg,
    Message,
    Navigate,
    Quit,
    ResizeMsg,
    Retry,
    Route,
    RunAction,
    ScreenPhase,
    describe,
)
from trackboard.interface.tui_render import render_dashboard, render_detail, render_document
from trackboard.interface.tui_state import DEFAULT_TERM_HEIGHT, DEFAULT_WIDTH, ScreenState
from trackboard.interface.tui_themes import DEFAULT_THEME, Theme, load_theme

logger = logging.getLogger("trackboard.tui")


@dataclass(frozen=True)
class ScreenSpec:
    factory: Callable[[Route, int, int], ScreenState]
    reducer: Callable[[Any, Message], Any]
    renderer: Callable[[Any, Theme], FormattedText]


SCREENS: Dict[str, ScreenSpec] = {
    "dashboard": ScreenSpec(new_dashboard, reduce_dashboard, render_dashboard),
    "iteration": ScreenSpec(new_detail, reduce_detail, render_detail),
    "track": ScreenSpec(new_detail, reduce_detail, render_detail),
    "task": ScreenSpec(new_detail, reduce_detail, render_detail),
    "document": ScreenSpec(new_document, reduce_document, render_document),
}

COMPLETIONS = (LoadedMsg, LoadFailedMsg, ActionDoneMsg)


class Router:
    def __init__(
        self,
        loader=None,
        theme: Optional[Theme] = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_TERM_HEIGHT,
    ):
        self.loader = loader
        self.theme = theme or load_theme(DEFAULT_THEME)
        self.width = width
        self.height = height
        self.stack: List[ScreenState] = []
        self.quit_requested = False
        self._tokens: Dict[int, ScreenState] = {}
        self._action_tokens: Set[int] = set()
        # action completions held for a covered screen until it is shown again
        self._deferred: List[Tuple[ScreenState, Message]] = []
        self._next_token = 0
        self._queue: Deque[Message] = deque()
        self._dispatching = False

    @property
    def active(self) -> Optional[ScreenState]:
        return self.stack[-1] if self.stack else None

    def start(self, route: Route) -> None:
        self._run(lambda: self._push(route))

    # ---- message loop --------------------------------------------------

    def dispatch(self, msg: Message) -> None:
        """Queue a message; messages are processed one at a time, in order."""
        self._queue.append(msg)
        if not self._dispatching:
            self._run(lambda: None)

    def _run(self, step: Callable[[], None]) -> None:
        # completions posted synchronously while a step runs wait in the queue
        self._dispatching = True
        try:
            step()
            while self._queue:
                self._handle(self._queue.popleft())
        finally:
            self._dispatching = False

    def _handle(self, msg: Message) -> None:
        if isinstance(msg, ResizeMsg):
            self.width, self.height = msg.width, msg.height
        screen = self.active
        if isinstance(msg, COMPLETIONS):
            owner = self._tokens.pop(msg.token, None)
            from_action = msg.token in self._action_tokens
            self._action_tokens.discard(msg.token)
            if from_action and owner is not None and owner is not screen and self._on_stack(owner):
                logger.debug("deferring %s for covered %s (token=%s)", describe(msg), owner.route.kind, msg.token)
                self._deferred.append((owner, msg))
                return
            if owner is None or owner is not screen:
                logger.debug("dropping stale %s (token=%s)", describe(msg), msg.token)
                return
        if screen is None:
            return
        self._deliver(screen, msg)

    def _deliver(self, screen: ScreenState, msg: Message) -> None:
        entry = SCREENS[screen.route.kind]
        _, commands = entry.reducer(screen, msg)
        for command in commands:
            self._execute(screen, command)

    # ---- commands ------------------------------------------------------

    def _execute(self, origin: ScreenState, command: Command) -> None:
        if isinstance(command, Quit):
            self.quit_requested = True
        elif isinstance(command, GoBack):
            self._pop()
        elif isinstance(command, Retry):
            self._replace(origin)
        elif isinstance(command, Navigate):
            self._push(command.route)
        elif isinstance(command, Load):
            self.loader.load(self._stamp(origin), command.route)
        elif isinstance(command, RunAction):
            token = self._stamp(origin)
            self._action_tokens.add(token)
            self.loader.run_action(token, command.action, command.item_id, command.note)
        else:
            logger.warning("unhandled command %s", describe(command))

    def _stamp(self, screen: ScreenState) -> int:
        self._next_token += 1
        self._tokens[self._next_token] = screen
        return self._next_token

    def _pending(self, screen: ScreenState) -> bool:
        return any(owner is screen for owner in self._tokens.values())

    def _on_stack(self, screen: ScreenState) -> bool:
        return any(entry is screen for entry in self.stack)

    def _forget(self, screen: ScreenState) -> None:
        for token in [t for t, owner in self._tokens.items() if owner is screen]:
            del self._tokens[token]
            self._action_tokens.discard(token)
        self._deferred = [(owner, msg) for owner, msg in self._deferred if owner is not screen]

    def _take_deferred(self, screen: ScreenState) -> List[Message]:
        held = [msg for owner, msg in self._deferred if owner is screen]
        self._deferred = [(owner, msg) for owner, msg in self._deferred if owner is not screen]
        return held

    def _new_screen(self, route: Route) -> Optional[ScreenState]:
        entry = SCREENS.get(route.kind)
        if entry is None:
            logger.warning("unknown screen %r", route.kind)
            return None
        return entry.factory(route, self.width, self.height)

    def _push(self, route: Route) -> None:
        screen = self._new_screen(route)
        if screen is None:
            return
        logger.debug("push %s %s", route.kind, route.ident)
        self.stack.append(screen)
        self._deliver(screen, InitMsg())

    def _pop(self) -> None:
        if len(self.stack) <= 1:
            return
        popped = self.stack.pop()
        self._forget(popped)
        revealed = self.active
        logger.debug("pop %s -> %s", popped.route.kind, revealed.route.kind)
        if (revealed.width, revealed.height) != (self.width, self.height):
            self._deliver(revealed, ResizeMsg(self.width, self.height))
        for msg in self._take_deferred(revealed):
            self._deliver(revealed, msg)
        if self._pending(revealed):
            return
        # completions that arrived while it was covered were dropped
        if revealed.phase is ScreenPhase.LOADING:
            self._deliver(revealed, InitMsg())
        elif revealed.reloading:
            self._execute(revealed, Load(revealed.route))

    def _replace(self, screen: ScreenState) -> None:
        if screen is not self.active:
            return
        fresh = self._new_screen(screen.route)
        self._forget(screen)
        self.stack[-1] = fresh
        logger.debug("retry %s %s", screen.route.kind, screen.route.ident)
        self._deliver(fresh, InitMsg())

    # ---- view ----------------------------------------------------------

    def view(self) -> FormattedText:
        screen = self.active
        if screen is None:
            return FormattedText([])
        return SCREENS[screen.route.kind].renderer(screen, self.theme)


__all__ = ["Router", "ScreenSpec", "SCREENS"]
