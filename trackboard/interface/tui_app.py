"""prompt_toolkit front end: key bindings, resize detection, spinner ticks."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Optional

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl

from application.ports import RoadmapRepository
from trackboard.interface.tui_loader import BackgroundLoader
from trackboard.interface.tui_messages import KeyMsg, Message, ResizeMsg, Route, ScreenPhase, TickMsg
from trackboard.interface.tui_router import Router
from trackboard.interface.tui_themes import DEFAULT_THEME, load_theme

logger = logging.getLogger("trackboard.tui")

TICK_INTERVAL = 0.1

# prompt_toolkit key name -> name the reducers understand
NAMED_KEYS = {
    "up": "up",
    "down": "down",
    "pageup": "pageup",
    "pagedown": "pagedown",
    "home": "home",
    "end": "end",
    "s-up": "s-up",
    "s-down": "s-down",
    "s-left": "s-left",
    "s-right": "s-right",
    "c-m": "enter",
    "c-i": "tab",
    "c-h": "backspace",
    "c-u": "c-u",
    "c-c": "c-c",
    "escape": "escape",
}


class TrackboardApp:
    def __init__(
        self,
        repository: RoadmapRepository,
        start: Route = Route("dashboard"),
        theme: str = DEFAULT_THEME,
        *,
        input=None,
        output=None,
    ):
        self.start_route = start
        self.theme = load_theme(theme)
        self.router = Router(theme=self.theme)
        self.router.loader = BackgroundLoader(repository, self.post)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._size = (0, 0)

        self.control = FormattedTextControl(self.get_text, show_cursor=False, focusable=True)
        self.app = Application(
            layout=Layout(Window(content=self.control, always_hide_cursor=True, wrap_lines=False)),
            key_bindings=self._build_key_bindings(),
            style=self.theme.style(),
            full_screen=True,
            input=input,
            output=output,
        )
        # Esc must not wait for the rest of an ANSI sequence.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TRACKBOARD_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        kb.timeout = 0

        # registered first so the named bindings below take precedence
        @kb.add(Keys.Any, eager=True)
        def _(event):
            key = event.key_sequence[0].key if event.key_sequence else None
            if isinstance(key, str) and len(key) == 1 and key.isprintable():
                self.handle_key(key)

        for name, normalized in NAMED_KEYS.items():
            kb.add(name, eager=True)(self._key_handler(normalized))
        return kb

    def _key_handler(self, normalized: str):
        def handler(event):
            self.handle_key(normalized)
        return handler

    # ---- message plumbing ----------------------------------------------

    def handle_key(self, key: str) -> None:
        self.deliver(KeyMsg(key))

    def deliver(self, msg: Message) -> None:
        """Feed one message to the router on the UI loop, then redraw or exit."""
        self.router.dispatch(msg)
        if self.router.quit_requested:
            if self.app.is_running:
                self.app.exit()
            return
        self.app.invalidate()

    def post(self, msg: Message) -> None:
        """Thread-safe entry point for worker completions."""
        loop = self._loop
        if loop is None or loop.is_closed():
            logger.debug("loop gone, dropping %s", type(msg).__name__)
            return
        loop.call_soon_threadsafe(self.deliver, msg)

    def _check_resize(self) -> None:
        try:
            size = self.app.output.get_size()
        except OSError:
            return
        current = (size.columns, size.rows)
        if current != self._size:
            self._size = current
            self.router.dispatch(ResizeMsg(size.columns, size.rows))

    def get_text(self) -> FormattedText:
        self._check_resize()
        return self.router.view()

    async def _ticker(self) -> None:
        while True:
            await asyncio.sleep(TICK_INTERVAL)
            screen = self.router.active
            if screen is not None and screen.phase is ScreenPhase.LOADING:
                self.deliver(TickMsg())

    def _pre_run(self) -> None:
        self._loop = asyncio.get_event_loop()
        self._check_resize()
        self.router.start(self.start_route)
        self.app.create_background_task(self._ticker())

    def run(self) -> None:
        logger.info("starting on %s %s", self.start_route.kind, self.start_route.ident)
        self.app.run(pre_run=self._pre_run)


__all__ = ["TrackboardApp", "NAMED_KEYS"]
