#!/usr/bin/env python3
"""Unit tests for tui_app module - TrackboardApp plumbing without a terminal."""

from pathlib import Path

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from infrastructure.file_repository import YamlRoadmapRepository
from trackboard.interface.tui_app import NAMED_KEYS, TrackboardApp
from trackboard.interface.tui_loader import BackgroundLoader, InlineLoader
from trackboard.interface.tui_messages import Route, ScreenPhase


@pytest.fixture
def tui(roadmap_file: Path):
    repo = YamlRoadmapRepository(roadmap_file)
    with create_pipe_input() as inp:
        app = TrackboardApp(repo, Route("dashboard"), "dark-contrast", input=inp, output=DummyOutput())
    app.router.loader = InlineLoader(repo, app.router.dispatch)
    return app


class TestTrackboardAppSetup:
    def test_uses_background_loader_by_default(self, roadmap_file):
        with create_pipe_input() as inp:
            app = TrackboardApp(YamlRoadmapRepository(roadmap_file), input=inp, output=DummyOutput())
        assert isinstance(app.router.loader, BackgroundLoader)
        assert app.theme.name == "dark-olive"

    def test_theme_name_is_resolved(self, tui):
        assert tui.theme.name == "dark-contrast"
        assert tui.router.theme is tui.theme

    def test_named_keys_normalized(self):
        assert NAMED_KEYS["c-m"] == "enter"
        assert NAMED_KEYS["c-i"] == "tab"
        assert NAMED_KEYS["c-h"] == "backspace"


class TestMessagePlumbing:
    def test_get_text_picks_up_terminal_size(self, tui):
        tui.get_text()
        size = tui.app.output.get_size()
        assert (tui.router.width, tui.router.height) == (size.columns, size.rows)

    def test_resize_reaches_active_screen(self, tui):
        tui.router.start(Route("dashboard"))
        tui.get_text()
        screen = tui.router.active
        assert screen.phase is ScreenPhase.READY
        assert screen.height == tui.app.output.get_size().rows

    def test_keys_drive_router(self, tui):
        tui.router.start(Route("dashboard"))
        tui.handle_key("enter")
        assert tui.router.active.route == Route("iteration", "1")
        tui.handle_key("escape")
        assert tui.router.active.route == Route("dashboard")
        tui.handle_key("q")
        assert tui.router.quit_requested

    def test_post_without_loop_is_dropped(self, tui):
        tui.router.start(Route("dashboard"))
        before = tui.router.active.view
        tui.post(object())
        assert tui.router.active.view is before

    def test_view_text(self, tui):
        tui.router.start(Route("dashboard"))
        text = "".join(fragment[1] for fragment in tui.get_text())
        assert "Roadmap" in text
        assert "TM-track-1" in text
