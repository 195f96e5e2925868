import logging
import os

import pytest

from trackboard.interface import cli
from trackboard.interface.tui_messages import Route


@pytest.fixture(autouse=True)
def restore_app_logger():
    logger = logging.getLogger("trackboard")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.screen == "dashboard"
    assert args.ident == ""
    assert args.theme is None


def test_parser_screen_and_options(tmp_path):
    args = cli.build_parser().parse_args(["--theme", "dark-contrast", "--data", str(tmp_path / "r.yaml"), "task", "T-1"])
    assert cli.start_route(args.screen, args.ident) == Route("task", "T-1")
    assert args.data == tmp_path / "r.yaml"


def test_parser_rejects_unknown_theme():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--theme", "neon"])


def test_detail_screen_needs_id(tmp_path):
    with pytest.raises(SystemExit):
        cli.main(["--data", str(tmp_path / "r.yaml"), "task"])


def test_missing_data_file(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("TRACKBOARD_LANG", "en")
    assert cli.main(["--lang", "ru", "--data", str(tmp_path / "missing.yaml")]) == 1
    assert os.environ["TRACKBOARD_LANG"] == "ru"
    assert "missing.yaml" in capsys.readouterr().err


def test_configure_logging_to_file(tmp_path, monkeypatch):
    monkeypatch.setenv("TRACKBOARD_LOG_LEVEL", "debug")
    log_file = tmp_path / "tui.log"
    cli.configure_logging(log_file)
    cli.configure_logging(log_file)
    logger = logging.getLogger("trackboard")
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    logging.getLogger("trackboard.tui").debug("hello %s", "log")
    logger.handlers[0].flush()
    assert "DEBUG trackboard.tui: hello log" in log_file.read_text(encoding="utf-8")
