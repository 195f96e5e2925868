"""Command line entry point: pick the data file and the first screen, run the TUI."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from config import get_data_path, get_user_theme
from infrastructure.file_repository import YamlRoadmapRepository
from trackboard.interface.constants import APP_LOGGER
from trackboard.interface.i18n import languages, translate
from trackboard.interface.tui_messages import Route
from trackboard.interface.tui_themes import DEFAULT_THEME, THEMES

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
SCREEN_KINDS = ("dashboard", "iteration", "track", "task", "document")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trackboard", description="Terminal roadmap dashboard")
    parser.add_argument("--data", type=Path, help="YAML data file (default: $TRACKBOARD_DATA or ./roadmap.yaml)")
    parser.add_argument("--theme", choices=list(THEMES.keys()), help="interface palette")
    parser.add_argument("--lang", choices=languages(), help="interface language for this run")
    parser.add_argument("--log-file", type=Path, help="write logs here (the terminal belongs to the UI)")
    parser.add_argument("screen", nargs="?", default="dashboard", choices=SCREEN_KINDS, help="screen to open first")
    parser.add_argument("ident", nargs="?", default="", help="iteration number or track/task/document id")
    return parser


def start_route(screen: str, ident: str) -> Route:
    if screen == "dashboard":
        return Route("dashboard")
    return Route(screen, ident)


def configure_logging(log_file: Optional[Path]) -> None:
    level_name = os.getenv("TRACKBOARD_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.screen != "dashboard" and not args.ident:
        parser.error(f"{args.screen} needs an id")
    if args.lang:
        os.environ["TRACKBOARD_LANG"] = args.lang
    configure_logging(args.log_file)

    data_path = args.data.expanduser() if args.data else get_data_path()
    if not data_path.exists():
        print(translate("ERR_DATA_FILE", path=data_path, error="no such file"), file=sys.stderr)
        return 1
    theme = args.theme or get_user_theme() or DEFAULT_THEME

    from trackboard.interface.tui_app import TrackboardApp

    app = TrackboardApp(YamlRoadmapRepository(data_path), start_route(args.screen, args.ident), theme)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
