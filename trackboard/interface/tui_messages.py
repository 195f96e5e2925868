"""Messages consumed by screen reducers and commands they hand back to the router.

Every message is processed to completion before the next one is read, so a
reducer owns its screen state exclusively while it runs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ScreenPhase(Enum):
    LOADING = "loading"
    READY = "ready"
    ACTION_INPUT = "action-input"
    ERROR = "error"


# ---- messages -------------------------------------------------------------


@dataclass(frozen=True)
class InitMsg:
    """Sent once right after a screen becomes active."""


@dataclass(frozen=True)
class KeyMsg:
    key: str  # normalized key name ("up", "enter", "s-left", "c-c") or a printable char


@dataclass(frozen=True)
class ResizeMsg:
    width: int
    height: int


@dataclass(frozen=True)
class TickMsg:
    pass


@dataclass(frozen=True)
class LoadedMsg:
    token: int
    payload: Any


@dataclass(frozen=True)
class LoadFailedMsg:
    token: int
    error: str


@dataclass(frozen=True)
class ActionDoneMsg:
    token: int
    action: str
    item_id: str


Message = Union[InitMsg, KeyMsg, ResizeMsg, TickMsg, LoadedMsg, LoadFailedMsg, ActionDoneMsg]


# ---- commands -------------------------------------------------------------


@dataclass(frozen=True)
class Route:
    """Screen address: dashboard, iteration/track/task detail or a document."""
    kind: str
    ident: str = ""


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class GoBack:
    pass


@dataclass(frozen=True)
class Retry:
    """Replace the active (failed) screen with a fresh instance of the same route."""


@dataclass(frozen=True)
class Navigate:
    route: Route


@dataclass(frozen=True)
class Load:
    route: Route


@dataclass(frozen=True)
class RunAction:
    action: str  # verify|skip|fail
    item_id: str
    note: str = ""


Command = Union[Quit, GoBack, Retry, Navigate, Load, RunAction]


def describe(msg: Optional[object]) -> str:
    """Short label used in debug logs."""
    if msg is None:
        return "-"
    return type(msg).__name__


__all__ = [
    "ScreenPhase",
    "InitMsg",
    "KeyMsg",
    "ResizeMsg",
    "TickMsg",
    "LoadedMsg",
    "LoadFailedMsg",
    "ActionDoneMsg",
    "Message",
    "Route",
    "Quit",
    "GoBack",
    "Retry",
    "Navigate",
    "Load",
    "RunAction",
    "Command",
    "describe",
]
