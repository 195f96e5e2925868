"""Modal free-text input used to capture an AC failure reason."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

DEFAULT_NOTE = "Failed via TUI"
CHAR_LIMIT = 500


class InputResult(Enum):
    IGNORED = "ignored"
    EDITED = "edited"
    SUBMIT = "submit"
    CANCEL = "cancel"


@dataclass
class ActionInput:
    active: bool = False
    target_id: str = ""
    buffer: str = ""
    char_limit: int = CHAR_LIMIT

    def start(self, target_id: str) -> None:
        self.active = True
        self.target_id = target_id
        self.buffer = ""

    def cancel(self) -> None:
        self.active = False
        self.target_id = ""
        self.buffer = ""

    def submit(self) -> Tuple[str, str]:
        """Return ``(target_id, note)`` and reset; blank input gets the default note."""
        note = self.buffer.strip() or DEFAULT_NOTE
        target = self.target_id
        self.cancel()
        return target, note

    def handle_key(self, key: str) -> InputResult:
        if not self.active:
            return InputResult.IGNORED
        if key == "enter":
            return InputResult.SUBMIT
        if key == "escape":
            return InputResult.CANCEL
        if key in ("backspace", "c-h"):
            self.buffer = self.buffer[:-1]
            return InputResult.EDITED
        if key == "c-u":
            self.buffer = ""
            return InputResult.EDITED
        char = _printable(key)
        if char is None:
            return InputResult.EDITED
        if len(self.buffer) < self.char_limit:
            self.buffer += char
        return InputResult.EDITED


def _printable(key: str) -> Optional[str]:
    if len(key) != 1:
        return None
    return key if key.isprintable() else None


__all__ = ["ActionInput", "InputResult", "DEFAULT_NOTE", "CHAR_LIMIT"]
