"""Line builders shared by renderers and line-count providers.

A multiline list is scrolled by line, so the counts handed to the viewport must
come from the very same code that draws the rows. Everything here is a pure
function of the item, the content width and the expansion flag.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from trackboard.interface.i18n import translate
from trackboard.interface.tui_themes import DEFAULT_THEME, Theme, load_theme
from trackboard.status import CriterionStatus
from trackboard.viewmodels import CriterionItem, DashboardRow, TaskRow
from util.display import pad_display, trim_display, wrap_display

Fragment = Tuple[str, str]
Line = List[Fragment]

INSTRUCTION_INDENT = 6
NOTE_INDENT = 4
MIN_NOTE_WIDTH = 20

_AC_ICONS = {
    CriterionStatus.VERIFIED: "ac.verified",
    CriterionStatus.AUTO_VERIFIED: "ac.verified",
    CriterionStatus.FAILED: "ac.failed",
    CriterionStatus.SKIPPED: "ac.skipped",
    CriterionStatus.PENDING_REVIEW: "ac.pending",
    CriterionStatus.NOT_STARTED: "ac.todo",
}


def _theme(theme: Optional[Theme]) -> Theme:
    return theme or load_theme(DEFAULT_THEME)


def criterion_icon(item: CriterionItem, theme: Optional[Theme] = None) -> str:
    return _theme(theme).icon(_AC_ICONS.get(item.status, "ac.todo"), "○")


def criterion_lines(
    item: CriterionItem,
    width: int,
    *,
    selected: bool = False,
    theme: Optional[Theme] = None,
) -> List[Line]:
    """Header (wrapped), then instructions when expanded, then notes unless verified."""
    width = max(1, width)
    theme = _theme(theme)
    if item.expandable:
        marker = theme.icon("expanded" if item.expanded else "collapsed")
    else:
        marker = " "
    header = f"{marker} {criterion_icon(item, theme)} {item.ident}: {item.description}"
    header_style = "class:selected" if selected else f"class:{item.status.style}"
    lines: List[Line] = [
        [(header_style, pad_display(text, width) if selected else text)] for text in wrap_display(header, width)
    ]

    if item.expanded and item.expandable:
        lines.append([("class:text.dim", trim_display("    " + translate("TESTING_INSTRUCTIONS"), width))])
        inner = max(1, width - INSTRUCTION_INDENT)
        for raw in item.testing_instructions.split("\n"):
            if not raw.strip():
                continue
            for text in wrap_display(raw, inner):
                lines.append([("class:text.cont", " " * INSTRUCTION_INDENT + text)])

    if item.notes.strip() and not item.status.is_verified:
        failed = item.status is CriterionStatus.FAILED
        label = translate("FAILURE_REASON") if failed else translate("NOTES")
        style = "class:status.fail" if failed else "class:text.dim"
        note_width = max(MIN_NOTE_WIDTH, width - NOTE_INDENT - len(label) - 2)
        indent = " " * (NOTE_INDENT + len(label) + 1)
        for idx, text in enumerate(wrap_display(item.notes.strip(), note_width)):
            prefix = " " * NOTE_INDENT + label + " " if idx == 0 else indent
            lines.append([(style, trim_display(prefix + text, width))])
    return lines


def criterion_line_counts(items: Sequence[CriterionItem], width: int) -> List[int]:
    """Per-item line counts for the multiline viewport, rebuilt on every call."""
    return [len(criterion_lines(item, width)) for item in items]


def task_line(row: TaskRow, width: int, *, selected: bool = False) -> Line:
    label = f"[{row.status.label}]"
    text = trim_display(f"  {row.ident}  {row.title}", max(1, width - len(label) - 1), "…")
    if selected:
        return [("class:selected", pad_display(f"{text} {label}", width))]
    return [("class:text", text), ("", " "), (f"class:{row.status.style}", label)]


def dashboard_line(row: DashboardRow, width: int, *, selected: bool = False) -> Line:
    prefix = {"iteration": "#", "track": "", "task": ""}.get(row.kind, "")
    detail = f"  {row.detail}" if row.detail else ""
    status = f"[{row.status}]" if row.status else ""
    budget = max(1, width - len(status) - 1)
    text = trim_display(f"  {prefix}{row.ident}  {row.title}{detail}", budget, "…")
    if selected:
        return [("class:selected", pad_display(f"{text} {status}".rstrip(), width))]
    return [("class:text", text), ("", " "), ("class:text.dim", status)]


def document_lines(content: str, width: int) -> List[str]:
    """Wrap document content to the content width; an empty document gets a placeholder line."""
    if not (content or "").strip():
        return [translate("EMPTY_DOCUMENT")]
    return wrap_display(content.rstrip("\n"), width)


__all__ = [
    "Fragment",
    "Line",
    "criterion_icon",
    "criterion_lines",
    "criterion_line_counts",
    "task_line",
    "dashboard_line",
    "document_lines",
]
