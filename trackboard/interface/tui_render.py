"""Rendering helpers: screen state + viewport output → prompt_toolkit text.

Every renderer returns exactly ``state.height`` lines so the reserved header,
footer and help rows always match what the reducers budgeted for.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from prompt_toolkit.formatted_text import FormattedText

from trackboard.interface import tui_dashboard, tui_detail, tui_document
from trackboard.interface.i18n import translate
from trackboard.interface.tui_keys import help_rows
from trackboard.interface.tui_lines import Line, criterion_lines, dashboard_line, task_line
from trackboard.interface.tui_messages import ScreenPhase
from trackboard.interface.tui_state import ScreenState, content_width
from trackboard.interface.tui_themes import SPINNER_FRAMES, Theme
from trackboard.interface.tui_viewport import MultilineViewport
from trackboard.viewmodels import DocumentRow
from util.display import display_width, pad_display, trim_display, wrap_display
from util.responsive import help_height

LOADING_KEYS = {
    "dashboard": "LOADING_DASHBOARD",
    "iteration": "LOADING_ITERATION",
    "track": "LOADING_TRACK",
    "task": "LOADING_TASK",
    "document": "LOADING_DOCUMENT",
}

TITLE_KEYS = {
    "iteration": "ITERATION_TITLE",
    "track": "TRACK_TITLE",
    "task": "TASK_TITLE",
}

TAB_LABEL_KEYS = {
    tui_detail.TAB_TASKS: "TAB_TASKS",
    tui_detail.TAB_CRITERIA: "TAB_CRITERIA",
    tui_detail.TAB_DOCUMENTS: "TAB_DOCUMENTS",
}

EMPTY_KEYS = {
    tui_detail.TAB_TASKS: "EMPTY_TASKS",
    tui_detail.TAB_CRITERIA: "EMPTY_CRITERIA",
    tui_detail.TAB_DOCUMENTS: "EMPTY_DOCUMENTS",
}


def _text_line(text: str, width: int, style: str = "class:text") -> Line:
    return [(style, trim_display(text, width, "…"))]


def _fit(lines: List[Line], height: int) -> List[Line]:
    lines = lines[: max(0, height)]
    while len(lines) < height:
        lines.append([])
    return lines


def _to_formatted(lines: Sequence[Line]) -> FormattedText:
    fragments: List[Tuple[str, str]] = []
    for idx, line in enumerate(lines):
        if idx:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return FormattedText(fragments)


def _indicator_line(above: bool, below: bool, width: int) -> Line:
    parts = []
    if above:
        parts.append(translate("MORE_ABOVE"))
    if below:
        parts.append(translate("MORE_BELOW"))
    return _text_line("  ".join(parts), width, "class:indicator")


def _help_lines(state: ScreenState, commands, width: int) -> List[Line]:
    rows = [f"{label} {translate(key)}" for label, key in help_rows(commands)]
    height = help_height(state.full_help)
    lines: List[Line] = [[("class:border", "─" * max(1, width))]]
    if not state.full_help:
        lines.append(_text_line(" · ".join(rows), width, "class:help.text"))
        return _fit(lines, height)
    cell = max(display_width(row) for row in rows) + 3 if rows else width
    per_line = max(1, width // max(1, cell))
    for start in range(0, len(rows), per_line):
        chunk = rows[start : start + per_line]
        text = "".join(pad_display(row, cell) for row in chunk)
        lines.append(_text_line(text.rstrip(), width, "class:help.text"))
    return _fit(lines, height)


def _action_input_lines(state: tui_detail.DetailState, width: int) -> List[Line]:
    action = state.action
    label = f"{translate('ACTION_INPUT_TITLE')} ({action.target_id}): "
    shown = action.buffer or translate("ACTION_INPUT_PLACEHOLDER")
    budget = max(1, width - display_width(label) - 1)
    # keep the tail of a long buffer in view
    while display_width(shown) > budget:
        shown = shown[1:]
    value_style = "class:input" if action.buffer else "class:input class:text.dim"
    lines: List[Line] = [
        [("class:header", label), (value_style, shown), ("class:input", "▏")],
        _text_line(
            f"{translate('ACTION_INPUT_HINT')}  {len(action.buffer)}/{action.char_limit}", width, "class:text.dim"
        ),
    ]
    return _fit(lines, help_height(state.full_help))


def render_loading(state: ScreenState, theme: Theme) -> FormattedText:
    width = content_width(state)
    frame = SPINNER_FRAMES[state.spinner % len(SPINNER_FRAMES)]
    text = translate(LOADING_KEYS.get(state.route.kind, "LOADING_DASHBOARD"), ident=state.route.ident)
    lines: List[Line] = [[], [("class:spinner", f"  {frame} "), ("class:text", trim_display(text, max(1, width - 4)))]]
    return _to_formatted(_fit(lines, state.height))


def render_error(state: ScreenState, theme: Theme) -> FormattedText:
    width = content_width(state)
    lines: List[Line] = [_text_line(translate("ERROR_TITLE"), width, "class:error"), []]
    for text in wrap_display(state.error, width):
        lines.append(_text_line(text, width, "class:text"))
    lines.append([])
    lines.append(_text_line(translate("ERROR_HINT"), width, "class:text.dim"))
    return _to_formatted(_fit(lines, state.height))


def _common(state: ScreenState, theme: Theme, body):
    if state.phase is ScreenPhase.LOADING:
        return render_loading(state, theme)
    if state.phase is ScreenPhase.ERROR:
        return render_error(state, theme)
    return body()


# ---- dashboard -------------------------------------------------------------


def render_dashboard(state: tui_dashboard.DashboardState, theme: Theme) -> FormattedText:
    return _common(state, theme, lambda: _render_dashboard(state, theme))


def _render_dashboard(state: tui_dashboard.DashboardState, theme: Theme) -> FormattedText:
    width = content_width(state)
    view = state.view
    header: List[Line] = [
        _text_line(translate("DASHBOARD_TITLE"), width, "class:header"),
        _text_line(f"{translate('VISION')}: {view.vision}" if view.vision else "", width, "class:text.dim"),
        _text_line(
            f"{translate('SUCCESS_CRITERIA')}: {view.success_criteria}" if view.success_criteria else "",
            width,
            "class:text.dim",
        ),
        [],
    ]
    vp = state.viewport
    start, end = vp.visible_range(state.total)
    body: List[Line] = []
    if not view.rows:
        body.append(_text_line(translate("EMPTY_DASHBOARD"), width, "class:text.dim"))
    for idx in range(start, end):
        body.append(dashboard_line(view.rows[idx], width, selected=idx == state.selected))
    footer = [
        _indicator_line(start > 0, end < state.total, width),
        _text_line(state.notice, width, "class:text.dim"),
    ]
    lines = _fit(header, tui_dashboard.BUDGET.header) + _fit(body, vp.height) + footer
    lines += _help_lines(state, tui_dashboard.HELP_COMMANDS, width)
    return _to_formatted(_fit(lines, state.height))


# ---- detail ----------------------------------------------------------------


def _detail_header(state: tui_detail.DetailState, width: int) -> List[Line]:
    view = state.view
    title = translate(TITLE_KEYS.get(view.kind, "TASK_TITLE"), ident=view.ident, name=view.title)
    status = f"{translate('STATUS')}: {view.status}" if view.status else ""
    if view.progress is not None and view.progress.total:
        progress = translate(
            "PROGRESS",
            completed=view.progress.completed,
            total=view.progress.total,
            percent=view.progress.percent,
        )
        status = f"{status}   {progress}".strip()
    meta = " · ".join(view.meta) if view.meta else (view.description.splitlines() or [""])[0]
    tabs: Line = []
    for idx, tab in enumerate(state.tabs):
        style = "class:tab.active" if idx == state.tab else "class:tab"
        if idx:
            tabs.append(("class:border", " │ "))
        tabs.append((style, translate(TAB_LABEL_KEYS.get(tab, "TAB_TASKS"))))
    return [
        _text_line(title, width, "class:header"),
        _text_line(status, width, "class:text"),
        _text_line(meta, width, "class:text.dim"),
        tabs,
    ]


def _document_row_line(row: DocumentRow, width: int, *, selected: bool) -> Line:
    label = f"[{row.status.label}]"
    text = trim_display(f"  {row.ident}  {row.title}  ({row.type_label})", max(1, width - len(label) - 1), "…")
    if selected:
        return [("class:selected", pad_display(f"{text} {label}", width))]
    return [("class:text", text), ("", " "), (f"class:{row.status.style}", label)]


def _detail_body(state: tui_detail.DetailState, theme: Theme, width: int) -> Tuple[List[Line], bool, bool]:
    items = state.items
    vp = state.viewport
    if not items:
        return [_text_line(translate(EMPTY_KEYS[state.active_tab]), width, "class:text.dim")], False, False
    if isinstance(vp, MultilineViewport):
        counts = tui_detail.line_counts(state)
        first, last, line_offset = vp.visible_range(counts)
        body: List[Line] = []
        for idx in range(first, last + 1):
            lines = criterion_lines(items[idx], width, selected=idx == state.selected, theme=theme)
            body.extend(lines[line_offset:] if idx == first else lines)
            if len(body) >= vp.height:
                break
        top = sum(counts[:first]) + line_offset
        return body[: vp.height], top > 0, top + vp.height < sum(counts)
    start, end = vp.visible_range(len(items))
    body = []
    for idx in range(start, end):
        selected = idx == state.selected
        if state.active_tab == tui_detail.TAB_DOCUMENTS:
            body.append(_document_row_line(items[idx], width, selected=selected))
        else:
            body.append(task_line(items[idx], width, selected=selected))
    return body, start > 0, end < len(items)


def render_detail(state: tui_detail.DetailState, theme: Theme) -> FormattedText:
    if state.phase is ScreenPhase.ACTION_INPUT:
        return _render_detail(state, theme)
    return _common(state, theme, lambda: _render_detail(state, theme))


def _render_detail(state: tui_detail.DetailState, theme: Theme) -> FormattedText:
    width = content_width(state)
    body, above, below = _detail_body(state, theme, width)
    footer = [_indicator_line(above, below, width), _text_line(state.notice, width, "class:text.dim")]
    lines = _fit(_detail_header(state, width), tui_detail.BUDGET.header)
    lines += _fit(body, state.viewport.height) + footer
    if state.phase is ScreenPhase.ACTION_INPUT:
        lines += _action_input_lines(state, width)
    else:
        lines += _help_lines(state, tui_detail.HELP_COMMANDS, width)
    return _to_formatted(_fit(lines, state.height))


# ---- document --------------------------------------------------------------


def render_document(state: tui_document.DocumentState, theme: Theme) -> FormattedText:
    return _common(state, theme, lambda: _render_document(state, theme))


def _render_document(state: tui_document.DocumentState, theme: Theme) -> FormattedText:
    width = content_width(state)
    view = state.view
    meta = [f"{translate('DOCUMENT_TYPE')}: {view.type_label}", f"{translate('STATUS')}: {view.status.label}"]
    if view.track_id:
        meta.append(f"{translate('DOCUMENT_TRACK')}: {view.track_id}")
    if view.iteration_number is not None:
        meta.append(f"{translate('DOCUMENT_ITERATION')}: #{view.iteration_number}")
    header: List[Line] = [
        _text_line(f"{view.ident}: {view.title}", width, "class:header"),
        _text_line("   ".join(meta), width, "class:text.dim"),
        [("class:border", "─" * width)],
    ]
    vp = state.viewport
    start, end = vp.visible_range(state.total)
    body = [_text_line(state.lines[idx], width) for idx in range(start, end)]
    position = vp.scroll_position(state.total)
    footer = [[("class:indicator", pad_display("", max(0, width - display_width(position))) + position)]]
    lines = _fit(header, tui_document.BUDGET.header) + _fit(body, vp.height) + footer
    lines += _help_lines(state, tui_document.HELP_COMMANDS, width)
    return _to_formatted(_fit(lines, state.height))


__all__ = [
    "render_loading",
    "render_error",
    "render_dashboard",
    "render_detail",
    "render_document",
]
