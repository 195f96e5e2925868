"""Selection movement over the viewports; every move clamps and re-scrolls."""

from typing import Sequence

from trackboard.interface.tui_viewport import LinearViewport, MultilineViewport


def move_linear(viewport: LinearViewport, total: int, selected: int, delta: int) -> int:
    if total <= 0:
        viewport.ensure_visible(0, 0)
        return 0
    selected = max(0, min(selected + delta, total - 1))
    viewport.ensure_visible(total, selected)
    return selected


def page_linear(viewport: LinearViewport, total: int, selected: int, forward: bool) -> int:
    if forward:
        return viewport.page_down(total, selected)
    return viewport.page_up(total)


def jump_linear(viewport: LinearViewport, total: int, to_end: bool) -> int:
    return move_linear(viewport, total, total - 1 if to_end else 0, 0)


def move_multiline(viewport: MultilineViewport, line_counts: Sequence[int], selected: int, delta: int) -> int:
    total = len(line_counts)
    if total <= 0:
        viewport.ensure_visible([], 0)
        return 0
    selected = max(0, min(selected + delta, total - 1))
    viewport.ensure_visible(line_counts, selected)
    return selected


def page_multiline(viewport: MultilineViewport, line_counts: Sequence[int], selected: int, forward: bool) -> int:
    """Step over as many items as fit in one window (at least one)."""
    if not line_counts:
        return move_multiline(viewport, line_counts, 0, 0)
    budget = viewport.height
    step = 0
    idx = selected
    while True:
        nxt = idx + (1 if forward else -1)
        if nxt < 0 or nxt >= len(line_counts):
            break
        budget -= max(1, line_counts[nxt])
        if budget < 0 and step > 0:
            break
        idx = nxt
        step += 1
        if budget <= 0:
            break
    return move_multiline(viewport, line_counts, idx, 0)


def jump_multiline(viewport: MultilineViewport, line_counts: Sequence[int], to_end: bool) -> int:
    return move_multiline(viewport, line_counts, len(line_counts) - 1 if to_end else 0, 0)


__all__ = [
    "move_linear",
    "page_linear",
    "jump_linear",
    "move_multiline",
    "page_multiline",
    "jump_multiline",
]
