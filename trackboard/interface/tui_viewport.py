"""Viewport scrolling for list and document screens.

Three independent scrollers share the same shape: an ``offset`` (first visible
item or line) and a ``height`` (visible rows, never below 1). None of them
raise: indices, heights and line counts are clamped to the nearest valid value.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

DEFAULT_HEIGHT = 10


def _max_offset(total: int, height: int) -> int:
    return max(0, total - height)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def normalize_line_counts(line_counts: Sequence[int]) -> List[int]:
    """Every item occupies at least one line."""
    return [max(1, int(count)) for count in line_counts]


class LinearViewport:
    """Scrolling for flat lists where every item is exactly one line."""

    def __init__(self, height: int = DEFAULT_HEIGHT):
        self.offset = 0
        self.height = max(1, height)

    def __repr__(self) -> str:
        return f"LinearViewport(offset={self.offset}, height={self.height})"

    def set_height(self, height: int) -> None:
        self.height = max(1, height)

    def ensure_visible(self, total: int, selected: int) -> None:
        if total <= 0:
            self.offset = 0
            return
        selected = _clamp(selected, 0, total - 1)
        if selected < self.offset:
            self.offset = selected
        if selected >= self.offset + self.height:
            self.offset = selected - self.height + 1
        self.offset = _clamp(self.offset, 0, _max_offset(total, self.height))

    def visible_range(self, total: int) -> Tuple[int, int]:
        """Return ``(start, end)`` so that ``items[start:end]`` is on screen."""
        total = max(0, total)
        start = _clamp(self.offset, 0, _max_offset(total, self.height))
        return start, min(start + self.height, total)

    def page_up(self, total: int) -> int:
        """Select one full page above the current window; returns the new index."""
        if total <= 0:
            self.offset = 0
            return 0
        selected = max(0, self.offset - self.height)
        self.ensure_visible(total, selected)
        return selected

    def page_down(self, total: int, current: int) -> int:
        """Select one full page below ``current``; returns the new index."""
        if total <= 0:
            self.offset = 0
            return 0
        selected = _clamp(current + self.height, 0, total - 1)
        self.ensure_visible(total, selected)
        return selected


class MultilineViewport:
    """
    Scrolling for lists whose items span several lines (expanded criteria).

    The offset is measured in lines, so callers pass the current per-item line
    counts on every call. Counts must be rebuilt after any expand/collapse or
    width change; nothing is cached here.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT):
        self.offset = 0
        self.height = max(1, height)

    def __repr__(self) -> str:
        return f"MultilineViewport(offset={self.offset}, height={self.height})"

    def set_height(self, height: int) -> None:
        self.height = max(1, height)

    def ensure_visible(self, line_counts: Sequence[int], selected: int) -> None:
        counts = normalize_line_counts(line_counts)
        if not counts:
            self.offset = 0
            return
        selected = _clamp(selected, 0, len(counts) - 1)
        selected_line = sum(counts[:selected])
        item_lines = counts[selected]
        if selected_line < self.offset:
            self.offset = selected_line
        if selected_line + item_lines > self.offset + self.height:
            self.offset = selected_line + item_lines - self.height
        self.offset = _clamp(self.offset, 0, _max_offset(sum(counts), self.height))

    def visible_range(self, line_counts: Sequence[int]) -> Tuple[int, int, int]:
        """
        Return ``(first_item, last_item, line_offset)``.

        ``first_item`` is drawn starting at its ``line_offset``-th line, the items
        after it are drawn whole up to ``last_item`` (inclusive) while the height
        budget lasts. An empty list yields ``(0, -1, 0)``.
        """
        counts = normalize_line_counts(line_counts)
        if not counts:
            return 0, -1, 0
        offset = _clamp(self.offset, 0, _max_offset(sum(counts), self.height))

        first_item = 0
        current = 0
        for idx, count in enumerate(counts):
            if current + count > offset:
                first_item = idx
                break
            current += count
        line_offset = offset - current

        last_item = len(counts) - 1
        end_line = offset + self.height
        current = 0
        for idx, count in enumerate(counts):
            if current >= end_line:
                last_item = idx - 1
                break
            current += count
        return first_item, last_item, line_offset

    def total_lines(self, line_counts: Sequence[int]) -> int:
        return sum(normalize_line_counts(line_counts))


class DocumentViewport:
    """Line scroller over pre-wrapped text with a pager-style position label."""

    def __init__(self, height: int = DEFAULT_HEIGHT):
        self.offset = 0
        self.height = max(1, height)

    def __repr__(self) -> str:
        return f"DocumentViewport(offset={self.offset}, height={self.height})"

    def set_height(self, height: int) -> None:
        self.height = max(1, height)

    def clamp(self, total: int) -> None:
        self.offset = _clamp(self.offset, 0, _max_offset(total, self.height))

    def _page_step(self) -> int:
        # one line of overlap between pages
        return max(1, self.height - 1)

    def scroll_line_up(self, total: int) -> None:
        self.offset -= 1
        self.clamp(total)

    def scroll_line_down(self, total: int) -> None:
        self.offset += 1
        self.clamp(total)

    def scroll_page_up(self, total: int) -> None:
        self.offset -= self._page_step()
        self.clamp(total)

    def scroll_page_down(self, total: int) -> None:
        self.offset += self._page_step()
        self.clamp(total)

    def scroll_to_start(self) -> None:
        self.offset = 0

    def scroll_to_end(self, total: int) -> None:
        self.offset = _max_offset(total, self.height)

    def visible_range(self, total: int) -> Tuple[int, int]:
        total = max(0, total)
        start = _clamp(self.offset, 0, _max_offset(total, self.height))
        return start, min(start + self.height, total)

    def scroll_position(self, total: int) -> str:
        if total <= self.height:
            return "All"
        max_offset = _max_offset(total, self.height)
        offset = _clamp(self.offset, 0, max_offset)
        if offset == 0:
            return "Top"
        if offset >= max_offset:
            return "Bot"
        percent = _clamp(offset * 100 // max_offset, 1, 99)
        return f"{percent}%"


__all__ = [
    "DEFAULT_HEIGHT",
    "LinearViewport",
    "MultilineViewport",
    "DocumentViewport",
    "normalize_line_counts",
]
