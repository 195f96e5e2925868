"""Display-width aware text helpers (wide glyphs count as two cells)."""

from typing import List

from wcwidth import wcwidth


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    if w is None or w < 0:
        return 0
    return w


def display_width(text: str) -> int:
    """Printable width of text, tabs expanded to 4."""
    return sum(_char_width(ch) for ch in (text or "").expandtabs(4))


def trim_display(text: str, width: int, ellipsis: str = "") -> str:
    """Cut text so its visible width does not exceed width."""
    text = (text or "").expandtabs(4)
    if width <= 0:
        return ""
    if display_width(text) <= width:
        return text
    if display_width(ellipsis) > width:
        ellipsis = ""
    budget = width - display_width(ellipsis)
    acc = []
    used = 0
    for ch in text:
        w = _char_width(ch)
        if used + w > budget:
            break
        acc.append(ch)
        used += w
    return "".join(acc) + ellipsis


def pad_display(text: str, width: int) -> str:
    trimmed = trim_display(text, width)
    return trimmed + " " * max(0, width - display_width(trimmed))


def _hard_wrap(word: str, width: int) -> List[str]:
    chunks: List[str] = []
    current = ""
    used = 0
    for ch in word:
        w = _char_width(ch)
        if used + w > width and current:
            chunks.append(current)
            current, used = ch, w
        else:
            current += ch
            used += w
    if current:
        chunks.append(current)
    return chunks


def wrap_display(text: str, width: int) -> List[str]:
    """
    Word-wrap text to width cells, keeping explicit newlines.

    Words wider than the line are split hard. An empty paragraph stays an empty
    line, so the result always has at least one entry.
    """
    width = max(1, width)
    text = (text or "").replace("\r\n", "\n").replace("\r", "\n").expandtabs(4)
    lines: List[str] = []
    for paragraph in text.split("\n"):
        indent = paragraph[: len(paragraph) - len(paragraph.lstrip(" "))]
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = indent if display_width(indent) < width else ""
        used = display_width(current)
        fresh = True
        for word in words:
            w = display_width(word)
            gap = 0 if fresh else 1
            if used + gap + w <= width:
                current += (" " if gap else "") + word
                used += gap + w
                fresh = False
                continue
            if not fresh:
                lines.append(current)
                current, used = "", 0
            if w > width:
                pieces = _hard_wrap(word, width)
                lines.extend(pieces[:-1])
                current, used = pieces[-1], display_width(pieces[-1])
            else:
                current, used = word, w
            fresh = False
        lines.append(current)
    return lines


__all__ = ["display_width", "trim_display", "pad_display", "wrap_display"]
