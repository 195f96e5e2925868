from dataclasses import dataclass

MIN_TERM_WIDTH = 20
MIN_CONTENT_WIDTH = 30


@dataclass(frozen=True)
class ScreenBudget:
    """Rows a screen reserves around its scrollable region."""
    header: int
    footer: int
    minimum: int = 1

    def viewport_height(self, term_height: int) -> int:
        return max(self.minimum, term_height - self.header - self.footer)


def detail_content_width(term_width: int) -> int:
    """Adaptive content width for list and document bodies."""
    tw = max(MIN_TERM_WIDTH, term_width)
    if tw < 80:
        base = tw - 4
    elif tw < 120:
        base = tw - 6
    else:
        base = int(tw * 0.9)
    return max(MIN_CONTENT_WIDTH, min(base, tw - 2, 160))


def help_height(full: bool) -> int:
    """Footer rows used by the key help: one short line or the full table."""
    return 6 if full else 2
