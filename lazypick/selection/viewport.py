"""Scroll synchronization between a list cursor and a fixed-height window.

The policy is hysteresis rather than recentering: the offset only moves when
the cursor leaves the window or enters the bottom scroll margin.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_SCROLL_MARGIN = 3


def sync_offset(cursor_line: int, height: int, offset: int, scroll_margin: int = DEFAULT_SCROLL_MARGIN) -> int:
    """Return a new scroll offset keeping ``cursor_line`` inside the window.

    The result may be negative for tiny contents; :meth:`Viewport.sync`
    applies the final ``max(0, ...)`` guard.
    """
    if cursor_line < offset:
        return max(0, cursor_line - 1)
    if cursor_line + scroll_margin >= offset + height:
        return cursor_line - height + 1 + scroll_margin
    return offset


@dataclass
class Viewport:
    """Visible window onto pre-rendered list content."""

    width: int = 0
    height: int = 1
    offset: int = 0
    lines: list[str] = field(default_factory=list)

    def set_content(self, content: str) -> None:
        self.lines = content.split("\n") if content else []
        self.offset = max(0, min(self.offset, self.max_offset()))

    def max_offset(self) -> int:
        return max(0, len(self.lines) - max(1, self.height))

    def set_offset(self, offset: int) -> None:
        self.offset = max(0, min(offset, self.max_offset()))

    def goto_top(self) -> None:
        self.offset = 0

    def sync(self, content: str, cursor_line: int, scroll_margin: int = DEFAULT_SCROLL_MARGIN) -> None:
        """Replace content and scroll so the cursor line stays visible.

        A margin as large as the window would push the cursor past the top
        edge, so the offset is finally bounded to keep ``cursor_line`` shown.
        """
        self.set_content(content)
        height = max(1, self.height)
        offset = sync_offset(cursor_line, height, self.offset, scroll_margin)
        offset = max(min(offset, cursor_line), cursor_line - height + 1)
        self.set_offset(offset)

    def visible_lines(self) -> list[str]:
        return self.lines[self.offset : self.offset + max(1, self.height)]

    def scroll_percent(self) -> float:
        """Return how far the window has scrolled, in ``[0.0, 1.0]``."""
        if len(self.lines) <= self.height:
            return 1.0
        return max(0.0, min(1.0, self.offset / self.max_offset()))
