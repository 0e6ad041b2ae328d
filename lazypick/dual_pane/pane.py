"""One titled, gated filter pane with its own viewport."""

from __future__ import annotations

from collections.abc import Sequence

from ..selection import DEFAULT_SCROLL_MARGIN, FilterableList, Viewport
from ..ui_theme import UITheme


class Pane:
    """A gated :class:`FilterableList` plus the viewport height it was allotted."""

    def __init__(self, title: str, prompt: str, items: Sequence[str], *, scroll_margin: int = DEFAULT_SCROLL_MARGIN):
        placeholder = items[0] if items else ""
        self.title = title
        self.list = FilterableList(items, prompt=prompt, placeholder=placeholder, require_input=True)
        self.viewport = Viewport(height=1)
        self.allocated = 0
        self.scroll_margin = scroll_margin

    def allocate(self, width: int, height: int) -> None:
        self.viewport.width = width
        self.allocated = height

    def sync_viewport(self, theme: UITheme) -> None:
        """Re-render rows and shrink the window to the content, capped at the allotment."""
        content, cursor_line = self.list.render_items(theme, self.viewport.width)
        if self.allocated:
            line_count = content.count("\n") + 1 if content else 0
            self.viewport.height = min(self.allocated, max(line_count, 1))
        self.viewport.sync(content, cursor_line, self.scroll_margin)

    def rendered_rows(self, theme: UITheme) -> list[str]:
        if self.allocated:
            return self.viewport.visible_lines()
        content, _ = self.list.render_items(theme, self.viewport.width)
        return content.split("\n") if content else [""]
