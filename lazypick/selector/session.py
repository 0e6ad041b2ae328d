"""Single-list picker session.

Use it for one-list prompts such as picking an environment or a request file.
Multi-pane flows live in :mod:`lazypick.dual_pane`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..chrome import bordered_input
from ..input import KeyComboRegistry
from ..input.keys import DOWN_KEYS, KEY_ENTER, KEY_ESC, KEY_QUIT, UP_KEYS
from ..selection import DEFAULT_SCROLL_MARGIN, FilterableList, SessionResult, Viewport
from ..ui_theme import DEFAULT_THEME, UITheme

logger = logging.getLogger(__name__)

VIEWPORT_DEFAULT_WIDTH = 40
VIEWPORT_MIN_WIDTH = 10
# Three visible rows keep the picker compact on tall terminals.
VIEWPORT_MAX_HEIGHT = 3
FRAME_OVERHEAD = 8
HELP_TEXT = "enter: select | esc: cancel | arrows: navigate"


class SelectorSession:
    """Eager filterable list that ends on enter, escape, or quit."""

    def __init__(
        self,
        items: Sequence[str],
        prompt: str,
        *,
        theme: UITheme = DEFAULT_THEME,
        scroll_margin: int = DEFAULT_SCROLL_MARGIN,
    ) -> None:
        placeholder = items[0] if items else ""
        self.list = FilterableList(items, prompt=prompt, placeholder=placeholder)
        self.theme = theme
        self.scroll_margin = scroll_margin
        self.viewport = Viewport(width=VIEWPORT_DEFAULT_WIDTH, height=VIEWPORT_MAX_HEIGHT)
        self.selected: str | None = None
        self.cancelled = False
        self.done = False
        self._keys = (
            KeyComboRegistry()
            .bind(self._quit, KEY_QUIT)
            .bind(self._cancel, KEY_ESC)
            .bind(self._commit, KEY_ENTER)
            .bind(lambda: self._move(-1), *UP_KEYS)
            .bind(lambda: self._move(1), *DOWN_KEYS)
        )
        self.sync_viewport()

    def resize(self, width: int, height: int) -> None:
        self.viewport.width = max(min(width - 8, VIEWPORT_DEFAULT_WIDTH), VIEWPORT_MIN_WIDTH)
        self.viewport.height = min(max(height - FRAME_OVERHEAD, 1), VIEWPORT_MAX_HEIGHT)
        self.sync_viewport()

    def sync_viewport(self) -> None:
        content, cursor_line = self.list.render_items(self.theme, self.viewport.width)
        self.viewport.sync(content, cursor_line, self.scroll_margin)

    def handle_key(self, key: str) -> None:
        if self.done:
            return
        if self._keys.dispatch(key):
            return
        if self.list.edit(key):
            self.sync_viewport()

    def _quit(self) -> None:
        self.cancelled = True
        self.done = True

    def _cancel(self) -> None:
        if self.list.has_filter_value():
            self.list.clear_filter()
            self.sync_viewport()
            return
        self._quit()

    def _commit(self) -> None:
        value, ok = self.list.select_current()
        if not ok:
            return
        self.selected = value
        self.done = True
        logger.debug("selected %r", value)

    def _move(self, direction: int) -> None:
        self.list.move_cursor(direction)
        self.sync_viewport()

    def render(self) -> list[str]:
        theme = self.theme
        lines = [""]
        lines.extend(bordered_input(self.list.render_prompt(theme), self.viewport.width + 8, theme.border_focused, theme))
        lines.extend(self.viewport.visible_lines())
        lines.append(theme.paint(theme.help, HELP_TEXT))
        return lines

    def result(self) -> SessionResult[str]:
        if self.cancelled or self.selected is None:
            return SessionResult.cancel()
        return SessionResult.selected(self.selected)
