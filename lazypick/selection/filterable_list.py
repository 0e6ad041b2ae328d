"""Headless filterable string list with cursor tracking.

``FilterableList`` owns one immutable candidate sequence, the live filter text,
the filtered subset derived from it, and a cursor into that subset. It performs
no I/O; sessions embed it and feed it key tokens.

Matching is case-insensitive substring containment. Candidates are lowercased
once at construction so a filter pass is a single linear scan.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..ansi import display_width, truncate_with_ellipsis
from ..ui_theme import UITheme
from .cursor import clamp_cursor, move_cursor
from .editing import edit_filter_text

logger = logging.getLogger(__name__)

LIST_PADDING = "   "
SELECTED_PREFIX = ">  "
NO_MATCHES_LABEL = "(no matches)"
INPUT_CURSOR = "█"


class FilterableList:
    """Filtered view over ``items`` with an ``eager`` or ``gated`` empty state.

    An eager list (``require_input=False``) shows every candidate while the
    filter is empty. A gated list (``require_input=True``) shows nothing until
    at least one character has been typed.
    """

    def __init__(
        self,
        items: Sequence[str],
        *,
        prompt: str = "",
        placeholder: str = "",
        require_input: bool = False,
    ) -> None:
        self.items: tuple[str, ...] = tuple(items)
        self._lower_items = tuple(item.lower() for item in self.items)
        self.prompt = prompt
        self.placeholder = placeholder
        self.require_input = require_input
        self.filter_text = ""
        self.filtered: list[str] = [] if require_input else list(self.items)
        self.cursor = 0

    def apply_filter(self, text: str) -> None:
        """Set the filter text and recompute the filtered subset."""
        self.filter_text = text
        if not text:
            self.filtered = [] if self.require_input else list(self.items)
        else:
            needle = text.lower()
            self.filtered = [
                item for item, lowered in zip(self.items, self._lower_items) if needle in lowered
            ]
        self.cursor = clamp_cursor(self.cursor, len(self.filtered) - 1)
        logger.debug("filter %r matched %d/%d", text, len(self.filtered), len(self.items))

    def clear_filter(self) -> None:
        self.apply_filter("")

    def has_filter_value(self) -> bool:
        return self.filter_text != ""

    def move_cursor(self, direction: int) -> None:
        self.cursor = move_cursor(self.cursor, direction, len(self.filtered) - 1)

    def select_current(self) -> tuple[str, bool]:
        """Return ``(value, True)`` for the highlighted row, else ``("", False)``."""
        if not self.filtered or not 0 <= self.cursor < len(self.filtered):
            return "", False
        return self.filtered[self.cursor], True

    def edit(self, key: str) -> bool:
        """Apply an editing key to the filter text.

        Returns whether ``key`` was an editing key. The filter pass only reruns
        when the text actually changed.
        """
        updated = edit_filter_text(self.filter_text, key)
        if updated is None:
            return False
        if updated != self.filter_text:
            self.apply_filter(updated)
        return True

    def render_items(self, theme: UITheme, max_width: int = 0) -> tuple[str, int]:
        """Render filtered rows with a marker on the cursor row.

        Returns the content and the line index of the cursor, ready to pass
        to :meth:`Viewport.sync`. ``max_width`` of 0 disables truncation.
        """
        if not self.filtered:
            if self.require_input and not self.has_filter_value():
                return "", 0
            return theme.paint(theme.help, LIST_PADDING + NO_MATCHES_LABEL), 0

        selected_avail = max_width - display_width(SELECTED_PREFIX)
        list_avail = max_width - display_width(LIST_PADDING)
        lines: list[str] = []
        cursor_line = 0
        for idx, item in enumerate(self.filtered):
            selected = idx == self.cursor
            display = item
            if max_width > 0:
                display = truncate_with_ellipsis(item, selected_avail if selected else list_avail)
            if selected:
                cursor_line = len(lines)
                lines.append(theme.paint(theme.subtitle, SELECTED_PREFIX + display))
            else:
                lines.append(LIST_PADDING + display)
        return "\n".join(lines), cursor_line

    def render_prompt(self, theme: UITheme, *, focused: bool = True) -> str:
        """Render the prompt row: label, typed text or dim placeholder, cursor."""
        cursor = INPUT_CURSOR if focused else ""
        if self.filter_text:
            return f"{self.prompt}{self.filter_text}{cursor}"
        return f"{self.prompt}{cursor}{theme.paint(theme.help, self.placeholder)}"
