"""Selection core: cursor math, viewport sync, and the filterable list.

Nothing in this package touches the terminal; sessions in
``lazypick.selector``, ``lazypick.dual_pane`` and ``lazypick.explorer`` build
on these primitives.
"""

from .cursor import clamp_cursor, move_cursor, move_down, move_up
from .editing import append_text, clear_line, delete_char, delete_last_word, edit_filter_text
from .filterable_list import LIST_PADDING, NO_MATCHES_LABEL, SELECTED_PREFIX, FilterableList
from .session import EmptyCandidatesError, SessionResult
from .viewport import DEFAULT_SCROLL_MARGIN, Viewport, sync_offset

__all__ = [
    "DEFAULT_SCROLL_MARGIN",
    "EmptyCandidatesError",
    "FilterableList",
    "LIST_PADDING",
    "NO_MATCHES_LABEL",
    "SELECTED_PREFIX",
    "SessionResult",
    "Viewport",
    "append_text",
    "clamp_cursor",
    "clear_line",
    "delete_char",
    "delete_last_word",
    "edit_filter_text",
    "move_cursor",
    "move_down",
    "move_up",
    "sync_offset",
]
