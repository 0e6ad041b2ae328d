"""Full-screen operation explorer session.

Normal mode filters the operation list from the search text. Typing a
trailing ``e:`` with several endpoints opens the endpoint picker sub-mode,
which edits a draft of the active endpoint set until enter or escape.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping, Sequence

from ..input import KeyComboRegistry
from ..input.keys import DOWN_KEYS, KEY_ENTER, KEY_ESC, KEY_J, KEY_K, KEY_QUIT, KEY_SPACE, KEY_TAB, UP_KEYS
from ..selection import DEFAULT_SCROLL_MARGIN, SessionResult, Viewport
from ..selection.cursor import clamp_cursor, move_cursor
from ..selection.editing import edit_filter_text
from ..ui_theme import DEFAULT_THEME, UITheme
from .endpoint_picker import EndpointPicker
from .filtering import (
    build_filter_hint,
    collect_endpoints,
    filter_operations,
    should_enter_endpoint_picker,
    strip_endpoint_trigger,
)
from .operations import InputType, Operation, sort_by_kind
from .rendering import render_detail, render_endpoint_picker, render_operation_list

logger = logging.getLogger(__name__)

MIN_LIST_WIDTH = 26
MIN_DETAIL_WIDTH = 32
# border (2) + search box (3) + hint + status + gap + help + badges
LIST_CHROME_ROWS = 10
BOX_MARGIN = 4


class Panel(enum.Enum):
    LIST = "list"
    DETAIL = "detail"


class OperationExplorer:
    """Browse operations and commit one.

    Enter on the list moves focus to the detail panel when both fit side by
    side; enter on the detail panel, or on the list in a single-panel layout,
    ends the session with the highlighted operation.
    """

    def __init__(
        self,
        operations: Sequence[Operation],
        input_types: Mapping[str, InputType] | None = None,
        *,
        theme: UITheme = DEFAULT_THEME,
        scroll_margin: int = DEFAULT_SCROLL_MARGIN,
    ) -> None:
        self.operations = sort_by_kind(operations)
        self.input_types = dict(input_types or {})
        self.theme = theme
        self.scroll_margin = scroll_margin
        self.endpoints = collect_endpoints(self.operations)
        self.filter_hint = build_filter_hint(self.operations, self.endpoints)
        self.picker = EndpointPicker(self.endpoints)
        self.filter_text = ""
        self.filtered: list[Operation] = list(self.operations)
        self.cursor = 0
        self.focus = Panel.LIST
        self.width = 80
        self.height = 24
        self.viewport = Viewport(width=MIN_LIST_WIDTH, height=max(self.height - LIST_CHROME_ROWS, 1))
        self.detail_offset = 0
        self.selected: Operation | None = None
        self.cancelled = False
        self.done = False
        self._keys = (
            KeyComboRegistry()
            .bind(self._quit, KEY_QUIT)
            .bind(self._cancel, KEY_ESC)
            .bind(self._enter, KEY_ENTER)
            .bind(self._toggle_panel, KEY_TAB)
            .bind(lambda: self._scroll(-1), *UP_KEYS)
            .bind(lambda: self._scroll(1), *DOWN_KEYS)
        )
        self._picker_keys = (
            KeyComboRegistry()
            .bind(self._quit, KEY_QUIT)
            .bind(self._discard_picker, KEY_ESC)
            .bind(self._commit_picker, KEY_ENTER)
            .bind(self.picker.toggle, KEY_SPACE)
            .bind(lambda: self._move_picker(-1), *UP_KEYS, KEY_K)
            .bind(lambda: self._move_picker(1), *DOWN_KEYS, KEY_J)
        )
        self.sync_viewport()

    # Layout

    @property
    def inner_width(self) -> int:
        return max(self.width - BOX_MARGIN, 1)

    def is_two_panel(self) -> bool:
        return self.inner_width >= MIN_LIST_WIDTH + MIN_DETAIL_WIDTH

    def list_width(self) -> int:
        inner = self.inner_width
        if not self.is_two_panel():
            return inner
        return max(MIN_LIST_WIDTH, min(inner * 2 // 5, inner - MIN_DETAIL_WIDTH))

    def detail_width(self) -> int:
        if not self.is_two_panel():
            return 0
        return self.inner_width - self.list_width()

    def active_scroll_panel(self) -> Panel:
        if self.picker.is_open:
            return Panel.LIST
        return self.focus

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.viewport.width = self.list_width()
        self.viewport.height = max(height - LIST_CHROME_ROWS, 1)
        if not self.is_two_panel() and self.focus is Panel.DETAIL:
            self._set_focus(Panel.LIST)
        self.sync_viewport()

    def sync_viewport(self) -> None:
        if self.picker.is_open:
            content, cursor_line = render_endpoint_picker(self.picker, self.theme)
        else:
            content, cursor_line = render_operation_list(self.filtered, self.cursor, self.theme, self.viewport.width)
        self.viewport.sync(content, cursor_line, self.scroll_margin)

    # State

    @property
    def pending_endpoints(self) -> set[str] | None:
        return self.picker.pending

    @property
    def active_endpoints(self) -> frozenset[str]:
        return self.picker.active

    def current_operation(self) -> Operation | None:
        if not self.filtered or not 0 <= self.cursor < len(self.filtered):
            return None
        return self.filtered[self.cursor]

    def apply_filter(self) -> None:
        self.filtered = filter_operations(self.operations, self.filter_text, self.picker.active)
        self.cursor = clamp_cursor(self.cursor, len(self.filtered) - 1)
        self.detail_offset = 0

    def set_filter_text(self, text: str) -> None:
        """Set the search text as if typed: may open the endpoint picker."""
        if text == self.filter_text:
            return
        self.filter_text = text
        if should_enter_endpoint_picker(text, len(self.endpoints)):
            self.picker.open()
            self.sync_viewport()
            return
        self.apply_filter()
        self.viewport.goto_top()
        self.sync_viewport()

    def _set_focus(self, panel: Panel) -> None:
        if panel is not self.focus:
            logger.debug("explorer focus %s -> %s", self.focus.value, panel.value)
        self.focus = panel

    # Key handling

    def handle_key(self, key: str) -> None:
        if self.done:
            return
        if self.picker.is_open:
            self._picker_keys.dispatch(key)
            self.sync_viewport()
            return
        if self._keys.dispatch(key):
            return
        updated = edit_filter_text(self.filter_text, key)
        if updated is None:
            return
        self._set_focus(Panel.LIST)
        self.set_filter_text(updated)

    def _quit(self) -> None:
        self.cancelled = True
        self.done = True

    def _cancel(self) -> None:
        if self.filter_text:
            self.filter_text = ""
            self.apply_filter()
            self.viewport.goto_top()
            self.sync_viewport()
            return
        self._quit()

    def _enter(self) -> None:
        op = self.current_operation()
        if op is None:
            return
        if self.is_two_panel() and self.focus is Panel.LIST:
            self._set_focus(Panel.DETAIL)
            return
        self.selected = op
        self.done = True
        logger.debug("explorer selected %s %s", op.kind.value, op.name)

    def _toggle_panel(self) -> None:
        if not self.is_two_panel():
            return
        self._set_focus(Panel.DETAIL if self.focus is Panel.LIST else Panel.LIST)

    def _scroll(self, direction: int) -> None:
        if self.active_scroll_panel() is Panel.DETAIL:
            self.detail_offset = max(0, self.detail_offset + direction)
            return
        self.cursor = move_cursor(self.cursor, direction, len(self.filtered) - 1)
        self.detail_offset = 0
        self.sync_viewport()

    def _move_picker(self, direction: int) -> None:
        self.picker.move(direction)

    def _commit_picker(self) -> None:
        self.picker.commit()
        self.filter_text = strip_endpoint_trigger(self.filter_text)
        self.apply_filter()
        self.viewport.goto_top()

    def _discard_picker(self) -> None:
        self.picker.discard()
        self.filter_text = strip_endpoint_trigger(self.filter_text)
        self.apply_filter()

    # Output

    def detail_lines(self) -> list[str]:
        op = self.current_operation()
        if op is None:
            return []
        return render_detail(op, self.input_types, self.theme)

    def render(self) -> list[str]:
        from .layout import render_explorer

        return render_explorer(self)

    def result(self) -> SessionResult[Operation]:
        if self.cancelled or self.selected is None:
            return SessionResult.cancel()
        return SessionResult.selected(self.selected)
