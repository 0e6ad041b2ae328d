"""Environment-then-file selection as an explicit phase machine.

The session starts in ``AWAITING_ENV`` (or ``AWAITING_FILE`` when the
environment was supplied on the command line and is locked) and ends in
``DONE`` or ``CANCELLED``. Which pane has focus is derived from the phase.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..input import KeyComboRegistry
from ..input.keys import DOWN_KEYS, KEY_ENTER, KEY_ESC, KEY_QUIT, KEY_TAB, UP_KEYS
from ..selection import DEFAULT_SCROLL_MARGIN, SessionResult
from ..ui_theme import DEFAULT_THEME, UITheme
from .pane import Pane

logger = logging.getLogger(__name__)

DEFAULT_ENV_VALUE = "global"
ENV_TITLE = "Environment"
ENV_PROMPT = "Select Environment: "
FILE_TITLE = "Request File"
FILE_PROMPT = "Select File: "

# title + bordered input (3 rows) + separator
PANE_OVERHEAD = 5
# leading blank, section gap, pre-help gap, help line, trailing blank
FRAME_OVERHEAD = 5
MIN_AVAILABLE_ROWS = 4


class Phase(enum.Enum):
    AWAITING_ENV = "awaiting_env"
    AWAITING_FILE = "awaiting_file"
    DONE = "done"
    CANCELLED = "cancelled"


class PaneFocus(enum.Enum):
    ENV = "env"
    FILE = "file"


@dataclass(frozen=True)
class DualPaneSelection:
    env: str
    file: str


def partition_heights(height: int, env_locked: bool) -> tuple[int, int]:
    """Split ``height`` rows between the env and file pane viewports."""
    overhead = FRAME_OVERHEAD + 2 * PANE_OVERHEAD
    if env_locked:
        overhead += 1  # locked note
    available = max(height - overhead, MIN_AVAILABLE_ROWS)
    if env_locked:
        return 1, max(available - 1, 1)
    env_height = max(available // 3, 1)
    return env_height, max(available - env_height, 1)


class DualPaneSession:
    """Pick an environment, then a request file that depends on it.

    ``initial_env`` seeds the selected environment. With ``env_locked`` the
    environment pane is read-only, tab cannot reach it, and escape on the
    file pane cancels instead of going back.
    """

    def __init__(
        self,
        env_items: Sequence[str],
        file_items: Sequence[str],
        initial_env: str = "",
        env_locked: bool = False,
        *,
        theme: UITheme = DEFAULT_THEME,
        scroll_margin: int = DEFAULT_SCROLL_MARGIN,
    ) -> None:
        self.env_pane = Pane(ENV_TITLE, ENV_PROMPT, env_items, scroll_margin=scroll_margin)
        self.file_pane = Pane(FILE_TITLE, FILE_PROMPT, file_items, scroll_margin=scroll_margin)
        self.env_locked = env_locked
        self.selected_env = initial_env
        self.selected_file = ""
        self.theme = theme
        self.width = 0
        self.height = 0
        self.phase = Phase.AWAITING_FILE if env_locked else Phase.AWAITING_ENV
        self._keys = (
            KeyComboRegistry()
            .bind(self._quit, KEY_QUIT)
            .bind(self.toggle_focus, KEY_TAB)
            .bind(self._enter, KEY_ENTER)
            .bind(self._cancel, KEY_ESC)
            .bind(lambda: self._move(-1), *UP_KEYS)
            .bind(lambda: self._move(1), *DOWN_KEYS)
        )

    @property
    def focus(self) -> PaneFocus:
        return PaneFocus.ENV if self.phase is Phase.AWAITING_ENV else PaneFocus.FILE

    @property
    def done(self) -> bool:
        return self.phase in (Phase.DONE, Phase.CANCELLED)

    @property
    def cancelled(self) -> bool:
        return self.phase is Phase.CANCELLED

    def focused_pane(self) -> Pane:
        return self.env_pane if self.focus is PaneFocus.ENV else self.file_pane

    def _transition(self, phase: Phase) -> None:
        if phase is not self.phase:
            logger.debug("dual pane %s -> %s", self.phase.value, phase.value)
        self.phase = phase

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        env_height, file_height = partition_heights(height, self.env_locked)
        self.env_pane.allocate(width, env_height)
        self.file_pane.allocate(width, file_height)
        self.env_pane.sync_viewport(self.theme)
        self.file_pane.sync_viewport(self.theme)

    def handle_key(self, key: str) -> None:
        if self.done:
            return
        if self._keys.dispatch(key):
            return
        # A locked env pane never takes text; typing goes to the file filter.
        pane = self.env_pane if self.focus is PaneFocus.ENV and not self.env_locked else self.file_pane
        if pane.list.edit(key):
            pane.sync_viewport(self.theme)

    def toggle_focus(self) -> None:
        if self.focus is PaneFocus.ENV:
            self._transition(Phase.AWAITING_FILE)
        elif not self.env_locked:
            self._transition(Phase.AWAITING_ENV)

    def _quit(self) -> None:
        self._transition(Phase.CANCELLED)

    def _enter(self) -> None:
        if self.focus is PaneFocus.ENV:
            if self.env_locked:
                self._transition(Phase.AWAITING_FILE)
                return
            value, ok = self.env_pane.list.select_current()
            if not ok:
                return
            self.selected_env = value
            self._transition(Phase.AWAITING_FILE)
            return

        if not self.selected_env and not self.env_locked:
            # Files depend on an environment; send the user back for one.
            self._transition(Phase.AWAITING_ENV)
            return
        value, ok = self.file_pane.list.select_current()
        if not ok:
            return
        self.selected_file = value
        self._transition(Phase.DONE)

    def _cancel(self) -> None:
        pane = self.focused_pane()
        if self.focus is PaneFocus.ENV:
            if pane.list.has_filter_value() and not self.env_locked:
                pane.list.clear_filter()
                pane.sync_viewport(self.theme)
                return
            self._transition(Phase.CANCELLED)
            return

        if pane.list.has_filter_value():
            pane.list.clear_filter()
            pane.sync_viewport(self.theme)
        elif self.env_locked:
            self._transition(Phase.CANCELLED)
        else:
            self._transition(Phase.AWAITING_ENV)

    def _move(self, direction: int) -> None:
        if self.focus is PaneFocus.ENV and self.env_locked:
            return
        pane = self.focused_pane()
        pane.list.move_cursor(direction)
        pane.sync_viewport(self.theme)

    def render(self) -> list[str]:
        from .rendering import render_dual_pane

        return render_dual_pane(self)

    def result(self) -> SessionResult[DualPaneSelection]:
        if self.phase is not Phase.DONE:
            return SessionResult.cancel()
        return SessionResult.selected(DualPaneSelection(env=self.selected_env, file=self.selected_file))
