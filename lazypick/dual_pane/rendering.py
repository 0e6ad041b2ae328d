"""Frame rendering for :class:`DualPaneSession`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..chrome import bordered_input
from ..ui_theme import UITheme
from .pane import Pane

if TYPE_CHECKING:
    from .coordinator import DualPaneSession

SELECTED_CHEVRON = "> "
LOCKED_NOTE = "Environment is locked by --env. Rerun without --env to change it interactively."
HELP_TEXT = "enter: select | tab: switch env/file | esc: clear/back/cancel | arrows: navigate"


def render_section(
    pane: Pane,
    theme: UITheme,
    width: int,
    *,
    focused: bool,
    locked: bool = False,
    locked_value: str = "",
) -> list[str]:
    if locked:
        title = theme.paint(theme.title_muted, pane.title)
        input_rows = bordered_input(pane.list.prompt + locked_value, width, theme.border, theme)
        rows = [theme.paint(theme.subtitle, SELECTED_CHEVRON + locked_value)]
    elif focused:
        title = theme.paint(theme.title, pane.title)
        input_rows = bordered_input(pane.list.render_prompt(theme), width, theme.border_focused, theme)
        rows = pane.rendered_rows(theme)
    else:
        title = theme.paint(theme.title_muted, pane.title)
        input_rows = bordered_input(pane.list.render_prompt(theme, focused=False), width, theme.border, theme)
        rows = pane.rendered_rows(theme)
    return [title, *input_rows, *rows]


def render_dual_pane(session: DualPaneSession) -> list[str]:
    from .coordinator import DEFAULT_ENV_VALUE, PaneFocus

    theme = session.theme
    width = session.width or 80
    locked_value = session.selected_env or DEFAULT_ENV_VALUE
    env_rows = render_section(
        session.env_pane,
        theme,
        width,
        focused=session.focus is PaneFocus.ENV and not session.env_locked,
        locked=session.env_locked,
        locked_value=locked_value,
    )
    file_rows = render_section(session.file_pane, theme, width, focused=session.focus is PaneFocus.FILE)

    lines = [""]
    if session.env_locked:
        lines.append(theme.paint(theme.help, LOCKED_NOTE))
    lines.extend(env_rows)
    lines.append("")
    lines.extend(file_rows)
    lines.append("")
    lines.append(theme.paint(theme.help, HELP_TEXT))
    return lines
