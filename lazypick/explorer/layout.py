"""Compose the explorer's list column and detail column into one frame."""

from __future__ import annotations

from ..ansi import clip_ansi_line, pad_to_width
from ..chrome import bordered_input, boxed
from ..selection.filterable_list import INPUT_CURSOR
from .explorer import OperationExplorer, Panel
from .rendering import render_active_badges

SEARCH_PROMPT = "Search: "
SEARCH_PLACEHOLDER = "filter operations..."
HELP_NAVIGATION = "esc: quit | ↑/↓: navigate | tab: switch panel | enter: select"
HELP_ENDPOINT_PICKER = "k↑/j↓: navigate | space: toggle | enter: confirm | esc: cancel"
ENDPOINT_PICKER_TITLE = "Filter Endpoints:"
OPERATION_COUNT_FORMAT = "{shown}/{total} operations"
SEPARATOR = " │ "


def search_row(explorer: OperationExplorer) -> str:
    theme = explorer.theme
    if explorer.filter_text:
        return SEARCH_PROMPT + explorer.filter_text + INPUT_CURSOR
    return SEARCH_PROMPT + INPUT_CURSOR + theme.paint(theme.help, SEARCH_PLACEHOLDER)


def list_column(explorer: OperationExplorer) -> list[str]:
    theme = explorer.theme
    width = explorer.list_width()
    picking = explorer.picker.is_open
    rows: list[str] = []

    if explorer.picker.active:
        rows.append(render_active_badges(explorer.picker.active, theme, width))
    style = theme.border_focused if explorer.focus is Panel.LIST else theme.border
    rows.extend(bordered_input(search_row(explorer), width, style, theme))
    if explorer.filter_hint:
        rows.append(theme.paint(theme.help, " " + explorer.filter_hint))

    if picking:
        status = ENDPOINT_PICKER_TITLE
    else:
        status = OPERATION_COUNT_FORMAT.format(shown=len(explorer.filtered), total=len(explorer.operations))
    rows.append(theme.paint(theme.help, status))

    visible = explorer.viewport.visible_lines()
    rows.extend(visible)
    rows.extend([""] * max(0, explorer.viewport.height - len(visible)))

    help_text = HELP_ENDPOINT_PICKER if picking else HELP_NAVIGATION
    percent = explorer.viewport.scroll_percent() * 100
    rows.append(theme.paint(theme.help, f"{help_text} {percent:3.0f}%"))
    return rows


def detail_column(explorer: OperationExplorer, height: int) -> list[str]:
    lines = explorer.detail_lines()
    max_offset = max(0, len(lines) - height)
    explorer.detail_offset = min(explorer.detail_offset, max_offset)
    return lines[explorer.detail_offset : explorer.detail_offset + height]


def render_explorer(explorer: OperationExplorer) -> list[str]:
    """Return the full-screen frame: a bordered box holding one or two columns."""
    theme = explorer.theme
    inner_height = max(explorer.height - 2, 1)
    left = list_column(explorer)
    if not explorer.is_two_panel():
        return boxed(left, explorer.width, explorer.height, theme.border, theme)

    left_width = explorer.list_width()
    detail_width = max(explorer.detail_width() - len(SEPARATOR), 1)
    right = detail_column(explorer, inner_height)
    sep_style = theme.border_focused if explorer.focus is Panel.DETAIL else theme.border
    separator = theme.paint(sep_style, SEPARATOR)
    rows = []
    for idx in range(inner_height):
        left_row = left[idx] if idx < len(left) else ""
        right_row = right[idx] if idx < len(right) else ""
        rows.append(pad_to_width(clip_ansi_line(left_row, left_width), left_width) + separator + clip_ansi_line(right_row, detail_width))
    return boxed(rows, explorer.width, explorer.height, theme.border, theme)
