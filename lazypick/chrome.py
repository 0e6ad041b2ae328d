"""Box-drawing helpers shared by session frames."""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import clip_ansi_line, display_width, pad_to_width
from .ui_theme import UITheme

MIN_INPUT_WIDTH = 20


def bordered_input(text: str, width: int, style: str, theme: UITheme) -> list[str]:
    """Wrap one input row in a rounded box at most ``width`` columns wide."""
    inner = max(width - 4, MIN_INPUT_WIDTH)
    text = clip_ansi_line(text, inner) if display_width(text) > inner else text
    return [
        theme.paint(style, "╭" + "─" * (inner + 2) + "╮"),
        theme.paint(style, "│ ") + pad_to_width(text, inner) + theme.paint(style, " │"),
        theme.paint(style, "╰" + "─" * (inner + 2) + "╯"),
    ]


def fit(text: str, width: int) -> str:
    """Clip or pad a styled line to exactly ``width`` cells."""
    return pad_to_width(clip_ansi_line(text, width), width)


def boxed(rows: Sequence[str], width: int, height: int, style: str, theme: UITheme) -> list[str]:
    """Frame ``rows`` in a rounded border filling ``width`` x ``height``."""
    inner_width = max(width - 4, 1)
    inner_height = max(height - 2, 0)
    body = list(rows[:inner_height]) + [""] * max(0, inner_height - len(rows))
    side = theme.paint(style, "│")
    lines = [theme.paint(style, "╭" + "─" * (inner_width + 2) + "╮")]
    lines.extend(f"{side} {fit(row, inner_width)} {side}" for row in body)
    lines.append(theme.paint(style, "╰" + "─" * (inner_width + 2) + "╯"))
    return lines
