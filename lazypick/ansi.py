"""ANSI-aware text measurement for picker rows.

Rows carry SGR color codes from the theme; widths must ignore them so that
truncation and padding line up with real terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "…"


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal cell width of one character (0, 1 or 2)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible cell width of ``text`` with escape sequences ignored."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` cells.

    Escape sequences are kept verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            break
        out.append(text[i])
        col += w
        i += 1
    return "".join(out)


def truncate_with_ellipsis(text: str, max_cols: int) -> str:
    """Shorten plain ``text`` to ``max_cols`` cells, marking the cut with ``…``."""
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= len(ELLIPSIS):
        return "." * max_cols
    return clip_ansi_line(text, max_cols - len(ELLIPSIS)) + ELLIPSIS


def pad_to_width(text: str, width: int) -> str:
    """Right-pad a styled line with spaces up to ``width`` visible cells."""
    return text + " " * max(0, width - display_width(text))
