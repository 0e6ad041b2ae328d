"""Filter-string editing primitives for prompt lines."""

from __future__ import annotations


def append_text(value: str, text: str) -> str:
    """Append typed printable text, dropping control characters."""
    return value + "".join(ch for ch in text if ch.isprintable())


def delete_char(value: str) -> str:
    return value[:-1]


def delete_last_word(value: str) -> str:
    """Drop the trailing word and keep the whitespace that preceded it.

    Trailing whitespace is skipped first, so ``"hello world "`` becomes
    ``"hello "``.
    """
    end = len(value.rstrip())
    start = end
    while start > 0 and not value[start - 1].isspace():
        start -= 1
    return value[:start]


def clear_line() -> str:
    return ""


def edit_filter_text(value: str, key: str) -> str | None:
    """Apply one editing key to ``value``.

    Returns the new value, or ``None`` when ``key`` is not an editing key.
    """
    if key == "BACKSPACE":
        return delete_char(value)
    if key == "CTRL_W":
        return delete_last_word(value)
    if key == "CTRL_U":
        return clear_line()
    if len(key) == 1 and key.isprintable():
        return append_text(value, key)
    return None
