"""Cursor arithmetic shared by every list-backed picker.

All helpers are total over integers and keep no state of their own.
``max_index`` is the last valid index, typically ``len(items) - 1``.
"""

from __future__ import annotations


def move_up(cursor: int) -> int:
    """Move one row up, never past index 0."""
    if cursor > 0:
        return cursor - 1
    return cursor


def move_down(cursor: int, max_index: int) -> int:
    """Move one row down, never past ``max_index``.

    An empty list (``max_index < 0``) leaves the cursor untouched; callers
    clamp separately after the list changes.
    """
    if cursor < max_index:
        return cursor + 1
    return cursor


def clamp_cursor(cursor: int, max_index: int) -> int:
    """Bound ``cursor`` to ``[0, max_index]``, collapsing to 0 for empty lists."""
    if max_index < 0:
        return 0
    return max(0, min(cursor, max_index))


def move_cursor(cursor: int, direction: int, max_index: int) -> int:
    """Apply a signed single-step move (``-1`` up, ``1`` down)."""
    if direction < 0:
        return move_up(cursor)
    if direction > 0:
        return move_down(cursor, max_index)
    return cursor
