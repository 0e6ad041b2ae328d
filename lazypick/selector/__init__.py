"""Single-list selector session and its interactive entry point."""

from __future__ import annotations

from collections.abc import Sequence

from ..selection import EmptyCandidatesError, SessionResult
from ..ui_theme import DEFAULT_THEME, UITheme
from .session import SelectorSession


def run_selector(
    items: Sequence[str],
    prompt: str,
    *,
    theme: UITheme = DEFAULT_THEME,
    scroll_margin: int | None = None,
    empty_message: str = "nothing to select",
) -> SessionResult[str]:
    """Run a selector on the terminal and return its outcome.

    Raises :class:`EmptyCandidatesError` before touching the terminal when
    ``items`` is empty.
    """
    if not items:
        raise EmptyCandidatesError(empty_message)
    from ..runtime import run_interactive

    kwargs = {} if scroll_margin is None else {"scroll_margin": scroll_margin}
    return run_interactive(SelectorSession(items, prompt, theme=theme, **kwargs))


__all__ = ["SelectorSession", "run_selector"]
