"""Two dependent selections: an environment, then a request file."""

from __future__ import annotations

from collections.abc import Sequence

from ..selection import EmptyCandidatesError, SessionResult
from ..ui_theme import DEFAULT_THEME, UITheme
from .coordinator import DualPaneSelection, DualPaneSession, PaneFocus, Phase, partition_heights


def run_dual_pane(
    env_items: Sequence[str],
    file_items: Sequence[str],
    initial_env: str = "",
    env_locked: bool = False,
    *,
    theme: UITheme = DEFAULT_THEME,
    scroll_margin: int | None = None,
) -> SessionResult[DualPaneSelection]:
    """Run the env/file picker on the terminal.

    Raises :class:`EmptyCandidatesError` when there are no files, or no
    environments while the environment is not locked.
    """
    if not file_items:
        raise EmptyCandidatesError("no request files to select")
    if not env_items and not env_locked:
        raise EmptyCandidatesError("no environments to select")
    from ..runtime import run_interactive

    kwargs = {} if scroll_margin is None else {"scroll_margin": scroll_margin}
    session = DualPaneSession(env_items, file_items, initial_env, env_locked, theme=theme, **kwargs)
    return run_interactive(session)


__all__ = [
    "DualPaneSelection",
    "DualPaneSession",
    "PaneFocus",
    "Phase",
    "partition_heights",
    "run_dual_pane",
]
