"""Main interactive event loop shared by every picker session.

One key is processed to completion, including viewport recomputation, before
the next one is read. Terminal size is polled each iteration and forwarded to
the session as a resize.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from os import terminal_size

from ..input import read_key
from ..selection.session import Session, SessionResult
from .terminal import TerminalController

logger = logging.getLogger(__name__)

RESIZE_POLL_MS = 200


@dataclass(frozen=True)
class RuntimeLoopHooks:
    """Injected I/O used by :func:`run_session`, replaceable in tests."""

    read_key: Callable[[int, int | None], str] = read_key
    terminal_size: Callable[[], terminal_size] = lambda: shutil.get_terminal_size((80, 24))


def run_session(
    session: Session,
    terminal: TerminalController,
    stdin_fd: int,
    hooks: RuntimeLoopHooks | None = None,
) -> SessionResult:
    """Drive ``session`` until it reports ``done`` and return its result."""
    hooks = hooks or RuntimeLoopHooks()
    last_size: tuple[int, int] | None = None
    dirty = True
    with terminal.raw_mode():
        while not session.done:
            term = hooks.terminal_size()
            size = (term.columns, term.lines)
            if size != last_size:
                logger.debug("terminal resized to %dx%d", *size)
                session.resize(*size)
                last_size = size
                dirty = True
            if dirty:
                terminal.write_frame(session.render(), *size)
                dirty = False
            key = hooks.read_key(stdin_fd, RESIZE_POLL_MS)
            if not key:
                continue
            session.handle_key(key)
            dirty = True
    result = session.result()
    logger.debug("session finished cancelled=%s", result.cancelled)
    return result
