"""Runtime orchestration: terminal control, the session loop, config, logging.

``run_session`` is imported lazily so that importing config helpers never
pulls in ``termios``.
"""

from __future__ import annotations


def run_session(*args, **kwargs):
    """Lazily import the loop runner to avoid package-import cycles."""
    from .loop import run_session as _run_session

    return _run_session(*args, **kwargs)


def run_interactive(session):
    """Run ``session`` on the process's stdin/stdout terminal."""
    import sys

    from .loop import run_session as _run_session
    from .terminal import TerminalController

    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    return _run_session(session, terminal, stdin_fd)


__all__ = ["run_session", "run_interactive"]
