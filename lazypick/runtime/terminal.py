"""Terminal control helpers for a picker session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from ..ansi import clip_ansi_line


class TerminalController:
    """Manage terminal mode transitions and full-frame redraws."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen buffer and tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write_frame(self, lines: list[str], columns: int, rows: int) -> None:
        """Redraw the screen from the top with ``lines`` clipped to the terminal."""
        out = ["\x1b[H"]
        for idx, line in enumerate(lines[: max(1, rows)]):
            if idx:
                out.append("\r\n")
            out.append(clip_ansi_line(line, columns))
            out.append("\x1b[0m\x1b[K")
        out.append("\x1b[J")
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
