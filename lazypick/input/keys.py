"""Key token names produced by :func:`lazypick.input.reader.read_key`.

Quit is bound to ``CTRL_C`` only: printable letters are always filter text.
"""

from __future__ import annotations

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_CTRL_P = "CTRL_P"
KEY_CTRL_N = "CTRL_N"
KEY_TAB = "TAB"
KEY_ENTER = "ENTER"
KEY_ESC = "ESC"
KEY_SPACE = " "
KEY_BACKSPACE = "BACKSPACE"
KEY_CTRL_W = "CTRL_W"
KEY_CTRL_U = "CTRL_U"
KEY_QUIT = "CTRL_C"

# Vim-style aliases, only honored where no text input is active.
KEY_J = "j"
KEY_K = "k"

UP_KEYS = (KEY_UP, KEY_CTRL_P)
DOWN_KEYS = (KEY_DOWN, KEY_CTRL_N)
