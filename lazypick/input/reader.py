"""Low-level terminal input decoding.

Reads raw bytes from a file descriptor and translates them into normalized key
tokens. Handles ESC-sequence timing, control keys, and multi-byte UTF-8 text.
"""

from __future__ import annotations

import os
import select

from .keys import (
    KEY_BACKSPACE,
    KEY_CTRL_N,
    KEY_CTRL_P,
    KEY_CTRL_U,
    KEY_CTRL_W,
    KEY_DOWN,
    KEY_ENTER,
    KEY_ESC,
    KEY_QUIT,
    KEY_TAB,
    KEY_UP,
)

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS: dict[bytes, str] = {
    b"\x03": KEY_QUIT,
    b"\x10": KEY_CTRL_P,
    b"\x0e": KEY_CTRL_N,
    b"\x17": KEY_CTRL_W,
    b"\x15": KEY_CTRL_U,
    b"\t": KEY_TAB,
    b"\x08": KEY_BACKSPACE,
    b"\x7f": KEY_BACKSPACE,
    b"\r": KEY_ENTER,
    b"\n": KEY_ENTER,
}

# Decoded sequences no session binds (left/right, page and function keys)
# come back as IGNORED_KEY so they never reach a filter as text.
IGNORED_KEY = ""

_CSI_FINAL_KEYS: dict[bytes, str] = {
    b"A": KEY_UP,
    b"B": KEY_DOWN,
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_text(fd: int, first: bytes) -> str:
    """Collect continuation bytes for a UTF-8 lead byte and decode them."""
    data = first
    for _ in range(_utf8_length(first[0]) - 1):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _decode_escape(fd: int) -> str:
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return KEY_ESC
    if seq not in {b"[", b"O"}:
        _PENDING_BYTES.append(seq)
        return KEY_ESC
    final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if final is None:
        return KEY_ESC
    if final in _CSI_FINAL_KEYS:
        return _CSI_FINAL_KEYS[final]
    while final.isdigit() or final == b";":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return KEY_ESC
    if 0x40 <= final[0] <= 0x7E:
        return IGNORED_KEY
    return KEY_ESC


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` on timeout, end of input, or an escape sequence with no
    bound key.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""
        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]
    if ch == b"\x1b":
        return _decode_escape(fd)
    return _decode_text(fd, ch)
