"""
cli/ui/terminal.py - Raw keyboard input

RawTerminal switches the controlling terminal to unbuffered, no-echo input
for the lifetime of the console and hands out KeyEvent objects.

Cross platform:
    - Unix/Mac: termios (ICANON, ECHO, ISIG, IXON off) + select() for the
      poll timeout
    - Windows: msvcrt.kbhit() / getwch()

decode_keys() turns the raw byte stream into KeyEvent objects:
    - CSI / SS3 escape sequences (arrows, home/end, page up/down, delete)
    - ESC followed by a key is that key with alt held
    - control bytes 0x01-0x1a are ctrl+letter (tab, enter, backspace aside)

Usage:
    with RawTerminal() as terminal:
        event = terminal.read_key(0.1)   # None on timeout
"""

from __future__ import annotations

import logging
import os
import sys
import time
from collections import deque

from ddbconsole.core.state.keys import Key, KeyEvent

logger = logging.getLogger(__name__)

ESC = "\x1b"

# Final byte of CSI / SS3 sequences
_CSI_FINAL = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
    "H": Key.HOME,
    "F": Key.END,
    "Z": Key.TAB,  # shift+tab
}

# "ESC [ <n> ~" sequences
_CSI_TILDE = {
    "1": Key.HOME,
    "2": Key.UNKNOWN,  # insert
    "3": Key.DELETE,
    "4": Key.END,
    "5": Key.PAGE_UP,
    "6": Key.PAGE_DOWN,
    "7": Key.HOME,
    "8": Key.END,
}

# Second code after the "\x00" / "\xe0" prefix of msvcrt.getwch()
_WINDOWS_SPECIAL = {
    "H": Key.UP,
    "P": Key.DOWN,
    "K": Key.LEFT,
    "M": Key.RIGHT,
    "G": Key.HOME,
    "O": Key.END,
    "I": Key.PAGE_UP,
    "Q": Key.PAGE_DOWN,
    "S": Key.DELETE,
}


def _decode_plain(char: str, alt: bool = False) -> KeyEvent:
    """One character that is not part of an escape sequence"""
    if char in ("\r", "\n"):
        return KeyEvent.named(Key.ENTER, alt=alt)
    if char == "\t":
        return KeyEvent.named(Key.TAB, alt=alt)
    if char in ("\x7f", "\x08"):
        return KeyEvent.named(Key.BACKSPACE, alt=alt)
    if char == ESC:
        return KeyEvent.named(Key.ESC, alt=alt)
    code = ord(char)
    if 1 <= code <= 26:
        return KeyEvent(Key.CHAR, chr(code + 96), ctrl=True, alt=alt)
    if code < 32:
        return KeyEvent.named(Key.UNKNOWN, alt=alt)
    return KeyEvent(Key.CHAR, char, alt=alt)


def _decode_csi(text: str, start: int) -> tuple[KeyEvent, int]:
    """Decode the sequence whose introducer ("[" or "O") sits at ``start``

    Returns:
        (event, index just past the sequence)
    """
    i = start + 1
    params = ""
    while i < len(text) and not ("@" <= text[i] <= "~"):
        params += text[i]
        i += 1
    if i >= len(text):
        return KeyEvent.named(Key.UNKNOWN), i

    final = text[i]
    if final == "~":
        key = _CSI_TILDE.get(params.split(";")[0], Key.UNKNOWN)
    else:
        key = _CSI_FINAL.get(final, Key.UNKNOWN)
    return KeyEvent.named(key), i + 1


def decode_keys(data: bytes) -> list[KeyEvent]:
    """Decode one read() worth of terminal input"""
    text = data.decode("utf-8", errors="replace")
    events: list[KeyEvent] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != ESC:
            events.append(_decode_plain(char))
            i += 1
            continue

        if i + 1 >= len(text):
            events.append(KeyEvent.named(Key.ESC))
            i += 1
        elif text[i + 1] in "[O" and i + 2 < len(text):
            event, i = _decode_csi(text, i + 1)
            events.append(event)
        elif text[i + 1] == ESC:
            events.append(KeyEvent.named(Key.ESC))
            i += 1
        else:
            events.append(_decode_plain(text[i + 1], alt=True))
            i += 2
    return events


class RawTerminal:
    """Context manager owning raw keyboard input

    Args:
        stream: Input stream (default: sys.stdin)
    """

    def __init__(self, stream=None):
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._saved = None
        self._queue: deque[KeyEvent] = deque()
        self._windows = sys.platform == "win32"

    def __enter__(self) -> RawTerminal:
        if self._windows:
            return self

        import termios

        self._fd = self._stream.fileno()
        self._saved = termios.tcgetattr(self._fd)
        mode = termios.tcgetattr(self._fd)
        mode[0] &= ~(termios.IXON | termios.ICRNL)
        mode[3] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        mode[6][termios.VMIN] = 1
        mode[6][termios.VTIME] = 0
        termios.tcsetattr(self._fd, termios.TCSAFLUSH, mode)
        logger.debug("terminal switched to raw input")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._windows or self._fd is None or self._saved is None:
            return

        import termios

        termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved)
        logger.debug("terminal input restored")

    def read_key(self, timeout: float) -> KeyEvent | None:
        """Next key event, or None when nothing arrives within ``timeout`` seconds"""
        if self._queue:
            return self._queue.popleft()

        events = self._read_windows(timeout) if self._windows else self._read_posix(timeout)
        self._queue.extend(events)
        return self._queue.popleft() if self._queue else None

    def _read_posix(self, timeout: float) -> list[KeyEvent]:
        import select

        if self._fd is None:
            raise RuntimeError("RawTerminal.read_key() used outside of its context")
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return []
        return decode_keys(os.read(self._fd, 64))

    def _read_windows(self, timeout: float) -> list[KeyEvent]:
        import msvcrt

        deadline = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return []
            time.sleep(0.01)

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            return [KeyEvent.named(_WINDOWS_SPECIAL.get(msvcrt.getwch(), Key.UNKNOWN))]
        if char == ESC:
            return [KeyEvent.named(Key.ESC)]
        return [_decode_plain(char)]
