"""Cross-platform single-keypress reader for CLI frontends.

Handles arrow keys, WASD, cell digits and special keys without
requiring Enter.  Works on macOS / Linux (tty+termios) and Windows
(msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "x": "reset",
    "v": "solve",
    "n": "hint",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if len(ch) == 1 and ch in "123456789":
        return f"cell:{int(ch) - 1}"
    action = _KEY_MAP.get(ch.lower())
    if action is not None:
        return action
    return ch if ch.isprintable() else ""


def cell_index(action: str) -> int | None:
    """Return the grid index of a ``cell:<n>`` action, else ``None``."""
    if not action.startswith("cell:"):
        return None
    return int(action[5:])


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — tile movement
        "cell:0" … "cell:8"            — digits 1-9, tap a grid cell
        "quit"                         — q / Ctrl-C / Escape
        "shuffle"                      — r
        "reset"                        — x
        "solve"                        — v (optimal auto-solve)
        "hint"                         — n (next best move)
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return _resolve(ch)
