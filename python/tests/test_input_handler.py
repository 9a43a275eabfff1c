"""Key mapping tests for the terminal frontends."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import _resolve, cell_index


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("D", "right"),
        ("r", "shuffle"),
        ("X", "reset"),
        ("v", "solve"),
        ("n", "hint"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("1", "cell:0"),
        ("9", "cell:8"),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert _resolve(ch) == action


@pytest.mark.parametrize("ch", ["h", "?"])
def test_unbound_keys_pass_through(ch: str) -> None:
    # no frontend binds these, so they reach the loops as plain characters
    assert _resolve(ch) == ch


def test_non_printable_is_dropped() -> None:
    assert _resolve("\x07") == ""
    assert _resolve("0") == "0"


def test_cell_index() -> None:
    assert cell_index("cell:4") == 4
    assert cell_index("shuffle") is None
