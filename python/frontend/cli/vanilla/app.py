"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from frontend.cli.input_handler import cell_index, get_key
from frontend.config import FrontendConfig


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board.

    Each cell also shows its key (1-9) in the corner, dimmed.
    """
    sep = "+" + ("-----+" * 3)
    lines: list[str] = [sep]
    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            idx = r * 3 + c
            key = f"{_DIM}{idx + 1}{_R}"
            if val == 0:
                cells.append(f"{key} {_DIM}·{_R}  ")
            elif board.is_tile_correct(idx):
                cells.append(f"{key} {_G}{val}{_R}  ")
            else:
                cells.append(f"{key} {val}  ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    """Apply a single solver hint.  Returns a status message."""
    hint = game.hint()
    if hint is None:
        if game.is_won:
            return f"{_G}Already solved!{_R}"
        return f"{_RED}Board is unsolvable.{_R}"
    return f"{_C}Hint:{_R} moved {_BOLD}{hint.value}{_R}"


def _auto_solve(game: GamePlay, delay: float) -> str:
    """Run the solver and animate moves.  Returns a status message."""
    path = game.solution()
    if path is None:
        return f"{_RED}Board is unsolvable.{_R}"
    if not path:
        return f"{_G}Already solved!{_R}"

    steps = game.playback(path)
    try:
        for i, board in enumerate(steps, 1):
            _clear()
            print(f"  {_C}=== Solving… ==={_R}")
            print()
            print(_render_board(board))
            print()
            print(f"  Move {i}/{len(path)}  {_DIM}(Ctrl-C to stop){_R}")
            sys.stdout.flush()
            time.sleep(delay)
    except KeyboardInterrupt:
        steps.close()
        return f"{_Y}Playback stopped.{_R}"

    return f"{_G}Solved optimally in {len(path)} moves!{_R}"


# -- screens ------------------------------------------------------------------


def _show_game(game: GamePlay, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== 8-Puzzle ==={_R}")
    print()
    print(_render_board(game.board))
    print()
    print(f"  Moves: {_Y}{game.state.moves}{_R}")
    if status:
        print(f"\n  {status}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}1-9{_R}: tap cell  |  "
        f"{_Y}R{_R}: shuffle  |  "
        f"{_C}X{_R}: reset  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}Q{_R}: quit"
    )


# -- game loop ----------------------------------------------------------------


def _game_loop(game: GamePlay, delay: float) -> None:
    status = ""

    while True:
        _show_game(game, status)
        status = ""
        key = get_key()
        cell = cell_index(key)

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif cell is not None:
            if not game.move_tile(cell):
                status = f"{_DIM}Cell {cell + 1} is not next to the blank.{_R}"
        elif key == "shuffle":
            game.shuffle()
            status = f"{_Y}Shuffled!{_R}"
        elif key == "reset":
            game.reset()
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game, delay)
        elif key == "quit":
            _clear()
            print("  Goodbye!\n")
            return

        if game.is_won and not status and game.state.moves:
            status = f"{_G}★ Solved in {game.state.moves} moves! ★{_R}"


# -- public entry point -------------------------------------------------------


def run(config: FrontendConfig) -> None:
    """Launch the vanilla CLI."""
    _game_loop(GamePlay(config.make_rng()), config.delay)
