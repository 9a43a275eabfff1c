"""Rich terminal frontend — styled tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from frontend.cli.input_handler import cell_index, get_key
from frontend.config import FrontendConfig

console = Console()

_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=5, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[Text] = []
        for c, val in enumerate(row):
            idx = r * 3 + c
            cell = Text(f"{idx + 1} ", style="dim")
            if val == 0:
                cell.append("·", style="dim")
            elif board.is_tile_correct(idx):
                cell.append(str(val), style="bold green")
            else:
                cell.append(str(val), style="bold white")
            cells.append(cell)
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str) -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style=style,
        padding=(1, 2),
    )


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = game.hint()
    if hint is None:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[red]Board is unsolvable.[/red]"
    return f"[cyan]Hint:[/cyan] moved [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay, delay: float) -> str:
    with console.status("[cyan]Searching for an optimal solution…[/cyan]"):
        path = game.solution()

    if path is None:
        return "[red]Board is unsolvable.[/red]"
    if not path:
        return "[green]Already solved![/green]"

    steps = game.playback(path)
    console.clear()
    try:
        with Live(console=console, refresh_per_second=20, transient=True) as live:
            for i, board in enumerate(steps, 1):
                progress = Text()
                progress.append(f"  Solving… move {i}/{len(path)} ", style="bold cyan")
                progress.append("(Ctrl-C to stop)", style="dim")
                live.update(
                    Group(
                        Align.center(
                            _board_panel(board, "[bold cyan]Auto-Solve[/bold cyan]", "cyan")
                        ),
                        Align.center(progress),
                    )
                )
                time.sleep(delay)
    except KeyboardInterrupt:
        steps.close()
        return "[yellow]Playback stopped.[/yellow]"

    return f"[bold green]Solved optimally in {len(path)} moves![/bold green]"


# -- game screen --------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("1-9", style="bold cyan")
    controls.append("  tap   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  reset   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    if game.is_won:
        panel = _board_panel(game.board, "[bold green]8-Puzzle[/bold green]", "bold green")
    else:
        panel = _board_panel(game.board, "[bold cyan]8-Puzzle[/bold cyan]", "bright_blue")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _game_loop(game: GamePlay, delay: float) -> None:
    status = ""

    while True:
        _draw_game(game, status)
        status = ""
        key = get_key()
        cell = cell_index(key)

        if key in _DIRECTIONS:
            game.move(_DIRECTIONS[key])
        elif cell is not None:
            if not game.move_tile(cell):
                status = f"[dim]Cell {cell + 1} is not next to the blank.[/dim]"
        elif key == "shuffle":
            game.shuffle()
            status = "[yellow]Shuffled![/yellow]"
        elif key == "reset":
            game.reset()
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game, delay)
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return

        if game.is_won and not status and game.state.moves:
            status = f"[bold green]★ Solved in {game.state.moves} moves! ★[/bold green]"


# -- public entry point -------------------------------------------------------


def run(config: FrontendConfig) -> None:
    """Launch the Rich CLI."""
    _game_loop(GamePlay(config.make_rng()), config.delay)
