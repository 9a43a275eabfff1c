#!/usr/bin/env python3
"""8-Puzzle.

Usage::

    python main.py                      # interactive menu
    python main.py -f rich              # Rich terminal
    python main.py -f pygame            # Pygame photo puzzle
    python main.py -f pygame --image cat.jpg
"""

from __future__ import annotations

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
ASSETS_DIR = PROJECT_ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from frontend.config import DEFAULT_DELAY, FrontendConfig  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _launch(frontend: Frontend, config: FrontendConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(config)


def _menu_loop(config: FrontendConfig) -> None:
    choices = {"1": Frontend.vanilla, "2": Frontend.rich, "3": Frontend.pygame}
    while True:
        print()
        print("  ====================================")
        print("            8 - P U Z Z L E           ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  Play  (Pygame photo puzzle)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return
        if choice in choices:
            _launch(choices[choice], config)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        envvar="EIGHT_PUZZLE_FRONTEND",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    delay: float = typer.Option(
        DEFAULT_DELAY, "--delay",
        min=0.0,
        envvar="EIGHT_PUZZLE_DELAY",
        help="Seconds between moves when playing back a solution.",
    ),
    images: Path = typer.Option(
        ASSETS_DIR / "photos", "--images",
        envvar="EIGHT_PUZZLE_IMAGES",
        help="Directory of photos for the Pygame frontend.",
    ),
    image: Optional[Path] = typer.Option(
        None, "--image",
        exists=True, dir_okay=False,
        help="Slice this photo instead of a random one (Pygame).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="EIGHT_PUZZLE_SEED",
        help="Seed the shuffle for reproducible puzzles.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        envvar="EIGHT_PUZZLE_LOG_LEVEL",
        case_sensitive=False,
        help="Logging threshold.",
    ),
) -> None:
    """8-Puzzle with an optimal solver."""
    _configure_logging(log_level)
    config = FrontendConfig(delay=delay, images_dir=images, image=image, seed=seed)

    if frontend is None:
        _menu_loop(config)
        return

    _launch(frontend, config)


if __name__ == "__main__":
    app()
