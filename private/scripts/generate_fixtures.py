#!/usr/bin/env python3
"""Generate the solver test fixtures.

Run once from the project root::

    python private/scripts/generate_fixtures.py

Writes ``<project_root>/fixtures/3x3.json``.  Every solvable entry carries
its exact optimal length, taken from a breadth-first sweep of all 9!/2
reachable boards, so the fixture never depends on the solver it checks.

Contents:
  - handcrafted short and mid-length cases,
  - every board at the puzzle's diameter (the farthest from the goal),
  - boards one transposition away from solvable (``optimal`` is null).
"""

from __future__ import annotations

import json
import sys
from collections import deque
from pathlib import Path

# Resolve paths: this script lives in <project_root>/private/scripts/
SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent.parent
PYTHON_ROOT = PROJECT_ROOT / "python"

if str(PYTHON_ROOT) not in sys.path:
    sys.path.insert(0, str(PYTHON_ROOT))

from backend.engine.gamemoves import MoveGenerator  # noqa: E402
from backend.models.board import GOAL, Board  # noqa: E402

FIXTURES_DIR = PROJECT_ROOT / "fixtures"

HANDCRAFTED: dict[str, list[int]] = {
    "one-move": [1, 2, 3, 4, 5, 6, 7, 0, 8],
    "two-moves": [1, 2, 3, 4, 5, 6, 0, 7, 8],
    "ring-centre-blank": [8, 1, 2, 7, 0, 3, 6, 5, 4],
}

UNSOLVABLE: dict[str, list[int]] = {
    "swapped-7-8": [1, 2, 3, 4, 5, 6, 8, 7, 0],
    "swapped-1-2": [2, 1, 3, 4, 5, 6, 7, 8, 0],
}


# -- exact distances ----------------------------------------------------------


def _distances() -> dict[Board, int]:
    """Breadth-first distance from the goal for every reachable board."""
    dist = {GOAL: 0}
    queue = deque([GOAL])
    while queue:
        board = queue.popleft()
        d = dist[board] + 1
        for nxt in MoveGenerator.neighbors(board):
            if nxt not in dist:
                dist[nxt] = d
                queue.append(nxt)
    return dist


# -- serialisation ------------------------------------------------------------


def _entry(board_id: str, tiles: list[int], optimal: int | None) -> dict:
    return {"id": board_id, "tiles": tiles, "optimal": optimal}


def _dump(entries: list[dict]) -> str:
    """One entry per line, so fixture diffs stay readable."""
    return "[\n" + ",\n".join("  " + json.dumps(e) for e in entries) + "\n]\n"


# -- main ---------------------------------------------------------------------


def main() -> None:
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)

    print("Sweeping all reachable 3×3 boards …")
    dist = _distances()
    assert len(dist) == 181_440, f"expected 9!/2 boards, got {len(dist)}"

    entries: list[dict] = []
    for board_id, tiles in HANDCRAFTED.items():
        entries.append(_entry(board_id, tiles, dist[Board.from_flat(tiles)]))

    diameter = max(dist.values())
    hardest = sorted(b.tiles for b, d in dist.items() if d == diameter)
    for i, tiles in enumerate(hardest):
        entries.append(_entry(f"hardest-{chr(ord('a') + i)}", list(tiles), diameter))
    print(f"  diameter {diameter}: {len(hardest)} boards")

    for board_id, tiles in UNSOLVABLE.items():
        assert Board.from_flat(tiles) not in dist, f"{board_id} is solvable"
        entries.append(_entry(board_id, tiles, None))

    path = FIXTURES_DIR / "3x3.json"
    path.write_text(_dump(entries))
    print(f"  → {path.name}  ({len(entries)} boards) ✓")


if __name__ == "__main__":
    main()
