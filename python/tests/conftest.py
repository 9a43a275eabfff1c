"""Shared fixtures: exact distances for every solvable 3×3 board."""

from __future__ import annotations

from collections import deque

import pytest

from backend.models.board import GOAL

# blank index -> cells it can swap with
_ADJ: dict[int, tuple[int, ...]] = {
    i: tuple(
        j
        for j in (i - 3, i + 3, i - 1 if i % 3 else -1, i + 1 if i % 3 < 2 else -1)
        if 0 <= j < 9
    )
    for i in range(9)
}


def _bfs_from_goal() -> dict[tuple[int, ...], int]:
    dist = {GOAL.tiles: 0}
    queue = deque([GOAL.tiles])
    while queue:
        tiles = queue.popleft()
        d = dist[tiles] + 1
        z = tiles.index(0)
        for j in _ADJ[z]:
            nxt = list(tiles)
            nxt[z], nxt[j] = nxt[j], nxt[z]
            key = tuple(nxt)
            if key not in dist:
                dist[key] = d
                queue.append(key)
    return dist


@pytest.fixture(scope="session")
def goal_distances() -> dict[tuple[int, ...], int]:
    """Tile tuple -> minimum moves to the goal, for all 181,440 boards."""
    return _bfs_from_goal()
