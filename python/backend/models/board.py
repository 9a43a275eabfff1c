"""Board model for the 8-puzzle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

SIZE = 3
CELLS = SIZE * SIZE
BLANK = 0


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0..8."""


class Direction(StrEnum):
    """Direction in which a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 configuration.

    Tiles are stored as a flat row-major tuple of ints. 0 represents the
    blank space.
    """

    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile sequence.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        tiles = tuple(flat)
        bad = [v for v in tiles if type(v) is not int]
        if bad:
            raise InvalidBoardError(f"Tiles must be ints, got {bad!r}.")
        if len(tiles) != CELLS:
            raise InvalidBoardError(
                f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(CELLS)):
            missing = sorted(set(range(CELLS)) - set(tiles))
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{CELLS - 1}; "
                f"missing {missing} in {list(tiles)}."
            )
        return cls(tiles)

    @classmethod
    def coerce(cls, value: Board | Iterable[int]) -> Board:
        if isinstance(value, Board):
            return value
        return cls.from_flat(value)

    @classmethod
    def goal(cls) -> Board:
        return GOAL

    # -- queries --------------------------------------------------------------

    def position_of(self, value: int) -> int:
        return self.tiles.index(value)

    def identity(self) -> int:
        """Pack the tiles into one int, base 9, in index order.

        Equal boards have equal keys, and keys sort the same way the tile
        tuples do.
        """
        key = 0
        for v in self.tiles:
            key = key * CELLS + v
        return key

    @property
    def blank_index(self) -> int:
        return self.tiles.index(BLANK)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.row_col(self.blank_index)

    @staticmethod
    def row_col(index: int) -> tuple[int, int]:
        return divmod(index, SIZE)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * SIZE + col]

    def rows(self) -> list[tuple[int, ...]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    def is_solved(self) -> bool:
        return self.tiles == GOAL.tiles

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* sits on its goal cell."""
        return self.tiles[index] == GOAL.tiles[index]

    def swap(self, i: int, j: int) -> Board:
        """Return a new board with cells *i* and *j* exchanged."""
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board(tuple(tiles))

    def to_list(self) -> list[int]:
        return list(self.tiles)

    def __str__(self) -> str:
        return " / ".join(
            " ".join(str(v) if v else "_" for v in row) for row in self.rows()
        )


GOAL = Board(tuple(range(1, CELLS)) + (BLANK,))
