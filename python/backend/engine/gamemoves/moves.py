"""Legal moves on the 3×3 board."""

from __future__ import annotations

from backend.models.board import SIZE, Board, Direction

# Blank offsets in expansion order: down, up, right, left.  The solver
# breaks f-ties by discovery order, so this order is part of its output.
BLANK_OFFSETS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
TILE_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def _on_grid(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


class MoveGenerator:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def neighbors(board: Board) -> list[Board]:
        """Return every board one slide away from *board*.

        Between 2 (corner blank) and 4 (centre blank) boards, in
        ``BLANK_OFFSETS`` order.  *board* is left untouched.
        """
        bi = board.blank_index
        br, bc = Board.row_col(bi)
        out: list[Board] = []
        for dr, dc in BLANK_OFFSETS:
            nr, nc = br + dr, bc + dc
            if _on_grid(nr, nc):
                out.append(board.swap(bi, nr * SIZE + nc))
        return out

    @staticmethod
    def is_adjacent(board: Board, index: int) -> bool:
        """True if the cell at *index* touches the blank orthogonally."""
        br, bc = board.blank_pos
        r, c = Board.row_col(index)
        return abs(r - br) + abs(c - bc) == 1

    @staticmethod
    def slide_tile(board: Board, index: int) -> Board | None:
        """Slide the tile at *index* into the blank, if it is adjacent."""
        if not 0 <= index < SIZE * SIZE:
            return None
        if not MoveGenerator.is_adjacent(board, index):
            return None
        return board.swap(board.blank_index, index)

    @staticmethod
    def slide(board: Board, direction: Direction) -> Board | None:
        """Slide a tile in *direction*; ``None`` if no tile can move that way."""
        br, bc = board.blank_pos
        dr, dc = TILE_OFFSETS[direction]
        tr, tc = br + dr, bc + dc
        if not _on_grid(tr, tc):
            return None
        return board.swap(board.blank_index, tr * SIZE + tc)

    @staticmethod
    def direction_between(before: Board, after: Board) -> Direction:
        """Return the tile direction of the single move *before* → *after*."""
        for direction in Direction:
            if MoveGenerator.slide(before, direction) == after:
                return direction
        raise ValueError(f"{before} and {after} are not one move apart.")
