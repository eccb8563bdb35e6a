from __future__ import annotations

import random
from typing import Iterator, List, Tuple

from esper import World

from minesweeper.components.board import Board
from minesweeper.constants import MAX_ROWS

Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def validate_dimensions(rows: int, cols: int, mines: int) -> None:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"board must have positive dimensions, got {rows}x{cols}")
    if rows > MAX_ROWS:
        raise ValueError(f"board can have at most {MAX_ROWS} rows, got {rows}")
    if not 0 <= mines <= rows * cols:
        raise ValueError(f"mine count must be within 0..{rows * cols}, got {mines}")


def iter_neighbors(board: Board, row: int, col: int) -> Iterator[Position]:
    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if board.in_bounds(nr, nc):
            yield nr, nc


def place_mines(board: Board, rng: random.Random) -> List[Position]:
    """Shuffle every cell index and mark the first ``total_mines`` as mines.

    Any previous layout is cleared first. Returns the mine positions.
    """
    indices = list(range(board.rows * board.cols))
    rng.shuffle(indices)
    board.mine.reset(False)
    board.mine.set_flat(indices[:board.total_mines], True)
    count_neighbors(board)
    return board.mine.where(True)


def count_neighbors(board: Board) -> None:
    """Recompute the adjacent-mine count of every non-mine cell."""
    for r, c in board.mine.positions():
        if board.mine.get(r, c):
            board.neighbors.set(r, c, 0)
            continue
        board.neighbors.set(r, c, sum(1 for nr, nc in iter_neighbors(board, r, c) if board.mine.get(nr, nc)))


def reveal_all_mines(board: Board) -> List[Position]:
    mines = board.mine.where(True)
    for r, c in mines:
        board.revealed.set(r, c, True)
    return mines


def has_revealed_mine(board: Board) -> bool:
    return any(board.revealed.get(r, c) for r, c in board.mine.where(True))


def all_safe_cells_revealed(board: Board) -> bool:
    for r, c, is_mine in board.mine.cells():
        if not is_mine and not board.revealed.get(r, c):
            return False
    return True
