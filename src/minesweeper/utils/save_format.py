"""Plain-text save format.

Layout::

    <rows> <cols> <total_mines>
    <rows lines of cols 0/1 tokens>   mine grid
    <rows lines of cols 0/1 tokens>   revealed grid
    <rows lines of cols 0/1 tokens>   flagged grid

Neighbour counts and the lost flag are not stored. Reading is token based,
so line breaks inside the grid section are not significant, but the token
count must be exact.
"""
from __future__ import annotations

from typing import List

from minesweeper.components.board import Board
from minesweeper.components.cell_grid import CellGrid
from minesweeper.systems.board_ops import count_neighbors, has_revealed_mine, validate_dimensions

PERSISTED_GRIDS = ("mine", "revealed", "flagged")


class SaveFormatError(ValueError):
    """Raised when save file contents cannot be turned into a board."""


def _encode_grid(grid: CellGrid) -> List[str]:
    return [" ".join("1" if cell else "0" for cell in row) for row in grid.rows_view()]


def encode_board(board: Board) -> str:
    lines = [f"{board.rows} {board.cols} {board.total_mines}"]
    for name in PERSISTED_GRIDS:
        lines.extend(_encode_grid(getattr(board, name)))
    return "\n".join(lines) + "\n"


def _parse_int(token: str, what: str) -> int:
    # int() would also take "+1", "1_0" and non-ASCII digits.
    digits = token[1:] if token.startswith("-") else token
    if not (digits.isascii() and digits.isdecimal()):
        raise SaveFormatError(f"{what}: expected an integer, got {token!r}")
    return int(token)


def decode_board(text: str, *, restore_lost: bool = True) -> Board:
    """Build a new board from save file text.

    With ``restore_lost`` the lost flag is re-derived from the data (a
    revealed mine means the game was lost); otherwise it is always cleared.
    Raises ``SaveFormatError`` on any malformed or truncated input.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise SaveFormatError("missing header: expected '<rows> <cols> <mines>'")
    rows = _parse_int(tokens[0], "rows")
    cols = _parse_int(tokens[1], "cols")
    total_mines = _parse_int(tokens[2], "mine count")
    try:
        validate_dimensions(rows, cols, total_mines)
    except ValueError as exc:
        raise SaveFormatError(str(exc)) from None

    cells = rows * cols
    body = tokens[3:]
    expected = cells * len(PERSISTED_GRIDS)
    if len(body) != expected:
        raise SaveFormatError(f"expected {expected} grid values for a {rows}x{cols} board, found {len(body)}")

    board = Board(rows=rows, cols=cols, total_mines=total_mines)
    for index, name in enumerate(PERSISTED_GRIDS):
        chunk = body[index * cells:(index + 1) * cells]
        values = [_parse_int(token, f"{name} grid") != 0 for token in chunk]
        grid: CellGrid = getattr(board, name)
        grid.set_flat((i for i, value in enumerate(values) if value), True)

    count_neighbors(board)
    board.lost = restore_lost and has_revealed_mine(board)
    return board
