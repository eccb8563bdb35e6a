"""Text rendering of the board for the console session."""
from __future__ import annotations

from typing import List

from minesweeper.components.board import Board
from minesweeper.constants import CELL_WIDTH, GLYPH_FLAG, GLYPH_HIDDEN, GLYPH_MINE, ROW_LABEL_WIDTH
from minesweeper.utils.coords import row_label


def cell_glyph(board: Board, row: int, col: int) -> str:
    if board.revealed.get(row, col):
        if board.mine.get(row, col):
            return GLYPH_MINE
        return str(board.neighbors.get(row, col))
    if board.flagged.get(row, col):
        return GLYPH_FLAG
    return GLYPH_HIDDEN


def _frame(cols: int) -> str:
    return " " * ROW_LABEL_WIDTH + "+---" * cols + "+"


def _separator(cols: int) -> str:
    return " " * ROW_LABEL_WIDTH + "|" + "+".join(["---"] * cols) + "|"


def render_board(board: Board) -> str:
    """Draw the board as a framed grid with letter rows and 1-based columns.

        1   2   3
       +---+---+---+
     a | 1 | F |   |
       |---+---+---|
     b | X |   | 2 |
       +---+---+---+
    """
    pad = " " * (ROW_LABEL_WIDTH + 2)
    header = pad + "".join(f"{c + 1:<{CELL_WIDTH}}" for c in range(board.cols))
    lines: List[str] = [header.rstrip(), _frame(board.cols)]
    for r in range(board.rows):
        cells = "".join(f"| {cell_glyph(board, r, c)} " for c in range(board.cols))
        lines.append(f" {row_label(r)} {cells}|")
        if r < board.rows - 1:
            lines.append(_separator(board.cols))
    lines.append(_frame(board.cols))
    return "\n".join(lines)
