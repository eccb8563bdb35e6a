from __future__ import annotations

import random
from typing import Sequence

from esper import World

from minesweeper.components.board import Board
from minesweeper.components.cell_grid import CellGrid
from minesweeper.events.bus import EventBus
from minesweeper.systems.board import BoardSystem
from minesweeper.systems.board_ops import count_neighbors
from minesweeper.world import create_world


def _marks(layout: Sequence[str], mark: str) -> list[list[bool]]:
    return [[ch == mark for ch in row] for row in layout]


def board_from_layout(
    layout: Sequence[str],
    *,
    revealed: Sequence[str] | None = None,
    flagged: Sequence[str] | None = None,
) -> Board:
    """Build a board from row strings where ``*`` marks a mine.

    ``revealed`` and ``flagged`` use ``x`` to mark set cells.
    """
    mine = CellGrid.from_rows(_marks(layout, "*"))
    board = Board(rows=mine.rows, cols=mine.cols, total_mines=mine.count(True), mine=mine)
    if revealed is not None:
        board.revealed = CellGrid.from_rows(_marks(revealed, "x"))
    if flagged is not None:
        board.flagged = CellGrid.from_rows(_marks(flagged, "x"))
    count_neighbors(board)
    return board


def build_board_world(
    layout: Sequence[str],
    **marks: Sequence[str] | None,
) -> tuple[EventBus, World, BoardSystem]:
    """Create a world whose board entity carries the given fixed layout."""
    bus = EventBus()
    world = create_world(bus, rng=random.Random(0))
    board = board_from_layout(layout, **marks)
    system = BoardSystem(world, bus, board.rows, board.cols, board.total_mines)
    system.replace_board(board)
    return bus, world, system
