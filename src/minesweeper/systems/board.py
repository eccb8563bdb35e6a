from __future__ import annotations

import random

from esper import World

from minesweeper.components.board import Board
from minesweeper.constants import DEFAULT_COLS, DEFAULT_MINES, DEFAULT_ROWS
from minesweeper.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_REPLACED,
    EVENT_CELL_FLAG_REQUEST,
    EVENT_CELL_REVEAL_REQUEST,
    EVENT_CELL_REVEALED,
    EVENT_FLAG_TOGGLED,
    EVENT_MINE_TRIGGERED,
)
from minesweeper.systems.board_ops import (
    all_safe_cells_revealed,
    place_mines,
    reveal_all_mines,
    validate_dimensions,
)


class BoardSystem:
    """Owns the board entity and applies reveal/flag transitions to it."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        mines: int = DEFAULT_MINES,
        *,
        rng: random.Random | None = None,
    ) -> None:
        validate_dimensions(rows, cols, mines)
        self.world = world
        self.event_bus = event_bus
        candidate_rng = rng or getattr(world, "random", None)
        self._rng: random.Random = candidate_rng or random.SystemRandom()
        board = Board(rows=rows, cols=cols, total_mines=mines)
        place_mines(board, self._rng)
        self.board_entity = self.world.create_entity(board)
        self.event_bus.subscribe(EVENT_CELL_REVEAL_REQUEST, self.on_reveal_request)
        self.event_bus.subscribe(EVENT_CELL_FLAG_REQUEST, self.on_flag_request)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    def replace_board(self, board: Board) -> None:
        """Swap in a fully built board, e.g. one decoded from a save file."""
        self.world.add_component(self.board_entity, board)
        self.event_bus.emit(
            EVENT_BOARD_REPLACED,
            rows=board.rows,
            cols=board.cols,
            total_mines=board.total_mines,
        )
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="replaced", positions=[])

    def in_bounds(self, row: int, col: int) -> bool:
        return self.board.in_bounds(row, col)

    def reveal_cell(self, row: int, col: int) -> bool:
        """Uncover one cell. Returns False when the call changed nothing.

        Flagged, already revealed and out-of-bounds cells are ignored. Zero
        cells do not open their neighbours; each cell is revealed on its own.
        """
        board = self.board
        if not board.in_bounds(row, col):
            return False
        if board.revealed.get(row, col) or board.flagged.get(row, col):
            return False
        board.revealed.set(row, col, True)
        if board.mine.get(row, col):
            board.lost = True
            mines = reveal_all_mines(board)
            self.event_bus.emit(EVENT_MINE_TRIGGERED, row=row, col=col, mines=mines)
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="mine_triggered", positions=mines)
        else:
            self.event_bus.emit(EVENT_CELL_REVEALED, row=row, col=col, neighbors=board.neighbors.get(row, col))
            self.event_bus.emit(EVENT_BOARD_CHANGED, reason="revealed", positions=[(row, col)])
        return True

    def toggle_flag(self, row: int, col: int) -> bool:
        board = self.board
        if not board.in_bounds(row, col) or board.revealed.get(row, col):
            return False
        flagged = not board.flagged.get(row, col)
        board.flagged.set(row, col, flagged)
        self.event_bus.emit(EVENT_FLAG_TOGGLED, row=row, col=col, flagged=flagged)
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="flag_toggled", positions=[(row, col)])
        return True

    def is_win(self) -> bool:
        return all_safe_cells_revealed(self.board)

    def is_lost(self) -> bool:
        return self.board.lost

    def on_reveal_request(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.reveal_cell(row, col)

    def on_flag_request(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        self.toggle_flag(row, col)
