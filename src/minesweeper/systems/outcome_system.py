from __future__ import annotations

from esper import World

from minesweeper.components.game_state import GameMode
from minesweeper.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_REPLACED,
    EVENT_GAME_LOST,
    EVENT_GAME_WON,
    EVENT_MINE_TRIGGERED,
)
from minesweeper.systems.board_ops import all_safe_cells_revealed, get_board
from minesweeper.utils.game_state import get_game_state, set_game_mode


class OutcomeSystem:
    """Moves the session out of PLAYING once the board is won or lost.

    Loss is checked before win: revealing a mine also reveals every mine, and
    a board whose only hidden cells were mines must still count as lost.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MINE_TRIGGERED, self._on_mine_triggered)
        self.event_bus.subscribe(EVENT_BOARD_REPLACED, self._on_board_replaced)
        self.event_bus.subscribe(EVENT_BOARD_CHANGED, self._on_board_changed)

    def _on_mine_triggered(self, sender, **payload) -> None:
        row = payload.get("row")
        col = payload.get("col")
        if row is not None and col is not None:
            get_game_state(self.world).trigger_cell = (row, col)

    def _on_board_replaced(self, sender, **payload) -> None:
        get_game_state(self.world).trigger_cell = None

    def _on_board_changed(self, sender, **payload) -> None:
        self.evaluate()

    def evaluate(self) -> GameMode:
        """Re-derive the mode from the board and announce any transition."""
        state = get_game_state(self.world)
        board = get_board(self.world)
        if board.lost:
            target = GameMode.LOST
        elif all_safe_cells_revealed(board):
            target = GameMode.WON
        else:
            target = GameMode.PLAYING
        if state.mode == GameMode.QUIT or state.mode == target:
            return state.mode
        set_game_mode(self.world, self.event_bus, target)
        if target == GameMode.LOST:
            row, col = state.trigger_cell or (None, None)
            self.event_bus.emit(EVENT_GAME_LOST, row=row, col=col)
        elif target == GameMode.WON:
            self.event_bus.emit(EVENT_GAME_WON)
        return target
