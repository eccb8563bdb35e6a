from esper import World

from minesweeper.events.bus import (
    EventBus,
    EVENT_CELL_FLAG_REQUEST,
    EVENT_CELL_REVEAL_REQUEST,
    EVENT_COMMAND_ENTERED,
    EVENT_COMMAND_REJECTED,
    EVENT_HELP_REQUESTED,
    EVENT_LOAD_REQUESTED,
    EVENT_QUIT_REQUESTED,
    EVENT_SAVE_REQUESTED,
)
from minesweeper.systems.board_ops import get_board
from minesweeper.utils.coords import parse_coord
from minesweeper.utils.game_state import is_playing

KEYWORD_EVENTS = {
    "save": EVENT_SAVE_REQUESTED,
    "load": EVENT_LOAD_REQUESTED,
    "quit": EVENT_QUIT_REQUESTED,
    "exit": EVENT_QUIT_REQUESTED,
    "help": EVENT_HELP_REQUESTED,
}
FLAG_KEYWORDS = ("flag", "f")

REASON_INVALID = "invalid_coordinate"
REASON_OUT_OF_BOUNDS = "out_of_bounds"


class InputSystem:
    """Translates typed commands into board and session requests."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_COMMAND_ENTERED, self.on_command)

    def on_command(self, sender, **kwargs):
        text = kwargs.get('text')
        if text is None:
            return
        if not is_playing(self.world):
            return
        command = text.strip()
        keyword = command.lower()
        if keyword in KEYWORD_EVENTS:
            self.event_bus.emit(KEYWORD_EVENTS[keyword])
            return
        parts = command.split()
        if len(parts) == 2 and parts[0].lower() in FLAG_KEYWORDS:
            self._emit_cell_request(EVENT_CELL_FLAG_REQUEST, parts[1], command)
            return
        self._emit_cell_request(EVENT_CELL_REVEAL_REQUEST, command, command)

    def _emit_cell_request(self, event_name: str, coord_text: str, command: str):
        coord = parse_coord(coord_text)
        if coord is None:
            self.event_bus.emit(EVENT_COMMAND_REJECTED, text=command, reason=REASON_INVALID)
            return
        row, col = coord
        if not get_board(self.world).in_bounds(row, col):
            self.event_bus.emit(EVENT_COMMAND_REJECTED, text=command, reason=REASON_OUT_OF_BOUNDS)
            return
        self.event_bus.emit(event_name, row=row, col=col)
