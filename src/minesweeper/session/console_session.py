from __future__ import annotations

from esper import World

from minesweeper.components.game_state import GameMode
from minesweeper.constants import SAVE_EXTENSION, SAVE_TIMESTAMP_FORMAT
from minesweeper.events.bus import (
    EventBus,
    EVENT_COMMAND_ENTERED,
    EVENT_COMMAND_REJECTED,
    EVENT_HELP_REQUESTED,
    EVENT_LOAD_REQUESTED,
    EVENT_QUIT_REQUESTED,
    EVENT_SAVE_REQUESTED,
)
from minesweeper.rendering.text_renderer import render_board
from minesweeper.session.console_io import ConsoleIO
from minesweeper.systems.board import BoardSystem
from minesweeper.systems.input import REASON_OUT_OF_BOUNDS
from minesweeper.systems.persistence_system import LoadStatus, PersistenceSystem
from minesweeper.utils.coords import format_coord
from minesweeper.utils.game_state import get_game_state, set_game_mode

BANNER = (
    "=========================================\n"
    "   Text Minesweeper - type e.g. b2\n"
    "   Commands: flag <cell> / save / load / quit\n"
    "========================================="
)
PROMPT_LINES = (
    "<> Which cell do you want to uncover?",
    "<> Type 'flag b2' to mark or unmark a cell.",
    "<> Type 'save' to save the game.",
    "<> Type 'load' to load another game.",
)
DIVIDER = "=" * 66
HELP_TEXT = (
    "Cells are named by row letter and column number, e.g. a1 or C4.\n"
    "  <cell>         uncover a cell\n"
    "  flag <cell>    toggle a flag (also: f <cell>)\n"
    "  save           save the game to a file\n"
    "  load           load a saved game\n"
    "  quit           leave the game"
)
NAME_PROMPT = "Enter file name (without extension): "


class ConsoleSession:
    """Interactive loop: render, read one command, dispatch it, repeat.

    Commands travel through the event bus as ``command_entered``; the
    InputSystem turns them into board requests and this session answers the
    save/load/help/quit requests and the rejection notices.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        persistence: PersistenceSystem,
        io: ConsoleIO,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.persistence = persistence
        self.io = io
        self.event_bus.subscribe(EVENT_COMMAND_REJECTED, self._on_command_rejected)
        self.event_bus.subscribe(EVENT_SAVE_REQUESTED, self._on_save_requested)
        self.event_bus.subscribe(EVENT_LOAD_REQUESTED, self._on_load_requested)
        self.event_bus.subscribe(EVENT_HELP_REQUESTED, self._on_help_requested)
        self.event_bus.subscribe(EVENT_QUIT_REQUESTED, self._on_quit_requested)

    def run(self) -> GameMode:
        """Play until the board is won or lost, or the player quits."""
        self.io.write(BANNER)
        self.io.write()
        while True:
            self.io.write(render_board(self.board_system.board))
            if self.board_system.is_lost():
                self._announce_loss()
                return self._finish(GameMode.LOST)
            if self.board_system.is_win():
                self.io.write("Congratulations! You won!")
                return self._finish(GameMode.WON)
            if get_game_state(self.world).mode == GameMode.QUIT:
                self.io.write("Goodbye!")
                return GameMode.QUIT
            for line in PROMPT_LINES:
                self.io.write(line)
            command = self.io.read_line("> ")
            if command is None:
                self.event_bus.emit(EVENT_QUIT_REQUESTED)
                self.io.write("Goodbye!")
                return GameMode.QUIT
            self.io.write(DIVIDER)
            self.event_bus.emit(EVENT_COMMAND_ENTERED, text=command)

    def _finish(self, mode: GameMode) -> GameMode:
        set_game_mode(self.world, self.event_bus, mode)
        return mode

    def _announce_loss(self) -> None:
        trigger = get_game_state(self.world).trigger_cell
        if trigger is not None:
            cell = format_coord(*trigger)
            self.io.write(f"Boom!! Game over. Cell {cell} contained a mine.")
        else:
            self.io.write("Boom!! Game over.")
        self.io.write()

    def _on_command_rejected(self, sender, **payload) -> None:
        if payload.get("reason") == REASON_OUT_OF_BOUNDS:
            self.io.write("Out of bounds, try again!")
        else:
            self.io.write("Invalid coordinate, try again!")

    def _on_help_requested(self, sender, **payload) -> None:
        self.io.write(HELP_TEXT)

    def _on_quit_requested(self, sender, **payload) -> None:
        set_game_mode(self.world, self.event_bus, GameMode.QUIT)

    def _ask_name(self, prompt: str = NAME_PROMPT) -> str | None:
        line = self.io.read_line(prompt)
        if line is None:
            return None
        return line.strip()

    def _on_save_requested(self, sender, **payload) -> None:
        name = self._ask_name()
        if not name:
            self.io.write("( Save cancelled. )")
            return
        while self.persistence.save_exists(name):
            self.io.write(f'File "{name}{SAVE_EXTENSION}" already exists.')
            if self.io.confirm("Overwrite the file?"):
                break
            replacement = ""
            while not replacement:
                replacement = self._ask_name("Enter a new file name (without extension): ")
                if replacement is None:
                    self.io.write("( Save cancelled. )")
                    return
            name = replacement
        result = self.persistence.save_board(name)
        if result.ok:
            self.io.write(f"Game saved to {result.path.name}")
        else:
            self.io.write("( Could not save the game! )")

    def _on_load_requested(self, sender, **payload) -> None:
        self.io.write("Filename\t\tLast Modified")
        self.io.write("---------------------------------------")
        for entry in self.persistence.list_saves():
            self.io.write(f"{entry.path.name:<20}{entry.modified.strftime(SAVE_TIMESTAMP_FORMAT)}")
        name = self._ask_name()
        if not name:
            self.io.write("( Load cancelled. )")
            return
        result = self.persistence.load_board(name)
        if result.ok:
            self.io.write(f"Game loaded from {result.path.name}")
        elif result.status is LoadStatus.MALFORMED:
            self.io.write(f"( {result.path.name} is not a valid save file! )")
        else:
            self.io.write("( The file does not exist or cannot be read! )")
