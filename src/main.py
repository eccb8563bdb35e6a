"""Entry point for the text Minesweeper game.

Sets up the ECS world, event bus, systems and the console session.
"""
import logging
import sys

from minesweeper.constants import DEFAULT_COLS, DEFAULT_MINES, DEFAULT_ROWS
from minesweeper.events.bus import EventBus
from minesweeper.session.console_io import StdConsole
from minesweeper.session.console_session import ConsoleSession
from minesweeper.systems.board import BoardSystem
from minesweeper.systems.input import InputSystem
from minesweeper.systems.outcome_system import OutcomeSystem
from minesweeper.systems.persistence_system import PersistenceSystem
from minesweeper.world import create_world


def _configure_console():
    # Box-drawing and status text assume UTF-8 even on legacy Windows code pages.
    for stream in (sys.stdout, sys.stdin):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


def main():
    _configure_console()
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    event_bus = EventBus()
    world = create_world(event_bus)
    board_system = BoardSystem(world, event_bus, DEFAULT_ROWS, DEFAULT_COLS, DEFAULT_MINES)
    InputSystem(world, event_bus)
    OutcomeSystem(world, event_bus)
    persistence = PersistenceSystem(world, event_bus, board_system)
    session = ConsoleSession(world, event_bus, board_system, persistence, StdConsole())
    session.run()

if __name__ == "__main__":
    main()
