from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import List

from esper import World

from minesweeper.constants import SAVE_EXTENSION
from minesweeper.events.bus import (
    EventBus,
    EVENT_GAME_LOADED,
    EVENT_GAME_SAVED,
    EVENT_LOAD_FAILED,
    EVENT_SAVE_FAILED,
)
from minesweeper.systems.board import BoardSystem
from minesweeper.utils.save_format import SaveFormatError, decode_board, encode_board

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    OK = auto()
    NOT_FOUND = auto()
    MALFORMED = auto()
    UNREADABLE = auto()


@dataclass(slots=True)
class SaveResult:
    ok: bool
    name: str
    path: Path
    error: str | None = None


@dataclass(slots=True)
class LoadResult:
    status: LoadStatus
    name: str
    path: Path
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.OK


@dataclass(slots=True)
class SaveEntry:
    name: str
    path: Path
    modified: datetime


class PersistenceSystem:
    """Writes the live board to save files and swaps loaded boards in.

    Failures are returned as results and announced on the bus; nothing here
    raises for a missing, unreadable or malformed file.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        board_system: BoardSystem,
        *,
        save_dir: Path | str | None = None,
        restore_lost: bool = True,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.board_system = board_system
        self.save_dir = Path(save_dir) if save_dir is not None else Path.cwd()
        self.restore_lost = restore_lost

    def path_for(self, name: str) -> Path:
        return self.save_dir / f"{name}{SAVE_EXTENSION}"

    def save_exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def save_board(self, name: str) -> SaveResult:
        """Write the board to exactly ``name`` + extension, replacing any existing file."""
        path = self.path_for(name)
        payload = encode_board(self.board_system.board)
        try:
            with path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(payload)
        except (OSError, ValueError) as exc:
            logger.warning("could not save board to %s: %s", path, exc)
            self.event_bus.emit(EVENT_SAVE_FAILED, save_name=name, path=path, error=str(exc))
            return SaveResult(ok=False, name=name, path=path, error=str(exc))
        self.event_bus.emit(EVENT_GAME_SAVED, save_name=name, path=path)
        return SaveResult(ok=True, name=name, path=path)

    def load_board(self, name: str) -> LoadResult:
        """Replace the live board with the one saved under ``name``.

        The file is fully decoded before the swap, so a failed load leaves
        the current board untouched.
        """
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as handle:
                text = handle.read()
        except FileNotFoundError:
            return self._load_failed(name, path, LoadStatus.NOT_FOUND, "no such save file")
        except (OSError, ValueError) as exc:
            logger.warning("could not read save file %s: %s", path, exc)
            return self._load_failed(name, path, LoadStatus.UNREADABLE, str(exc))
        try:
            board = decode_board(text, restore_lost=self.restore_lost)
        except SaveFormatError as exc:
            logger.warning("malformed save file %s: %s", path, exc)
            return self._load_failed(name, path, LoadStatus.MALFORMED, str(exc))
        self.board_system.replace_board(board)
        self.event_bus.emit(EVENT_GAME_LOADED, save_name=name, path=path)
        return LoadResult(status=LoadStatus.OK, name=name, path=path)

    def _load_failed(self, name: str, path: Path, status: LoadStatus, error: str) -> LoadResult:
        self.event_bus.emit(EVENT_LOAD_FAILED, save_name=name, path=path, status=status, error=error)
        return LoadResult(status=status, name=name, path=path, error=error)

    def list_saves(self) -> List[SaveEntry]:
        """Return every save file in the save directory, sorted by name."""
        if not self.save_dir.is_dir():
            return []
        entries: List[SaveEntry] = []
        for path in self.save_dir.iterdir():
            if path.suffix != SAVE_EXTENSION or not path.is_file():
                continue
            try:
                modified = datetime.fromtimestamp(path.stat().st_mtime)
            except OSError:
                continue
            entries.append(SaveEntry(name=path.stem, path=path, modified=modified))
        entries.sort(key=lambda entry: entry.name)
        return entries
