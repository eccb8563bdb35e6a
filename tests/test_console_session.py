from __future__ import annotations

from minesweeper.components.game_state import GameMode
from minesweeper.rendering.text_renderer import render_board
from minesweeper.session.console_session import ConsoleSession
from minesweeper.systems.input import InputSystem
from minesweeper.systems.outcome_system import OutcomeSystem
from minesweeper.systems.persistence_system import PersistenceSystem
from minesweeper.utils.game_state import get_game_state
from tests.helpers import build_board_world


class ScriptedConsole:
    """ConsoleIO fake that replays prepared lines and confirmation answers."""

    def __init__(self, lines, confirmations=()):
        self.lines = list(lines)
        self.confirmations = list(confirmations)
        self.output: list[str] = []
        self.prompts: list[str] = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text=""):
        self.output.append(text)

    def confirm(self, prompt):
        self.prompts.append(prompt)
        return self.confirmations.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


def _session(tmp_path, layout, lines, confirmations=()):
    bus, world, system = build_board_world(layout)
    InputSystem(world, bus)
    OutcomeSystem(world, bus)
    persistence = PersistenceSystem(world, bus, system, save_dir=tmp_path)
    console = ScriptedConsole(lines, confirmations)
    session = ConsoleSession(world, bus, system, persistence, console)
    return session, system, persistence, console, world


def test_session_ends_with_win(tmp_path):
    session, system, _, console, world = _session(tmp_path, ["*.", ".."], ["a2", "b1", "b2"])
    assert session.run() == GameMode.WON
    assert "Congratulations! You won!" in console.output
    assert get_game_state(world).mode == GameMode.WON


def test_session_ends_with_loss_naming_cell(tmp_path):
    session, system, _, console, world = _session(tmp_path, ["*.", ".."], ["a2", "A1", "b2"])
    assert session.run() == GameMode.LOST
    assert "Boom!! Game over. Cell a1 contained a mine." in console.output
    assert console.lines == ["b2"]


def test_session_reports_bad_input_and_keeps_going(tmp_path):
    session, system, _, console, _ = _session(tmp_path, ["*.", ".."], ["zz", "c1", "quit"])
    assert session.run() == GameMode.QUIT
    assert "Invalid coordinate, try again!" in console.output
    assert "Out of bounds, try again!" in console.output
    assert system.board.revealed.count(True) == 0


def test_end_of_input_quits(tmp_path):
    session, system, _, console, world = _session(tmp_path, ["*.", ".."], [])
    assert session.run() == GameMode.QUIT
    assert console.output[-1] == "Goodbye!"
    assert console.output.count(render_board(system.board)) == 1
    assert get_game_state(world).mode == GameMode.QUIT


def test_flag_command_shows_flag_glyph(tmp_path):
    session, system, _, console, _ = _session(tmp_path, ["*.", ".."], ["flag a1", "help", "exit"])
    session.run()
    assert system.board.flagged.get(0, 0)
    assert " a | F |   |" in console.output[-2]
    assert any("toggle a flag" in line for line in console.output)


def test_save_writes_new_file(tmp_path):
    session, _, _, console, _ = _session(tmp_path, ["*.", ".."], ["a2", "save", "slot", "quit"])
    session.run()
    assert (tmp_path / "slot.txt").exists()
    assert "Game saved to slot.txt" in console.output


def test_save_existing_file_declined_then_new_name(tmp_path):
    (tmp_path / "taken.txt").write_text("keep me", encoding="utf-8")
    session, _, _, console, _ = _session(
        tmp_path,
        ["*.", ".."],
        ["save", "taken", "", "fresh", "quit"],
        confirmations=[False],
    )
    session.run()
    assert (tmp_path / "taken.txt").read_text(encoding="utf-8") == "keep me"
    assert (tmp_path / "fresh.txt").exists()
    assert 'File "taken.txt" already exists.' in console.output


def test_save_existing_file_overwrite_confirmed(tmp_path):
    (tmp_path / "taken.txt").write_text("old", encoding="utf-8")
    session, _, _, console, _ = _session(
        tmp_path, ["*.", ".."], ["save", "taken", "quit"], confirmations=[True]
    )
    session.run()
    assert (tmp_path / "taken.txt").read_text(encoding="utf-8").startswith("2 2 1")
    assert "Overwrite the file?" in console.prompts


def test_load_lists_saves_and_replaces_board(tmp_path):
    (tmp_path / "small.txt").write_text("1 3 1\n1 0 0\n0 1 0\n0 0 0\n", encoding="utf-8")
    session, system, _, console, _ = _session(tmp_path, ["*.", ".."], ["load", "small", "a3"])
    assert session.run() == GameMode.WON
    assert any(line.startswith("small.txt") for line in console.output)
    assert "Game loaded from small.txt" in console.output
    assert (system.board.rows, system.board.cols) == (1, 3)


def test_load_failures_keep_board(tmp_path):
    (tmp_path / "bad.txt").write_text("2 2 1\n1 0\n", encoding="utf-8")
    session, system, _, console, _ = _session(
        tmp_path, ["*.", ".."], ["load", "missing", "load", "bad", "quit"]
    )
    session.run()
    assert "( The file does not exist or cannot be read! )" in console.output
    assert "( bad.txt is not a valid save file! )" in console.output
    assert (system.board.rows, system.board.cols) == (2, 2)


def test_save_with_unusable_name_reports_failure(tmp_path):
    session, _, _, console, _ = _session(tmp_path, ["*.", ".."], ["save", "bad\x00name", "quit"])
    assert session.run() == GameMode.QUIT
    assert "( Could not save the game! )" in console.output
    assert list(tmp_path.iterdir()) == []


def test_load_with_unusable_name_reports_failure(tmp_path):
    session, system, _, console, _ = _session(tmp_path, ["*.", ".."], ["load", "bad\x00name", "quit"])
    assert session.run() == GameMode.QUIT
    assert "( The file does not exist or cannot be read! )" in console.output
    assert (system.board.rows, system.board.cols) == (2, 2)


def test_loss_after_load_names_cell_from_loaded_board(tmp_path):
    (tmp_path / "next.txt").write_text("1 2 1\n0 1\n0 0\n0 0\n", encoding="utf-8")
    session, _, _, console, world = _session(tmp_path, ["*.", ".."], ["load", "next", "a2"])
    assert session.run() == GameMode.LOST
    assert "Boom!! Game over. Cell a2 contained a mine." in console.output
    assert get_game_state(world).trigger_cell == (0, 1)
