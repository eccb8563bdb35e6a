from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that nobody else holds alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, /, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & COMMANDS
# ============================================================================
EVENT_COMMAND_ENTERED = "command_entered"      # payload: text=str
EVENT_COMMAND_REJECTED = "command_rejected"    # payload: text=str, reason=str ("invalid_coordinate" | "out_of_bounds")
EVENT_SAVE_REQUESTED = "save_requested"        # payload: (none)
EVENT_LOAD_REQUESTED = "load_requested"        # payload: (none)
EVENT_QUIT_REQUESTED = "quit_requested"        # payload: (none)
EVENT_HELP_REQUESTED = "help_requested"        # payload: (none)


# ============================================================================
# BOARD MECHANICS
# ============================================================================
EVENT_CELL_REVEAL_REQUEST = "cell_reveal_request"  # payload: row, col
EVENT_CELL_FLAG_REQUEST = "cell_flag_request"      # payload: row, col
EVENT_CELL_REVEALED = "cell_revealed"              # payload: row, col, neighbors=int
EVENT_MINE_TRIGGERED = "mine_triggered"            # payload: row, col, mines=list[(r,c)]
EVENT_FLAG_TOGGLED = "flag_toggled"                # payload: row, col, flagged=bool
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(r,c)]
EVENT_BOARD_REPLACED = "board_replaced"            # payload: rows, cols, total_mines


# ============================================================================
# GAME FLOW
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
EVENT_GAME_WON = "game_won"                    # payload: (none)
EVENT_GAME_LOST = "game_lost"                  # payload: row, col


# ============================================================================
# PERSISTENCE
# ============================================================================
EVENT_GAME_SAVED = "game_saved"    # payload: save_name=str, path=Path
EVENT_SAVE_FAILED = "save_failed"  # payload: save_name=str, path=Path, error=str
EVENT_GAME_LOADED = "game_loaded"  # payload: save_name=str, path=Path
EVENT_LOAD_FAILED = "load_failed"  # payload: save_name=str, path=Path, status=LoadStatus, error=str
