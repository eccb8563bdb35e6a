from dataclasses import dataclass, field

from minesweeper.components.cell_grid import CellGrid


@dataclass(slots=True)
class Board:
    """Complete minefield state for the single board entity.

    ``mine``, ``revealed`` and ``flagged`` are always ``rows x cols``.
    ``neighbors`` is derived from ``mine`` by ``board_ops.count_neighbors``
    and is never persisted; its value on mine cells is unused.
    """
    rows: int
    cols: int
    total_mines: int = 0
    mine: CellGrid = field(default=None)
    revealed: CellGrid = field(default=None)
    flagged: CellGrid = field(default=None)
    neighbors: CellGrid = field(default=None)
    lost: bool = False

    def __post_init__(self) -> None:
        if self.mine is None:
            self.mine = CellGrid(self.rows, self.cols, False)
        if self.revealed is None:
            self.revealed = CellGrid(self.rows, self.cols, False)
        if self.flagged is None:
            self.flagged = CellGrid(self.rows, self.cols, False)
        if self.neighbors is None:
            self.neighbors = CellGrid(self.rows, self.cols, 0)
        for name in ("mine", "revealed", "flagged", "neighbors"):
            grid: CellGrid = getattr(self, name)
            if (grid.rows, grid.cols) != (self.rows, self.cols):
                raise ValueError(
                    f"{name} grid is {grid.rows}x{grid.cols}, board is {self.rows}x{self.cols}"
                )

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
