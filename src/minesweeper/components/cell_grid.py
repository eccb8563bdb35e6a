from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Sequence, Tuple


@dataclass(slots=True)
class CellGrid:
    """Fixed-size ``rows x cols`` grid stored in a single flat list.

    Every access goes through ``(row, col)`` and is bounds-checked here, so
    callers never index the backing list directly. ``fill`` is the initial
    value of every cell.
    """

    rows: int
    cols: int
    fill: Any = False
    _cells: List[Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"grid dimensions must be non-negative, got {self.rows}x{self.cols}")
        self._cells = [self.fill] * (self.rows * self.cols)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]], fill: Any = False) -> "CellGrid":
        """Build a grid from nested row sequences, rejecting ragged input."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        grid = cls(height, width, fill)
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {r} has {len(row)} cells, expected {width}")
            for c, value in enumerate(row):
                grid._cells[r * width + c] = value
        return grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _index(self, row: int, col: int) -> int:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return row * self.cols + col

    def get(self, row: int, col: int) -> Any:
        return self._cells[self._index(row, col)]

    def set(self, row: int, col: int, value: Any) -> None:
        self._cells[self._index(row, col)] = value

    def reset(self, value: Any | None = None) -> None:
        value = self.fill if value is None else value
        for i in range(len(self._cells)):
            self._cells[i] = value

    def count(self, value: Any = True) -> int:
        return sum(1 for cell in self._cells if cell == value)

    def positions(self) -> Iterator[Tuple[int, int]]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield r, c

    def cells(self) -> Iterator[Tuple[int, int, Any]]:
        for i, value in enumerate(self._cells):
            r, c = divmod(i, self.cols)
            yield r, c, value

    def where(self, value: Any = True) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, cell in self.cells() if cell == value]

    def set_flat(self, indices: Iterable[int], value: Any) -> None:
        """Assign ``value`` to cells addressed by flat ``row * cols + col`` indices."""
        size = len(self._cells)
        for i in indices:
            if not 0 <= i < size:
                raise IndexError(f"flat index {i} outside grid of {size} cells")
            self._cells[i] = value

    def rows_view(self) -> List[Tuple[Any, ...]]:
        return [tuple(self._cells[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    def copy(self) -> "CellGrid":
        clone = CellGrid(self.rows, self.cols, self.fill)
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CellGrid):
            return NotImplemented
        return (self.rows, self.cols, self._cells) == (other.rows, other.cols, other._cells)
