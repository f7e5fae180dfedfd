"""Immutable grid ``Board``.

The board is the one data structure every game shares and the only thing a
renderer ever sees. It is a frozen dataclass over a persistent vector of
persistent row vectors, so:

* ``with_cell`` returns a new board sharing all untouched rows with the
  receiver (structural sharing keeps copy cost proportional to one row);
* a board handed to a renderer can never change afterwards, which is what
  lets games draw selections and paths on scratch boards without touching
  their authoritative one.

Dimensions are fixed at creation. Games never resize a board; a reset
rebuilds it via :meth:`Board.create`.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_arcade.components import Cell, Position
from grid_arcade.errors import OutOfRangeError


@dataclass(frozen=True)
class Board:
    """Fixed ``rows x cols`` grid of :class:`Cell` values.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        cells: ``cells[row][col]`` persistent vectors.
    """

    rows: int
    cols: int
    cells: PVector[PVector[Cell]]

    @classmethod
    def create(cls, rows: int, cols: int, default_cell: Cell = Cell()) -> "Board":
        """Build a board filled with ``default_cell``.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        row = pvector([default_cell] * cols)
        return cls(rows=rows, cols=cols, cells=pvector([row] * rows))

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise OutOfRangeError(pos.row, pos.col, self.rows, self.cols)

    def get(self, pos: Position) -> Cell:
        """Return the cell at ``pos``; raises ``OutOfRangeError`` outside the board."""
        self._check_bounds(pos)
        return self.cells[pos.row][pos.col]

    def with_cell(self, pos: Position, cell: Cell) -> "Board":
        """Return a board equal to this one except at ``pos``."""
        self._check_bounds(pos)
        row = self.cells[pos.row].set(pos.col, cell)
        return Board(rows=self.rows, cols=self.cols, cells=self.cells.set(pos.row, row))

    def with_cells(self, updates: Iterable[Tuple[Position, Cell]]) -> "Board":
        """Apply several ``(pos, cell)`` replacements; later entries win."""
        cells = self.cells.evolver()
        for pos, cell in updates:
            self._check_bounds(pos)
            cells[pos.row] = cells[pos.row].set(pos.col, cell)
        return Board(rows=self.rows, cols=self.cols, cells=cells.persistent())

    def update(self, pos: Position, fn: Callable[[Cell], Cell]) -> "Board":
        """Replace the cell at ``pos`` with ``fn(cell)``."""
        return self.with_cell(pos, fn(self.get(pos)))

    def map_cells(self, fn: Callable[[Position, Cell], Cell]) -> "Board":
        """Return a board with every cell replaced by ``fn(pos, cell)``."""
        return Board(
            rows=self.rows,
            cols=self.cols,
            cells=pvector(
                pvector(fn(Position(r, c), cell) for c, cell in enumerate(row))
                for r, row in enumerate(self.cells)
            ),
        )

    def positions(self) -> Iterator[Position]:
        """Yield every coordinate in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield Position(r, c)

    def row(self, r: int) -> PVector[Cell]:
        self._check_bounds(Position(r, 0))
        return self.cells[r]

    def column(self, c: int) -> PVector[Cell]:
        self._check_bounds(Position(0, c))
        return pvector(row[c] for row in self.cells)

    def find(self, predicate: Callable[[Cell], bool]) -> List[Position]:
        """Positions (row-major) whose cell satisfies ``predicate``."""
        return [pos for pos in self.positions() if predicate(self.get(pos))]

    def symbols(self) -> Tuple[Tuple[str, ...], ...]:
        """Nested tuple of symbols; handy for assertions and debugging."""
        return tuple(tuple(cell.symbol for cell in row) for row in self.cells)
