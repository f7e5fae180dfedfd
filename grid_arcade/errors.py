"""Exception hierarchy.

Only contract violations raise. Rejected gameplay input, missing paths and
terminal states are ordinary results (see the individual game modules).
"""


class GridArcadeError(Exception):
    """Base class for all errors raised by the engine."""


class OutOfRangeError(GridArcadeError, IndexError):
    """A coordinate outside ``[0, rows) x [0, cols)`` was accessed."""

    def __init__(self, row: int, col: int, rows: int, cols: int) -> None:
        super().__init__(f"Out of bounds: {(row, col)} for board {rows}x{cols}")
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class EngineNotStartedError(GridArcadeError, RuntimeError):
    """An engine was ticked or fed input before ``start()``."""
