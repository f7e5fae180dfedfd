"""Position component.

Immutable integer grid coordinates, row-major: ``row`` grows downward and
``col`` grows to the right. Positions are plain values with no identity
beyond their coordinates, so they are used directly as keys in sets, maps and
visited-sets.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        row: Row index (0 at top).
        col: Column index (0 at left).
    """

    row: int
    col: int

    def offset(self, d_row: int, d_col: int) -> "Position":
        """Return the position translated by ``(d_row, d_col)``."""
        return Position(self.row + d_row, self.col + d_col)
