"""Tetromino piece component.

A :class:`Piece` is only ``(kind, rotation, anchor)``. Its occupied cells are
derived on demand by applying the shape offsets of ``SHAPES[kind][rotation]``
to the anchor, so moving or rotating a piece is a cheap ``replace`` and
nothing touches the board until the piece locks.

Offsets are ``(d_row, d_col)`` pairs relative to the anchor; some rotation
states reach one row above the anchor, which is why the validity test in
:mod:`grid_arcade.games.tetris` tolerates rows above 0.
"""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Dict, Tuple

from grid_arcade.components.position import Position


class PieceKind(StrEnum):
    """The seven tetrominoes."""

    I = "I"  # noqa: E741
    O = "O"  # noqa: E741
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


Offset = Tuple[int, int]
Shape = Tuple[Offset, Offset, Offset, Offset]

SHAPES: Dict[PieceKind, Tuple[Shape, Shape, Shape, Shape]] = {
    PieceKind.I: (
        ((0, -1), (0, 0), (0, 1), (0, 2)),
        ((-1, 1), (0, 1), (1, 1), (2, 1)),
        ((1, -1), (1, 0), (1, 1), (1, 2)),
        ((-1, 0), (0, 0), (1, 0), (2, 0)),
    ),
    PieceKind.O: (
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
        ((0, 0), (0, 1), (1, 0), (1, 1)),
    ),
    PieceKind.T: (
        ((0, -1), (0, 0), (0, 1), (1, 0)),
        ((-1, 0), (0, 0), (1, 0), (0, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 0)),
        ((-1, 0), (0, 0), (1, 0), (0, -1)),
    ),
    PieceKind.S: (
        ((0, 0), (0, 1), (1, -1), (1, 0)),
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
        ((0, 0), (0, 1), (1, -1), (1, 0)),
        ((-1, 0), (0, 0), (0, 1), (1, 1)),
    ),
    PieceKind.Z: (
        ((0, -1), (0, 0), (1, 0), (1, 1)),
        ((-1, 1), (0, 0), (0, 1), (1, 0)),
        ((0, -1), (0, 0), (1, 0), (1, 1)),
        ((-1, 1), (0, 0), (0, 1), (1, 0)),
    ),
    PieceKind.J: (
        ((0, -1), (0, 0), (0, 1), (1, -1)),
        ((-1, 0), (0, 0), (1, 0), (1, 1)),
        ((0, -1), (0, 0), (0, 1), (-1, 1)),
        ((-1, -1), (-1, 0), (0, 0), (1, 0)),
    ),
    PieceKind.L: (
        ((0, -1), (0, 0), (0, 1), (1, 1)),
        ((-1, 0), (0, 0), (1, 0), (1, -1)),
        ((0, -1), (0, 0), (0, 1), (-1, -1)),
        ((-1, 0), (-1, 1), (0, 0), (1, 0)),
    ),
}

PIECE_SYMBOLS: Dict[PieceKind, str] = {
    PieceKind.I: "🟦",
    PieceKind.O: "🟨",
    PieceKind.T: "🟪",
    PieceKind.S: "🟩",
    PieceKind.Z: "🟥",
    PieceKind.J: "🟦",
    PieceKind.L: "🟧",
}


@dataclass(frozen=True)
class Piece:
    """Falling tetromino.

    Attributes:
        kind: Which of the seven shapes.
        rotation: Rotation state index in ``0..3``.
        anchor: Board position the shape offsets are applied to.
    """

    kind: PieceKind
    rotation: int
    anchor: Position

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self.kind]

    def cells(self) -> Tuple[Position, ...]:
        """Occupied positions at the current rotation (may include rows < 0)."""
        shape = SHAPES[self.kind][self.rotation % 4]
        return tuple(self.anchor.offset(d_row, d_col) for d_row, d_col in shape)

    def translated(self, d_row: int, d_col: int) -> "Piece":
        return replace(self, anchor=self.anchor.offset(d_row, d_col))

    def rotated(self) -> "Piece":
        """Next clockwise rotation state (anchor unchanged)."""
        return replace(self, rotation=(self.rotation + 1) % 4)
