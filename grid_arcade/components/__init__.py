"""grid_arcade.components
=======================

Aggregate import surface for the value objects shared by every game:
:class:`Position`, :class:`Cell` (with its :class:`Tag` labels) and the
tetris :class:`Piece`.

All of them are frozen dataclasses with no behaviour beyond small
copy-with-change helpers; the game modules under :mod:`grid_arcade.games`
hold the rules that transform them, e.g.::

    from grid_arcade.components import Cell, Position, Tag
"""

from .cell import Cell, Tag, make_cell
from .piece import PIECE_SYMBOLS, SHAPES, Piece, PieceKind
from .position import Position

__all__ = [
    "Cell",
    "Tag",
    "make_cell",
    "Piece",
    "PieceKind",
    "PIECE_SYMBOLS",
    "SHAPES",
    "Position",
]
