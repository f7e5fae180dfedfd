"""Cell component.

``Cell`` is the smallest addressable unit of a :class:`grid_arcade.board.Board`.
It carries three things:

* ``symbol``: the display glyph. Engine logic treats it as opaque and only
  compares it for equality (empty-cell checks, win lines).
* ``tags``: a persistent set of :class:`Tag` values describing the cell's
  role (navigable terrain, obstacle, piece owner, king, highlight, ...).
* ``orientation``: facing angle in degrees (0/90/180/270) for sprites that
  point somewhere; 0 for everything else.

Cells are values. "Changing" one means building a new ``Cell`` through the
helpers below and writing it back with ``Board.with_cell``.
"""

from dataclasses import dataclass, replace
from enum import StrEnum, auto

from pyrsistent import pset
from pyrsistent.typing import PSet


class Tag(StrEnum):
    """Semantic labels a cell may carry."""

    # Terrain / navigation
    NAVIGABLE = auto()
    OBSTACLE = auto()
    START = auto()
    TARGET = auto()
    ON_PATH = auto()
    CHARACTER = auto()
    ENEMY = auto()
    # Checkers
    LIGHT = auto()
    DARK = auto()
    BLACK = auto()
    RED = auto()
    KING = auto()
    SELECTED = auto()
    CANDIDATE = auto()
    # Snake
    SNAKE_HEAD = auto()
    SNAKE_BODY = auto()
    FOOD = auto()
    # Tetris
    FILLED = auto()
    ACTIVE = auto()
    # Lights-out
    LIT = auto()
    # Tic-tac-toe
    WINNING = auto()


@dataclass(frozen=True)
class Cell:
    """Immutable cell value.

    Attributes:
        symbol: Display glyph; ``""`` means empty.
        tags: Persistent set of semantic labels.
        orientation: Facing angle in degrees.
    """

    symbol: str = ""
    tags: PSet[Tag] = pset()
    orientation: int = 0

    @property
    def is_empty(self) -> bool:
        return self.symbol == ""

    def has(self, tag: Tag) -> bool:
        return tag in self.tags

    def tagged(self, *tags: Tag) -> "Cell":
        """Return a copy with ``tags`` added."""
        return replace(self, tags=self.tags.update(tags))

    def untagged(self, *tags: Tag) -> "Cell":
        """Return a copy with ``tags`` removed (missing tags are ignored)."""
        remaining = self.tags
        for tag in tags:
            remaining = remaining.discard(tag)
        return replace(self, tags=remaining)

    def with_symbol(self, symbol: str) -> "Cell":
        return replace(self, symbol=symbol)

    def facing(self, orientation: int) -> "Cell":
        return replace(self, orientation=orientation)


def make_cell(symbol: str = "", *tags: Tag, orientation: int = 0) -> Cell:
    """Shorthand constructor: ``make_cell("●", Tag.DARK, Tag.RED)``."""
    return Cell(symbol=symbol, tags=pset(tags), orientation=orientation)
