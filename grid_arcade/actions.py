"""Directional intents.

Defines the :class:`Direction` string enum delivered by input sources
(keyboard, buttons, agents) to the active engine. ``MOVE_DIRECTIONS`` is the
canonical ordered list of directions; the order (UP, DOWN, LEFT, RIGHT) is
also the neighbour expansion order of the pathfinder, so keep it stable.
"""

from enum import StrEnum, auto
from typing import Dict


class Direction(StrEnum):
    """String enum of cardinal directions.

    Members:
        UP, DOWN, LEFT, RIGHT: Unit moves on the grid (row grows downward).
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


OPPOSITE_DIRECTION: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
