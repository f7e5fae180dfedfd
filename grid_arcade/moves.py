"""Movement rules and built-in move functions.

The primitives here translate a :class:`Position` by one unit in a
:class:`Direction` and decide what happens at the board edge. Games never do
their own coordinate arithmetic; they go through these helpers so edge
behaviour is defined in exactly one place.

Move functions (``MoveFn``) bundle a step with an edge policy:

* ``default_move_fn``: returns the neighbour, or ``None`` if it leaves the
  board (the chase player and navigation use this).
* ``wrap_around_move_fn``: toroidal; moving off an edge re-enters on the
  opposite side (snake uses this).

Contract (``MoveFn``): pure, never mutates anything, and receives the board
dimensions explicitly so it does not need a game state.
"""

from typing import Dict, List, Optional, Tuple

from grid_arcade.actions import MOVE_DIRECTIONS, OPPOSITE_DIRECTION, Direction
from grid_arcade.components import Position
from grid_arcade.types import MoveFn


DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

DIRECTION_ROTATIONS: Dict[Direction, int] = {
    Direction.UP: 0,
    Direction.RIGHT: 90,
    Direction.DOWN: 180,
    Direction.LEFT: 270,
}


def next_position(pos: Position, direction: Direction) -> Position:
    """Unit step in ``direction`` without any bounds handling."""
    d_row, d_col = DIRECTION_OFFSETS[direction]
    return pos.offset(d_row, d_col)


def is_in_bounds(pos: Position, rows: int, cols: int) -> bool:
    """Return True if ``pos`` lies within ``[0, rows) x [0, cols)``."""
    return 0 <= pos.row < rows and 0 <= pos.col < cols


def wrap_position(pos: Position, rows: int, cols: int) -> Position:
    """Reduce each coordinate modulo its dimension (toroidal wrap)."""
    return Position(pos.row % rows, pos.col % cols)


def rotation_for_direction(direction: Direction) -> int:
    """Facing angle for sprites: UP/RIGHT/DOWN/LEFT -> 0/90/180/270."""
    return DIRECTION_ROTATIONS[direction]


def opposite(direction: Direction) -> Direction:
    return OPPOSITE_DIRECTION[direction]


def is_reverse(current: Direction, requested: Direction) -> bool:
    """True if ``requested`` points exactly back along ``current``."""
    return OPPOSITE_DIRECTION[current] == requested


def adjacent_positions(pos: Position, rows: int, cols: int) -> List[Position]:
    """In-bounds 4-neighbours of ``pos`` in UP, DOWN, LEFT, RIGHT order."""
    neighbours = (next_position(pos, direction) for direction in MOVE_DIRECTIONS)
    return [n for n in neighbours if is_in_bounds(n, rows, cols)]


def direction_between(
    current: Optional[Position],
    nxt: Optional[Position],
    fallback: Direction = Direction.RIGHT,
) -> Direction:
    """Direction of the step ``current -> nxt``; vertical wins over horizontal.

    Returns ``fallback`` when either position is missing or they coincide.
    """
    if current is None or nxt is None:
        return fallback
    d_row = nxt.row - current.row
    d_col = nxt.col - current.col
    if d_row < 0:
        return Direction.UP
    if d_row > 0:
        return Direction.DOWN
    if d_col < 0:
        return Direction.LEFT
    if d_col > 0:
        return Direction.RIGHT
    return fallback


def default_move_fn(
    pos: Position, direction: Direction, rows: int, cols: int
) -> Optional[Position]:
    """Single-tile cardinal step; ``None`` if it would leave the board."""
    candidate = next_position(pos, direction)
    return candidate if is_in_bounds(candidate, rows, cols) else None


def wrap_around_move_fn(
    pos: Position, direction: Direction, rows: int, cols: int
) -> Optional[Position]:
    """Cardinal step with toroidal wrapping; never ``None``."""
    return wrap_position(next_position(pos, direction), rows, cols)


MOVE_FN_REGISTRY: Dict[str, MoveFn] = {
    "default": default_move_fn,
    "wrap": wrap_around_move_fn,
}
"""Registry of built-in movement function names to callables."""


def get_move_fn(name: str) -> MoveFn:
    """Look up a registered move function.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    try:
        return MOVE_FN_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown move function {name!r}; expected one of {sorted(MOVE_FN_REGISTRY)}"
        ) from None
