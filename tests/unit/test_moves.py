# tests/unit/test_moves.py

from typing import Optional, Tuple

import pytest

from grid_arcade.actions import MOVE_DIRECTIONS, Direction
from grid_arcade.components import Position
from grid_arcade.moves import (
    MOVE_FN_REGISTRY,
    adjacent_positions,
    default_move_fn,
    direction_between,
    get_move_fn,
    is_in_bounds,
    is_reverse,
    next_position,
    opposite,
    rotation_for_direction,
    wrap_around_move_fn,
    wrap_position,
)
from grid_arcade.types import MoveFn


@pytest.mark.parametrize(
    "move_fn, start, direction, expected",
    [
        # default_move_fn, all directions
        (default_move_fn, (2, 2), Direction.UP, (1, 2)),
        (default_move_fn, (2, 2), Direction.DOWN, (3, 2)),
        (default_move_fn, (2, 2), Direction.LEFT, (2, 1)),
        (default_move_fn, (2, 2), Direction.RIGHT, (2, 3)),
        # default_move_fn, out of bounds
        (default_move_fn, (0, 0), Direction.UP, None),
        (default_move_fn, (0, 0), Direction.LEFT, None),
        (default_move_fn, (4, 4), Direction.DOWN, None),
        (default_move_fn, (4, 4), Direction.RIGHT, None),
        # wrap_around_move_fn, edge wrap
        (wrap_around_move_fn, (0, 1), Direction.UP, (4, 1)),
        (wrap_around_move_fn, (4, 1), Direction.DOWN, (0, 1)),
        (wrap_around_move_fn, (2, 0), Direction.LEFT, (2, 4)),
        (wrap_around_move_fn, (2, 4), Direction.RIGHT, (2, 0)),
        # wrap_around_move_fn, not at edge
        (wrap_around_move_fn, (2, 2), Direction.UP, (1, 2)),
        (wrap_around_move_fn, (2, 2), Direction.LEFT, (2, 1)),
    ],
)
def test_simple_moves(
    move_fn: MoveFn,
    start: Tuple[int, int],
    direction: Direction,
    expected: Optional[Tuple[int, int]],
) -> None:
    result = move_fn(Position(*start), direction, 5, 5)
    if expected is None:
        assert result is None
    else:
        assert result == Position(*expected)


@pytest.mark.parametrize("size", [3, 4, 5, 8])
@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_wrap_stays_in_bounds_on_every_edge(size: int, direction: Direction) -> None:
    edge = [Position(r, c) for r in range(size) for c in range(size) if r in (0, size - 1) or c in (0, size - 1)]
    for start in edge:
        wrapped = wrap_position(next_position(start, direction), size, size)
        assert is_in_bounds(wrapped, size, size)
        d_row = (wrapped.row - start.row) % size
        d_col = (wrapped.col - start.col) % size
        assert d_row + d_col in (1, size - 1)
        if direction == Direction.UP and start.row == 0:
            assert wrapped == Position(size - 1, start.col)
        if direction == Direction.DOWN and start.row == size - 1:
            assert wrapped == Position(0, start.col)
        if direction == Direction.LEFT and start.col == 0:
            assert wrapped == Position(start.row, size - 1)
        if direction == Direction.RIGHT and start.col == size - 1:
            assert wrapped == Position(start.row, 0)


def test_wrap_position_is_modulo() -> None:
    assert wrap_position(Position(-1, 5), 4, 5) == Position(3, 0)
    assert wrap_position(Position(4, -1), 4, 5) == Position(0, 4)


@pytest.mark.parametrize(
    "direction, rotation",
    [(Direction.UP, 0), (Direction.RIGHT, 90), (Direction.DOWN, 180), (Direction.LEFT, 270)],
)
def test_rotation_for_direction(direction: Direction, rotation: int) -> None:
    assert rotation_for_direction(direction) == rotation


def test_reverse_and_opposite() -> None:
    for direction in MOVE_DIRECTIONS:
        assert is_reverse(direction, opposite(direction))
        assert not is_reverse(direction, direction)
    assert not is_reverse(Direction.UP, Direction.LEFT)


def test_adjacent_positions_fixed_order_and_bounds() -> None:
    assert adjacent_positions(Position(1, 1), 3, 3) == [
        Position(0, 1),
        Position(2, 1),
        Position(1, 0),
        Position(1, 2),
    ]
    assert adjacent_positions(Position(0, 0), 3, 3) == [Position(1, 0), Position(0, 1)]


def test_direction_between() -> None:
    here = Position(2, 2)
    assert direction_between(here, Position(1, 2)) == Direction.UP
    assert direction_between(here, Position(3, 2)) == Direction.DOWN
    assert direction_between(here, Position(2, 1)) == Direction.LEFT
    assert direction_between(here, Position(2, 3)) == Direction.RIGHT
    assert direction_between(here, here, Direction.DOWN) == Direction.DOWN
    assert direction_between(None, here) == Direction.RIGHT


def test_move_fn_registry() -> None:
    assert get_move_fn("default") is default_move_fn
    assert get_move_fn("wrap") is wrap_around_move_fn
    assert set(MOVE_FN_REGISTRY) == {"default", "wrap"}
    with pytest.raises(ValueError):
        get_move_fn("teleport")
