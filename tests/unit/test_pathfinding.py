import random

import pytest

from grid_arcade.board import Board
from grid_arcade.components import Position, Tag, make_cell
from grid_arcade.errors import OutOfRangeError
from grid_arcade.utils.pathfinding import (
    clear_highlights,
    find_path,
    first_step,
    highlight_path,
)
from tests.test_utils import exhaustive_distances, make_terrain, positions


def test_start_equals_goal() -> None:
    board = make_terrain(["..", ".."])
    result = find_path(board, Position(1, 1), Position(1, 1))
    assert result.has_path
    assert result.path == (Position(1, 1),)


def test_neighbour_order_is_up_down_left_right() -> None:
    board = make_terrain(["...", "...", "..."])
    result = find_path(board, Position(0, 0), Position(1, 1))
    # DOWN is expanded before RIGHT, so the path goes through (1, 0).
    assert result.path == tuple(positions([(0, 0), (1, 0), (1, 1)]))


def test_path_around_wall() -> None:
    board = make_terrain([
        "....",
        "###.",
        "....",
    ])
    result = find_path(board, Position(0, 0), Position(2, 0))
    assert result.has_path
    assert result.path[0] == Position(0, 0)
    assert result.path[-1] == Position(2, 0)
    assert len(result.path) == 9


def test_unreachable_goal() -> None:
    board = make_terrain([
        ".#.",
        "##.",
        "...",
    ])
    result = find_path(board, Position(0, 0), Position(2, 2))
    assert not result.has_path
    assert result.path == ()


def test_start_is_not_tested_for_navigability() -> None:
    board = make_terrain(["#.."])
    result = find_path(board, Position(0, 0), Position(0, 2))
    assert result.path == tuple(positions([(0, 0), (0, 1), (0, 2)]))


def test_goal_must_be_navigable() -> None:
    board = make_terrain(["..#"])
    assert not find_path(board, Position(0, 0), Position(0, 2)).has_path


def test_custom_predicate() -> None:
    board = make_terrain(["...", "...", "..."])
    avoid_middle = lambda cell, p: p != Position(1, 1)  # noqa: E731
    result = find_path(board, Position(1, 0), Position(1, 2), avoid_middle)
    assert Position(1, 1) not in result.path
    assert len(result.path) == 5


@pytest.mark.parametrize("start, goal", [((-1, 0), (0, 0)), ((0, 0), (0, 3))])
def test_out_of_range_endpoints_raise(start, goal) -> None:
    board = make_terrain(["...", "..."])
    with pytest.raises(OutOfRangeError):
        find_path(board, Position(*start), Position(*goal))


@pytest.mark.parametrize("seed", range(25))
def test_bfs_is_optimal_against_exhaustive_distances(seed: int) -> None:
    rng = random.Random(seed)
    rows, cols = rng.randint(1, 5), rng.randint(1, 5)
    board = Board.create(rows, cols).map_cells(
        lambda p, _: make_cell("", Tag.NAVIGABLE if rng.random() < 0.65 else Tag.OBSTACLE)
    )
    start = Position(rng.randrange(rows), rng.randrange(cols))
    dist = exhaustive_distances(board, start)

    for goal in board.positions():
        result = find_path(board, start, goal)
        assert result.has_path == (goal in dist)
        if not result.has_path:
            assert result.path == ()
            continue
        path = result.path
        assert path[0] == start and path[-1] == goal
        assert len(path) - 1 == dist[goal]
        assert len(set(path)) == len(path)
        for a, b in zip(path, path[1:]):
            assert abs(a.row - b.row) + abs(a.col - b.col) == 1
        assert all(board.get(p).has(Tag.NAVIGABLE) for p in path[1:])


def test_first_step() -> None:
    assert first_step(()) is None
    assert first_step((Position(0, 0),)) is None
    assert first_step(tuple(positions([(0, 0), (0, 1), (0, 2)]))) == Position(0, 1)


def test_highlight_and_clear_path() -> None:
    board = make_terrain(["...."])
    path = tuple(positions([(0, 0), (0, 1), (0, 2), (0, 3)]))
    highlighted = highlight_path(board, path)
    on_path = highlighted.find(lambda cell: cell.has(Tag.ON_PATH))
    assert on_path == positions([(0, 1), (0, 2)])
    assert not board.find(lambda cell: cell.has(Tag.ON_PATH))
    assert clear_highlights(highlighted) == board
