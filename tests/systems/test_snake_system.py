from dataclasses import replace

import pytest
from pyrsistent import pset, pvector

from grid_arcade.actions import MOVE_DIRECTIONS, Direction
from grid_arcade.components import Position, Tag
from grid_arcade.config import SnakeConfig
from grid_arcade.errors import EngineNotStartedError
from grid_arcade.games.snake import (
    SnakeEngine,
    SnakeState,
    change_direction,
    initial_snake,
    new_game,
    place_food,
    render,
    step,
)
from grid_arcade.types import GameStatus
from tests.test_utils import positions


def make_snake_state(
    body, direction: Direction = Direction.RIGHT, food=None, obstacles=(), size: int = 12
) -> SnakeState:
    return SnakeState(
        rows=size,
        cols=size,
        snake=pvector(positions(body)),
        direction=direction,
        food=Position(*food) if food is not None else None,
        obstacles=pset(positions(obstacles)),
    )


def test_growth_on_food() -> None:
    state = make_snake_state([(5, 3), (5, 4), (5, 5)], food=(5, 6))
    grown = step(state)
    assert list(grown.snake) == positions([(5, 3), (5, 4), (5, 5), (5, 6)])
    assert grown.score == 10
    assert grown.food is not None
    assert grown.food not in grown.snake
    assert grown.status is GameStatus.RUNNING


def test_advance_drops_tail() -> None:
    state = make_snake_state([(5, 3), (5, 4), (5, 5)], food=(0, 0))
    moved = step(state)
    assert list(moved.snake) == positions([(5, 4), (5, 5), (5, 6)])
    assert moved.score == 0
    assert moved.food == Position(0, 0)


@pytest.mark.parametrize("size", [3, 4, 5, 7])
@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_wraps_on_every_edge(size: int, direction: Direction) -> None:
    last = size - 1
    starts = {
        Direction.UP: (0, 1),
        Direction.DOWN: (last, 1),
        Direction.LEFT: (1, 0),
        Direction.RIGHT: (1, last),
    }
    expected = {
        Direction.UP: (last, 1),
        Direction.DOWN: (0, 1),
        Direction.LEFT: (1, last),
        Direction.RIGHT: (1, 0),
    }
    state = make_snake_state([starts[direction]], direction=direction, size=size)
    moved = step(state)
    assert moved.status is GameStatus.RUNNING
    assert moved.head == Position(*expected[direction])


@pytest.mark.parametrize("direction", MOVE_DIRECTIONS)
def test_reverse_direction_is_rejected(direction: Direction) -> None:
    reverse = {
        Direction.UP: Direction.DOWN,
        Direction.DOWN: Direction.UP,
        Direction.LEFT: Direction.RIGHT,
        Direction.RIGHT: Direction.LEFT,
    }[direction]
    state = make_snake_state([(5, 5)], direction=direction)
    assert change_direction(state, reverse) is state


def test_perpendicular_turn_is_accepted() -> None:
    state = make_snake_state([(5, 4), (5, 5)])
    turned = change_direction(state, Direction.UP)
    assert turned.direction is Direction.UP
    assert step(turned).head == Position(4, 5)


def test_collision_with_body_loses() -> None:
    # Head at (2, 2) heading LEFT into (2, 1), which is part of the body.
    state = make_snake_state([(1, 1), (2, 1), (3, 1), (3, 2), (2, 2)], direction=Direction.LEFT)
    dead = step(state)
    assert dead.status is GameStatus.LOST
    assert step(dead) is dead
    assert change_direction(dead, Direction.UP) is dead


def test_collision_with_obstacle_loses() -> None:
    state = make_snake_state([(5, 4), (5, 5)], obstacles=[(5, 6)])
    assert step(state).status is GameStatus.LOST


def test_new_game_layout() -> None:
    config = SnakeConfig()
    state = new_game(config, seed=11)
    assert list(state.snake) == positions([(6, 4), (6, 5), (6, 6)])
    assert initial_snake(12, 12) == positions([(6, 4), (6, 5), (6, 6)])
    assert state.direction is Direction.RIGHT
    assert len(state.obstacles) == 8
    assert all(p.row != 6 for p in state.obstacles)
    assert state.food is not None
    assert state.food not in state.snake and state.food not in state.obstacles
    assert new_game(config, seed=11) == state


def test_obstacle_buffer_widens_the_free_band() -> None:
    state = new_game(SnakeConfig(obstacle_buffer=2, obstacle_count=20), seed=5)
    assert all(abs(p.row - 6) > 2 for p in state.obstacles)


def test_no_food_when_board_is_full() -> None:
    state = make_snake_state([(0, 0), (0, 1), (0, 2)], size=3)
    state = replace(state, rows=1)
    assert place_food(state).food is None


def test_render_tags() -> None:
    state = make_snake_state([(5, 4), (5, 5)], direction=Direction.DOWN, food=(0, 0), obstacles=[(9, 9)])
    board = render(state)
    head = board.get(Position(5, 5))
    assert head.has(Tag.SNAKE_HEAD) and head.orientation == 180
    assert board.get(Position(5, 4)).has(Tag.SNAKE_BODY)
    assert board.get(Position(0, 0)).has(Tag.FOOD)
    assert board.get(Position(9, 9)).has(Tag.OBSTACLE)


def test_engine_requires_start() -> None:
    engine = SnakeEngine(seed=1)
    with pytest.raises(EngineNotStartedError):
        engine.tick()
    with pytest.raises(EngineNotStartedError):
        engine.on_direction(Direction.UP)


def test_engine_applies_pending_direction_on_next_tick() -> None:
    engine = SnakeEngine(SnakeConfig(obstacle_count=0), seed=3)
    engine.start()
    before = engine.state
    engine.on_direction(Direction.UP)
    assert engine.state is before
    assert engine.state.direction is Direction.RIGHT
    engine.tick()
    assert engine.state.direction is Direction.UP
    assert engine.state.head == Position(5, 6)


def test_engine_rejects_reverse_against_committed_direction() -> None:
    engine = SnakeEngine(SnakeConfig(obstacle_count=0), seed=3)
    engine.start()
    engine.on_direction(Direction.UP)
    engine.on_direction(Direction.LEFT)
    engine.tick()
    assert engine.state.direction is Direction.UP


def test_engine_reports_score_and_key() -> None:
    engine = SnakeEngine(seed=2)
    engine.start()
    assert engine.score() == 0
    assert engine.high_score_key == "snakeHighScore"
    assert engine.tick_interval_ms() == 200
    assert engine.wants_ticks()
