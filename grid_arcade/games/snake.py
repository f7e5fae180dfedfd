"""Snake.

The snake lives on a toroidal board: leaving one edge re-enters on the
opposite side. Every tick the head advances one cell in the current
direction; hitting the body or an obstacle ends the game, eating food grows
the snake by one and re-places the food.

Direction changes are requested between ticks. A request that points exactly
back along the current direction is rejected; any other request is held by
the engine and applied at the start of the next tick, so at most one turn
happens per tick.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from pyrsistent import pset, pvector
from pyrsistent.typing import PSet, PVector

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag, make_cell
from grid_arcade.config import SnakeConfig
from grid_arcade.engine import GameEngine
from grid_arcade.moves import is_reverse, next_position, rotation_for_direction, wrap_position
from grid_arcade.types import GameStatus, is_terminal
from grid_arcade.utils.grid import generate_random_obstacles, random_free_position, turn_rng

HEAD_SYMBOL = "🐍"
BODY_SYMBOL = "●"
FOOD_SYMBOL = "🍎"
OBSTACLE_SYMBOL = "🚧"


@dataclass(frozen=True)
class SnakeState:
    """Snake game state.

    Attributes:
        rows: Board height.
        cols: Board width.
        snake: Body positions from tail to head (head is last).
        direction: Direction of the next move.
        food: Food position, ``None`` only when no free cell is left.
        obstacles: Fixed obstacle cells for this game.
        score: Points so far.
        status: Game status.
        seed: Base seed for food placement.
        turn: Ticks applied so far; together with ``seed`` it seeds the next
            food placement.
        food_score: Points per food.
    """

    rows: int
    cols: int
    snake: PVector[Position]
    direction: Direction = Direction.RIGHT
    food: Optional[Position] = None
    obstacles: PSet[Position] = pset()
    score: int = 0
    status: GameStatus = GameStatus.RUNNING
    seed: int = 0
    turn: int = 0
    food_score: int = 10

    @property
    def head(self) -> Position:
        return self.snake[-1]


def initial_snake(rows: int, cols: int) -> List[Position]:
    """Three cells on the middle row, heading right: ``[(m, m-2), (m, m-1), (m, m)]``."""
    m = rows // 2
    head_col = min(max(m, 2), cols - 1)
    return [Position(m, head_col - 2), Position(m, head_col - 1), Position(m, head_col)]


def _protected_cells(config: SnakeConfig, snake: List[Position]) -> List[Position]:
    mid_row = config.rows // 2
    low = max(0, mid_row - config.obstacle_buffer)
    high = min(config.rows - 1, mid_row + config.obstacle_buffer)
    band = [Position(r, c) for r in range(low, high + 1) for c in range(config.cols)]
    return snake + band


def place_food(state: SnakeState) -> SnakeState:
    """Drop food on a random cell outside the body and the obstacles."""
    rng = turn_rng(state.seed, state.turn)
    occupied = set(state.snake) | set(state.obstacles)
    food = random_free_position(rng, state.rows, state.cols, occupied)
    return replace(state, food=food)


def new_game(config: SnakeConfig, seed: int = 0) -> SnakeState:
    snake = initial_snake(config.rows, config.cols)
    rng = turn_rng(seed, -1)
    obstacles = generate_random_obstacles(
        rng,
        config.rows,
        config.cols,
        config.obstacle_count,
        exclude=_protected_cells(config, snake),
    )
    state = SnakeState(
        rows=config.rows,
        cols=config.cols,
        snake=pvector(snake),
        obstacles=pset(obstacles),
        seed=seed,
        food_score=config.food_score,
    )
    return place_food(state)


def change_direction(state: SnakeState, direction: Direction) -> SnakeState:
    """Turn the snake; reversals and changes after game over are rejected."""
    if is_terminal(state.status) or is_reverse(state.direction, direction):
        return state
    if direction == state.direction:
        return state
    return replace(state, direction=direction)


def step(state: SnakeState) -> SnakeState:
    """Advance the snake by one cell."""
    if is_terminal(state.status):
        return state

    candidate = wrap_position(next_position(state.head, state.direction), state.rows, state.cols)
    if candidate in state.snake or candidate in state.obstacles:
        return replace(state, status=GameStatus.LOST, turn=state.turn + 1)

    if candidate == state.food:
        grown = replace(
            state,
            snake=state.snake.append(candidate),
            score=state.score + state.food_score,
            turn=state.turn + 1,
        )
        return place_food(grown)

    return replace(state, snake=state.snake.delete(0).append(candidate), turn=state.turn + 1)


def render(state: SnakeState) -> Board:
    """Board with obstacles, body, head (facing the direction) and food."""
    updates: List[Tuple[Position, Cell]] = [
        (pos, make_cell(OBSTACLE_SYMBOL, Tag.OBSTACLE)) for pos in state.obstacles
    ]
    updates += [(pos, make_cell(BODY_SYMBOL, Tag.SNAKE_BODY)) for pos in state.snake[:-1]]
    updates.append(
        (
            state.head,
            make_cell(HEAD_SYMBOL, Tag.SNAKE_HEAD, orientation=rotation_for_direction(state.direction)),
        )
    )
    if state.food is not None:
        updates.append((state.food, make_cell(FOOD_SYMBOL, Tag.FOOD)))
    return Board.create(state.rows, state.cols).with_cells(updates)


class SnakeEngine(GameEngine[SnakeState, SnakeConfig]):
    """Snake with a pending-direction slot consumed at each tick."""

    name = "snake"

    @classmethod
    def default_config(cls) -> SnakeConfig:
        return SnakeConfig()

    @property
    def high_score_key(self) -> Optional[str]:
        return self.config.high_score_key

    def new_state(self, seed: int) -> SnakeState:
        return new_game(self.config, seed)

    def status(self) -> GameStatus:
        return self.state.status

    def score(self) -> Optional[int]:
        return self.state.score

    def board(self) -> Board:
        return render(self.state)

    def tick_interval_ms(self) -> Optional[int]:
        return self.config.tick_ms

    def handle_direction(self, state: SnakeState, direction: Direction) -> SnakeState:
        if is_terminal(state.status) or is_reverse(state.direction, direction):
            return state
        self.set_pending_direction(direction)
        return state

    def step(self, state: SnakeState) -> SnakeState:
        pending = self.take_pending_direction()
        if pending is not None:
            state = change_direction(state, pending)
        return step(state)

    def info(self) -> Dict[str, Any]:
        state = self.state
        return {
            "status": state.status,
            "score": state.score,
            "length": len(state.snake),
            "direction": state.direction,
        }
