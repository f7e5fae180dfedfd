"""Top-down chase.

The player moves one cell per directional input and always turns to face the
requested direction, even when the step is blocked by an obstacle or the
board edge. An enemy starts in the corner and, every tick, recomputes a
shortest path to the player's current position and takes its first step.
Meeting the player, on either side's move, ends the game.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag, make_cell
from grid_arcade.config import ChaseConfig
from grid_arcade.engine import GameEngine
from grid_arcade.moves import default_move_fn, rotation_for_direction
from grid_arcade.types import GameStatus, MoveFn, is_terminal
from grid_arcade.utils.grid import generate_random_obstacles, turn_rng
from grid_arcade.utils.pathfinding import Path, find_path, first_step, highlight_path

PLAYER_SYMBOL = "⬆️"
ENEMY_SYMBOL = "👹"
OBSTACLE_SYMBOL = "🚧"


@dataclass(frozen=True)
class ChaseState:
    """Chase state.

    Attributes:
        terrain: Board with ``OBSTACLE`` cells; everything else ``NAVIGABLE``.
        player: Player position.
        facing: Player facing.
        enemy: Enemy position.
        enemy_path: Last path the enemy computed (enemy..player).
        status: Game status.
    """

    terrain: Board
    player: Position
    enemy: Position
    facing: Direction = Direction.RIGHT
    enemy_path: Path = ()
    status: GameStatus = GameStatus.RUNNING


def build_terrain(rows: int, cols: int, obstacles: List[Position]) -> Board:
    open_cell = make_cell("", Tag.NAVIGABLE)
    blocked = make_cell(OBSTACLE_SYMBOL, Tag.OBSTACLE)
    board = Board.create(rows, cols, open_cell)
    return board.with_cells((pos, blocked) for pos in obstacles)


def new_game(config: ChaseConfig, seed: int = 0) -> ChaseState:
    player = Position(*config.player)
    enemy = Position(*config.chaser_start)
    obstacles = generate_random_obstacles(
        turn_rng(seed, 0),
        config.rows,
        config.cols,
        config.obstacle_count,
        exclude=[player, enemy],
    )
    terrain = build_terrain(config.rows, config.cols, obstacles)
    path = find_path(terrain, enemy, player).path
    return ChaseState(terrain=terrain, player=player, enemy=enemy, enemy_path=path)


def _check_capture(state: ChaseState) -> ChaseState:
    if state.player == state.enemy:
        return replace(state, status=GameStatus.LOST)
    return state


def move_player(
    state: ChaseState, direction: Direction, move_fn: MoveFn = default_move_fn
) -> ChaseState:
    """Face ``direction`` and step there unless the edge or an obstacle blocks it."""
    if is_terminal(state.status):
        return state
    target = move_fn(state.player, direction, state.terrain.rows, state.terrain.cols)
    if target is None or state.terrain.get(target).has(Tag.OBSTACLE):
        if direction == state.facing:
            return state
        return replace(state, facing=direction)
    return _check_capture(replace(state, player=target, facing=direction))


def move_forward(state: ChaseState) -> ChaseState:
    """Step once in the direction the player already faces."""
    return move_player(state, state.facing)


def enemy_step(state: ChaseState) -> ChaseState:
    """Recompute the enemy's path to the player and take its first step.

    With no path the enemy stays put and keeps no path.
    """
    if is_terminal(state.status):
        return state
    result = find_path(state.terrain, state.enemy, state.player)
    nxt = first_step(result.path)
    if nxt is None:
        return _check_capture(replace(state, enemy_path=result.path))
    return _check_capture(replace(state, enemy=nxt, enemy_path=result.path))


def display_board(state: ChaseState) -> Board:
    """Terrain, enemy path, enemy and (unless caught) the player."""
    board = highlight_path(state.terrain, state.enemy_path)
    updates: List[Tuple[Position, Cell]] = [
        (state.enemy, make_cell(ENEMY_SYMBOL, Tag.NAVIGABLE, Tag.ENEMY))
    ]
    if state.status is not GameStatus.LOST:
        updates.append(
            (
                state.player,
                make_cell(
                    PLAYER_SYMBOL,
                    Tag.NAVIGABLE,
                    Tag.CHARACTER,
                    orientation=rotation_for_direction(state.facing),
                ),
            )
        )
    return board.with_cells(updates)


class ChaseEngine(GameEngine[ChaseState, ChaseConfig]):
    """Chase; directional input moves the player at once, ticks move the enemy."""

    name = "chase"

    @classmethod
    def default_config(cls) -> ChaseConfig:
        return ChaseConfig()

    def new_state(self, seed: int) -> ChaseState:
        return new_game(self.config, seed)

    def status(self) -> GameStatus:
        return self.state.status

    def board(self) -> Board:
        return display_board(self.state)

    def tick_interval_ms(self) -> Optional[int]:
        return self.config.tick_ms

    def step(self, state: ChaseState) -> ChaseState:
        return enemy_step(state)

    def handle_direction(self, state: ChaseState, direction: Direction) -> ChaseState:
        return move_player(state, direction)

    def handle_command(self, state: ChaseState, command: str) -> ChaseState:
        if command == "forward":
            return move_forward(state)
        return state

    def info(self) -> Dict[str, Any]:
        state = self.state
        return {
            "status": state.status,
            "player": (state.player.row, state.player.col),
            "enemy": (state.enemy.row, state.enemy.col),
            "enemy_path_length": len(state.enemy_path),
        }
