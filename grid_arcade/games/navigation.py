"""Navigation: shortest path over random terrain.

A new board scatters impassable cells at random, picks a target and computes
one shortest path from the fixed start to it. ``follow`` sends the character
back to the start and then walks one path cell per tick, turning to face each
step, until it reaches the target.

Status runs ``IDLE`` (path shown, character parked) -> ``RUNNING`` (following)
-> ``WON`` (target reached). A board without a path stays ``IDLE`` and
``follow`` is refused.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag, make_cell
from grid_arcade.config import NavigationConfig
from grid_arcade.engine import GameEngine
from grid_arcade.moves import direction_between, rotation_for_direction
from grid_arcade.types import GameStatus, is_terminal
from grid_arcade.utils.grid import turn_rng
from grid_arcade.utils.pathfinding import Path, find_path, highlight_path

CHARACTER_SYMBOL = "⬆️"
START_SYMBOL = "Start"
TARGET_SYMBOL = "Target"


@dataclass(frozen=True)
class NavigationState:
    """Navigation state.

    Attributes:
        board: Terrain (``NAVIGABLE`` or ``OBSTACLE``) with start/target marks.
        start: Fixed start position.
        target: Goal position.
        path: Shortest start..target path, empty when unreachable.
        character: Current character position.
        facing: Direction the character faces.
        path_index: Index of ``character`` along ``path`` while following.
        following: True while the character walks the path.
        status: Game status.
    """

    board: Board
    start: Position
    target: Position
    path: Path = ()
    character: Optional[Position] = None
    facing: Direction = Direction.RIGHT
    path_index: int = 0
    following: bool = False
    status: GameStatus = GameStatus.IDLE

    @property
    def has_path(self) -> bool:
        return bool(self.path)


def generate_terrain(config: NavigationConfig, seed: int) -> Tuple[Board, Position]:
    """Random terrain and target; start and target are always navigable."""
    rng = turn_rng(seed, 0)
    start = Position(*config.start)
    target = start
    while target == start:
        target = Position(rng.randrange(config.rows), rng.randrange(config.cols))

    updates: List[Tuple[Position, Cell]] = []
    for r in range(config.rows):
        for c in range(config.cols):
            pos = Position(r, c)
            if pos == start:
                cell = make_cell(START_SYMBOL, Tag.NAVIGABLE, Tag.START)
            elif pos == target:
                cell = make_cell(TARGET_SYMBOL, Tag.NAVIGABLE, Tag.TARGET)
            elif rng.random() < config.navigable_probability:
                cell = make_cell("", Tag.NAVIGABLE)
            else:
                cell = make_cell("", Tag.OBSTACLE)
            updates.append((pos, cell))
    return Board.create(config.rows, config.cols).with_cells(updates), target


def new_game(config: NavigationConfig, seed: int = 0) -> NavigationState:
    board, target = generate_terrain(config, seed)
    return with_terrain(board, Position(*config.start), target)


def with_terrain(board: Board, start: Position, target: Position) -> NavigationState:
    """Fresh state over ``board``, path computed once."""
    result = find_path(board, start, target)
    return NavigationState(board=board, start=start, target=target, path=result.path, character=start)


def follow(state: NavigationState) -> NavigationState:
    """Reset the character to the start and begin walking the path."""
    if not state.has_path or state.following or is_terminal(state.status):
        return state
    return replace(
        state,
        character=state.start,
        facing=Direction.RIGHT,
        path_index=0,
        following=True,
        status=GameStatus.RUNNING,
    )


def advance(state: NavigationState) -> NavigationState:
    """One tick while following: step to the next path cell, facing it."""
    if not state.following:
        return state
    index = state.path_index
    current, nxt = state.path[index], state.path[index + 1]
    moved = replace(
        state,
        character=nxt,
        facing=direction_between(current, nxt, state.facing),
        path_index=index + 1,
    )
    if nxt == state.target:
        return replace(moved, following=False, status=GameStatus.WON)
    return moved


def display_board(state: NavigationState) -> Board:
    """Terrain with the path interior highlighted and the character drawn."""
    board = highlight_path(state.board, state.path)
    if state.character is None:
        return board
    return board.update(
        state.character,
        lambda cell: cell.with_symbol(CHARACTER_SYMBOL)
        .tagged(Tag.CHARACTER)
        .facing(rotation_for_direction(state.facing)),
    )


class NavigationEngine(GameEngine[NavigationState, NavigationConfig]):
    """Navigation; ticks only while the character is following the path."""

    name = "navigation"

    @classmethod
    def default_config(cls) -> NavigationConfig:
        return NavigationConfig()

    def new_state(self, seed: int) -> NavigationState:
        return new_game(self.config, seed)

    def status(self) -> GameStatus:
        return self.state.status

    def board(self) -> Board:
        return display_board(self.state)

    def tick_interval_ms(self) -> Optional[int]:
        return self.config.tick_ms

    def wants_ticks(self) -> bool:
        return self.state.following

    def step(self, state: NavigationState) -> NavigationState:
        return advance(state)

    def handle_command(self, state: NavigationState, command: str) -> NavigationState:
        if command == "follow":
            return follow(state)
        if command == "regenerate" and not state.following:
            return self.new_state(self._next_seed())
        return state

    def info(self) -> Dict[str, Any]:
        state = self.state
        return {
            "status": state.status,
            "has_path": state.has_path,
            "following": state.following,
            "path_length": len(state.path),
        }
