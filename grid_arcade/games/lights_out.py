"""Lights-out.

Clicking a cell flips it and its in-bounds orthogonal neighbours. The puzzle
starts fully lit and is scrambled with a few random clicks, so it is always
solvable; turning every light off wins.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict

from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag, make_cell
from grid_arcade.config import LightsOutConfig
from grid_arcade.engine import GameEngine
from grid_arcade.moves import adjacent_positions
from grid_arcade.types import GameStatus, is_terminal
from grid_arcade.utils.grid import random_position, turn_rng

LIT_CELL = make_cell("", Tag.LIT)
UNLIT_CELL = Cell()


@dataclass(frozen=True)
class LightsOutState:
    board: Board
    moves: int = 0
    status: GameStatus = GameStatus.RUNNING


def _flip(cell: Cell) -> Cell:
    return cell.untagged(Tag.LIT) if cell.has(Tag.LIT) else cell.tagged(Tag.LIT)


def toggle(board: Board, pos: Position) -> Board:
    """Flip ``pos`` and its in-bounds 4-neighbours; applying it twice is a no-op."""
    targets = [pos] + adjacent_positions(pos, board.rows, board.cols)
    return board.with_cells((p, _flip(board.get(p))) for p in targets)


def is_solved(board: Board) -> bool:
    return not board.find(lambda cell: cell.has(Tag.LIT))


def new_game(config: LightsOutConfig, seed: int = 0) -> LightsOutState:
    rng = turn_rng(seed, 0)
    board = Board.create(config.size, config.size, LIT_CELL)
    for _ in range(rng.randint(config.min_scramble, config.max_scramble)):
        board = toggle(board, random_position(rng, config.size, config.size))
    status = GameStatus.WON if is_solved(board) else GameStatus.RUNNING
    return LightsOutState(board=board, status=status)


def press(state: LightsOutState, pos: Position) -> LightsOutState:
    """Player click: toggle, count the move, check for the win."""
    if is_terminal(state.status) or not state.board.in_bounds(pos):
        return state
    board = toggle(state.board, pos)
    status = GameStatus.WON if is_solved(board) else state.status
    return replace(state, board=board, moves=state.moves + 1, status=status)


class LightsOutEngine(GameEngine[LightsOutState, LightsOutConfig]):
    name = "lights_out"

    @classmethod
    def default_config(cls) -> LightsOutConfig:
        return LightsOutConfig()

    def new_state(self, seed: int) -> LightsOutState:
        return new_game(self.config, seed)

    def status(self) -> GameStatus:
        return self.state.status

    def board(self) -> Board:
        return self.state.board

    def handle_click(self, state: LightsOutState, pos: Position) -> LightsOutState:
        return press(state, pos)

    def info(self) -> Dict[str, Any]:
        state = self.state
        lit = len(state.board.find(lambda cell: cell.has(Tag.LIT)))
        return {"status": state.status, "moves": state.moves, "lit": lit}
