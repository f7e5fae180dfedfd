"""Tic-tac-toe.

X always opens. A click on an empty cell places the current mark, then the
board is checked for a complete line of that mark; a full board without one
is a draw. Win tallies survive ``reset`` and only start over with a new
engine.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag
from grid_arcade.config import TicTacToeConfig
from grid_arcade.engine import GameEngine
from grid_arcade.types import GameStatus, Mark, is_terminal
from grid_arcade.utils.lines import Line, check_win


@dataclass(frozen=True)
class TicTacToeState:
    board: Board
    turn: Mark = Mark.X
    status: GameStatus = GameStatus.RUNNING
    winner: Optional[Mark] = None
    winning_cells: Line = ()
    tallies: PMap[Mark, int] = pmap({Mark.X: 0, Mark.O: 0})


def new_game(config: TicTacToeConfig, tallies: Optional[PMap[Mark, int]] = None) -> TicTacToeState:
    state = TicTacToeState(board=Board.create(config.size, config.size))
    return state if tallies is None else replace(state, tallies=tallies)


def place_mark(state: TicTacToeState, pos: Position) -> TicTacToeState:
    """Place the current mark at ``pos``.

    Returns ``state`` unchanged when the game is over, ``pos`` is off the
    board, or the cell is taken.
    """
    if is_terminal(state.status) or not state.board.in_bounds(pos):
        return state
    if not state.board.get(pos).is_empty:
        return state

    mark = state.turn
    board = state.board.with_cell(pos, Cell(symbol=mark.value))
    result = check_win(board, mark.value)
    if result.is_win:
        return replace(
            state,
            board=board,
            status=GameStatus.WON,
            winner=mark,
            winning_cells=result.winning_cells,
            tallies=state.tallies.set(mark, state.tallies[mark] + 1),
        )
    if all(not board.get(p).is_empty for p in board.positions()):
        return replace(state, board=board, status=GameStatus.DRAW)
    return replace(state, board=board, turn=mark.other)


def display_board(state: TicTacToeState) -> Board:
    """Board with the winning line tagged ``WINNING``."""
    board = state.board
    return board.with_cells((pos, board.get(pos).tagged(Tag.WINNING)) for pos in state.winning_cells)


class TicTacToeEngine(GameEngine[TicTacToeState, TicTacToeConfig]):
    name = "tic_tac_toe"

    @classmethod
    def default_config(cls) -> TicTacToeConfig:
        return TicTacToeConfig()

    def new_state(self, seed: int) -> TicTacToeState:
        tallies = self._state.tallies if self._state is not None else None
        return new_game(self.config, tallies)

    def status(self) -> GameStatus:
        return self.state.status

    def board(self) -> Board:
        return display_board(self.state)

    def handle_click(self, state: TicTacToeState, pos: Position) -> TicTacToeState:
        return place_mark(state, pos)

    def info(self) -> Dict[str, Any]:
        state = self.state
        tallies: Dict[str, int] = {mark.value: count for mark, count in state.tallies.items()}
        winning: Tuple[Tuple[int, int], ...] = tuple((p.row, p.col) for p in state.winning_cells)
        return {
            "status": state.status,
            "turn": state.turn.value,
            "winner": state.winner.value if state.winner else None,
            "winning_cells": winning,
            "tallies": tallies,
        }
