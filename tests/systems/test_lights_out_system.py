import random
from typing import List

import pytest

from grid_arcade.board import Board
from grid_arcade.components import Position, Tag
from grid_arcade.config import LightsOutConfig
from grid_arcade.games.lights_out import (
    LIT_CELL,
    LightsOutEngine,
    LightsOutState,
    is_solved,
    new_game,
    press,
    toggle,
)
from grid_arcade.types import GameStatus
from tests.test_utils import filled_positions, positions


def lit(board: Board) -> List[Position]:
    return filled_positions(board, Tag.LIT)


@pytest.mark.parametrize("seed", range(10))
def test_toggle_twice_restores_board(seed: int) -> None:
    rng = random.Random(seed)
    board = Board.create(5, 5).with_cells(
        (Position(r, c), LIT_CELL) for r in range(5) for c in range(5) if rng.random() < 0.5
    )
    target = Position(rng.randrange(5), rng.randrange(5))
    assert toggle(toggle(board, target), target) == board


def test_toggle_flips_cross_clipped_at_edges() -> None:
    board = Board.create(5, 5)
    assert lit(toggle(board, Position(0, 0))) == positions([(0, 0), (0, 1), (1, 0)])
    assert lit(toggle(board, Position(2, 2))) == positions([(1, 2), (2, 1), (2, 2), (2, 3), (3, 2)])
    assert len(lit(toggle(board, Position(0, 2)))) == 4


def test_toggle_turns_lit_cells_off() -> None:
    board = Board.create(3, 3, LIT_CELL)
    assert lit(toggle(board, Position(1, 1))) == positions([(0, 0), (0, 2), (2, 0), (2, 2)])


def test_new_game_is_scrambled_and_deterministic() -> None:
    config = LightsOutConfig()
    state = new_game(config, seed=3)
    assert state.status is GameStatus.RUNNING
    assert state.moves == 0
    assert not is_solved(state.board)
    assert new_game(config, seed=3) == state


def test_press_to_win_then_ignore() -> None:
    board = toggle(Board.create(5, 5), Position(2, 2))
    state = LightsOutState(board=board)
    won = press(state, Position(2, 2))
    assert won.status is GameStatus.WON
    assert won.moves == 1
    assert is_solved(won.board)
    assert press(won, Position(0, 0)) is won


def test_press_counts_moves_and_ignores_out_of_bounds() -> None:
    state = LightsOutState(board=Board.create(3, 3))
    once = press(state, Position(0, 0))
    assert once.moves == 1
    assert once.status is GameStatus.RUNNING
    assert press(once, Position(3, 0)) is once


def test_engine_click_flow() -> None:
    engine = LightsOutEngine(config=LightsOutConfig(size=3, min_scramble=1, max_scramble=1), seed=5)
    engine.start()
    assert engine.tick_interval_ms() is None
    assert not engine.wants_ticks()
    scrambled = engine.state.board
    engine.on_click(Position(1, 1))
    engine.on_click(Position(1, 1))
    assert engine.state.board == scrambled
    assert engine.info() == {"status": GameStatus.RUNNING, "moves": 2, "lit": len(lit(scrambled))}
