import pytest

from grid_arcade.config import CheckersConfig
from grid_arcade.engines import ENGINE_REGISTRY, make_engine
from grid_arcade.games.checkers import CheckersEngine
from grid_arcade.types import GameStatus, is_terminal


def test_registry_names() -> None:
    assert set(ENGINE_REGISTRY) == {
        "tic_tac_toe",
        "checkers",
        "snake",
        "tetris",
        "lights_out",
        "navigation",
        "chase",
    }


@pytest.mark.parametrize("name", sorted(ENGINE_REGISTRY))
def test_every_engine_starts_and_renders(name: str) -> None:
    engine = make_engine(name, seed=1)
    assert engine.name == name
    assert not engine.started
    engine.start()
    board = engine.board()
    assert board.rows > 0 and board.cols > 0
    assert not is_terminal(engine.status())
    assert engine.info()["status"] is engine.status()
    engine.on_command("reset")
    assert engine.status() in (GameStatus.RUNNING, GameStatus.IDLE)


def test_make_engine_passes_config() -> None:
    engine = make_engine("checkers", config=CheckersConfig(size=6, piece_rows=2))
    assert isinstance(engine, CheckersEngine)
    assert engine.start().board.rows == 6


def test_make_engine_unknown_name() -> None:
    with pytest.raises(ValueError, match="Unknown game"):
        make_engine("pong")
