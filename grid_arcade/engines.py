"""Engine registry.

Maps game names to engine classes so callers (and the session) can build an
engine from a string, the same way move functions are looked up by name.
"""

from typing import Any, Dict, Optional, Type

from grid_arcade.engine import GameEngine
from grid_arcade.games.chase import ChaseEngine
from grid_arcade.games.checkers import CheckersEngine
from grid_arcade.games.lights_out import LightsOutEngine
from grid_arcade.games.navigation import NavigationEngine
from grid_arcade.games.snake import SnakeEngine
from grid_arcade.games.tetris import TetrisEngine
from grid_arcade.games.tic_tac_toe import TicTacToeEngine


ENGINE_REGISTRY: Dict[str, Type[GameEngine[Any, Any]]] = {
    engine.name: engine
    for engine in (
        TicTacToeEngine,
        CheckersEngine,
        SnakeEngine,
        TetrisEngine,
        LightsOutEngine,
        NavigationEngine,
        ChaseEngine,
    )
}
"""Registry of game names to engine classes."""


def make_engine(name: str, config: Optional[Any] = None, seed: Optional[int] = None) -> GameEngine[Any, Any]:
    """Build an engine for ``name``.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    try:
        engine_cls = ENGINE_REGISTRY[name]
    except KeyError:
        raise ValueError(
            f"Unknown game {name!r}; expected one of {sorted(ENGINE_REGISTRY)}"
        ) from None
    return engine_cls(config=config, seed=seed)
