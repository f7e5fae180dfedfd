"""Game engine base class.

A :class:`GameEngine` owns the authoritative state of one game and is the
only place that replaces it. Concrete engines (one per module under
:mod:`grid_arcade.games`) plug pure transition functions into the hooks
below; the engine itself never touches board cells.

Input arrives in three shapes:

* ``on_direction``: arrow keys / d-pad. Direction-persistent games (snake)
  only park the request in the pending slot, which the next tick consumes.
  Other games apply it immediately as one atomic transition.
* ``on_click``: a board cell was clicked.
* ``on_command``: a named button (``hard_drop``, ``follow``, ...).

Everything runs on a single asyncio event loop, so ticks and input handlers
never interleave: each one reads the current state and writes the next state
without yielding in between.
"""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Generic, Optional, TypeVar

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Position
from grid_arcade.errors import EngineNotStartedError
from grid_arcade.types import GameStatus, is_terminal

logger = logging.getLogger(__name__)

S = TypeVar("S")
C = TypeVar("C")


class GameEngine(ABC, Generic[S, C]):
    """Stateful adapter around a game's pure transitions.

    Subclasses set ``name`` and implement :meth:`default_config`,
    :meth:`new_state`, :meth:`status` and :meth:`board`; the input hooks and
    :meth:`step` default to rejecting everything.

    Attributes:
        config: Game configuration.
        seed: Base seed; ``None`` draws a fresh seed per game.
    """

    name: ClassVar[str] = ""

    def __init__(self, config: Optional[C] = None, seed: Optional[int] = None) -> None:
        self.config: C = config if config is not None else self.default_config()
        self.seed = seed
        self._state: Optional[S] = None
        self._pending_direction: Optional[Direction] = None
        self._games = 0

    # ------------------------------------------------------------------ hooks

    @classmethod
    @abstractmethod
    def default_config(cls) -> C: ...

    @abstractmethod
    def new_state(self, seed: int) -> S:
        """Fresh game state for one game."""

    @abstractmethod
    def status(self) -> GameStatus: ...

    @abstractmethod
    def board(self) -> Board:
        """Display board for the current state (may carry highlight tags)."""

    def info(self) -> Dict[str, Any]:
        """Display fields handed to the renderer next to the board."""
        return {"status": self.status(), "score": self.score()}

    def score(self) -> Optional[int]:
        return None

    @property
    def high_score_key(self) -> Optional[str]:
        """Store key for the best score, or ``None`` for games without one."""
        return None

    def tick_interval_ms(self) -> Optional[int]:
        """Milliseconds until the next tick, or ``None`` if the game has no timer."""
        return None

    def wants_ticks(self) -> bool:
        """Whether a timer should currently be driving :meth:`tick`."""
        return self.tick_interval_ms() is not None and self.status() is GameStatus.RUNNING

    def step(self, state: S) -> S:
        """Pure tick transition; default is no-op."""
        return state

    def handle_direction(self, state: S, direction: Direction) -> S:
        return state

    def handle_click(self, state: S, pos: Position) -> S:
        return state

    def handle_command(self, state: S, command: str) -> S:
        return state

    # ------------------------------------------------------------- lifecycle

    @property
    def started(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> S:
        """Current state.

        Raises:
            EngineNotStartedError: If :meth:`start` was never called.
        """
        if self._state is None:
            raise EngineNotStartedError(f"{type(self).__name__} has not been started")
        return self._state

    def _next_seed(self) -> int:
        self._games += 1
        if self.seed is None:
            return random.randrange(2**32)
        return hash((self.seed, self._games))

    def start(self) -> S:
        """Begin a new game, discarding any previous state."""
        self._pending_direction = None
        self._state = self.new_state(self._next_seed())
        logger.info(f"{self.name}: new game started")
        return self._state

    def reset(self) -> S:
        return self.start()

    def is_over(self) -> bool:
        return self.started and is_terminal(self.status())

    # ----------------------------------------------------------------- input

    def set_pending_direction(self, direction: Direction) -> None:
        self._pending_direction = direction

    def take_pending_direction(self) -> Optional[Direction]:
        """Consume the pending direction (at most once per tick)."""
        direction, self._pending_direction = self._pending_direction, None
        return direction

    def _apply(self, new_state: S, source: str) -> S:
        if new_state is self._state:
            logger.debug(f"{self.name}: {source} left the state unchanged")
        self._state = new_state
        return new_state

    def tick(self) -> S:
        """Advance the game by one timer tick."""
        return self._apply(self.step(self.state), "tick")

    def on_direction(self, direction: Direction) -> S:
        return self._apply(self.handle_direction(self.state, direction), f"direction {direction}")

    def on_click(self, pos: Position) -> S:
        return self._apply(self.handle_click(self.state, pos), f"click {pos}")

    def on_command(self, command: str) -> S:
        if command == "reset":
            return self.reset()
        return self._apply(self.handle_command(self.state, command), f"command {command!r}")
