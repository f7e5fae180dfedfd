"""Game session: engine + timer + score store + renderer callback.

A :class:`GameSession` is what a front end talks to. It forwards input to the
engine, keeps the tick timer running exactly while the engine wants ticks,
pushes a fresh board to the renderer after every change and records the best
score once per finished game.

All methods must be called from the event loop the session's timer runs on.
"""

import logging
from typing import Any, Callable, Dict, Optional

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Position
from grid_arcade.engine import GameEngine
from grid_arcade.scheduler import TickScheduler
from grid_arcade.store import InMemoryScoreStore, ScoreStore, record_best_score

logger = logging.getLogger(__name__)

RenderCallback = Callable[[Board, Dict[str, Any]], None]

COMMANDS = ("hard_drop", "follow", "regenerate", "reset", "forward", "rotate")


class GameSession:
    """Runs one engine for a front end.

    Args:
        engine: The game to run.
        on_update: Called with ``(board, info)`` after every state change.
        store: High-score store; defaults to an in-memory one.
    """

    def __init__(
        self,
        engine: GameEngine[Any, Any],
        on_update: Optional[RenderCallback] = None,
        store: Optional[ScoreStore] = None,
    ) -> None:
        self.engine = engine
        self.on_update = on_update
        self.store: ScoreStore = store if store is not None else InMemoryScoreStore()
        self.scheduler = TickScheduler(name=engine.name or type(engine).__name__)
        self._recorded = False
        self._stopped = False
        self.last_board: Optional[Board] = None

    # ---------------------------------------------------------------- public

    def start(self) -> None:
        """Start a new game (cancelling any running timer first)."""
        self.scheduler.cancel()
        self.engine.start()
        self._recorded = False
        self._stopped = False
        logger.info(f"Session {self.scheduler.name}: game started")
        self._after_change()

    def stop(self) -> None:
        """Stop the timer and ignore input until the next :meth:`start`."""
        self._stopped = True
        self.scheduler.cancel()
        logger.info(f"Session {self.scheduler.name}: stopped")

    async def close(self) -> None:
        await self.scheduler.stop()

    def directional_intent(self, direction: Direction) -> None:
        if self._ignored(f"direction {direction}"):
            return
        self.engine.on_direction(direction)
        self._after_change()

    def cell_clicked(self, pos: Position) -> None:
        if self._ignored(f"click {pos}"):
            return
        self.engine.on_click(pos)
        self._after_change()

    def command(self, name: str) -> None:
        """Non-directional buttons: ``hard_drop``, ``follow``, ``regenerate``, ``reset``, ...

        Raises:
            ValueError: If ``name`` is not a known command.
        """
        if name not in COMMANDS:
            raise ValueError(f"Unknown command {name!r}; expected one of {list(COMMANDS)}")
        if name == "reset":
            self.start()
            return
        if self._ignored(f"command {name!r}"):
            return
        was_over = self.engine.is_over()
        self.engine.on_command(name)
        if was_over and not self.engine.is_over():
            self._recorded = False
        self._after_change()

    @property
    def best_score(self) -> Optional[int]:
        key = self.engine.high_score_key
        return self.store.get(key) if key is not None else None

    # -------------------------------------------------------------- internal

    def _ignored(self, source: str) -> bool:
        if self._stopped:
            logger.debug(f"Session {self.scheduler.name}: {source} ignored while stopped")
        return self._stopped

    def _on_tick(self) -> bool:
        self.engine.tick()
        self._after_change(from_tick=True)
        return self.engine.wants_ticks()

    def _after_change(self, from_tick: bool = False) -> None:
        if self.engine.is_over():
            self._finish()
        elif not from_tick:
            self._sync_timer()
        self._render()

    def _sync_timer(self) -> None:
        wants = self.engine.wants_ticks()
        if wants and not self.scheduler.running:
            self.scheduler.start(self.engine.tick_interval_ms, self._on_tick)
        elif not wants and self.scheduler.running:
            self.scheduler.cancel()

    def _finish(self) -> None:
        if self.scheduler.running:
            self.scheduler.cancel()
        if self._recorded:
            return
        self._recorded = True
        info = self.engine.info()
        logger.info(f"Session {self.scheduler.name}: game over ({info.get('status')})")
        key = self.engine.high_score_key
        score = self.engine.score()
        if key is not None and score is not None:
            record_best_score(self.store, key, score)

    def _render(self) -> None:
        board = self.engine.board()
        self.last_board = board
        if self.on_update is None:
            return
        info = self.engine.info()
        best = self.best_score
        if best is not None:
            info["best_score"] = best
        self.on_update(board, info)
