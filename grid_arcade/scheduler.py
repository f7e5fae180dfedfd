"""Fixed-interval tick scheduler.

One :class:`TickScheduler` drives one engine. It owns at most one asyncio
task running ``sleep(interval) -> callback()`` in a loop, where the interval
is asked for again before every sleep so games can speed up as they go.

Restarting is always cancel-then-arm, and every loop remembers the generation
it was started under. A loop that wakes up after a newer ``start`` or a
``cancel`` sees a stale generation and exits without calling back, so an old
timer can never tick a new game.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

IntervalFn = Callable[[], Optional[int]]
TickCallback = Callable[[], bool]


class TickScheduler:
    """Single-task repeating timer.

    The callback returns ``False`` to stop the loop. ``interval_ms`` returning
    ``None`` stops it too.
    """

    def __init__(self, name: str = "tick") -> None:
        self.name = name
        self._task: Optional[asyncio.Task[None]] = None
        self._generation = 0
        self.ticks = 0

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, interval_ms: IntervalFn, callback: TickCallback) -> None:
        """Cancel any running loop and arm a new one.

        Must be called from a running event loop.
        """
        self.cancel()
        self._generation += 1
        generation = self._generation
        self._task = asyncio.create_task(self._run(generation, interval_ms, callback))
        logger.info(f"{self.name}: timer started (generation {generation})")

    def cancel(self) -> None:
        """Stop the current loop, if any; its pending tick will not fire."""
        self._generation += 1
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # The loop may be cancelling itself from inside its own callback.
        if task is not asyncio.current_task():
            task.cancel()
        logger.info(f"{self.name}: timer cancelled")

    async def stop(self) -> None:
        """Cancel and wait until the loop task has finished."""
        task = self._task
        self.cancel()
        if task is None or task is asyncio.current_task():
            return
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self, generation: int, interval_ms: IntervalFn, callback: TickCallback) -> None:
        try:
            while True:
                interval = interval_ms()
                if interval is None:
                    break
                await asyncio.sleep(interval / 1000)
                if generation != self._generation:
                    logger.debug(f"{self.name}: stale tick from generation {generation} dropped")
                    return
                self.ticks += 1
                logger.debug(f"{self.name}: tick {self.ticks}")
                if callback() is False or generation != self._generation:
                    break
        except asyncio.CancelledError:
            logger.debug(f"{self.name}: loop for generation {generation} cancelled")
            raise
        finally:
            if generation == self._generation:
                self._task = None
