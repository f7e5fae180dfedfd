"""High-score persistence.

The engine only needs a tiny key -> int store; the host application decides
where it lives (browser storage, a file, a database). ``InMemoryScoreStore``
covers tests and single-process use.
"""

import logging
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def get(self, key: str) -> Optional[int]: ...

    def set(self, key: str, value: int) -> None: ...


class InMemoryScoreStore:
    """Dict-backed :class:`ScoreStore`."""

    def __init__(self, initial: Optional[Dict[str, int]] = None) -> None:
        self._scores: Dict[str, int] = dict(initial or {})

    def get(self, key: str) -> Optional[int]:
        return self._scores.get(key)

    def set(self, key: str, value: int) -> None:
        self._scores[key] = value


def record_best_score(store: ScoreStore, key: str, score: int) -> bool:
    """Store ``score`` under ``key`` if it beats the stored value.

    Returns:
        bool: True if the store was written.
    """
    best = store.get(key)
    if best is not None and score <= best:
        return False
    store.set(key, score)
    logger.info(f"New best score for {key}: {score} (was {best})")
    return True
