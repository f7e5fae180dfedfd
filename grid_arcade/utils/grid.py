"""Random placement helpers.

All randomness in the games flows through a ``random.Random`` built by
:func:`turn_rng` from the game's base seed and a per-game counter, so a given
``(seed, counter)`` always makes the same choice and transitions stay pure.
"""

import random
from typing import AbstractSet, Iterable, List, Optional

from grid_arcade.components import Position


def turn_rng(seed: Optional[int], counter: int) -> random.Random:
    """Deterministic RNG for one random decision of a game."""
    return random.Random(hash((seed if seed is not None else 0, counter)))


def random_position(rng: random.Random, rows: int, cols: int) -> Position:
    return Position(rng.randrange(rows), rng.randrange(cols))


def generate_random_obstacles(
    rng: random.Random,
    rows: int,
    cols: int,
    count: int,
    exclude: Iterable[Position] = (),
    max_attempts: int = 1000,
) -> List[Position]:
    """Pick up to ``count`` distinct positions outside ``exclude``.

    Draws uniformly with retries; gives up after ``max_attempts`` draws, so
    the result may be shorter than ``count`` on crowded boards.
    """
    excluded = set(exclude)
    obstacles: List[Position] = []
    attempts = 0
    while len(obstacles) < count and attempts < max_attempts:
        candidate = random_position(rng, rows, cols)
        if candidate not in excluded:
            obstacles.append(candidate)
            excluded.add(candidate)
        attempts += 1
    return obstacles


def random_free_position(
    rng: random.Random,
    rows: int,
    cols: int,
    occupied: AbstractSet[Position],
    max_attempts: int = 1000,
) -> Optional[Position]:
    """Uniform position not in ``occupied``; ``None`` if the board is full.

    Retries random draws up to ``max_attempts`` times, then falls back to a
    uniform choice among the remaining free cells.
    """
    for _ in range(max_attempts):
        candidate = random_position(rng, rows, cols)
        if candidate not in occupied:
            return candidate
    free = [
        Position(r, c)
        for r in range(rows)
        for c in range(cols)
        if Position(r, c) not in occupied
    ]
    return rng.choice(free) if free else None
