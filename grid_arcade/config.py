"""Per-game configuration.

Each game reads its sizes, counts, tick periods and scoring constants from a
frozen dataclass defined here. Defaults reproduce the standard games; tests
and callers build smaller or tweaked variants with ``dataclasses.replace`` or
keyword arguments. Invalid values raise ``ValueError`` at construction so a
bad config never reaches a game.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be positive, got {value}")


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class TicTacToeConfig:
    size: int = 3

    def __post_init__(self) -> None:
        _require_positive(size=self.size)


@dataclass(frozen=True)
class CheckersConfig:
    """Checkers board geometry.

    Attributes:
        size: Board side length.
        piece_rows: Rows of men each side starts with.
    """

    size: int = 8
    piece_rows: int = 3

    def __post_init__(self) -> None:
        _require_positive(size=self.size, piece_rows=self.piece_rows)
        if 2 * self.piece_rows >= self.size:
            raise ValueError(
                f"piece_rows={self.piece_rows} leaves no gap on a {self.size}x{self.size} board"
            )


@dataclass(frozen=True)
class SnakeConfig:
    """Snake board, pacing and scoring.

    Attributes:
        rows: Board height.
        cols: Board width.
        obstacle_count: Obstacles generated once per game.
        obstacle_buffer: Extra rows above and below the starting row kept
            free of obstacles (0 keeps only the starting row free).
        tick_ms: Milliseconds between snake moves.
        food_score: Points per food eaten.
        high_score_key: Store key for the best score.
    """

    rows: int = 12
    cols: int = 12
    obstacle_count: int = 8
    obstacle_buffer: int = 0
    tick_ms: int = 200
    food_score: int = 10
    high_score_key: str = "snakeHighScore"

    def __post_init__(self) -> None:
        _require_positive(rows=self.rows, cols=self.cols, tick_ms=self.tick_ms)
        _require_non_negative(
            obstacle_count=self.obstacle_count,
            obstacle_buffer=self.obstacle_buffer,
            food_score=self.food_score,
        )
        if self.cols < 3:
            raise ValueError(f"Snake needs at least 3 columns, got {self.cols}")


@dataclass(frozen=True)
class TetrisConfig:
    """Tetris well, scoring and gravity curve.

    Gravity interval is ``max(min_tick_ms, base_tick_ms - (level - 1) * tick_step_ms)``.
    """

    rows: int = 20
    cols: int = 10
    base_tick_ms: int = 800
    tick_step_ms: int = 70
    min_tick_ms: int = 120
    lines_per_level: int = 10
    soft_drop_score: int = 1
    hard_drop_score: int = 2
    line_scores: PMap[int, int] = pmap({1: 100, 2: 300, 3: 500, 4: 800})
    high_score_key: str = "tetrisHighScore"

    def __post_init__(self) -> None:
        _require_positive(
            rows=self.rows,
            cols=self.cols,
            base_tick_ms=self.base_tick_ms,
            min_tick_ms=self.min_tick_ms,
            lines_per_level=self.lines_per_level,
        )
        _require_non_negative(tick_step_ms=self.tick_step_ms)
        if self.cols < 4:
            raise ValueError(f"Tetris needs at least 4 columns, got {self.cols}")

    def tick_ms(self, level: int) -> int:
        return max(self.min_tick_ms, self.base_tick_ms - (level - 1) * self.tick_step_ms)


@dataclass(frozen=True)
class LightsOutConfig:
    """Lights-out board and scramble range (inclusive)."""

    size: int = 5
    min_scramble: int = 3
    max_scramble: int = 5

    def __post_init__(self) -> None:
        _require_positive(size=self.size)
        _require_non_negative(min_scramble=self.min_scramble)
        if self.max_scramble < self.min_scramble:
            raise ValueError(
                f"max_scramble={self.max_scramble} is below min_scramble={self.min_scramble}"
            )


@dataclass(frozen=True)
class NavigationConfig:
    """Navigation terrain generation and follow pacing.

    Attributes:
        rows: Board height.
        cols: Board width.
        start: Fixed start coordinate.
        navigable_probability: Chance that a non-start cell is navigable.
        tick_ms: Milliseconds between path steps while following.
    """

    rows: int = 12
    cols: int = 12
    start: Tuple[int, int] = (0, 0)
    navigable_probability: float = 0.7
    tick_ms: int = 500

    def __post_init__(self) -> None:
        _require_positive(rows=self.rows, cols=self.cols, tick_ms=self.tick_ms)
        if self.rows * self.cols < 2:
            raise ValueError("Navigation needs room for a distinct start and target")
        row, col = self.start
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise ValueError(f"start {self.start} is outside a {self.rows}x{self.cols} board")
        if not 0.0 <= self.navigable_probability <= 1.0:
            raise ValueError(
                f"navigable_probability must be in [0, 1], got {self.navigable_probability}"
            )


@dataclass(frozen=True)
class ChaseConfig:
    """Top-down chase board and enemy pacing.

    ``player_start`` defaults to the board centre when left as ``None``.
    """

    rows: int = 12
    cols: int = 12
    obstacle_count: int = 6
    chaser_start: Tuple[int, int] = (0, 0)
    player_start: Optional[Tuple[int, int]] = None
    tick_ms: int = 1000

    def __post_init__(self) -> None:
        _require_positive(rows=self.rows, cols=self.cols, tick_ms=self.tick_ms)
        _require_non_negative(obstacle_count=self.obstacle_count)
        for name, (row, col) in (("chaser_start", self.chaser_start), ("player_start", self.player)):
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise ValueError(f"{name} {(row, col)} is outside a {self.rows}x{self.cols} board")
        if self.player == self.chaser_start:
            raise ValueError("player and chaser must start on different cells")

    @property
    def player(self) -> Tuple[int, int]:
        """Resolved player start."""
        if self.player_start is not None:
            return self.player_start
        return (self.rows // 2, self.cols // 2)
