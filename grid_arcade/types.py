"""Common type aliases and enumerations.

``NavigablePredicate`` and ``MoveFn`` are the two pluggable callables shared
by several games: the pathfinder asks the former whether a cell may be
entered, and movement code asks the latter where a step in a direction lands.
"""

from enum import StrEnum, auto
from typing import Callable, Optional, TYPE_CHECKING


# Forward declarations to avoid circular imports:
if TYPE_CHECKING:
    from grid_arcade.actions import Direction
    from grid_arcade.components import Cell, Position

NavigablePredicate = Callable[["Cell", "Position"], bool]
MoveFn = Callable[["Position", "Direction", int, int], Optional["Position"]]


class GameStatus(StrEnum):
    """Lifecycle of a single game instance.

    ``WON``, ``LOST`` and ``DRAW`` are terminal: transitions leave a terminal
    state untouched until the game is explicitly reset.
    """

    IDLE = auto()
    RUNNING = auto()
    WON = auto()
    LOST = auto()
    DRAW = auto()


TERMINAL_STATUSES = frozenset({GameStatus.WON, GameStatus.LOST, GameStatus.DRAW})


def is_terminal(status: GameStatus) -> bool:
    """Return True if ``status`` ends the game."""
    return status in TERMINAL_STATUSES


class Player(StrEnum):
    """Checkers sides (black moves first)."""

    BLACK = auto()
    RED = auto()

    @property
    def opponent(self) -> "Player":
        return Player.RED if self is Player.BLACK else Player.BLACK


class Mark(StrEnum):
    """Tic-tac-toe marks; the value doubles as the cell symbol."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X
