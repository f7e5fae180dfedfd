"""Tetris.

Locked blocks live on a :class:`Board` of ``FILLED`` cells; the falling piece
is kept apart as a :class:`Piece` and only written to the board when it
locks. A piece position is valid when every occupied cell is within the
columns, above the floor and, for rows on the board, not locked. Cells above
row 0 are allowed so that tall rotation states can spawn and rotate at the
top of the well.

Locking clears every full row at once and shifts the rows above it down, so
the board height never changes. Clearing ``k`` rows scores
``line_scores[k]`` and every ``lines_per_level`` cleared lines raise the
level, which shortens the gravity interval.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pyrsistent import pvector

from grid_arcade.actions import Direction
from grid_arcade.board import Board
from grid_arcade.components import Cell, Piece, PieceKind, Position, Tag, make_cell
from grid_arcade.config import TetrisConfig
from grid_arcade.engine import GameEngine
from grid_arcade.types import GameStatus, is_terminal
from grid_arcade.utils.grid import turn_rng

PIECE_KINDS: List[PieceKind] = list(PieceKind)

WALL_KICKS = [(0, 0), (0, -1), (0, 1), (1, 0), (-1, 0)]


@dataclass(frozen=True)
class TetrisState:
    """Tetris game state.

    Attributes:
        board: Locked cells only.
        current: Falling piece, ``None`` once the game is lost.
        next_kind: Kind of the piece spawned after ``current`` locks.
        score: Points so far.
        lines_cleared: Total rows cleared.
        level: ``lines_cleared // lines_per_level + 1``.
        status: Game status.
        seed: Base seed for piece selection.
        spawn_count: Pieces drawn so far; with ``seed`` it seeds the next draw.
        config: Scoring and level constants.
    """

    board: Board
    current: Optional[Piece]
    next_kind: PieceKind
    score: int = 0
    lines_cleared: int = 0
    level: int = 1
    status: GameStatus = GameStatus.RUNNING
    seed: int = 0
    spawn_count: int = 0
    config: TetrisConfig = TetrisConfig()


def _draw_kind(seed: int, counter: int) -> PieceKind:
    return turn_rng(seed, counter).choice(PIECE_KINDS)


def spawn_piece(kind: PieceKind, cols: int) -> Piece:
    """Piece of ``kind`` at the top-centre spawn point, rotation 0."""
    return Piece(kind=kind, rotation=0, anchor=Position(0, cols // 2 - 1))


def is_valid(board: Board, piece: Piece) -> bool:
    """True if ``piece`` fits: inside the columns, above the floor, off locked cells."""
    for pos in piece.cells():
        if pos.col < 0 or pos.col >= board.cols or pos.row >= board.rows:
            return False
        if pos.row >= 0 and board.get(pos).has(Tag.FILLED):
            return False
    return True


def new_game(config: TetrisConfig, seed: int = 0) -> TetrisState:
    board = Board.create(config.rows, config.cols)
    first = spawn_piece(_draw_kind(seed, 0), config.cols)
    return TetrisState(
        board=board,
        current=first,
        next_kind=_draw_kind(seed, 1),
        seed=seed,
        spawn_count=2,
        config=config,
    )


def _spawn_next(state: TetrisState) -> TetrisState:
    piece = spawn_piece(state.next_kind, state.board.cols)
    if not is_valid(state.board, piece):
        return replace(state, current=None, status=GameStatus.LOST)
    return replace(
        state,
        current=piece,
        next_kind=_draw_kind(state.seed, state.spawn_count),
        spawn_count=state.spawn_count + 1,
    )


def _is_full(row: Iterable[Cell]) -> bool:
    return all(cell.has(Tag.FILLED) for cell in row)


def clear_lines(board: Board) -> Tuple[Board, int]:
    """Remove every full row, prepend as many empty rows, return the count."""
    remaining = [row for row in board.cells if not _is_full(row)]
    cleared = board.rows - len(remaining)
    if cleared == 0:
        return board, 0
    empty_row = pvector([Cell()] * board.cols)
    cells = pvector([empty_row] * cleared + remaining)
    return Board(rows=board.rows, cols=board.cols, cells=cells), cleared


def lock_piece(state: TetrisState) -> TetrisState:
    """Write the current piece, clear lines, score them and spawn the next piece."""
    piece = state.current
    if piece is None:
        return state
    block = make_cell(piece.symbol, Tag.FILLED)
    board = state.board.with_cells((pos, block) for pos in piece.cells() if pos.row >= 0)
    board, cleared = clear_lines(board)

    config = state.config
    lines_cleared = state.lines_cleared + cleared
    locked = replace(
        state,
        board=board,
        current=None,
        score=state.score + config.line_scores.get(cleared, 0),
        lines_cleared=lines_cleared,
        level=lines_cleared // config.lines_per_level + 1,
    )
    return _spawn_next(locked)


def _shift(state: TetrisState, d_row: int, d_col: int) -> Optional[TetrisState]:
    if is_terminal(state.status) or state.current is None:
        return None
    moved = state.current.translated(d_row, d_col)
    if not is_valid(state.board, moved):
        return None
    return replace(state, current=moved)


def move_left(state: TetrisState) -> TetrisState:
    return _shift(state, 0, -1) or state


def move_right(state: TetrisState) -> TetrisState:
    return _shift(state, 0, 1) or state


def gravity(state: TetrisState) -> TetrisState:
    """One gravity step: fall by a row, or lock if blocked."""
    if is_terminal(state.status):
        return state
    moved = _shift(state, 1, 0)
    if moved is None:
        return lock_piece(state)
    return moved


def soft_drop(state: TetrisState) -> TetrisState:
    """Player-requested drop by one row; scores ``soft_drop_score`` or locks."""
    if is_terminal(state.status):
        return state
    moved = _shift(state, 1, 0)
    if moved is None:
        return lock_piece(state)
    return replace(moved, score=moved.score + state.config.soft_drop_score)


def hard_drop(state: TetrisState) -> TetrisState:
    """Drop straight down, score ``hard_drop_score`` per row, then lock."""
    if is_terminal(state.status) or state.current is None:
        return state
    piece = state.current
    rows = 0
    while is_valid(state.board, piece.translated(1, 0)):
        piece = piece.translated(1, 0)
        rows += 1
    dropped = replace(
        state, current=piece, score=state.score + rows * state.config.hard_drop_score
    )
    return lock_piece(dropped)


def rotate(state: TetrisState) -> TetrisState:
    """Rotate clockwise, trying each wall kick in order; rejected if none fits."""
    if is_terminal(state.status) or state.current is None:
        return state
    rotated = state.current.rotated()
    for d_row, d_col in WALL_KICKS:
        candidate = rotated.translated(d_row, d_col)
        if is_valid(state.board, candidate):
            return replace(state, current=candidate)
    return state


def display_board(state: TetrisState) -> Board:
    """Locked cells plus the falling piece tagged ``ACTIVE`` (on-board cells only)."""
    if state.current is None:
        return state.board
    active = make_cell(state.current.symbol, Tag.ACTIVE)
    return state.board.with_cells(
        (pos, active) for pos in state.current.cells() if state.board.in_bounds(pos)
    )


DIRECTION_ACTIONS = {
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
    Direction.DOWN: soft_drop,
    Direction.UP: rotate,
}

COMMAND_ACTIONS = {
    "hard_drop": hard_drop,
    "rotate": rotate,
}


class TetrisEngine(GameEngine[TetrisState, TetrisConfig]):
    name = "tetris"

    @classmethod
    def default_config(cls) -> TetrisConfig:
        return TetrisConfig()

    @property
    def high_score_key(self) -> Optional[str]:
        return self.config.high_score_key

    def new_state(self, seed: int) -> TetrisState:
        return new_game(self.config, seed)

    def status(self) -> GameStatus:
        return self.state.status

    def score(self) -> Optional[int]:
        return self.state.score

    def board(self) -> Board:
        return display_board(self.state)

    def tick_interval_ms(self) -> Optional[int]:
        level = self.state.level if self.started else 1
        return self.config.tick_ms(level)

    def step(self, state: TetrisState) -> TetrisState:
        return gravity(state)

    def handle_direction(self, state: TetrisState, direction: Direction) -> TetrisState:
        return DIRECTION_ACTIONS[direction](state)

    def handle_command(self, state: TetrisState, command: str) -> TetrisState:
        action = COMMAND_ACTIONS.get(command)
        return action(state) if action is not None else state

    def info(self) -> Dict[str, Any]:
        state = self.state
        return {
            "status": state.status,
            "score": state.score,
            "lines": state.lines_cleared,
            "level": state.level,
            "next": state.next_kind,
        }
