"""Checkers.

Board layout: pieces sit on dark squares only (``(row + col) % 2 == 1``).
Black starts in the top rows and moves first, advancing toward the last row;
red starts in the bottom rows and advances toward row 0. Kings move along all
four diagonals.

Rules implemented here:

* Forced capture is per piece: when the selected piece has a jump, only its
  jumps are offered. Another piece's jumps do not restrict it.
* A jump captures exactly one piece; there is no multi-jump continuation.
* A man reaching the far row is crowned (symbol ``♔`` plus ``Tag.KING``).
* After every move a side with no pieces loses; otherwise a side to move with
  no legal move anywhere also loses.

Input is two-phase clicking: select an own piece that can move, then click
one of its highlighted destinations.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Tuple

from grid_arcade.board import Board
from grid_arcade.components import Cell, Position, Tag, make_cell
from grid_arcade.config import CheckersConfig
from grid_arcade.engine import GameEngine
from grid_arcade.types import GameStatus, Player, is_terminal

MAN_SYMBOL = "●"
KING_SYMBOL = "♔"

PLAYER_TAGS: Dict[Player, Tag] = {Player.BLACK: Tag.BLACK, Player.RED: Tag.RED}

# Row direction in which each side's men advance.
FORWARD: Dict[Player, int] = {Player.BLACK: 1, Player.RED: -1}


@dataclass(frozen=True)
class Move:
    """One legal move of a single piece.

    Attributes:
        origin: Square the piece leaves.
        destination: Square the piece lands on.
        captured: Jumped-over square for captures, ``None`` for steps.
    """

    origin: Position
    destination: Position
    captured: Optional[Position] = None

    @property
    def is_jump(self) -> bool:
        return self.captured is not None


@dataclass(frozen=True)
class CheckersState:
    board: Board
    turn: Player = Player.BLACK
    selected: Optional[Position] = None
    legal_moves: Tuple[Move, ...] = ()
    status: GameStatus = GameStatus.RUNNING
    winner: Optional[Player] = None


def is_dark(pos: Position) -> bool:
    return (pos.row + pos.col) % 2 == 1


def empty_square(pos: Position) -> Cell:
    return make_cell("", Tag.DARK if is_dark(pos) else Tag.LIGHT)


def man(player: Player) -> Cell:
    return make_cell(MAN_SYMBOL, Tag.DARK, PLAYER_TAGS[player])


def owner(cell: Cell) -> Optional[Player]:
    for player, tag in PLAYER_TAGS.items():
        if cell.has(tag):
            return player
    return None


def new_game(config: CheckersConfig) -> CheckersState:
    """Standard opening position with black to move."""
    size = config.size
    board = Board.create(size, size).map_cells(lambda pos, _: empty_square(pos))
    updates: List[Tuple[Position, Cell]] = []
    for pos in board.positions():
        if not is_dark(pos):
            continue
        if pos.row < config.piece_rows:
            updates.append((pos, man(Player.BLACK)))
        elif pos.row >= size - config.piece_rows:
            updates.append((pos, man(Player.RED)))
    return CheckersState(board=board.with_cells(updates))


def _directions(cell: Cell, player: Player) -> List[Tuple[int, int]]:
    if cell.has(Tag.KING):
        return [(-1, -1), (-1, 1), (1, -1), (1, 1)]
    forward = FORWARD[player]
    return [(forward, -1), (forward, 1)]


def piece_moves(board: Board, pos: Position) -> Tuple[Move, ...]:
    """Legal moves of the piece at ``pos`` (empty for empty squares).

    If any jump exists only jumps are returned.
    """
    cell = board.get(pos)
    player = owner(cell)
    if player is None:
        return ()

    steps: List[Move] = []
    jumps: List[Move] = []
    for d_row, d_col in _directions(cell, player):
        over = pos.offset(d_row, d_col)
        if not board.in_bounds(over):
            continue
        over_cell = board.get(over)
        if over_cell.is_empty:
            steps.append(Move(pos, over))
            continue
        landing = pos.offset(2 * d_row, 2 * d_col)
        if (
            owner(over_cell) is player.opponent
            and board.in_bounds(landing)
            and board.get(landing).is_empty
        ):
            jumps.append(Move(pos, landing, captured=over))
    return tuple(jumps) if jumps else tuple(steps)


def pieces_of(board: Board, player: Player) -> List[Position]:
    return board.find(lambda cell: owner(cell) is player)


def piece_count(board: Board, player: Player) -> int:
    return len(pieces_of(board, player))


def has_any_move(board: Board, player: Player) -> bool:
    return any(piece_moves(board, pos) for pos in pieces_of(board, player))


def _crown_row(board: Board, player: Player) -> int:
    return board.rows - 1 if player is Player.BLACK else 0


def apply_move(state: CheckersState, move: Move) -> CheckersState:
    """Execute ``move`` for the side to move and run the terminal check."""
    board = state.board
    piece = board.get(move.origin)
    if move.destination.row == _crown_row(board, state.turn) and not piece.has(Tag.KING):
        piece = piece.with_symbol(KING_SYMBOL).tagged(Tag.KING)

    updates = [
        (move.origin, empty_square(move.origin)),
        (move.destination, piece),
    ]
    if move.captured is not None:
        updates.append((move.captured, empty_square(move.captured)))
    board = board.with_cells(updates)

    next_state = replace(
        state, board=board, turn=state.turn.opponent, selected=None, legal_moves=()
    )
    return check_game_over(next_state)


def check_game_over(state: CheckersState) -> CheckersState:
    """Set the winner if a side has no pieces or the side to move is stuck."""
    for player in (Player.BLACK, Player.RED):
        if piece_count(state.board, player) == 0:
            return replace(state, status=GameStatus.WON, winner=player.opponent)
    if not has_any_move(state.board, state.turn):
        return replace(state, status=GameStatus.WON, winner=state.turn.opponent)
    return state


def _select(state: CheckersState, pos: Position) -> CheckersState:
    moves = piece_moves(state.board, pos)
    if not moves:
        return state
    return replace(state, selected=pos, legal_moves=moves)


def click(state: CheckersState, pos: Position) -> CheckersState:
    """Two-phase click handling.

    * Click on a highlighted destination of the selected piece: move.
    * Click on an own piece with legal moves: (re)select it.
    * Click on an own piece without moves: nothing changes.
    * Any other click clears the selection.
    """
    if is_terminal(state.status) or not state.board.in_bounds(pos):
        return state

    if state.selected is not None:
        for move in state.legal_moves:
            if move.destination == pos:
                return apply_move(state, move)

    if owner(state.board.get(pos)) is state.turn:
        return _select(state, pos)

    if state.selected is None:
        return state
    return replace(state, selected=None, legal_moves=())


def display_board(state: CheckersState) -> Board:
    """Board with the selection and its destinations highlighted."""
    if state.selected is None:
        return state.board
    board = state.board
    updates = [(state.selected, board.get(state.selected).tagged(Tag.SELECTED))]
    updates += [
        (move.destination, board.get(move.destination).tagged(Tag.CANDIDATE))
        for move in state.legal_moves
    ]
    return board.with_cells(updates)


class CheckersEngine(GameEngine[CheckersState, CheckersConfig]):
    name = "checkers"

    @classmethod
    def default_config(cls) -> CheckersConfig:
        return CheckersConfig()

    def new_state(self, seed: int) -> CheckersState:
        return new_game(self.config)

    def status(self) -> GameStatus:
        return self.state.status

    def board(self) -> Board:
        return display_board(self.state)

    def handle_click(self, state: CheckersState, pos: Position) -> CheckersState:
        return click(state, pos)

    def info(self) -> Dict[str, Any]:
        state = self.state
        return {
            "status": state.status,
            "turn": state.turn,
            "winner": state.winner,
            "black_pieces": piece_count(state.board, Player.BLACK),
            "red_pieces": piece_count(state.board, Player.RED),
        }
