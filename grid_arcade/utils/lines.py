"""Win-line detection.

Checks whether every cell along a full line holds a target symbol and, if so,
reports the exact ordered coordinates of that line so the caller can
highlight them. Lines are checked rows first, then columns, then diagonals;
the first complete line wins.

Only diagonals whose length equals the board's row count ``n`` are
considered. On a square board that is exactly the main diagonal and the
anti-diagonal; partial diagonals never count. Nothing here assumes ``n == 3``.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from grid_arcade.board import Board
from grid_arcade.components import Position

Line = Tuple[Position, ...]


@dataclass(frozen=True)
class WinResult:
    """Outcome of a line check.

    Attributes:
        is_win: True if some full line holds the target symbol.
        winning_cells: Coordinates of that line in order, empty otherwise.
    """

    is_win: bool
    winning_cells: Line = ()


NO_WIN = WinResult(is_win=False, winning_cells=())


def _line_holds(board: Board, line: Sequence[Position], symbol: str) -> bool:
    return all(board.get(pos).symbol == symbol for pos in line)


def _first_win(board: Board, lines: Iterator[Line], symbol: str) -> WinResult:
    for line in lines:
        if _line_holds(board, line, symbol):
            return WinResult(is_win=True, winning_cells=line)
    return NO_WIN


def row_lines(board: Board) -> Iterator[Line]:
    for r in range(board.rows):
        yield tuple(Position(r, c) for c in range(board.cols))


def column_lines(board: Board) -> Iterator[Line]:
    for c in range(board.cols):
        yield tuple(Position(r, c) for r in range(board.rows))


def _diagonal(board: Board, start: Position, d_col: int) -> Line:
    cells: List[Position] = []
    pos = start
    while board.in_bounds(pos):
        cells.append(pos)
        pos = pos.offset(1, d_col)
    return tuple(cells)


def diagonal_lines(board: Board) -> Iterator[Line]:
    """Full-length diagonals: down-right ones first, then down-left ones."""
    n = board.rows
    down_right = [Position(r, 0) for r in range(board.rows)]
    down_right += [Position(0, c) for c in range(1, board.cols)]
    down_left = [Position(r, board.cols - 1) for r in range(board.rows)]
    down_left += [Position(0, c) for c in range(board.cols - 2, -1, -1)]

    for start in down_right:
        line = _diagonal(board, start, 1)
        if len(line) == n:
            yield line
    for start in down_left:
        line = _diagonal(board, start, -1)
        if len(line) == n:
            yield line


def check_row_win(board: Board, symbol: str) -> WinResult:
    return _first_win(board, row_lines(board), symbol)


def check_col_win(board: Board, symbol: str) -> WinResult:
    return _first_win(board, column_lines(board), symbol)


def check_diagonal_win(board: Board, symbol: str) -> WinResult:
    return _first_win(board, diagonal_lines(board), symbol)


def check_win(board: Board, symbol: str) -> WinResult:
    """Rows, then columns, then diagonals; first complete line is returned."""
    for check in (check_row_win, check_col_win, check_diagonal_win):
        result = check(board, symbol)
        if result.is_win:
            return result
    return NO_WIN
