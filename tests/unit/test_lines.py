from grid_arcade.utils.lines import (
    check_col_win,
    check_diagonal_win,
    check_row_win,
    check_win,
    diagonal_lines,
)
from tests.test_utils import make_symbol_board, positions


def test_row_zero_win_returns_cells_in_order() -> None:
    board = make_symbol_board(["XXX", "OO.", "..."])
    result = check_win(board, "X")
    assert result.is_win
    assert list(result.winning_cells) == positions([(0, 0), (0, 1), (0, 2)])


def test_column_win() -> None:
    board = make_symbol_board([".O.", "XO.", "XO."])
    result = check_col_win(board, "O")
    assert result.is_win
    assert list(result.winning_cells) == positions([(0, 1), (1, 1), (2, 1)])
    assert not check_row_win(board, "O").is_win


def test_main_diagonal_then_anti_diagonal() -> None:
    main = make_symbol_board(["X..", ".X.", "..X"])
    assert list(check_diagonal_win(main, "X").winning_cells) == positions([(0, 0), (1, 1), (2, 2)])

    anti = make_symbol_board(["..O", ".O.", "O.."])
    assert list(check_diagonal_win(anti, "O").winning_cells) == positions([(0, 2), (1, 1), (2, 0)])


def test_rows_are_checked_before_columns() -> None:
    board = make_symbol_board(["XXX", "X..", "X.."])
    assert list(check_win(board, "X").winning_cells) == positions([(0, 0), (0, 1), (0, 2)])


def test_no_win() -> None:
    board = make_symbol_board(["XOX", "XOO", "OXX"])
    assert not check_win(board, "X").is_win
    assert not check_win(board, "O").is_win
    assert check_win(board, "X").winning_cells == ()


def test_partial_diagonals_do_not_count() -> None:
    board = make_symbol_board(["....", "X...", ".X..", "..X."])
    assert not check_diagonal_win(board, "X").is_win
    assert all(len(line) == 4 for line in diagonal_lines(board))
    assert len(list(diagonal_lines(board))) == 2


def test_empty_symbol_is_matched_literally() -> None:
    board = make_symbol_board(["...", "...", "..."])
    assert check_win(board, "").is_win
    assert not check_win(board, "X").is_win
