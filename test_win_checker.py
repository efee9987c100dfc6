import pytest

from tictactoe.board import LINES, Mark, new_board, parse_board
from tictactoe.errors import InvalidBoard
from tictactoe.game_state import GameState
from tictactoe.win_checker import Draw, InProgress, Win, WinChecker, evaluate, is_terminal


# Helpers

def board_with_line(line, mark):
    board = new_board()
    for index in line:
        board[index] = mark
    return board


@pytest.mark.parametrize("mark", [Mark.X, Mark.O])
@pytest.mark.parametrize("line", LINES)
def test_every_line_is_a_win(line, mark):
    assert evaluate(board_with_line(line, mark)) == Win(mark, line)


def test_first_line_in_order_is_reported():
    # Row 0 and column 0 both complete
    board = parse_board("XXX" "X.." "X..")
    assert evaluate(board) == Win(Mark.X, (0, 1, 2))


def test_diagonal_win_among_partial_patterns():
    board = parse_board("XOX" "OXO" "..X")
    assert evaluate(board) == Win(Mark.X, (0, 4, 8))


def test_full_board_without_line_is_draw():
    board = parse_board("XOX" "XOO" "OXX")
    assert evaluate(board) == Draw()


def test_full_board_with_line_is_win_not_draw():
    board = parse_board("XXX" "OOX" "XOO")
    assert evaluate(board) == Win(Mark.X, (0, 1, 2))


@pytest.mark.parametrize("text", [
    ".........",
    "X........",
    "XO.......",
    "XOX" "OXO" "O.."  # one cell short of full, no line
])
def test_unfinished_boards_are_in_progress(text):
    assert evaluate(parse_board(text)) == InProgress()


def test_evaluate_does_not_modify_board():
    board = parse_board("XOX" "OXO" "..X")
    before = list(board)
    evaluate(board)
    assert board == before


def test_is_terminal():
    assert not is_terminal(InProgress())
    assert is_terminal(Draw())
    assert is_terminal(Win(Mark.O, (2, 4, 6)))


@pytest.mark.parametrize("board", [
    [Mark.EMPTY] * 8,
    [Mark.EMPTY] * 10,
    ["X"] + [Mark.EMPTY] * 8,
    [None] * 9,
])
def test_malformed_boards_raise_invalid_board(board):
    with pytest.raises(InvalidBoard):
        evaluate(board)


def test_invalid_board_is_a_value_error():
    with pytest.raises(ValueError):
        evaluate([])


def test_parse_board_accepts_drawn_grid():
    board = parse_board("X|O|.\n.|X|.\n.|.|O")
    assert board[0] is Mark.X and board[1] is Mark.O and board[4] is Mark.X
    assert board[8] is Mark.O
    assert board.count(Mark.EMPTY) == 5


def test_parse_board_rejects_unknown_characters():
    with pytest.raises(InvalidBoard):
        parse_board("XO?......")


def test_win_checker_helpers():
    checker = WinChecker()
    won = parse_board("O.." "XO." "X.O")
    drawn = parse_board("XOX" "XOO" "OXX")

    assert checker.check_winner(won) is Mark.O
    assert checker.get_winning_line(won) == (0, 4, 8)
    assert not checker.check_draw(won)

    assert checker.check_winner(drawn) is None
    assert checker.get_winning_line(drawn) is None
    assert checker.check_draw(drawn)


def test_update_game_state_records_outcome():
    state = GameState(board=parse_board("OOO" "XX." "X.."))
    WinChecker().update_game_state(state)

    assert state.is_game_over
    assert state.winner is Mark.O
    assert state.winning_line == (0, 1, 2)
    assert not state.is_draw
