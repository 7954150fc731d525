import pytest

from tictactoe.game_logic import (
    X, O, EMPTY, LINES, WIN, DRAW, ONGOING,
    Outcome, evaluate, empty_cells, new_board, other_mark,
)

_ = EMPTY


def test_empty_board_is_ongoing():
    assert evaluate(new_board()) == Outcome(ONGOING)


@pytest.mark.parametrize("line", LINES)
def test_every_line_wins(line):
    for mark in (X, O):
        board = new_board()
        for i in line:
            board[i] = mark
        outcome = evaluate(board)
        assert outcome.status == WIN
        assert outcome.winner == mark
        assert outcome.line == line


def test_row_win_mid_game():
    board = [X, X, X,
             O, O, _,
             _, _, _]
    assert evaluate(board) == Outcome(WIN, X, (0, 1, 2))


def test_diagonal_win_for_o():
    board = [O, X, _,
             X, O, _,
             _, X, O]
    assert evaluate(board) == Outcome(WIN, O, (0, 4, 8))


def test_full_board_without_line_is_draw():
    board = [X, O, X,
             O, X, O,
             O, X, O]
    outcome = evaluate(board)
    assert outcome.status == DRAW
    assert outcome.winner is None and outcome.line is None


def test_full_board_with_line_is_win_not_draw():
    board = [X, X, X,
             O, O, X,
             X, O, O]
    assert evaluate(board).status == WIN


def test_partial_board_without_line_is_ongoing():
    board = [X, O, X,
             _, O, _,
             _, X, _]
    assert evaluate(board) == Outcome(ONGOING)


def test_two_lines_resolve_to_first_in_check_order():
    # not reachable by alternating play; first line in LINES wins
    board = [X, X, X,
             O, O, O,
             _, _, _]
    assert evaluate(board) == Outcome(WIN, X, (0, 1, 2))
    board = [O, X, _,
             O, X, _,
             O, X, _]
    assert evaluate(board) == Outcome(WIN, O, (0, 3, 6))


def test_evaluate_does_not_mutate_board():
    board = [X, O, _, _, X, _, _, _, O]
    before = list(board)
    evaluate(board)
    assert board == before


def test_malformed_board_raises():
    with pytest.raises(ValueError):
        evaluate([X, O, X])


def test_empty_cells_in_order():
    board = [X, _, O, _, _, X, O, _, X]
    assert empty_cells(board) == [1, 3, 4, 7]
    assert empty_cells(new_board()) == list(range(9))


def test_other_mark():
    assert other_mark(X) == O
    assert other_mark(O) == X
