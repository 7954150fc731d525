import copy
import random

import pytest

from tictactoe.ai import MoveSelector
from tictactoe.game_logic import X, O, EMPTY, WIN, DRAW, ONGOING, new_board
from tictactoe.game_session import GameSession, TWO_PLAYER, VS_AI


def play(session, moves):
    return [session.apply_move(i) for i in moves]


def snapshot(session):
    return (list(session.board), session.turn, session.game_over,
            session.outcome, dict(session.score), session.version)


class FixedSelector:
    """selector stub returning a preset index"""
    def __init__(self, index):
        self.index = index
        self.calls = 0

    def select(self, board):
        self.calls += 1
        return self.index


def test_initial_state():
    s = GameSession()
    assert s.board == new_board()
    assert s.turn == X
    assert s.mode == TWO_PLAYER
    assert not s.game_over
    assert s.outcome.status == ONGOING
    assert s.score == {X: 0, O: 0, 'draws': 0}
    assert s.status_text() == "Next: X"
    assert s.outcome_text() == ""


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        GameSession("online")
    with pytest.raises(ValueError):
        GameSession().set_mode("online")


def test_turns_alternate_from_x():
    s = GameSession()
    assert s.apply_move(4) == "continue"
    assert s.board[4] == X and s.turn == O
    assert s.apply_move(0) == "continue"
    assert s.board[0] == O and s.turn == X


def test_row_win_scenario():
    s = GameSession()
    assert play(s, [0, 4, 1, 5, 2]) == ["continue"] * 4 + [WIN]
    assert s.game_over
    assert s.winner == X
    assert s.winning_line == (0, 1, 2)
    assert s.score == {X: 1, O: 0, 'draws': 0}
    assert s.status_text() == "Winner: X"
    assert s.outcome_text() == "X wins!"


def test_draw_scenario():
    s = GameSession()
    results = play(s, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert results[-1] == DRAW
    assert s.board == [X, O, X, X, O, O, O, X, X]
    assert s.outcome.status == DRAW
    assert s.score == {X: 0, O: 0, 'draws': 1}
    assert s.status_text() == "Draw!"
    assert s.outcome_text() == "Draw!"


def test_same_cell_twice_is_noop():
    s = GameSession()
    s.apply_move(0)
    before = snapshot(s)
    assert s.apply_move(0) == "invalid"
    assert snapshot(s) == before
    assert s.board[0] == X


@pytest.mark.parametrize("index", [-1, 9, 100, None, "3", 1.0, True, False])
def test_out_of_range_index_is_noop(index):
    s = GameSession()
    s.apply_move(4)
    before = snapshot(s)
    assert s.apply_move(index) == "invalid"
    assert snapshot(s) == before


def test_moves_after_terminal_are_noops():
    s = GameSession()
    play(s, [0, 4, 1, 5, 2])
    before = snapshot(s)
    assert s.apply_move(8) == "invalid"
    assert snapshot(s) == before


def test_win_is_counted_once():
    s = GameSession()
    play(s, [6, 0, 7, 1, 3, 2])
    assert s.winner == O
    assert s.score == {X: 0, O: 1, 'draws': 0}
    # re-evaluating a finished game must not score again
    assert s.refresh() == WIN
    assert s.refresh() == WIN
    s.apply_move(8)
    assert s.score == {X: 0, O: 1, 'draws': 0}


def test_refresh_mid_game_changes_nothing():
    s = GameSession()
    play(s, [0, 4])
    before = snapshot(s)
    assert s.refresh() == "continue"
    assert snapshot(s) == before


def test_soft_reset_keeps_score():
    s = GameSession()
    play(s, [0, 4, 1, 5, 2])
    s.reset()
    assert s.board == new_board()
    assert s.turn == X
    assert not s.game_over
    assert s.outcome.status == ONGOING
    assert s.score[X] == 1


def test_hard_reset_zeroes_score():
    s = GameSession()
    play(s, [0, 4, 1, 5, 2])
    s.reset(hard=True)
    assert s.board == new_board()
    assert s.score == {X: 0, O: 0, 'draws': 0}


def test_scores_accumulate_across_rounds():
    s = GameSession()
    play(s, [0, 4, 1, 5, 2])
    s.reset()
    play(s, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    s.reset()
    play(s, [6, 0, 7, 1, 3, 2])
    assert s.score == {X: 1, O: 1, 'draws': 1}


@pytest.mark.parametrize("moves", [[], [4], [0, 4, 1, 5, 2]])
@pytest.mark.parametrize("mode", [TWO_PLAYER, VS_AI])
def test_set_mode_always_hard_resets(moves, mode):
    s = GameSession()
    play(s, moves)
    s.set_mode(mode)
    assert s.mode == mode
    assert s.board == new_board()
    assert s.turn == X
    assert not s.game_over
    assert s.score == {X: 0, O: 0, 'draws': 0}


def test_every_mutation_bumps_version():
    s = GameSession()
    v = s.version
    s.apply_move(0)
    assert s.version == v + 1
    s.apply_move(0)                 # invalid
    assert s.version == v + 1
    s.reset()
    assert s.version == v + 2
    s.set_mode(VS_AI)
    assert s.version == v + 3


def test_ai_pending_only_on_o_turn_in_ai_mode():
    s = GameSession(VS_AI)
    assert not s.ai_pending
    s.apply_move(4)
    assert s.ai_pending
    pvp = GameSession(TWO_PLAYER)
    pvp.apply_move(4)
    assert not pvp.ai_pending


def test_ai_move_lands_on_previously_empty_cell():
    s = GameSession(VS_AI)
    selector = MoveSelector(random.Random(5))
    s.apply_move(4)
    before = list(s.board)
    assert s.play_ai_move(s.version, selector) == "continue"
    placed = [i for i in range(9) if s.board[i] != before[i]]
    assert len(placed) == 1
    assert before[placed[0]] == EMPTY
    assert s.board[placed[0]] == O
    assert s.turn == X


def test_stale_ai_move_after_reset_is_dropped():
    s = GameSession(VS_AI)
    s.apply_move(4)
    scheduled = s.version
    s.reset()
    selector = FixedSelector(0)
    assert s.play_ai_move(scheduled, selector) == "stale"
    assert s.board == new_board()
    assert selector.calls == 0


def test_stale_ai_move_after_mode_change_is_dropped():
    s = GameSession(VS_AI)
    s.apply_move(4)
    scheduled = s.version
    s.set_mode(VS_AI)
    s.apply_move(0)                 # new round, O to move again
    selector = FixedSelector(8)
    assert s.play_ai_move(scheduled, selector) == "stale"
    assert s.board[8] == EMPTY
    # the current version still plays
    assert s.play_ai_move(s.version, selector) == "continue"
    assert s.board[8] == O


def test_ai_move_not_played_in_two_player_mode():
    s = GameSession(TWO_PLAYER)
    s.apply_move(4)
    assert s.play_ai_move(s.version, FixedSelector(0)) == "stale"
    assert s.board[0] == EMPTY


def test_ai_without_a_move_changes_nothing():
    s = GameSession(VS_AI)
    s.apply_move(4)
    before = snapshot(s)
    assert s.play_ai_move(s.version, FixedSelector(None)) == "invalid"
    assert snapshot(s) == before


def test_full_random_games_keep_invariants():
    rng = random.Random(2024)
    selector = MoveSelector(rng)
    for _i in range(200):
        s = GameSession(VS_AI)
        while not s.game_over:
            if s.ai_pending:
                s.play_ai_move(s.version, selector)
            else:
                assert s.apply_move(selector.select(s.board)) != "invalid"
        xs, os_ = s.board.count(X), s.board.count(O)
        assert xs - os_ in (0, 1)
        assert sum(s.score.values()) == 1
        frozen = copy.deepcopy(snapshot(s))
        s.refresh()
        assert snapshot(s) == frozen
