from .game_logic import (
    X, O, EMPTY, BOARD_CELLS, WIN, DRAW, ONGOING,
    Outcome, new_board, other_mark, evaluate,
)

TWO_PLAYER = "pvp"
VS_AI = "ai"
MODES = (TWO_PLAYER, VS_AI)

AI_MARK = O   # in vs-ai mode the computer always moves second


class GameSession:
    """
    mutable turn-by-turn state for one window: board, turn, mode, score

    every successful mutation bumps `version`; a deferred AI move carries
    the version it was scheduled at and is dropped if anything changed.
    """
    def __init__(self, mode=TWO_PLAYER):
        """
        init empty board and zeroed score
        """
        if mode not in MODES:
            raise ValueError(f"unknown mode: {mode!r}")
        self.mode = mode
        self.score = {X: 0, O: 0, 'draws': 0}
        self.version = 0
        self._clear_round()

    def _clear_round(self):
        # board, turn and result only; score untouched
        self.board = new_board()
        self.turn = X
        self.game_over = False
        self.outcome = Outcome(ONGOING)

    @property
    def winner(self):
        return self.outcome.winner

    @property
    def winning_line(self):
        return self.outcome.line

    @property
    def ai_pending(self):
        """
        true when the computer owes a move
        """
        return self.mode == VS_AI and not self.game_over and self.turn == AI_MARK

    def is_cell_empty(self, index):
        """
        true if index valid and cell blank
        """
        return 0 <= index < BOARD_CELLS and self.board[index] == EMPTY

    def apply_move(self, index):
        """
        place the current mark at index, flip turn, check result
        returns: 'win', 'draw', 'continue', or 'invalid' (nothing changed)
        """
        if self.game_over or type(index) is not int \
           or not self.is_cell_empty(index):
            return "invalid"
        self.board[index] = self.turn
        self.turn = other_mark(self.turn)
        self.version += 1
        return self.refresh()

    def refresh(self):
        """
        re-evaluate the board; scores only on the ongoing -> terminal step
        """
        if self.game_over:
            return self.outcome.status
        outcome = evaluate(self.board)
        if not outcome.is_terminal:
            return "continue"
        self.outcome = outcome
        self.game_over = True
        if outcome.status == WIN:
            self.score[outcome.winner] += 1
            return WIN
        self.score['draws'] += 1
        return DRAW

    def play_ai_move(self, version, selector):
        """
        run a deferred computer move scheduled at `version`
        returns: apply_move result, 'stale' if the session moved on,
        or 'invalid' if the selector had nothing to play
        """
        if version != self.version or not self.ai_pending:
            return "stale"
        index = selector.select(self.board)
        if index is None:
            return "invalid"
        return self.apply_move(index)

    def reset(self, hard=False):
        """
        clear the round; hard also zeroes the score
        """
        self._clear_round()
        if hard:
            self.score = {X: 0, O: 0, 'draws': 0}
        self.version += 1

    def set_mode(self, mode):
        """
        switch mode; always a hard reset, so the score is lost on purpose
        """
        if mode not in MODES:
            raise ValueError(f"unknown mode: {mode!r}")
        self.reset(hard=True)
        self.mode = mode

    def status_text(self):
        if not self.game_over:
            return f"Next: {self.turn}"
        if self.outcome.status == DRAW:
            return "Draw!"
        return f"Winner: {self.winner}"

    def outcome_text(self):
        # shown under the score; blank while the round is open
        if not self.game_over:
            return ""
        if self.outcome.status == DRAW:
            return "Draw!"
        return f"{self.winner} wins!"
