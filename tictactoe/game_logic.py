X = 'X'
O = 'O'
EMPTY = ''

BOARD_CELLS = 9

# check order matters: the first complete line wins
LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),   # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),   # cols
    (0, 4, 8), (2, 4, 6),              # diags
)

ONGOING = "ongoing"
WIN = "win"
DRAW = "draw"


class Outcome:
    """
    result of evaluating a board: ongoing, win (mark + line) or draw
    """
    __slots__ = ("status", "winner", "line")

    def __init__(self, status, winner=None, line=None):
        self.status = status
        self.winner = winner      # 'X', 'O', or None
        self.line = line          # winning index triple or None

    @property
    def is_terminal(self):
        return self.status != ONGOING

    def __eq__(self, other):
        if not isinstance(other, Outcome):
            return NotImplemented
        return (self.status, self.winner, self.line) == \
               (other.status, other.winner, other.line)

    def __repr__(self):
        if self.status == WIN:
            return f"Outcome(win, {self.winner}, {list(self.line)})"
        return f"Outcome({self.status})"


def new_board():
    """
    fresh board, 9 empty cells
    """
    return [EMPTY] * BOARD_CELLS


def other_mark(mark):
    return O if mark == X else X


def empty_cells(board):
    """
    indices of empty cells, in board order
    """
    return [i for i, cell in enumerate(board) if cell == EMPTY]


def evaluate(board):
    """
    classify a board snapshot

    scans LINES in order and reports the first line holding three equal
    marks. a board with two complete lines (not reachable by alternating
    play) resolves to whichever comes first in LINES.
    returns: Outcome (win / draw / ongoing)
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for a, b, c in LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return Outcome(WIN, board[a], (a, b, c))
    if all(cell != EMPTY for cell in board):
        return Outcome(DRAW)
    return Outcome(ONGOING)
