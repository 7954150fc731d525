import random

from .game_logic import empty_cells


class MoveSelector:
    """
    the computer opponent: picks any empty cell, uniformly at random
    """
    def __init__(self, rng=None):
        # only shared state is the random source
        self.rng = rng if rng is not None else random.Random()

    def select(self, board):
        """
        returns: an empty cell index, or None when the board is full
        """
        available = empty_cells(board)
        if not available:
            return None
        return self.rng.choice(available)
