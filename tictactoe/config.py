"""
Default settings for the game window.
main.py lets the command line override the ones that matter to players.
"""

from .game_session import TWO_PLAYER
from .view_state import LIGHT


class GameConfig:
    """
    startup settings; class attributes are the defaults
    """

    # ==================== GAME ====================
    DEFAULT_MODE = TWO_PLAYER
    # pause before the computer answers, purely cosmetic
    AI_MOVE_DELAY_MS = 500
    # None -> unseeded random source
    AI_SEED = None

    # ==================== WINDOW ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_SUBTITLE = "A minimal tic-tac-toe game. Play with a friend or AI."
    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 620
    DEFAULT_THEME = LIGHT

    def __init__(self, mode=None, theme=None, ai_delay_ms=None, seed=None):
        self.mode = mode or self.DEFAULT_MODE
        self.theme = theme or self.DEFAULT_THEME
        self.ai_delay_ms = self.AI_MOVE_DELAY_MS if ai_delay_ms is None else ai_delay_ms
        if self.ai_delay_ms < 0:
            raise ValueError(f"ai delay must be >= 0, got {self.ai_delay_ms}")
        self.seed = self.AI_SEED if seed is None else seed
