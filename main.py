import argparse
import sys

from PySide6.QtWidgets import QApplication

from tictactoe.config import GameConfig
from tictactoe.game_session import MODES
from tictactoe.view_state import THEMES
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser():
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=GameConfig.DEFAULT_MODE,
        help="pvp: two players on one screen, ai: play X against the computer"
    )
    parser.add_argument(
        "--theme",
        choices=THEMES,
        default=GameConfig.DEFAULT_THEME,
        help="Initial color theme"
    )
    parser.add_argument(
        "--ai-delay",
        type=int,
        default=GameConfig.AI_MOVE_DELAY_MS,
        metavar="MS",
        help="Pause before the computer moves, in milliseconds"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random moves"
    )
    return parser


def parse_config(argv=None):
    """
    Parse arguments into a GameConfig.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.ai_delay < 0:
        parser.error("--ai-delay must be >= 0")
    return GameConfig(mode=args.mode, theme=args.theme,
                      ai_delay_ms=args.ai_delay, seed=args.seed)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    config = parse_config(argv)
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    window = TicTacToeWindow(config)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
