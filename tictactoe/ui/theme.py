from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from ..view_state import DARK

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

ACCENT_COLOR = QColor("#FFC107")   # status / draw text

DARK_COLORS = {
    'window': QColor(53, 53, 53),
    'window_text': QColor(Qt.white),
    'base': QColor(35, 35, 35),
    'alt_base': QColor(53, 53, 53),
    'text': QColor(Qt.white),
    'button': QColor(66, 66, 66),
    'button_text': QColor(Qt.white),
    'highlight': QColor(42, 130, 218),
    'highlighted_text': QColor(Qt.white),
    'placeholder': QColor(160, 160, 160),
    'disabled': QColor(127, 127, 127),
    # board painting
    'board_bg': QColor("#333"),
    'grid': QColor("#555"),
    'mark_x': QColor("#8acaff"),
    'mark_o': QColor("#ff8a8a"),
    'win_line': QColor("#FFC107"),
}

LIGHT_COLORS = {
    'window': QColor("#f5f5f5"),
    'window_text': QColor("#212121"),
    'base': QColor(Qt.white),
    'alt_base': QColor("#eeeeee"),
    'text': QColor("#212121"),
    'button': QColor("#e0e0e0"),
    'button_text': QColor("#1976D2"),
    'highlight': QColor("#1976D2"),
    'highlighted_text': QColor(Qt.white),
    'placeholder': QColor(160, 160, 160),
    'disabled': QColor(170, 170, 170),
    'board_bg': QColor(Qt.white),
    'grid': QColor("#e0e0e0"),
    'mark_x': QColor("#1976D2"),
    'mark_o': QColor("#424242"),
    'win_line': QColor("#FFC107"),
}


def colors_for(theme):
    return DARK_COLORS if theme == DARK else LIGHT_COLORS

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def build_palette(theme):
    """
    QPalette for the given theme name
    """
    c = colors_for(theme)
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, c['window'])
    palette.setColor(QPalette.WindowText, c['window_text'])
    palette.setColor(QPalette.Base, c['base'])
    palette.setColor(QPalette.AlternateBase, c['alt_base'])
    palette.setColor(QPalette.ToolTipBase, QColor(Qt.white))
    palette.setColor(QPalette.ToolTipText, QColor(Qt.black))
    palette.setColor(QPalette.Text, c['text'])
    palette.setColor(QPalette.Button, c['button'])
    palette.setColor(QPalette.ButtonText, c['button_text'])
    palette.setColor(QPalette.BrightText, QColor(Qt.red))
    palette.setColor(QPalette.Link, c['highlight'])
    palette.setColor(QPalette.Highlight, c['highlight'])
    palette.setColor(QPalette.HighlightedText, c['highlighted_text'])
    palette.setColor(QPalette.PlaceholderText, c['placeholder'])
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, c['disabled'])
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, c['disabled'])
    palette.setColor(QPalette.Disabled, QPalette.WindowText, c['disabled'])
    return palette


def apply_palette(app: QApplication, theme):
    """
    Apply the theme palette to the whole application.
    """
    app.setPalette(build_palette(theme))
