import random

from ..game_logic import X, DRAW
from ..game_session import GameSession, TWO_PLAYER, VS_AI
from ..view_state import ViewState
from ..config import GameConfig
from ..ai import MoveSelector
from ..ui.board_widget import BoardWidget
from ..ui.theme import apply_palette, colors_for, ACCENT_COLOR

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

MODE_LABELS = {TWO_PLAYER: "2 Players", VS_AI: "AI Opponent"}


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, config=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.config = config or GameConfig()
        self.session = GameSession(self.config.mode)
        self.view_state = ViewState(self.config.theme)
        self.selector = MoveSelector(random.Random(self.config.seed))
        self.board_widget = BoardWidget(self.session, self.view_state, parent=self)

        self._setup_ui()
        self._apply_theme()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(self.config.WINDOW_TITLE)
        self.resize(self.config.WINDOW_WIDTH, self.config.WINDOW_HEIGHT)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title + theme toggle
        self._create_mode_controls()       # mode buttons + score
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.mode_controls_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game/view menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        round_action = QAction("New Round", self)
        round_action.triggered.connect(lambda: self._on_reset_clicked(False))
        reset_action = QAction("Reset Game", self)
        reset_action.triggered.connect(lambda: self._on_reset_clicked(True))
        pvp_action = QAction("Two Players", self)
        pvp_action.triggered.connect(lambda: self._on_mode_selected(TWO_PLAYER))
        ai_action = QAction("Play Against AI", self)
        ai_action.triggered.connect(lambda: self._on_mode_selected(VS_AI))
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (round_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator()
        for act in (pvp_action, ai_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        view_menu = QMenu("View", self)
        theme_action = QAction("Toggle Theme", self)
        theme_action.triggered.connect(self._on_theme_toggled)
        view_menu.addAction(theme_action)
        menu_bar.addMenu(game_menu); menu_bar.addMenu(view_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        '''title, subtitle and theme button'''
        self.header_widget = QWidget()
        layout = QVBoxLayout(self.header_widget)
        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self._on_theme_toggled)
        layout.addWidget(self.theme_button, alignment=Qt.AlignRight)
        self.title_label = QLabel(self.config.WINDOW_TITLE)
        f = QFont(); f.setPointSize(24); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label = QLabel(self.config.WINDOW_SUBTITLE)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        self.subtitle_label.setWordWrap(True)
        layout.addWidget(self.title_label); layout.addWidget(self.subtitle_label)

    def _create_mode_controls(self):
        '''mode selector + score row'''
        self.mode_controls_widget = QWidget()
        layout = QVBoxLayout(self.mode_controls_widget)
        mode_layout = QHBoxLayout()
        self.mode_buttons = {}
        mode_layout.addStretch()
        for mode, label in MODE_LABELS.items():
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.setAccessibleName(label)
            btn.clicked.connect(lambda _checked=False, m=mode: self._on_mode_selected(m))
            self.mode_buttons[mode] = btn
            mode_layout.addWidget(btn)
        mode_layout.addStretch()
        layout.addLayout(mode_layout)
        self.score_label = QLabel("")
        self.score_label.setAlignment(Qt.AlignCenter)
        f = QFont(); f.setPointSize(12); self.score_label.setFont(f)
        layout.addWidget(self.score_label)
        # outcome line under the score, empty mid-game
        self.outcome_label = QLabel("")
        self.outcome_label.setAlignment(Qt.AlignCenter)
        f = QFont(); f.setPointSize(12); f.setBold(True); self.outcome_label.setFont(f)
        layout.addWidget(self.outcome_label)

    def _create_bottom_controls(self):
        # status label + new round/reset buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); f.setBold(True); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.new_round_button = QPushButton("New Round")
        self.new_round_button.clicked.connect(lambda: self._on_reset_clicked(False))
        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(lambda: self._on_reset_clicked(True))
        for w in (self.message_label, None, self.new_round_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _refresh(self):
        '''push session + view state into the widgets'''
        s = self.session
        for mode, btn in self.mode_buttons.items():
            btn.setChecked(mode == s.mode)
        self.score_label.setText(
            f"X: {s.score['X']}  |  O: {s.score['O']}  Draws: {s.score['draws']}"
        )
        self._update_message(s.status_text())
        self.outcome_label.setText(s.outcome_text())
        self.outcome_label.setStyleSheet(self.message_label.styleSheet())
        # new round only offered mid-game
        self.new_round_button.setVisible(not s.game_over)
        # no human input while terminal or while the computer is thinking
        self.board_widget.set_accept_clicks(not s.game_over and not s.ai_pending)
        self.board_widget.refresh()

    def _update_message(self, text):
        # status color follows the outcome
        s = self.session
        colors = colors_for(self.view_state.theme)
        if s.game_over and s.outcome.status == DRAW:
            color = ACCENT_COLOR
        elif s.game_over:
            color = colors['mark_x'] if s.winner == X else colors['mark_o']
        else:
            color = ACCENT_COLOR
        self.message_label.setStyleSheet(f"color: {color.name()};")
        self.message_label.setText(text)

    def _apply_theme(self):
        app = QApplication.instance()
        if app is not None:
            apply_palette(app, self.view_state.theme)
        self.theme_button.setText(self.view_state.theme_label)
        self.theme_button.setAccessibleName(
            f"Switch to {self.view_state.theme_label.lower()} mode"
        )

    def _schedule_ai_move(self):
        # deferred move is keyed to the current version
        if not self.session.ai_pending:
            return
        version = self.session.version
        print(f"ai move scheduled (version {version})")
        QTimer.singleShot(self.config.ai_delay_ms, self,
                          lambda: self._on_ai_timer(version))

    def _on_ai_timer(self, version):
        res = self.session.play_ai_move(version, self.selector)
        if res == "stale":
            print(f"discarding stale ai move (version {version})")
            return
        self._refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # ignore clicks after game over or on the computer's turn
        if self.session.game_over or self.session.ai_pending:
            return
        res = self.session.apply_move(index)
        if res == "invalid":
            return
        self._refresh()
        if res == "continue":
            self._schedule_ai_move()

    @Slot(str)
    def _on_mode_selected(self, mode):
        # mode change is a hard reset: score goes too
        self.session.set_mode(mode)
        print(f"mode set to {mode}")
        self._refresh()

    @Slot(bool)
    def _on_reset_clicked(self, hard):
        self.session.reset(hard=hard)
        self._refresh()

    @Slot()
    def _on_theme_toggled(self):
        theme = self.view_state.toggle_theme()
        print(f"theme set to {theme}")
        self._apply_theme()
        self._refresh()
