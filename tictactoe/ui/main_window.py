import logging

from ..config import GameConfig
from ..session import GameSession
from ..ui.auth_dialog import AuthDialog, SIGN_IN, SIGN_UP
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QStackedWidget, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

WINDOW_STYLES = {
    "dark": """
        QMainWindow { background-color: #111827; }
        QLabel { color: #e5e7eb; }
        QPushButton { background-color: #2563eb; color: white;
                      border-radius: 8px; padding: 8px 16px; }
        QPushButton:hover { background-color: #1d4ed8; }
        QPushButton:disabled { background-color: #4b5563; }
    """,
    "light": """
        QMainWindow { background-color: #eef2ff; }
        QLabel { color: #374151; }
        QPushButton { background-color: #4f46e5; color: white;
                      border-radius: 8px; padding: 8px 16px; }
        QPushButton:hover { background-color: #4338ca; }
        QPushButton:disabled { background-color: #9ca3af; }
    """,
}
STATUS_COLORS = {"dark": ("#d1d5db", "#34d399"), "light": ("#6b7280", "#10b981")}
THEME_ICONS = {"dark": "\U0001F319", "light": "☀️"}


class TicTacToeWindow(QMainWindow):
    """
    main window: auth header, game panel when signed in, prompt when not
    """
    def __init__(self, auth_service, config=None, session=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.config = config or GameConfig()
        self.theme = self.config.theme
        self.auth_service = auth_service
        self.session = session or GameSession(delay_ms=self.config.opponent_delay_ms, parent=self)
        self.board_widget = BoardWidget(self.session.state, theme=self.theme, parent=self)

        self._setup_ui()
        self.session.board_changed.connect(self._refresh_board)
        self.session.status_changed.connect(self._update_status)
        self.auth_service.auth_changed.connect(self._on_auth_changed)
        self._on_auth_changed(self.auth_service.is_signed_in)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe vs Computer")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_header()              # theme toggle + auth buttons
        self.main_layout.addWidget(self.header_widget)

        self.title_label = QLabel("Tic Tac Toe vs Computer")
        f = QFont(); f.setPointSize(26); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        # page 0: signed out prompt, page 1: game
        self.pages = QStackedWidget()
        self.pages.addWidget(self._create_signed_out_panel())
        self.pages.addWidget(self._create_game_panel())
        self.main_layout.addWidget(self.pages, 1)
        self._apply_theme()

    def _create_header(self):
        '''theme toggle left, auth controls right'''
        self.header_widget = QWidget()
        hl = QHBoxLayout(self.header_widget)
        self.theme_button = QPushButton()
        self.theme_button.clicked.connect(self.toggle_theme)
        self.sign_in_button = QPushButton("Sign In")
        self.sign_in_button.clicked.connect(lambda: self._open_auth_dialog(SIGN_IN))
        self.sign_up_button = QPushButton("Sign Up")
        self.sign_up_button.clicked.connect(lambda: self._open_auth_dialog(SIGN_UP))
        self.user_label = QLabel("")
        self.sign_out_button = QPushButton("Sign Out")
        self.sign_out_button.clicked.connect(self.auth_service.sign_out)
        for w in (self.theme_button, None, self.user_label, self.sign_in_button,
                  self.sign_up_button, self.sign_out_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _create_signed_out_panel(self):
        panel = QWidget()
        vl = QVBoxLayout(panel)
        vl.addStretch(1)
        prompt = QLabel("Please log in to play Tic Tac Toe!")
        f = QFont(); f.setPointSize(16); prompt.setFont(f)
        prompt.setAlignment(Qt.AlignCenter)
        vl.addWidget(prompt)
        login_button = QPushButton("Sign In")
        login_button.clicked.connect(lambda: self._open_auth_dialog(SIGN_IN))
        vl.addWidget(login_button, alignment=Qt.AlignCenter)
        vl.addStretch(1)
        return panel

    def _create_game_panel(self):
        # status + board + reset
        panel = QWidget()
        vl = QVBoxLayout(panel)
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(16); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.status_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        vl.addWidget(self.status_label)
        vl.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self.session.handle_click)
        self.reset_button = QPushButton("Reset Game")
        self.reset_button.clicked.connect(self.session.reset)
        vl.addWidget(self.reset_button)
        return panel

    @Slot()
    def toggle_theme(self):
        self.theme = "light" if self.theme == "dark" else "dark"
        logger.debug("theme -> %s", self.theme)
        self._apply_theme()

    def _apply_theme(self):
        self.setStyleSheet(WINDOW_STYLES[self.theme])
        self.theme_button.setText(THEME_ICONS[self.theme])
        self.board_widget.set_theme(self.theme)
        self._update_status(self.session.status_text())

    def _open_auth_dialog(self, mode):
        dialog = AuthDialog(self.auth_service, mode=mode, parent=self)
        dialog.exec()
        dialog.deleteLater()

    @Slot(bool)
    def _on_auth_changed(self, signed_in):
        # gate the game on auth state
        self.session.set_enabled(signed_in)
        self.sign_in_button.setVisible(not signed_in)
        self.sign_up_button.setVisible(not signed_in)
        self.sign_out_button.setVisible(signed_in)
        self.user_label.setVisible(signed_in)
        self.user_label.setText(self.auth_service.current_user or "")
        self.pages.setCurrentIndex(1 if signed_in else 0)
        self._refresh_board()
        self._update_status(self.session.status_text())

    @Slot()
    def _refresh_board(self):
        # no clicks while the computer thinks or after game over
        self.board_widget.set_accept_clicks(self.session.accepts_clicks())
        self.board_widget.update()

    @Slot(str)
    def _update_status(self, text):
        # set status text + colour, highlighted once someone wins
        normal, win = STATUS_COLORS[self.theme]
        color = win if self.session.state.winner else normal
        self.status_label.setStyleSheet(f"color: {color};")
        self.status_label.setText(text)

    def closeEvent(self, event):
        # no stray computer move after close
        self.session.reset()
        event.accept()
