import logging
import random
import sys
from logging.handlers import RotatingFileHandler

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe.auth import AuthService
from tictactoe.config import ConfigError, GameConfig
from tictactoe.opponent import OpponentPolicy
from tictactoe.session import COMPUTER, GameSession
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

PALETTES = {
    "dark": {
        QPalette.Window: QColor(17, 24, 39),
        QPalette.WindowText: Qt.white,
        QPalette.Base: QColor(31, 41, 55),
        QPalette.AlternateBase: QColor(17, 24, 39),
        QPalette.Text: Qt.white,
        QPalette.Button: QColor(37, 99, 235),
        QPalette.ButtonText: Qt.white,
        QPalette.Highlight: QColor(59, 130, 246),
        QPalette.HighlightedText: Qt.white,
        QPalette.PlaceholderText: QColor(156, 163, 175),
    },
    "light": {
        QPalette.Window: QColor(238, 242, 255),
        QPalette.WindowText: QColor(31, 41, 55),
        QPalette.Base: Qt.white,
        QPalette.AlternateBase: QColor(243, 244, 246),
        QPalette.Text: QColor(31, 41, 55),
        QPalette.Button: QColor(79, 70, 229),
        QPalette.ButtonText: Qt.white,
        QPalette.Highlight: QColor(99, 102, 241),
        QPalette.HighlightedText: Qt.white,
        QPalette.PlaceholderText: QColor(107, 114, 128),
    },
}

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_MAX_BYTES = 200_000
LOG_BACKUPS = 3

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_palette(app: QApplication, theme: str):
    """
    Apply the base palette for the configured theme.
    """
    palette = QPalette()
    for role, color in PALETTES[theme].items():
        palette.setColor(role, color)
    # Disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# LOGGING SETUP
# -----------------------------------------------------------------------------

def setup_logging(config: GameConfig) -> logging.Logger:
    """
    Console logging for the tictactoe package, plus a rotating file
    when a log file is configured.
    """
    logger = logging.getLogger("tictactoe")
    logger.setLevel(config.log_level_value)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    fmt = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler()
    console.setFormatter(fmt)
    logger.addHandler(console)
    if config.log_file:
        handler = RotatingFileHandler(config.log_file, maxBytes=LOG_MAX_BYTES,
                                      backupCount=LOG_BACKUPS, encoding="utf-8", delay=True)
        handler.setFormatter(fmt)
        logger.addHandler(handler)
    logger.propagate = False
    return logger

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    try:
        config = GameConfig.from_env()
    except ConfigError as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2
    logger = setup_logging(config)
    logger.info("starting (theme=%s, delay=%dms)", config.theme, config.opponent_delay_ms)

    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    apply_palette(app, config.theme)

    auth = AuthService(min_password_length=config.min_password_length)
    policy = OpponentPolicy(COMPUTER, rng=random.Random(config.seed))
    session = GameSession(policy=policy, delay_ms=config.opponent_delay_ms)
    window = TicTacToeWindow(auth, config=config, session=session)
    window.resize(480, 640)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
