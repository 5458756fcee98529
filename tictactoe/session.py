import logging

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from .config import DEFAULT_OPPONENT_DELAY_MS
from .game_logic import GameState, PLAYER_O, PLAYER_X
from .opponent import OpponentPolicy

logger = logging.getLogger(__name__)

HUMAN = PLAYER_X
COMPUTER = PLAYER_O
STATUS_LABELS = {HUMAN: "X (You)", COMPUTER: "O (Computer)"}


class GameSession(QObject):
    """
    human vs computer game flow
    clicks go straight in, the computer answers after a one-shot timer
    """
    board_changed = Signal()
    status_changed = Signal(str)
    game_over = Signal(str)

    def __init__(self, policy=None, delay_ms=DEFAULT_OPPONENT_DELAY_MS, parent=None):
        """
        init state, policy and the opponent timer
        """
        super().__init__(parent)
        self.state = GameState()
        self.policy = policy or OpponentPolicy(COMPUTER)
        self._enabled = True
        # single-shot so it fires once per arming; stop() cancels it
        self._opponent_timer = QTimer(self)
        self._opponent_timer.setSingleShot(True)
        self._opponent_timer.setInterval(delay_ms)
        self._opponent_timer.timeout.connect(self.play_opponent_move)

    @property
    def is_thinking(self):
        return self._opponent_timer.isActive()

    @property
    def enabled(self):
        return self._enabled

    @property
    def delay_ms(self):
        return self._opponent_timer.interval()

    def status_text(self):
        return self.state.status_text(STATUS_LABELS)

    def accepts_clicks(self):
        # human may move now
        return (self._enabled and not self.state.is_game_over
                and self.state.current_player == HUMAN and not self.is_thinking)

    @Slot(int)
    def handle_click(self, index):
        """
        human move; out-of-turn, taken cell or finished game is a no-op
        """
        if not self.accepts_clicks():
            logger.debug("click on %d declined", index)
            return False
        if not self.state.apply_move(index):
            return False
        logger.info("human %s took %d", HUMAN, index)
        self._publish()
        if not self.state.is_game_over and self.state.current_player == COMPUTER:
            self._opponent_timer.start()
        return True

    @Slot()
    def play_opponent_move(self):
        """
        timer callback: let the policy pick and apply its move
        """
        self._opponent_timer.stop()  # direct calls consume the pending shot
        # state may have moved on since arming
        if (not self._enabled or self.state.is_game_over
                or self.state.current_player != COMPUTER):
            return
        index = self.policy.select_move(self.state.board)
        self.state.apply_move(index)
        self._publish()

    @Slot()
    def reset(self):
        """
        cancel pending computer move and start over
        """
        if self.is_thinking:
            logger.debug("cancelled pending opponent move")
        self._opponent_timer.stop()
        self.state.reset_game()
        logger.info("game reset")
        self._publish()

    def set_enabled(self, enabled):
        # signed-out sessions take no input and drop the game in progress
        self._enabled = bool(enabled)
        if not self._enabled:
            self.reset()

    def _publish(self):
        self.board_changed.emit()
        text = self.status_text()
        self.status_changed.emit(text)
        if self.state.is_game_over:
            logger.info("game over: %s", text)
            self.game_over.emit(text)
