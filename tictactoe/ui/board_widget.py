from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, PLAYER_X

# per-theme colours: background, cell, grid, X, O, win highlight
BOARD_COLORS = {
    "dark": {"bg": "#111827", "cell": "#1f2937", "grid": "#374151",
             "x": "#3b82f6", "o": "#a855f7", "win": "#34d399"},
    "light": {"bg": "#eef2ff", "cell": "#ffffff", "grid": "#e5e7eb",
              "x": "#3b82f6", "o": "#a855f7", "win": "#10b981"},
}


class BoardWidget(QWidget):
    """
    custom widget to draw and click on the 3x3 board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, game_state, theme="dark", parent=None):
        super().__init__(parent)
        self.game_state = game_state  # reference to game state
        self.colors = BOARD_COLORS[theme]
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(240, 240))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def set_theme(self, theme):
        self.colors = BOARD_COLORS[theme]
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        painter.fillRect(self.rect(), QColor(self.colors["bg"]))
        cell_size = side / BOARD_SIZE
        gap = cell_size * 0.06
        win_line = self.game_state.winning_line() or ()
        for index, mark in enumerate(self.game_state.board):
            row, col = divmod(index, BOARD_SIZE)
            rect = QRectF(ox + col * cell_size + gap / 2, oy + row * cell_size + gap / 2,
                          cell_size - gap, cell_size - gap)
            painter.setPen(QPen(QColor(self.colors["grid"]), 1))
            painter.setBrush(QColor(self.colors["cell"]))
            painter.drawRoundedRect(rect, gap * 1.5, gap * 1.5)
            if index in win_line:
                painter.setPen(QPen(QColor(self.colors["win"]), 4))
                painter.setBrush(Qt.NoBrush)
                painter.drawRoundedRect(rect, gap * 1.5, gap * 1.5)
            if mark is None:
                continue
            c = rect.center()
            rad = cell_size / 2 * 0.5
            if mark == PLAYER_X:
                painter.setPen(QPen(QColor(self.colors["x"]), 6, Qt.SolidLine, Qt.RoundCap))
                # two crossing lines
                painter.drawLine(QPointF(c.x() - rad, c.y() - rad), QPointF(c.x() + rad, c.y() + rad))
                painter.drawLine(QPointF(c.x() + rad, c.y() - rad), QPointF(c.x() - rad, c.y() + rad))
            else:
                painter.setPen(QPen(QColor(self.colors["o"]), 6))
                painter.setBrush(Qt.NoBrush)
                painter.drawEllipse(c, rad, rad)
        painter.end()

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = min(int((x - ox) // cell), BOARD_SIZE - 1)
        row = min(int((y - oy) // cell), BOARD_SIZE - 1)
        return row * BOARD_SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_state.is_game_over:
            return
        pos = event.position()
        index = self.cell_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
