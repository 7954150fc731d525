from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QPen

from ..game_logic import X
from .theme import colors_for

SIZE = 3


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index (row*3+col) on click

    def __init__(self, session, view_state, parent=None):
        super().__init__(parent)
        self.session = session        # reference to game state
        self.view_state = view_state  # theme for colors
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self.refresh()

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def refresh(self):
        """
        repaint and update the accessible description
        """
        marks = ", ".join(f"cell {i} {m or 'empty'}"
                          for i, m in enumerate(self.session.board))
        self.setAccessibleName("Tic tac toe board")
        self.setAccessibleDescription(marks)
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            colors = colors_for(self.view_state.theme)
            offset_x, offset_y, side = self._geometry()
            # background
            painter.fillRect(self.rect(), colors['board_bg'])
            cell_size = side / SIZE
            # grid lines
            painter.setPen(QPen(colors['grid'], 2))
            for i in range(1, SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # draw marks
            for index, sym in enumerate(self.session.board):
                if not sym: continue
                cx, cy = self._cell_center(index, offset_x, offset_y, cell_size)
                rad = cell_size/2 * 0.6
                if sym == X:
                    painter.setPen(QPen(colors['mark_x'], 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(colors['mark_o'], 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
            # strike through the winning line
            line = self.session.winning_line
            if line:
                start = self._cell_center(line[0], offset_x, offset_y, cell_size)
                end = self._cell_center(line[-1], offset_x, offset_y, cell_size)
                painter.setPen(QPen(colors['win_line'], 8, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin))
                painter.drawLine(QPointF(*start), QPointF(*end))
        finally:
            painter.end()

    @staticmethod
    def _cell_center(index, offset_x, offset_y, cell_size):
        row, col = divmod(index, SIZE)
        return (offset_x + col*cell_size + cell_size/2,
                offset_y + row*cell_size + cell_size/2)

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board index and emit
        """
        if not self._accept_clicks or self.session.game_over:
            return
        ox, oy, side = self._geometry()
        x, y = event.position().x(), event.position().y()
        # only inside grid
        if not (ox <= x < ox+side and oy <= y < oy+side):
            return
        cell = side / SIZE
        if cell <= 0: return
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, SIZE-1)); col = max(0, min(col, SIZE-1))
        index = row*SIZE + col
        # filled cells behave as disabled buttons
        if not self.session.is_cell_empty(index):
            return
        self.cell_clicked.emit(index)  # notify main window
