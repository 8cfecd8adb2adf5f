from __future__ import annotations

import math

from PySide6.QtCore import QLineF, QRectF, QSize
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QToolTip, QWidget

from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.renderer.primitives import FilledRect, LineSegment, Primitive


class GridCanvas(QWidget):
    """
    Paints the controller's draw primitives with QPainter.

    The canvas holds no geometry logic: it replays the primitive list in order,
    so grid lines end up on top of the cell fills.
    """
    def __init__(self, controller: VisualizerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._primitives: list[Primitive] = []
        self._size = QSize(0, 0)
        self.setMouseTracking(True)

    @property
    def primitives(self) -> list[Primitive]:
        return list(self._primitives)

    def refresh(self) -> None:
        """Pull the latest primitives from the controller and repaint."""
        self.set_primitives(self.controller.draw_commands(), self.controller.canvas_size())

    def set_primitives(self, primitives: list[Primitive], canvas_size: tuple[float, float]) -> None:
        self._primitives = list(primitives)
        width, height = canvas_size
        # +1 so the closing grid line at x=width / y=height stays visible
        self._size = QSize(math.ceil(width) + 1, math.ceil(height) + 1) if primitives else QSize(0, 0)
        self.setFixedSize(self._size)
        self.update()

    def sizeHint(self) -> QSize:
        return self._size

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.paint_primitives(painter, self._primitives)
        finally:
            painter.end()

    @staticmethod
    def paint_primitives(painter: QPainter, primitives: list[Primitive]) -> None:
        """Draw primitives onto any paint device, in list order."""
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, False)
        for prim in primitives:
            if isinstance(prim, FilledRect):
                painter.fillRect(QRectF(prim.x, prim.y, prim.width, prim.height), QColor(prim.color))
            elif isinstance(prim, LineSegment):
                pen = QPen(QColor(prim.color))
                pen.setWidthF(prim.width)
                painter.setPen(pen)
                painter.drawLine(QLineF(prim.x1, prim.y1, prim.x2, prim.y2))
            else:
                raise TypeError(f"Unsupported primitive: {prim!r}")

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        matrix = self.controller.matrix
        cell = self.controller.renderer.cell_at(pos.x(), pos.y(), matrix, self.controller.cell_size)
        if cell is None:
            QToolTip.hideText()
        else:
            row, col = cell
            QToolTip.showText(
                event.globalPosition().toPoint(),
                f"row {row}, col {col}: {int(matrix[row, col])}",
                self,
            )
        super().mouseMoveEvent(event)
