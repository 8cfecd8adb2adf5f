"""
Main Application Window
=======================
Heading, input panel, and the scrollable canvas below it.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QScrollArea, QFrame, QStackedWidget,
)

from arrayvisualizer import config
from arrayvisualizer.app.application import VISIBLE_APP_NAME
from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.app.ui.canvas import GridCanvas
from arrayvisualizer.app.ui.panels.input_panel import InputPanel


class MainWindow(QMainWindow):
    # Indexes into the canvas stack
    PLACEHOLDER_PAGE = 0
    CANVAS_PAGE = 1

    def __init__(self, controller: VisualizerController) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*config.WINDOW_SIZE)

        central = QWidget(self)
        v = QVBoxLayout(central)

        heading = QLabel(self.tr("2D Array Visualizer"), central)
        font = QFont(heading.font())
        font.setPointSizeF(font.pointSizeF() * 1.5)
        font.setBold(True)
        heading.setFont(font)
        v.addWidget(heading)
        v.addWidget(self._separator(central))

        self.input_panel = InputPanel(controller, central)
        v.addWidget(self.input_panel, 0)
        v.addWidget(self._separator(central))

        # ---- Canvas section: placeholder or canvas ----
        self.canvas_stack = QStackedWidget(central)

        self.placeholder = QLabel(self.tr("Load an array to see the visualization"), self.canvas_stack)
        self.placeholder.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.canvas_stack.addWidget(self.placeholder)

        canvas_page = QWidget(self.canvas_stack)
        page_layout = QVBoxLayout(canvas_page)
        page_layout.setContentsMargins(0, 0, 0, 0)
        page_layout.addWidget(QLabel(self.tr("Canvas (0: Black, 1: White):"), canvas_page))

        self.scroll_area = QScrollArea(canvas_page)
        self.scroll_area.setWidgetResizable(False)
        self.canvas = GridCanvas(controller)
        self.scroll_area.setWidget(self.canvas)
        page_layout.addWidget(self.scroll_area, 1)
        self.canvas_stack.addWidget(canvas_page)

        v.addWidget(self.canvas_stack, 1)
        self.setCentralWidget(central)

        # React to state changes
        controller.matrix_changed.connect(self._on_matrix_changed)
        controller.cell_size_changed.connect(self._on_cell_size_changed)

        self._on_matrix_changed(controller.matrix)

    @staticmethod
    def _separator(parent: QWidget) -> QFrame:
        line = QFrame(parent)
        line.setFrameShape(QFrame.Shape.HLine)
        line.setFrameShadow(QFrame.Shadow.Sunken)
        return line

    @Slot(object)
    def _on_matrix_changed(self, matrix: object) -> None:
        if matrix is None:
            self.canvas_stack.setCurrentIndex(self.PLACEHOLDER_PAGE)
        else:
            self.canvas_stack.setCurrentIndex(self.CANVAS_PAGE)
        self.canvas.refresh()

    @Slot(float)
    def _on_cell_size_changed(self, _value: float) -> None:
        self.canvas.refresh()
