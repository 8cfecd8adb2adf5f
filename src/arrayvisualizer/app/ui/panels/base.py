from __future__ import annotations

from PySide6.QtWidgets import QWidget

from arrayvisualizer.app.state import VisualizerController


class BasePanel(QWidget):
    """Base class for panels. Holds a reference to the session controller."""
    def __init__(self, controller: VisualizerController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
