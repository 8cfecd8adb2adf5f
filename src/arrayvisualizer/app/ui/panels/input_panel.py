from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QPlainTextEdit,
    QSlider, QDoubleSpinBox, QFrame,
)

from arrayvisualizer import config
from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.app.ui.panels.base import BasePanel

# QSlider is integer-only: one slider step is 1/SLIDER_SCALE pixel
SLIDER_SCALE = 10


class InputPanel(BasePanel):
    """
    Panel with the JSON editor and the controls.

    Top: "Load Sample" button and the multi-line JSON input.
    Below: "Load Array" button, cell size slider + spin box, error label.
    """
    def __init__(self, controller: VisualizerController, parent: QWidget | None = None) -> None:
        super().__init__(controller, parent)

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        # input row
        input_row = QHBoxLayout()
        input_row.addWidget(QLabel(self.tr("JSON Input:"), self))
        self.sample_button = QPushButton(self.tr("Load Sample"), self)
        input_row.addWidget(self.sample_button)
        input_row.addStretch(1)
        root.addLayout(input_row)

        self.text_edit = QPlainTextEdit(self)
        self.text_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.text_edit.setPlainText(controller.raw_text)
        line_height = self.text_edit.fontMetrics().lineSpacing()
        self.text_edit.setMinimumHeight(10 * line_height)
        root.addWidget(self.text_edit)

        # control row
        control_row = QHBoxLayout()
        self.load_button = QPushButton(self.tr("Load Array"), self)
        control_row.addWidget(self.load_button)

        separator = QFrame(self)
        separator.setFrameShape(QFrame.Shape.VLine)
        control_row.addWidget(separator)

        control_row.addWidget(QLabel(self.tr("Cell Size:"), self))
        min_size, max_size = controller.renderer.bounds

        self.slider = QSlider(Qt.Orientation.Horizontal, self)
        self.slider.setRange(round(min_size * SLIDER_SCALE), round(max_size * SLIDER_SCALE))
        self.slider.setValue(round(controller.cell_size * SLIDER_SCALE))
        control_row.addWidget(self.slider, 1)

        self.spin_box = QDoubleSpinBox(self)
        self.spin_box.setDecimals(1)
        self.spin_box.setSingleStep(1.0)
        self.spin_box.setRange(min_size, max_size)
        self.spin_box.setValue(controller.cell_size)
        self.spin_box.setSuffix(" px")
        control_row.addWidget(self.spin_box)
        root.addLayout(control_row)

        self.error_label = QLabel(self)
        self.error_label.setStyleSheet(f"color: {config.ERROR_COLOR};")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        root.addWidget(self.error_label)

        # wiring: widgets -> controller
        self.sample_button.clicked.connect(controller.load_sample)
        self.load_button.clicked.connect(controller.submit_load)
        self.text_edit.textChanged.connect(self._on_text_edited)
        self.slider.valueChanged.connect(self._on_slider_moved)
        self.spin_box.valueChanged.connect(self._on_spin_changed)

        # wiring: controller -> widgets
        controller.text_changed.connect(self._sync_text)
        controller.cell_size_changed.connect(self._sync_cell_size)
        controller.bounds_changed.connect(self._sync_bounds)
        controller.error_changed.connect(self._sync_error)

        self._sync_error(controller.error)

    @Slot()
    def _on_text_edited(self) -> None:
        self.controller.edit_text(self.text_edit.toPlainText())

    @Slot(int)
    def _on_slider_moved(self, value: int) -> None:
        self.controller.resize(value / SLIDER_SCALE)

    @Slot(float)
    def _on_spin_changed(self, value: float) -> None:
        self.controller.resize(value)

    @Slot(str)
    def _sync_text(self, text: str) -> None:
        # Skip when the change came from the editor itself, keeps the cursor in place
        if self.text_edit.toPlainText() != text:
            self.text_edit.setPlainText(text)

    @Slot(float)
    def _sync_cell_size(self, value: float) -> None:
        self._sync_widgets(self.controller.renderer.bounds, value)

    @Slot(float, float)
    def _sync_bounds(self, min_size: float, max_size: float) -> None:
        self._sync_widgets((min_size, max_size), self.controller.cell_size)

    def _sync_widgets(self, bounds: tuple[float, float], value: float) -> None:
        min_size, max_size = bounds
        for widget in (self.slider, self.spin_box):
            widget.blockSignals(True)
        self.slider.setRange(round(min_size * SLIDER_SCALE), round(max_size * SLIDER_SCALE))
        self.slider.setValue(round(value * SLIDER_SCALE))
        self.spin_box.setRange(min_size, max_size)
        self.spin_box.setValue(value)
        for widget in (self.slider, self.spin_box):
            widget.blockSignals(False)

    @Slot(object)
    def _sync_error(self, error: object) -> None:
        message = self.controller.error_message
        if message is None:
            self.error_label.clear()
            self.error_label.setVisible(False)
        else:
            self.error_label.setText(self.tr("Error: {}").format(message))
            self.error_label.setVisible(True)
