"""Widget tests: canvas painting and main window wiring (offscreen Qt)."""

from __future__ import annotations

import numpy as np
import pytest
from PySide6.QtGui import QColor, QImage, QPainter

from arrayvisualizer import config
from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.app.ui.canvas import GridCanvas
from arrayvisualizer.app.ui.main_window import MainWindow
from arrayvisualizer.renderer.grid_renderer import GridRenderer


def paint_to_image(primitives, width: int, height: int) -> QImage:
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor("#123456"))
    painter = QPainter(image)
    try:
        GridCanvas.paint_primitives(painter, primitives)
    finally:
        painter.end()
    return image


class TestCanvasPainting:
    def test_cell_colors(self, qapp) -> None:
        renderer = GridRenderer()
        matrix = np.array([[0, 1], [1, 0]], dtype=np.int32)
        image = paint_to_image(renderer.render(matrix, 20.0), 41, 41)

        # cell centres, away from the grid lines
        assert image.pixelColor(10, 10).name() == config.BACKGROUND_COLOR.lower()
        assert image.pixelColor(30, 10).name() == config.CELL_COLOR.lower()
        assert image.pixelColor(10, 30).name() == config.CELL_COLOR.lower()
        assert image.pixelColor(30, 30).name() == config.BACKGROUND_COLOR.lower()

    def test_grid_lines_on_top_of_fills(self, qapp) -> None:
        renderer = GridRenderer()
        matrix = np.array([[1, 1]], dtype=np.int32)
        image = paint_to_image(renderer.render(matrix, 20.0), 41, 21)

        # x=20 is the shared border of two white cells
        assert image.pixelColor(20, 10).name() == config.GRID_COLOR.lower()

    def test_unknown_primitive_rejected(self, qapp) -> None:
        with pytest.raises(TypeError):
            paint_to_image(["not a primitive"], 4, 4)

    def test_refresh_sizes_widget(self, controller: VisualizerController) -> None:
        canvas = GridCanvas(controller)
        controller.edit_text("[[1, 0, 1]]")
        controller.submit_load()
        canvas.refresh()
        assert canvas.width() == 61
        assert canvas.height() == 21
        assert canvas.primitives == controller.draw_commands()

    def test_refresh_without_matrix(self, controller: VisualizerController) -> None:
        canvas = GridCanvas(controller)
        canvas.refresh()
        assert canvas.primitives == []
        assert canvas.sizeHint().width() == 0


class TestMainWindow:
    @pytest.fixture()
    def window(self, controller: VisualizerController) -> MainWindow:
        win = MainWindow(controller)
        yield win
        win.close()

    def test_starts_with_placeholder(self, window: MainWindow) -> None:
        assert window.windowTitle() == config.WINDOW_TITLE
        assert window.canvas_stack.currentIndex() == MainWindow.PLACEHOLDER_PAGE
        assert window.input_panel.text_edit.toPlainText() == config.DEFAULT_INPUT_TEXT

    def test_load_button_shows_canvas(self, window: MainWindow, controller: VisualizerController) -> None:
        window.input_panel.load_button.click()
        assert controller.matrix is not None
        assert window.canvas_stack.currentIndex() == MainWindow.CANVAS_PAGE
        assert window.canvas.width() == 5 * 20 + 1

    def test_sample_button_updates_editor(self, window: MainWindow, controller: VisualizerController) -> None:
        window.input_panel.sample_button.click()
        assert window.input_panel.text_edit.toPlainText() == config.SAMPLE_MATRIX_TEXT
        assert controller.matrix is None

    def test_typing_updates_controller(self, window: MainWindow, controller: VisualizerController) -> None:
        window.input_panel.text_edit.setPlainText("[[1]]")
        assert controller.raw_text == "[[1]]"

    def test_error_label(self, window: MainWindow, controller: VisualizerController) -> None:
        panel = window.input_panel
        assert panel.error_label.isHidden()

        panel.text_edit.setPlainText("not json")
        panel.load_button.click()
        assert not panel.error_label.isHidden()
        assert panel.error_label.text().startswith("Error: JSON parse error:")
        assert window.canvas_stack.currentIndex() == MainWindow.PLACEHOLDER_PAGE

        panel.text_edit.setPlainText("[[1]]")
        panel.load_button.click()
        assert panel.error_label.isHidden()

    def test_spin_box_resizes(self, window: MainWindow, controller: VisualizerController) -> None:
        window.input_panel.load_button.click()
        window.input_panel.spin_box.setValue(10.0)
        assert controller.cell_size == 10.0
        assert window.input_panel.slider.value() == 100
        assert window.canvas.width() == 5 * 10 + 1

    def test_slider_resizes(self, window: MainWindow, controller: VisualizerController) -> None:
        window.input_panel.slider.setValue(355)
        assert controller.cell_size == 35.5
        assert window.input_panel.spin_box.value() == 35.5

    def test_bounds_change_updates_widget_ranges(self, window: MainWindow, controller: VisualizerController) -> None:
        controller.configure_bounds(10.0, 30.0)
        panel = window.input_panel
        assert controller.cell_size == 20.0
        assert (panel.spin_box.minimum(), panel.spin_box.maximum()) == (10.0, 30.0)
        assert (panel.slider.minimum(), panel.slider.maximum()) == (100, 300)
        assert panel.slider.value() == 200
