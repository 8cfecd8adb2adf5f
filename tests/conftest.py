"""Shared test fixtures for the array visualizer.

Qt runs headless (offscreen platform) so widget tests work without a display.
"""

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest
from PySide6.QtWidgets import QApplication

from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.renderer.grid_renderer import GridRenderer


# ---------------------------------------------------------------------------
# Qt fixtures
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    """One QApplication for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def checker_2x2() -> np.ndarray:
    return np.array([[0, 1], [1, 0]], dtype=np.int32)


@pytest.fixture()
def renderer() -> GridRenderer:
    """Renderer with default bounds [5, 50] and cell size 20."""
    return GridRenderer()


@pytest.fixture()
def controller(qapp: QApplication) -> VisualizerController:
    return VisualizerController()


class SignalRecorder:
    """Collects the arguments of every emission of a Qt signal."""

    def __init__(self, signal) -> None:
        self.calls: list[object] = []
        signal.connect(self._record)

    def _record(self, *args) -> None:
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def record():
    """Factory: record(controller.some_signal) -> SignalRecorder."""
    return SignalRecorder
