from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from arrayvisualizer import config
from arrayvisualizer.model.matrix_loader import LoadError, load_matrix
from arrayvisualizer.model.state import VisualizerState
from arrayvisualizer.renderer.grid_renderer import GridRenderer

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from arrayvisualizer.renderer.primitives import Primitive

logger = logging.getLogger(__name__)


class VisualizerController(QObject):
    """
    Central state store of a visualizer session, with signals for UI sync.

    The UI translates user input into the four transitions below. Loading is
    explicit: editing the text never parses it.
    """
    text_changed = Signal(str)
    matrix_changed = Signal(object)
    error_changed = Signal(object)
    cell_size_changed = Signal(float)
    bounds_changed = Signal(float, float)

    def __init__(self, renderer: GridRenderer | None = None) -> None:
        super().__init__()
        self.renderer = renderer or GridRenderer()
        self._state = VisualizerState(cell_size=self.renderer.cell_size)

    # ------------------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> VisualizerState:
        """A snapshot of the current state. Mutating it does not affect the session."""
        return self._state.snapshot()

    @property
    def raw_text(self) -> str:
        return self._state.raw_text

    @property
    def matrix(self) -> Optional[npt.NDArray[np.int32]]:
        return self._state.matrix

    @property
    def error(self) -> Optional[LoadError]:
        return self._state.error

    @property
    def error_message(self) -> Optional[str]:
        if self._state.error is None:
            return None
        return str(self._state.error)

    @property
    def cell_size(self) -> float:
        return self._state.cell_size

    def canvas_size(self) -> tuple[float, float]:
        return self.renderer.canvas_size(self._state.matrix, self._state.cell_size)

    def draw_commands(self) -> list[Primitive]:
        """Primitives for the current matrix and cell size. Empty when nothing is loaded."""
        if self._state.matrix is None:
            return []
        return self.renderer.render(self._state.matrix, self._state.cell_size)

    # ------------------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------------------

    def edit_text(self, new_text: str) -> None:
        if new_text == self._state.raw_text:
            return
        self._state.raw_text = new_text
        self.text_changed.emit(new_text)

    def load_sample(self) -> None:
        """Replace the input with the built-in sample. Does not load it."""
        self.edit_text(config.SAMPLE_MATRIX_TEXT)

    def submit_load(self) -> Optional[npt.NDArray[np.int32]]:
        """
        Load the current text.

        On success the matrix replaces the previous one and the error is cleared.
        On failure the error is stored and the previous matrix is discarded.

        Returns:
            The loaded matrix, or None if loading failed.
        """
        try:
            matrix = load_matrix(self._state.raw_text)
        except LoadError as e:
            logger.warning(f"Failed to load array: {e}")
            self._state.matrix = None
            self._state.error = e
            self.renderer.set_matrix(None)
        else:
            rows, cols = matrix.shape
            logger.info(f"Loaded {rows}x{cols} array.")
            self._state.matrix = matrix
            self._state.error = None
            self.renderer.set_matrix(matrix)

        self.error_changed.emit(self._state.error)
        self.matrix_changed.emit(self._state.matrix)
        return self._state.matrix

    def resize(self, requested: float) -> float:
        """Set the cell size, clamped into the renderer bounds. Works with no matrix loaded."""
        stored = self.renderer.set_cell_size(requested)
        self._set_cell_size(stored)
        return stored

    def configure_bounds(self, min_size: float, max_size: float) -> None:
        """
        Change the cell size bounds; the current cell size is clamped into them.

        Raises:
            ValueError: If a bound is not finite or min_size > max_size.
        """
        previous = self.renderer.bounds
        self.renderer.configure_bounds(min_size, max_size)
        self._set_cell_size(self.renderer.cell_size)
        if self.renderer.bounds != previous:
            self.bounds_changed.emit(*self.renderer.bounds)

    def _set_cell_size(self, value: float) -> None:
        if value == self._state.cell_size:
            return
        self._state.cell_size = value
        self.cell_size_changed.emit(value)
