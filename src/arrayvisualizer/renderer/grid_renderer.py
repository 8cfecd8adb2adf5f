"""
Grid Renderer
=============
Maps a matrix and a cell size to a list of draw primitives.

Why is this file needed?
------------------------
1. Geometry: It is the only place that knows how cells map to pixels
   (canvas size, cell rectangles, grid lines).
2. Decoupling: It returns plain data instead of painting, so the Qt canvas
   is a thin consumer and the geometry can be tested without a display.

Classes:
    GridRenderer: Holds the cell size bounds, the current cell size and matrix.
"""
from __future__ import annotations

import logging
import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from arrayvisualizer import config
from arrayvisualizer.renderer.primitives import FilledRect, LineSegment, Primitive

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class GridRenderer:
    def __init__(
        self,
        matrix: Optional[npt.NDArray[np.int32]] = None,
        cell_size: float = config.DEFAULT_CELL_SIZE,
        min_cell_size: float = config.MIN_CELL_SIZE,
        max_cell_size: float = config.MAX_CELL_SIZE,
    ) -> None:
        self._check_bounds(min_cell_size, max_cell_size)

        self.matrix: Optional[npt.NDArray[np.int32]] = matrix
        self._min_cell_size: float = float(min_cell_size)
        self._max_cell_size: float = float(max_cell_size)
        self._cell_size: float = self._clamp(cell_size)

        self.background_color: str = config.BACKGROUND_COLOR
        self.cell_color: str = config.CELL_COLOR
        self.grid_color: str = config.GRID_COLOR
        self.grid_line_width: float = config.GRID_LINE_WIDTH

    # ------------------------------------------------------------------------------
    # Cell size
    # ------------------------------------------------------------------------------

    @property
    def cell_size(self) -> float:
        return self._cell_size

    @property
    def bounds(self) -> tuple[float, float]:
        """(min_cell_size, max_cell_size)"""
        return self._min_cell_size, self._max_cell_size

    def configure_bounds(self, min_size: float, max_size: float) -> None:
        """
        Set the allowed cell size interval and clamp the current cell size into it.

        Raises:
            ValueError: If a bound is not finite or min_size > max_size.
                Nothing is changed in that case.
        """
        self._check_bounds(min_size, max_size)

        self._min_cell_size = float(min_size)
        self._max_cell_size = float(max_size)

        previous = self._cell_size
        self._cell_size = self._clamp(previous)
        if self._cell_size != previous:
            logger.debug(f"Cell size clamped from {previous} to {self._cell_size} by new bounds.")

    def set_cell_size(self, requested: float) -> float:
        """
        Store the requested cell size clamped into bounds and return the stored value.

        NaN is stored as the minimum, infinities as the nearest bound.
        """
        self._cell_size = self._clamp(requested)
        return self._cell_size

    def set_matrix(self, matrix: Optional[npt.NDArray[np.int32]]) -> None:
        self.matrix = matrix

    def _clamp(self, value: float) -> float:
        value = float(value)
        if math.isnan(value):
            return self._min_cell_size
        return min(max(value, self._min_cell_size), self._max_cell_size)

    @staticmethod
    def _check_bounds(min_size: float, max_size: float) -> None:
        if not (math.isfinite(min_size) and math.isfinite(max_size)):
            raise ValueError(f"Cell size bounds must be finite, got ({min_size}, {max_size})")
        if min_size > max_size:
            raise ValueError(f"Invalid cell size bounds: min {min_size} > max {max_size}")

    # ------------------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------------------

    def canvas_size(
        self,
        matrix: Optional[npt.NDArray[np.int32]] = None,
        cell_size: Optional[float] = None,
    ) -> tuple[float, float]:
        """
        Pixel size of the whole grid as (width, height).

        Args default to the stored matrix and cell size. Without a matrix the
        canvas is empty: (0.0, 0.0).
        """
        matrix, cell_size = self._resolve(matrix, cell_size)
        if matrix is None:
            return 0.0, 0.0
        rows, cols = matrix.shape
        return cols * cell_size, rows * cell_size

    def cell_at(
        self,
        x: float,
        y: float,
        matrix: Optional[npt.NDArray[np.int32]] = None,
        cell_size: Optional[float] = None,
    ) -> Optional[tuple[int, int]]:
        """Return the (row, col) of the cell under the canvas point (x, y), or None if outside."""
        matrix, cell_size = self._resolve(matrix, cell_size)
        if matrix is None or x < 0 or y < 0:
            return None
        rows, cols = matrix.shape
        row = int(y // cell_size)
        col = int(x // cell_size)
        if row >= rows or col >= cols:
            return None
        return row, col

    def render(
        self,
        matrix: Optional[npt.NDArray[np.int32]] = None,
        cell_size: Optional[float] = None,
    ) -> list[Primitive]:
        """
        Build the draw list for the matrix.

        Order matters: background first, then one rect per non-zero cell in
        row-major order, then the grid lines (vertical, then horizontal) on top.
        Zero cells are not drawn, the background shows through.
        """
        matrix, cell_size = self._resolve(matrix, cell_size)
        if matrix is None:
            return []

        rows, cols = matrix.shape
        width, height = self.canvas_size(matrix, cell_size)

        primitives: list[Primitive] = [
            FilledRect(0.0, 0.0, width, height, self.background_color)
        ]

        # np.argwhere yields indices in row-major order
        for row, col in np.argwhere(matrix != 0):
            primitives.append(
                FilledRect(
                    float(col) * cell_size,
                    float(row) * cell_size,
                    cell_size,
                    cell_size,
                    self.cell_color,
                )
            )

        primitives.extend(self._grid_lines(rows, cols, cell_size, width, height))
        return primitives

    def _grid_lines(
        self, rows: int, cols: int, cell_size: float, width: float, height: float
    ) -> list[LineSegment]:
        lines: list[LineSegment] = []
        for col in range(cols + 1):
            x = col * cell_size
            lines.append(LineSegment(x, 0.0, x, height, self.grid_color, self.grid_line_width))
        for row in range(rows + 1):
            y = row * cell_size
            lines.append(LineSegment(0.0, y, width, y, self.grid_color, self.grid_line_width))
        return lines

    def _resolve(
        self,
        matrix: Optional[npt.NDArray[np.int32]],
        cell_size: Optional[float],
    ) -> tuple[Optional[npt.NDArray[np.int32]], float]:
        if matrix is None:
            matrix = self.matrix
        if cell_size is None:
            cell_size = self._cell_size
        return matrix, float(cell_size)
