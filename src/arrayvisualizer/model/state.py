"""
Visualizer State (Data Model)
=============================
This module defines the data held by one visualizer session.

Classes:
    VisualizerState: Raw input text, last load outcome and the live cell size.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, TYPE_CHECKING

from arrayvisualizer import config

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

    from arrayvisualizer.model.matrix_loader import LoadError


@dataclass
class VisualizerState:
    """
    State of a visualizer session.

    After the first load attempt exactly one of `matrix` and `error` is set.
    Both are None before any load.
    """
    raw_text: str = config.DEFAULT_INPUT_TEXT
    matrix: Optional[npt.NDArray[np.int32]] = None
    error: Optional[LoadError] = None
    cell_size: float = config.DEFAULT_CELL_SIZE

    @property
    def has_matrix(self) -> bool:
        return self.matrix is not None

    def snapshot(self) -> VisualizerState:
        """Shallow copy of the state. The (read-only) matrix array is shared."""
        return replace(self)
