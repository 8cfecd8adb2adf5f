"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (cell sizes, colors, window size)
   scattered throughout the renderer and the UI.
2. Defaults: The sample matrices shown in the input box live here, so the
   controller and the tests agree on them.

Exports:
    DEFAULT_CELL_SIZE, MIN_CELL_SIZE, MAX_CELL_SIZE (float): Cell size defaults.
    DEFAULT_INPUT_TEXT (str): JSON shown in the input box on startup.
    SAMPLE_MATRIX_TEXT (str): JSON inserted by the "Load Sample" button.
    LOG_LEVEL (int): Logging level, overridable via ARRAYVISUALIZER_LOG_LEVEL.
"""
import logging
import os

# Cell size (pixels)
DEFAULT_CELL_SIZE: float = 20.0
MIN_CELL_SIZE: float = 5.0
MAX_CELL_SIZE: float = 50.0

# Colors
BACKGROUND_COLOR: str = "#000000"
CELL_COLOR: str = "#FFFFFF"
GRID_COLOR: str = "#404040"
GRID_LINE_WIDTH: float = 1.0
ERROR_COLOR: str = "#FF0000"

# Main window
WINDOW_TITLE: str = "2D Array Visualizer"
WINDOW_SIZE: tuple[int, int] = (800, 600)

DEFAULT_INPUT_TEXT: str = """[
  [0, 1, 0, 1, 0],
  [1, 0, 1, 0, 1],
  [0, 1, 0, 1, 0],
  [1, 0, 1, 0, 1],
  [0, 1, 0, 1, 0]
]"""

SAMPLE_MATRIX_TEXT: str = """[
  [1, 1, 1, 1, 1, 0, 0, 0, 0, 0],
  [1, 0, 0, 0, 1, 0, 1, 1, 1, 0],
  [1, 0, 1, 0, 1, 0, 1, 0, 1, 0],
  [1, 0, 0, 0, 1, 0, 1, 1, 1, 0],
  [1, 1, 1, 1, 1, 0, 0, 0, 0, 0],
  [0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
  [0, 1, 1, 1, 0, 0, 1, 1, 1, 0],
  [0, 1, 0, 0, 0, 0, 1, 0, 0, 1],
  [0, 1, 1, 1, 0, 0, 1, 1, 1, 0],
  [0, 0, 0, 1, 0, 0, 0, 0, 0, 1]
]"""


def get_log_level(default: int = logging.INFO) -> int:
    """
    Resolve the logging level from the ARRAYVISUALIZER_LOG_LEVEL environment variable.

    Accepts level names ("DEBUG", "warning") or numeric values ("10").
    Unknown values fall back to the default.
    """
    raw = os.environ.get("ARRAYVISUALIZER_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if isinstance(level, int):
        return level
    return default


LOG_LEVEL: int = get_log_level()
