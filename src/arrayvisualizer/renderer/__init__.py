"""
The RENDERER layer turns a matrix into draw primitives.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
from arrayvisualizer.renderer.grid_renderer import GridRenderer
from arrayvisualizer.renderer.primitives import FilledRect, LineSegment, Primitive

__all__ = ["GridRenderer", "FilledRect", "LineSegment", "Primitive"]
