"""
2D Array Visualizer
===================
Loads a JSON-encoded binary matrix and draws it as a grid of cells.

Run with: python -m arrayvisualizer
"""
