from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# -------------------------------------------------------------------------------
# Draw primitives
# -------------------------------------------------------------------------------

@dataclass(frozen=True)
class FilledRect:
    """An axis-aligned rectangle filled with a solid color. (x, y) is the top-left corner."""
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class LineSegment:
    """A straight stroke from (x1, y1) to (x2, y2)."""
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    width: float = 1.0


Primitive = Union[FilledRect, LineSegment]
