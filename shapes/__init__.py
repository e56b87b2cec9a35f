"""
Geometric shapes convertible to pixel sets.

**Interface** (base.py)
    `Shape`: membership, row-major enumeration, size and `to_set`.

**Rectangles** (rectangle.py)
    `Rectangle`, the axis-aligned box used by pixel caches, and
    `RectangleOutline`.

**Curves** (circle.py, ellipse.py)
    `Circle`, `CircleOutline`, `Ellipse`, `EllipseOutline`.
"""

from .base import Shape, check_extent, scan
from .circle import Circle, CircleOutline
from .ellipse import Ellipse, EllipseOutline
from .rectangle import Rectangle, RectangleOutline

__all__ = [
    # Interface
    "Shape",
    "check_extent",
    "scan",
    # Rectangles
    "Rectangle",
    "RectangleOutline",
    # Curves
    "Circle",
    "CircleOutline",
    "Ellipse",
    "EllipseOutline",
]
