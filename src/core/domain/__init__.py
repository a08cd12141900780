"""
Domain models and value objects.

Contains planar value objects: Coord, Vector, Rect, RectEdges, RectangularLine.
"""

from src.core.domain.shapes import (
    NULL_RECT,
    ZERO_LINE,
    Coord,
    Direction,
    LinearTouch,
    Rect,
    RectangularLine,
    RectEdges,
    Vector,
)

__all__ = [
    # Enums
    "Direction",
    # Points & vectors
    "Coord",
    "Vector",
    # Rectangles & lines
    "Rect",
    "RectEdges",
    "RectangularLine",
    "LinearTouch",
    # Sentinels
    "NULL_RECT",
    "ZERO_LINE",
]
