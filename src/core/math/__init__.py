"""
Core math modules

Интервальная арифметика и планарная геометрия на чистых функциях.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # IEEE-754 division
    ieee_divide,
    # Checks
    is_valid_float,
    validate_non_negative,
)

# Intervals
from src.core.math.intervals import (
    Interval,
    complement_intervals,
    interval_intersection,
    multi_intersection,
    ratio_range,
    union_intervals,
)

# Geometry
from src.core.math.geometry import (
    add_coords,
    distance,
    get_coord,
    get_line_intersection,
    get_rect_intersection,
    get_rect_touching,
    get_vector,
    is_point_inside_rectangle,
    is_rect_intersection,
    rect_to_edges,
)

__all__ = [
    # Numerical Safeguards — Functions
    "ieee_divide",
    "is_valid_float",
    "validate_non_negative",
    # Intervals — Types
    "Interval",
    # Intervals — Functions
    "union_intervals",
    "interval_intersection",
    "multi_intersection",
    "complement_intervals",
    "ratio_range",
    # Geometry — Functions
    "add_coords",
    "distance",
    "get_coord",
    "get_vector",
    "rect_to_edges",
    "get_line_intersection",
    "is_rect_intersection",
    "get_rect_intersection",
    "get_rect_touching",
    "is_point_inside_rectangle",
]
