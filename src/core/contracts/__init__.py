"""
Contract Validation Module

Модуль для валидации plain-записей (интервалы, точки, векторы,
прямоугольники), которыми внешние модули обмениваются с ядром.
"""

from .records import (
    complement_records,
    coord_record,
    intersection_record,
    multi_intersection_records,
    rect_intersection_record,
    rect_touching_record,
    union_records,
    vector_record,
)
from .validators import (
    ContractValidator,
    CoordValidator,
    IntervalSetValidator,
    IntervalValidator,
    RectValidator,
    SchemaLoader,
    VectorValidator,
    validate_coord,
    validate_interval,
    validate_interval_set,
    validate_rect,
    validate_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntervalValidator",
    "IntervalSetValidator",
    "CoordValidator",
    "RectValidator",
    "VectorValidator",
    # Functions
    "validate_interval",
    "validate_interval_set",
    "validate_coord",
    "validate_rect",
    "validate_vector",
    # Record facade
    "union_records",
    "intersection_record",
    "complement_records",
    "multi_intersection_records",
    "rect_intersection_record",
    "rect_touching_record",
    "vector_record",
    "coord_record",
]
