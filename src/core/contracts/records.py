"""
Records — plain-record фасад ядра

Внешние модули (canvas, DOM, storage) обмениваются с ядром JSON-подобными
записями: пары [start, end], {x, y}, {x, y, w, h}, {length, angle}.
Фасад:
1. Валидирует входные записи по JSON Schema контрактам
2. Строит domain модели
3. Вызывает функции ядра
4. Возвращает результат в виде plain-записей (None сохраняется как None)

Невалидная запись → jsonschema.ValidationError (ядро не вызывается).
"""

import logging
from typing import Any, Dict, List

from jsonschema import ValidationError

from src.core.contracts.validators import (
    CoordValidator,
    IntervalSetValidator,
    IntervalValidator,
    RectValidator,
    VectorValidator,
)
from src.core.domain.shapes import Coord, Rect, Vector
from src.core.math.geometry import (
    get_coord,
    get_rect_intersection,
    get_rect_touching,
    get_vector,
)
from src.core.math.intervals import (
    Interval,
    complement_intervals,
    interval_intersection,
    multi_intersection,
    union_intervals,
)

logger = logging.getLogger(__name__)

IntervalRecord = List[float]
Record = Dict[str, Any]


# =============================================================================
# HELPERS
# =============================================================================


def _to_interval_records(intervals: List[Interval]) -> List[IntervalRecord]:
    return [[start, end] for start, end in intervals]


def _checked(validator_cls, data: Any, name: str) -> None:
    try:
        validator_cls().validate(data)
    except ValidationError as e:
        logger.warning("Rejected %s record %r: %s", name, data, e.message)
        raise


# =============================================================================
# INTERVAL RECORDS
# =============================================================================


def union_records(intervals: List[IntervalRecord]) -> List[IntervalRecord]:
    """Объединение интервалов: [[a, b], ...] → [[a, b], ...]"""
    _checked(IntervalSetValidator, intervals, "interval_set")
    return _to_interval_records(union_intervals(intervals))


def intersection_record(a: IntervalRecord, b: IntervalRecord) -> IntervalRecord | None:
    """Пересечение двух интервалов или None"""
    _checked(IntervalValidator, a, "interval")
    _checked(IntervalValidator, b, "interval")
    result = interval_intersection(a, b)
    if result is None:
        return None
    return [result[0], result[1]]


def complement_records(
    domain: IntervalRecord,
    intervals: List[IntervalRecord],
) -> List[IntervalRecord]:
    """Дополнение интервалов внутри домена"""
    _checked(IntervalValidator, domain, "interval")
    _checked(IntervalSetValidator, intervals, "interval_set")
    return _to_interval_records(complement_intervals(domain, intervals))


def multi_intersection_records(
    domain: IntervalRecord,
    intervals: List[IntervalRecord],
) -> List[IntervalRecord]:
    """Покрытые интервалами части домена"""
    _checked(IntervalValidator, domain, "interval")
    _checked(IntervalSetValidator, intervals, "interval_set")
    return _to_interval_records(multi_intersection(domain, intervals))


# =============================================================================
# GEOMETRY RECORDS
# =============================================================================


def rect_intersection_record(rect1: Record, rect2: Record) -> Record:
    """
    Пересечение прямоугольников {x, y, w, h}.

    Returns:
        {x, y, w, h}; {0, 0, 0, 0} если нет пересечения положительной площади
    """
    _checked(RectValidator, rect1, "rect")
    _checked(RectValidator, rect2, "rect")
    result = get_rect_intersection(Rect(**rect1), Rect(**rect2))
    return result.model_dump()


def rect_touching_record(rect1: Record, rect2: Record, pixel: float = 0) -> Record | None:
    """
    Касание прямоугольников.

    Returns:
        {c1, c2, dir} (dir — строка 'left'/'right'/'top'/'bottom') или None
    """
    _checked(RectValidator, rect1, "rect")
    _checked(RectValidator, rect2, "rect")
    touch = get_rect_touching(Rect(**rect1), Rect(**rect2), pixel)
    if touch is None:
        return None
    return touch.model_dump(mode="json")


def vector_record(components: Record) -> Record:
    """{x, y} → {length, angle}"""
    _checked(CoordValidator, components, "coord")
    return get_vector(Coord(**components)).model_dump()


def coord_record(vector: Record) -> Record:
    """{length, angle} → {x, y}"""
    _checked(VectorValidator, vector, "vector")
    return get_coord(Vector(**vector)).model_dump()
