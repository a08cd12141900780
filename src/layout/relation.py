"""Rect Relation — классификация отношения двух прямоугольников слоёв

Используется менеджером слоёв canvas для решения, перекрывает ли слой
соседний (нужна перерисовка) или только примыкает к нему.

Порядок проверок:
1. is_rect_intersection (касание тоже считается)
2. get_rect_intersection (только пересечение положительной площади)
3. get_rect_touching с допуском touch_tolerance_px (только без перекрытия)

Классификация:
- OVERLAP: пересечение положительной площади
- TOUCH: сторона в пределах допуска и перпендикулярные проекции пересекаются
- DISJOINT: всё остальное (в т.ч. касание с нулевой линией касания)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.domain.shapes import NULL_RECT, LinearTouch, Rect
from src.core.math.geometry import (
    get_rect_intersection,
    get_rect_touching,
    is_rect_intersection,
)
from src.core.math.numerical_safeguards import validate_non_negative

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Допуск касания по умолчанию (пиксели)
DEFAULT_TOUCH_TOLERANCE_PX: Final[float] = 0.0


class RectRelation(str, Enum):
    """Отношение двух прямоугольников"""

    OVERLAP = "OVERLAP"
    TOUCH = "TOUCH"
    DISJOINT = "DISJOINT"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class RectRelationResult:
    """Результат анализа отношения прямоугольников."""

    relation: RectRelation

    intersects: bool  # is_rect_intersection (касание включено)
    has_area_overlap: bool  # пересечение положительной площади
    intersection: Rect  # NULL_RECT без перекрытия
    touching: LinearTouch | None  # линия касания (только без перекрытия)

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RectRelationConfig:
    """Конфигурация анализатора.

    touch_tolerance_px — допустимое расстояние между сторонами,
    при котором прямоугольники считаются касающимися.
    """

    touch_tolerance_px: float = DEFAULT_TOUCH_TOLERANCE_PX

    def __post_init__(self):
        validate_non_negative(self.touch_tolerance_px, "touch_tolerance_px")


# =============================================================================
# ANALYZER
# =============================================================================


class RectRelationAnalyzer:
    """Анализатор отношения двух прямоугольников слоёв."""

    def __init__(self, config: RectRelationConfig | None = None):
        """Инициализация анализатора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or RectRelationConfig()

    def evaluate(self, rect1: Rect, rect2: Rect) -> RectRelationResult:
        """Классификация отношения rect2 к rect1.

        Args:
            rect1: базовый прямоугольник
            rect2: проверяемый прямоугольник

        Returns:
            RectRelationResult
        """
        intersects = is_rect_intersection(rect1, rect2)
        intersection = get_rect_intersection(rect1, rect2)
        has_area_overlap = intersection != NULL_RECT

        if has_area_overlap:
            result = RectRelationResult(
                relation=RectRelation.OVERLAP,
                intersects=intersects,
                has_area_overlap=True,
                intersection=intersection,
                touching=None,
                details=f"overlap w={intersection.w} h={intersection.h}",
            )
            logger.debug("Rect relation: %s", result.details)
            return result

        touching = get_rect_touching(rect1, rect2, self.config.touch_tolerance_px)

        if touching is not None and touching.c2 > touching.c1:
            relation = RectRelation.TOUCH
            details = f"touch {touching.dir.value} [{touching.c1}, {touching.c2}]"
        elif touching is not None:
            relation = RectRelation.DISJOINT
            details = f"edge {touching.dir.value} within tolerance, no common segment"
        else:
            relation = RectRelation.DISJOINT
            details = "disjoint"

        logger.debug("Rect relation: %s", details)

        return RectRelationResult(
            relation=relation,
            intersects=intersects,
            has_area_overlap=False,
            intersection=NULL_RECT,
            touching=touching,
            details=details,
        )
