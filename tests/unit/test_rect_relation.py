"""Тесты для RectRelationAnalyzer

Покрытие:
- OVERLAP (пересечение положительной площади)
- TOUCH (касание сторон, в т.ч. с допуском)
- DISJOINT (раздельные, угловое касание с нулевой линией)
- Конфигурация (валидация допуска)
"""

import pytest

from src.core.domain.shapes import NULL_RECT, Direction, LinearTouch, Rect
from src.layout import (
    RectRelation,
    RectRelationAnalyzer,
    RectRelationConfig,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def analyzer():
    """Анализатор с нулевым допуском."""
    return RectRelationAnalyzer()


@pytest.fixture
def base_rect():
    return Rect(x=0, y=0, w=10, h=10)


# =============================================================================
# TESTS
# =============================================================================


class TestOverlap:
    """Пересечение положительной площади"""

    def test_overlap(self, analyzer, base_rect):
        result = analyzer.evaluate(base_rect, Rect(x=5, y=5, w=10, h=10))

        assert result.relation == RectRelation.OVERLAP
        assert result.intersects is True
        assert result.has_area_overlap is True
        assert result.intersection == Rect(x=5, y=5, w=5, h=5)
        assert result.touching is None


class TestTouch:
    """Касание сторон"""

    def test_edge_touch(self, analyzer, base_rect):
        """Касание: is_rect_intersection True, площадь нулевая"""
        result = analyzer.evaluate(base_rect, Rect(x=10, y=2, w=5, h=5))

        assert result.relation == RectRelation.TOUCH
        assert result.intersects is True
        assert result.has_area_overlap is False
        assert result.intersection == NULL_RECT
        assert result.touching == LinearTouch(c1=2, c2=7, dir=Direction.RIGHT)

    def test_touch_within_tolerance(self, base_rect):
        analyzer = RectRelationAnalyzer(RectRelationConfig(touch_tolerance_px=3))
        result = analyzer.evaluate(base_rect, Rect(x=12, y=2, w=5, h=5))

        assert result.relation == RectRelation.TOUCH
        assert result.intersects is False
        assert result.touching.dir == Direction.RIGHT

    def test_gap_beyond_tolerance(self, analyzer, base_rect):
        result = analyzer.evaluate(base_rect, Rect(x=12, y=2, w=5, h=5))

        assert result.relation == RectRelation.DISJOINT
        assert result.touching is None


class TestDisjoint:
    """Раздельные прямоугольники"""

    def test_far_apart(self, analyzer, base_rect):
        result = analyzer.evaluate(base_rect, Rect(x=50, y=50, w=5, h=5))

        assert result.relation == RectRelation.DISJOINT
        assert result.intersects is False
        assert result.intersection == NULL_RECT
        assert result.details == "disjoint"

    def test_corner_touch(self, analyzer, base_rect):
        """Угловое касание: сторона найдена, но общий отрезок нулевой"""
        result = analyzer.evaluate(base_rect, Rect(x=10, y=10, w=5, h=5))

        assert result.relation == RectRelation.DISJOINT
        assert result.intersects is True
        assert result.touching == LinearTouch(c1=0, c2=0, dir=Direction.RIGHT)


class TestConfig:
    """Конфигурация анализатора"""

    def test_default_tolerance(self):
        assert RectRelationAnalyzer().config.touch_tolerance_px == 0.0

    def test_negative_tolerance_rejected(self):
        with pytest.raises(ValueError, match="touch_tolerance_px must be non-negative"):
            RectRelationConfig(touch_tolerance_px=-1)
