"""Layout — отношения прямоугольников слоёв для canvas layer manager.

- RectRelationAnalyzer: перекрытие / касание / раздельность двух прямоугольников
"""

from .relation import (
    RectRelation,
    RectRelationAnalyzer,
    RectRelationConfig,
    RectRelationResult,
)

__all__ = [
    "RectRelation",
    "RectRelationAnalyzer",
    "RectRelationConfig",
    "RectRelationResult",
]
