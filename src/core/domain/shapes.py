"""
Shapes — плоские геометрические value objects

Immutable Pydantic модели точек, векторов и прямоугольников в экранных
координатах (начало в левом верхнем углу, ось y направлена вниз).

Модели не проверяют геометрические инварианты (w >= 0, c1 <= c2):
функции геометрии доверяют вызывающему коду. NaN/Inf допустимы.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class Direction(str, Enum):
    """Сторона прямоугольника, вдоль которой происходит касание"""

    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


# =============================================================================
# POINTS & VECTORS
# =============================================================================


class Coord(BaseModel):
    """Точка {x, y}"""

    x: float = Field(..., description="Координата x")
    y: float = Field(..., description="Координата y (вниз)")

    model_config = {"frozen": True}


class Vector(BaseModel):
    """
    Вектор в полярной форме {length, angle}.

    angle — угол с осью, направленной вниз (радианы). Для вырожденного
    вектора (0, 0) угол равен NaN.
    """

    length: float = Field(..., description="Длина вектора")
    angle: float = Field(..., description="Угол с осью, направленной вниз (радианы)")

    model_config = {"frozen": True}


# =============================================================================
# RECTANGLES & LINES
# =============================================================================


class Rect(BaseModel):
    """Прямоугольник {x, y, w, h}, (x, y) — левый верхний угол"""

    x: float = Field(..., description="Левая граница")
    y: float = Field(..., description="Верхняя граница")
    w: float = Field(..., description="Ширина")
    h: float = Field(..., description="Высота")

    model_config = {"frozen": True}


class RectEdges(BaseModel):
    """Прямоугольник в виде границ {x1, y1, x2, y2} = {x, y, x+w, y+h}"""

    x1: float
    y1: float
    x2: float
    y2: float

    model_config = {"frozen": True}


class RectangularLine(BaseModel):
    """
    Проекция отрезка на одну ось {c1, c2}.

    c1 — координата одного конца, c2 — другого (x или y).
    """

    c1: float
    c2: float

    model_config = {"frozen": True}


class LinearTouch(RectangularLine):
    """Линия касания двух прямоугольников с указанием стороны"""

    dir: Direction | None = Field(None, description="Сторона первого прямоугольника")


# =============================================================================
# SENTINELS
# =============================================================================

# "Нет пересечения" для get_line_intersection
ZERO_LINE: Final[RectangularLine] = RectangularLine(c1=0.0, c2=0.0)

# "Нет пересечения" для get_rect_intersection
NULL_RECT: Final[Rect] = Rect(x=0.0, y=0.0, w=0.0, h=0.0)
