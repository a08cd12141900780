"""
Geometry — планарная геометрия прямоугольников и векторов

Модуль реализует:
- Конверсию {x, y} <-> {length, angle} (угол с осью, направленной вниз)
- Сумму координат и евклидово расстояние
- Разложение прямоугольника на границы
- Пересечение отрезков на одной оси (1D примитив)
- Пересечение и касание прямоугольников
- Проверку попадания точки внутрь прямоугольника

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключений на корректном входе
2. "Нет пересечения" передаётся sentinel-значениями (ZERO_LINE, NULL_RECT, None)
3. is_rect_intersection считает касание пересечением, а get_rect_intersection
   для касания (нулевая площадь) возвращает NULL_RECT
4. get_line_intersection для касания в точке возвращает ZERO_LINE, который
   неотличим от "нет пересечения" без отдельной проверки

ФОРМУЛЫ:
    length = sqrt(x^2 + y^2)
    angle = atan(x / y)      (x/0 → ±inf, 0/0 → NaN)
    x = length * sin(angle), y = length * cos(angle)
"""

import math

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
from src.core.math.numerical_safeguards import ieee_divide, is_valid_float


# =============================================================================
# VECTORS & COORDINATES
# =============================================================================


def get_vector(components: Coord) -> Vector:
    """
    Вектор по компонентам: {x, y} => {length, angle}.

    Угол отсчитывается от оси, направленной вниз, и лежит в (-pi/2, pi/2].

    Особенности (сохраняются намеренно):
    - (0, 0) → angle = NaN
    - (0, y<0) → angle = -0.0, а не pi

    Args:
        components: x и y компоненты вектора

    Returns:
        Длина и направление вектора
    """
    x, y = components.x, components.y
    return Vector(
        length=math.sqrt(x * x + y * y),
        angle=math.atan(ieee_divide(x, y)),
    )


def get_coord(vector: Vector) -> Coord:
    """
    Компоненты по вектору: {length, angle} => {x, y}.

    Точная обратная функция к get_vector для векторов с y > 0.
    Бесконечный или NaN угол даёт (NaN, NaN).

    Args:
        vector: Длина и направление (угол с осью, направленной вниз)

    Returns:
        x и y компоненты вектора
    """
    if not is_valid_float(vector.angle):
        return Coord(x=math.nan, y=math.nan)

    return Coord(
        x=vector.length * math.sin(vector.angle),
        y=vector.length * math.cos(vector.angle),
    )


def add_coords(*coords: Coord) -> Coord:
    """Покомпонентная сумма координат (пустой вход → (0, 0))"""
    return Coord(
        x=sum((coord.x for coord in coords), 0.0),
        y=sum((coord.y for coord in coords), 0.0),
    )


def distance(a: Coord, b: Coord) -> float:
    """Евклидово расстояние между двумя точками"""
    return math.hypot(a.x - b.x, a.y - b.y)


# =============================================================================
# RECTANGLES
# =============================================================================


def rect_to_edges(rect: Rect) -> RectEdges:
    """Преобразование {x, y, w, h} в {x1, y1, x2, y2}"""
    return RectEdges(
        x1=rect.x,
        y1=rect.y,
        x2=rect.x + rect.w,
        y2=rect.y + rect.h,
    )


def get_line_intersection(line1: RectangularLine, line2: RectangularLine) -> RectangularLine:
    """
    Пересечение двух отрезков на одной оси (горизонтальных или вертикальных).

    Оба отрезка должны быть нормализованы (c1 <= c2). Сравнения строгие,
    поэтому касание в одной точке, как и отсутствие пересечения, даёт
    ZERO_LINE.

    Args:
        line1: {c1, c2}
        line2: {c1, c2}

    Returns:
        Общий отрезок {c1, c2} или ZERO_LINE
    """
    if line1.c1 < line2.c1:
        if line1.c2 <= line2.c1:
            # 1c1---1c2  2c1---2c2
            return ZERO_LINE
        if line1.c2 > line2.c2:
            # 1c1---2c1===2c2---1c2
            return RectangularLine(c1=line2.c1, c2=line2.c2)
        # 1c1---2c1===1c2---2c2
        return RectangularLine(c1=line2.c1, c2=line1.c2)

    if line1.c1 >= line2.c2:
        # 2c1---2c2  1c1---1c2
        return ZERO_LINE
    if line1.c2 < line2.c2:
        # 2c1---1c1===1c2---2c2
        return RectangularLine(c1=line1.c1, c2=line1.c2)
    # 2c1---1c1===2c2---1c2
    return RectangularLine(c1=line1.c1, c2=line2.c2)


def is_rect_intersection(rect1: Rect, rect2: Rect) -> bool:
    """
    Есть ли у двух прямоугольников общие точки.

    Касание сторон считается пересечением.

    Args:
        rect1: {x, y, w, h}
        rect2: {x, y, w, h}

    Returns:
        True, если прямоугольники пересекаются или касаются
    """
    r1 = rect_to_edges(rect1)
    r2 = rect_to_edges(rect2)
    return r1.x1 <= r2.x2 and r1.x2 >= r2.x1 and r1.y1 <= r2.y2 and r1.y2 >= r2.y1


def get_rect_intersection(rect1: Rect, rect2: Rect) -> Rect:
    """
    Прямоугольник пересечения.

    Проекции на оси x и y пересекаются независимо через
    get_line_intersection; пересечение существует только если обе
    проекции имеют строго положительную ширину.

    Args:
        rect1: {x, y, w, h}
        rect2: {x, y, w, h}

    Returns:
        Общий прямоугольник или NULL_RECT (в т.ч. при касании сторон)
    """
    x_line = get_line_intersection(
        RectangularLine(c1=rect1.x, c2=rect1.x + rect1.w),
        RectangularLine(c1=rect2.x, c2=rect2.x + rect2.w),
    )
    y_line = get_line_intersection(
        RectangularLine(c1=rect1.y, c2=rect1.y + rect1.h),
        RectangularLine(c1=rect2.y, c2=rect2.y + rect2.h),
    )

    w = x_line.c2 - x_line.c1
    h = y_line.c2 - y_line.c1

    if w > 0 and h > 0:
        return Rect(x=x_line.c1, y=y_line.c1, w=w, h=h)

    return NULL_RECT


def get_rect_touching(rect1: Rect, rect2: Rect, pixel: float = 0) -> LinearTouch | None:
    """
    Линия касания rect2 к внешней стороне rect1.

    Стороны проверяются в порядке left, right, top, bottom; побеждает
    первая, у которой расстояние до противоположной стороны rect2 не
    больше pixel. Для найденной стороны считается пересечение проекций на
    перпендикулярную ось. Если проекции не пересекаются, возвращается
    нулевая линия с указанием стороны.

    Args:
        rect1: {x, y, w, h}
        rect2: {x, y, w, h}
        pixel: Допустимое расстояние между сторонами (default: 0)

    Returns:
        {c1, c2, dir} или None, если ни одна сторона не касается
    """
    r1 = rect_to_edges(rect1)
    r2 = rect_to_edges(rect2)

    vertical = (RectangularLine(c1=r1.y1, c2=r1.y2), RectangularLine(c1=r2.y1, c2=r2.y2))
    horizontal = (RectangularLine(c1=r1.x1, c2=r1.x2), RectangularLine(c1=r2.x1, c2=r2.x2))

    if abs(r1.x1 - r2.x2) <= pixel:
        lines, direction = vertical, Direction.LEFT
    elif abs(r1.x2 - r2.x1) <= pixel:
        lines, direction = vertical, Direction.RIGHT
    elif abs(r1.y1 - r2.y2) <= pixel:
        lines, direction = horizontal, Direction.TOP
    elif abs(r1.y2 - r2.y1) <= pixel:
        lines, direction = horizontal, Direction.BOTTOM
    else:
        return None

    line = get_line_intersection(*lines)
    return LinearTouch(c1=line.c1, c2=line.c2, dir=direction)


def is_point_inside_rectangle(point: Coord, rectangle: Rect) -> bool:
    """
    Лежит ли точка строго внутри прямоугольника.

    Точка на границе считается снаружи.
    """
    return (
        rectangle.x < point.x < rectangle.x + rectangle.w
        and rectangle.y < point.y < rectangle.y + rectangle.h
    )
