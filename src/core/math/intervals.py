"""
Intervals — алгебра замкнутых числовых интервалов

Модуль реализует операции над множествами интервалов [start, end]:
- union_intervals: объединение (слияние пересекающихся и соприкасающихся)
- interval_intersection: пересечение двух интервалов
- multi_intersection: части домена, покрытые хотя бы одним интервалом
- complement_intervals: дополнение множества интервалов внутри домена
- ratio_range: пропорциональный перевод числа из одного диапазона в другой

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результаты всегда упорядочены по возрастанию start
2. Соприкосновение (b == c для [a,b] и [c,d]) считается пересечением (<=)
   одинаково во всех операциях
3. Вырожденный интервал [a, a] валиден и не отбрасывается union/intersection
4. Отрезки дополнения всегда имеют строго положительную ширину
5. Входные интервалы не валидируются: start > end даёт неопределённый,
   но не падающий результат

ФОРМУЛЫ:
    intersection([a1, a2], [b1, b2]) = [max(a1, b1), min(a2, b2)], если start <= end
    complement(D, I) ∪ multi_intersection(D, I) = D, и они не пересекаются
    ratio_range(n, [f1, f2], [t1, t2]) = (n - f1) * (t2 - t1) / (f2 - f1) + t1
"""

from typing import Iterable, Sequence, Tuple

from src.core.math.numerical_safeguards import ieee_divide

# Замкнутый интервал [start, end]
Interval = Tuple[float, float]

# На вход принимается любая пара (list, tuple)
IntervalLike = Sequence[float]


# =============================================================================
# UNION
# =============================================================================


def union_intervals(intervals: Iterable[IntervalLike]) -> list[Interval]:
    """
    Объединение интервалов.

    Сортирует по start и за один проход сливает пересекающиеся и
    соприкасающиеся интервалы.

    Args:
        intervals: Интервалы в произвольном порядке (может быть пусто)

    Returns:
        Отсортированный список непересекающихся, несоприкасающихся интервалов

    Examples:
        >>> union_intervals([[6, 8], [1, 7], [2, 4], [9, 10]])
        [(1, 8), (9, 10)]
        >>> union_intervals([[2, 2], [4, 4]])
        [(2, 2), (4, 4)]
        >>> union_intervals([])
        []
    """
    ordered = sorted(intervals, key=lambda interval: interval[0])
    if not ordered:
        return []

    merged: list[Interval] = []
    open_start, open_end = ordered[0][0], ordered[0][1]

    for start, end in ordered[1:]:
        if start <= open_end:
            open_end = max(open_end, end)
        else:
            merged.append((open_start, open_end))
            open_start, open_end = start, end

    merged.append((open_start, open_end))
    return merged


# =============================================================================
# INTERSECTION
# =============================================================================


def interval_intersection(a: IntervalLike, b: IntervalLike) -> Interval | None:
    """
    Пересечение двух интервалов.

    Пересечение существует при start <= end; результат с start == end
    является валидным точечным интервалом, а не "пустым пересечением".

    Args:
        a: Первый интервал
        b: Второй интервал

    Returns:
        Общий интервал или None, если интервалы не пересекаются

    Examples:
        >>> interval_intersection([3, 8], [5, 9])
        (5, 8)
        >>> interval_intersection([1, 4], [4, 9])
        (4, 4)
        >>> interval_intersection([1, 4], [6, 9]) is None
        True
    """
    start = max(a[0], b[0])
    end = min(a[1], b[1])

    if start > end:
        return None

    return (start, end)


def multi_intersection(
    domain: IntervalLike,
    intervals: Iterable[IntervalLike],
) -> list[Interval]:
    """
    Части домена, покрытые хотя бы одним интервалом.

    Интервалы сначала объединяются, затем каждый кусок обрезается по домену;
    куски вне домена отбрасываются.

    Args:
        domain: Домен (универсум)
        intervals: Интервалы в произвольном порядке

    Returns:
        Отсортированный список покрытых частей домена

    Examples:
        >>> multi_intersection([3, 10], [[1, 5], [1, 4], [8, 9], [12, 15]])
        [(3, 5), (8, 9)]
    """
    pieces: list[Interval] = []

    for merged in union_intervals(intervals):
        piece = interval_intersection(domain, merged)
        if piece is not None:
            pieces.append(piece)

    return pieces


# =============================================================================
# COMPLEMENT
# =============================================================================


def complement_intervals(
    domain: IntervalLike,
    intervals: Iterable[IntervalLike],
) -> list[Interval]:
    """
    Дополнение множества интервалов внутри домена.

    Проходит по промежуткам между объединёнными интервалами: перед первым
    (от начала домена), между соседними и после последнего (до конца
    домена). Промежутки нулевой ширины отбрасываются.

    Args:
        domain: Домен (универсум)
        intervals: Интервалы в произвольном порядке

    Returns:
        Отсортированный список непокрытых частей домена

    Examples:
        >>> complement_intervals([1, 10], [[3, 5], [6, 8]])
        [(1, 3), (5, 6), (8, 10)]
        >>> complement_intervals([1, 10], [])
        [(1, 10)]
        >>> complement_intervals([1, 10], [[1, 10]])
        []
    """
    domain_start, domain_end = domain[0], domain[1]
    gaps: list[Interval] = []
    cursor = domain_start

    for start, end in union_intervals(intervals):
        gap_end = min(start, domain_end)
        if gap_end > cursor:
            gaps.append((cursor, gap_end))
        cursor = max(cursor, end)

    if domain_end > cursor:
        gaps.append((cursor, domain_end))

    return gaps


# =============================================================================
# RANGE MAPPING
# =============================================================================


def ratio_range(
    number: float,
    from_range: IntervalLike,
    to_range: IntervalLike,
) -> float:
    """
    Пропорциональный перевод числа из одной шкалы в другую.

    Число вне from_range экстраполируется линейно. Вырожденная исходная
    шкала (f1 == f2) даёт ±inf или NaN по IEEE-754.

    Args:
        number: Переводимое число
        from_range: Текущая шкала [f1, f2]
        to_range: Новая шкала [t1, t2]

    Returns:
        Число в новой шкале

    Examples:
        >>> ratio_range(6, [3, 9], [0, 100])
        50.0
        >>> ratio_range(20, [0, 10], [0, 100])
        200.0
    """
    scaled = (number - from_range[0]) * (to_range[1] - to_range[0])
    return ieee_divide(scaled, from_range[1] - from_range[0]) + to_range[0]
