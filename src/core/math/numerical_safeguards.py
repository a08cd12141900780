"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает предсказуемое поведение float-операций геометрии и
интервальной арифметики:
- IEEE-754 деление (x/0 → ±inf, 0/0 → NaN) вместо ZeroDivisionError
- Проверка NaN/Inf
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции ядра никогда не бросают ZeroDivisionError (результат по IEEE-754)
2. Знак нуля (-0.0) сохраняется во всех операциях
3. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление по правилам IEEE-754.

    Python бросает ZeroDivisionError при делении float на ноль, тогда как
    геометрические формулы (например, atan(x / y)) опираются на
    бесконечности и NaN. Функция возвращает тот же результат, что и
    аппаратное деление:

    - denominator != 0: обычное деление
    - 0 / 0, NaN / 0: NaN
    - x / ±0: ±inf, знак = sign(x) * sign(denominator) (учитывается -0.0)

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Результат деления (может быть inf/-inf/NaN)

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(3.0, 0.0)
        inf
        >>> ieee_divide(3.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0:
        return numerator / denominator

    if numerator == 0 or math.isnan(numerator) or math.isnan(denominator):
        return math.nan

    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
