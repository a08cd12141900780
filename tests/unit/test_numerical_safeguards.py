"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. IEEE-754 деление (inf, -inf, NaN, знак нуля)
2. NaN/Inf проверки
3. Валидацию параметров
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ IEEE-754 ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division(self) -> None:
        """Обычное деление без изменений"""
        assert ieee_divide(1.0, 4.0) == 0.25
        assert ieee_divide(-9.0, 3.0) == -3.0

    def test_positive_by_zero(self) -> None:
        assert ieee_divide(3.0, 0.0) == math.inf

    def test_negative_by_zero(self) -> None:
        assert ieee_divide(-3.0, 0.0) == -math.inf

    def test_signed_zero_denominator(self) -> None:
        """Знак -0.0 в знаменателе учитывается"""
        assert ieee_divide(3.0, -0.0) == -math.inf
        assert ieee_divide(-3.0, -0.0) == math.inf

    def test_zero_by_zero_is_nan(self) -> None:
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(0, 0))

    def test_nan_numerator(self) -> None:
        assert math.isnan(ieee_divide(math.nan, 0.0))
        assert math.isnan(ieee_divide(math.nan, 2.0))

    def test_negative_zero_result_preserved(self) -> None:
        """0 / отрицательное → -0.0"""
        result = ieee_divide(0.0, -5.0)
        assert result == 0
        assert math.copysign(1.0, result) == -1.0


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_invalid(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateNonNegative:
    """Тесты для validate_non_negative"""

    def test_valid(self) -> None:
        validate_non_negative(0.0, "value")
        validate_non_negative(3.5, "value")

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="tolerance must be non-negative"):
            validate_non_negative(-1.0, "tolerance")

    def test_nan_raises(self) -> None:
        with pytest.raises(ValueError, match="must be a valid float"):
            validate_non_negative(math.nan, "tolerance")


# =============================================================================
# ТЕСТЫ ПУБЛИЧНОГО API
# =============================================================================


class TestPublicSurface:
    """Экспорт src.core.math"""

    def test_all_names_resolve(self) -> None:
        import src.core.math as core_math

        for name in core_math.__all__:
            assert hasattr(core_math, name), name

    def test_no_epsilon_constants_exported(self) -> None:
        """Из safeguards экспортируются только функции, без констант"""
        import src.core.math as core_math

        assert not [name for name in core_math.__all__ if name.startswith("EPS_")]
        assert "is_close" not in core_math.__all__
        assert {"ieee_divide", "is_valid_float", "validate_non_negative"} <= set(
            core_math.__all__
        )
