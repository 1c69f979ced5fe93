"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. NaN/Inf детекцию и преобразование в типизированные ошибки
2. Epsilon-сравнения float
3. Детекцию целых float
4. Валидацию int64 и целых аргументов
"""

import math

import pytest

from sciengine.core.errors import ArithmeticOverflowError, DomainError
from sciengine.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT64_MAX,
    INT64_MIN,
    is_close,
    is_integral,
    is_valid_float,
    require_finite,
    validate_int64,
    validate_whole_number,
)

# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)
        assert is_valid_float(5e-324)

    def test_nan_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestRequireFinite:
    """Тесты для require_finite"""

    def test_finite_passthrough(self) -> None:
        """Конечное значение возвращается без изменений"""
        assert require_finite(2.5) == 2.5
        assert require_finite(-0.0) == 0.0

    def test_nan_raises_domain_error(self) -> None:
        """NaN → DomainError"""
        with pytest.raises(DomainError, match="not a number"):
            require_finite(float("nan"))

    def test_inf_raises_overflow(self) -> None:
        """±Inf → ArithmeticOverflowError с фрагментом"""
        with pytest.raises(ArithmeticOverflowError) as exc_info:
            require_finite(float("-inf"), "10^400")
        assert exc_info.value.fragment == "10^400"

    def test_overflow_is_builtin_overflow(self) -> None:
        """ArithmeticOverflowError ловится как builtin OverflowError"""
        with pytest.raises(OverflowError):
            require_finite(float("inf"))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_default_tolerances(self) -> None:
        assert EPS_FLOAT_COMPARE_REL == 1e-9
        assert EPS_FLOAT_COMPARE_ABS == 1e-12

    def test_close_values(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)
        assert is_close(0.0, 1e-13)
        assert is_close(1e10, 1e10 + 1.0)

    def test_distant_values(self) -> None:
        assert not is_close(1.0, 1.1)
        assert not is_close(0.0, 1e-6)


class TestIsIntegral:
    """Тесты для is_integral"""

    def test_integral_floats(self) -> None:
        assert is_integral(6.0)
        assert is_integral(-3.0)
        assert is_integral(0.0)
        assert is_integral(1e20)

    def test_fractional_floats(self) -> None:
        assert not is_integral(2.5)
        assert not is_integral(-0.1)

    def test_non_finite_not_integral(self) -> None:
        assert not is_integral(float("inf"))
        assert not is_integral(float("nan"))


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestValidateInt64:
    """Тесты для validate_int64"""

    def test_bounds_accepted(self) -> None:
        validate_int64(INT64_MAX, "a")
        validate_int64(INT64_MIN, "a")
        validate_int64(0, "a")

    def test_out_of_range_rejected(self) -> None:
        with pytest.raises(DomainError, match="64-bit"):
            validate_int64(INT64_MAX + 1, "a")
        with pytest.raises(DomainError, match="64-bit"):
            validate_int64(INT64_MIN - 1, "b")


class TestValidateWholeNumber:
    """Тесты для validate_whole_number"""

    def test_int_passthrough(self) -> None:
        assert validate_whole_number(5, "n") == 5
        assert validate_whole_number(-2, "n") == -2

    def test_integral_float_converted(self) -> None:
        result = validate_whole_number(4.0, "n")
        assert result == 4
        assert isinstance(result, int)

    def test_fractional_rejected(self) -> None:
        with pytest.raises(DomainError, match="n must be an integer"):
            validate_whole_number(2.5, "n")

    def test_non_finite_rejected(self) -> None:
        with pytest.raises(DomainError):
            validate_whole_number(math.inf, "n")

    def test_bool_rejected(self) -> None:
        with pytest.raises(DomainError):
            validate_whole_number(True, "n")
