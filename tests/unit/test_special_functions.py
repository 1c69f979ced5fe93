"""
Тесты для Special Functions — factorial, Gamma, комбинаторика

Проверяемые инварианты:
1. factorial(n) == n * factorial(n - 1), factorial(0) == 1
2. factorial(171) → ArithmeticOverflowError, factorial(-1) → DomainError
3. gamma(n) == factorial(n - 1) для целых n >= 1
4. gamma(0.5) ≈ sqrt(π), формула отражения для x < 0.5
5. nPr / nCr и их доменные ограничения
"""

import math

import pytest

from sciengine.core.errors import ArithmeticOverflowError, DomainError
from sciengine.core.math.special_functions import (
    FACTORIAL_MAX_ARG,
    LANCZOS_COEFFICIENTS,
    LANCZOS_SERIES_BASE,
    combination,
    factorial,
    gamma,
    permutation,
)


# =============================================================================
# ТЕСТЫ: factorial
# =============================================================================


class TestFactorial:
    """Тесты factorial: рекуррентность, границы, ошибки."""

    def test_base_cases(self):
        """0! == 1! == 1."""
        assert factorial(0) == 1.0
        assert factorial(1) == 1.0

    def test_small_values(self):
        assert factorial(3) == 6.0
        assert factorial(5) == 120.0
        assert factorial(10) == 3628800.0

    def test_recurrence_over_full_range(self):
        """factorial(n) == n * factorial(n - 1) для всех n в [1, 170]."""
        for n in range(1, FACTORIAL_MAX_ARG + 1):
            assert factorial(n) == n * factorial(n - 1)

    def test_max_argument_is_finite(self):
        assert FACTORIAL_MAX_ARG == 170
        assert math.isfinite(factorial(170))
        assert factorial(170) > 7.25e306

    def test_overflow_above_170(self):
        with pytest.raises(ArithmeticOverflowError, match="too large"):
            factorial(171)

    def test_negative_rejected(self):
        with pytest.raises(DomainError, match="negative"):
            factorial(-1)

    def test_fractional_rejected(self):
        with pytest.raises(DomainError):
            factorial(2.5)

    def test_integral_float_accepted(self):
        assert factorial(4.0) == 24.0

    def test_returns_float(self):
        assert isinstance(factorial(3), float)


# =============================================================================
# ТЕСТЫ: gamma
# =============================================================================


class TestGamma:
    """Тесты gamma: fast path, Ланцош, отражение, полюса."""

    def test_coefficient_table(self):
        """Таблица Ланцоша: 8 коэффициентов, g[0] и база ряда фиксированы."""
        assert len(LANCZOS_COEFFICIENTS) == 8
        assert LANCZOS_COEFFICIENTS[0] == 676.5203681218851
        assert LANCZOS_SERIES_BASE == 0.99999999999980993

    @pytest.mark.parametrize("x", [1, 2, 3, 5, 10, 20, 100, 171])
    def test_integer_fast_path(self, x):
        """gamma(x) == factorial(x - 1) для целых x >= 1."""
        assert math.isclose(gamma(x), factorial(x - 1), rel_tol=1e-9)

    def test_integer_fast_path_is_exact(self):
        assert gamma(5) == 24.0
        assert gamma(5.0) == 24.0

    def test_half(self):
        """Γ(0.5) = sqrt(π)."""
        assert abs(gamma(0.5) - math.sqrt(math.pi)) < 1e-6

    def test_lanczos_matches_reference(self):
        """Ланцош совпадает с math.gamma в пределах float tolerance."""
        for x in (1.5, 2.5, 3.7, 7.25, 12.1, 30.5):
            assert math.isclose(gamma(x), math.gamma(x), rel_tol=1e-10)

    def test_reflection_below_half(self):
        """x < 0.5 → формула отражения."""
        for x in (0.25, 0.1, -0.5, -1.5, -2.7):
            assert math.isclose(gamma(x), math.gamma(x), rel_tol=1e-9)

    def test_reflection_identity(self):
        """Γ(x)·Γ(1-x) = π / sin(πx)."""
        x = 0.3
        assert math.isclose(
            gamma(x) * gamma(1 - x), math.pi / math.sin(math.pi * x), rel_tol=1e-10
        )

    @pytest.mark.parametrize("x", [0, 0.0, -1, -2.0, -10])
    def test_poles_rejected(self, x):
        with pytest.raises(DomainError, match="pole"):
            gamma(x)

    def test_overflow(self):
        with pytest.raises(ArithmeticOverflowError):
            gamma(200.5)

    @pytest.mark.parametrize("x", [-170.5, -200.5, -171.5])
    def test_large_negative_underflows_to_zero(self, x):
        """Γ(1 - x) переполняется → Γ(x) = π / (sin(πx)·∞) = ±0."""
        assert gamma(x) == pytest.approx(0.0, abs=1e-300)

    def test_large_negative_zero_sign(self):
        """Знак нуля совпадает со знаком Γ(x) на интервале (-n-1, -n)."""
        assert math.copysign(1.0, gamma(-200.5)) == -1.0
        assert math.copysign(1.0, gamma(-171.5)) == 1.0

    def test_non_finite_rejected(self):
        with pytest.raises(DomainError):
            gamma(float("nan"))


# =============================================================================
# ТЕСТЫ: комбинаторика
# =============================================================================


class TestPermutation:
    """Тесты permutation (nPr)."""

    def test_values(self):
        assert permutation(5, 2) == 20.0
        assert permutation(5, 5) == 120.0
        assert permutation(5, 0) == 1.0

    @pytest.mark.parametrize("n,r", [(-1, 0), (3, -1), (3, 4)])
    def test_invalid_arguments(self, n, r):
        with pytest.raises(DomainError, match="permutation"):
            permutation(n, r)

    def test_overflow_propagates(self):
        with pytest.raises(ArithmeticOverflowError):
            permutation(171, 1)


class TestCombination:
    """Тесты combination (nCr)."""

    def test_values(self):
        assert combination(5, 2) == 10.0
        assert combination(5, 0) == 1.0
        assert combination(5, 5) == 1.0
        assert combination(10, 3) == 120.0

    def test_symmetry(self):
        for r in range(0, 11):
            assert math.isclose(combination(10, r), combination(10, 10 - r))

    def test_r_greater_than_n(self):
        with pytest.raises(DomainError, match="combination"):
            combination(5, 7)

    def test_negative_arguments(self):
        with pytest.raises(DomainError):
            combination(-5, 2)
