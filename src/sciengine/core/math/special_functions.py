"""
Special Functions — factorial, Gamma, комбинаторика

Модуль реализует специальные функции "с нуля", без scipy/math.gamma:
- factorial(n) итеративным произведением 2..n
- gamma(x) через аппроксимацию Ланцоша (g=7, 8 коэффициентов)
  с формулой отражения для x < 0.5
- permutation (nPr) и combination (nCr) через factorial

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. factorial(n) == n * factorial(n - 1), factorial(0) == 1
2. factorial(n > 170) → ArithmeticOverflowError (не представимо в float)
3. gamma(n) == factorial(n - 1) для целых n >= 1 (fast path, точное значение)
4. Порядок умножений в аппроксимации Ланцоша фиксирован

ФОРМУЛЫ:
    y = x - 1
    sum = 0.99999999999980993 + Σ g[i] / (y + i + 1)
    t = y + 8 - 0.5
    Γ(x) = sqrt(2π) · (t^(y + 0.5) · (e^(-t) · sum))

    Γ(x) = π / (sin(πx) · Γ(1 - x))         (x < 0.5)
"""

import math
from typing import Final

from sciengine.core.errors import ArithmeticOverflowError, DomainError
from sciengine.core.math.numerical_safeguards import (
    is_integral,
    require_finite,
    validate_whole_number,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Максимальный аргумент factorial, результат которого представим в float
# 170! ≈ 7.257e306, 171! > sys.float_info.max
FACTORIAL_MAX_ARG: Final[int] = 170

# Коэффициенты Ланцоша (g = 7, n = 9)
LANCZOS_COEFFICIENTS: Final[tuple[float, ...]] = (
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

# Начальное значение ряда Ланцоша
LANCZOS_SERIES_BASE: Final[float] = 0.99999999999980993


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> float:
    """
    Факториал неотрицательного целого.

    Args:
        n: Целое >= 0 (целый float допускается)

    Returns:
        n! как float

    Raises:
        DomainError: Если n < 0 или n не целое
        ArithmeticOverflowError: Если n > FACTORIAL_MAX_ARG

    Examples:
        >>> factorial(0)
        1.0
        >>> factorial(5)
        120.0
    """
    n = validate_whole_number(n, "n")

    if n < 0:
        raise DomainError(f"Factorial is not defined for negative numbers, got {n}", f"{n}!")

    if n > FACTORIAL_MAX_ARG:
        raise ArithmeticOverflowError(
            f"Factorial of {n} is too large to represent "
            f"(maximum argument is {FACTORIAL_MAX_ARG})",
            f"{n}!",
        )

    result = 1.0
    for i in range(2, n + 1):
        result *= i

    return result


# =============================================================================
# GAMMA
# =============================================================================


def gamma(x: float) -> float:
    """
    Гамма-функция через аппроксимацию Ланцоша.

    Порядок ветвей:
    1. Целое x > 0 → factorial(x - 1) (точное значение)
    2. Целое x <= 0 → полюс, DomainError
    3. x < 0.5 → формула отражения (рекурсивный вызов для 1 - x)
    4. Иначе → ряд Ланцоша

    Args:
        x: Аргумент (любой конечный float кроме полюсов 0, -1, -2, ...)

    Returns:
        Γ(x)

    Raises:
        DomainError: Если x - полюс или NaN/Inf
        ArithmeticOverflowError: Если Γ(x) не представима в float

    Examples:
        >>> gamma(5)
        24.0
        >>> round(gamma(0.5) ** 2, 9) == round(math.pi, 9)
        True
    """
    if not math.isfinite(x):
        raise DomainError(f"Gamma is not defined for {x}")

    if is_integral(x):
        if x > 0:
            return factorial(int(x) - 1)
        raise DomainError(f"Gamma has a pole at non-positive integer {int(x)}")

    if x < 0.5:
        # Формула отражения: Γ(x) = π / (sin(πx) · Γ(1 - x))
        sin_pi_x = math.sin(math.pi * x)
        try:
            gamma_1_minus_x = gamma(1.0 - x)
        except ArithmeticOverflowError:
            # Γ(1 - x) вне диапазона float → Γ(x) исчезающе мала, знак у 1/sin(πx)
            return math.copysign(0.0, sin_pi_x)
        return require_finite(math.pi / (sin_pi_x * gamma_1_minus_x))

    y = x - 1.0
    series = LANCZOS_SERIES_BASE
    for i, coefficient in enumerate(LANCZOS_COEFFICIENTS):
        series += coefficient / (y + (i + 1))

    t = y + len(LANCZOS_COEFFICIENTS) - 0.5

    sqrt_2_pi = math.sqrt(2.0 * math.pi)
    try:
        t_power = math.pow(t, y + 0.5)
    except OverflowError:
        raise ArithmeticOverflowError(f"Gamma of {x} is too large to represent")
    exp_neg_t = math.exp(-t)

    return require_finite(sqrt_2_pi * (t_power * (exp_neg_t * series)))


# =============================================================================
# КОМБИНАТОРИКА
# =============================================================================


def _validate_n_r(n: int, r: int, operation: str) -> tuple[int, int]:
    n = validate_whole_number(n, "n")
    r = validate_whole_number(r, "r")
    if n < 0 or r < 0 or r > n:
        raise DomainError(f"Invalid arguments for {operation}: n={n}, r={r}")
    return n, r


def permutation(n: int, r: int) -> float:
    """
    Число размещений nPr = n! / (n - r)!

    Raises:
        DomainError: Если n < 0, r < 0 или r > n
        ArithmeticOverflowError: Если n > FACTORIAL_MAX_ARG

    Examples:
        >>> permutation(5, 2)
        20.0
    """
    n, r = _validate_n_r(n, r, "permutation")
    return factorial(n) / factorial(n - r)


def combination(n: int, r: int) -> float:
    """
    Число сочетаний nCr = n! / (r! · (n - r)!)

    Raises:
        DomainError: Если n < 0, r < 0 или r > n
        ArithmeticOverflowError: Если n > FACTORIAL_MAX_ARG

    Examples:
        >>> combination(5, 2)
        10.0
    """
    n, r = _validate_n_r(n, r, "combination")
    return factorial(n) / (factorial(r) * factorial(n - r))
