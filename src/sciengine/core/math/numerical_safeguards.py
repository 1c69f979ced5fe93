"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость операций движка:
- Проверка NaN/Inf и преобразование их в типизированные ошибки
- Epsilon-сравнения float с учётом машинной точности
- Детекция "целых" float (для fast path факториала и форматирования)
- Проверка диапазона знаковых 64-битных целых

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют за пределы вычисления (→ DomainError / ArithmeticOverflowError)
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from sciengine.core.errors import ArithmeticOverflowError, DomainError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

# Границы знакового 64-битного целого (gcd/lcm/base conversion)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


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


def require_finite(value: float, fragment: str | None = None) -> float:
    """
    Гарантия конечности результата.

    Args:
        value: Результат вычисления
        fragment: Фрагмент выражения для контекста ошибки

    Returns:
        value, если оно конечно

    Raises:
        ArithmeticOverflowError: Если value = ±Inf
        DomainError: Если value = NaN

    Examples:
        >>> require_finite(2.5)
        2.5
    """
    if math.isnan(value):
        raise DomainError("Result is not a number", fragment)
    if math.isinf(value):
        raise ArithmeticOverflowError("Result is too large to represent", fragment)
    return value


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_integral(value: float) -> bool:
    """
    Проверка, что float представляет целое число без дробного остатка.

    Examples:
        >>> is_integral(6.0)
        True
        >>> is_integral(2.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return is_valid_float(value) and value == math.floor(value)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_int64(value: int, name: str) -> None:
    """
    Валидация, что целое укладывается в знаковый 64-битный диапазон.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        DomainError: Если value вне [INT64_MIN, INT64_MAX]
    """
    if not INT64_MIN <= value <= INT64_MAX:
        raise DomainError(f"{name} must fit in a signed 64-bit integer, got {value}")


def validate_whole_number(value: float, name: str) -> int:
    """
    Валидация, что аргумент является целым числом (int или целый float).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        Значение как int

    Raises:
        DomainError: Если value дробное, NaN или Inf
    """
    if isinstance(value, bool):
        raise DomainError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if not is_integral(value):
        raise DomainError(f"{name} must be an integer, got {value}")
    return int(value)
