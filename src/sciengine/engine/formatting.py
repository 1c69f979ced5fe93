"""Result Formatting — представление результата на границе с UI

- format_number: целые без десятичной точки, прочие - precision значащих цифр
- to_fraction: приближение цепной дробью (eps=1e-10, <= 100 итераций,
  знаменатель < 10000, иначе None)
- to_display / from_display: замена * ↔ ×, / ↔ ÷
- format_result: "Error: <сообщение>" для ошибок
"""

import math
from typing import Final

from sciengine.core.domain.evaluation import EvaluationResult
from sciengine.core.math.numerical_safeguards import is_integral, is_valid_float

# =============================================================================
# CONSTANTS
# =============================================================================

DEFAULT_PRECISION: Final[int] = 12

FRACTION_EPS: Final[float] = 1e-10
FRACTION_MAX_ITERATIONS: Final[int] = 100
FRACTION_MAX_DENOMINATOR: Final[int] = 10000

# Целые выше этой границы печатаются в научной записи
INTEGRAL_DISPLAY_LIMIT: Final[float] = 1e15

DISPLAY_GLYPHS: Final[tuple[tuple[str, str], ...]] = (
    ("*", "×"),
    ("/", "÷"),
)


# =============================================================================
# NUMBERS
# =============================================================================


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """
    Текстовое представление результата.

    Examples:
        >>> format_number(14.0)
        '14'
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(-2.5)
        '-2.5'
    """
    if not is_valid_float(value):
        return str(value)

    if is_integral(value) and abs(value) < INTEGRAL_DISPLAY_LIMIT:
        return str(int(value))

    return f"{value:.{precision}g}"


def to_fraction(
    value: float,
    eps: float = FRACTION_EPS,
    max_iterations: int = FRACTION_MAX_ITERATIONS,
    max_denominator: int = FRACTION_MAX_DENOMINATOR,
) -> tuple[int, int] | None:
    """
    Приближение value рациональной дробью через цепную дробь.

    Returns:
        (numerator, denominator) с denominator > 0, или None если
        знаменатель достигает max_denominator или нет сходимости

    Examples:
        >>> to_fraction(0.75)
        (3, 4)
        >>> to_fraction(-1 / 3)
        (-1, 3)
        >>> to_fraction(math.pi) is None
        True
    """
    if not is_valid_float(value):
        return None

    sign = -1 if value < 0 else 1
    x = abs(value)

    a0 = math.floor(x)
    if x - a0 < eps:
        return (sign * int(a0), 1)

    # Подходящие дроби p/q
    p_prev, q_prev = 1, 0
    p_curr, q_curr = int(a0), 1
    remainder = x

    for _ in range(max_iterations):
        fractional = remainder - math.floor(remainder)
        if fractional == 0.0:
            break
        remainder = 1.0 / fractional
        a = math.floor(remainder)

        p_next = a * p_curr + p_prev
        q_next = a * q_curr + q_prev
        if q_next >= max_denominator:
            return None

        p_prev, q_prev, p_curr, q_curr = p_curr, q_curr, p_next, q_next
        if abs(p_curr / q_curr - x) < eps:
            return (sign * p_curr, q_curr)

    return None


def format_fraction(value: float) -> str | None:
    """
    Запись "n/d" (или "n" для целых), None если дробь не найдена.

    Examples:
        >>> format_fraction(0.5)
        '1/2'
        >>> format_fraction(3.0)
        '3'
    """
    fraction = to_fraction(value)
    if fraction is None:
        return None

    numerator, denominator = fraction
    if denominator == 1:
        return str(numerator)
    return f"{numerator}/{denominator}"


# =============================================================================
# RESULT / DISPLAY
# =============================================================================


def format_result(
    result: EvaluationResult,
    precision: int = DEFAULT_PRECISION,
    as_fraction: bool = False,
) -> str:
    """
    Текст для отображения результата вычисления.

    Ошибка никогда не заменяется числом по умолчанию.
    """
    if not result.ok:
        return f"Error: {result.error_message}"

    if as_fraction:
        fraction = format_fraction(result.value)
        if fraction is not None:
            return fraction

    return format_number(result.value, precision)


def to_display(expression: str) -> str:
    """Канонические операторы → отображаемые глифы (* → ×, / → ÷)."""
    text = expression
    for operator, glyph in DISPLAY_GLYPHS:
        text = text.replace(operator, glyph)
    return text


def from_display(expression: str) -> str:
    """Отображаемые глифы → канонические операторы (× → *, ÷ → /)."""
    text = expression
    for operator, glyph in DISPLAY_GLYPHS:
        text = text.replace(glyph, operator)
    return text
