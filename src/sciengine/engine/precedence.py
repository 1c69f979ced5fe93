"""Precedence Evaluator — вычисление арифметической строки без функций

Двухуровневое рекурсивное вычисление:
- Скобки раскрываются изнутри наружу (самая внутренняя группа без вложенных скобок)
- Аддитивный уровень {+, -} поверх мультипликативного {*, /, ^, %}
- Левая ассоциативность на обоих уровнях (2^3^2 == 64)

Правило знака: оператор является бинарным только если непосредственно
следует за цифрой или точкой. `-` в начале строки, после `(` или после
другого оператора принадлежит операнду; `-` внутри экспоненты (1e-5) тоже.
"""

import logging
import math
import re
from decimal import Decimal
from typing import Final

from sciengine.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    DomainError,
    MalformedExpressionError,
)
from sciengine.core.math.numerical_safeguards import require_finite

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

ADDITIVE_OPERATORS: Final[str] = "+-"
MULTIPLICATIVE_OPERATORS: Final[str] = "*/^%"

# Символы, которыми может заканчиваться числовой операнд
_OPERAND_END_CHARS: Final[str] = "0123456789."

# Десятичный литерал: знак, целая/дробная часть, экспонента
NUMBER_PATTERN: Final[re.Pattern] = re.compile(
    r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)

# Самая внутренняя группа: скобки без вложенных скобок
GROUP_PATTERN: Final[re.Pattern] = re.compile(r"\(([^()]*)\)")


# =============================================================================
# TEXT HELPERS
# =============================================================================


def format_operand(value: float) -> str:
    """Десятичная запись float без экспоненты для подстановки в выражение.

    Запись точная: float(format_operand(x)) == x.

    Examples:
        >>> format_operand(720.0)
        '720.0'
        >>> format_operand(1e-05)
        '0.00001'
    """
    return format(Decimal(repr(value)), "f")


def substitute_value(expression: str, start: int, end: int, value: float) -> str:
    """Замена expression[start:end] на десятичную запись value.

    Raises:
        MalformedExpressionError: Если подстановка склеивается с соседним
            числом, идентификатором или скобкой (неявное умножение не поддерживается)
    """
    before = expression[:start]
    after = expression[end:]

    if before and (before[-1].isalnum() or before[-1] in "._)"):
        raise MalformedExpressionError(
            "Missing operator before group", expression[max(0, start - 1):end]
        )
    if after and (after[0].isalnum() or after[0] in "._("):
        raise MalformedExpressionError(
            "Missing operator after group", expression[start:end + 1]
        )

    text = format_operand(value)

    # Знак перед отрицательной подстановкой сворачивается: 2-(-3) → 2+3.0,
    # -(-5) → 5.0, 2*+(-3) → 2*-3.0. Перед "!" не сворачивается: -(-3)! - ошибка домена.
    if text.startswith("-") and before and before[-1] in "+-" and not after.startswith("!"):
        sign = "+" if before[-1] == "-" else "-"
        before = before[:-1]
        text = text[1:]
        if before and before[-1] in _OPERAND_END_CHARS + ")":
            text = sign + text
        elif sign == "-":
            text = "-" + text

    return before + text + after


def split_binary(expression: str, operators: str) -> tuple[list[str], list[str]]:
    """Разбиение строки на операнды и бинарные операторы одного уровня.

    Оператор считается бинарным только если предыдущий символ - цифра или точка.

    Examples:
        >>> split_binary("2*-3+1e-5", "+-")
        (['2*-3', '1e-5'], ['+'])
    """
    operands: list[str] = []
    operators_found: list[str] = []
    start = 0

    for index, char in enumerate(expression):
        if (
            char in operators
            and index > start
            and expression[index - 1] in _OPERAND_END_CHARS
        ):
            operands.append(expression[start:index])
            operators_found.append(char)
            start = index + 1

    operands.append(expression[start:])
    return operands, operators_found


def parse_operand(text: str, context: str) -> float:
    """Разбор одного числового операнда.

    Raises:
        MalformedExpressionError: Пустой операнд или не десятичный литерал
        ArithmeticOverflowError: Литерал вне диапазона float
    """
    if not text:
        raise MalformedExpressionError("Missing operand", context)
    if NUMBER_PATTERN.fullmatch(text) is None:
        raise MalformedExpressionError(f"Invalid operand '{text}'", text)
    return require_finite(float(text), text)


# =============================================================================
# PRECEDENCE EVALUATOR
# =============================================================================


class PrecedenceEvaluator:
    """Вычисление строки из чисел, бинарных операторов и скобок.

    Порядок:
    1. Раскрытие самых внутренних скобок (рекурсивно)
    2. Разбиение по + / - и свёртка слева направо
    3. Каждый аддитивный сегмент - разбиение по * / ^ % и свёртка слева направо
    """

    def evaluate(self, expression: str) -> float:
        """Вычисление выражения со скобками.

        Raises:
            MalformedExpressionError: Пустые или несогласованные скобки, пустой операнд
            DivisionByZeroError: Деление или остаток по нулю
            DomainError: Отрицательное основание с дробной степенью
            ArithmeticOverflowError: Переполнение float
        """
        expr = expression
        while True:
            match = GROUP_PATTERN.search(expr)
            if match is None:
                break
            inner = match.group(1)
            if not inner:
                raise MalformedExpressionError("Empty parentheses", match.group(0))
            expr = substitute_value(expr, match.start(), match.end(), self.evaluate(inner))

        if "(" in expr or ")" in expr:
            raise MalformedExpressionError("Mismatched parentheses", expr)

        return self.evaluate_flat(expr)

    def evaluate_flat(self, expression: str) -> float:
        """Вычисление строки без скобок."""
        if not expression:
            raise MalformedExpressionError("Empty expression")

        segments, operators = split_binary(expression, ADDITIVE_OPERATORS)
        result = self._evaluate_multiplicative(segments[0], expression)

        for operator, segment in zip(operators, segments[1:]):
            operand = self._evaluate_multiplicative(segment, expression)
            if operator == "+":
                result += operand
            else:
                result -= operand

        return require_finite(result, expression)

    def _evaluate_multiplicative(self, segment: str, context: str) -> float:
        operands, operators = split_binary(segment, MULTIPLICATIVE_OPERATORS)
        result = parse_operand(operands[0], context)

        for operator, operand_text in zip(operators, operands[1:]):
            operand = parse_operand(operand_text, context)
            result = apply_operator(operator, result, operand, segment)

        return result


def apply_operator(operator: str, left: float, right: float, fragment: str) -> float:
    """Применение мультипликативного оператора к двум операндам.

    Raises:
        DivisionByZeroError: left / 0, left % 0, 0 ^ (отрицательное)
        DomainError: отрицательное основание с дробной степенью
        ArithmeticOverflowError: результат вне диапазона float
    """
    if operator == "*":
        result = left * right
    elif operator == "/":
        if right == 0.0:
            raise DivisionByZeroError("Division by zero", fragment)
        result = left / right
    elif operator == "%":
        if right == 0.0:
            raise DivisionByZeroError("Modulo by zero", fragment)
        result = math.fmod(left, right)
    elif operator == "^":
        if left == 0.0 and right < 0.0:
            raise DivisionByZeroError("Zero raised to a negative power", fragment)
        try:
            result = math.pow(left, right)
        except OverflowError:
            raise ArithmeticOverflowError("Power is too large to represent", fragment)
        except ValueError:
            raise DomainError(
                "Negative base requires an integer exponent", fragment
            )
    else:
        raise MalformedExpressionError(f"Unknown operator '{operator}'", fragment)

    return require_finite(result, fragment)
