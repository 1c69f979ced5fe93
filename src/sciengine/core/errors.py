"""
Evaluation Errors — типизированные ошибки вычисления выражений

Исчерпывающий набор классов ошибок движка:
- DomainError: аргумент вне области определения (отрицательный факториал,
  r > n в комбинаторике, log/sqrt от недопустимого аргумента, неверное основание)
- ArithmeticOverflowError: результат не представим в float
- DivisionByZeroError: деление или остаток от деления на ноль
- UnknownFunctionError: вызов функции, не входящей в известный набор
- MalformedExpressionError: синтаксически некорректный ввод

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая ошибка несёт ErrorKind и фрагмент выражения, вызвавший её
2. Каждая ошибка также наследует ближайшее builtin-исключение
   (ValueError / OverflowError / ZeroDivisionError)
3. Первая возникшая ошибка пробрасывается без частичного восстановления
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Классификация ошибок вычисления"""

    DOMAIN = "DOMAIN"
    OVERFLOW = "OVERFLOW"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    UNKNOWN_FUNCTION = "UNKNOWN_FUNCTION"
    MALFORMED_EXPRESSION = "MALFORMED_EXPRESSION"


class EvaluationError(Exception):
    """
    Базовый класс ошибок движка.

    Args:
        message: Человекочитаемое описание
        fragment: Фрагмент выражения, вызвавший ошибку (optional)
    """

    kind: ErrorKind = ErrorKind.MALFORMED_EXPRESSION

    def __init__(self, message: str, fragment: str | None = None):
        super().__init__(message)
        self.message = message
        self.fragment = fragment

    def __str__(self) -> str:
        if self.fragment:
            return f"{self.message} (near '{self.fragment}')"
        return self.message


class DomainError(EvaluationError, ValueError):
    """Аргумент операции вне её математической области определения."""

    kind = ErrorKind.DOMAIN


class ArithmeticOverflowError(EvaluationError, OverflowError):
    """Результат слишком велик для float (например, factorial(171))."""

    kind = ErrorKind.OVERFLOW


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    """Деление или взятие остатка по нулю."""

    kind = ErrorKind.DIVISION_BY_ZERO


class UnknownFunctionError(EvaluationError, ValueError):
    """Имя функции не входит в набор поддерживаемых."""

    kind = ErrorKind.UNKNOWN_FUNCTION


class MalformedExpressionError(EvaluationError, ValueError):
    """Выражение не может быть сведено к скаляру (скобки, пустой операнд, ...)."""

    kind = ErrorKind.MALFORMED_EXPRESSION


_ERROR_CLASSES: dict[ErrorKind, type[EvaluationError]] = {
    ErrorKind.DOMAIN: DomainError,
    ErrorKind.OVERFLOW: ArithmeticOverflowError,
    ErrorKind.DIVISION_BY_ZERO: DivisionByZeroError,
    ErrorKind.UNKNOWN_FUNCTION: UnknownFunctionError,
    ErrorKind.MALFORMED_EXPRESSION: MalformedExpressionError,
}


def error_for_kind(kind: ErrorKind, message: str, fragment: str | None = None) -> EvaluationError:
    """Восстановление исключения по ErrorKind (для EvaluationResult.unwrap)."""
    return _ERROR_CLASSES[ErrorKind(kind)](message, fragment)
