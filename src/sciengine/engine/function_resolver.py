"""Function Call Resolver — разрешение вызовов научных функций снизу вверх

Алгоритм:
1. Найти самую левую самую внутреннюю группу name(body), где body без скобок
   (name может быть пустым - обычная группировка)
2. Вычислить body через PrecedenceEvaluator
3. Применить функцию name (sin/cos/tan учитывают AngleMode)
4. Подставить десятичный результат обратно и повторить

После разрешения строка содержит только числа и бинарные операторы.
Обратные тригонометрические функции не поддерживаются.
"""

import logging
import math
import re
from enum import Enum
from typing import Callable, Final

from sciengine.core.domain.evaluation import AngleMode
from sciengine.core.errors import (
    ArithmeticOverflowError,
    DomainError,
    EvaluationError,
    MalformedExpressionError,
    UnknownFunctionError,
)
from sciengine.core.math.numerical_safeguards import require_finite
from sciengine.engine.normalizer import ExpressionNormalizer
from sciengine.engine.precedence import PrecedenceEvaluator, substitute_value

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

CALL_PATTERN: Final[re.Pattern] = re.compile(
    r"(?P<name>[A-Za-z_][A-Za-z0-9_]*)?\((?P<body>[^()]*)\)"
)


# =============================================================================
# FUNCTIONS
# =============================================================================


def _ln(x: float) -> float:
    if x <= 0.0:
        raise DomainError(f"ln is only defined for positive numbers, got {x}")
    return math.log(x)


def _log10(x: float) -> float:
    if x <= 0.0:
        raise DomainError(f"log is only defined for positive numbers, got {x}")
    return math.log10(x)


def _sqrt(x: float) -> float:
    if x < 0.0:
        raise DomainError(f"sqrt is not defined for negative numbers, got {x}")
    return math.sqrt(x)


class ScientificFunction(Enum):
    """Поддерживаемые функции: (имя, преобразование, зависит от AngleMode)"""

    SIN = ("sin", math.sin, True)
    COS = ("cos", math.cos, True)
    TAN = ("tan", math.tan, True)
    SINH = ("sinh", math.sinh, False)
    COSH = ("cosh", math.cosh, False)
    TANH = ("tanh", math.tanh, False)
    LN = ("ln", _ln, False)
    LOG = ("log", _log10, False)
    SQRT = ("sqrt", _sqrt, False)

    def __init__(self, label: str, transform: Callable[[float], float], mode_sensitive: bool):
        self.label = label
        self.transform = transform
        self.mode_sensitive = mode_sensitive

    @classmethod
    def lookup(cls, name: str) -> "ScientificFunction":
        """Поиск функции по имени (без учёта регистра).

        Raises:
            UnknownFunctionError: Если имя не поддерживается
        """
        normalized = name.lower()
        for function in cls:
            if function.label == normalized:
                return function
        raise UnknownFunctionError(f"Unknown function '{name}'", name)

    def apply(self, argument: float, mode: AngleMode) -> float:
        """Применение функции с учётом режима углов.

        Raises:
            DomainError: Аргумент вне области определения или результат NaN
            ArithmeticOverflowError: Результат вне диапазона float
        """
        if self.mode_sensitive and mode == AngleMode.DEGREES:
            argument = math.radians(argument)

        try:
            result = self.transform(argument)
        except EvaluationError:
            raise
        except OverflowError:
            raise ArithmeticOverflowError(f"{self.label} result is too large to represent")
        except ValueError:
            raise DomainError(f"{self.label} is not defined for {argument}")

        return require_finite(result)


# =============================================================================
# RESOLVER
# =============================================================================


class FunctionCallResolver:
    """Разрешение всех вызовов функций и групп в выражении."""

    def __init__(
        self,
        evaluator: PrecedenceEvaluator | None = None,
        normalizer: ExpressionNormalizer | None = None,
    ):
        """
        Args:
            evaluator: вычислитель тел вызовов
            normalizer: используется для раскрытия факториала после групп, (2+1)!
        """
        self.evaluator = evaluator or PrecedenceEvaluator()
        self.normalizer = normalizer or ExpressionNormalizer()

    def resolve(self, expression: str, mode: AngleMode) -> str:
        """Подстановка результатов всех вызовов; возвращает строку без скобок.

        Raises:
            UnknownFunctionError: Неизвестное имя функции
            DomainError: Аргумент вне области определения
            MalformedExpressionError: Пустые скобки, неявное умножение
        """
        expr = expression
        while True:
            match = CALL_PATTERN.search(expr)
            if match is None:
                return expr

            call = match.group(0)
            name = match.group("name")
            body = match.group("body")
            if not body:
                raise MalformedExpressionError("Empty parentheses", call)

            try:
                function = ScientificFunction.lookup(name) if name else None
                argument = self.evaluator.evaluate(body)
                value = function.apply(argument, mode) if function else argument
            except EvaluationError as exc:
                if exc.fragment is None:
                    exc.fragment = call
                raise

            expr = substitute_value(expr, match.start(), match.end(), value)
            logger.debug("Resolved %s -> %r", call, value)

            if "!" in expr:
                expr = self.normalizer.expand_factorials(expr)
