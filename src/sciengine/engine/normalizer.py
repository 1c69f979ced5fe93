"""Expression Normalizer — приведение пользовательского ввода к канонической форме

Шаги (порядок фиксирован):
1. Удаление пробелов, замена отображаемых глифов: × → *, ÷ → /, − → -, √( → sqrt(,
   √<число> → sqrt(<число>)
2. Подстановка констант десятичным текстом: π / PI / pi, отдельно стоящие e / E
3. Раскрытие постфиксного факториала n! (повторяется до исчезновения: 3!! → 6! → 720)

e, примыкающая к цифре (1e5, 2.5E-3), остаётся экспонентой научной записи.
"""

import logging
import re
from typing import Final

from sciengine.core.domain.constants import ScientificConstants
from sciengine.core.domain.evaluation import AngleMode
from sciengine.core.errors import DomainError, EvaluationError
from sciengine.core.math.numerical_safeguards import is_integral
from sciengine.core.math.special_functions import factorial, gamma
from sciengine.engine.precedence import format_operand

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

GLYPH_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    ("×", "*"),
    ("÷", "/"),
    ("−", "-"),
    ("√(", "sqrt("),
)

SQRT_NUMBER_PATTERN: Final[re.Pattern] = re.compile(r"√(\d+(?:\.\d*)?|\.\d+)")

# Константа распознаётся только как отдельный токен
PI_PATTERN: Final[re.Pattern] = re.compile(r"(?<![A-Za-z0-9_.])(?:π|PI|pi)(?![A-Za-z0-9_.])")
E_PATTERN: Final[re.Pattern] = re.compile(r"(?<![A-Za-z0-9_.])[eE](?![A-Za-z0-9_.])")

# [унарный минус] число ! ; минус унарный только в начале, после оператора или "("
FACTORIAL_PATTERN: Final[re.Pattern] = re.compile(
    r"(?P<sign>(?:^|(?<=[-+*/^%(]))-)?(?<![\w.])(?P<number>\d+(?:\.\d+)?)!"
)


# =============================================================================
# NORMALIZER
# =============================================================================


class ExpressionNormalizer:
    """Нормализация ввода перед разрешением функций."""

    def normalize(self, expression: str, mode: AngleMode = AngleMode.DEGREES) -> str:
        """Полный проход нормализации.

        Args:
            expression: Пользовательский ввод
            mode: Режим углов (не используется, передаётся по конвейеру)

        Returns:
            Строка из чисел, операторов, скобок и имён функций

        Raises:
            DomainError: Факториал отрицательного числа
            ArithmeticOverflowError: Факториал больше 170
        """
        expr = "".join(expression.split())
        expr = self.replace_glyphs(expr)
        expr = self.substitute_constants(expr)
        expr = self.expand_factorials(expr)
        logger.debug("Normalized %r -> %r (mode=%s)", expression, expr, mode.value)
        return expr

    def replace_glyphs(self, expression: str) -> str:
        expr = expression
        for glyph, replacement in GLYPH_REPLACEMENTS:
            expr = expr.replace(glyph, replacement)
        return SQRT_NUMBER_PATTERN.sub(r"sqrt(\1)", expr)

    def substitute_constants(self, expression: str) -> str:
        expr = PI_PATTERN.sub(repr(ScientificConstants.PI), expression)
        return E_PATTERN.sub(repr(ScientificConstants.E), expr)

    def expand_factorials(self, expression: str) -> str:
        """Раскрытие n! слева направо до исчезновения совпадений.

        Дробный операнд вычисляется как gamma(x + 1).

        Examples:
            >>> ExpressionNormalizer().expand_factorials("3!!")
            '720.0'
        """
        expr = expression
        while True:
            match = FACTORIAL_PATTERN.search(expr)
            if match is None:
                return expr

            fragment = match.group(0)
            if match.group("sign"):
                raise DomainError("Factorial is not defined for negative numbers", fragment)

            operand = float(match.group("number"))
            try:
                if is_integral(operand):
                    value = factorial(int(operand))
                else:
                    value = gamma(operand + 1.0)
            except EvaluationError as exc:
                if exc.fragment is None:
                    exc.fragment = fragment
                raise

            expr = expr[:match.start()] + format_operand(value) + expr[match.end():]
