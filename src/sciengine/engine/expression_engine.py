"""Expression Engine — композиционный корень конвейера вычисления

Конвейер: ExpressionNormalizer → FunctionCallResolver → PrecedenceEvaluator

Контракт:
- evaluate(expression, mode) -> EvaluationResult (никогда не бросает ошибку вычисления)
- Пустой ввод → 0.0
- Первая ошибка любого этапа классифицируется и возвращается в результате
- Ошибки вызывающего кода пробрасываются: TypeError для не-строки,
  ValueError для нераспознанного режима углов (AngleMode.parse)
- Движок stateless: одинаковый ввод → одинаковый результат, без кэша
"""

import logging

from sciengine.core.domain.evaluation import AngleMode, EvaluationResult
from sciengine.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    EvaluationError,
    MalformedExpressionError,
)
from sciengine.core.math.numerical_safeguards import require_finite
from sciengine.engine.config import EngineConfig
from sciengine.engine.function_resolver import FunctionCallResolver
from sciengine.engine.normalizer import ExpressionNormalizer
from sciengine.engine.precedence import PrecedenceEvaluator

logger = logging.getLogger(__name__)


class ExpressionEngine:
    """Вычисление инфиксных выражений с функциями, константами и факториалом.

    Потокобезопасен без блокировок: экземпляр не хранит состояния между вызовами.
    """

    def __init__(self, config: EngineConfig | None = None):
        """
        Args:
            config: конфигурация движка (опционально, используется default)
        """
        self.config = config or EngineConfig()
        self.normalizer = ExpressionNormalizer()
        self.evaluator = PrecedenceEvaluator()
        self.resolver = FunctionCallResolver(self.evaluator, self.normalizer)

    def evaluate(
        self,
        expression: str,
        mode: AngleMode | str | None = None,
    ) -> EvaluationResult:
        """Вычисление выражения.

        Args:
            expression: Пользовательский ввод
            mode: Режим углов; None → config.default_mode

        Returns:
            EvaluationResult со значением или классифицированной ошибкой

        Raises:
            TypeError: Если expression не строка
            ValueError: Если mode не распознан
        """
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, got {type(expression).__name__}")

        angle_mode = self.config.default_mode if mode is None else AngleMode.parse(mode)

        try:
            value = self._run_pipeline(expression, angle_mode)
        except EvaluationError as exc:
            logger.info("Evaluation of %r failed: %s [%s]", expression, exc, exc.kind.value)
            return EvaluationResult.failure(expression, angle_mode, exc)
        except (ArithmeticError, ValueError) as exc:
            error = self._classify(exc)
            logger.info("Evaluation of %r failed: %s [%s]", expression, error, error.kind.value)
            return EvaluationResult.failure(expression, angle_mode, error)

        return EvaluationResult.success(expression, angle_mode, value)

    def evaluate_or_raise(
        self,
        expression: str,
        mode: AngleMode | str | None = None,
    ) -> float:
        """Вычисление с пробросом EvaluationError вместо результата."""
        return self.evaluate(expression, mode).unwrap()

    def _run_pipeline(self, expression: str, mode: AngleMode) -> float:
        compact = "".join(expression.split())
        if not compact:
            return 0.0

        if len(compact) > self.config.max_expression_length:
            raise MalformedExpressionError(
                f"Expression is longer than {self.config.max_expression_length} characters"
            )

        normalized = self.normalizer.normalize(compact, mode)
        flat = self.resolver.resolve(normalized, mode)
        logger.debug("Flattened %r -> %r", expression, flat)

        return require_finite(self.evaluator.evaluate(flat), flat)

    @staticmethod
    def _classify(exc: Exception) -> EvaluationError:
        if isinstance(exc, ZeroDivisionError):
            return DivisionByZeroError("Division by zero")
        if isinstance(exc, OverflowError):
            return ArithmeticOverflowError("Result is too large to represent")
        return MalformedExpressionError(f"Invalid expression: {exc}")


_DEFAULT_ENGINE = ExpressionEngine()


def evaluate(expression: str, mode: AngleMode | str | None = None) -> EvaluationResult:
    """Вычисление выражения движком с конфигурацией по умолчанию."""
    return _DEFAULT_ENGINE.evaluate(expression, mode)
