"""Engine — конвейер вычисления выражений.

- ExpressionNormalizer: глифы, константы, факториал
- FunctionCallResolver: sin/cos/tan/sinh/cosh/tanh/ln/log/sqrt и группы
- PrecedenceEvaluator: {* / ^ %} над {+ -}, левая ассоциативность
- ExpressionEngine: композиция этапов и классификация ошибок
"""

from .config import EngineConfig
from .expression_engine import ExpressionEngine, evaluate
from .formatting import (
    format_fraction,
    format_number,
    format_result,
    from_display,
    to_display,
    to_fraction,
)
from .function_resolver import FunctionCallResolver, ScientificFunction
from .normalizer import ExpressionNormalizer
from .precedence import PrecedenceEvaluator

__all__ = [
    "EngineConfig",
    "ExpressionEngine",
    "evaluate",
    "ExpressionNormalizer",
    "FunctionCallResolver",
    "ScientificFunction",
    "PrecedenceEvaluator",
    "format_fraction",
    "format_number",
    "format_result",
    "from_display",
    "to_display",
    "to_fraction",
]
