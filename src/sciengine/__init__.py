"""
sciengine — scientific expression evaluation engine.

Turns a user-typed infix string into a number, or into a classified error:

    >>> from sciengine import AngleMode, evaluate
    >>> evaluate("2+3*4", AngleMode.RADIANS).value
    14.0
"""

from sciengine.core.domain import AngleMode, EvaluationResult
from sciengine.core.errors import (
    ArithmeticOverflowError,
    DivisionByZeroError,
    DomainError,
    ErrorKind,
    EvaluationError,
    MalformedExpressionError,
    UnknownFunctionError,
)
from sciengine.engine import EngineConfig, ExpressionEngine, evaluate

__version__ = "1.0.0"

__all__ = [
    "AngleMode",
    "EvaluationResult",
    "ErrorKind",
    "EvaluationError",
    "DomainError",
    "ArithmeticOverflowError",
    "DivisionByZeroError",
    "UnknownFunctionError",
    "MalformedExpressionError",
    "EngineConfig",
    "ExpressionEngine",
    "evaluate",
]
