"""
Contract Validation Module

Модуль для валидации JSON контрактов sciengine.
"""

from .validators import (
    ContractValidator,
    EvaluationResultValidator,
    SchemaLoader,
    validate_evaluation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EvaluationResultValidator",
    # Functions
    "validate_evaluation_result",
]
