"""
Domain models and value objects.

Contains the angle mode, the evaluation result and the constants library.
"""

from sciengine.core.domain.constants import (
    CONSTANTS,
    ConstantItem,
    ScientificConstants,
    get_constant,
    search_constants,
)
from sciengine.core.domain.evaluation import AngleMode, EvaluationResult

__all__ = [
    # Evaluation
    "AngleMode",
    "EvaluationResult",
    # Constants library
    "CONSTANTS",
    "ConstantItem",
    "ScientificConstants",
    "get_constant",
    "search_constants",
]
