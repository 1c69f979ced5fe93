"""Конфигурация ExpressionEngine."""

from dataclasses import dataclass

from sciengine.core.domain.evaluation import AngleMode


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация движка вычислений.

    - default_mode: режим углов, если вызывающий слой его не передал
    - max_expression_length: верхняя граница длины ввода (после удаления пробелов)
    """

    default_mode: AngleMode = AngleMode.DEGREES
    max_expression_length: int = 1000

    def __post_init__(self) -> None:
        if self.max_expression_length <= 0:
            raise ValueError(
                f"max_expression_length must be positive, got {self.max_expression_length}"
            )
