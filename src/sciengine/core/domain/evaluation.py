"""
Evaluation — режим углов и результат вычисления

AngleMode выбирается внешним слоем и неизменен в пределах одного вызова.
EvaluationResult — дискриминированный результат: либо конечный float,
либо классифицированная ошибка с фрагментом выражения.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sciengine.core.errors import ErrorKind, EvaluationError, error_for_kind


# =============================================================================
# ENUMS
# =============================================================================


class AngleMode(str, Enum):
    """Режим интерпретации аргументов sin/cos/tan"""

    DEGREES = "DEG"
    RADIANS = "RAD"

    @classmethod
    def parse(cls, value: "AngleMode | str") -> "AngleMode":
        """
        Разбор режима из enum, значения или имени (без учёта регистра).

        Examples:
            >>> AngleMode.parse("deg")
            <AngleMode.DEGREES: 'DEG'>
            >>> AngleMode.parse("radians")
            <AngleMode.RADIANS: 'RAD'>
        """
        if isinstance(value, cls):
            return value

        normalized = str(value).strip().upper()
        for member in cls:
            if normalized in (member.value, member.name):
                return member

        raise ValueError(f"Unknown angle mode: {value!r}")


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class EvaluationResult:
    """Результат вычисления выражения."""

    expression: str
    mode: AngleMode

    # Успех
    value: float | None = None

    # Ошибка
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    fragment: str | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error_kind is None):
            raise ValueError("EvaluationResult must carry exactly one of value or error_kind")
        if self.value is not None and not math.isfinite(self.value):
            raise ValueError(f"EvaluationResult value must be finite, got {self.value}")

    @classmethod
    def success(cls, expression: str, mode: AngleMode, value: float) -> "EvaluationResult":
        return cls(expression=expression, mode=mode, value=float(value))

    @classmethod
    def failure(
        cls, expression: str, mode: AngleMode, error: EvaluationError
    ) -> "EvaluationResult":
        return cls(
            expression=expression,
            mode=mode,
            error_kind=error.kind,
            error_message=error.message,
            fragment=error.fragment,
        )

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def unwrap(self) -> float:
        """
        Значение результата или исходная ошибка.

        Raises:
            EvaluationError: Подкласс, соответствующий error_kind
        """
        if self.error_kind is not None:
            raise error_for_kind(self.error_kind, self.error_message or "", self.fragment)
        return self.value

    def to_dict(self) -> dict[str, Any]:
        """Сериализация в форму контракта evaluation_result."""
        data: dict[str, Any] = {
            "expression": self.expression,
            "mode": self.mode.value,
            "ok": self.ok,
        }
        if self.ok:
            data["value"] = self.value
        else:
            data["error"] = {
                "kind": self.error_kind.value,
                "message": self.error_message,
                "fragment": self.fragment,
            }
        return data
