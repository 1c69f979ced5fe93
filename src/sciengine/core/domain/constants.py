"""
Constants — библиотека именованных математических и физических констант

Immutable Pydantic модель ConstantItem и статическая read-only таблица CONSTANTS.
Значения определены единожды в ScientificConstants; таблица и нормализатор
выражений ссылаются на них, не дублируя литералы.
"""

import math
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ЗНАЧЕНИЯ
# =============================================================================


class ScientificConstants:
    """Значения констант (SI)"""

    # Математические
    PI: Final[float] = math.pi
    E: Final[float] = math.e
    GOLDEN_RATIO: Final[float] = 1.618033988749895
    EULER_MASCHERONI: Final[float] = 0.57721566490153286
    SQRT_2: Final[float] = math.sqrt(2.0)

    # Физические
    PLANCK_CONSTANT: Final[float] = 6.62607015e-34  # J⋅s
    AVOGADRO_NUMBER: Final[float] = 6.02214076e23  # mol^-1
    SPEED_OF_LIGHT: Final[float] = 2.99792458e8  # m/s
    GRAVITATIONAL_CONSTANT: Final[float] = 6.67430e-11  # N⋅m²/kg²
    BOLTZMANN_CONSTANT: Final[float] = 1.380649e-23  # J/K
    ELECTRON_MASS: Final[float] = 9.1093837015e-31  # kg


# =============================================================================
# MODEL
# =============================================================================


class ConstantItem(BaseModel):
    """
    Элемент библиотеки констант.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., min_length=1, description="Название константы")
    symbol: str = Field(..., min_length=1, description="Обозначение (π, e, h, ...)")
    value: float = Field(..., description="Значение в SI")
    unit: str = Field("", description="Единица измерения")
    description: str = Field("", description="Краткое описание")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_value_finite(cls, v: float) -> float:
        """Значение константы должно быть конечным"""
        if not math.isfinite(v):
            raise ValueError(f"Constant value must be finite, got {v}")
        return v

    def as_text(self) -> str:
        """Десятичная запись значения для вставки в выражение"""
        return repr(self.value)


# =============================================================================
# ТАБЛИЦА
# =============================================================================

CONSTANTS: Final[tuple[ConstantItem, ...]] = (
    ConstantItem(
        name="Pi",
        symbol="π",
        value=ScientificConstants.PI,
        description="Ratio of circumference to diameter",
    ),
    ConstantItem(
        name="Euler's Number",
        symbol="e",
        value=ScientificConstants.E,
        description="Base of natural logarithm",
    ),
    ConstantItem(
        name="Golden Ratio",
        symbol="φ",
        value=ScientificConstants.GOLDEN_RATIO,
        description="Approx. 1.618...",
    ),
    ConstantItem(
        name="Euler-Mascheroni",
        symbol="γ",
        value=ScientificConstants.EULER_MASCHERONI,
        description="Approx. 0.577...",
    ),
    ConstantItem(
        name="Square Root of 2",
        symbol="√2",
        value=ScientificConstants.SQRT_2,
        description="Approx. 1.414...",
    ),
    ConstantItem(
        name="Planck Constant",
        symbol="h",
        value=ScientificConstants.PLANCK_CONSTANT,
        unit="J⋅s",
        description="Base quantum value",
    ),
    ConstantItem(
        name="Avogadro's Number",
        symbol="N_A",
        value=ScientificConstants.AVOGADRO_NUMBER,
        unit="mol⁻¹",
        description="Particles per mole",
    ),
    ConstantItem(
        name="Speed of Light",
        symbol="c",
        value=ScientificConstants.SPEED_OF_LIGHT,
        unit="m/s",
        description="In vacuum",
    ),
    ConstantItem(
        name="Gravitational Constant",
        symbol="G",
        value=ScientificConstants.GRAVITATIONAL_CONSTANT,
        unit="N⋅m²/kg²",
        description="Newton's constant",
    ),
    ConstantItem(
        name="Boltzmann Constant",
        symbol="k_B",
        value=ScientificConstants.BOLTZMANN_CONSTANT,
        unit="J/K",
        description="Relates temperature to energy",
    ),
)


def get_constant(symbol: str) -> ConstantItem:
    """
    Поиск константы по точному обозначению.

    Raises:
        KeyError: Если обозначение отсутствует в таблице
    """
    for item in CONSTANTS:
        if item.symbol == symbol:
            return item
    raise KeyError(f"Unknown constant symbol: {symbol!r}")


def search_constants(query: str) -> list[ConstantItem]:
    """
    Фильтр таблицы по вхождению query в название или обозначение
    (без учёта регистра). Пустой запрос возвращает всю таблицу.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(CONSTANTS)
    return [
        item
        for item in CONSTANTS
        if needle in item.name.casefold() or needle in item.symbol.casefold()
    ]
