"""
Number Theory — GCD/LCM и перевод между системами счисления

Операции над знаковыми 64-битными целыми:
- gcd(a, b) алгоритмом Евклида по абсолютным значениям
- lcm(a, b) = |a·b| / gcd(a, b), lcm(0, x) = 0
- to_base / from_base для оснований 2..36
"""

from typing import Final

from sciengine.core.errors import DomainError
from sciengine.core.math.numerical_safeguards import validate_int64

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

BASE_MIN: Final[int] = 2
BASE_MAX: Final[int] = 36

# Алфавит цифр для оснований до 36
DIGITS: Final[str] = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-12, 18)
        6
        >>> gcd(0, 0)
        0
    """
    validate_int64(a, "a")
    validate_int64(b, "b")

    x, y = abs(a), abs(b)
    while y != 0:
        x, y = y, x % y

    return x


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное.

    Returns:
        0 если a == 0 или b == 0, иначе |a·b| / gcd(a, b)

    Raises:
        DomainError: Если результат не укладывается в int64

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(0, 5)
        0
    """
    if a == 0 or b == 0:
        validate_int64(a, "a")
        validate_int64(b, "b")
        return 0

    result = abs(a) * abs(b) // gcd(a, b)
    validate_int64(result, "lcm")
    return result


# =============================================================================
# СИСТЕМЫ СЧИСЛЕНИЯ
# =============================================================================


def _validate_base(base: int) -> None:
    if not BASE_MIN <= base <= BASE_MAX:
        raise DomainError(f"Base must be between {BASE_MIN} and {BASE_MAX}, got {base}")


def to_base(number: int, base: int) -> str:
    """
    Запись целого в системе счисления base (цифры в верхнем регистре).

    Examples:
        >>> to_base(255, 16)
        'FF'
        >>> to_base(-5, 2)
        '-101'
        >>> to_base(0, 7)
        '0'
    """
    _validate_base(base)
    validate_int64(number, "number")

    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    remaining = abs(number)
    digits = []
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(DIGITS[digit])

    return sign + "".join(reversed(digits))


def from_base(text: str, base: int) -> int:
    """
    Разбор целого, записанного в системе счисления base.

    Raises:
        DomainError: Если основание вне [2, 36], строка пуста,
            содержит недопустимую цифру или результат вне int64

    Examples:
        >>> from_base("FF", 16)
        255
        >>> from_base("-101", 2)
        -5
    """
    _validate_base(base)

    body = text.strip().upper()
    sign = 1
    if body[:1] in ("-", "+"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]

    allowed = DIGITS[:base]
    if not body or any(ch not in allowed for ch in body):
        raise DomainError(f"'{text}' is not a valid base-{base} number", text)

    value = 0
    for ch in body:
        value = value * base + allowed.index(ch)
    value *= sign

    validate_int64(value, "number")
    return value
