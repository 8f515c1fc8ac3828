"""
Numerical Safeguards — Safe Integer & Float Primitives

Модуль обеспечивает численную корректность рационального поиска:
- Границы signed 64-bit для числителя и знаменателя
- Итеративный алгоритм Евклида (gcd) без рекурсии
- Проверка выхода за int64 (вместо молчаливого переполнения)
- Валидация float входов (NaN/Inf, знак)
- Классификация значения относительно полосы допуска [v - eb, v + eb]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Числитель и знаменатель никогда не выходят за int64 молча (Int64OverflowError)
2. gcd всегда неотрицателен, gcd(a, 0) = |a|
3. Сравнения с полосой допуска выполняются в double precision
4. Все операции детерминированы и воспроизводимы
"""

import math
import operator
from typing import Final

# =============================================================================
# INT64 ГРАНИЦЫ
# =============================================================================

# Максимальное значение signed 64-bit целого
INT64_MAX: Final[int] = 2**63 - 1

# Минимальное значение signed 64-bit целого
INT64_MIN: Final[int] = -(2**63)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Int64OverflowError(OverflowError):
    """
    Числитель или знаменатель вышел за диапазон signed 64-bit.

    Python int не переполняется, поэтому фиксированная ширина проверяется
    явно: вместо wrap-around выбрасывается исключение.
    """

    pass


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ АРИФМЕТИКА
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида, итеративно).

    gcd(a, 0) = |a|; gcd(a, b) = gcd(b, a mod b).

    Args:
        a: Первое целое (любого знака)
        b: Второе целое (любого знака)

    Returns:
        Неотрицательный НОД. gcd(0, 0) = 0.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(-4, 6)
        2
        >>> gcd(5, 0)
        5
        >>> gcd(0, 0)
        0
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def is_int64(value: int) -> bool:
    """
    Проверка, помещается ли целое в signed 64-bit.

    Args:
        value: Проверяемое значение

    Returns:
        True если INT64_MIN <= value <= INT64_MAX
    """
    return INT64_MIN <= value <= INT64_MAX


def ensure_int64(value: int, name: str) -> int:
    """
    Валидация, что значение целое и помещается в signed 64-bit.

    Целые типы (int, bool, numpy-целые) приводятся через operator.index;
    float и прочие типы отвергаются.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value как int

    Raises:
        TypeError: Если value не целого типа (например, float)
        Int64OverflowError: Если value вне [INT64_MIN, INT64_MAX]
    """
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        ) from None

    if not is_int64(value):
        raise Int64OverflowError(
            f"{name} out of int64 range: {value} not in [{INT64_MIN}, {INT64_MAX}]"
        )
    return value


# =============================================================================
# FLOAT ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# ПОЛОСА ДОПУСКА
# =============================================================================


def tolerance_band(value: float, error_bound: float) -> tuple[float, float]:
    """
    Границы полосы допуска [value - error_bound, value + error_bound].

    Границы вычисляются один раз в double precision; все последующие
    сравнения идут с этими же числами.

    Examples:
        >>> tolerance_band(0.75, 0.25)
        (0.5, 1.0)
    """
    return (value - error_bound, value + error_bound)


def compare_with_band(x: float, low: float, high: float) -> int:
    """
    Положение значения относительно замкнутой полосы [low, high].

    Args:
        x: Проверяемое значение
        low: Нижняя граница полосы
        high: Верхняя граница полосы

    Returns:
        -1 если x < low (ниже полосы)
         0 если low <= x <= high (внутри)
        +1 если x > high (выше полосы)

    Examples:
        >>> compare_with_band(0.4, 0.5, 1.0)
        -1
        >>> compare_with_band(0.5, 0.5, 1.0)
        0
        >>> compare_with_band(1.5, 0.5, 1.0)
        1
    """
    if x < low:
        return -1
    elif x > high:
        return 1
    else:
        return 0
