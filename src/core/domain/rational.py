"""
Rational — Immutable рациональное число с канонической формой

Значение (numerator, denominator) в диапазоне signed 64-bit, всегда
сокращённое на НОД. Знак хранится в числителе, знаменатель неотрицателен.

Знаменатель 0 допустим только для sentinel INFINITY (1/0), который
поиск по дереву Штерна-Броко использует как верхнюю границу интервала.
value() от такого значения выбрасывает ZeroDivisionError.

Известное ограничение: произведения в операторах могут выйти за int64
на больших входах. Такие случаи не исправляются, а фиксируются через
Int64OverflowError.
"""

from dataclasses import dataclass

from src.core.math.numerical_safeguards import ensure_int64, gcd


@dataclass(frozen=True)
class Rational:
    """
    Рациональное число в канонической форме.

    Immutable модель (frozen=True): все операторы создают новый экземпляр.

    Examples:
        >>> Rational(2, 4)
        Rational(numerator=1, denominator=2)
        >>> Rational(2, -4)
        Rational(numerator=-1, denominator=2)
        >>> str(Rational(7, 6))
        '7/6'
    """

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        numerator = ensure_int64(self.numerator, "numerator")
        denominator = ensure_int64(self.denominator, "denominator")

        g = gcd(numerator, denominator)
        if g == 0:
            raise ZeroDivisionError("Rational(0, 0) is undefined")

        if denominator < 0:
            g = -g

        # -INT64_MIN не помещается в int64
        object.__setattr__(self, "numerator", ensure_int64(numerator // g, "numerator"))
        object.__setattr__(self, "denominator", ensure_int64(denominator // g, "denominator"))

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def value(self) -> float:
        """
        Значение numerator / denominator в double precision.

        Числитель и знаменатель сначала конвертируются в float, затем делятся.

        Raises:
            ZeroDivisionError: Если denominator == 0 (sentinel INFINITY)
        """
        if self.denominator == 0:
            raise ZeroDivisionError(f"Cannot evaluate {self}: zero denominator")
        return float(self.numerator) / float(self.denominator)

    def __float__(self) -> float:
        return self.value()

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @property
    def is_infinite(self) -> bool:
        """True для sentinel с нулевым знаменателем."""
        return self.denominator == 0

    @property
    def is_zero(self) -> bool:
        """True для 0/1; делитель с таким значением запрещён."""
        return self.numerator == 0

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def mediant(cls, left: "Rational", right: "Rational") -> "Rational":
        """
        Медианта (a + c) / (b + d) двух дробей a/b и c/d.

        Args:
            left: Левая граница интервала
            right: Правая граница интервала (может быть INFINITY)

        Returns:
            Каноническая медианта
        """
        return cls(left.numerator + right.numerator, left.denominator + right.denominator)

    @classmethod
    def from_float(cls, value: float, error_bound: float) -> "Rational":
        """
        Простейшая дробь в пределах error_bound от value (линейный спуск).

        См. src.approximation.mediant_search.from_float.
        """
        from src.approximation.mediant_search import from_float

        return from_float(value, error_bound)

    @classmethod
    def fast_from(cls, value: float, error_bound: float) -> "Rational":
        """
        Дробь в пределах error_bound от value (ускоренный спуск).

        См. src.approximation.parametric_search.fast_from.
        """
        from src.approximation.parametric_search import fast_from

        return fast_from(value, error_bound)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> "Rational | None":
        if isinstance(other, Rational):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return Rational(other, 1)
        return None

    def __add__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self.numerator * rhs.denominator + self.denominator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    def __radd__(self, other: object) -> "Rational":
        return self.__add__(other)

    def __sub__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self.numerator * rhs.denominator - self.denominator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    def __rsub__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__sub__(self)

    def __mul__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self.numerator * rhs.numerator,
            self.denominator * rhs.denominator,
        )

    def __rmul__(self, other: object) -> "Rational":
        return self.__mul__(other)

    def __truediv__(self, other: object) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.is_zero:
            raise ZeroDivisionError(f"Division of {self} by zero rational {rhs}")
        return Rational(
            self.numerator * rhs.denominator,
            self.denominator * rhs.numerator,
        )

    def __rtruediv__(self, other: object) -> "Rational":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.__truediv__(self)

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Нижняя граница поиска
ZERO: Rational = Rational(0, 1)

# Верхняя граница поиска (+∞). value() не вызывается никогда.
INFINITY: Rational = Rational(1, 0)
