"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Алгоритм Евклида (знаки, нули)
2. Границы int64 и Int64OverflowError
3. Валидацию float входов
4. Классификацию относительно полосы допуска
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    INT64_MAX,
    INT64_MIN,
    Int64OverflowError,
    compare_with_band,
    ensure_int64,
    gcd,
    is_int64,
    is_valid_float,
    tolerance_band,
    validate_non_negative,
    validate_positive,
)

# =============================================================================
# ТЕСТЫ GCD
# =============================================================================


class TestGcd:
    """Тесты для gcd"""

    def test_basic_values(self) -> None:
        """Обычные пары"""
        assert gcd(12, 18) == 6
        assert gcd(17, 5) == 1
        assert gcd(100, 10) == 10

    def test_zero_second_argument(self) -> None:
        """gcd(a, 0) = |a|"""
        assert gcd(5, 0) == 5
        assert gcd(-5, 0) == 5
        assert gcd(1, 0) == 1

    def test_zero_first_argument(self) -> None:
        """gcd(0, b) = |b|"""
        assert gcd(0, 7) == 7
        assert gcd(0, -7) == 7

    def test_both_zero(self) -> None:
        """gcd(0, 0) = 0"""
        assert gcd(0, 0) == 0

    def test_result_never_negative(self) -> None:
        """Результат неотрицателен при любых знаках"""
        assert gcd(-4, 6) == 2
        assert gcd(4, -6) == 2
        assert gcd(-4, -6) == 2

    def test_matches_math_gcd(self) -> None:
        """Совпадает с math.gcd на выборке"""
        pairs = [(0, 1), (270, 192), (-35, 49), (INT64_MAX, 3), (2**40, 2**20 * 3)]
        for a, b in pairs:
            assert gcd(a, b) == math.gcd(a, b)

    def test_large_coprime_values(self) -> None:
        """Соседние числа Фибоначчи взаимно просты (худший случай Евклида)"""
        a, b = 1, 1
        for _ in range(90):
            a, b = b, a + b
        assert gcd(a, b) == 1


# =============================================================================
# ТЕСТЫ INT64
# =============================================================================


class TestInt64Range:
    """Тесты для is_int64 / ensure_int64"""

    def test_limits(self) -> None:
        """Границы соответствуют signed 64-bit"""
        assert INT64_MAX == 9223372036854775807
        assert INT64_MIN == -9223372036854775808

    def test_values_inside_range(self) -> None:
        """Значения внутри диапазона"""
        assert is_int64(0)
        assert is_int64(INT64_MAX)
        assert is_int64(INT64_MIN)

    def test_values_outside_range(self) -> None:
        """Значения за границами"""
        assert not is_int64(INT64_MAX + 1)
        assert not is_int64(INT64_MIN - 1)

    def test_ensure_returns_value(self) -> None:
        """ensure_int64 возвращает значение без изменений"""
        assert ensure_int64(42, "x") == 42
        assert ensure_int64(INT64_MIN, "x") == INT64_MIN

    def test_ensure_raises_on_overflow(self) -> None:
        """Выход за int64 → Int64OverflowError"""
        with pytest.raises(Int64OverflowError, match="numerator out of int64 range"):
            ensure_int64(INT64_MAX + 1, "numerator")

    def test_ensure_rejects_non_integer(self) -> None:
        """float и прочие нецелые типы → TypeError"""
        with pytest.raises(TypeError, match="x must be an integer, got float"):
            ensure_int64(0.5, "x")

        with pytest.raises(TypeError, match="got float"):
            ensure_int64(3.0, "x")

        with pytest.raises(TypeError, match="got str"):
            ensure_int64("7", "x")

    def test_ensure_coerces_bool_to_int(self) -> None:
        """bool приводится к обычному int"""
        result = ensure_int64(True, "x")
        assert result == 1
        assert type(result) is int

    def test_overflow_error_is_overflow_error(self) -> None:
        """Int64OverflowError — подкласс OverflowError"""
        assert issubclass(Int64OverflowError, OverflowError)


# =============================================================================
# ТЕСТЫ FLOAT ВАЛИДАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e300)

    def test_nan_inf_invalid(self) -> None:
        """NaN/Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestValidation:
    """Тесты для validate_positive / validate_non_negative"""

    def test_validate_positive_accepts(self) -> None:
        """Положительные значения проходят"""
        validate_positive(1e-15, "error_bound")
        validate_positive(10.0, "error_bound")

    def test_validate_positive_rejects_zero_and_negative(self) -> None:
        """Ноль и отрицательные значения отвергаются"""
        with pytest.raises(ValueError, match="error_bound must be positive"):
            validate_positive(0.0, "error_bound")

        with pytest.raises(ValueError, match="error_bound must be positive"):
            validate_positive(-1e-6, "error_bound")

    def test_validate_positive_rejects_nan(self) -> None:
        """NaN отвергается"""
        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_positive(float("nan"), "error_bound")

    def test_validate_non_negative_accepts_zero(self) -> None:
        """Ноль допустим"""
        validate_non_negative(0.0, "value")

    def test_validate_non_negative_rejects(self) -> None:
        """Отрицательные значения и Inf отвергаются"""
        with pytest.raises(ValueError, match="value must be non-negative"):
            validate_non_negative(-0.5, "value")

        with pytest.raises(ValueError, match="not NaN/Inf"):
            validate_non_negative(float("inf"), "value")


# =============================================================================
# ТЕСТЫ ПОЛОСЫ ДОПУСКА
# =============================================================================


class TestToleranceBand:
    """Тесты для tolerance_band / compare_with_band"""

    def test_band_bounds(self) -> None:
        """Границы полосы"""
        low, high = tolerance_band(0.75, 0.25)
        assert low == 0.5
        assert high == 1.0

    def test_below_inside_above(self) -> None:
        """Три положения относительно полосы"""
        assert compare_with_band(0.1, 0.5, 1.0) == -1
        assert compare_with_band(0.7, 0.5, 1.0) == 0
        assert compare_with_band(1.1, 0.5, 1.0) == 1

    def test_band_is_closed(self) -> None:
        """Границы входят в полосу"""
        assert compare_with_band(0.5, 0.5, 1.0) == 0
        assert compare_with_band(1.0, 0.5, 1.0) == 0

    def test_degenerate_band(self) -> None:
        """Полоса нулевой ширины содержит только свою точку"""
        assert compare_with_band(2.0, 2.0, 2.0) == 0
        assert compare_with_band(math.nextafter(2.0, 3.0), 2.0, 2.0) == 1
