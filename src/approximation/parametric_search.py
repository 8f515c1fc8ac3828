"""
Parametric Search — Ускоренный спуск по дереву Штерна-Броко

Тот же контракт, что и у mediant_search, но серия из c одинаковых шагов
(одна цифра цепной дроби) проходится за один прыжок. Длина серии c
находится бинарным поиском за O(log k) проб вместо O(k) медиант.

Серия от start в направлении step — это точки
    P(c) = (start.n + c * step.n) / (start.d + c * step.d),  c >= 1
монотонно движущиеся от start к step.

- extend_lower: m ниже полосы, step = верхняя граница, P(c) растёт.
  Ищем первое c, при котором P(c) перестаёт быть ниже полосы.
- extend_upper: m выше полосы, step = нижняя граница, P(c) убывает.
  Ищем первое c, при котором P(c) перестаёт быть выше полосы.

Вызывающий код сдвигает границу на m + (c - 1) * step: на один шаг
не доходя до перелёта, так что следующая медианта равна P(c).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все пробы P(c) помещаются в int64 (c ограничено сверху max_run_length)
2. Сравнения выполняются в double precision на value() пробы
3. Результат лежит в полосе допуска; путь по дереву может отличаться от
   линейного спуска, результат совпадает с ним с точностью до error_bound
"""

import logging
from typing import NamedTuple, Optional

from src.approximation.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from src.approximation.mediant_search import (
    SearchResult,
    check_iteration_limit,
    validate_search_inputs,
)
from src.core.domain.rational import INFINITY, ZERO, Rational
from src.core.math.numerical_safeguards import (
    INT64_MAX,
    Int64OverflowError,
    compare_with_band,
    tolerance_band,
)

logger = logging.getLogger(__name__)

# Положение пробы относительно полосы (см. compare_with_band)
BELOW_BAND = -1
ABOVE_BAND = 1


class RunJump(NamedTuple):
    """Результат бинарного поиска длины серии."""

    count: int  # c >= 1
    probes: int  # число вычисленных проб


# =============================================================================
# SERIES HELPERS
# =============================================================================


def advance(start: Rational, step: Rational, count: int) -> Rational:
    """Точка start + count * step (покомпонентно, с канонизацией)."""
    return Rational(
        start.numerator + count * step.numerator,
        start.denominator + count * step.denominator,
    )


def max_run_length(start: Rational, step: Rational) -> int:
    """
    Наибольшее c, при котором start + c * step помещается в int64.

    Ограничение считается по каждой ненулевой компоненте step, а не только
    по доминирующей.

    Examples:
        >>> max_run_length(Rational(1, 1), Rational(1, 0))
        9223372036854775806
        >>> max_run_length(Rational(3, 2), Rational(1, 1))
        9223372036854775804
    """
    limits = []
    if step.numerator != 0:
        limits.append((INT64_MAX - start.numerator) // step.numerator)
    if step.denominator != 0:
        limits.append((INT64_MAX - start.denominator) // step.denominator)
    return min(limits)


def _search_run(
    start: Rational,
    step: Rational,
    low: float,
    high: float,
    overshoot: int,
) -> RunJump:
    """
    Бинарный поиск длины серии на отрезке c ∈ [1, max_run_length].

    overshoot — сторона полосы, в которую серия уходит при слишком большом c
    (ABOVE_BAND для extend_lower, BELOW_BAND для extend_upper).

    - проба с перелётом → hi = mid
    - проба с недолётом → lo = mid + 1
    - проба внутри полосы → mid
    - mid == hi (окно схлопнулось) → hi
    """
    lo = 1
    hi = max_run_length(start, step)
    if hi < 1:
        raise Int64OverflowError(
            f"Run from {start} towards {step} does not fit int64"
        )

    probes = 0
    while True:
        mid = (lo + hi) // 2
        if mid == hi:
            return RunJump(hi, probes)

        probe = advance(start, step, mid)
        probes += 1
        position = compare_with_band(probe.value(), low, high)

        if position == overshoot:
            hi = mid
        elif position == -overshoot:
            lo = mid + 1
        else:
            return RunJump(mid, probes)


def extend_lower(start: Rational, end: Rational, value: float, error_bound: float) -> RunJump:
    """
    Длина серии для сдвига нижней границы (медианта ниже полосы).

    Args:
        start: медианта m (ниже полосы)
        end: верхняя граница интервала (может быть INFINITY)
        value: целевое значение
        error_bound: допустимая абсолютная ошибка

    Returns:
        RunJump: count — первое c, при котором m + c * end не ниже полосы
        (или любое c внутри полосы, найденное раньше)
    """
    low, high = tolerance_band(value, error_bound)
    return _search_run(start, end, low, high, overshoot=ABOVE_BAND)


def extend_upper(start: Rational, end: Rational, value: float, error_bound: float) -> RunJump:
    """
    Длина серии для сдвига верхней границы (медианта выше полосы).

    Симметрично extend_lower: end — нижняя граница интервала.
    """
    low, high = tolerance_band(value, error_bound)
    return _search_run(start, end, low, high, overshoot=BELOW_BAND)


def parametric_search(
    direction: bool,
    start: Rational,
    end: Rational,
    value: float,
    error_bound: float,
) -> int:
    """
    Длина серии c одинаковых шагов от start в сторону end.

    Args:
        direction: True — медианта ниже полосы (extend_lower),
            False — медианта выше полосы (extend_upper)
        start: текущая медианта
        end: граница интервала, задающая направление шага
        value: целевое значение
        error_bound: допустимая абсолютная ошибка

    Returns:
        c >= 1

    Raises:
        Int64OverflowError: серия не помещается в int64 даже на один шаг

    Examples:
        >>> parametric_search(True, Rational(1, 2), Rational(1, 1), 0.75, 0.0001)
        2
    """
    if direction:
        return extend_lower(start, end, value, error_bound).count
    return extend_upper(start, end, value, error_bound).count


# =============================================================================
# ENGINE
# =============================================================================


class ParametricMediantSearch:
    """Ускоренный спуск по дереву Штерна-Броко.

    Порядок на каждой итерации:
    1. m = mediant(lower, upper)
    2. m ниже полосы → c = extend_lower(m, upper), lower = m + (c-1) * upper
    3. m выше полосы → c = extend_upper(m, lower), upper = m + (c-1) * lower
    4. иначе → результат m
    """

    ENGINE_NAME = "parametric"

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or DEFAULT_SEARCH_CONFIG

    def search(self, value: float, error_bound: float) -> SearchResult:
        """Поиск дроби в пределах error_bound от value.

        Args:
            value: целевое значение (finite, >= 0)
            error_bound: допустимая абсолютная ошибка (> 0)

        Returns:
            SearchResult с найденной дробью, числом итераций и проб

        Raises:
            ValueError: невалидные входы (если config.validate_inputs)
            NonConvergenceError: превышен config.max_iterations
            Int64OverflowError: серия или медианта вышла за int64
        """
        if self.config.validate_inputs:
            validate_search_inputs(value, error_bound)

        low, high = tolerance_band(value, error_bound)
        lower_bound = ZERO
        upper_bound = INFINITY
        iterations = 0
        probes = 0

        while True:
            iterations += 1
            check_iteration_limit(iterations, self.config, self.ENGINE_NAME)

            m = Rational.mediant(lower_bound, upper_bound)
            position = compare_with_band(m.value(), low, high)

            if position < 0:
                jump = extend_lower(m, upper_bound, value, error_bound)
                lower_bound = advance(m, upper_bound, jump.count - 1)
            elif position > 0:
                jump = extend_upper(m, lower_bound, value, error_bound)
                upper_bound = advance(m, lower_bound, jump.count - 1)
            else:
                break

            probes += jump.probes
            logger.debug(
                "parametric step %d: m=%s run=%d probes=%d lower=%s upper=%s",
                iterations, m, jump.count, jump.probes, lower_bound, upper_bound,
            )

        logger.debug(
            "parametric search: value=%r error_bound=%r -> %s after %d iterations, %d probes",
            value, error_bound, m, iterations, probes,
        )

        return SearchResult(
            rational=m,
            target=value,
            error_bound=error_bound,
            iterations=iterations,
            probes=probes,
            engine=self.ENGINE_NAME,
        )


def fast_from(value: float, error_bound: float) -> Rational:
    """
    Дробь в пределах error_bound от value (ускоренный спуск).

    Examples:
        >>> fast_from(0.75, 0.0001)
        Rational(numerator=3, denominator=4)
        >>> fast_from(6.4285714285, 0.000000001)
        Rational(numerator=45, denominator=7)
    """
    return ParametricMediantSearch().search(value, error_bound).rational
