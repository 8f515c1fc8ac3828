"""
Mediant Search — Линейный спуск по дереву Штерна-Броко

Базовый (эталонный) алгоритм приближения float рациональной дробью:
- Начальный интервал [0/1, 1/0]
- Каждая итерация: медианта m границ интервала
- m ниже полосы допуска → m становится нижней границей
- m выше полосы допуска → m становится верхней границей
- m внутри [value - error_bound, value + error_bound] → результат

Каждая итерация сдвигает интервал ровно на одно ребро дерева. Для значений
с длинными цепными дробями (например, рядом с целым числом) число итераций
растёт линейно с длиной серии; см. parametric_search.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value() верхней границы никогда не вычисляется (она может быть INFINITY)
2. Результат всегда лежит в полосе допуска
3. Результат — простейшая дробь в полосе (первый узел дерева в ней)
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.approximation.config import DEFAULT_SEARCH_CONFIG, NonConvergenceError, SearchConfig
from src.core.domain.rational import INFINITY, ZERO, Rational
from src.core.math.numerical_safeguards import (
    compare_with_band,
    tolerance_band,
    validate_non_negative,
    validate_positive,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SearchResult:
    """Результат поиска рационального приближения."""

    rational: Rational

    # Входные параметры для диагностики
    target: float
    error_bound: float

    # Счётчики
    iterations: int  # внешние итерации (медианты)
    probes: int  # пробы бинарного поиска (0 для линейного спуска)

    engine: str

    @property
    def value(self) -> float:
        return self.rational.value()

    @property
    def error(self) -> float:
        """Абсолютная ошибка |rational - target|."""
        return abs(self.rational.value() - self.target)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_search_inputs(value: float, error_bound: float) -> None:
    """
    Проверка входов поиска.

    Для value < 0 медианты никогда не опускаются ниже 0, и цикл не завершается,
    поэтому отрицательные цели отвергаются заранее.

    Raises:
        ValueError: NaN/Inf, value < 0 или error_bound <= 0
    """
    validate_non_negative(value, "value")
    validate_positive(error_bound, "error_bound")


def check_iteration_limit(iterations: int, config: SearchConfig, engine: str) -> None:
    """
    Raises:
        NonConvergenceError: Если задан max_iterations и он превышен
    """
    if config.max_iterations is not None and iterations > config.max_iterations:
        raise NonConvergenceError(
            f"{engine} did not converge within {config.max_iterations} iterations"
        )


# =============================================================================
# ENGINE
# =============================================================================


class MediantSearch:
    """Линейный спуск по дереву Штерна-Броко.

    Порядок на каждой итерации:
    1. m = mediant(lower, upper)
    2. m < value - error_bound → lower = m
    3. m > value + error_bound → upper = m
    4. иначе → результат m
    """

    ENGINE_NAME = "mediant"

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or DEFAULT_SEARCH_CONFIG

    def search(self, value: float, error_bound: float) -> SearchResult:
        """Поиск простейшей дроби в пределах error_bound от value.

        Args:
            value: целевое значение (finite, >= 0)
            error_bound: допустимая абсолютная ошибка (> 0)

        Returns:
            SearchResult с найденной дробью и числом итераций

        Raises:
            ValueError: невалидные входы (если config.validate_inputs)
            NonConvergenceError: превышен config.max_iterations
            Int64OverflowError: медианта вышла за int64
        """
        if self.config.validate_inputs:
            validate_search_inputs(value, error_bound)

        low, high = tolerance_band(value, error_bound)
        lower_bound = ZERO
        upper_bound = INFINITY
        iterations = 0

        while True:
            iterations += 1
            check_iteration_limit(iterations, self.config, self.ENGINE_NAME)

            m = Rational.mediant(lower_bound, upper_bound)
            position = compare_with_band(m.value(), low, high)

            logger.debug(
                "mediant step %d: lower=%s upper=%s m=%s position=%d",
                iterations, lower_bound, upper_bound, m, position,
            )

            if position < 0:
                lower_bound = m
            elif position > 0:
                upper_bound = m
            else:
                break

        logger.debug(
            "mediant search: value=%r error_bound=%r -> %s after %d iterations",
            value, error_bound, m, iterations,
        )

        return SearchResult(
            rational=m,
            target=value,
            error_bound=error_bound,
            iterations=iterations,
            probes=0,
            engine=self.ENGINE_NAME,
        )


def from_float(value: float, error_bound: float) -> Rational:
    """
    Простейшая дробь в пределах error_bound от value (линейный спуск).

    Examples:
        >>> from_float(0.75, 0.0001)
        Rational(numerator=3, denominator=4)
        >>> from_float(3.14159265, 1e-3)
        Rational(numerator=201, denominator=64)
    """
    return MediantSearch().search(value, error_bound).rational
