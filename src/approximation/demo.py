"""
Demo — арифметика Rational и замер времени fast_from

Выводит примеры операторов, затем приближает каждую пару
(value, error_bound) из SAMPLES дважды ускоренным движком
и логирует затраченное время.

Запуск:
    python -m src.approximation.demo [--debug]
"""

import argparse
import logging
import time
from typing import Iterable, List, Optional, Tuple

from src.approximation.mediant_search import SearchResult
from src.approximation.parametric_search import ParametricMediantSearch
from src.core.domain.rational import Rational

logger = logging.getLogger(__name__)

SAMPLES: Tuple[Tuple[float, float], ...] = (
    (6.4285714285, 0.000000001),
    (12_581_890_123.5384615384, 0.0000001),
    (0.00000000000006, 0.000000000000001),
    (0.75, 0.0001),
)


def operator_examples() -> List[Tuple[str, Rational]]:
    """Примеры выражений вместе с их результатами."""
    return [
        ("2/5 / 1/2", Rational(2, 5) / Rational(1, 2)),
        ("2/7 * 1/2", Rational(2, 7) * Rational(1, 2)),
        ("2/3 + 1/2", Rational(2, 3) + Rational(1, 2)),
        ("8/5 - 1/2", Rational(8, 5) - Rational(1, 2)),
        ("-(2/3)", -Rational(2, 3)),
    ]


def measure_time(value: float, error_bound: float) -> Tuple[SearchResult, float]:
    """Один запуск fast_from: результат и затраченное время в секундах."""
    start = time.perf_counter()
    result = ParametricMediantSearch().search(value, error_bound)
    elapsed = time.perf_counter() - start

    logger.info("%r", result.rational)
    logger.info(
        "value=%r error_bound=%r iterations=%d probes=%d elapsed=%.6fs",
        value, error_bound, result.iterations, result.probes, elapsed,
    )
    return result, elapsed


def run(samples: Iterable[Tuple[float, float]] = SAMPLES, repeats: int = 2) -> List[SearchResult]:
    for expression, result in operator_examples():
        logger.info("%s = %r", expression, result)

    results = []
    for value, error_bound in samples:
        for _ in range(repeats):
            result, _elapsed = measure_time(value, error_bound)
            results.append(result)
    return results


def main(argv: Optional[List[str]] = None) -> int:
    """Точка входа CLI."""
    parser = argparse.ArgumentParser(description="Демо рационального приближения по дереву Штерна-Броко")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Логировать каждый шаг поиска",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO, format="%(message)s")
    run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
