"""Approximation — поиск рациональной дроби по дереву Штерна-Броко.

- MediantSearch: линейный спуск, одно ребро дерева за итерацию
- ParametricMediantSearch: прыжок через серию одинаковых шагов за O(log k) проб
"""

from .config import DEFAULT_SEARCH_CONFIG, NonConvergenceError, SearchConfig
from .mediant_search import MediantSearch, SearchResult, from_float
from .parametric_search import (
    ParametricMediantSearch,
    RunJump,
    extend_lower,
    extend_upper,
    fast_from,
    parametric_search,
)

__all__ = [
    "DEFAULT_SEARCH_CONFIG",
    "NonConvergenceError",
    "SearchConfig",
    "MediantSearch",
    "SearchResult",
    "from_float",
    "ParametricMediantSearch",
    "RunJump",
    "extend_lower",
    "extend_upper",
    "fast_from",
    "parametric_search",
]
