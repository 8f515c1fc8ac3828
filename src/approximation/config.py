"""
SearchConfig — Конфигурация движков рационального приближения

Immutable Pydantic модель, общая для линейного и ускоренного поиска.

По умолчанию поиск не ограничен по числу итераций: цикл идёт до попадания
медианты в полосу допуска. max_iterations включает явный лимит.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NonConvergenceError(ArithmeticError):
    """
    Поиск не сошёлся за max_iterations внешних итераций.

    Возникает только при явно заданном SearchConfig.max_iterations.
    """

    pass


# =============================================================================
# CONFIG MODEL
# =============================================================================


class SearchConfig(BaseModel):
    """
    Конфигурация поиска по дереву Штерна-Броко.

    Immutable модель (frozen=True), может разделяться между потоками.
    """

    max_iterations: Optional[int] = Field(
        default=None,
        gt=0,
        description="Лимит внешних итераций (None = без ограничения)",
    )
    validate_inputs: bool = Field(
        default=True,
        description="Отвергать NaN/Inf, value < 0 и error_bound <= 0 до начала поиска",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("max_iterations", mode="before")
    @classmethod
    def reject_bool_max_iterations(cls, v: object) -> object:
        """bool является подклассом int, но лимитом не считается."""
        if isinstance(v, bool):
            raise ValueError("max_iterations must be an integer, got bool")
        return v


# Конфигурация по умолчанию для module-level функций
DEFAULT_SEARCH_CONFIG: SearchConfig = SearchConfig()
