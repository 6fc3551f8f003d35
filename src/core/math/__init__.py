"""
Core math modules

Поиск экстремальных групп записей.
"""

from src.core.math.extremum import (
    ALLOW_EMPTY_DEFAULT,
    REJECT_NAN_DEFAULT,
    ExtremumConfig,
    ExtremumInputError,
    find_extremum_group,
    find_max,
    find_min,
    max_group,
    min_group,
)
from src.core.domain.extremum_group import ExtremumGroup, ExtremumKind

__all__ = [
    # Constants
    "ALLOW_EMPTY_DEFAULT",
    "REJECT_NAN_DEFAULT",
    # Exceptions
    "ExtremumInputError",
    # Types
    "ExtremumConfig",
    "ExtremumGroup",
    "ExtremumKind",
    # Functions
    "find_extremum_group",
    "find_max",
    "find_min",
    "max_group",
    "min_group",
]
