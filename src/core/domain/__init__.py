"""
Domain models and value objects.

Contains result models shared by the core math primitives.
"""

from src.core.domain.extremum_group import ExtremumGroup, ExtremumKind

__all__ = [
    "ExtremumGroup",
    "ExtremumKind",
]
