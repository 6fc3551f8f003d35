"""
Runtime type tags.

Классификация значений по встроенной категории (Array, Object, Null, ...).
"""

from src.core.runtime_types.type_tags import (
    UNDEFINED,
    TypeTag,
    format_type_tag,
    is_type,
    type_tag,
)

__all__ = [
    "UNDEFINED",
    "TypeTag",
    "format_type_tag",
    "is_type",
    "type_tag",
]
