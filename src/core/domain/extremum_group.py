"""
ExtremumGroup — Результат поиска экстремальной группы записей

Immutable Pydantic модель: все записи последовательности, разделяющие
минимальное или максимальное значение поля.

- records хранит сами объекты записей (не копии) в исходном порядке
- indices — позиции этих записей во входной последовательности
- value = None только для пустой группы
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class ExtremumKind(str, Enum):
    """Вид экстремума"""

    MIN = "min"
    MAX = "max"


# =============================================================================
# MODEL
# =============================================================================


class ExtremumGroup(BaseModel):
    """
    Группа записей с экстремальным значением поля.

    Attributes:
        kind: min или max
        key: Имя поля, по которому искался экстремум
        value: Экстремальное значение (None для пустой группы)
        records: Записи группы в исходном порядке
        indices: Индексы записей группы во входной последовательности
    """

    kind: ExtremumKind = Field(..., description="Вид экстремума")
    key: str = Field(..., description="Имя поля записи")
    value: Optional[Any] = Field(default=None, description="Экстремальное значение")
    records: tuple[Any, ...] = Field(default=(), description="Записи группы")
    indices: tuple[int, ...] = Field(default=(), description="Индексы записей во входе")

    model_config = {"frozen": True}

    @field_validator("indices")
    @classmethod
    def validate_indices(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Индексы неотрицательные и строго возрастают (порядок входа сохранён)"""
        for i, index in enumerate(v):
            if index < 0:
                raise ValueError(f"indices must be non-negative, got {index}")
            if i > 0 and index <= v[i - 1]:
                raise ValueError(f"indices must be strictly increasing, got {list(v)}")
        return v

    @model_validator(mode="after")
    def validate_consistency(self) -> "ExtremumGroup":
        """records и indices согласованы, value задан только для непустой группы"""
        if len(self.records) != len(self.indices):
            raise ValueError(
                f"records and indices length mismatch: "
                f"{len(self.records)} != {len(self.indices)}"
            )
        if self.records and self.value is None:
            raise ValueError("value is required for a non-empty group")
        if not self.records and self.value is not None:
            raise ValueError(f"empty group cannot carry a value, got {self.value!r}")
        return self

    @property
    def size(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records
