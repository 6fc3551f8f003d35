"""
Extremum — Поиск экстремальных групп записей

Модуль находит все записи последовательности, у которых значение поля
равно минимуму (или максимуму) этого поля по всей последовательности:
- Все совпадения включаются (не только первое)
- Исходный порядок записей сохраняется
- Возвращаются те же объекты записей, не копии

ИНВАРИАНТЫ:
1. Каждая запись результата имеет экстремальное значение поля
2. Каждая запись входа с экстремальным значением присутствует в результате
3. Вход никогда не модифицируется
4. Некорректный вход → ExtremumInputError (не случайный TypeError/KeyError)

ПУСТОЙ ВХОД:
    По умолчанию пустая последовательность даёт пустой результат.
    С ExtremumConfig(allow_empty=False) → ExtremumInputError.
"""

import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final, Optional

from src.core.domain.extremum_group import ExtremumGroup, ExtremumKind

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Пустой вход даёт пустую группу (иначе ExtremumInputError)
ALLOW_EMPTY_DEFAULT: Final[bool] = True

# NaN в поле записи → ExtremumInputError (иначе запись пропускается)
REJECT_NAN_DEFAULT: Final[bool] = True


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExtremumInputError(ValueError):
    """
    Некорректный вход для поиска экстремума.

    Возникает если key не строка, kind не min/max,
    records не последовательность, запись не mapping,
    в записи нет поля, значение поля не число или NaN, либо вход пуст
    при allow_empty=False.
    """

    pass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ExtremumConfig:
    """Конфигурация поиска экстремума."""

    allow_empty: bool = ALLOW_EMPTY_DEFAULT
    reject_nan: bool = REJECT_NAN_DEFAULT


_DEFAULT_CONFIG: Final[ExtremumConfig] = ExtremumConfig()


# =============================================================================
# ВАЛИДАЦИЯ ВХОДА
# =============================================================================


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def _is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def _validate_records(records: Any) -> Sequence:
    if isinstance(records, (str, bytes, bytearray)) or not isinstance(records, Sequence):
        raise ExtremumInputError(
            f"records must be a sequence of mappings, got {type(records).__name__}"
        )
    return records


def _read_field(record: Any, key: str, index: int) -> Any:
    if not isinstance(record, Mapping):
        raise ExtremumInputError(
            f"records[{index}] must be a mapping, got {type(record).__name__}"
        )
    if key not in record:
        raise ExtremumInputError(f"records[{index}] has no field {key!r}")

    value = record[key]
    if not _is_number(value):
        raise ExtremumInputError(
            f"records[{index}][{key!r}] must be a real number, got {value!r}"
        )
    return value


# =============================================================================
# ЭКСТРЕМАЛЬНЫЕ ГРУППЫ
# =============================================================================


def find_extremum_group(
    records: Sequence[Mapping[str, Any]],
    key: str,
    kind: ExtremumKind,
    config: Optional[ExtremumConfig] = None,
) -> ExtremumGroup:
    """
    Поиск группы записей с минимальным или максимальным значением поля.

    Args:
        records: Упорядоченная последовательность записей (mapping)
        key: Имя числового поля
        kind: ExtremumKind.MIN или ExtremumKind.MAX
        config: Конфигурация (default: ExtremumConfig())

    Returns:
        ExtremumGroup с экстремальным значением, записями и их индексами

    Raises:
        ExtremumInputError: Некорректный вход или пустой вход при allow_empty=False

    Examples:
        >>> group = find_extremum_group([{"a": 3}, {"a": 1}, {"a": 1}], "a", ExtremumKind.MIN)
        >>> group.value, group.indices
        (1, (1, 2))
    """
    cfg = config or _DEFAULT_CONFIG
    if not isinstance(key, str):
        raise ExtremumInputError(f"key must be a string, got {type(key).__name__}")
    try:
        kind = ExtremumKind(kind)
    except ValueError:
        raise ExtremumInputError(f"kind must be 'min' or 'max', got {kind!r}") from None
    records = _validate_records(records)

    # (index, value) для всех записей, участвующих в сравнении
    candidates: list[tuple[int, Any]] = []
    for index, record in enumerate(records):
        value = _read_field(record, key, index)
        if _is_nan(value):
            if cfg.reject_nan:
                raise ExtremumInputError(
                    f"records[{index}][{key!r}] must not be NaN"
                )
            continue
        candidates.append((index, value))

    if not candidates:
        if not cfg.allow_empty:
            raise ExtremumInputError(
                f"cannot compute {kind.value} of {key!r} over an empty sequence"
            )
        logger.debug("Empty %s group for %r: no comparable records", kind.value, key)
        return ExtremumGroup(kind=kind, key=key)

    values = [value for _, value in candidates]
    extremum = min(values) if kind is ExtremumKind.MIN else max(values)

    indices = tuple(index for index, value in candidates if value == extremum)
    group = ExtremumGroup(
        kind=kind,
        key=key,
        value=extremum,
        records=tuple(records[index] for index in indices),
        indices=indices,
    )

    logger.debug(
        "%s of %r = %r shared by %d of %d records",
        kind.value,
        key,
        extremum,
        group.size,
        len(records),
    )
    return group


def min_group(
    records: Sequence[Mapping[str, Any]],
    key: str,
    config: Optional[ExtremumConfig] = None,
) -> ExtremumGroup:
    """Группа записей с минимальным значением поля key."""
    return find_extremum_group(records, key, ExtremumKind.MIN, config)


def max_group(
    records: Sequence[Mapping[str, Any]],
    key: str,
    config: Optional[ExtremumConfig] = None,
) -> ExtremumGroup:
    """Группа записей с максимальным значением поля key."""
    return find_extremum_group(records, key, ExtremumKind.MAX, config)


def find_min(
    records: Sequence[Mapping[str, Any]],
    key: str,
    config: Optional[ExtremumConfig] = None,
) -> list[Mapping[str, Any]]:
    """
    Все записи с минимальным значением поля key, в исходном порядке.

    Examples:
        >>> find_min([{"a": 3}, {"a": 1}, {"a": 1}], "a")
        [{'a': 1}, {'a': 1}]
        >>> find_min([], "a")
        []
    """
    return list(min_group(records, key, config).records)


def find_max(
    records: Sequence[Mapping[str, Any]],
    key: str,
    config: Optional[ExtremumConfig] = None,
) -> list[Mapping[str, Any]]:
    """
    Все записи с максимальным значением поля key, в исходном порядке.

    Examples:
        >>> find_max([{"a": 3}, {"a": 1}], "a")
        [{'a': 3}]
    """
    return list(max_group(records, key, config).records)
