"""
Тесты для модели ExtremumGroup

Проверяет:
1. Создание валидной группы
2. Согласованность records / indices / value
3. Immutability (frozen=True)
"""

import pytest
from pydantic import ValidationError

from src.core.domain import ExtremumGroup, ExtremumKind


class TestExtremumGroup:
    """Тесты для модели ExtremumGroup"""

    @pytest.fixture
    def group(self) -> ExtremumGroup:
        return ExtremumGroup(
            kind=ExtremumKind.MIN,
            key="a",
            value=1,
            records=({"a": 1}, {"a": 1}),
            indices=(1, 2),
        )

    def test_valid_group(self, group) -> None:
        assert group.size == 2
        assert not group.is_empty
        assert group.kind == "min"

    def test_empty_group_defaults(self) -> None:
        group = ExtremumGroup(kind="max", key="a")
        assert group.is_empty
        assert group.records == ()
        assert group.value is None

    def test_list_records_become_tuple(self) -> None:
        record = {"a": 0}
        group = ExtremumGroup(kind="min", key="a", value=0, records=[record], indices=[0])
        assert group.records == (record,)
        assert group.records[0] is record

    def test_frozen(self, group) -> None:
        with pytest.raises(ValidationError):
            group.value = 5

    def test_length_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError, match="length mismatch"):
            ExtremumGroup(kind="min", key="a", value=1, records=({"a": 1},), indices=(0, 1))

    def test_negative_index_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            ExtremumGroup(kind="min", key="a", value=1, records=({"a": 1},), indices=(-1,))

    def test_unordered_indices_rejected(self) -> None:
        with pytest.raises(ValidationError, match="strictly increasing"):
            ExtremumGroup(
                kind="min",
                key="a",
                value=1,
                records=({"a": 1}, {"a": 1}),
                indices=(2, 1),
            )

    def test_missing_value_rejected(self) -> None:
        with pytest.raises(ValidationError, match="value is required"):
            ExtremumGroup(kind="min", key="a", records=({"a": 1},), indices=(0,))

    def test_value_on_empty_rejected(self) -> None:
        with pytest.raises(ValidationError, match="empty group"):
            ExtremumGroup(kind="min", key="a", value=1)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExtremumGroup(kind="median", key="a")
