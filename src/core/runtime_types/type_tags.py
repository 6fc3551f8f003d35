"""
Type Tags — Классификация runtime-типа значения

Модуль определяет "тег" значения: встроенную категорию, к которой относится
его представление, независимо от пользовательских подклассов.

- Подкласс list остаётся Array, подкласс dict остаётся Object
- bool проверяется раньше Number (bool — подкласс int)
- Неизвестные объекты (экземпляры классов, модели) получают тег Object

ИНВАРИАНТЫ:
1. is_type никогда не бросает исключений
2. Сравнение имени тега точное и регистрозависимое
3. Каждое значение получает ровно один тег (первое совпадение в таблице)
"""

import datetime
import numbers
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Final


# =============================================================================
# ТИПЫ
# =============================================================================


class TypeTag(str, Enum):
    """Имена runtime-тегов"""

    NULL = "Null"
    UNDEFINED = "Undefined"
    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    BYTES = "Bytes"
    ARRAY = "Array"
    SET = "Set"
    OBJECT = "Object"
    DATE = "Date"
    REGEXP = "RegExp"
    ERROR = "Error"
    FUNCTION = "Function"


class _Undefined:
    """
    Маркер отсутствующего значения.

    Отличается от None: None означает "значение пусто", UNDEFINED — "значения нет".
    Существует единственный экземпляр.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final[_Undefined] = _Undefined()


# Порядок важен: первое совпадение определяет тег
_TAG_TABLE: Final[tuple[tuple[TypeTag, tuple[type, ...]], ...]] = (
    (TypeTag.BOOLEAN, (bool,)),
    (TypeTag.NUMBER, (numbers.Number,)),
    (TypeTag.STRING, (str,)),
    (TypeTag.BYTES, (bytes, bytearray, memoryview)),
    (TypeTag.ARRAY, (list, tuple)),
    (TypeTag.SET, (set, frozenset)),
    (TypeTag.OBJECT, (Mapping,)),
    (TypeTag.DATE, (datetime.date,)),
    (TypeTag.REGEXP, (re.Pattern,)),
    (TypeTag.ERROR, (BaseException,)),
)


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _classify(value: Any) -> TypeTag:
    if value is None:
        return TypeTag.NULL
    if value is UNDEFINED:
        return TypeTag.UNDEFINED

    for tag, types in _TAG_TABLE:
        if isinstance(value, types):
            return tag

    if callable(value):
        return TypeTag.FUNCTION

    return TypeTag.OBJECT


def type_tag(value: Any) -> str:
    """
    Runtime-тег значения.

    Args:
        value: Любое значение

    Returns:
        Имя тега (например "Array", "Object", "Null")

    Examples:
        >>> type_tag([1, 2])
        'Array'
        >>> type_tag({"a": 1})
        'Object'
        >>> type_tag(True)
        'Boolean'
    """
    return _classify(value).value


def format_type_tag(value: Any) -> str:
    """
    Тег значения в формате "[object <Tag>]".

    Examples:
        >>> format_type_tag(None)
        '[object Null]'
    """
    return f"[object {type_tag(value)}]"


def is_type(value: Any, type_name: str) -> bool:
    """
    Проверка, что runtime-тег значения равен type_name.

    Принимает любые входные данные. Неизвестное имя тега или не-строка
    в type_name дают False.

    Args:
        value: Проверяемое значение
        type_name: Имя тега ("Array", "Object", "String", "Number", "Null", ...)

    Returns:
        True если тег значения совпадает с type_name

    Examples:
        >>> is_type([], "Array")
        True
        >>> is_type([], "Object")
        False
        >>> is_type(None, "Null")
        True
    """
    if not isinstance(type_name, str):
        return False
    return type_tag(value) == type_name
