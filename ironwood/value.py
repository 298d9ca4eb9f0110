"""Runtime values for the expression engine."""

from __future__ import annotations

import enum
import struct
from collections.abc import Iterable
from typing import Any

from ironwood.intern import StringId

__all__ = ["ValueType", "Value"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


class ValueType(enum.Enum):
    """Kind of a value, for type checking and domain validation."""

    SYMBOL = "symbol"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    STRING_LIST = "string_list"
    INTEGER_LIST = "integer_list"


def _check_i64(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {n!r}")
    if not _I64_MIN <= n <= _I64_MAX:
        raise OverflowError(f"integer out of 64-bit range: {n}")
    return n


def _check_id(string_id: Any) -> StringId:
    if not isinstance(string_id, StringId):
        raise TypeError(f"expected a StringId, got {string_id!r}")
    return string_id


class Value:
    """A typed value. Floats compare and hash by their bit pattern."""

    __slots__ = ("_type", "_payload")

    def __init__(self, value_type: ValueType, payload: Any) -> None:
        self._type = value_type
        self._payload = payload

    @classmethod
    def symbol(cls, string_id: StringId) -> Value:
        return cls(ValueType.SYMBOL, _check_id(string_id))

    @classmethod
    def string(cls, string_id: StringId) -> Value:
        return cls(ValueType.STRING, _check_id(string_id))

    @classmethod
    def integer(cls, n: int) -> Value:
        return cls(ValueType.INTEGER, _check_i64(n))

    @classmethod
    def float(cls, f: float) -> Value:
        if isinstance(f, bool) or not isinstance(f, (int, float)):
            raise TypeError(f"expected a number, got {f!r}")
        return cls(ValueType.FLOAT, float(f))

    @classmethod
    def string_list(cls, ids: Iterable[StringId]) -> Value:
        return cls(ValueType.STRING_LIST, tuple(_check_id(i) for i in ids))

    @classmethod
    def integer_list(cls, items: Iterable[int]) -> Value:
        return cls(ValueType.INTEGER_LIST, tuple(_check_i64(n) for n in items))

    @property
    def value_type(self) -> ValueType:
        return self._type

    def _key(self) -> tuple[ValueType, Any]:
        if self._type is ValueType.FLOAT:
            return self._type, struct.pack("<d", self._payload)
        return self._type, self._payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return f"Value.{self._type.value}({self._payload!r})"

    def is_symbol(self) -> bool:
        return self._type is ValueType.SYMBOL

    def is_string(self) -> bool:
        return self._type is ValueType.STRING

    def is_integer(self) -> bool:
        return self._type is ValueType.INTEGER

    def is_float(self) -> bool:
        return self._type is ValueType.FLOAT

    def is_string_list(self) -> bool:
        return self._type is ValueType.STRING_LIST

    def is_integer_list(self) -> bool:
        return self._type is ValueType.INTEGER_LIST

    def _as(self, value_type: ValueType) -> Any:
        return self._payload if self._type is value_type else None

    def as_symbol(self) -> StringId | None:
        return self._as(ValueType.SYMBOL)

    def as_string(self) -> StringId | None:
        return self._as(ValueType.STRING)

    def as_integer(self) -> int | None:
        return self._as(ValueType.INTEGER)

    def as_float(self) -> float | None:
        return self._as(ValueType.FLOAT)

    def as_string_list(self) -> tuple[StringId, ...] | None:
        return self._as(ValueType.STRING_LIST)

    def as_integer_list(self) -> tuple[int, ...] | None:
        return self._as(ValueType.INTEGER_LIST)