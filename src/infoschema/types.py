"""Value and column type definitions for the infoschema library."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueType(Enum):
    """Scalar types of information schema cells."""

    STRING = "STRING"
    BOOL = "BOOL"
    INT64 = "INT64"

    def accepts(self, data: Any) -> bool:
        """Return whether a non-null Python value belongs to this type."""
        if self is ValueType.STRING:
            return isinstance(data, str)
        if self is ValueType.BOOL:
            return isinstance(data, bool)
        # bool is a subclass of int
        return isinstance(data, int) and not isinstance(data, bool)


@dataclass(frozen=True)
class Value:
    """A typed cell value. A value whose data is None is a typed NULL."""

    type: ValueType
    data: str | bool | int | None = None

    @classmethod
    def string(cls, data: str) -> Value:
        return cls(ValueType.STRING, data)

    @classmethod
    def bool_(cls, data: bool) -> Value:
        return cls(ValueType.BOOL, data)

    @classmethod
    def int64(cls, data: int) -> Value:
        return cls(ValueType.INT64, data)

    @classmethod
    def null(cls, value_type: ValueType) -> Value:
        return cls(value_type, None)

    @property
    def is_null(self) -> bool:
        return self.data is None

    def __str__(self) -> str:
        if self.data is None:
            return "NULL"
        if self.type is ValueType.BOOL:
            return "true" if self.data else "false"
        return str(self.data)


class TypeCode(Enum):
    """Column types of user tables."""

    BOOL = "BOOL"
    INT64 = "INT64"
    FLOAT64 = "FLOAT64"
    NUMERIC = "NUMERIC"
    STRING = "STRING"
    BYTES = "BYTES"
    DATE = "DATE"
    TIMESTAMP = "TIMESTAMP"
    JSON = "JSON"
    ARRAY = "ARRAY"

    @property
    def has_length(self) -> bool:
        """Return whether columns of this type declare a maximum length."""
        return self in (TypeCode.STRING, TypeCode.BYTES)


# Mapping from upper-case type names to scalar TypeCode values
SCALAR_TYPE_NAMES: dict[str, TypeCode] = {
    tc.value: tc for tc in TypeCode if tc is not TypeCode.ARRAY
}


@dataclass(frozen=True)
class ColumnType:
    """The declared type of a user column.

    Array types carry their element type; the declared maximum length of a
    STRING or BYTES column (or array element) is kept on the column.
    """

    code: TypeCode
    element: ColumnType | None = None

    @classmethod
    def array_of(cls, element: ColumnType) -> ColumnType:
        if element.code is TypeCode.ARRAY:
            raise ValueError("Arrays of arrays are not supported")
        return cls(TypeCode.ARRAY, element)

    @property
    def is_array(self) -> bool:
        return self.code is TypeCode.ARRAY

    def render(self, declared_max_length: int | None = None) -> str:
        """Render the canonical type text, e.g. STRING(MAX) or ARRAY<BYTES(16)>."""
        if self.code is TypeCode.ARRAY:
            assert self.element is not None
            return f"ARRAY<{self.element.render(declared_max_length)}>"
        if self.code.has_length:
            length = "MAX" if declared_max_length is None else str(declared_max_length)
            return f"{self.code.value}({length})"
        return self.code.value
