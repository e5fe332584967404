"""In-memory relations of the information schema."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from infoschema.errors import RowShapeError, ViewTableError
from infoschema.types import Value, ValueType

# A row is one typed value per view column, in column order
Row = tuple[Value, ...]


@dataclass(frozen=True)
class ViewColumn:
    """A named, typed column of a view table."""

    name: str
    type: ValueType


class ViewTable:
    """A named relation with a fixed column schema and, once filled, its rows.

    The column schema is set at construction. Rows are set exactly once;
    after that the table is immutable.
    """

    def __init__(self, name: str, columns: Sequence[tuple[str, ValueType]]) -> None:
        self.name = name
        self.columns: tuple[ViewColumn, ...] = tuple(
            ViewColumn(name=col_name, type=col_type) for col_name, col_type in columns
        )
        names = [c.name for c in self.columns]
        if len(set(names)) != len(names):
            raise ViewTableError(f"Duplicate column name in view table '{name}'")
        self._rows: tuple[Row, ...] | None = None

    def __repr__(self) -> str:
        return f"ViewTable(name={self.name!r}, columns={len(self.columns)})"

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    @property
    def num_columns(self) -> int:
        return len(self.columns)

    def find_column(self, name: str) -> ViewColumn | None:
        """Get a column by name."""
        for c in self.columns:
            if c.name == name:
                return c
        return None

    def make_row(self, values: Sequence[Any]) -> Row:
        """Build a row from Python scalars in column order.

        None becomes a NULL of the column's type. Raises RowShapeError when
        the arity or any value's type disagrees with the column schema.
        """
        if len(values) != len(self.columns):
            raise RowShapeError(
                f"Row for {self.name} has {len(values)} values, "
                f"expected {len(self.columns)}"
            )
        row: list[Value] = []
        for column, data in zip(self.columns, values):
            if isinstance(data, Value):
                if data.type is not column.type:
                    raise RowShapeError(
                        f"{self.name}.{column.name} holds {column.type.value}, "
                        f"got {data.type.value}"
                    )
                row.append(data)
            elif data is None:
                row.append(Value.null(column.type))
            elif column.type.accepts(data):
                row.append(Value(column.type, data))
            else:
                raise RowShapeError(
                    f"{self.name}.{column.name} holds {column.type.value}, "
                    f"got {type(data).__name__} {data!r}"
                )
        return tuple(row)

    def set_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        """Set the contents of the table. May only be called once."""
        if self._rows is not None:
            raise ViewTableError(f"Rows of view table '{self.name}' are already set")
        self._rows = tuple(self.make_row(values) for values in rows)

    @property
    def is_filled(self) -> bool:
        return self._rows is not None

    @property
    def rows(self) -> tuple[Row, ...]:
        """Return the rows of the table."""
        if self._rows is None:
            raise ViewTableError(f"Rows of view table '{self.name}' are not set yet")
        return self._rows

    def records(self) -> list[dict[str, Any]]:
        """Return the rows as dicts of column name to Python value."""
        names = self.column_names
        return [{n: v.data for n, v in zip(names, row)} for row in self.rows]
