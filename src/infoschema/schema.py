"""Schema source model: the validated user schema the catalog reflects.

The graph is produced by schema compilation elsewhere and is treated as
read-only here. A schema change produces a new ``Schema`` rather than
mutating an existing one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from infoschema.types import ColumnType


class OnDeleteAction(Enum):
    """Action taken on interleaved child rows when the parent row is deleted."""

    NO_ACTION = "NO ACTION"
    CASCADE = "CASCADE"


@dataclass
class Column:
    """A column of a user table."""

    name: str
    type: ColumnType
    declared_max_length: int | None = None  # None = MAX for STRING/BYTES
    is_nullable: bool = True
    is_generated: bool = False
    has_default_value: bool = False
    expression: str | None = None  # generation or default expression
    allows_commit_timestamp: bool = False
    # Columns referenced by the generation expression
    depends_on: list[Column] = field(default_factory=list)

    @property
    def type_text(self) -> str:
        """Return the canonical declared type, e.g. STRING(MAX)."""
        return self.type.render(self.declared_max_length)


@dataclass
class KeyColumn:
    """A column reference inside a key, with its sort direction."""

    column: Column
    is_descending: bool = False


@dataclass(eq=False)
class Index:
    """A secondary index."""

    name: str
    key_columns: list[KeyColumn] = field(default_factory=list)
    stored_columns: list[Column] = field(default_factory=list)
    is_unique: bool = False
    is_null_filtered: bool = False
    is_managed: bool = False
    parent: Table | None = None  # interleave parent


@dataclass(eq=False)
class ForeignKey:
    """A foreign key from ``referencing_table`` to ``referenced_table``.

    When ``referenced_index`` is None the referenced table's primary key
    backs the constraint.
    """

    name: str
    referencing_table: Table
    referencing_columns: list[Column]
    referenced_table: Table
    referenced_columns: list[Column]
    referenced_index: Index | None = None


@dataclass
class CheckConstraint:
    """A CHECK constraint declared on a table."""

    name: str
    expression: str
    dependent_columns: list[Column] = field(default_factory=list)


@dataclass
class RowDeletionPolicy:
    """Deletes rows once ``column`` is older than ``num_days`` days."""

    column: Column
    num_days: int

    def __str__(self) -> str:
        return f"OLDER_THAN({self.column.name}, INTERVAL {self.num_days} DAY)"


@dataclass(eq=False)
class Table:
    """A user table."""

    name: str
    columns: list[Column] = field(default_factory=list)
    primary_key: list[KeyColumn] = field(default_factory=list)
    indexes: list[Index] = field(default_factory=list)
    foreign_keys: list[ForeignKey] = field(default_factory=list)
    check_constraints: list[CheckConstraint] = field(default_factory=list)
    parent: Table | None = None
    on_delete_action: OnDeleteAction = OnDeleteAction.NO_ACTION
    row_deletion_policy: RowDeletionPolicy | None = None

    def __repr__(self) -> str:
        # Parent and foreign key links make the default repr recursive
        return f"Table(name={self.name!r}, columns={[c.name for c in self.columns]!r})"

    def find_column(self, name: str) -> Column | None:
        """Get a column by name."""
        for c in self.columns:
            if c.name == name:
                return c
        return None

    def get_column(self, name: str) -> Column:
        """Get a column by name, raising if not found."""
        column = self.find_column(name)
        if column is None:
            raise KeyError(f"Column '{name}' not found in table '{self.name}'")
        return column

    def find_index(self, name: str) -> Index | None:
        """Get an index by name."""
        for i in self.indexes:
            if i.name == name:
                return i
        return None


class Schema:
    """An ordered collection of user tables."""

    def __init__(self, tables: list[Table] | None = None) -> None:
        self._tables: list[Table] = list(tables or [])

    @property
    def tables(self) -> list[Table]:
        """Return the user tables in declaration order."""
        return list(self._tables)

    def find_table(self, name: str) -> Table | None:
        """Get a table by name."""
        for t in self._tables:
            if t.name == name:
                return t
        return None

    def get_table(self, name: str) -> Table:
        """Get a table by name, raising if not found."""
        table = self.find_table(name)
        if table is None:
            raise KeyError(f"Table '{name}' not found")
        return table

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, name: str) -> bool:
        return self.find_table(name) is not None
