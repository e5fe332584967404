"""Naming rules and shared context for the row synthesizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import structlog

from infoschema import names
from infoschema.errors import MissingMetadataError
from infoschema.metadata import ColumnMeta, IndexColumnMeta, SelfDescriptionStore
from infoschema.schema import ForeignKey, Schema
from infoschema.view_table import ViewColumn, ViewTable

logger = structlog.stdlib.get_logger(__name__)

# Cell values of one row, in view column order
RowValues = tuple[Any, ...]


def primary_key_name(table_name: str) -> str:
    return f"{names.PRIMARY_KEY_PREFIX}{table_name}"


def check_not_null_name(table_name: str, column_name: str) -> str:
    return f"{names.NOT_NULL_CHECK_PREFIX}{table_name}_{column_name}"


def check_not_null_clause(column_name: str) -> str:
    return f"{column_name}{names.NOT_NULL_CLAUSE_SUFFIX}"


def foreign_key_referenced_index_name(foreign_key: ForeignKey) -> str:
    """Name of the unique constraint backing a foreign key.

    Without an explicit backing index the referenced table's primary key
    backs the foreign key.
    """
    if foreign_key.referenced_index is not None:
        return foreign_key.referenced_index.name
    return primary_key_name(foreign_key.referenced_table.name)


def strip_expression(expression: str) -> str:
    """Drop one leading '(' and one trailing ')' from a stored expression."""
    if expression.startswith("("):
        expression = expression[1:]
    if expression.endswith(")"):
        expression = expression[:-1]
    return expression


def yes_no(flag: bool) -> str:
    return names.YES if flag else names.NO


@dataclass(frozen=True)
class ViewKeyColumn:
    """A primary key column of an information schema relation with its position."""

    column: ViewColumn
    meta: IndexColumnMeta
    ordinal: int


@dataclass
class SynthesisContext:
    """Everything a synthesizer may read: the user schema, the registered
    view tables and the self-description store."""

    schema: Schema
    view_tables: list[ViewTable]
    metadata: SelfDescriptionStore
    database_dialect: str = names.Option.GOOGLE_STANDARD_SQL

    def column_metadata(self, view: ViewTable, column: ViewColumn) -> ColumnMeta:
        """Return the metadata of an information schema column.

        A missing entry means the shipped metadata and the view declarations
        have drifted apart; construction cannot continue.
        """
        meta = self.metadata.find_column(view.name, column.name)
        if meta is None:
            logger.critical(
                "missing self-description metadata",
                table=view.name,
                column=column.name,
            )
            raise MissingMetadataError(view.name, column.name)
        return meta

    def not_null_columns(self, view: ViewTable) -> Iterator[ViewColumn]:
        """Yield the columns of a view table declared NOT NULL."""
        for column in view.columns:
            if not self.column_metadata(view, column).nullable:
                yield column

    def key_columns(self, view: ViewTable) -> Iterator[ViewKeyColumn]:
        """Yield the primary key columns of a view table in column order.

        Entries with a positive ordinal keep it; the rest are numbered
        sequentially.
        """
        sequential = 1
        for column in view.columns:
            meta = self.metadata.find_key_column(view.name, column.name)
            if meta is None:
                continue  # Not a primary key column.
            if meta.primary_key_ordinal > 0:
                ordinal = meta.primary_key_ordinal
            else:
                ordinal = sequential
                sequential += 1
            yield ViewKeyColumn(column=column, meta=meta, ordinal=ordinal)
