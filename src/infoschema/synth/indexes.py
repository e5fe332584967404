"""Synthesizers for INDEXES and INDEX_COLUMNS.

Every table, user or information schema, also gets a PRIMARY_KEY
pseudo-index standing for its primary key.
"""

from __future__ import annotations

from typing import Iterator

from infoschema.names import (
    DEFAULT_CATALOG,
    INFORMATION_SCHEMA,
    USER_SCHEMA,
    IndexType,
    Ordering,
    State,
)
from infoschema.schema import KeyColumn
from infoschema.synth.common import RowValues, SynthesisContext, yes_no


def _primary_key_index_row(schema_name: str, table_name: str) -> RowValues:
    return (
        DEFAULT_CATALOG,
        schema_name,
        table_name,
        IndexType.PRIMARY_KEY,
        IndexType.PRIMARY_KEY,
        "",  # parent_table_name
        True,  # is_unique
        False,  # is_null_filtered
        None,  # index_state
        False,  # spanner_is_managed
    )


def _ordering(key_column: KeyColumn) -> str:
    return Ordering.DESC if key_column.is_descending else Ordering.ASC


def fill_indexes(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        for index in table.indexes:
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                table.name,
                index.name,
                IndexType.INDEX,
                index.parent.name if index.parent else "",
                index.is_unique,
                index.is_null_filtered,
                State.READ_WRITE,
                index.is_managed,
            )
        yield _primary_key_index_row(USER_SCHEMA, table.name)

    for view in ctx.view_tables:
        yield _primary_key_index_row(INFORMATION_SCHEMA, view.name)


def fill_index_columns(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        for index in table.indexes:
            for pos, key_column in enumerate(index.key_columns, start=1):
                column = key_column.column
                yield (
                    DEFAULT_CATALOG,
                    USER_SCHEMA,
                    table.name,
                    index.name,
                    IndexType.INDEX,
                    column.name,
                    pos,
                    _ordering(key_column),
                    # Null-filtered indexes never hold NULL keys
                    yes_no(column.is_nullable and not index.is_null_filtered),
                    column.type_text,
                )

            for column in index.stored_columns:
                yield (
                    DEFAULT_CATALOG,
                    USER_SCHEMA,
                    table.name,
                    index.name,
                    IndexType.INDEX,
                    column.name,
                    None,
                    None,
                    yes_no(column.is_nullable),
                    column.type_text,
                )

        for pos, key_column in enumerate(table.primary_key, start=1):
            column = key_column.column
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                table.name,
                IndexType.PRIMARY_KEY,
                IndexType.PRIMARY_KEY,
                column.name,
                pos,
                _ordering(key_column),
                yes_no(column.is_nullable),
                column.type_text,
            )

    for view in ctx.view_tables:
        for key in ctx.key_columns(view):
            yield (
                DEFAULT_CATALOG,
                INFORMATION_SCHEMA,
                view.name,
                IndexType.PRIMARY_KEY,
                IndexType.PRIMARY_KEY,
                key.column.name,
                key.ordinal,
                key.meta.column_ordering,
                key.meta.is_nullable,
                key.meta.spanner_type,
            )
