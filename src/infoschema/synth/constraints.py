"""Synthesizers for the constraint relations.

The schema model only declares check constraints and foreign keys
explicitly. Primary keys, NOT NULL checks and the unique constraints backing
foreign keys are given synthetic names here:

- primary key: ``PK_<table>``
- NOT NULL check: ``CK_IS_NOT_NULL_<table>_<column>`` with clause
  ``<column> IS NOT NULL``
- foreign key backing constraint: the backing index name, or the referenced
  table's primary key name when no index was chosen.

Every name emitted by TABLE_CONSTRAINTS has its table in
CONSTRAINT_TABLE_USAGE and its columns in CONSTRAINT_COLUMN_USAGE.
"""

from __future__ import annotations

from typing import Iterator

from infoschema.names import (
    DEFAULT_CATALOG,
    INFORMATION_SCHEMA,
    NO,
    USER_SCHEMA,
    YES,
    ConstraintType,
    Rule,
    State,
)
from infoschema.synth.common import (
    RowValues,
    SynthesisContext,
    check_not_null_clause,
    check_not_null_name,
    foreign_key_referenced_index_name,
    primary_key_name,
)


def _table_constraint(schema_name: str, name: str, table_name: str, kind: str) -> RowValues:
    return (
        DEFAULT_CATALOG,
        schema_name,
        name,
        DEFAULT_CATALOG,
        schema_name,
        table_name,
        kind,
        NO,  # is_deferrable
        NO,  # initially_deferred
        YES,  # enforced
    )


def _table_usage(schema_name: str, table_name: str, constraint_name: str) -> RowValues:
    return (
        DEFAULT_CATALOG,
        schema_name,
        table_name,
        DEFAULT_CATALOG,
        schema_name,
        constraint_name,
    )


def _column_usage(
    schema_name: str, table_name: str, column_name: str, constraint_name: str
) -> RowValues:
    return (
        DEFAULT_CATALOG,
        schema_name,
        table_name,
        column_name,
        DEFAULT_CATALOG,
        schema_name,
        constraint_name,
    )


def _key_usage(
    schema_name: str,
    constraint_name: str,
    table_name: str,
    column_name: str,
    ordinal: int,
    position_in_unique_constraint: int | None,
) -> RowValues:
    return (
        DEFAULT_CATALOG,
        schema_name,
        constraint_name,
        DEFAULT_CATALOG,
        schema_name,
        table_name,
        column_name,
        ordinal,
        position_in_unique_constraint,
    )


def fill_table_constraints(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        yield _table_constraint(
            USER_SCHEMA, primary_key_name(table.name), table.name, ConstraintType.PRIMARY_KEY
        )

        for column in table.columns:
            if column.is_nullable:
                continue
            yield _table_constraint(
                USER_SCHEMA,
                check_not_null_name(table.name, column.name),
                table.name,
                ConstraintType.CHECK,
            )

        for check in table.check_constraints:
            yield _table_constraint(USER_SCHEMA, check.name, table.name, ConstraintType.CHECK)

        for fk in table.foreign_keys:
            yield _table_constraint(USER_SCHEMA, fk.name, table.name, ConstraintType.FOREIGN_KEY)
            # The backing index enforces uniqueness on the referenced table
            if fk.referenced_index is not None:
                yield _table_constraint(
                    USER_SCHEMA,
                    fk.referenced_index.name,
                    fk.referenced_table.name,
                    ConstraintType.UNIQUE,
                )

    for view in ctx.view_tables:
        yield _table_constraint(
            INFORMATION_SCHEMA,
            primary_key_name(view.name),
            view.name,
            ConstraintType.PRIMARY_KEY,
        )
        for column in ctx.not_null_columns(view):
            yield _table_constraint(
                INFORMATION_SCHEMA,
                check_not_null_name(view.name, column.name),
                view.name,
                ConstraintType.CHECK,
            )


def fill_check_constraints(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        for column in table.columns:
            if column.is_nullable:
                continue
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                check_not_null_name(table.name, column.name),
                check_not_null_clause(column.name),
                State.COMMITTED,
            )

        for check in table.check_constraints:
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                check.name,
                check.expression,
                State.COMMITTED,
            )

    for view in ctx.view_tables:
        for column in ctx.not_null_columns(view):
            yield (
                DEFAULT_CATALOG,
                INFORMATION_SCHEMA,
                check_not_null_name(view.name, column.name),
                check_not_null_clause(column.name),
                State.COMMITTED,
            )


def fill_constraint_table_usage(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        yield _table_usage(USER_SCHEMA, table.name, primary_key_name(table.name))

        for column in table.columns:
            if column.is_nullable:
                continue
            yield _table_usage(
                USER_SCHEMA, table.name, check_not_null_name(table.name, column.name)
            )

        for check in table.check_constraints:
            yield _table_usage(USER_SCHEMA, table.name, check.name)

        for fk in table.foreign_keys:
            # A foreign key uses the table it references
            yield _table_usage(USER_SCHEMA, fk.referenced_table.name, fk.name)
            if fk.referenced_index is not None:
                yield _table_usage(
                    USER_SCHEMA, fk.referenced_table.name, fk.referenced_index.name
                )

    for view in ctx.view_tables:
        yield _table_usage(INFORMATION_SCHEMA, view.name, primary_key_name(view.name))
        for column in ctx.not_null_columns(view):
            yield _table_usage(
                INFORMATION_SCHEMA, view.name, check_not_null_name(view.name, column.name)
            )


def fill_referential_constraints(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        for fk in table.foreign_keys:
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                fk.name,
                DEFAULT_CATALOG,
                USER_SCHEMA,
                foreign_key_referenced_index_name(fk),
                Rule.SIMPLE,
                Rule.NO_ACTION,  # update_rule
                Rule.NO_ACTION,  # delete_rule
                State.COMMITTED,
            )


def fill_key_column_usage(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        pk_name = primary_key_name(table.name)
        for ordinal, key_column in enumerate(table.primary_key, start=1):
            yield _key_usage(USER_SCHEMA, pk_name, table.name, key_column.column.name, ordinal, None)

        for fk in table.foreign_keys:
            # The position in the unique constraint is the column's own
            # position within the foreign key.
            for ordinal, column in enumerate(fk.referencing_columns, start=1):
                yield _key_usage(USER_SCHEMA, fk.name, table.name, column.name, ordinal, ordinal)

            if fk.referenced_index is not None:
                for ordinal, key_column in enumerate(fk.referenced_index.key_columns, start=1):
                    yield _key_usage(
                        USER_SCHEMA,
                        fk.referenced_index.name,
                        fk.referenced_table.name,
                        key_column.column.name,
                        ordinal,
                        None,
                    )

    for view in ctx.view_tables:
        pk_name = primary_key_name(view.name)
        for key in ctx.key_columns(view):
            yield _key_usage(
                INFORMATION_SCHEMA, pk_name, view.name, key.meta.column_name, key.ordinal, None
            )


def fill_constraint_column_usage(ctx: SynthesisContext) -> Iterator[RowValues]:
    for table in ctx.schema.tables:
        pk_name = primary_key_name(table.name)
        for key_column in table.primary_key:
            yield _column_usage(USER_SCHEMA, table.name, key_column.column.name, pk_name)

        for column in table.columns:
            if column.is_nullable:
                continue
            yield _column_usage(
                USER_SCHEMA,
                table.name,
                column.name,
                check_not_null_name(table.name, column.name),
            )

        for check in table.check_constraints:
            for column in check.dependent_columns:
                yield _column_usage(USER_SCHEMA, table.name, column.name, check.name)

        for fk in table.foreign_keys:
            for column in fk.referenced_columns:
                yield _column_usage(USER_SCHEMA, fk.referenced_table.name, column.name, fk.name)

            if fk.referenced_index is not None:
                for key_column in fk.referenced_index.key_columns:
                    yield _column_usage(
                        USER_SCHEMA,
                        fk.referenced_table.name,
                        key_column.column.name,
                        fk.referenced_index.name,
                    )

    for view in ctx.view_tables:
        pk_name = primary_key_name(view.name)
        for key in ctx.key_columns(view):
            yield _column_usage(INFORMATION_SCHEMA, view.name, key.meta.column_name, pk_name)

    for view in ctx.view_tables:
        for column in ctx.not_null_columns(view):
            yield _column_usage(
                INFORMATION_SCHEMA,
                view.name,
                column.name,
                check_not_null_name(view.name, column.name),
            )
