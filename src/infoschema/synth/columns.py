"""Synthesizers for column-level relations."""

from __future__ import annotations

from typing import Iterator

from infoschema.names import (
    DEFAULT_CATALOG,
    INFORMATION_SCHEMA,
    USER_SCHEMA,
    YES,
    Generated,
    Option,
    State,
)
from infoschema.synth.common import (
    RowValues,
    SynthesisContext,
    strip_expression,
    yes_no,
)


def fill_columns(ctx: SynthesisContext) -> Iterator[RowValues]:
    """One row per user column, then one per information schema column.

    Ordinal positions run 1..N within each table.
    """
    for table in ctx.schema.tables:
        for pos, column in enumerate(table.columns, start=1):
            expression = None
            if (column.is_generated or column.has_default_value) and column.expression:
                expression = strip_expression(column.expression)
            yield (
                DEFAULT_CATALOG,
                USER_SCHEMA,
                table.name,
                column.name,
                pos,
                expression if column.has_default_value else None,
                None,  # data_type
                yes_no(column.is_nullable),
                column.type_text,
                Generated.ALWAYS if column.is_generated else Generated.NEVER,
                expression if column.is_generated else None,
                YES if column.is_generated else None,
                State.COMMITTED,
            )

    # Columns of the relations that live inside INFORMATION_SCHEMA
    for view in ctx.view_tables:
        for pos, view_column in enumerate(view.columns, start=1):
            meta = ctx.column_metadata(view, view_column)
            yield (
                DEFAULT_CATALOG,
                INFORMATION_SCHEMA,
                view.name,
                view_column.name,
                pos,
                None,
                None,
                meta.is_nullable,
                meta.spanner_type,
                Generated.NEVER,
                None,
                None,
                None,
            )


def fill_column_column_usage(ctx: SynthesisContext) -> Iterator[RowValues]:
    """One row per (used column, generated column) pair."""
    for table in ctx.schema.tables:
        for column in table.columns:
            if not column.is_generated:
                continue
            for used_column in column.depends_on:
                yield (
                    DEFAULT_CATALOG,
                    USER_SCHEMA,
                    table.name,
                    used_column.name,
                    column.name,
                )


def fill_column_options(ctx: SynthesisContext) -> Iterator[RowValues]:
    """One row per column that allows commit timestamps."""
    for table in ctx.schema.tables:
        for column in table.columns:
            if column.allows_commit_timestamp:
                yield (
                    DEFAULT_CATALOG,
                    USER_SCHEMA,
                    table.name,
                    column.name,
                    Option.ALLOW_COMMIT_TIMESTAMP,
                    Option.BOOL,
                    Option.TRUE,
                )
