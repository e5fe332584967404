"""Synthesizers for the namespace and table listing relations."""

from __future__ import annotations

from typing import Iterator

from infoschema.names import (
    DEFAULT_CATALOG,
    INFORMATION_SCHEMA,
    USER_SCHEMA,
    Option,
    State,
    TableType,
)
from infoschema.synth.common import RowValues, SynthesisContext


def fill_schemata(ctx: SynthesisContext) -> Iterator[RowValues]:
    """One row for the user namespace and one for the introspection namespace."""
    yield (DEFAULT_CATALOG, USER_SCHEMA)
    yield (DEFAULT_CATALOG, INFORMATION_SCHEMA)


def fill_spanner_statistics(ctx: SynthesisContext) -> Iterator[RowValues]:
    """Statistics packages are not tracked; the relation is always empty."""
    return iter(())


def fill_database_options(ctx: SynthesisContext) -> Iterator[RowValues]:
    yield (
        DEFAULT_CATALOG,
        USER_SCHEMA,
        Option.DATABASE_DIALECT,
        Option.STRING,
        ctx.database_dialect,
    )


def fill_tables(ctx: SynthesisContext) -> Iterator[RowValues]:
    """One BASE TABLE row per user table, then one VIEW row per relation."""
    for table in ctx.schema.tables:
        parent = table.parent
        policy = table.row_deletion_policy
        yield (
            DEFAULT_CATALOG,
            USER_SCHEMA,
            TableType.BASE_TABLE,
            table.name,
            parent.name if parent else None,
            table.on_delete_action.value if parent else None,
            State.COMMITTED,
            str(policy) if policy is not None else None,
        )

    for view in ctx.view_tables:
        yield (
            DEFAULT_CATALOG,
            INFORMATION_SCHEMA,
            TableType.VIEW,
            view.name,
            None,
            None,
            None,
            None,
        )
