"""Column schemas of the information schema relations.

``VIEW_SPECS`` lists every relation in registration order together with its
ordered column list and the synthesizer that fills it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from infoschema import synth
from infoschema.names import Col, View
from infoschema.synth import RowValues, SynthesisContext
from infoschema.types import ValueType
from infoschema.view_table import ViewTable

STRING = ValueType.STRING
BOOL = ValueType.BOOL
INT64 = ValueType.INT64

Synthesizer = Callable[[SynthesisContext], Iterator[RowValues]]


@dataclass(frozen=True)
class ViewTableSpec:
    """Declaration of one relation: its name, columns and row synthesizer."""

    name: str
    columns: tuple[tuple[str, ValueType], ...]
    fill: Synthesizer

    def create(self) -> ViewTable:
        """Create an empty view table with this column schema."""
        return ViewTable(self.name, self.columns)


VIEW_SPECS: tuple[ViewTableSpec, ...] = (
    ViewTableSpec(
        View.SCHEMATA,
        (
            (Col.CATALOG_NAME, STRING),
            (Col.SCHEMA_NAME, STRING),
        ),
        synth.fill_schemata,
    ),
    ViewTableSpec(
        View.SPANNER_STATISTICS,
        (
            (Col.CATALOG_NAME, STRING),
            (Col.SCHEMA_NAME, STRING),
            (Col.PACKAGE_NAME, STRING),
            (Col.ALLOW_GC, BOOL),
        ),
        synth.fill_spanner_statistics,
    ),
    ViewTableSpec(
        View.DATABASE_OPTIONS,
        (
            (Col.CATALOG_NAME, STRING),
            (Col.SCHEMA_NAME, STRING),
            (Col.OPTION_NAME, STRING),
            (Col.OPTION_TYPE, STRING),
            (Col.OPTION_VALUE, STRING),
        ),
        synth.fill_database_options,
    ),
    ViewTableSpec(
        View.TABLES,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_TYPE, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.PARENT_TABLE_NAME, STRING),
            (Col.ON_DELETE_ACTION, STRING),
            (Col.SPANNER_STATE, STRING),
            (Col.ROW_DELETION_POLICY_EXPRESSION, STRING),
        ),
        synth.fill_tables,
    ),
    ViewTableSpec(
        View.COLUMNS,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.ORDINAL_POSITION, INT64),
            (Col.COLUMN_DEFAULT, STRING),
            (Col.DATA_TYPE, STRING),
            (Col.IS_NULLABLE, STRING),
            (Col.SPANNER_TYPE, STRING),
            (Col.IS_GENERATED, STRING),
            (Col.GENERATION_EXPRESSION, STRING),
            (Col.IS_STORED, STRING),
            (Col.SPANNER_STATE, STRING),
        ),
        synth.fill_columns,
    ),
    ViewTableSpec(
        View.COLUMN_COLUMN_USAGE,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.DEPENDENT_COLUMN, STRING),
        ),
        synth.fill_column_column_usage,
    ),
    ViewTableSpec(
        View.INDEXES,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.INDEX_NAME, STRING),
            (Col.INDEX_TYPE, STRING),
            (Col.PARENT_TABLE_NAME, STRING),
            (Col.IS_UNIQUE, BOOL),
            (Col.IS_NULL_FILTERED, BOOL),
            (Col.INDEX_STATE, STRING),
            (Col.SPANNER_IS_MANAGED, BOOL),
        ),
        synth.fill_indexes,
    ),
    ViewTableSpec(
        View.INDEX_COLUMNS,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.INDEX_NAME, STRING),
            (Col.INDEX_TYPE, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.ORDINAL_POSITION, INT64),
            (Col.COLUMN_ORDERING, STRING),
            (Col.IS_NULLABLE, STRING),
            (Col.SPANNER_TYPE, STRING),
        ),
        synth.fill_index_columns,
    ),
    ViewTableSpec(
        View.COLUMN_OPTIONS,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.OPTION_NAME, STRING),
            (Col.OPTION_TYPE, STRING),
            (Col.OPTION_VALUE, STRING),
        ),
        synth.fill_column_options,
    ),
    ViewTableSpec(
        View.TABLE_CONSTRAINTS,
        (
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.CONSTRAINT_TYPE, STRING),
            (Col.IS_DEFERRABLE, STRING),
            (Col.INITIALLY_DEFERRED, STRING),
            (Col.ENFORCED, STRING),
        ),
        synth.fill_table_constraints,
    ),
    ViewTableSpec(
        View.CHECK_CONSTRAINTS,
        (
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
            (Col.CHECK_CLAUSE, STRING),
            (Col.SPANNER_STATE, STRING),
        ),
        synth.fill_check_constraints,
    ),
    ViewTableSpec(
        View.CONSTRAINT_TABLE_USAGE,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
        ),
        synth.fill_constraint_table_usage,
    ),
    ViewTableSpec(
        View.REFERENTIAL_CONSTRAINTS,
        (
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
            (Col.UNIQUE_CONSTRAINT_CATALOG, STRING),
            (Col.UNIQUE_CONSTRAINT_SCHEMA, STRING),
            (Col.UNIQUE_CONSTRAINT_NAME, STRING),
            (Col.MATCH_OPTION, STRING),
            (Col.UPDATE_RULE, STRING),
            (Col.DELETE_RULE, STRING),
            (Col.SPANNER_STATE, STRING),
        ),
        synth.fill_referential_constraints,
    ),
    ViewTableSpec(
        View.KEY_COLUMN_USAGE,
        (
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.ORDINAL_POSITION, INT64),
            (Col.POSITION_IN_UNIQUE_CONSTRAINT, INT64),
        ),
        synth.fill_key_column_usage,
    ),
    ViewTableSpec(
        View.CONSTRAINT_COLUMN_USAGE,
        (
            (Col.TABLE_CATALOG, STRING),
            (Col.TABLE_SCHEMA, STRING),
            (Col.TABLE_NAME, STRING),
            (Col.COLUMN_NAME, STRING),
            (Col.CONSTRAINT_CATALOG, STRING),
            (Col.CONSTRAINT_SCHEMA, STRING),
            (Col.CONSTRAINT_NAME, STRING),
        ),
        synth.fill_constraint_column_usage,
    ),
)
