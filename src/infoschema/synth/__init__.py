"""Row synthesizers, one per information schema relation.

Each synthesizer takes a ``SynthesisContext`` and yields the relation's rows
as tuples of Python scalars in view column order.
"""

from infoschema.synth.columns import (
    fill_column_column_usage,
    fill_column_options,
    fill_columns,
)
from infoschema.synth.common import RowValues, SynthesisContext
from infoschema.synth.constraints import (
    fill_check_constraints,
    fill_constraint_column_usage,
    fill_constraint_table_usage,
    fill_key_column_usage,
    fill_referential_constraints,
    fill_table_constraints,
)
from infoschema.synth.indexes import fill_index_columns, fill_indexes
from infoschema.synth.tables import (
    fill_database_options,
    fill_schemata,
    fill_spanner_statistics,
    fill_tables,
)

__all__ = [
    "RowValues",
    "SynthesisContext",
    "fill_schemata",
    "fill_spanner_statistics",
    "fill_database_options",
    "fill_tables",
    "fill_columns",
    "fill_column_column_usage",
    "fill_indexes",
    "fill_index_columns",
    "fill_column_options",
    "fill_table_constraints",
    "fill_check_constraints",
    "fill_constraint_table_usage",
    "fill_referential_constraints",
    "fill_key_column_usage",
    "fill_constraint_column_usage",
]
