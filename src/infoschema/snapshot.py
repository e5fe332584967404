"""Loading schema snapshots from JSON.

A snapshot describes an already validated schema::

    {
      "tables": [
        {
          "name": "Users",
          "columns": [
            {"name": "id", "type": "INT64", "nullable": false},
            {"name": "email", "type": "STRING(MAX)", "nullable": false},
            {"name": "lower_email", "type": "STRING(MAX)",
             "generated": "(LOWER(email))", "depends_on": ["email"]},
            {"name": "created", "type": "TIMESTAMP",
             "default": "(CURRENT_TIMESTAMP())", "allow_commit_timestamp": true}
          ],
          "primary_key": ["id"],
          "parent": null,
          "on_delete": "NO ACTION",
          "row_deletion_policy": {"column": "created", "days": 30},
          "indexes": [
            {"name": "UsersByEmail", "columns": [{"column": "email", "descending": true}],
             "storing": [], "unique": true, "null_filtered": false, "managed": false,
             "interleave_in": null}
          ],
          "foreign_keys": [
            {"name": "FK_Orders_Users", "columns": ["user_id"], "referenced_table": "Users",
             "referenced_columns": ["id"], "referenced_index": null}
          ],
          "check_constraints": [
            {"name": "CK_age", "expression": "age > 0", "columns": ["age"]}
          ]
        }
      ]
    }

This is not DDL parsing: only the structure is read, and only as much
checking is done as needed to link the graph together.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infoschema.errors import SnapshotError
from infoschema.parsing import TypeParser
from infoschema.schema import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    KeyColumn,
    OnDeleteAction,
    RowDeletionPolicy,
    Schema,
    Table,
)


def load_schema(path: Path | str) -> Schema:
    """Load a schema snapshot from a JSON file."""
    path = Path(path)
    if not path.exists():
        raise SnapshotError(f"Snapshot file not found: {path}")
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid JSON in {path}: {e}") from e
    return schema_from_dict(data)


def schema_from_dict(data: dict[str, Any]) -> Schema:
    """Build a schema from a decoded snapshot.

    Uses two-phase resolution so tables can refer to tables declared later
    (and to themselves):
    Phase 1: Create every table with its columns.
    Phase 2: Link parents, keys, indexes, foreign keys and checks.
    """
    if not isinstance(data, dict) or not isinstance(data.get("tables"), list):
        raise SnapshotError("Snapshot must be an object with a 'tables' list")
    specs: list[dict[str, Any]] = data["tables"]

    parser = TypeParser()
    tables: dict[str, Table] = {}

    # Phase 1: Tables and columns
    for spec in specs:
        name = _require(spec, "name", "table")
        if name in tables:
            raise SnapshotError(f"Duplicate table '{name}'")
        tables[name] = Table(
            name=name,
            columns=[_build_column(parser, name, c) for c in spec.get("columns", [])],
        )

    # Phase 2: Everything that refers to other columns or tables
    for spec in specs:
        table = tables[spec["name"]]
        for column_spec in spec.get("columns", []):
            column = table.get_column(column_spec["name"])
            column.depends_on = [
                _lookup_column(table, n) for n in column_spec.get("depends_on", [])
            ]

        table.primary_key = [_build_key_column(table, k) for k in spec.get("primary_key", [])]

        parent_name = spec.get("parent")
        if parent_name is not None:
            table.parent = _lookup_table(tables, parent_name)
        on_delete = spec.get("on_delete", OnDeleteAction.NO_ACTION.value)
        try:
            table.on_delete_action = OnDeleteAction(on_delete)
        except ValueError:
            raise SnapshotError(
                f"Invalid on_delete action {on_delete!r} for table '{table.name}'"
            ) from None

        policy = spec.get("row_deletion_policy")
        if policy is not None:
            what = f"row deletion policy of '{table.name}'"
            num_days = _require(policy, "days", what)
            if not isinstance(num_days, int) or isinstance(num_days, bool) or num_days < 0:
                raise SnapshotError(f"Invalid number of days {num_days!r} in {what}")
            table.row_deletion_policy = RowDeletionPolicy(
                column=_lookup_column(table, _require(policy, "column", what)),
                num_days=num_days,
            )

        table.indexes = [_build_index(tables, table, i) for i in spec.get("indexes", [])]
        table.check_constraints = [
            CheckConstraint(
                name=_require(c, "name", f"check constraint of '{table.name}'"),
                expression=_require(c, "expression", f"check constraint of '{table.name}'"),
                dependent_columns=[_lookup_column(table, n) for n in c.get("columns", [])],
            )
            for c in spec.get("check_constraints", [])
        ]

    # Foreign keys may name indexes on tables linked above
    for spec in specs:
        table = tables[spec["name"]]
        table.foreign_keys = [
            _build_foreign_key(tables, table, fk) for fk in spec.get("foreign_keys", [])
        ]

    return Schema(list(tables.values()))


def _require(spec: Any, key: str, what: str) -> Any:
    if not isinstance(spec, dict) or spec.get(key) is None:
        raise SnapshotError(f"Missing '{key}' in {what}")
    return spec[key]


def _build_column(parser: TypeParser, table_name: str, spec: dict[str, Any]) -> Column:
    name = _require(spec, "name", f"column of '{table_name}'")
    type_text = _require(spec, "type", f"column '{table_name}.{name}'")
    try:
        parsed = parser.parse(type_text)
    except (SyntaxError, ValueError) as e:
        raise SnapshotError(f"Invalid type {type_text!r} for column '{table_name}.{name}': {e}") from e

    generated = spec.get("generated")
    default = spec.get("default")
    if generated is not None and default is not None:
        raise SnapshotError(f"Column '{table_name}.{name}' is both generated and defaulted")

    return Column(
        name=name,
        type=parsed.column_type,
        declared_max_length=parsed.max_length,
        is_nullable=bool(spec.get("nullable", True)),
        is_generated=generated is not None,
        has_default_value=default is not None,
        expression=generated if generated is not None else default,
        allows_commit_timestamp=bool(spec.get("allow_commit_timestamp", False)),
    )


def _lookup_table(tables: dict[str, Table], name: str) -> Table:
    table = tables.get(name)
    if table is None:
        raise SnapshotError(f"Unknown table '{name}'")
    return table


def _lookup_column(table: Table, name: str) -> Column:
    column = table.find_column(name)
    if column is None:
        raise SnapshotError(f"Unknown column '{name}' in table '{table.name}'")
    return column


def _build_key_column(table: Table, spec: str | dict[str, Any]) -> KeyColumn:
    """Key columns are a column name or {"column": name, "descending": bool}."""
    if isinstance(spec, str):
        return KeyColumn(column=_lookup_column(table, spec))
    name = _require(spec, "column", f"key of '{table.name}'")
    return KeyColumn(
        column=_lookup_column(table, name),
        is_descending=bool(spec.get("descending", False)),
    )


def _build_index(tables: dict[str, Table], table: Table, spec: dict[str, Any]) -> Index:
    name = _require(spec, "name", f"index of '{table.name}'")
    parent_name = spec.get("interleave_in")
    return Index(
        name=name,
        key_columns=[_build_key_column(table, k) for k in spec.get("columns", [])],
        stored_columns=[_lookup_column(table, n) for n in spec.get("storing", [])],
        is_unique=bool(spec.get("unique", False)),
        is_null_filtered=bool(spec.get("null_filtered", False)),
        is_managed=bool(spec.get("managed", False)),
        parent=_lookup_table(tables, parent_name) if parent_name is not None else None,
    )


def _build_foreign_key(tables: dict[str, Table], table: Table, spec: dict[str, Any]) -> ForeignKey:
    name = _require(spec, "name", f"foreign key of '{table.name}'")
    referenced = _lookup_table(tables, _require(spec, "referenced_table", f"foreign key '{name}'"))
    referencing_columns = [_lookup_column(table, n) for n in spec.get("columns", [])]
    referenced_columns = [_lookup_column(referenced, n) for n in spec.get("referenced_columns", [])]
    if len(referencing_columns) != len(referenced_columns):
        raise SnapshotError(
            f"Foreign key '{name}' has {len(referencing_columns)} columns but references "
            f"{len(referenced_columns)}"
        )

    referenced_index = None
    index_name = spec.get("referenced_index")
    if index_name is not None:
        referenced_index = referenced.find_index(index_name)
        if referenced_index is None:
            raise SnapshotError(f"Unknown index '{index_name}' on table '{referenced.name}'")

    return ForeignKey(
        name=name,
        referencing_table=table,
        referencing_columns=referencing_columns,
        referenced_table=referenced,
        referenced_columns=referenced_columns,
        referenced_index=referenced_index,
    )
