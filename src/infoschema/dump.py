"""Tool for dumping information schema relations to the console."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from infoschema.catalog import InformationSchemaCatalog
from infoschema.config import get_settings
from infoschema.errors import InfoSchemaError
from infoschema.logging_config import configure_logging
from infoschema.snapshot import load_schema
from infoschema.view_table import ViewTable


def list_tables(catalog: InformationSchemaCatalog) -> None:
    """List all relations with their row counts."""
    print("Information schema tables:")
    print("-" * 40)
    for table in catalog.tables():
        print(f"  {table.name:<28} {len(table.rows):>6} rows")


def dump_table(table: ViewTable, limit: int | None = None) -> None:
    """Print the rows of a relation as an aligned text table."""
    rows = table.rows[:limit] if limit is not None else table.rows
    cells = [[str(v) for v in row] for row in rows]
    widths = [len(name) for name in table.column_names]
    for row_cells in cells:
        for i, cell in enumerate(row_cells):
            widths[i] = max(widths[i], len(cell))

    header = " | ".join(name.ljust(w) for name, w in zip(table.column_names, widths))
    print(header)
    print("-+-".join("-" * w for w in widths))
    for row_cells in cells:
        print(" | ".join(cell.ljust(w) for cell, w in zip(row_cells, widths)))
    print(f"({len(rows)} of {len(table.rows)} rows)")


def dump_table_json(table: ViewTable, limit: int | None = None) -> None:
    """Print the rows of a relation as JSON."""
    records = table.records()
    if limit is not None:
        records = records[:limit]
    output = {
        "table": table.name,
        "count": len(records),
        "records": records,
    }
    print(json.dumps(output, indent=2))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Dump the information schema of a schema snapshot"
    )
    parser.add_argument(
        "snapshot",
        type=Path,
        help="Path to the JSON schema snapshot",
    )
    parser.add_argument(
        "table",
        nargs="?",
        help="Name of the information schema table to dump (omit to list tables)",
    )
    parser.add_argument(
        "-j", "--json",
        action="store_true",
        help="Output as JSON",
    )
    parser.add_argument(
        "-n", "--limit",
        type=int,
        default=None,
        help="Limit number of rows to display",
    )

    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    if not args.snapshot.exists():
        print(f"Error: Snapshot file not found: {args.snapshot}", file=sys.stderr)
        return 1

    try:
        schema = load_schema(args.snapshot)
        catalog = InformationSchemaCatalog(schema, database_dialect=settings.database_dialect)
    except InfoSchemaError as e:
        print(f"Error loading snapshot: {e}", file=sys.stderr)
        return 1

    if args.table is None:
        list_tables(catalog)
        return 0

    table = catalog.get_table(args.table)
    if table is None:
        print(f"Error: Unknown table: {args.table}", file=sys.stderr)
        print("\nAvailable tables:")
        list_tables(catalog)
        return 1

    if args.json:
        dump_table_json(table, args.limit)
    else:
        dump_table(table, args.limit)
    return 0


if __name__ == "__main__":
    sys.exit(main())
