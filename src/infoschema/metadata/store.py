"""Self-description store: static metadata about the information schema's own columns.

The information schema describes its own relations, which are not user
tables, so their nullability, type and key facts come from two CSV tables
shipped with the package instead of from the schema source.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import IO

from infoschema.errors import MetadataError
from infoschema.names import YES

COLUMNS_METADATA_FILE = "columns_metadata.csv"
INDEX_COLUMNS_METADATA_FILE = "columns_metadata_for_index.csv"

COLUMNS_HEADER = ("table_name", "column_name", "is_nullable", "spanner_type")
INDEX_COLUMNS_HEADER = (
    "table_name",
    "column_name",
    "is_nullable",
    "column_ordering",
    "spanner_type",
    "ordinal_position",
)


@dataclass(frozen=True)
class ColumnMeta:
    """Nullability and type of an information schema column."""

    table_name: str
    column_name: str
    is_nullable: str
    spanner_type: str

    @property
    def nullable(self) -> bool:
        return self.is_nullable == YES


@dataclass(frozen=True)
class IndexColumnMeta:
    """A primary key column of an information schema relation.

    An ordinal of 0 means the position is assigned sequentially in column order.
    """

    table_name: str
    column_name: str
    is_nullable: str
    column_ordering: str
    spanner_type: str
    primary_key_ordinal: int = 0


def _read_records(stream: IO[str], header: tuple[str, ...], source: str) -> list[dict[str, str]]:
    reader = csv.DictReader(stream)
    if reader.fieldnames is None or tuple(reader.fieldnames) != header:
        raise MetadataError(
            f"Error reading {source}: expected header {','.join(header)}, "
            f"got {','.join(reader.fieldnames or [])}"
        )
    records = []
    for record in reader:
        if None in record or any(v is None for v in record.values()):
            raise MetadataError(f"Error reading {source}: malformed line {reader.line_num}")
        records.append(record)
    return records


class SelfDescriptionStore:
    """Column and primary key metadata of the information schema relations,
    keyed by (table name, column name)."""

    def __init__(
        self,
        columns: list[ColumnMeta],
        key_columns: list[IndexColumnMeta],
    ) -> None:
        self._columns: dict[tuple[str, str], ColumnMeta] = {}
        self._key_columns: dict[tuple[str, str], IndexColumnMeta] = {}
        for entry in columns:
            key = (entry.table_name, entry.column_name)
            if key in self._columns:
                raise MetadataError(f"Duplicate column metadata for {key[0]}.{key[1]}")
            self._columns[key] = entry
        for key_entry in key_columns:
            key = (key_entry.table_name, key_entry.column_name)
            if key in self._key_columns:
                raise MetadataError(f"Duplicate key column metadata for {key[0]}.{key[1]}")
            self._key_columns[key] = key_entry

    @classmethod
    def from_streams(cls, columns: IO[str], key_columns: IO[str]) -> SelfDescriptionStore:
        """Load the store from two open CSV streams."""
        column_entries = [
            ColumnMeta(
                table_name=r["table_name"],
                column_name=r["column_name"],
                is_nullable=r["is_nullable"],
                spanner_type=r["spanner_type"],
            )
            for r in _read_records(columns, COLUMNS_HEADER, COLUMNS_METADATA_FILE)
        ]
        key_entries = []
        for r in _read_records(key_columns, INDEX_COLUMNS_HEADER, INDEX_COLUMNS_METADATA_FILE):
            try:
                ordinal = int(r["ordinal_position"])
            except ValueError:
                raise MetadataError(
                    f"Invalid ordinal_position {r['ordinal_position']!r} for "
                    f"{r['table_name']}.{r['column_name']}"
                ) from None
            key_entries.append(
                IndexColumnMeta(
                    table_name=r["table_name"],
                    column_name=r["column_name"],
                    is_nullable=r["is_nullable"],
                    column_ordering=r["column_ordering"],
                    spanner_type=r["spanner_type"],
                    primary_key_ordinal=ordinal,
                )
            )
        return cls(column_entries, key_entries)

    @classmethod
    def from_directory(cls, directory: Path | str) -> SelfDescriptionStore:
        """Load the store from a directory holding both CSV files."""
        directory = Path(directory)
        with open(directory / COLUMNS_METADATA_FILE, newline="") as columns, open(
            directory / INDEX_COLUMNS_METADATA_FILE, newline=""
        ) as key_columns:
            return cls.from_streams(columns, key_columns)

    @classmethod
    def default(cls) -> SelfDescriptionStore:
        """Return the store shipped with the package, loaded once per process."""
        return _default_store()

    def find_column(self, table_name: str, column_name: str) -> ColumnMeta | None:
        """Get the metadata of a column, or None if there is none."""
        return self._columns.get((table_name, column_name))

    def find_key_column(self, table_name: str, column_name: str) -> IndexColumnMeta | None:
        """Get the primary key metadata of a column, or None if it is not a key column."""
        return self._key_columns.get((table_name, column_name))

    @property
    def columns(self) -> list[ColumnMeta]:
        return list(self._columns.values())

    @property
    def key_columns(self) -> list[IndexColumnMeta]:
        return list(self._key_columns.values())


@lru_cache(maxsize=None)
def _default_store() -> SelfDescriptionStore:
    package = resources.files(__package__)
    with package.joinpath(COLUMNS_METADATA_FILE).open("r", newline="") as columns, package.joinpath(
        INDEX_COLUMNS_METADATA_FILE
    ).open("r", newline="") as key_columns:
        return SelfDescriptionStore.from_streams(columns, key_columns)
