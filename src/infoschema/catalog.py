"""Assembly of the information schema catalog from a schema snapshot."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

import structlog

from infoschema.errors import MetadataError, MetadataTypeMismatchError, MissingMetadataError
from infoschema.metadata import SelfDescriptionStore
from infoschema.names import Option
from infoschema.parsing import TypeParser
from infoschema.registry import VIEW_SPECS
from infoschema.schema import Schema
from infoschema.synth import SynthesisContext
from infoschema.types import TypeCode, ValueType
from infoschema.view_table import Row, ViewColumn, ViewTable

logger = structlog.stdlib.get_logger(__name__)

# Cell type each declared column type is stored as
_CELL_TYPES: dict[TypeCode, ValueType] = {
    TypeCode.STRING: ValueType.STRING,
    TypeCode.BOOL: ValueType.BOOL,
    TypeCode.INT64: ValueType.INT64,
}


@lru_cache(maxsize=None)
def _type_parser() -> TypeParser:
    parser = TypeParser()
    parser.build(debug=False, write_tables=False)
    return parser


class InformationSchemaCatalog:
    """The information schema relations of one schema snapshot.

    Construction runs in two phases. First every relation's column schema is
    registered, so the full namespace exists. The self-description metadata
    is then checked against it, and only after that is every relation filled.
    Relations describing the information schema itself read the registered
    namespace, so the phases are never interleaved.

    Once built, the catalog is immutable and can be shared by any number of
    readers.

    Args:
        schema: The user schema snapshot to describe.
        metadata: Self-description store; defaults to the one shipped with
            the package.
        database_dialect: Value advertised by DATABASE_OPTIONS.

    Raises:
        MissingMetadataError: A relation column has no self-description entry.
        MetadataTypeMismatchError: An entry's type disagrees with its column.
    """

    def __init__(
        self,
        schema: Schema,
        *,
        metadata: SelfDescriptionStore | None = None,
        database_dialect: str = Option.GOOGLE_STANDARD_SQL,
    ) -> None:
        self.schema = schema
        self.metadata = metadata if metadata is not None else SelfDescriptionStore.default()
        self.database_dialect = database_dialect
        self._tables: dict[str, ViewTable] = {}

        self._register()
        self._validate_metadata()
        self._fill()

    def _register(self) -> None:
        for spec in VIEW_SPECS:
            self._tables[spec.name.upper()] = spec.create()
        logger.debug("registered information schema tables", count=len(self._tables))

    def _validate_metadata(self) -> None:
        for table in self._tables.values():
            for column in table.columns:
                meta = self.metadata.find_column(table.name, column.name)
                if meta is None:
                    logger.critical(
                        "missing self-description metadata",
                        table=table.name,
                        column=column.name,
                    )
                    raise MissingMetadataError(table.name, column.name)
                self._check_type(table, column, meta.spanner_type)

                key_meta = self.metadata.find_key_column(table.name, column.name)
                if key_meta is not None:
                    self._check_type(table, column, key_meta.spanner_type)

    def _check_type(self, table: ViewTable, column: ViewColumn, type_text: str) -> None:
        try:
            parsed = _type_parser().parse(type_text)
        except (SyntaxError, ValueError) as e:
            raise MetadataError(
                f"Invalid type {type_text!r} for column {table.name}.{column.name}: {e}"
            ) from e
        if _CELL_TYPES.get(parsed.column_type.code) is not column.type:
            raise MetadataTypeMismatchError(
                table.name, column.name, type_text, column.type.value
            )

    def _fill(self) -> None:
        ctx = SynthesisContext(
            schema=self.schema,
            view_tables=list(self._tables.values()),
            metadata=self.metadata,
            database_dialect=self.database_dialect,
        )
        for spec in VIEW_SPECS:
            table = self._tables[spec.name.upper()]
            table.set_rows(spec.fill(ctx))
            logger.debug("filled information schema table", table=table.name, rows=len(table.rows))
        logger.info(
            "information schema built",
            user_tables=len(self.schema),
            tables=len(self._tables),
            rows=sum(len(t.rows) for t in self._tables.values()),
        )

    def __repr__(self) -> str:
        return f"InformationSchemaCatalog(tables={len(self._tables)}, user_tables={len(self.schema)})"

    def __contains__(self, name: str) -> bool:
        return name.upper() in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def tables(self) -> list[ViewTable]:
        """Return every relation in registration order."""
        return list(self._tables.values())

    def get_table(self, name: str) -> ViewTable | None:
        """Get a relation by name, ignoring case."""
        return self._tables.get(name.upper())

    def get_table_or_raise(self, name: str) -> ViewTable:
        """Get a relation by name, raising KeyError if not found."""
        table = self.get_table(name)
        if table is None:
            raise KeyError(f"Unknown information schema table: {name}")
        return table

    def rows(self, name: str) -> tuple[Row, ...]:
        """Return the typed rows of a relation."""
        return self.get_table_or_raise(name).rows

    def records(self, name: str) -> list[dict[str, Any]]:
        """Return the rows of a relation as dicts of column name to Python value."""
        return self.get_table_or_raise(name).records()
