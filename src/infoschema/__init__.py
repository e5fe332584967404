"""infoschema - information schema relations synthesized from a database schema."""

from infoschema.catalog import InformationSchemaCatalog
from infoschema.errors import (
    InfoSchemaError,
    MetadataError,
    MetadataTypeMismatchError,
    MissingMetadataError,
    RowShapeError,
    SnapshotError,
    ViewTableError,
)
from infoschema.manager import CatalogManager
from infoschema.metadata import SelfDescriptionStore
from infoschema.parsing import ParsedType, TypeParser
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
from infoschema.snapshot import load_schema, schema_from_dict
from infoschema.types import ColumnType, TypeCode, Value, ValueType
from infoschema.view_table import ViewTable

__all__ = [
    # Main API
    "InformationSchemaCatalog",
    "CatalogManager",
    "SelfDescriptionStore",
    "load_schema",
    "schema_from_dict",
    # Schema source
    "Schema",
    "Table",
    "Column",
    "KeyColumn",
    "Index",
    "ForeignKey",
    "CheckConstraint",
    "RowDeletionPolicy",
    "OnDeleteAction",
    # Types
    "ColumnType",
    "TypeCode",
    "Value",
    "ValueType",
    "ParsedType",
    "TypeParser",
    "ViewTable",
    # Errors
    "InfoSchemaError",
    "MetadataError",
    "MissingMetadataError",
    "MetadataTypeMismatchError",
    "RowShapeError",
    "SnapshotError",
    "ViewTableError",
]

__version__ = "0.1.0"
