"""Exceptions raised while building the information schema."""

from __future__ import annotations


class InfoSchemaError(Exception):
    """Base class for all infoschema errors."""


class MetadataError(InfoSchemaError):
    """The self-description metadata is malformed or out of sync with the views.

    These are build defects, never conditions to recover from at runtime.
    """


class MissingMetadataError(MetadataError):
    """An information schema column has no self-description entry."""

    def __init__(self, table_name: str, column_name: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(f"Missing metadata for column {table_name}.{column_name}")


class MetadataTypeMismatchError(MetadataError):
    """A self-description entry declares a type that disagrees with its view column."""

    def __init__(self, table_name: str, column_name: str, declared: str, actual: str) -> None:
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(
            f"Metadata for column {table_name}.{column_name} declares type "
            f"{declared}, but the column holds {actual} values"
        )


class RowShapeError(InfoSchemaError):
    """A row does not match the column schema of its view table."""


class ViewTableError(InfoSchemaError):
    """A view table was used in a way its lifecycle does not allow."""


class SnapshotError(InfoSchemaError):
    """A schema snapshot could not be loaded."""
