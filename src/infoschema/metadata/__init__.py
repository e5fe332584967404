"""Self-description metadata of the information schema relations."""

from infoschema.metadata.store import (
    ColumnMeta,
    IndexColumnMeta,
    SelfDescriptionStore,
)

__all__ = [
    "ColumnMeta",
    "IndexColumnMeta",
    "SelfDescriptionStore",
]
