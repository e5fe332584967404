"""Lifecycle of the active information schema catalog."""

from __future__ import annotations

import threading

import structlog

from infoschema.catalog import InformationSchemaCatalog
from infoschema.metadata import SelfDescriptionStore
from infoschema.names import Option
from infoschema.schema import Schema

logger = structlog.stdlib.get_logger(__name__)


class CatalogManager:
    """Holds the catalog of the active schema snapshot.

    A schema change activates a new snapshot; its catalog is built in full
    and then replaces the previous one. Readers that already hold a catalog
    keep using it unchanged.
    """

    def __init__(
        self,
        *,
        metadata: SelfDescriptionStore | None = None,
        database_dialect: str = Option.GOOGLE_STANDARD_SQL,
    ) -> None:
        self.metadata = metadata if metadata is not None else SelfDescriptionStore.default()
        self.database_dialect = database_dialect
        self._current: InformationSchemaCatalog | None = None
        self._lock = threading.Lock()

    @property
    def current(self) -> InformationSchemaCatalog | None:
        """The catalog of the active snapshot, or None before the first activation."""
        return self._current

    def activate(self, schema: Schema) -> InformationSchemaCatalog:
        """Make a schema snapshot active and return its catalog.

        Activating the snapshot that is already active returns the existing
        catalog without rebuilding it. If the build fails the previous
        catalog stays active.
        """
        with self._lock:
            current = self._current
            if current is not None and current.schema is schema:
                return current

            catalog = InformationSchemaCatalog(
                schema,
                metadata=self.metadata,
                database_dialect=self.database_dialect,
            )
            self._current = catalog
            logger.info("activated information schema", user_tables=len(schema))
            return catalog
