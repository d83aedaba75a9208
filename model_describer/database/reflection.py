"""SQLAlchemy backed schema introspectors."""

import logging
from typing import Dict, List, Optional

from sqlalchemy import MetaData, create_engine, inspect
from sqlalchemy.engine import Engine

from .base import SchemaIntrospector
from .type_mappers import storage_type_name

logger = logging.getLogger(__name__)


class MetadataSchemaIntrospector(SchemaIntrospector):
    """Reads columns from SQLAlchemy table metadata, without a database."""

    def __init__(self, metadata: MetaData):
        self.metadata = metadata

    def _table(self, table: str):
        return self.metadata.tables[table]

    def get_column_names(self, table: str) -> List[str]:
        if table not in self.metadata.tables:
            logger.debug("Table %s is not declared in metadata", table)
            return []
        return [column.name for column in self._table(table).columns]

    def get_column_type(self, table: str, column: str) -> str:
        return storage_type_name(self._table(table).columns[column].type)


class EngineSchemaIntrospector(SchemaIntrospector):
    """Reflects columns from a live database through SQLAlchemy's inspector.

    Column listings are cached per table for the lifetime of the
    introspector, so repeated lookups do not hit the database again.
    """

    def __init__(self, engine: Optional[Engine] = None, database_url: Optional[str] = None):
        """Initialize the introspector.

        Args:
            engine: Existing engine to reflect from (not disposed on close)
            database_url: SQLAlchemy URL used to create an engine when
                          no engine is given
        """
        if engine is None and not database_url:
            raise ValueError("Either engine or database_url is required")
        self._owns_engine = engine is None
        self.engine = engine if engine is not None else create_engine(database_url)
        self._inspector = None
        self._columns: Dict[str, Dict[str, str]] = {}

    def _get_columns(self, table: str) -> Dict[str, str]:
        if table not in self._columns:
            if self._inspector is None:
                self._inspector = inspect(self.engine)
            if self._inspector.has_table(table):
                reflected = self._inspector.get_columns(table)
            else:
                logger.debug("Table %s does not exist in %s", table, self.engine.url)
                reflected = []
            self._columns[table] = {
                column["name"]: storage_type_name(column["type"]) for column in reflected
            }
            logger.debug("Reflected %d columns from %s", len(reflected), table)
        return self._columns[table]

    def get_column_names(self, table: str) -> List[str]:
        return list(self._get_columns(table))

    def get_column_type(self, table: str, column: str) -> str:
        return self._get_columns(table)[column]

    def close(self):
        """Dispose the engine if this introspector created it."""
        if self._owns_engine:
            self.engine.dispose()
        self._inspector = None
        self._columns = {}
