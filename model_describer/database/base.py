"""Abstract base class for schema introspection."""

from abc import ABC, abstractmethod
from typing import Dict, List


class SchemaIntrospector(ABC):
    """Abstract base class for table schema lookups.

    Subclasses must implement the abstract methods to provide
    backend-specific column listings.
    """

    @abstractmethod
    def get_column_names(self, table: str) -> List[str]:
        """Get the column names of a table.

        Args:
            table: Table name

        Returns:
            List of column names in table order
        """
        pass

    @abstractmethod
    def get_column_type(self, table: str, column: str) -> str:
        """Get the storage type of a column.

        Args:
            table: Table name
            column: Column name

        Returns:
            Storage type name (e.g. "string", "integer", "boolean")
        """
        pass

    def get_column_types(self, table: str) -> Dict[str, str]:
        """Get storage types for every column of a table, in table order."""
        return {
            column: self.get_column_type(table, column)
            for column in self.get_column_names(table)
        }

    def close(self):
        """Release any resources held by the introspector."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
