"""
Table registry.

Provides registration and lookup of table implementations by name.
"""

import logging
from typing import Type

from .base import Table
from .exceptions import TableNotFoundError

logger = logging.getLogger(__name__)


class TableRegistry:
    """
    Registry for tables exposed to the host query engine.

    Usage:
        # Register using decorator
        @TableRegistry.register('cloudflare_custom_hostname')
        class CustomHostnameTable(Table):
            ...

        # Get table instance
        table = TableRegistry.get_table('cloudflare_custom_hostname')

        # List all tables
        tables = TableRegistry.list_tables()
    """

    _tables: dict[str, Type[Table]] = {}

    @classmethod
    def register(cls, table_name: str):
        """
        Decorator to register a table class.

        Args:
            table_name: Table identifier for registry lookup

        Returns:
            Decorator function
        """

        def decorator(table_class: Type[Table]) -> Type[Table]:
            cls.register_table(table_name, table_class)
            return table_class

        return decorator

    @classmethod
    def register_table(cls, table_name: str, table_class: Type[Table]) -> None:
        """
        Register a table class.

        Args:
            table_name: Table identifier (e.g., 'cloudflare_custom_hostname')
            table_class: Class implementing Table

        Raises:
            TypeError: If table_class doesn't inherit from Table
        """
        if not issubclass(table_class, Table):
            raise TypeError(
                f"Table class must inherit from Table, got {table_class.__name__}"
            )

        table_name = table_name.lower()

        if table_name in cls._tables:
            logger.warning(f"Overwriting existing table '{table_name}'")

        cls._tables[table_name] = table_class
        logger.debug(f"Registered table: {table_name}")

    @classmethod
    def get_table(cls, table_name: str) -> Table:
        """
        Get a table instance by name.

        Raises:
            TableNotFoundError: If table is not registered
        """
        table_name = table_name.lower()

        if table_name not in cls._tables:
            raise TableNotFoundError(
                table_name=table_name,
                available_tables=list(cls._tables.keys()),
            )

        return cls._tables[table_name]()

    @classmethod
    def list_tables(cls) -> list[str]:
        """Sorted list of registered table names."""
        return sorted(cls._tables.keys())

    @classmethod
    def clear(cls) -> None:
        """Remove all registered tables (useful for testing)."""
        cls._tables.clear()
        logger.debug("Cleared all registered tables")
