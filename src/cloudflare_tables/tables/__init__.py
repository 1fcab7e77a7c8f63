"""
Cloudflare tables for the host query engine.

Importing this package registers every table with TableRegistry.
"""

from typing import Optional

from .base import Column, ColumnType, KeyColumns, QueryData, Table
from .custom_hostname import (
    CustomHostnameFilter,
    CustomHostnameRecord,
    CustomHostnameTable,
    get_custom_hostname,
    list_custom_hostnames,
    resolve_zone_id,
)
from .exceptions import MissingKeyColumnError, TableError, TableNotFoundError
from .registry import TableRegistry


def get_table(table_name: str) -> Table:
    """Get a table instance by name."""
    return TableRegistry.get_table(table_name)


def list_tables() -> list[str]:
    """List all registered table names."""
    return TableRegistry.list_tables()


def register_table(table_name: str, table_class: Optional[type] = None):
    """
    Register a table class, directly or as a decorator.

    Usage:
        register_table('my_table', MyTable)

        @register_table('my_table')
        class MyTable(Table):
            ...
    """
    if table_class is None:
        return TableRegistry.register(table_name)
    TableRegistry.register_table(table_name, table_class)
    return table_class


__all__ = [
    # Base contract
    "Column",
    "ColumnType",
    "KeyColumns",
    "QueryData",
    "Table",
    # Custom hostnames
    "CustomHostnameFilter",
    "CustomHostnameRecord",
    "CustomHostnameTable",
    "get_custom_hostname",
    "list_custom_hostnames",
    "resolve_zone_id",
    # Exceptions
    "TableError",
    "MissingKeyColumnError",
    "TableNotFoundError",
    # Registry
    "TableRegistry",
    "get_table",
    "list_tables",
    "register_table",
]
