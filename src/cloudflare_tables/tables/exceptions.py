"""
Custom exceptions for the tables module.

Provides specialized exception classes for errors raised by the table
layer before any request reaches the Cloudflare API.
"""


class TableError(Exception):
    """
    Base exception for all table-related errors.

    API and transport errors from the Cloudflare client are not wrapped;
    they propagate unchanged.
    """

    pass


class MissingKeyColumnError(TableError):
    """
    Raised when a query lacks a required key column.

    Attributes:
        table_name: The table being queried
        missing: Key columns absent (or empty) in the query
        required: All key columns the operation requires
    """

    def __init__(
        self,
        table_name: str,
        missing: list[str],
        required: list[str] | None = None,
    ):
        self.table_name = table_name
        self.missing = missing
        self.required = required or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with missing and required columns."""
        missing = ", ".join(self.missing)
        if self.required:
            required = ", ".join(self.required)
            return (
                f"Table '{self.table_name}' requires key column(s) {required}; "
                f"missing: {missing}"
            )
        return f"Table '{self.table_name}' missing key column(s): {missing}"


class TableNotFoundError(TableError):
    """
    Raised when a table is not registered.

    Attributes:
        table_name: The name of the missing table
        available_tables: List of registered table names
    """

    def __init__(
        self,
        table_name: str,
        available_tables: list[str] | None = None,
    ):
        self.table_name = table_name
        self.available_tables = available_tables or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with available tables."""
        if self.available_tables:
            available = ", ".join(sorted(self.available_tables))
            return f"Unknown table: '{self.table_name}'. Available tables: {available}"
        return f"Unknown table: '{self.table_name}'. No tables registered."
