"""
Abstract base class and data models for table adapters.

Provides the contract between the host query engine and a table: column
definitions, key-column requirements, the equality predicate map, and
the list/get entry points.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional

from cloudflare import Cloudflare

from ..config.settings import Settings
from .exceptions import MissingKeyColumnError


class ColumnType(str, Enum):
    """Column types understood by the host query engine."""

    STRING = "string"
    TIMESTAMP = "timestamp"
    JSON = "json"


@dataclass(frozen=True)
class Column:
    """
    A column exposed to the host query engine.

    Attributes:
        name: Column name; also the record attribute the value is read from
        type: Column type
        description: Human-readable description
    """

    name: str
    type: ColumnType
    description: str = ""


@dataclass(frozen=True)
class KeyColumns:
    """Columns that must carry an equality predicate for an operation."""

    required: tuple[str, ...]

    def missing(self, quals: "QueryData") -> list[str]:
        """Return required columns absent (or empty) in quals."""
        return [name for name in self.required if not quals.get(name)]


@dataclass
class QueryData:
    """
    Equality predicates supplied by the host for one query.

    Attributes:
        equals_quals: Column name -> value for ``column = value`` predicates
    """

    equals_quals: dict[str, str] = field(default_factory=dict)

    def get(self, column: str, default: Optional[str] = None) -> Optional[str]:
        """Return the equality value for a column, or default."""
        return self.equals_quals.get(column, default)

    def __contains__(self, column: str) -> bool:
        return column in self.equals_quals


class Table(ABC):
    """
    Abstract base class for all tables.

    Subclasses must implement:
        - name / description / columns: table metadata
        - list_key_columns / get_key_columns: required predicates
        - list_rows(): Generator yielding row dicts
        - get_row(): Single row dict or None

    Rows are plain dicts keyed by column name, in column order.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Table name used for registry lookup."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable table description."""
        ...

    @property
    @abstractmethod
    def columns(self) -> list[Column]:
        """Columns exposed by the table, in output order."""
        ...

    @property
    @abstractmethod
    def list_key_columns(self) -> KeyColumns:
        """Key columns required by list_rows()."""
        ...

    @property
    @abstractmethod
    def get_key_columns(self) -> KeyColumns:
        """Key columns required by get_row()."""
        ...

    @abstractmethod
    def list_rows(
        self,
        quals: QueryData,
        client: Optional[Cloudflare] = None,
        settings: Optional[Settings] = None,
    ) -> Iterator[dict[str, Any]]:
        """
        Stream rows matching the query predicates.

        Args:
            quals: Equality predicates from the host
            client: Cloudflare client (a new one is built if None)
            settings: Settings used to build the client

        Yields:
            Row dictionaries

        Raises:
            MissingKeyColumnError: If a list key column is missing
        """
        ...

    @abstractmethod
    def get_row(
        self,
        quals: QueryData,
        client: Optional[Cloudflare] = None,
        settings: Optional[Settings] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Fetch a single row by its key columns.

        Returns:
            Row dictionary, or None if the API reports no such record

        Raises:
            MissingKeyColumnError: If a get key column is missing
        """
        ...

    @property
    def column_names(self) -> list[str]:
        """Names of all columns, in output order."""
        return [column.name for column in self.columns]

    def to_row(self, record: Any) -> dict[str, Any]:
        """Map a record onto the table's columns by attribute name."""
        return {column.name: getattr(record, column.name) for column in self.columns}

    def check_key_columns(self, key_columns: KeyColumns, quals: QueryData) -> None:
        """
        Raise if quals lack any of the given key columns.

        Raises:
            MissingKeyColumnError: If a key column is missing or empty
        """
        missing = key_columns.missing(quals)
        if missing:
            raise MissingKeyColumnError(
                table_name=self.name,
                missing=missing,
                required=list(key_columns.required),
            )
