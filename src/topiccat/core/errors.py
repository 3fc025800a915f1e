"""Error types raised by the topic catalog.

Public catalog operations only raise these; SDK exceptions from the Kafka
admin client or the schema registry client are chained as `__cause__`.
"""

from __future__ import annotations

from topiccat.core.models import ObjectPath


class CatalogError(RuntimeError):
    """Raised when a catalog operation fails."""


class DatabaseNotExistError(CatalogError):
    """Raised when a database is not the catalog's virtual database."""

    def __init__(self, catalog_name: str, database_name: str) -> None:
        super().__init__(
            f"Database {database_name} does not exist in Catalog {catalog_name}."
        )
        self.catalog_name = catalog_name
        self.database_name = database_name


class TableNotExistError(CatalogError):
    """Raised when a table (registry subject) cannot be resolved."""

    def __init__(self, catalog_name: str, table_path: ObjectPath) -> None:
        super().__init__(
            f"Table (or view) {table_path} does not exist in Catalog {catalog_name}."
        )
        self.catalog_name = catalog_name
        self.table_path = table_path


class FunctionNotExistError(CatalogError):
    """Raised on every function lookup; the catalog holds no functions."""

    def __init__(self, catalog_name: str, function_path: ObjectPath) -> None:
        super().__init__(
            f"Function {function_path} does not exist in Catalog {catalog_name}."
        )
        self.catalog_name = catalog_name
        self.function_path = function_path


class UnsupportedSchemaTypeError(CatalogError):
    """Raised when a subject's schema is not Avro."""


class UnmappedTypeError(CatalogError):
    """Raised when an Avro type has no column type counterpart."""


class UnsupportedOperationError(NotImplementedError):
    """Raised by mutating catalog operations; the catalog is read-only."""
