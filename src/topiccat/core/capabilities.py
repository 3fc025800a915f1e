"""Catalog operations the topic catalog refuses.

The catalog is read-only: it exposes topics, never creates or alters
them. Every refused operation is listed once in `CAPABILITY_BOUNDARY`
together with how it is refused, and `refuse_unsupported` installs the
matching method on the catalog class. Supporting an operation means
removing its line here and implementing it on the class.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping, TypeVar

from topiccat.core.errors import FunctionNotExistError, UnsupportedOperationError
from topiccat.core.models import (
    UNKNOWN_COLUMN_STATISTICS,
    UNKNOWN_TABLE_STATISTICS,
    ObjectPath,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=type)


class Refusal(str, Enum):
    """
    How a refused operation answers.

    Values:
        UNSUPPORTED: raise UnsupportedOperationError.
        FUNCTION_NOT_FOUND: raise FunctionNotExistError for the requested path.
        UNKNOWN_TABLE_STATISTICS: return the unknown table statistics sentinel.
        UNKNOWN_COLUMN_STATISTICS: return the unknown column statistics sentinel.
    """

    UNSUPPORTED = "UNSUPPORTED"
    FUNCTION_NOT_FOUND = "FUNCTION_NOT_FOUND"
    UNKNOWN_TABLE_STATISTICS = "UNKNOWN_TABLE_STATISTICS"
    UNKNOWN_COLUMN_STATISTICS = "UNKNOWN_COLUMN_STATISTICS"


SUPPORTED_OPERATIONS = frozenset(
    {
        "open",
        "close",
        "list_databases",
        "get_database",
        "database_exists",
        "list_tables",
        "get_table",
        "table_exists",
    }
)

CAPABILITY_BOUNDARY: Mapping[str, Refusal] = MappingProxyType(
    {
        # databases
        "create_database": Refusal.UNSUPPORTED,
        "drop_database": Refusal.UNSUPPORTED,
        "alter_database": Refusal.UNSUPPORTED,
        # tables and views
        "list_views": Refusal.UNSUPPORTED,
        "create_table": Refusal.UNSUPPORTED,
        "drop_table": Refusal.UNSUPPORTED,
        "alter_table": Refusal.UNSUPPORTED,
        "rename_table": Refusal.UNSUPPORTED,
        # functions
        "list_functions": Refusal.UNSUPPORTED,
        "get_function": Refusal.FUNCTION_NOT_FOUND,
        "function_exists": Refusal.UNSUPPORTED,
        "create_function": Refusal.UNSUPPORTED,
        "alter_function": Refusal.UNSUPPORTED,
        "drop_function": Refusal.UNSUPPORTED,
        # partitions
        "list_partitions": Refusal.UNSUPPORTED,
        "list_partitions_by_filter": Refusal.UNSUPPORTED,
        "get_partition": Refusal.UNSUPPORTED,
        "partition_exists": Refusal.UNSUPPORTED,
        "create_partition": Refusal.UNSUPPORTED,
        "drop_partition": Refusal.UNSUPPORTED,
        "alter_partition": Refusal.UNSUPPORTED,
        # statistics
        "get_table_statistics": Refusal.UNKNOWN_TABLE_STATISTICS,
        "get_table_column_statistics": Refusal.UNKNOWN_COLUMN_STATISTICS,
        "get_partition_statistics": Refusal.UNKNOWN_TABLE_STATISTICS,
        "get_partition_column_statistics": Refusal.UNKNOWN_COLUMN_STATISTICS,
        "alter_table_statistics": Refusal.UNSUPPORTED,
        "alter_table_column_statistics": Refusal.UNSUPPORTED,
        "alter_partition_statistics": Refusal.UNSUPPORTED,
        "alter_partition_column_statistics": Refusal.UNSUPPORTED,
    }
)


def _refusal_method(operation: str, refusal: Refusal) -> Callable[..., Any]:
    """Build the method answering `operation` with `refusal`."""

    if refusal is Refusal.FUNCTION_NOT_FOUND:

        def method(self, function_path: ObjectPath, *args: Any, **kwargs: Any) -> Any:
            logger.debug("%s refused: no function %s", operation, function_path)
            raise FunctionNotExistError(self.name, function_path)

    elif refusal is Refusal.UNKNOWN_TABLE_STATISTICS:

        def method(self, *args: Any, **kwargs: Any) -> Any:
            return UNKNOWN_TABLE_STATISTICS

    elif refusal is Refusal.UNKNOWN_COLUMN_STATISTICS:

        def method(self, *args: Any, **kwargs: Any) -> Any:
            return UNKNOWN_COLUMN_STATISTICS

    else:

        def method(self, *args: Any, **kwargs: Any) -> Any:
            logger.debug("%s refused on catalog %s", operation, self.name)
            raise UnsupportedOperationError(
                f"{operation} is not supported by catalog {self.name}."
            )

    method.__name__ = operation
    method.__doc__ = f"Refused operation ({refusal.value})."
    return method


def refuse_unsupported(cls: T) -> T:
    """
    Class decorator installing one method per CAPABILITY_BOUNDARY entry.

    Raises TypeError when the class also implements a refused operation or
    lacks one of SUPPORTED_OPERATIONS.
    """
    for operation in CAPABILITY_BOUNDARY:
        if operation in cls.__dict__:
            raise TypeError(f"{cls.__name__}.{operation} is implemented and refused.")
    missing = sorted(op for op in SUPPORTED_OPERATIONS if not callable(getattr(cls, op, None)))
    if missing:
        raise TypeError(f"{cls.__name__} does not implement: {', '.join(missing)}")

    for operation, refusal in CAPABILITY_BOUNDARY.items():
        method = _refusal_method(operation, refusal)
        method.__qualname__ = f"{cls.__name__}.{operation}"
        setattr(cls, operation, method)
    return cls
