"""Concurrent table resolution.

Query planners resolve several tables at once. This module does the same
for tooling: each topic of the catalog's default database is resolved on
a worker thread, and per-table failures are collected instead of aborting
the whole batch.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

from topiccat.core.models import CatalogTable, ObjectPath


class TableSource(Protocol):
    """Interface for resolving tables (implemented by TopicCatalog)."""

    @property
    def default_database(self) -> str:
        """Return the database tables are resolved in."""
        ...

    def get_table(self, table_path: ObjectPath) -> CatalogTable:
        """Return the resolved table or raise."""
        ...


@dataclass(frozen=True)
class TableResolution:
    """Result of resolving one topic."""

    name: str
    table: CatalogTable | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _resolve_one(source: TableSource, name: str) -> TableResolution:
    try:
        table = source.get_table(ObjectPath(source.default_database, name))
    except Exception as e:  # noqa: BLE001
        return TableResolution(name=name, error=str(e))
    return TableResolution(name=name, table=table)


def get_tables_parallel(
    source: TableSource,
    table_names: list[str],
    max_parallel: int,
) -> list[TableResolution]:
    """
    Resolve multiple tables in parallel.

    Args:
        source: Catalog used to resolve each table.
        table_names: Topic names within the default database.
        max_parallel: Maximum number of concurrent registry lookups.

    Returns:
        One TableResolution per name, in input order.
    """
    if max_parallel < 1:
        raise ValueError("max_parallel must be >= 1")
    if not table_names:
        return []

    with ThreadPoolExecutor(max_workers=max_parallel) as pool:
        futures = [pool.submit(_resolve_one, source, name) for name in table_names]
        return [f.result() for f in futures]
