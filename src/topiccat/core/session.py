"""Outbound client session of a topic catalog.

A CatalogSession owns exactly one broker admin handle and one schema
registry handle. Both are created lazily and at most once per open/close
cycle; the closed -> open transition runs under a lock so that planner
threads resolving tables concurrently all observe one initialized session.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol

from topiccat.core.errors import CatalogError
from topiccat.core.models import SchemaDescriptor

logger = logging.getLogger(__name__)


class BrokerAdmin(Protocol):
    """Interface of the broker admin session used by the catalog."""

    @property
    def bootstrap_servers(self) -> str:
        """Return the broker address the live session is configured with."""
        ...

    def start(self) -> None:
        """Connect to the broker; raise on failure."""
        ...

    def shutdown(self) -> None:
        """Release the broker connection."""
        ...


class SchemaRegistry(Protocol):
    """Interface of the schema registry lookups used by the catalog."""

    def list_subjects(self) -> list[str]:
        """Return all registered subjects."""
        ...

    def get_schema(self, subject: str) -> SchemaDescriptor | None:
        """Return the latest schema of a subject, or None if unknown."""
        ...


AdminFactory = Callable[[str], BrokerAdmin]
RegistryFactory = Callable[[str], SchemaRegistry]


class CatalogSession:
    """Lazily opened pair of broker admin and schema registry clients."""

    def __init__(
        self,
        bootstrap_servers: str,
        schema_registry_url: str,
        *,
        admin_factory: AdminFactory,
        registry_factory: RegistryFactory,
    ) -> None:
        self.bootstrap_servers = bootstrap_servers
        self.schema_registry_url = schema_registry_url
        self._admin_factory = admin_factory
        self._registry_factory = registry_factory
        self._admin: BrokerAdmin | None = None
        self._registry: SchemaRegistry | None = None
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._admin is not None and self._registry is not None

    def open(self) -> None:
        """
        Create whichever client is missing.

        The admin and registry checks are independent: a failed admin start
        leaves the admin handle unset (so the next open retries it) without
        touching the registry handle.

        Raises:
            CatalogError: the broker admin could not be started, or the
                registry client could not be created.
        """
        with self._lock:
            if self._admin is None:
                admin = self._admin_factory(self.bootstrap_servers)
                try:
                    admin.start()
                except Exception as exc:
                    logger.error(
                        "Failed to start broker admin for %s: %s",
                        self.bootstrap_servers,
                        exc,
                    )
                    raise CatalogError(
                        f"Failed to create broker admin using: {self.bootstrap_servers}"
                    ) from exc
                self._admin = admin
                logger.info("Opened broker admin session for %s", self.bootstrap_servers)
            if self._registry is None:
                try:
                    self._registry = self._registry_factory(self.schema_registry_url)
                except Exception as exc:
                    logger.error(
                        "Failed to create schema registry client for %s: %s",
                        self.schema_registry_url,
                        exc,
                    )
                    raise CatalogError(
                        "Failed to create schema registry client using: "
                        f"{self.schema_registry_url}"
                    ) from exc
                logger.info("Opened schema registry client for %s", self.schema_registry_url)

    def close(self) -> None:
        """
        Shut the admin session down and drop the registry reference.

        An exception from the admin shutdown propagates, but both handles
        are released either way.
        """
        with self._lock:
            admin, self._admin = self._admin, None
            self._registry = None
            if admin is not None:
                admin.shutdown()
                logger.info("Closed broker admin session for %s", self.bootstrap_servers)

    @property
    def admin(self) -> BrokerAdmin:
        """Return the broker admin, opening the session on first use."""
        admin = self._admin
        if admin is None:
            self.open()
            admin = self._admin
        if admin is None:
            raise CatalogError("Broker admin session is not open.")
        return admin

    @property
    def registry(self) -> SchemaRegistry:
        """Return the registry client, opening the session on first use."""
        registry = self._registry
        if registry is None:
            self.open()
            registry = self._registry
        if registry is None:
            raise CatalogError("Schema registry session is not open.")
        return registry
