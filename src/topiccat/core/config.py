"""Configuration for the topic catalog.

A CatalogConfig carries everything a catalog needs at construction: its
name, the single virtual database it exposes, the Kafka bootstrap servers
and the schema registry URL. Values come from keyword arguments or from
TOPICCAT_* environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DATABASE = "default"
DEFAULT_ADMIN_TIMEOUT_SECONDS = 10.0

_DATABASE_ENV = "TOPICCAT_DEFAULT_DATABASE"
_BOOTSTRAP_ENV = "TOPICCAT_BOOTSTRAP_SERVERS"
_REGISTRY_URL_ENV = "TOPICCAT_SCHEMA_REGISTRY_URL"
_ADMIN_TIMEOUT_ENV = "TOPICCAT_ADMIN_TIMEOUT"


def _sanitize_url(url: str | None) -> str | None:
    """
    Normalize a schema registry URL.

    - Strips surrounding whitespace
    - Removes trailing slashes

    The registry client appends paths such as `/subjects`; a trailing
    slash would produce `//subjects`.
    """
    if not url:
        return url
    return url.strip().rstrip("/")


def _parse_timeout(raw: str | None) -> float:
    """Return the admin timeout in seconds, falling back on invalid input."""
    if raw is None:
        return DEFAULT_ADMIN_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_ADMIN_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_ADMIN_TIMEOUT_SECONDS


@dataclass(frozen=True)
class CatalogConfig:
    """
    Construction inputs of a TopicCatalog.

    Attributes:
        catalog_name: Name the catalog is registered under in the host.
        bootstrap_servers: Kafka bootstrap servers (`host:port[,host:port]`).
        schema_registry_url: Base URL of the schema registry.
        default_database: The only database the catalog exposes.
        admin_timeout_seconds: Timeout of the broker probe run on open.
    """

    catalog_name: str
    bootstrap_servers: str
    schema_registry_url: str
    default_database: str = DEFAULT_DATABASE
    admin_timeout_seconds: float = DEFAULT_ADMIN_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        missing = [
            name
            for name in ("catalog_name", "bootstrap_servers", "schema_registry_url")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Missing catalog configuration: {', '.join(missing)}.")
        if not self.default_database:
            raise ValueError("The default database name must not be empty.")
        object.__setattr__(
            self, "schema_registry_url", _sanitize_url(self.schema_registry_url)
        )

    @classmethod
    def from_env(
        cls,
        catalog_name: str,
        *,
        bootstrap_servers: str | None = None,
        schema_registry_url: str | None = None,
        default_database: str | None = None,
    ) -> CatalogConfig:
        """
        Build a config, filling unset values from the environment.

        Explicit arguments win over TOPICCAT_* variables.
        """
        return cls(
            catalog_name=catalog_name,
            bootstrap_servers=bootstrap_servers or os.getenv(_BOOTSTRAP_ENV, ""),
            schema_registry_url=schema_registry_url
            or os.getenv(_REGISTRY_URL_ENV, ""),
            default_database=default_database
            or os.getenv(_DATABASE_ENV, DEFAULT_DATABASE),
            admin_timeout_seconds=_parse_timeout(os.getenv(_ADMIN_TIMEOUT_ENV)),
        )
