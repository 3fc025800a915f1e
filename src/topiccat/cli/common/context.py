"""Application context management for the CLI."""

from dataclasses import dataclass

from topiccat.cli.common.exits import die
from topiccat.core.catalog import TopicCatalog
from topiccat.core.config import CatalogConfig


@dataclass
class CatalogAppContext:
    """Application context holding the catalog configuration and catalog."""

    config: CatalogConfig
    catalog: TopicCatalog


def build_catalog_context(
    catalog_name: str,
    *,
    bootstrap_servers: str | None,
    schema_registry_url: str | None,
    default_database: str | None,
) -> CatalogAppContext:
    """Build and return the application context with a (not yet opened) catalog.

    Args:
        catalog_name: Name of the catalog.
        bootstrap_servers: Kafka bootstrap servers; falls back to the environment.
        schema_registry_url: Schema registry URL; falls back to the environment.
        default_database: Virtual database name; falls back to the environment.

    Returns:
        CatalogAppContext: Application context with config and catalog.
    """
    try:
        config = CatalogConfig.from_env(
            catalog_name,
            bootstrap_servers=bootstrap_servers,
            schema_registry_url=schema_registry_url,
            default_database=default_database,
        )
    except ValueError as exc:
        die(str(exc), code=2)
    return CatalogAppContext(config=config, catalog=TopicCatalog(config))
