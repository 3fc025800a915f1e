"""Creation of topic catalogs from flat string options.

Hosts that register catalogs declaratively (e.g. `CREATE CATALOG ... WITH
(...)`) pass a name plus a mapping of option strings. This module
validates those options and builds the TopicCatalog.
"""

from __future__ import annotations

from typing import Mapping

from topiccat.core.catalog import FACTORY_IDENTIFIER, TopicCatalog
from topiccat.core.config import DEFAULT_DATABASE, CatalogConfig

DEFAULT_DATABASE_OPTION = "default-database"
BOOTSTRAP_SERVERS_OPTION = "bootstrap.servers"
SCHEMA_REGISTRY_URL_OPTION = "schema-registry.url"

REQUIRED_OPTIONS = frozenset({BOOTSTRAP_SERVERS_OPTION, SCHEMA_REGISTRY_URL_OPTION})
OPTIONAL_OPTIONS = frozenset({DEFAULT_DATABASE_OPTION})
# the host passes the factory identifier as `type`
_IGNORED_OPTIONS = frozenset({"type"})


def config_from_options(name: str, options: Mapping[str, str]) -> CatalogConfig:
    """Validate catalog options and return the matching CatalogConfig."""
    missing = sorted(k for k in REQUIRED_OPTIONS if not options.get(k))
    if missing:
        raise ValueError(f"Missing required catalog options: {', '.join(missing)}.")

    known = REQUIRED_OPTIONS | OPTIONAL_OPTIONS | _IGNORED_OPTIONS
    unknown = sorted(k for k in options if k not in known)
    if unknown:
        raise ValueError(f"Unsupported catalog options: {', '.join(unknown)}.")

    catalog_type = options.get("type")
    if catalog_type is not None and catalog_type != FACTORY_IDENTIFIER:
        raise ValueError(
            f"Catalog type '{catalog_type}' does not match '{FACTORY_IDENTIFIER}'."
        )

    return CatalogConfig(
        catalog_name=name,
        bootstrap_servers=options[BOOTSTRAP_SERVERS_OPTION],
        schema_registry_url=options[SCHEMA_REGISTRY_URL_OPTION],
        default_database=options.get(DEFAULT_DATABASE_OPTION) or DEFAULT_DATABASE,
    )


def create_catalog(name: str, options: Mapping[str, str]) -> TopicCatalog:
    """Build (but do not open) a TopicCatalog from catalog options."""
    return TopicCatalog(config_from_options(name, options))
