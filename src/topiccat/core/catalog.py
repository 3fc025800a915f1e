"""Read-only catalog exposing Kafka topics as tables.

Each subject of the schema registry is a table of the catalog's single
virtual database. Tables are resolved on demand: the latest Avro schema
of the subject is translated into columns and combined with the Kafka
connector options of the live broker session. Nothing is cached.

Mutating operations are refused; see `topiccat.core.capabilities`.
"""

from __future__ import annotations

import logging

from topiccat.core.adapters.kafkaadmin import KafkaAdminAdapter
from topiccat.core.adapters.schemaregistry import SchemaRegistryAdapter
from topiccat.core.capabilities import refuse_unsupported
from topiccat.core.config import CatalogConfig
from topiccat.core.errors import CatalogError, DatabaseNotExistError, TableNotExistError
from topiccat.core.models import CatalogDatabase, CatalogTable, ObjectPath, TableSchema
from topiccat.core.session import AdminFactory, CatalogSession, RegistryFactory
from topiccat.core.translator import translate_schema

logger = logging.getLogger(__name__)

FACTORY_IDENTIFIER = "topiccat"

CONNECTOR = "connector"
KAFKA_CONNECTOR = "kafka"
TOPIC = "topic"
BOOTSTRAP_SERVERS = "properties.bootstrap.servers"


@refuse_unsupported
class TopicCatalog:
    """Expose the topics of a Kafka cluster as the tables of one database."""

    def __init__(
        self,
        config: CatalogConfig,
        *,
        admin_factory: AdminFactory | None = None,
        registry_factory: RegistryFactory | None = None,
    ) -> None:
        self.config = config
        self._session = CatalogSession(
            config.bootstrap_servers,
            config.schema_registry_url,
            admin_factory=admin_factory
            or (
                lambda servers: KafkaAdminAdapter(
                    servers, timeout_seconds=config.admin_timeout_seconds
                )
            ),
            registry_factory=registry_factory or SchemaRegistryAdapter.from_url,
        )
        logger.info("Created topic catalog %s", config.catalog_name)

    @property
    def name(self) -> str:
        return self.config.catalog_name

    @property
    def default_database(self) -> str:
        return self.config.default_database

    @property
    def session(self) -> CatalogSession:
        return self._session

    def get_factory_identifier(self) -> str:
        return FACTORY_IDENTIFIER

    # ------------------------------------------------------------------
    # lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Create the broker admin and registry sessions if missing."""
        self._session.open()

    def close(self) -> None:
        """Shut the broker admin down and drop the registry client."""
        self._session.close()

    def __enter__(self) -> TopicCatalog:
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # databases
    # ------------------------------------------------------------------

    def in_scope(self, database_name: str) -> bool:
        """Return True iff `database_name` is the catalog's virtual database."""
        return database_name == self.default_database

    def list_databases(self) -> list[str]:
        return [self.default_database]

    def database_exists(self, database_name: str) -> bool:
        return self.in_scope(database_name)

    def get_database(self, database_name: str) -> CatalogDatabase:
        """Return the virtual database (no properties) or raise DatabaseNotExistError."""
        if not self.in_scope(database_name):
            raise DatabaseNotExistError(self.name, database_name)
        return CatalogDatabase(name=database_name, properties={})

    # ------------------------------------------------------------------
    # tables
    # ------------------------------------------------------------------

    def list_tables(self, database_name: str) -> list[str]:
        """
        List the registry subjects as table names.

        Raises:
            DatabaseNotExistError: `database_name` is not the virtual database.
            CatalogError: the registry could not be queried.
        """
        if not self.in_scope(database_name):
            raise DatabaseNotExistError(self.name, database_name)
        registry = self._session.registry
        try:
            return registry.list_subjects()
        except Exception as exc:
            raise CatalogError(
                "Failed to get topics from schema registry client."
            ) from exc

    def _is_resolvable(self, table_path: ObjectPath) -> bool:
        return self.in_scope(table_path.database_name) and bool(table_path.object_name)

    def table_exists(self, table_path: ObjectPath) -> bool:
        """
        Return True iff the path is in scope and its subject has a schema.

        Out-of-scope databases and empty names answer False without a
        registry round trip.
        """
        if not self._is_resolvable(table_path):
            return False
        registry = self._session.registry
        try:
            return registry.get_schema(table_path.object_name) is not None
        except Exception as exc:
            raise CatalogError(
                "Failed to get topics from schema registry client."
            ) from exc

    def get_table(self, table_path: ObjectPath) -> CatalogTable:
        """
        Resolve a topic into a CatalogTable.

        Raises:
            TableNotExistError: out-of-scope path, empty name, or unknown subject.
            UnsupportedSchemaTypeError: the subject's schema is not Avro.
            CatalogError: registry failure or untranslatable schema.
        """
        if not self._is_resolvable(table_path):
            raise TableNotExistError(self.name, table_path)

        subject = table_path.object_name
        registry = self._session.registry
        try:
            descriptor = registry.get_schema(subject)
        except Exception as exc:
            raise CatalogError(
                "Failed to get schema from schema registry client."
            ) from exc
        if descriptor is None:
            raise TableNotExistError(self.name, table_path)

        schema = translate_schema(descriptor)
        return self._assemble_table(subject, schema)

    def _assemble_table(self, topic: str, schema: TableSchema) -> CatalogTable:
        """Combine a translated schema with the Kafka connector options."""
        options = {
            CONNECTOR: KAFKA_CONNECTOR,
            TOPIC: topic,
            BOOTSTRAP_SERVERS: self._session.admin.bootstrap_servers,
        }
        return CatalogTable(schema=schema, options=options, partition_keys=())
