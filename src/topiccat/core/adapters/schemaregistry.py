from __future__ import annotations

from typing import Any, Mapping

from confluent_kafka.schema_registry import SchemaRegistryClient
from confluent_kafka.schema_registry.error import SchemaRegistryError

from topiccat.core.models import SchemaDescriptor, SchemaType

_NOT_FOUND_STATUS = 404
_LATEST = "latest"


class SchemaRegistryAdapter:
    """Adapter around the Confluent Schema Registry client (subjects/latest schema)."""

    def __init__(self, client: SchemaRegistryClient) -> None:
        self.client = client

    @classmethod
    def from_url(
        cls, url: str, conf: Mapping[str, Any] | None = None
    ) -> SchemaRegistryAdapter:
        """Create an adapter for the registry at `url` with optional client conf."""
        return cls(SchemaRegistryClient({"url": url, **(conf or {})}))

    def list_subjects(self) -> list[str]:
        """List all subjects registered in the (default) registry context."""
        return [str(s) for s in self.client.get_subjects() or []]

    def get_schema(self, subject: str) -> SchemaDescriptor | None:
        """
        Return the latest schema of `subject`, or None if the registry
        does not know the subject.

        Every call reaches the registry; the client's latest-version cache
        is bypassed. Only HTTP 404 answers (unknown subject, version or
        schema) map to None; every other SchemaRegistryError propagates.
        """
        try:
            registered = self.client.get_version(subject, _LATEST)
        except SchemaRegistryError as exc:
            if exc.http_status_code == _NOT_FOUND_STATUS:
                return None
            raise

        if registered is None:
            return None

        schema = registered.schema
        # the registry omits schemaType for Avro subjects
        raw_type = getattr(schema, "schema_type", None) or SchemaType.AVRO.value
        return SchemaDescriptor(
            subject=getattr(registered, "subject", None) or subject,
            schema_type=SchemaType(str(raw_type).upper()),
            definition=schema.schema_str,
            schema_id=getattr(registered, "schema_id", None),
            version=getattr(registered, "version", None),
        )
