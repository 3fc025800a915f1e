from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from confluent_kafka.admin import AdminClient

logger = logging.getLogger(__name__)

CLIENT_LANGUAGE = "python"


class KafkaAdminAdapter:
    """Adapter around the confluent-kafka AdminClient (session start/stop, config)."""

    def __init__(
        self,
        bootstrap_servers: str,
        *,
        timeout_seconds: float = 10.0,
        client_factory: Callable[[Mapping[str, Any]], Any] = AdminClient,
    ) -> None:
        self._config: dict[str, Any] = {
            "bootstrap.servers": bootstrap_servers,
            "client.id": f"topiccat-{CLIENT_LANGUAGE}",
        }
        self._timeout_seconds = timeout_seconds
        self._client_factory = client_factory
        self.client: Any | None = None

    @property
    def bootstrap_servers(self) -> str:
        """Return the bootstrap servers of the live session configuration."""
        return str(self._config["bootstrap.servers"])

    def start(self) -> None:
        """
        Create the AdminClient and probe the cluster.

        AdminClient construction is lazy in librdkafka; listing topics forces
        a metadata round trip so unreachable brokers fail here instead of on
        first use. Raises confluent_kafka.KafkaException on failure.
        """
        client = self._client_factory(dict(self._config))
        metadata = client.list_topics(timeout=self._timeout_seconds)
        self.client = client
        logger.info(
            "Kafka admin connected to %s (%d topics visible)",
            self.bootstrap_servers,
            len(getattr(metadata, "topics", None) or {}),
        )

    def shutdown(self) -> None:
        """Release the AdminClient; librdkafka tears it down on collection."""
        if self.client is None:
            return
        self.client = None
        logger.info("Kafka admin for %s shut down", self.bootstrap_servers)
