from __future__ import annotations

import json
import sys
import threading
from pathlib import Path

import pytest

# Ensure tests always import the local src tree, not an older installed wheel.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from topiccat.core.catalog import TopicCatalog  # noqa: E402
from topiccat.core.config import CatalogConfig  # noqa: E402
from topiccat.core.models import SchemaDescriptor, SchemaType  # noqa: E402

BOOTSTRAP = "broker-1:9092"
REGISTRY_URL = "http://registry:8081"


def avro_record(name: str, fields: list[dict]) -> str:
    """Serialize an Avro record definition."""
    return json.dumps(
        {"type": "record", "name": name, "namespace": "test", "fields": fields}
    )


def avro_descriptor(subject: str, fields: list[dict]) -> SchemaDescriptor:
    return SchemaDescriptor(
        subject=subject,
        schema_type=SchemaType.AVRO,
        definition=avro_record(subject.replace("-", "_"), fields),
    )


class StubAdmin:
    def __init__(self, bootstrap_servers: str, *, fail: Exception | None = None):
        self._bootstrap_servers = bootstrap_servers
        self.fail = fail
        self.started = 0
        self.shutdowns = 0

    @property
    def bootstrap_servers(self) -> str:
        return self._bootstrap_servers

    def start(self) -> None:
        self.started += 1
        if self.fail is not None:
            raise self.fail

    def shutdown(self) -> None:
        self.shutdowns += 1


class StubRegistry:
    def __init__(
        self,
        schemas: dict[str, SchemaDescriptor] | None = None,
        *,
        fail: Exception | None = None,
    ):
        self.schemas = dict(schemas or {})
        self.fail = fail
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def _record(self, call: str) -> None:
        with self._lock:
            self.calls.append(call)

    def list_subjects(self) -> list[str]:
        self._record("list_subjects")
        if self.fail is not None:
            raise self.fail
        return list(self.schemas)

    def get_schema(self, subject: str) -> SchemaDescriptor | None:
        self._record(f"get_schema:{subject}")
        if self.fail is not None:
            raise self.fail
        return self.schemas.get(subject)


class CountingFactories:
    """Admin/registry factories that record every construction."""

    def __init__(self, registry: StubRegistry, *, admin_fail: Exception | None = None):
        self.registry = registry
        self.admin_fail = admin_fail
        self.admins: list[StubAdmin] = []
        self.registry_urls: list[str] = []

    def admin(self, bootstrap_servers: str) -> StubAdmin:
        admin = StubAdmin(bootstrap_servers, fail=self.admin_fail)
        self.admins.append(admin)
        return admin

    def registry_client(self, url: str) -> StubRegistry:
        self.registry_urls.append(url)
        return self.registry


@pytest.fixture
def config() -> CatalogConfig:
    return CatalogConfig(
        catalog_name="kafka",
        bootstrap_servers=BOOTSTRAP,
        schema_registry_url=REGISTRY_URL,
    )


@pytest.fixture
def registry() -> StubRegistry:
    return StubRegistry(
        {
            "orders": avro_descriptor(
                "orders",
                [
                    {"name": "a", "type": "int"},
                    {"name": "b", "type": "string"},
                ],
            ),
            "payments": avro_descriptor(
                "payments",
                [
                    {"name": "id", "type": "long"},
                    {"name": "amount", "type": "double"},
                    {"name": "note", "type": ["null", "string"], "default": None},
                ],
            ),
        }
    )


@pytest.fixture
def factories(registry: StubRegistry) -> CountingFactories:
    return CountingFactories(registry)


@pytest.fixture
def catalog(config: CatalogConfig, factories: CountingFactories) -> TopicCatalog:
    return TopicCatalog(
        config,
        admin_factory=factories.admin,
        registry_factory=factories.registry_client,
    )
