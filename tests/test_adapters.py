from types import SimpleNamespace

import pytest
from confluent_kafka import KafkaException
from confluent_kafka.schema_registry import SchemaRegistryClient
from confluent_kafka.schema_registry.error import SchemaRegistryError

from topiccat.core.adapters.kafkaadmin import CLIENT_LANGUAGE, KafkaAdminAdapter
from topiccat.core.adapters.schemaregistry import SchemaRegistryAdapter
from topiccat.core.models import SchemaType


class _AdminClientStub:
    def __init__(self, config, *, fail=None):
        self.config = config
        self.fail = fail
        self.timeouts: list[float] = []

    def list_topics(self, timeout=None):
        self.timeouts.append(timeout)
        if self.fail is not None:
            raise self.fail
        return SimpleNamespace(topics={"orders": object()})


def test_kafka_admin_start_probes_cluster_with_client_language():
    created: list[_AdminClientStub] = []

    def _factory(config):
        client = _AdminClientStub(config)
        created.append(client)
        return client

    adapter = KafkaAdminAdapter("broker:9092", timeout_seconds=3.0, client_factory=_factory)
    adapter.start()

    assert adapter.client is created[0]
    assert created[0].config["bootstrap.servers"] == "broker:9092"
    assert created[0].config["client.id"].endswith(CLIENT_LANGUAGE)
    assert created[0].timeouts == [3.0]
    assert adapter.bootstrap_servers == "broker:9092"


def test_kafka_admin_start_failure_propagates_and_keeps_client_unset():
    adapter = KafkaAdminAdapter(
        "broker:9092",
        client_factory=lambda config: _AdminClientStub(config, fail=KafkaException("down")),
    )

    with pytest.raises(KafkaException):
        adapter.start()
    assert adapter.client is None


def test_kafka_admin_shutdown_releases_client():
    adapter = KafkaAdminAdapter("broker:9092", client_factory=_AdminClientStub)
    adapter.start()

    adapter.shutdown()
    adapter.shutdown()

    assert adapter.client is None


class _RegistryClientStub:
    def __init__(self, *, latest=None, error=None, subjects=None):
        self.latest = latest
        self.error = error
        self.subjects = subjects or []

    def get_subjects(self):
        return self.subjects

    def get_version(self, subject_name, version):
        if self.error is not None:
            raise self.error
        return self.latest


def _registered(schema_type):
    return SimpleNamespace(
        schema_id=7,
        subject="orders",
        version=3,
        schema=SimpleNamespace(schema_str='{"type": "string"}', schema_type=schema_type),
    )


def test_registry_get_schema_maps_registered_schema():
    adapter = SchemaRegistryAdapter(_RegistryClientStub(latest=_registered("AVRO")))

    descriptor = adapter.get_schema("orders")

    assert descriptor.subject == "orders"
    assert descriptor.schema_type is SchemaType.AVRO
    assert descriptor.definition == '{"type": "string"}'
    assert (descriptor.schema_id, descriptor.version) == (7, 3)


def test_registry_get_schema_defaults_missing_type_to_avro():
    adapter = SchemaRegistryAdapter(_RegistryClientStub(latest=_registered(None)))

    assert adapter.get_schema("orders").schema_type is SchemaType.AVRO


def test_registry_get_schema_returns_none_for_not_found():
    error = SchemaRegistryError(404, 40401, "Subject 'orders' not found.")
    adapter = SchemaRegistryAdapter(_RegistryClientStub(error=error))

    assert adapter.get_schema("orders") is None


def test_registry_get_schema_propagates_other_errors():
    error = SchemaRegistryError(500, 50001, "Error in the backend data store")
    adapter = SchemaRegistryAdapter(_RegistryClientStub(error=error))

    with pytest.raises(SchemaRegistryError):
        adapter.get_schema("orders")


def test_registry_list_subjects():
    adapter = SchemaRegistryAdapter(_RegistryClientStub(subjects=["orders", "payments"]))

    assert adapter.list_subjects() == ["orders", "payments"]


def test_registry_get_schema_queries_registry_on_every_lookup():
    client = SchemaRegistryClient({"url": "http://registry:8081"})
    answers = [
        {"subject": "orders", "id": 1, "version": 1, "schema": '{"type": "string"}'},
        SchemaRegistryError(404, 40401, "Subject 'orders' not found."),
    ]
    requested: list[str] = []

    def _get(url, *args, **kwargs):
        requested.append(url)
        answer = answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    client._rest_client.get = _get
    adapter = SchemaRegistryAdapter(client)

    first = adapter.get_schema("orders")
    second = adapter.get_schema("orders")

    assert first.version == 1
    assert second is None
    assert len(requested) == 2
    assert all(url.endswith("orders/versions/latest") for url in requested)
