import pytest

from topiccat.core.config import DEFAULT_ADMIN_TIMEOUT_SECONDS, CatalogConfig


def test_registry_url_is_sanitized():
    config = CatalogConfig(
        catalog_name="kafka",
        bootstrap_servers="b:9092",
        schema_registry_url=" http://registry:8081/ ",
    )

    assert config.schema_registry_url == "http://registry:8081"
    assert config.default_database == "default"


def test_missing_values_are_reported():
    with pytest.raises(ValueError, match="bootstrap_servers, schema_registry_url"):
        CatalogConfig(catalog_name="kafka", bootstrap_servers="", schema_registry_url="")


def test_from_env_reads_topiccat_variables(monkeypatch):
    monkeypatch.setenv("TOPICCAT_BOOTSTRAP_SERVERS", "env-broker:9092")
    monkeypatch.setenv("TOPICCAT_SCHEMA_REGISTRY_URL", "http://env-registry:8081/")
    monkeypatch.setenv("TOPICCAT_DEFAULT_DATABASE", "topics")
    monkeypatch.setenv("TOPICCAT_ADMIN_TIMEOUT", "2.5")

    config = CatalogConfig.from_env("kafka")

    assert config.bootstrap_servers == "env-broker:9092"
    assert config.schema_registry_url == "http://env-registry:8081"
    assert config.default_database == "topics"
    assert config.admin_timeout_seconds == 2.5


def test_from_env_prefers_explicit_arguments(monkeypatch):
    monkeypatch.setenv("TOPICCAT_BOOTSTRAP_SERVERS", "env-broker:9092")
    monkeypatch.setenv("TOPICCAT_SCHEMA_REGISTRY_URL", "http://env-registry:8081")

    config = CatalogConfig.from_env("kafka", bootstrap_servers="cli-broker:9092")

    assert config.bootstrap_servers == "cli-broker:9092"
    assert config.schema_registry_url == "http://env-registry:8081"


@pytest.mark.parametrize("raw", ["abc", "0", "-3"])
def test_from_env_falls_back_on_invalid_timeout(monkeypatch, raw):
    monkeypatch.setenv("TOPICCAT_BOOTSTRAP_SERVERS", "b:9092")
    monkeypatch.setenv("TOPICCAT_SCHEMA_REGISTRY_URL", "http://r:8081")
    monkeypatch.setenv("TOPICCAT_ADMIN_TIMEOUT", raw)

    assert CatalogConfig.from_env("kafka").admin_timeout_seconds == DEFAULT_ADMIN_TIMEOUT_SECONDS
