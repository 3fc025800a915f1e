import pytest
from typer.testing import CliRunner

from topiccat.cli import cli
from topiccat.cli.commands import catalog as catalog_cmd
from topiccat.cli.common.context import CatalogAppContext

runner = CliRunner()


@pytest.fixture(autouse=True)
def _stub_context(monkeypatch, config, catalog):
    monkeypatch.setattr(
        catalog_cmd,
        "build_catalog_context",
        lambda *args, **kwargs: CatalogAppContext(config=config, catalog=catalog),
    )


def test_databases_list_shows_the_virtual_database():
    result = runner.invoke(cli.app, ["catalog", "databases-list"])

    assert result.exit_code == 0
    assert "default" in result.output


def test_tables_list_filters_on_regex():
    result = runner.invoke(cli.app, ["catalog", "tables-list", "--name", "^ord"])

    assert result.exit_code == 0
    assert "orders" in result.output
    assert "payments" not in result.output


def test_tables_list_rejects_invalid_regex():
    result = runner.invoke(cli.app, ["catalog", "tables-list", "--name", "("])

    assert result.exit_code == 2


def test_table_describe_prints_columns_and_options():
    result = runner.invoke(cli.app, ["catalog", "table-describe", "orders"])

    assert result.exit_code == 0
    assert "INT NOT NULL" in result.output
    assert "broker-1:9092" in result.output


def test_table_describe_unknown_topic_exits_1():
    result = runner.invoke(cli.app, ["catalog", "table-describe", "missing"])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_table_exists_exit_codes():
    assert runner.invoke(cli.app, ["catalog", "table-exists", "orders"]).exit_code == 0
    assert runner.invoke(cli.app, ["catalog", "table-exists", "missing"]).exit_code == 1


def test_tables_describe_all_resolves_every_topic():
    result = runner.invoke(cli.app, ["catalog", "tables-describe", "--all", "-n", "2"])

    assert result.exit_code == 0
    assert "Resolved 2 topic(s)" in result.output


def test_registry_failure_exits_1(registry):
    registry.fail = ConnectionError("registry down")

    result = runner.invoke(cli.app, ["catalog", "tables-list"])

    assert result.exit_code == 1
    assert "registry down" in result.output
