"""Common CLI options for the CLI."""

import typer

CatalogNameOpt = typer.Option(
    "topiccat",
    "--catalog",
    "-c",
    help="Catalog name",
)

BootstrapServersOpt = typer.Option(
    None,
    "--bootstrap-servers",
    "-b",
    envvar="TOPICCAT_BOOTSTRAP_SERVERS",
    help="Kafka bootstrap servers (host:port[,host:port])",
)

RegistryUrlOpt = typer.Option(
    None,
    "--registry-url",
    "-r",
    envvar="TOPICCAT_SCHEMA_REGISTRY_URL",
    help="Schema registry URL",
)

DatabaseOpt = typer.Option(
    None,
    "--database",
    "-d",
    envvar="TOPICCAT_DEFAULT_DATABASE",
    help="Name of the virtual database exposing the topics",
)

VerboseOpt = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable debug logging",
)

NameOpt = typer.Option(
    None,
    "--name",
    help="Regex on topic name",
)

ParallelOpt = typer.Option(
    5,
    "--parallel",
    "-n",
    help="Number of topics to resolve in parallel",
)

AllOpt = typer.Option(
    False,
    "--all",
    help="Use all matched topics without selection UI",
)
