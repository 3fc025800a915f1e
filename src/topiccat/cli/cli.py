"""CLI application for browsing Kafka topics as catalog tables."""

import typer

from topiccat.cli.commands.catalog import catalog_app
from topiccat.cli.common.logs import configure_logging
from topiccat.cli.common.options import VerboseOpt

app = typer.Typer(
    help="topiccat - Kafka topics as a read-only table catalog",
    no_args_is_help=True,
)


@app.callback()
def _init(verbose: bool = VerboseOpt):
    """Configure logging for the invocation."""
    configure_logging(verbose)


app.add_typer(catalog_app, name="catalog", help="Browse topics as catalog tables.")


if __name__ == "__main__":
    app()
