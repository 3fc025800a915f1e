"""Commands for browsing the topic catalog."""

from __future__ import annotations

import re

import typer

from topiccat.cli.common.context import CatalogAppContext, build_catalog_context
from topiccat.cli.common.exits import die, exit_from_exc, warn_exit
from topiccat.cli.common.options import (
    AllOpt,
    BootstrapServersOpt,
    CatalogNameOpt,
    DatabaseOpt,
    NameOpt,
    ParallelOpt,
    RegistryUrlOpt,
)
from topiccat.cli.common.output import out
from topiccat.cli.tui import select_topics
from topiccat.core.errors import CatalogError, DatabaseNotExistError, TableNotExistError
from topiccat.core.models import ObjectPath
from topiccat.core.resolve import get_tables_parallel

catalog_app = typer.Typer(
    help="Browse Kafka topics as catalog tables.",
    no_args_is_help=False,
    invoke_without_command=True,
)


@catalog_app.callback()
def _init(
    ctx: typer.Context,
    catalog_name: str = CatalogNameOpt,
    bootstrap_servers: str | None = BootstrapServersOpt,
    registry_url: str | None = RegistryUrlOpt,
    database: str | None = DatabaseOpt,
):
    """Build the catalog once per invocation and close it on exit."""
    appctx = build_catalog_context(
        catalog_name,
        bootstrap_servers=bootstrap_servers,
        schema_registry_url=registry_url,
        default_database=database,
    )
    ctx.obj = appctx
    ctx.call_on_close(appctx.catalog.close)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _describe_cause(exc: BaseException) -> str:
    """Return the message of an error plus its direct cause, if any."""
    cause = exc.__cause__
    return f"{exc} ({cause})" if cause is not None else str(exc)


def _compile_regex_or_exit(pattern: str | None, *, option_name: str) -> re.Pattern | None:
    """Compile a regex pattern and convert invalid syntax into CLI input errors."""
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as exc:
        out.error(f"Invalid regex for {option_name}: {exc}")
        raise typer.Exit(2) from exc


def _open_or_exit(appctx: CatalogAppContext) -> None:
    """Open the catalog session, exiting on connection failure."""
    try:
        with out.status("Connecting to Kafka and schema registry..."):
            appctx.catalog.open()
    except CatalogError as exc:
        exit_from_exc(exc, message=_describe_cause(exc), code=1)


def _list_topics_or_exit(appctx: CatalogAppContext, name: str | None) -> list[str]:
    """List the catalog's topics, optionally regex-filtered."""
    name_rx = _compile_regex_or_exit(name, option_name="--name")
    _open_or_exit(appctx)
    try:
        with out.status("Loading topics..."):
            topics = appctx.catalog.list_tables(appctx.catalog.default_database)
    except DatabaseNotExistError as exc:
        exit_from_exc(exc, message=str(exc), code=1)
    except CatalogError as exc:
        exit_from_exc(exc, message=_describe_cause(exc), code=1)

    if name_rx:
        topics = [t for t in topics if name_rx.search(t)]
    return topics


@catalog_app.command("databases-list")
def databases_list(ctx: typer.Context):
    """List the databases of the catalog (always exactly one)."""
    appctx: CatalogAppContext = ctx.obj
    out.header("Databases")
    out.databases_table(appctx.catalog.list_databases())


@catalog_app.command("tables-list")
def tables_list(ctx: typer.Context, name: str | None = NameOpt):
    """List topics registered in the schema registry."""
    appctx: CatalogAppContext = ctx.obj
    topics = _list_topics_or_exit(appctx, name)

    if not topics:
        warn_exit("No topics found.")

    out.header("Topics")
    out.info(f"Database: {appctx.catalog.default_database} | Topics: {len(topics)}")
    out.topics_table(topics)


@catalog_app.command("table-describe")
def table_describe(
    ctx: typer.Context,
    topic: str | None = typer.Argument(
        None, help="Topic to describe (interactive selection when omitted)"
    ),
):
    """Show the columns and connector options of one topic."""
    appctx: CatalogAppContext = ctx.obj
    catalog = appctx.catalog

    if topic is None:
        topics = _list_topics_or_exit(appctx, None)
        if not topics:
            warn_exit("No topics found.")
        topic = out.select_one("Select a topic:", topics)
        if not topic:
            warn_exit("No topic selected.")

    _open_or_exit(appctx)
    path = ObjectPath(catalog.default_database, topic)
    try:
        with out.status(f"Resolving {topic}..."):
            table = catalog.get_table(path)
    except TableNotExistError as exc:
        exit_from_exc(exc, message=str(exc), code=1)
    except CatalogError as exc:
        exit_from_exc(exc, message=_describe_cause(exc), code=1)

    out.header(f"Table {path.full_name}")
    out.columns_table(table, title="Columns")
    out.kv(dict(table.options))


@catalog_app.command("tables-describe")
def tables_describe(
    ctx: typer.Context,
    name: str | None = NameOpt,
    all_: bool = AllOpt,
    parallel: int = ParallelOpt,
):
    """Resolve several topics in parallel and report per-topic results."""
    appctx: CatalogAppContext = ctx.obj
    if parallel < 1:
        die("--parallel must be >= 1", code=2)

    topics = _list_topics_or_exit(appctx, name)
    if not topics:
        warn_exit("No topics found.")

    selected = topics if all_ else select_topics(topics)
    if not selected:
        warn_exit("No topics selected.")

    with out.status(f"Resolving {len(selected)} topic(s)..."):
        results = get_tables_parallel(appctx.catalog, selected, parallel)
    out.resolution_table(results)

    failed = [r for r in results if not r.ok]
    if failed:
        die(f"Failed to resolve {len(failed)} topic(s).", code=1)
    out.success(f"Resolved {len(results)} topic(s).")


@catalog_app.command("table-exists")
def table_exists(
    ctx: typer.Context,
    topic: str = typer.Argument(..., help="Topic name"),
):
    """Exit 0 when the topic resolves to a table, 1 otherwise."""
    appctx: CatalogAppContext = ctx.obj
    catalog = appctx.catalog
    path = ObjectPath(catalog.default_database, topic)

    _open_or_exit(appctx)
    try:
        exists = catalog.table_exists(path)
    except CatalogError as exc:
        exit_from_exc(exc, message=_describe_cause(exc), code=1)

    if not exists:
        die(f"Table {path.full_name} does not exist.", code=1)
    out.success(f"Table {path.full_name} exists.")
