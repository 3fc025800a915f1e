"""Output formatting utilities for the CLI."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import questionary
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from topiccat.cli.common.tui_style import QUESTIONARY_STYLE_SELECT

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

console = Console(theme=_THEME)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and tables."""

    def _q_try(self, fn, *args, **kwargs):
        """Call questionary prompts and drop unsupported kwargs on older versions."""
        try:
            return fn(*args, **kwargs)
        except TypeError:
            for k in ("pointer", "instruction"):
                kwargs.pop(k, None)
            return fn(*args, **kwargs)

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]›[/] {msg}")

    @contextmanager
    def status(self, msg: str):
        """Show a transient status spinner while work is in progress."""
        with console.status(msg, spinner="dots"):
            yield

    def success(self, msg: str) -> None:
        """Print a success message."""
        console.print(f"[ok]✓[/] {msg}")

    def warn(self, msg: str) -> None:
        """Print a warning message."""
        console.print(f"[warn]⚠[/] {msg}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]✗[/] {msg}")

    def header(self, title: str) -> None:
        """Print a header message."""
        console.print(f"[title]{title}[/]")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{k}[/]: {v}")

    def select_one(self, message: str, choices: list[str]) -> str | None:
        """
        Prompt the user to select a single item from a list (radio list).

        Returns:
            The selected value, or None if cancelled.
        """
        if not choices:
            return None

        prompt = self._q_try(
            questionary.select,
            message,
            choices=choices,
            style=QUESTIONARY_STYLE_SELECT,
            qmark="✦",
            instruction="Use ↑/↓ then Enter",
            pointer="❯",
        )
        return prompt.ask()

    def databases_table(self, databases: Iterable[str], title: str = "Databases") -> None:
        """Render the database names of a catalog."""
        t = Table(title=title, show_lines=False)
        t.add_column("Database", style="ok")

        for name in databases:
            t.add_row(str(name))

        console.print(t)

    def topics_table(self, topics: Iterable[str], title: str = "Topics") -> None:
        """Render a table of topic (table) names."""
        t = Table(title=title, show_lines=False)
        t.add_column("Topic", style="ok")

        for topic in topics:
            t.add_row(str(topic))

        console.print(t)

    def columns_table(self, table: Any, title: str = "Columns") -> None:
        """
        Expects an object with .schema.columns (like topiccat.core.models.CatalogTable)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("#", style="meta", no_wrap=True)
        t.add_column("Column", style="ok")
        t.add_column("Type")

        for idx, column in enumerate(table.schema.columns, start=1):
            t.add_row(str(idx), column.name, str(column.data_type))

        console.print(t)

    def resolution_table(
        self, results: Iterable[Any], title: str = "Resolved topics"
    ) -> None:
        """
        Expects objects with .name, .table and .error
        (e.g. topiccat.core.resolve.TableResolution)
        """
        t = Table(title=title, show_lines=False)
        t.add_column("Topic", style="ok")
        t.add_column("Columns", no_wrap=True)
        t.add_column("Result")

        for r in results:
            table = getattr(r, "table", None)
            columns = str(len(table.schema.columns)) if table is not None else "-"
            err = getattr(r, "error", None)
            t.add_row(
                str(getattr(r, "name", "")),
                columns,
                "[ok]OK[/]" if err is None else f"[err]FAIL[/] {err}",
            )

        console.print(t)


out = Out()
