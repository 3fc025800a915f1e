"""Logging setup for the CLI."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from topiccat.cli.common.output import console


def configure_logging(verbose: bool = False) -> None:
    """Route library logging through rich; WARNING by default, DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
