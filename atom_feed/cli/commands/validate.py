"""Validate command - Check a feed document without rendering it."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ..helpers import load_feed

console = Console()


@click.command()
@click.argument("feed_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Configuration file (default: ./atom_feed.toml)",
)
def validate_command(feed_file: Path, config_file: Path | None) -> None:
    """Normalize a feed document and list its entries.

    Exits with an error on the first invalid feed or entry.
    """
    config = ConfigLoader.load(config_file)
    container = DependencyContainer(console=console, config=config)
    feed = load_feed(feed_file, container)

    metadata = feed.metadata
    table = Table(title=escape(f"{metadata.title.value} ({metadata.id})"))
    table.add_column("#", justify="right")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Updated")
    for index, entry in enumerate(feed.entries, start=1):
        table.add_row(
            str(index), escape(entry.id), escape(entry.title.value), entry.updated
        )
    console.print(table)
    console.print(f"[green]✓[/green] Feed is valid: {len(feed)} entries")
