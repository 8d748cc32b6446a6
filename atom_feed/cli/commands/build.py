"""Build command - Render a feed document as Atom XML."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...config import ConfigLoader
from ...infrastructure.container import DependencyContainer
from ...infrastructure.io.atom_xml import write_feed_file
from ..helpers import load_feed

console = Console(stderr=True)


@click.command()
@click.argument("feed_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file for the Atom document (default: print to stdout)",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    help="Spaces per indentation level (default: from config, 0 = compact)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    help="Configuration file (default: ./atom_feed.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def build_command(
    feed_file: Path,
    output: Path | None,
    indent: int | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Render a JSON or TOML feed document as an Atom 1.0 feed.

    The document holds a ``feed`` table with the feed metadata and an
    optional ``entries`` array. Entries are added in document order.

    Examples:

    \b
        # Print a compact feed to stdout
        atom-feed build feed.toml

    \b
        # Write an indented feed to a file
        atom-feed build feed.json --indent 2 --output public/atom.xml
    """
    config = ConfigLoader.load(config_file)
    container = DependencyContainer(verbose=verbose, console=console, config=config)
    logger = container.create_logger()

    feed = load_feed(feed_file, container)
    if indent is None:
        indent = config.indent

    if output is None:
        click.echo(feed.render(indent))
    else:
        write_feed_file(feed, output, indent=indent)
        logger.success(f"Wrote {len(feed)} entries to {output}")
    logger.log_final_stats()
