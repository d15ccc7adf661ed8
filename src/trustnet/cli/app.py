"""Typer main application for trustnet CLI."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from trustnet import __version__
from trustnet.cli.commands import analyze, graph, rank
from trustnet.core import ConfigurationError, setup_logging

console = Console()

app = typer.Typer(
    name="trustnet",
    help="Trust network analysis - eigenvector centrality and mutual trust",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(rank.app, name="rank", help="Eigenvector centrality ranking commands")
app.add_typer(analyze.app, name="analyze", help="Mutual connection and mutual trust commands")
app.add_typer(graph.app, name="graph", help="Graph inspection commands")


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        console.print(f"[bold blue]trustnet[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override TRUSTNET_LOG_LEVEL (DEBUG, INFO, WARNING, ...)",
    ),
) -> None:
    """
    trustnet - Trust Network Analysis

    Rank participants of a rater/ratee trust network by eigenvector
    centrality and inspect mutual trust between their neighbors.
    """
    try:
        setup_logging(level=log_level)
    except ConfigurationError as e:
        raise typer.BadParameter(e.message, param_hint="--log-level") from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
