"""Graph inspection commands for trustnet."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from trustnet.cli.helpers import console, load_graph_or_exit
from trustnet.graph import get_graph_stats, trusted_transactions

app = typer.Typer(
    name="graph",
    help="Graph inspection commands",
    no_args_is_help=True,
)


@app.command("stats")
def stats(
    path: Optional[Path] = typer.Argument(
        None,
        help="Relation CSV (rater,ratee,weight). Defaults to TRUSTNET_DATA_FILE.",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Skip malformed rows instead of failing",
    ),
) -> None:
    """
    Show node, edge and degree statistics.

    Example:
        trustnet graph stats data/btc_alpha.csv
    """
    graph = load_graph_or_exit(path, strict=not lenient)
    graph_stats = get_graph_stats(graph)

    table = Table(title="Trust Graph Statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    for key, value in graph_stats.items():
        label = key.replace("_", " ").title()
        formatted = f"{value:.4f}" if isinstance(value, float) else f"{value:,}"
        table.add_row(label, formatted)

    console.print(table)


@app.command("trusted")
def trusted(
    path: Optional[Path] = typer.Argument(
        None,
        help="Relation CSV (rater,ratee,weight). Defaults to TRUSTNET_DATA_FILE.",
    ),
    start: int = typer.Option(
        ...,
        "--start",
        "-s",
        help="Participant to start the traversal from",
    ),
    limit: int = typer.Option(
        50,
        "--limit",
        "-l",
        help="Number of edges to show",
        min=0,
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Skip malformed rows instead of failing",
    ),
) -> None:
    """
    Walk the graph breadth-first and list positive trust edges.

    Example:
        trustnet graph trusted data/btc_alpha.csv --start 1
    """
    graph = load_graph_or_exit(path, strict=not lenient)

    if start not in graph:
        console.print(f"[yellow]Participant {start} is not in the graph[/yellow]")
        raise typer.Exit(code=1)

    edges = trusted_transactions(graph, start)

    table = Table(title="Trusted Transactions")
    table.add_column("From", style="cyan", justify="right")
    table.add_column("To", style="green", justify="right")

    for source, target in edges[:limit]:
        table.add_row(str(source), str(target))

    console.print(table)
    console.print(f"{len(edges):,} trusted edges reachable from {start}")
