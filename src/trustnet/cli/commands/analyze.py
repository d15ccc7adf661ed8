"""Mutual connection analysis commands for trustnet."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from trustnet.cli.helpers import console, load_graph_or_exit
from trustnet.graph import MutualConnectionAnalyzer

app = typer.Typer(
    name="analyze",
    help="Mutual connection and mutual trust commands",
    no_args_is_help=True,
)


@app.command("triads")
def triads(
    path: Optional[Path] = typer.Argument(
        None,
        help="Relation CSV (rater,ratee,weight). Defaults to TRUSTNET_DATA_FILE.",
    ),
    limit: int = typer.Option(
        20,
        "--limit",
        "-l",
        help="Number of triads to show",
        min=0,
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Skip malformed rows instead of failing",
    ),
) -> None:
    """
    List participants whose neighbors are only connected through them.

    Example:
        trustnet analyze triads data/btc_alpha.csv --limit 50
    """
    graph = load_graph_or_exit(path, strict=not lenient)
    found = MutualConnectionAnalyzer().find_triads(graph)

    table = Table(title=f"Mutual Connections ({len(found):,} total)")
    table.add_column("Through", style="cyan", justify="right")
    table.add_column("Participant A", style="green", justify="right")
    table.add_column("Participant B", style="green", justify="right")

    for center, first, second in found[:limit]:
        table.add_row(str(center), str(first), str(second))

    console.print(table)


@app.command("scores")
def scores(
    path: Optional[Path] = typer.Argument(
        None,
        help="Relation CSV (rater,ratee,weight). Defaults to TRUSTNET_DATA_FILE.",
    ),
    limit: int = typer.Option(
        20,
        "--limit",
        "-l",
        help="Number of pairs to show",
        min=0,
    ),
    sort: bool = typer.Option(
        False,
        "--sort",
        "-s",
        help="Sort pairs by score, highest first",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Skip malformed rows instead of failing",
    ),
) -> None:
    """
    Show mutual trust scores between neighbor pairs.

    Example:
        trustnet analyze scores data/btc_alpha.csv --sort --limit 10
    """
    graph = load_graph_or_exit(path, strict=not lenient)
    pair_scores = MutualConnectionAnalyzer().score_pairs(graph)

    items = list(pair_scores.items())
    if sort:
        items.sort(key=lambda item: item[1], reverse=True)

    table = Table(title=f"Mutual Trust Scores ({len(items):,} pairs)")
    table.add_column("Participant A", style="cyan", justify="right")
    table.add_column("Participant B", style="cyan", justify="right")
    table.add_column("Score", style="green", justify="right")

    for (first, second), score in items[:limit]:
        table.add_row(str(first), str(second), f"{score:.2f}")

    console.print(table)
