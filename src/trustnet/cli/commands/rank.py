"""Eigenvector centrality ranking commands for trustnet."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from trustnet.cli.helpers import console, load_graph_or_exit
from trustnet.core import CentralityError
from trustnet.core.config import get_settings
from trustnet.graph import EigenvectorCentralityCalculator

app = typer.Typer(
    name="rank",
    help="Eigenvector centrality ranking commands",
    no_args_is_help=True,
)


@app.command("compute")
def compute(
    path: Optional[Path] = typer.Argument(
        None,
        help="Relation CSV (rater,ratee,weight). Defaults to TRUSTNET_DATA_FILE.",
    ),
    iterations: Optional[int] = typer.Option(
        None,
        "--iterations",
        "-i",
        help="Maximum power iterations",
        min=1,
    ),
    tolerance: Optional[float] = typer.Option(
        None,
        "--tolerance",
        "-c",
        help="Convergence threshold",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--top",
        "-t",
        help="Number of top participants to show",
        min=1,
    ),
    normalize: bool = typer.Option(
        False,
        "--normalize",
        "-n",
        help="Min-max normalize scores to [0, 1]",
    ),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Skip malformed rows instead of failing",
    ),
) -> None:
    """
    Rank participants by eigenvector centrality.

    Example:
        trustnet rank compute data/btc_alpha.csv --iterations 100 --top 20
    """
    settings = get_settings()
    max_iter = iterations or settings.centrality_max_iterations
    tol = tolerance if tolerance is not None else settings.centrality_tolerance
    top_k = limit or settings.top_k

    try:
        calculator = EigenvectorCentralityCalculator(max_iter=max_iter, tol=tol)
    except CentralityError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    graph = load_graph_or_exit(path, strict=not lenient)

    console.print(Panel(
        f"[bold]Centrality Configuration[/bold]\n\n"
        f"Participants: [cyan]{graph.node_count:,}[/cyan]\n"
        f"Relations: [cyan]{graph.edge_count:,}[/cyan]\n"
        f"Max Iterations: [cyan]{max_iter}[/cyan]\n"
        f"Tolerance: [cyan]{tol}[/cyan]",
        title="Computing Eigenvector Centrality",
    ))

    with console.status("Running power iteration..."):
        result = calculator.run(graph)

    scores = calculator.normalize_scores(result.scores) if normalize else result.scores

    table = Table(title=f"Top {top_k} Participants")
    table.add_column("Rank", style="dim", justify="right")
    table.add_column("Participant", style="cyan", justify="right")
    table.add_column("Score", style="green", justify="right")

    for rank, (participant, score) in enumerate(calculator.get_top_k(scores, top_k), start=1):
        table.add_row(str(rank), str(participant), f"{score:.6f}")

    console.print(table)

    if result.converged:
        status = "[green]Converged[/green]"
    elif result.halted_on_zero_norm:
        status = "[yellow]Halted (zero norm)[/yellow]"
    else:
        status = "[red]Not converged[/red]"
    console.print(f"\nIterations: [cyan]{result.iterations}[/cyan]  Status: {status}")
