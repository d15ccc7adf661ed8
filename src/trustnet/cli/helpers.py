"""Shared helpers for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from trustnet.core import LogContext, TrustNetError
from trustnet.core.config import get_settings
from trustnet.graph import TrustGraph
from trustnet.ingest import load_trust_graph

console = Console()


def resolve_dataset(path: Optional[Path]) -> Path:
    """Return ``path`` or the configured default dataset.

    Raises:
        typer.BadParameter: If neither is set.
    """
    if path is not None:
        return path

    settings = get_settings()
    if settings.data_file is None:
        raise typer.BadParameter(
            "No dataset given and TRUSTNET_DATA_FILE is not set",
            param_hint="PATH",
        )
    return settings.data_file


def load_graph_or_exit(path: Optional[Path], strict: bool = True) -> TrustGraph:
    """Load the trust graph for a command, exiting with code 1 on failure."""
    settings = get_settings()
    dataset = resolve_dataset(path)

    try:
        with LogContext(dataset=str(dataset)), console.status(
            f"Loading relations from [cyan]{dataset}[/cyan]..."
        ):
            return load_trust_graph(
                dataset,
                has_header=settings.csv_has_header,
                delimiter=settings.csv_delimiter,
                strict=strict,
            )
    except TrustNetError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e
