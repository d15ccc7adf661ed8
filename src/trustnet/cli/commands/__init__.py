"""CLI commands module for trustnet."""

from trustnet.cli.commands import analyze, graph, rank

__all__ = ["analyze", "graph", "rank"]
