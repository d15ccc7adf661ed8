"""Build trust graphs from relation records and derive their adjacency matrix."""

from __future__ import annotations

from typing import TYPE_CHECKING

import networkx as nx
import numpy as np

from trustnet.core import get_logger
from trustnet.graph.model import TrustGraph, TrustRelation

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)


def build_trust_graph(relations: Iterable[TrustRelation]) -> TrustGraph:
    """Build a trust graph from relation records.

    Args:
        relations: Already-parsed relations, in dataset order.

    Returns:
        Populated TrustGraph.
    """
    graph = TrustGraph.from_relations(relations)

    logger.info(
        f"Built trust graph with {graph.node_count} nodes "
        f"and {graph.edge_count} edges"
    )

    return graph


def build_adjacency_matrix(graph: TrustGraph) -> np.ndarray:
    """Build the dense weighted adjacency matrix of ``graph``.

    Cell ``(i, j)`` holds the weight of the edge from the node at internal
    index ``i`` to the node at index ``j``. For parallel edges the last one
    written wins; weights are not summed.

    Args:
        graph: Trust graph.

    Returns:
        ``node_count x node_count`` float64 matrix.
    """
    n = graph.node_count
    matrix = np.zeros((n, n), dtype=np.float64)

    for source, target, weight in graph.edges():
        matrix[graph.index_of(source), graph.index_of(target)] = float(weight)

    logger.debug(f"Built {n}x{n} adjacency matrix")
    return matrix


def get_graph_stats(graph: TrustGraph) -> dict[str, int | float]:
    """Get basic statistics about the graph.

    Returns:
        Dictionary with graph statistics.
    """
    nx_graph = graph.graph

    stats: dict[str, int | float] = {
        "node_count": graph.node_count,
        "edge_count": graph.edge_count,
        "density": nx.density(nx_graph) if graph.node_count > 0 else 0.0,
    }

    if graph.node_count > 0:
        in_degrees = [d for _, d in nx_graph.in_degree()]
        out_degrees = [d for _, d in nx_graph.out_degree()]
        weights = [w for _, _, w in graph.edges()]

        stats["avg_in_degree"] = sum(in_degrees) / len(in_degrees)
        stats["avg_out_degree"] = sum(out_degrees) / len(out_degrees)
        stats["max_in_degree"] = max(in_degrees)
        stats["max_out_degree"] = max(out_degrees)
        stats["positive_edges"] = sum(1 for w in weights if w > 0)
        stats["negative_edges"] = sum(1 for w in weights if w < 0)
        stats["self_loops"] = nx.number_of_selfloops(nx_graph)

    return stats
