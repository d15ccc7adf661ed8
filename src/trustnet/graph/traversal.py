"""Breadth-first traversal over positive trust edges."""

from __future__ import annotations

import networkx as nx

from trustnet.core import get_logger
from trustnet.graph.model import TrustGraph

logger = get_logger(__name__)


def trusted_transactions(graph: TrustGraph, start: int) -> list[tuple[int, int]]:
    """List positively weighted edges reachable from ``start``.

    Nodes are visited breadth-first along outgoing edges of any sign; for each
    visited node its outgoing edges with positive weight are reported, one
    entry per parallel edge.

    Args:
        graph: Trust graph.
        start: Participant to start from.

    Returns:
        ``(source, target)`` pairs in visit order; empty if ``start`` is unknown.
    """
    if start not in graph:
        logger.warning(f"Participant {start} not in graph, nothing to traverse")
        return []

    visit_order = [start]
    visit_order.extend(target for _, target in nx.bfs_edges(graph.graph, start))

    trusted = [
        (source, target)
        for node in visit_order
        for source, target, weight in graph.out_edges(node)
        if weight > 0
    ]

    logger.debug(f"Visited {len(visit_order)} participants from {start}")
    return trusted
