"""Mutual connection and mutual trust score analysis."""

from __future__ import annotations

from dataclasses import dataclass

from trustnet.core import get_logger
from trustnet.graph.model import TrustGraph

logger = get_logger(__name__)

Triad = tuple[int, int, int]
PairScores = dict[tuple[int, int], float]


@dataclass(frozen=True)
class RelationshipSummary:
    """Aggregate counts over the relationship analysis of one graph."""

    triad_count: int
    scored_pair_count: int
    centers_with_triads: int


def analyze_mutual_connections(graph: TrustGraph) -> list[Triad]:
    """Find neighbor pairs that are linked only through a common rater.

    For every center node and every ordered pair ``(a, b)`` of its distinct
    out-neighbors with no edge between ``a`` and ``b`` in either direction,
    ``(center, a, b)`` is emitted. Both orderings of a pair appear.

    Args:
        graph: Trust graph.

    Returns:
        Triads in node order, then neighbor order.
    """
    triads: list[Triad] = []

    for center in graph.nodes:
        neighbors = graph.successors(center)
        for first in neighbors:
            for second in neighbors:
                if first == second:
                    continue
                if graph.has_edge(first, second) or graph.has_edge(second, first):
                    continue
                triads.append((center, first, second))

    return triads


def find_mutual_trust_score(graph: TrustGraph) -> PairScores:
    """Average a center's trust in each pair of its neighbors.

    For every center and every ordered pair ``(a, b)`` of its distinct
    out-neighbors, the score is ``(w(center->a) + w(center->b)) / 2``. When
    several centers rate the same pair, the center processed last wins.
    Pairs without resolvable weights are absent rather than zero.

    Returns:
        Dictionary mapping ``(a, b)`` to the mean trust weight.
    """
    scores: PairScores = {}

    for center in graph.nodes:
        weights = {}
        for neighbor in graph.successors(center):
            weight = graph.edge_weight(center, neighbor)
            if weight is not None:
                weights[neighbor] = float(weight)

        for first, first_weight in weights.items():
            for second, second_weight in weights.items():
                if first == second:
                    continue
                scores[(first, second)] = (first_weight + second_weight) / 2.0

    return scores


class MutualConnectionAnalyzer:
    """Analyze local trust structure around each participant."""

    def find_triads(self, graph: TrustGraph) -> list[Triad]:
        """Find mutual-connection triads, see ``analyze_mutual_connections``."""
        if graph.node_count == 0:
            logger.warning("Empty graph provided for mutual connection analysis")
            return []

        triads = analyze_mutual_connections(graph)
        logger.info(f"Found {len(triads)} mutual connection triads")
        return triads

    def score_pairs(self, graph: TrustGraph) -> PairScores:
        """Compute mutual trust scores, see ``find_mutual_trust_score``."""
        if graph.node_count == 0:
            logger.warning("Empty graph provided for mutual trust scoring")
            return {}

        scores = find_mutual_trust_score(graph)
        logger.info(f"Computed mutual trust scores for {len(scores)} neighbor pairs")
        return scores

    def summarize(self, graph: TrustGraph) -> RelationshipSummary:
        """Summarize triads and scored pairs for ``graph``."""
        triads = self.find_triads(graph)
        scores = self.score_pairs(graph)

        return RelationshipSummary(
            triad_count=len(triads),
            scored_pair_count=len(scores),
            centers_with_triads=len({center for center, _, _ in triads}),
        )
