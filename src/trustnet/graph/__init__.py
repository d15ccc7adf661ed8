"""Graph module - trust graph model, centrality and relationship analysis."""

from trustnet.graph.model import TrustGraph, TrustRelation
from trustnet.graph.builder import build_adjacency_matrix, build_trust_graph, get_graph_stats
from trustnet.graph.centrality import (
    CentralityResult,
    EigenvectorCentralityCalculator,
    compute_eigenvector_centrality,
)
from trustnet.graph.relationships import (
    MutualConnectionAnalyzer,
    RelationshipSummary,
    analyze_mutual_connections,
    find_mutual_trust_score,
)
from trustnet.graph.traversal import trusted_transactions

__all__ = [
    "TrustGraph",
    "TrustRelation",
    "build_adjacency_matrix",
    "build_trust_graph",
    "get_graph_stats",
    "CentralityResult",
    "EigenvectorCentralityCalculator",
    "compute_eigenvector_centrality",
    "MutualConnectionAnalyzer",
    "RelationshipSummary",
    "analyze_mutual_connections",
    "find_mutual_trust_score",
    "trusted_transactions",
]
