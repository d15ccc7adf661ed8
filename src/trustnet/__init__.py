"""trustnet - eigenvector centrality and mutual trust analysis for trust networks."""

__version__ = "0.1.0"

from trustnet.graph import (
    TrustGraph,
    TrustRelation,
    analyze_mutual_connections,
    build_adjacency_matrix,
    build_trust_graph,
    compute_eigenvector_centrality,
    find_mutual_trust_score,
    trusted_transactions,
)
from trustnet.ingest import read_relations

__all__ = [
    "__version__",
    "TrustGraph",
    "TrustRelation",
    "analyze_mutual_connections",
    "build_adjacency_matrix",
    "build_trust_graph",
    "compute_eigenvector_centrality",
    "find_mutual_trust_score",
    "trusted_transactions",
    "read_relations",
]
