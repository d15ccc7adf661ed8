"""Ingest module - load trust relations from delimited files."""

from trustnet.ingest.reader import iter_relations, load_trust_graph, parse_relation, read_relations

__all__ = [
    "iter_relations",
    "load_trust_graph",
    "parse_relation",
    "read_relations",
]
