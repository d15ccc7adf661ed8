"""Trust graph model backed by a NetworkX multigraph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import networkx as nx

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True)
class TrustRelation:
    """A single directed trust assertion from ``rater`` to ``ratee``."""

    rater: int
    ratee: int
    weight: int


class TrustGraph:
    """Directed trust multigraph with a dense, first-seen node index.

    Every participant that appears as rater or ratee gets exactly one node and
    one internal index in ``range(node_count)``. Indices are assigned in the
    order participants are first seen and never change, so the matrix layout
    depends on the order relations are added.

    Parallel edges between the same ordered pair are kept as separate edges.
    """

    def __init__(self) -> None:
        self._graph = nx.MultiDiGraph()
        self._index: dict[int, int] = {}
        self._nodes: list[int] = []

    @classmethod
    def from_relations(cls, relations: Iterable[TrustRelation]) -> TrustGraph:
        """Create a graph populated from ``relations`` in iteration order."""
        graph = cls()
        graph.add_relations(relations)
        return graph

    def add_participant(self, participant: int) -> int:
        """Register ``participant`` if new and return its internal index."""
        index = self._index.get(participant)
        if index is None:
            index = len(self._nodes)
            self._index[participant] = index
            self._nodes.append(participant)
            self._graph.add_node(participant, index=index)
        return index

    def add_relation(self, relation: TrustRelation) -> None:
        """Add one directed, weighted edge, creating its endpoints if needed.

        Self-loops are allowed.
        """
        self.add_participant(relation.rater)
        self.add_participant(relation.ratee)
        self._graph.add_edge(relation.rater, relation.ratee, weight=relation.weight)

    def add_relations(self, relations: Iterable[TrustRelation]) -> None:
        """Add relations in order; order determines internal indices."""
        for relation in relations:
            self.add_relation(relation)

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Underlying NetworkX multigraph. Treat as read-only."""
        return self._graph

    @property
    def nodes(self) -> list[int]:
        """Participant IDs in internal index order."""
        return list(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def index_of(self, participant: int) -> int:
        """Return the internal index of ``participant``.

        Raises:
            KeyError: If the participant is unknown.
        """
        return self._index[participant]

    def node_at(self, index: int) -> int:
        """Return the participant ID stored at internal ``index``."""
        return self._nodes[index]

    def successors(self, participant: int) -> list[int]:
        """Distinct out-neighbors of ``participant`` in first-edge order."""
        if participant not in self._index:
            return []
        return list(self._graph.successors(participant))

    def neighbors_of(self, participant: int) -> set[int]:
        """Set of participants reachable over one outgoing edge."""
        return set(self.successors(participant))

    def has_edge(self, source: int, target: int) -> bool:
        return self._graph.has_edge(source, target)

    def edge_weight(self, source: int, target: int) -> int | None:
        """Weight of the edge ``source -> target``, or ``None`` if absent.

        With parallel edges the most recently added one wins, matching the
        adjacency matrix.
        """
        edges = self._graph.get_edge_data(source, target)
        if not edges:
            return None
        return list(edges.values())[-1]["weight"]

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(source, target, weight)``; parallel edges in insertion order."""
        yield from self._graph.edges(data="weight")

    def out_edges(self, participant: int) -> Iterator[tuple[int, int, int]]:
        """Yield outgoing ``(source, target, weight)`` edges of ``participant``."""
        if participant not in self._index:
            return
        yield from self._graph.out_edges(participant, data="weight")

    def __contains__(self, participant: object) -> bool:
        return participant in self._index

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"TrustGraph(nodes={self.node_count}, edges={self.edge_count})"
