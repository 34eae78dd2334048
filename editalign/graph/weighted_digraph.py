"""Weighted directed graph with strict edge handling.

`WeightedDiGraph` extends `networkx.DiGraph` so that every edge carries exactly
one numeric weight. Weight lookup and edge removal fail loudly with
`MissingEdge` when the edge is absent, which lets the search engine treat a
missing edge as a programming error rather than a silent ``None``.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Tuple

import networkx as nx

from editalign.exceptions import MissingEdge
from editalign.types import Cost, Node

#: Edge attribute that stores the weight.
WEIGHT_ATTR = "weight"

WeightedEdge = Tuple[Node, Node, Cost]


class WeightedDiGraph(nx.DiGraph):
    """A directed graph with exactly one weight per ordered node pair.

    This class enforces:
      - Each edge has a single numeric weight; re-adding an edge overwrites it.
      - Querying the weight of, or removing, a missing edge raises MissingEdge.
      - Nodes are created implicitly by ``add_edge``; self-loops are allowed.

    Inherits from:
        networkx.DiGraph
    """

    @classmethod
    def from_triples(cls, *items: Any) -> WeightedDiGraph:
        """Build a graph from a flat ``u, v, w, u, v, w, ...`` argument list.

        Example:
            >>> g = WeightedDiGraph.from_triples("a", "b", 2, "b", "c", 3, "a", "c", 6)
            >>> g.weight("a", "c")
            6

        Args:
            *items: Source, target and weight of each edge, in that order.

        Returns:
            WeightedDiGraph: The new graph.

        Raises:
            ValueError: If the number of items is not a multiple of three.
        """
        if len(items) % 3:
            raise ValueError(
                f"Expected (source, target, weight) triples, got {len(items)} items."
            )
        graph = cls()
        for i in range(0, len(items), 3):
            graph.add_edge(items[i], items[i + 1], items[i + 2])
        return graph

    def add_edge(self, u_of_edge: Node, v_of_edge: Node, weight: Cost = 1, **attr: Any) -> None:  # type: ignore[override]
        """Add a weighted edge, overwriting the weight of an existing one.

        Args:
            u_of_edge: The source node.
            v_of_edge: The target node.
            weight: The edge weight. Weights are assumed to be non-negative.
            **attr: Extra edge attributes.
        """
        attr[WEIGHT_ATTR] = weight
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def remove_edge(self, u: Node, v: Node) -> None:
        """Remove the edge from u to v.

        Args:
            u: The source node.
            v: The target node.

        Raises:
            MissingEdge: If there is no edge from u to v.
        """
        if not self.has_edge(u, v):
            raise MissingEdge(f"No edge from '{u}' to '{v}' to remove.")
        super().remove_edge(u, v)

    def weight(self, u: Node, v: Node) -> Cost:
        """Return the weight of the edge from u to v.

        Raises:
            MissingEdge: If there is no edge from u to v.
        """
        try:
            return self._succ[u][v][WEIGHT_ATTR]
        except KeyError:
            raise MissingEdge(f"No edge from '{u}' to '{v}'.") from None

    def each_adjacent(self, node: Node) -> Iterator[Node]:
        """Iterate over the out-neighbours of a node.

        Iterates over a snapshot so callers may prune edges while looping.
        """
        return iter(list(self._succ[node]))

    def isolates(self) -> List[Node]:
        """Return the nodes that have no incident edges."""
        return list(nx.isolates(self))

    def weighted_edges(self) -> List[WeightedEdge]:
        """Return every edge as a ``(u, v, weight)`` triple."""
        return [(u, v, w) for u, v, w in self.edges(data=WEIGHT_ATTR)]

    def path_weight(self, nodes: List[Node]) -> Cost:
        """Sum the weights along a node path.

        Raises:
            MissingEdge: If two consecutive nodes are not connected.
        """
        return sum(self.weight(u, v) for u, v in zip(nodes, nodes[1:]))

    def __str__(self) -> str:
        lines = sorted(f"({u}-{w}-{v})" for u, v, w in self.weighted_edges())
        lines.extend(sorted(str(n) for n in self.isolates()))
        return "\n".join(lines)
