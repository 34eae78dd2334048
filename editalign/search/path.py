"""Ranked path produced by the search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Tuple

from editalign.types import Cost, Node

Edge = Tuple[Node, Node]


@dataclass(frozen=True)
class RankedPath:
    """A complete source-to-target path from one cost tier.

    Attributes:
        cost: Total weight of the path.
        nodes: Nodes from source to target.
        branch_edges: Edges marked for excision in the tier that produced this
            path. Every path of the tier contains one of them, which is what
            keeps later tiers from producing it again.
    """

    cost: Cost
    nodes: Tuple[Node, ...]
    branch_edges: Tuple[Edge, ...] = field(default=(), compare=False)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    @property
    def src_node(self) -> Node:
        return self.nodes[0]

    @property
    def dst_node(self) -> Node:
        return self.nodes[-1]

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Consecutive ``(u, v)`` node pairs along the path."""
        return tuple(zip(self.nodes, self.nodes[1:]))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, RankedPath):
            return NotImplemented
        return self.cost < other.cost
