"""Backtrace of every relaxation made during a ranked path search.

Maps each node to ``{cost: [predecessor, ...]}``. Unlike the predecessor map
of a textbook Dijkstra, every relaxation is kept, not only improving ones:
the minimal bucket holds all cost-tied predecessors and the higher buckets
keep costlier routes that later tiers may expose.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from editalign.logging import get_logger
from editalign.types import INFINITY, Cost, Node

_logger = get_logger(__name__)


class RankedPathBacktrace:
    """Multi-map node -> cost -> ordered predecessor list."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else _logger
        self._buckets: Dict[Node, Dict[Cost, List[Node]]] = {}

    def record(self, from_node: Node, to_node: Node, cost: Cost) -> None:
        """Record that ``to_node`` was reached from ``from_node`` at ``cost``.

        Predecessors that tie on cost are kept in discovery order. Recording
        the same predecessor twice at the same cost is a no-op.
        """
        bucket = self._buckets.setdefault(to_node, {}).setdefault(cost, [])
        if from_node not in bucket:
            bucket.append(from_node)

    def optimal_cost(self, node: Node) -> Cost:
        """Return the lowest recorded cost of a node, or INFINITY if none."""
        costs = self._buckets.get(node)
        return min(costs) if costs else INFINITY

    def optimal_predecessors(self, node: Node) -> List[Node]:
        """Return a copy of the predecessors recorded at the optimal cost."""
        costs = self._buckets.get(node)
        if not costs:
            return []
        return list(costs[min(costs)])

    def has_branch(self, node: Node) -> bool:
        """Return True if more than one predecessor ties on the optimal cost."""
        return len(self.optimal_predecessors(node)) > 1

    def consume_optimal(self, node: Node) -> None:
        """Delete the optimal bucket of a node, exposing the next-best one."""
        costs = self._buckets.get(node)
        if not costs:
            return
        optimal = min(costs)
        del costs[optimal]
        self.logger.debug("Consume cost %s paths to %s", optimal, node)
        if not costs:
            del self._buckets[node]

    def forget(self, node: Node) -> None:
        """Drop every bucket of a node."""
        self._buckets.pop(node, None)

    def buckets(self, node: Node) -> Dict[Cost, List[Node]]:
        """Return a copy of the ``{cost: predecessors}`` map of a node."""
        return {cost: list(preds) for cost, preds in self._buckets.get(node, {}).items()}

    def __contains__(self, node: object) -> bool:
        return node in self._buckets

    def __iter__(self) -> Iterator[Node]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __str__(self) -> str:
        lines = []
        for node, costs in self._buckets.items():
            lines.append(f"{node}:")
            for cost in sorted(costs):
                lines.append(f"    {cost} {costs[cost]!r}")
        return "\n".join(lines)
