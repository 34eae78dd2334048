"""Ranked shortest-path enumeration by repeated relaxation and graph surgery.

The engine yields every path of the cheapest cost tier, removes the edges at
the first branch of that tier so none of its paths can be found again, rolls
back the state invalidated by the removal and relaxes again to find the next
tier. It runs as an explicit state machine:

    RELAXING -> DRAINING -> EXCISING -> RELAXING ... -> EXHAUSTED

Notes:
    - RELAXING records every relaxation in the backtrace, improving or not,
      so cost-tied predecessors survive. Among equal tentative costs the
      target is popped last, which lets zero-weight predecessors of the
      target register before the tier is drained.
    - DRAINING reads each node's optimal backtrace bucket once per tier and
      then consumes it.
    - EXCISING resets every node downstream of a removed edge and seeds it
      again from its finalized predecessors. Nodes consumed while draining
      are seeded the same way so their optimal bucket reflects the pruned
      graph.

The engine owns and destructively prunes the graph it is given. Weights must
be non-negative and the graph must not contain zero-weight cycles.
"""

from __future__ import annotations

import itertools
import logging
from enum import IntEnum
from heapq import heappop, heappush
from typing import Dict, Iterator, List, Optional, Set, Tuple

import networkx as nx

from editalign.config import SEARCH_CONFIG, SearchConfig
from editalign.exceptions import InvalidEndpoint
from editalign.graph.weighted_digraph import WeightedDiGraph
from editalign.logging import get_logger
from editalign.search.backtrace import RankedPathBacktrace
from editalign.search.path import Edge, RankedPath
from editalign.types import INFINITY, Cost, Node

_logger = get_logger(__name__)


class SearchState(IntEnum):
    """States of the ranked search."""

    RELAXING = 1
    DRAINING = 2
    EXCISING = 3
    EXHAUSTED = 4


class RankedShortestPathEngine:
    """Enumerate source-to-target paths in non-decreasing cost order.

    Iterating the engine yields `RankedPath` objects. Costs never decrease and
    strictly increase from one tier to the next; no path is yielded twice.
    The iteration is single-use because the graph is pruned as it runs.

    Example:
        >>> g = WeightedDiGraph.from_triples("a", "b", 2, "b", "c", 3, "a", "c", 6)
        >>> [(p.cost, list(p)) for p in RankedShortestPathEngine(g, "a", "c")]
        [(5, ['a', 'b', 'c']), (6, ['a', 'c'])]
    """

    def __init__(
        self,
        graph: WeightedDiGraph,
        source: Node,
        target: Node,
        config: Optional[SearchConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Prepare a search over ``graph``.

        Args:
            graph: The graph to search. The engine takes ownership and removes
                edges from it; do not reuse it for another search.
            source: The node paths start from.
            target: The node paths end at.
            config: Search limits; defaults to ``SEARCH_CONFIG``.
            logger: Diagnostic sink; defaults to this module's logger.

        Raises:
            InvalidEndpoint: If source or target is not a node of the graph.
        """
        if source not in graph:
            raise InvalidEndpoint(f"Source node '{source}' is not in the graph.")
        if target not in graph:
            raise InvalidEndpoint(f"Target node '{target}' is not in the graph.")

        self.graph = graph
        self.source = source
        self.target = target
        self.config = config if config is not None else SEARCH_CONFIG
        self.logger = logger if logger is not None else _logger

        self.state = SearchState.RELAXING
        self.backtrace = RankedPathBacktrace(logger=self.logger)
        self.costs: Dict[Node, Cost] = {
            node: (0 if node == source else INFINITY) for node in graph
        }
        self.agenda: Set[Node] = set(graph)

        # Min-heap of (cost, is_target, seq, node); stale entries are skipped.
        self._queue: List[Tuple[Cost, bool, int, Node]] = []
        self._seq = itertools.count()
        for node in graph:
            self._push(node)

        self._to_excise: List[Edge] = []
        self._consumed: Set[Node] = set()
        self._started = False
        self.tiers = 0

    def __str__(self) -> str:
        return (
            f"{self.graph}\n"
            f"Agenda: {{{', '.join(str(n) for n in self.agenda)}}}\n"
            f"Cost: {self.costs}\n"
            f"Backtrace:\n{self.backtrace}"
        )

    def __iter__(self) -> Iterator[RankedPath]:
        if self._started:
            raise RuntimeError("A ranked path search can only be iterated once.")
        self._started = True
        return self._run()

    def _run(self) -> Iterator[RankedPath]:
        yielded = 0
        while self.state is not SearchState.EXHAUSTED:
            if self.state is SearchState.RELAXING:
                if self.config.dump_state and self.logger.isEnabledFor(logging.DEBUG):
                    self.logger.debug("Find optimal paths\n%s", str(self))
                self._relax()
            elif self.state is SearchState.DRAINING:
                tier_cost = self.costs[self.target]
                if not self.config.within_cost(tier_cost):
                    self._exhaust(f"tier cost {tier_cost} exceeds {self.config.max_cost}")
                    return
                self.tiers += 1
                for path in self._drain():
                    yield path
                    yielded += 1
                    if self.config.reached_path_limit(yielded):
                        self._exhaust(f"path limit {self.config.max_paths} reached")
                        return
                if self._to_excise:
                    self.state = SearchState.EXCISING
                else:
                    self._exhaust("no branch left to excise")
            elif self.state is SearchState.EXCISING:
                self._excise()

    def _exhaust(self, reason: str) -> None:
        self.logger.debug("Search exhausted after %d tiers: %s", self.tiers, reason)
        self.state = SearchState.EXHAUSTED

    def _push(self, node: Node) -> None:
        heappush(
            self._queue, (self.costs[node], node == self.target, next(self._seq), node)
        )

    def _pop_optimal(self) -> Optional[Node]:
        """Remove and return the agenda node with minimal tentative cost."""
        while self._queue:
            cost, _, _, node = heappop(self._queue)
            if node in self.agenda and cost == self.costs[node]:
                self.agenda.discard(node)
                return node
        return None

    def _relax(self) -> None:
        while True:
            node = self._pop_optimal()
            if node is None:
                self._exhaust(f"target {self.target} is inaccessible")
                return
            cost = self.costs[node]
            self.logger.debug("Explore node %s(%s)", node, cost)
            if cost == INFINITY:
                self._exhaust(f"target {self.target} is inaccessible")
                return
            if node == self.target:
                self.logger.debug("Reached target %s at cost %s", node, cost)
                self.state = SearchState.DRAINING
                return
            for neighbor in self.graph.each_adjacent(node):
                new_cost = cost + self.graph.weight(node, neighbor)
                self.backtrace.record(node, neighbor, new_cost)
                if new_cost < self.costs[neighbor]:
                    self.costs[neighbor] = new_cost
                    self.logger.debug("Relax cost(%s) = %s", neighbor, new_cost)
                    if neighbor in self.agenda:
                        self._push(neighbor)

    def _drain(self) -> Iterator[RankedPath]:
        """Yield every optimal path recorded in the backtrace.

        Populates ``_to_excise`` with the edges entering the first branch
        node met walking back from the target or, for a single path, the
        edge leaving the source.
        """
        tier_cost = self.costs[self.target]
        self._to_excise = []

        if self.target == self.source:
            yield RankedPath(tier_cost, (self.source,))
            return

        predecessors: Dict[Node, List[Node]] = {}
        paths: List[Tuple[Node, ...]] = [(self.target,)]
        while paths:
            path = paths.pop()
            node = path[0]
            prev_nodes = predecessors.get(node)
            if prev_nodes is None:
                prev_nodes = self.backtrace.optimal_predecessors(node)
                self.logger.debug(
                    "Read off paths to %s of cost %s",
                    node,
                    self.backtrace.optimal_cost(node),
                )
                if not self._to_excise and self.backtrace.has_branch(node):
                    self._to_excise = [(prev, node) for prev in prev_nodes]
                self.backtrace.consume_optimal(node)
                self._consumed.add(node)
                predecessors[node] = prev_nodes

            for prev in prev_nodes:
                if prev in path:
                    continue
                if not self._to_excise and prev == self.source:
                    self._to_excise.append((prev, node))
                new_path = (prev,) + path
                if prev == self.source:
                    self.logger.debug("Found path %r", new_path)
                    yield RankedPath(tier_cost, new_path, tuple(self._to_excise))
                else:
                    paths.append(new_path)

    def _excise(self) -> None:
        heads: Set[Node] = set()
        for prev, node in self._to_excise:
            self.logger.debug(
                "Remove edge %s --%s--> %s", prev, self.graph.weight(prev, node), node
            )
            self.graph.remove_edge(prev, node)
            heads.add(node)

        # Every node reachable from a removed edge may now cost more.
        reached = set(heads)
        for head in heads:
            reached.update(nx.descendants(self.graph, head))
        reached.discard(self.source)
        dirty = [node for node in self.graph if node in reached]

        for node in dirty:
            self.backtrace.forget(node)
            self.costs[node] = INFINITY
            self.agenda.add(node)

        for node in dirty:
            self._reseed(node)
        for node in self._consumed - reached:
            self._reseed(node)

        for node in dirty:
            self.costs[node] = self.backtrace.optimal_cost(node)
            self._push(node)

        self.logger.debug(
            "Rolled back %d nodes, reseeded %d consumed nodes",
            len(dirty),
            len(self._consumed - reached),
        )
        self._consumed.clear()
        self._to_excise = []
        self.state = SearchState.RELAXING

    def _reseed(self, node: Node) -> None:
        """Record the relaxations into ``node`` from finalized predecessors."""
        for prev in self.graph.predecessors(node):
            if prev in self.agenda:
                continue
            prev_cost = self.costs[prev]
            if prev_cost == INFINITY:
                continue
            self.backtrace.record(prev, node, prev_cost + self.graph.weight(prev, node))


def ranked_paths(
    graph: WeightedDiGraph,
    source: Node,
    target: Node,
    config: Optional[SearchConfig] = None,
) -> Iterator[RankedPath]:
    """Enumerate paths of ``graph`` from source to target by cost.

    Convenience wrapper around `RankedShortestPathEngine`; the graph is pruned.
    """
    return iter(RankedShortestPathEngine(graph, source, target, config))
