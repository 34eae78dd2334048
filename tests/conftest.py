"""Shared sample graphs.

Each fixture returns a fresh graph because the search engine prunes the graph
it is given.
"""

from __future__ import annotations

import pytest

from editalign.graph.weighted_digraph import WeightedDiGraph


@pytest.fixture
def triangle():
    #       [2]      [3]
    #   a ──────► b ──────► c
    #   │                   ▲
    #   └───────────────────┘
    #            [6]
    return WeightedDiGraph.from_triples("a", "b", 2, "b", "c", 3, "a", "c", 6)


@pytest.fixture
def square_tie():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [1]        [1]  │
    #   └────────►D─────────┘
    return WeightedDiGraph.from_triples(
        "A", "B", 1, "B", "C", 1, "A", "D", 1, "D", "C", 1
    )


@pytest.fixture
def square_uneven():
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return WeightedDiGraph.from_triples(
        "A", "B", 1, "B", "C", 1, "A", "D", 2, "D", "C", 2
    )


@pytest.fixture
def shared_ancestor():
    # Two tied routes to T that share the prefix S -> X.
    #
    #                 [1]
    #            ┌───────►P────┐[1]
    #   S──────►X              ▼
    #      [1]   └───────►Q───►T
    #                 [1]  [1]
    #
    # plus a costlier bypass S -> T of weight 5.
    return WeightedDiGraph.from_triples(
        "S", "X", 1, "X", "P", 1, "X", "Q", 1, "P", "T", 1, "Q", "T", 1, "S", "T", 5
    )
