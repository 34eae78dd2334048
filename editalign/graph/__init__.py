"""Graph primitives.

This package provides the weighted directed graph type `WeightedDiGraph` and
the alignment grid `EditOperationGraph` built on top of it.
"""

from editalign.graph.edit_graph import EditOperationGraph
from editalign.graph.weighted_digraph import WeightedDiGraph

__all__ = ["EditOperationGraph", "WeightedDiGraph"]
