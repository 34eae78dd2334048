"""editalign: ranked edit alignments of sequences.

Enumerates the alignments of a source sequence into a target sequence in
non-decreasing cost order, under a caller-supplied cost for insertion,
deletion and substitution.

Primary API:
    AlignmentGenerator - Lazy stream of alignments, cheapest first
    Alignment - Cost, edit operations and aligned items of one alignment
    alignment() / edit_distance() - The optimal alignment and its cost
    RankedShortestPathEngine - Ranked path enumeration over any WeightedDiGraph

Example:
    from editalign import AlignmentGenerator

    for a in AlignmentGenerator("kitten", "sitting"):
        print(a.cost, [op.name for op in a.operations])
"""

from __future__ import annotations

from editalign import logging
from editalign._version import __version__
from editalign.alignment import (
    Alignment,
    AlignmentGenerator,
    alignment,
    edit_distance,
    levenshtein_cost,
)
from editalign.config import SEARCH_CONFIG, SearchConfig
from editalign.exceptions import (
    EditAlignError,
    InvalidEndpoint,
    InvalidOperation,
    MissingEdge,
)
from editalign.graph import EditOperationGraph, WeightedDiGraph
from editalign.search import (
    RankedPath,
    RankedPathBacktrace,
    RankedShortestPathEngine,
    SearchState,
    ranked_paths,
)
from editalign.types import INFINITY, START, EditOperation

__all__ = [
    # Version
    "__version__",
    # Alignment (primary API)
    "AlignmentGenerator",
    "Alignment",
    "alignment",
    "edit_distance",
    "levenshtein_cost",
    # Graph
    "WeightedDiGraph",
    "EditOperationGraph",
    # Search
    "RankedShortestPathEngine",
    "RankedPathBacktrace",
    "RankedPath",
    "SearchState",
    "ranked_paths",
    # Types
    "EditOperation",
    "START",
    "INFINITY",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Errors
    "EditAlignError",
    "InvalidOperation",
    "InvalidEndpoint",
    "MissingEdge",
    # Utilities
    "logging",
]
