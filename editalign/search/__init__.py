"""Ranked shortest-path search."""

from editalign.search.backtrace import RankedPathBacktrace
from editalign.search.engine import RankedShortestPathEngine, SearchState, ranked_paths
from editalign.search.path import RankedPath

__all__ = [
    "RankedPath",
    "RankedPathBacktrace",
    "RankedShortestPathEngine",
    "SearchState",
    "ranked_paths",
]
