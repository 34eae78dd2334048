"""Configuration classes for editalign searches."""

from dataclasses import dataclass
from typing import Optional

from editalign.types import INFINITY, Cost


@dataclass
class SearchConfig:
    """Limits and diagnostics for a ranked path search."""

    # Stop after this many paths; None enumerates until exhaustion
    max_paths: Optional[int] = None

    # Stop before yielding any path costlier than this
    max_cost: Cost = INFINITY

    # Log the full graph, agenda, cost table and backtrace at every tier
    dump_state: bool = False

    def within_cost(self, cost: Cost) -> bool:
        """Return True if a tier of the given cost may still be yielded."""
        return cost <= self.max_cost

    def reached_path_limit(self, count: int) -> bool:
        """Return True once ``count`` paths satisfy ``max_paths``."""
        return self.max_paths is not None and count >= self.max_paths


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
