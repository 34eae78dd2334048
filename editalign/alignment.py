"""Ranked edit alignments between two sequences.

`AlignmentGenerator` turns two sequences and an operation-cost function into
an `EditOperationGraph`, runs a `RankedShortestPathEngine` over it and decodes
every node path into an `Alignment`. Alignments are produced lazily in
non-decreasing cost order.

The operation-cost function is called as ``cost_fn(operation, *items)``.
Insertions and deletions pass a single item; substitutions pass the source
item followed by the target item.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence, Tuple, Union

from editalign.config import SearchConfig
from editalign.graph.edit_graph import CostFunction, EditOperationGraph, GridNode
from editalign.logging import get_logger
from editalign.search.engine import RankedShortestPathEngine
from editalign.search.path import RankedPath
from editalign.types import START, Cost, EditOperation

_logger = get_logger(__name__)

#: ``(source_item, target_item, operation)``; the gap side is None.
AlignedTriple = Tuple[Any, Any, EditOperation]


def levenshtein_cost(operation: Union[EditOperation, str], *items: Any) -> Cost:
    """Unit-cost Levenshtein weighting.

    Insertion, deletion and substitution of unlike items cost 1; substitution
    of like items costs 0.

    Raises:
        InvalidOperation: If ``operation`` is not an edit operation.
    """
    operation = EditOperation.from_value(operation)
    if operation is EditOperation.SUBSTITUTE:
        return 0 if items[0] == items[1] else 1
    return 1


def _with_start(sequence: Union[str, Sequence]) -> Tuple[Any, ...]:
    # Strings align character by character.
    return (START,) + tuple(sequence)


@dataclass(frozen=True)
class Alignment:
    """An edit alignment of a source sequence into a target sequence.

    Attributes:
        cost: Total cost of the edit operations.
        source: Source items, prefixed with the START sentinel.
        target: Target items, prefixed with the START sentinel.
        operations: Edit operations in order.
        path: Grid cells ``(i, j)`` visited from ``(0, 0)`` to the last cell.
    """

    cost: Cost
    source: Tuple[Any, ...]
    target: Tuple[Any, ...]
    operations: Tuple[EditOperation, ...]
    path: Tuple[GridNode, ...]

    @classmethod
    def from_path(
        cls, path: RankedPath, source: Tuple[Any, ...], target: Tuple[Any, ...]
    ) -> Alignment:
        """Decode a grid path into edit operations."""
        operations = tuple(EditOperationGraph.operation(u, v) for u, v in path.edges)
        return cls(path.cost, source, target, operations, tuple(path.nodes))

    def __iter__(self) -> Iterator[AlignedTriple]:
        """Yield ``(source_item, target_item, operation)`` per edit step."""
        for (i, j), operation in zip(self.path[1:], self.operations):
            if operation is EditOperation.SUBSTITUTE:
                yield self.source[i], self.target[j], operation
            elif operation is EditOperation.INSERT:
                yield None, self.target[j], operation
            else:
                yield self.source[i], None, operation

    def __len__(self) -> int:
        return len(self.operations)

    def apply(self) -> Tuple[Any, ...]:
        """Replay the operations on the source and return the edited sequence.

        Raises:
            ValueError: If the operations do not consume the whole source.
        """
        result = []
        consumed = 0
        for _, target_item, operation in self:
            if operation is not EditOperation.INSERT:
                consumed += 1
            if operation is not EditOperation.DELETE:
                result.append(target_item)
        if consumed != len(self.source) - 1:
            raise ValueError(
                f"Operations consume {consumed} of {len(self.source) - 1} source items."
            )
        return tuple(result)

    def __str__(self) -> str:
        rows = [[], [], []]
        for source_item, target_item, operation in self:
            cells = (
                "-" if source_item is None else str(source_item),
                "-" if target_item is None else str(target_item),
                operation.name[0],
            )
            width = max(len(c) for c in cells)
            for row, cell in zip(rows, cells):
                row.append(cell.ljust(width))
        return f"cost {self.cost}\n" + "\n".join(" ".join(r).rstrip() for r in rows)


class AlignmentGenerator:
    """Lazy, single-use stream of alignments in non-decreasing cost order.

    Example:
        >>> [a.cost for a in AlignmentGenerator("a", "b")]
        [1, 2, 2]
    """

    def __init__(
        self,
        source: Union[str, Sequence],
        target: Union[str, Sequence],
        cost_fn: Optional[CostFunction] = None,
        *,
        config: Optional[SearchConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Build the alignment grid of two sequences.

        Args:
            source: The sequence to edit. Strings are split into characters.
            target: The sequence to produce.
            cost_fn: Operation-cost function; defaults to `levenshtein_cost`.
            config: Search limits passed to the engine.
            logger: Diagnostic sink passed to the engine.

        Raises:
            InvalidOperation: If the cost function rejects an operation.
        """
        self.source = _with_start(source)
        self.target = _with_start(target)
        self.cost_fn = cost_fn if cost_fn is not None else levenshtein_cost
        self.config = config
        self.logger = logger
        self.graph = EditOperationGraph(self.source, self.target, self.cost_fn)
        self._engine: Optional[RankedShortestPathEngine] = None

    def __iter__(self) -> Iterator[Alignment]:
        if self._engine is not None:
            raise RuntimeError("An AlignmentGenerator can only be iterated once.")
        self._engine = RankedShortestPathEngine(
            self.graph,
            self.graph.source_node,
            self.graph.target_node,
            config=self.config,
            logger=self.logger,
        )
        return self._alignments(self._engine)

    def _alignments(self, engine: RankedShortestPathEngine) -> Iterator[Alignment]:
        for path in engine:
            yield Alignment.from_path(path, self.source, self.target)
        (self.logger or _logger).debug("Found all alignments.")

    def first(self) -> Optional[Alignment]:
        """Return the optimal alignment, or None if there is none."""
        return next(iter(self), None)


def alignment(
    source: Union[str, Sequence],
    target: Union[str, Sequence],
    cost_fn: Optional[CostFunction] = None,
) -> Optional[Alignment]:
    """Return the optimal alignment of two sequences."""
    return AlignmentGenerator(source, target, cost_fn).first()


def edit_distance(
    source: Union[str, Sequence],
    target: Union[str, Sequence],
    cost_fn: Optional[CostFunction] = None,
) -> Cost:
    """Return the cost of the optimal alignment of two sequences."""
    best = alignment(source, target, cost_fn)
    if best is None:
        raise ValueError("The sequences admit no alignment under this cost function.")
    return best.cost
