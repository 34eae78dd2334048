"""Edit-operation grid expressed as a weighted directed graph."""

from __future__ import annotations

from typing import Callable, Sequence, Tuple

from editalign.graph.weighted_digraph import WeightedDiGraph
from editalign.types import START, Cost, EditOperation

GridNode = Tuple[int, int]

#: Operation-cost function: ``cost_fn(operation, *items) -> Cost``.
CostFunction = Callable[..., Cost]

#: Grid step ``(di, dj)`` of each operation.
STEPS = {
    EditOperation.SUBSTITUTE: (1, 1),
    EditOperation.INSERT: (0, 1),
    EditOperation.DELETE: (1, 0),
}

_OPERATIONS_BY_STEP = {step: op for op, step in STEPS.items()}


class EditOperationGraph(WeightedDiGraph):
    """Alignment grid of a source and a target sequence.

    Nodes are grid cells ``(i, j)`` where ``i`` indexes the source and ``j``
    the target; index 0 is the position before the first element. Every cell
    has edges diagonally to ``(i+1, j+1)``, vertically to ``(i, j+1)`` and
    horizontally to ``(i+1, j)`` where those cells exist. The edges stand for
    substitution, insertion and deletion respectively, and their weights come
    from the operation-cost function.

    Both sequences must already carry the ``START`` sentinel at index 0.
    """

    def __init__(
        self,
        source: Sequence,
        target: Sequence,
        cost_fn: CostFunction,
    ) -> None:
        super().__init__()
        if not source or source[0] is not START:
            raise ValueError("source must start with the START sentinel.")
        if not target or target[0] is not START:
            raise ValueError("target must start with the START sentinel.")
        self.source_items = source
        self.target_items = target

        m = len(source) - 1
        n = len(target) - 1
        self.source_node: GridNode = (0, 0)
        self.target_node: GridNode = (m, n)

        self.add_node(self.source_node)
        for i in range(m + 1):
            for j in range(n + 1):
                if i < m and j < n:
                    self.add_edge(
                        (i, j),
                        (i + 1, j + 1),
                        cost_fn(EditOperation.SUBSTITUTE, source[i + 1], target[j + 1]),
                    )
                if j < n:
                    self.add_edge(
                        (i, j), (i, j + 1), cost_fn(EditOperation.INSERT, target[j + 1])
                    )
                if i < m:
                    self.add_edge(
                        (i, j), (i + 1, j), cost_fn(EditOperation.DELETE, source[i + 1])
                    )

    @staticmethod
    def operation(u: GridNode, v: GridNode) -> EditOperation:
        """Classify the move from cell u to cell v.

        Raises:
            ValueError: If the cells are not one grid step apart.
        """
        step = (v[0] - u[0], v[1] - u[1])
        try:
            return _OPERATIONS_BY_STEP[step]
        except KeyError:
            raise ValueError(f"No edit operation moves from {u} to {v}.") from None
