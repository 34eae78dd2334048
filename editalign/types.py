"""Base types and enums shared by the graph, search and alignment layers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Hashable, Union

from editalign.exceptions import InvalidOperation

#: Represents a numeric edge weight or accumulated path cost.
Cost = Union[int, float]

#: Cost of an unreachable node.
INFINITY: float = float("inf")

#: Graph nodes are opaque hashable values; edit graphs use ``(i, j)`` tuples.
Node = Hashable


class EditOperation(IntEnum):
    """Edit operations that move through an alignment grid."""

    #: Consume one target item (vertical move).
    INSERT = 1
    #: Consume one source item (horizontal move).
    DELETE = 2
    #: Consume one item from each side (diagonal move).
    SUBSTITUTE = 3

    @classmethod
    def from_value(cls, value: Union["EditOperation", str]) -> "EditOperation":
        """Parse an operation tag.

        Args:
            value: An ``EditOperation`` member or its case-insensitive name
                (e.g., "insert", "SUBSTITUTE").

        Returns:
            The corresponding EditOperation member.

        Raises:
            InvalidOperation: If the value doesn't name an edit operation.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
        valid = ", ".join(e.name.lower() for e in cls)
        raise InvalidOperation(
            f"Invalid edit operation '{value}'. Valid values are: {valid}"
        )


class Boundary(Enum):
    """Marker placed before the first element of an aligned sequence."""

    START = "START"

    def __repr__(self) -> str:
        return "START"


#: Start-of-sequence sentinel. Index 0 of every aligned sequence holds it so
#: that grid index ``i`` refers to the ``i``-th real element.
START = Boundary.START
