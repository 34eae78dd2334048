"""Exceptions raised by editalign."""

from __future__ import annotations


class EditAlignError(Exception):
    """Base class for all editalign errors."""


class InvalidOperation(EditAlignError, ValueError):
    """A cost function was asked to price an unknown edit operation."""


class InvalidEndpoint(EditAlignError, KeyError):
    """The search source or target is not a node of the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0]) if self.args else ""


class MissingEdge(EditAlignError, KeyError):
    """An edge weight was requested or removed for an edge that does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
