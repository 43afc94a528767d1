"""
Exceptions raised by the graph engine and the pipeline network.
"""

from __future__ import annotations

from collections.abc import Hashable


class GraphError(Exception):
    """Base class for graph and network errors."""


class PreconditionError(GraphError, ValueError):
    """An operation was called with input it does not accept."""


class NotFoundError(GraphError, LookupError):
    """
    A referenced vertex (or pipeline) is not registered.

    Attributes:
        key: The identifier that could not be found
    """

    def __init__(self, key: Hashable, kind: str = "Vertex") -> None:
        self.key = key
        self.kind = kind
        super().__init__(f"{kind} {key!r} not found")
