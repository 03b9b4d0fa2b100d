"""Exceptions raised by graph traversals."""
from __future__ import annotations


class GraphError(Exception):
    """Base class for keygraph errors."""


class MissingNodeError(GraphError, LookupError):
    """Raised when a traversal is asked to expand a key with no node."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{key} doesn't exist.")


class CyclicalGraphError(GraphError):
    """Raised when a walk reaches a key that is still on its active path."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{key} already visited. graph is cyclical.")
