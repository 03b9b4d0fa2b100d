"""keygraph: an in-memory directed graph keyed by string.

Re-exports the public API for convenient access:
    from keygraph import DirectedGraph, NO_VALUE, CyclicalGraphError
"""
from keygraph.graph import (
    NO_VALUE,
    CyclicalGraphError,
    DirectedGraph,
    Direction,
    GraphError,
    LevelEntry,
    MissingNodeError,
)

__version__ = "0.1.0"

__all__ = [
    "CyclicalGraphError",
    "DirectedGraph",
    "Direction",
    "GraphError",
    "LevelEntry",
    "MissingNodeError",
    "NO_VALUE",
]
