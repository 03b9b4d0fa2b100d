"""Directed graph with mirrored back-edges and its traversals."""

from keygraph.graph.directed import DirectedGraph
from keygraph.graph.errors import CyclicalGraphError, GraphError, MissingNodeError
from keygraph.graph.node import NO_VALUE, Node, NodeKey
from keygraph.graph.traversal import Direction, LevelEntry, level_sort, walk

__all__ = [
    "CyclicalGraphError",
    "Direction",
    "DirectedGraph",
    "GraphError",
    "LevelEntry",
    "MissingNodeError",
    "NO_VALUE",
    "Node",
    "NodeKey",
    "level_sort",
    "walk",
]
