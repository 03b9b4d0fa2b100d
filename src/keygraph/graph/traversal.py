"""Traversals over a node table: cycle-checked walk and level sort.

Both algorithms run in one of two directions:
  DOWN -- follow each node's edges (successors)
  UP   -- follow each node's backrefs (predecessors)

walk() is a depth-first, pre-order traversal.  It keeps two sets for
the whole call:
  visiting -- keys on the active path (opened, not yet closed)
  visited  -- keys whose subtree has been fully explored
Reaching a visiting key again means the path loops back on itself,
which is reported as CyclicalGraphError.  Reaching a visited key is a
cheap no-op, so every reachable node is expanded at most once even
when many branches converge on it.

The walk uses an explicit stack of frames instead of Python recursion,
so long chains do not run into the interpreter's recursion limit.  A
frame is opened in exactly the order the recursive version would call
itself, which keeps callback order and error behaviour identical.

level_sort() is a breadth-first expansion that records the first depth
at which each key is discovered.
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from keygraph.graph.errors import CyclicalGraphError, MissingNodeError
from keygraph.graph.node import Node, NodeKey

Visitor = Callable[[dict[NodeKey, Any], NodeKey], object]


class Direction(Enum):
    """Which adjacency list of a node a traversal follows."""
    UP = "backrefs"
    DOWN = "edges"

    def neighbors(self, node: Node) -> list[NodeKey]:
        return node.backrefs if self is Direction.UP else node.edges


@dataclass(slots=True, frozen=True)
class LevelEntry:
    """A key and the number of hops at which it was first reached."""
    key: NodeKey
    depth: int


def walk(
    nodes: Mapping[NodeKey, Node],
    start: NodeKey,
    direction: Direction,
    visit: Visitor,
    max_depth: int | None = None,
) -> None:
    """Walk from *start* calling visit(neighbors, key) on each inner node.

    *neighbors* is an ordered dict of the node's not-yet-seen neighbours
    mapped to their values.  Nodes with no neighbours at all are closed
    without a callback.  *max_depth* counts edges; None means unbounded.

    Raises CyclicalGraphError if a key on the active path is reached
    again, MissingNodeError if an expanded key has no node record.
    """
    visiting: set[NodeKey] = set()
    visited: set[NodeKey] = set()

    def _open(
        key: NodeKey, budget: int | None
    ) -> tuple[NodeKey, int | None, Iterator[NodeKey]] | None:
        if (budget is not None and budget <= 0) or key in visited:
            return None
        if key in visiting:
            raise CyclicalGraphError(key)
        visiting.add(key)

        node = nodes.get(key)
        if node is None:
            raise MissingNodeError(key)

        # snapshot; visit() must not relink while the walk is running
        adjacent = tuple(direction.neighbors(node))
        if not adjacent:
            visited.add(key)
            visiting.discard(key)
            return None

        pending: dict[NodeKey, Any] = {}
        for item in adjacent:
            if item in visited or item in visiting:
                continue
            pending[item] = nodes[item].value

        visit(pending, key)
        return key, None if budget is None else budget - 1, iter(adjacent)

    root = _open(start, max_depth)
    stack = [root] if root is not None else []

    while stack:
        key, child_budget, children = stack[-1]
        child = next(children, None)
        if child is None:
            # every child done -> close this node
            stack.pop()
            visited.add(key)
            visiting.discard(key)
            continue
        frame = _open(child, child_budget)
        if frame is not None:
            stack.append(frame)


def level_sort(
    nodes: Mapping[NodeKey, Node],
    start: NodeKey,
    direction: Direction,
    max_depth: int | None = None,
) -> list[LevelEntry]:
    """Return every key reachable from *start*, ordered by hop count.

    Each key is reported once, at the first depth it was discovered.
    Ties keep breadth-first discovery order.  The start key is only
    included when some path leads back to it.

    Raises MissingNodeError if a frontier key has no node record.
    """
    frontier: list[NodeKey] = [start]
    seen: dict[NodeKey, int] = {}
    depth = 0

    while (max_depth is None or depth < max_depth) and frontier:
        next_level: list[NodeKey] = []
        for key in frontier:
            node = nodes.get(key)
            if node is None:
                raise MissingNodeError(key)
            for item in direction.neighbors(node):
                if item not in seen:
                    seen[item] = depth + 1
                    next_level.append(item)
        depth += 1
        # keys recorded at an earlier level were already expanded there
        frontier = next_level

    entries = [LevelEntry(key, d) for key, d in seen.items()]
    entries.sort(key=lambda e: e.depth)
    return entries
