"""Directed graph with named nodes and mirrored back-edges.

Every node lives in a single dict keyed by its string key.  A node
stores the keys it points to (edges) and, redundantly, the keys that
point at it (backrefs).  The redundancy costs memory and makes every
mutation touch both ends of an edge, but it makes "who depends on me"
as cheap as "what do I depend on".

Invariant, after every public method returns:
  for every node A and every key k in A.edges, A's key occurs in
  k.backrefs, and with the same multiplicity (and vice versa).

Mutations are permissive: put/link/unlink/delete never raise.  Only
the traversals raise, and only for structural problems (a key that
does not exist, or a cycle on the active path).
"""
from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator
from typing import Any

from keygraph.graph.node import NO_VALUE, Node, NodeKey
from keygraph.graph.traversal import (
    Direction,
    LevelEntry,
    Visitor,
    level_sort,
    walk,
)

log = logging.getLogger(__name__)


def _as_keys(to: NodeKey | Iterable[NodeKey]) -> list[NodeKey]:
    if isinstance(to, str):
        return [to]
    return list(to)


class DirectedGraph:
    """In-memory directed multigraph keyed by string.

    Usage:
        g = DirectedGraph()
        g.put("app", {"version": 2})
        g.link("app", ["db", "cache"])
        g.sorted_down("app")     # [LevelEntry("db", 1), LevelEntry("cache", 1)]
        g.down("app", lambda deps, key: print(key, list(deps)))
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: dict[NodeKey, Node] = {}

    # ---- storage ---------------------------------------------------------

    def put(self, key: NodeKey, value: Any = NO_VALUE) -> None:
        """Set the value of *key*, creating the node if needed.

        An existing node keeps its edges and backrefs.
        """
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            return
        self._nodes[key] = Node(value=value)
        log.debug("created node %r", key)

    def get(self, key: NodeKey) -> Any:
        """Value stored at *key*, or NO_VALUE if the key is absent.

        A present node without a value also yields NO_VALUE; use
        exists() to tell the two apart.
        """
        node = self._nodes.get(key)
        return NO_VALUE if node is None else node.value

    def exists(self, key: NodeKey) -> bool:
        return key in self._nodes

    def delete(self, key: NodeKey) -> None:
        """Unlink *key* from all neighbours, then drop it.  No-op if absent."""
        if key not in self._nodes:
            return
        self.unlink(key)
        del self._nodes[key]
        log.debug("deleted node %r", key)

    # ---- linking ---------------------------------------------------------

    def link(self, frm: NodeKey, to: NodeKey | Iterable[NodeKey]) -> None:
        """Add an edge from *frm* to each key in *to*.

        *to* is a single key or an ordered iterable of keys.  Unknown
        endpoints are created without a value.  Linking the same pair
        twice records the edge twice.
        """
        targets = _as_keys(to)
        if frm not in self._nodes:
            self.put(frm)
        for target in targets:
            if target not in self._nodes:
                self.put(target)

        source = self._nodes[frm]
        for target in targets:
            source.edges.append(target)
            self._nodes[target].backrefs.append(frm)

    def unlink(
        self, frm: NodeKey, to: NodeKey | Iterable[NodeKey] | None = None
    ) -> None:
        """Remove edges touching *frm*.

        Without *to*, every outgoing edge of *frm* is removed.  With
        *to*, one outgoing edge per listed key is removed; keys that
        are not linked are ignored.

        In both forms every incoming edge of *frm* is removed too, so
        afterwards nothing points at *frm*.
        """
        node = self._nodes.get(frm)
        if node is None:
            return

        if to is None:
            for target in node.edges:
                self._nodes[target].backrefs.remove(frm)
            node.edges = []
        else:
            for target in _as_keys(to):
                if target not in node.edges:
                    continue
                node.edges.remove(target)
                self._nodes[target].backrefs.remove(frm)

        # incoming side is always cleared
        for source in node.backrefs:
            self._nodes[source].edges.remove(frm)
        node.backrefs = []
        log.debug("unlinked node %r", frm)

    # ---- traversal -------------------------------------------------------

    def down(
        self, key: NodeKey, visit: Visitor, max_depth: int | None = None
    ) -> None:
        """Depth-first walk along edges; see traversal.walk."""
        walk(self._nodes, key, Direction.DOWN, visit, max_depth)

    def up(
        self, key: NodeKey, visit: Visitor, max_depth: int | None = None
    ) -> None:
        """Depth-first walk along backrefs; see traversal.walk."""
        walk(self._nodes, key, Direction.UP, visit, max_depth)

    def sorted_down(
        self, key: NodeKey, max_depth: int | None = None
    ) -> list[LevelEntry]:
        """Keys reachable along edges, nearest first."""
        return level_sort(self._nodes, key, Direction.DOWN, max_depth)

    def sorted_up(
        self, key: NodeKey, max_depth: int | None = None
    ) -> list[LevelEntry]:
        """Keys reachable along backrefs, nearest first."""
        return level_sort(self._nodes, key, Direction.UP, max_depth)

    # ---- queries ---------------------------------------------------------

    def successors(self, key: NodeKey) -> list[NodeKey]:
        """Copy of the edges of *key* (empty if absent)."""
        node = self._nodes.get(key)
        return [] if node is None else list(node.edges)

    def predecessors(self, key: NodeKey) -> list[NodeKey]:
        """Copy of the backrefs of *key* (empty if absent)."""
        node = self._nodes.get(key)
        return [] if node is None else list(node.backrefs)

    def nodes(self) -> Iterator[NodeKey]:
        return iter(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return sum(len(node.edges) for node in self._nodes.values())

    def check_consistency(self) -> list[str]:
        """Describe every place where edges and backrefs disagree.

        Returns an empty list when the graph is consistent.
        """
        problems: list[str] = []
        for key, node in self._nodes.items():
            for target in set(node.edges):
                other = self._nodes.get(target)
                if other is None:
                    problems.append(f"{key} -> {target}: target missing")
                    continue
                out = node.edges.count(target)
                back = other.backrefs.count(key)
                if out != back:
                    problems.append(
                        f"{key} -> {target}: {out} edge(s), {back} backref(s)"
                    )
            for source in set(node.backrefs):
                other = self._nodes.get(source)
                if other is None:
                    problems.append(f"{source} -> {key}: source missing")
                elif key not in other.edges:
                    problems.append(f"{source} -> {key}: backref without edge")
        return problems

    def to_dict(self) -> dict[NodeKey, dict[str, Any]]:
        """Plain-dict snapshot of every node, for diagnostics."""
        return {key: node.to_dict() for key, node in self._nodes.items()}

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def __iter__(self) -> Iterator[NodeKey]:
        return self.nodes()

    def __len__(self) -> int:
        return self.node_count

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=repr)

    def __repr__(self) -> str:
        return f"DirectedGraph(nodes={self.node_count}, edges={self.edge_count})"
