"""Node records and the NO_VALUE marker.

A node is a plain record: a value plus two ordered key lists.  Nodes
never hold references to other nodes, only their keys, so the graph's
single dict is the only owner of every record and removing a key can
never leave a node object reachable from somewhere else.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final, TypeAlias

NodeKey: TypeAlias = str


class _Marker(Enum):
    """Tag type for "this node has no value"."""

    NO_VALUE = "NO_VALUE"

    def __repr__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return False


# compare with `is`; None, 0 and NaN are all legitimate payloads
NO_VALUE: Final = _Marker.NO_VALUE


@dataclass(slots=True)
class Node:
    """A keyed record in a DirectedGraph.

    edges lists the keys this node points to, backrefs the keys that
    point here.  Both keep insertion order and may hold duplicates.
    """
    value: Any = NO_VALUE
    edges: list[NodeKey] = field(default_factory=list)
    backrefs: list[NodeKey] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "value": None if self.value is NO_VALUE else self.value,
            "edges": list(self.edges),
            "backrefs": list(self.backrefs),
        }
