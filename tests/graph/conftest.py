"""Shared fixtures for graph tests."""
from __future__ import annotations

import random

import pytest

from keygraph.graph.directed import DirectedGraph

SEED = 42


@pytest.fixture
def empty_graph() -> DirectedGraph:
    return DirectedGraph()


@pytest.fixture
def linear_graph() -> DirectedGraph:
    """A -> B -> C -> D"""
    g = DirectedGraph()
    for src, dst in [("A", "B"), ("B", "C"), ("C", "D")]:
        g.link(src, dst)
    return g


@pytest.fixture
def diamond_graph() -> DirectedGraph:
    """
    A -> B -> D
    A -> C -> D
    """
    g = DirectedGraph()
    g.link("A", ["B", "C"])
    g.link("B", "D")
    g.link("C", "D")
    return g


@pytest.fixture
def wide_dag() -> DirectedGraph:
    """Root with 10 children, each with 2 grandchildren (all leaves)."""
    g = DirectedGraph()
    for i in range(10):
        child = f"L1_{i}"
        g.link("root", child)
        for j in range(2):
            g.link(child, f"L2_{i}_{j}")
    return g


def random_dag(n: int, edge_prob: float, seed: int = SEED) -> DirectedGraph:
    """DAG over keys "0".."n-1" with forward edges i -> j, i < j."""
    rng = random.Random(seed)
    g = DirectedGraph()
    for i in range(n):
        g.put(str(i), i)
    for i in range(n):
        for j in range(i + 1, n):
            if rng.random() < edge_prob:
                g.link(str(i), str(j))
    return g


def reachable(g: DirectedGraph, start: str, *, down: bool = True) -> set[str]:
    """Brute-force reachability, excluding *start* unless on a cycle."""
    step = g.successors if down else g.predecessors
    seen: set[str] = set()
    todo = list(step(start))
    while todo:
        key = todo.pop()
        if key in seen:
            continue
        seen.add(key)
        todo.extend(step(key))
    return seen
