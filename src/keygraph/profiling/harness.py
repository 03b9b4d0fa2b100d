"""Benchmark harness for DirectedGraph.

Builds a seeded random DAG and times each public operation on it:
linking, the depth-first walk in both directions, both level sorts,
targeted and full unlinks, and deletes.  After every mutating phase
the dual edge/backref index is checked, so a run doubles as a
consistency soak test on large graphs.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import random
import time
from dataclasses import dataclass

from keygraph.graph.directed import DirectedGraph

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing results from a single benchmark run."""
    nodes: int
    edges: int
    link_time_ms: float
    walk_time_ms: float
    level_sort_time_ms: float
    unlink_time_ms: float
    delete_time_ms: float
    total_time_ms: float
    visits: int               # callbacks fired by down() + up()
    reachable: int            # keys reported by sorted_down() from the root
    consistent: bool
    cprofile_stats: str | None = None


def build_random_dag(
    num_nodes: int, edge_prob: float, seed: int = 42
) -> DirectedGraph:
    """Random DAG over keys n0..n{N-1} with forward edges only.

    n0 links to every other node so the whole graph is reachable from
    it, and every node links to the last one so up() from there is too.
    """
    rng = random.Random(seed)
    g = DirectedGraph()
    keys = [f"n{i}" for i in range(num_nodes)]
    for i, key in enumerate(keys):
        g.put(key, i)
    for i in range(num_nodes):
        targets = [
            keys[j]
            for j in range(i + 1, num_nodes)
            if i == 0 or j == num_nodes - 1 or rng.random() < edge_prob
        ]
        if targets:
            g.link(keys[i], targets)
    return g


def run_benchmark(
    num_nodes: int = 500,
    edge_prob: float = 0.02,
    max_depth: int | None = None,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Run every graph operation once over a random DAG and time it.

    If profile=True, wraps the run in cProfile and includes the stats
    in the result.
    """
    if num_nodes < 2:
        raise ValueError("num_nodes must be at least 2")

    root, sink = "n0", f"n{num_nodes - 1}"
    rng = random.Random(seed + 1)

    link_ms = walk_ms = sort_ms = unlink_ms = delete_ms = 0.0
    visits = 0
    reachable = 0
    consistent = True
    edge_total = 0
    g = DirectedGraph()

    def _count(neighbors, key) -> None:
        nonlocal visits
        visits += 1

    def _run() -> None:
        nonlocal g, link_ms, walk_ms, sort_ms, unlink_ms, delete_ms
        nonlocal reachable, consistent, edge_total

        t0 = time.perf_counter()
        g = build_random_dag(num_nodes, edge_prob, seed)
        link_ms = (time.perf_counter() - t0) * 1000
        edge_total = g.edge_count
        consistent = consistent and not g.check_consistency()

        t0 = time.perf_counter()
        g.down(root, _count, max_depth)
        g.up(sink, _count, max_depth)
        walk_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        reachable = len(g.sorted_down(root, max_depth))
        g.sorted_up(sink, max_depth)
        sort_ms = (time.perf_counter() - t0) * 1000

        victims = rng.sample(list(g.nodes())[1:-1], min(10, num_nodes - 2))

        t0 = time.perf_counter()
        for key in victims[: len(victims) // 2]:
            g.unlink(key, g.successors(key)[:1])
        for key in victims[len(victims) // 2:]:
            g.unlink(key)
        unlink_ms = (time.perf_counter() - t0) * 1000
        consistent = consistent and not g.check_consistency()

        t0 = time.perf_counter()
        for key in victims:
            g.delete(key)
        delete_ms = (time.perf_counter() - t0) * 1000
        consistent = consistent and not g.check_consistency()

    cprofile_text = None

    t_total_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - t_total_start) * 1000

    if not consistent:
        log.warning("edge/backref index drifted during benchmark run")

    return BenchmarkResult(
        nodes=num_nodes,
        edges=edge_total,
        link_time_ms=link_ms,
        walk_time_ms=walk_ms,
        level_sort_time_ms=sort_ms,
        unlink_time_ms=unlink_ms,
        delete_time_ms=delete_ms,
        total_time_ms=total_ms,
        visits=visits,
        reachable=reachable,
        consistent=consistent,
        cprofile_stats=cprofile_text,
    )
