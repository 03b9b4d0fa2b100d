"""Tests for the benchmark harness and report."""
from __future__ import annotations

import pytest

from keygraph.profiling.harness import build_random_dag, run_benchmark
from keygraph.profiling.report import format_report


class TestRandomDag:
    def test_root_reaches_everything(self) -> None:
        g = build_random_dag(50, 0.05, seed=7)
        assert g.node_count == 50
        assert len(g.sorted_down("n0")) == 49
        assert len(g.sorted_up("n49")) == 49
        assert g.check_consistency() == []

    def test_seeded(self) -> None:
        a = build_random_dag(30, 0.2, seed=1)
        b = build_random_dag(30, 0.2, seed=1)
        assert a.to_dict() == b.to_dict()

    def test_values_are_indices(self) -> None:
        g = build_random_dag(5, 0.5)
        assert [g.get(f"n{i}") for i in range(5)] == list(range(5))


class TestHarness:
    def test_benchmark_runs(self) -> None:
        result = run_benchmark(num_nodes=200, edge_prob=0.05)
        assert result.nodes == 200
        assert result.edges > 0
        assert result.reachable == 199
        assert result.consistent
        assert result.total_time_ms > 0
        assert result.visits > 0

    def test_benchmark_with_profiling(self) -> None:
        result = run_benchmark(num_nodes=50, profile=True)
        assert result.cprofile_stats is not None
        assert "function calls" in result.cprofile_stats

    def test_depth_bound_limits_reach(self) -> None:
        # n0 links to every node directly, so one hop covers everything
        bounded = run_benchmark(num_nodes=100, edge_prob=0.1, max_depth=1)
        assert bounded.reachable == 99
        # with a bound of 1 only the two start nodes fire callbacks
        assert bounded.visits == 2

    def test_tiny_graph(self) -> None:
        result = run_benchmark(num_nodes=2)
        assert result.reachable == 1
        assert result.consistent

    def test_too_small_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            run_benchmark(num_nodes=1)


class TestReport:
    def test_format_report(self) -> None:
        result = run_benchmark(num_nodes=50)
        text = format_report(result, label="Run")
        assert text.startswith("=== Run ===")
        assert "Nodes:             50" in text
        assert "Consistent:        yes" in text
