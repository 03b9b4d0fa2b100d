"""Report generation for benchmark results."""
from __future__ import annotations

from keygraph.profiling.harness import BenchmarkResult


def _share(part: float, total: float) -> str:
    if total <= 0:
        return "0.0%"
    return f"{part / total * 100:.1f}%"


def format_report(result: BenchmarkResult, label: str = "DirectedGraph") -> str:
    """Format a BenchmarkResult as a readable report string."""
    total = result.total_time_ms
    lines = [
        f"=== {label} ===",
        f"Nodes:             {result.nodes:,}",
        f"Edges:             {result.edges:,}",
        f"Total time:        {total:.1f} ms",
        f"",
        f"Breakdown:",
        f"  Link:            {result.link_time_ms:.1f} ms "
        f"({_share(result.link_time_ms, total)})",
        f"  Walk up/down:    {result.walk_time_ms:.1f} ms "
        f"({_share(result.walk_time_ms, total)})",
        f"  Level sort:      {result.level_sort_time_ms:.1f} ms "
        f"({_share(result.level_sort_time_ms, total)})",
        f"  Unlink:          {result.unlink_time_ms:.1f} ms "
        f"({_share(result.unlink_time_ms, total)})",
        f"  Delete:          {result.delete_time_ms:.1f} ms "
        f"({_share(result.delete_time_ms, total)})",
        f"",
        f"Walk callbacks:    {result.visits:,}",
        f"Reachable (down):  {result.reachable:,}",
        f"Consistent:        {'yes' if result.consistent else 'NO'}",
    ]
    return "\n".join(lines)
