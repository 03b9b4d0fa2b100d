"""Benchmark harness for keygraph."""

from keygraph.profiling.harness import (
    BenchmarkResult,
    build_random_dag,
    run_benchmark,
)
from keygraph.profiling.report import format_report

__all__ = [
    "BenchmarkResult",
    "build_random_dag",
    "format_report",
    "run_benchmark",
]
