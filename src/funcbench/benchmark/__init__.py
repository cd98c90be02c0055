"""Benchmark execution, parsing and comparison."""

from funcbench.benchmark.comparison import (
    compare_benchmarks,
    compare_samples,
    compare_sub_benchmarks,
    compute_delta,
)
from funcbench.benchmark.exceptions import (
    BenchmarkError,
    ComparisonError,
    NoComparableBenchmarksError,
    NoSubBenchmarksError,
)
from funcbench.benchmark.executor import BenchmarkExecutor
from funcbench.benchmark.parser import parse_benchmark_line, parse_benchmark_output

__all__ = [
    "BenchmarkError",
    "BenchmarkExecutor",
    "ComparisonError",
    "NoComparableBenchmarksError",
    "NoSubBenchmarksError",
    "compare_benchmarks",
    "compare_samples",
    "compare_sub_benchmarks",
    "compute_delta",
    "parse_benchmark_line",
    "parse_benchmark_output",
]
