"""Domain-specific exceptions for benchmark comparison."""

from funcbench.exceptions import FuncbenchError

__all__ = [
    "BenchmarkError",
    "ComparisonError",
    "NoComparableBenchmarksError",
    "NoSubBenchmarksError",
]


class BenchmarkError(FuncbenchError):
    """Base exception for benchmark execution and comparison errors."""

    pass


class ComparisonError(BenchmarkError):
    """Base exception for reports that cannot be compared."""

    pass


class NoSubBenchmarksError(ComparisonError):
    """Raised when a self-compare run has no benchmark with repeated samples."""

    def __init__(self, benchmark_count: int) -> None:
        self.benchmark_count = benchmark_count
        super().__init__(
            f"no sub-benchmarks to compare: none of the {benchmark_count} "
            "benchmarks reported two or more samples"
        )


class NoComparableBenchmarksError(ComparisonError):
    """Raised when the old and new reports share no benchmark name."""

    def __init__(self, old_count: int, new_count: int) -> None:
        self.old_count = old_count
        self.new_count = new_count
        super().__init__(
            f"no comparable benchmarks: old report has {old_count} and new report "
            f"has {new_count} benchmarks, but no names match"
        )
