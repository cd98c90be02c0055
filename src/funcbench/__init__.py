"""funcbench - benchmark and compare Go code between sub-benchmarks or commits.

Runs the project's benchmark suite against the current checkout and a
target revision (checked out into a secondary git worktree) and reports
the per-benchmark delta.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
