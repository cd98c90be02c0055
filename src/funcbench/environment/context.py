"""Values shared by every environment variant."""

from funcbench.models.base import FrozenSchema

__all__ = ["EnvironmentContext"]


class EnvironmentContext(FrozenSchema):
    """What to benchmark and what to compare against.

    Attributes:
        compare_target: '.', a branch name or commit to compare against.
        bench_func: Benchmark name filter.

    """

    compare_target: str
    bench_func: str
