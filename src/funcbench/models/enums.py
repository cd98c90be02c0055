"""Enumeration types for funcbench.

This module defines the enum types used throughout the comparison engine,
including comparison modes, metric kinds and pipeline states.
"""

from enum import Enum

__all__ = [
    "ComparisonMode",
    "ExclusionReason",
    "MetricKind",
    "PipelineState",
]


class ComparisonMode(str, Enum):
    """How the current checkout is compared.

    Attributes:
        self_compare: Compare repeated samples within a single run.
        cross_revision: Compare against a benchmark run of another revision.
    """

    self_compare = "self_compare"
    cross_revision = "cross_revision"


class MetricKind(str, Enum):
    """Measurement columns reported by Go benchmarks.

    The value is the unit label as printed by ``go test -bench``.
    """

    time = "ns/op"
    throughput = "MB/s"
    allocations = "allocs/op"
    bytes = "B/op"

    @property
    def column_label(self) -> str:
        """Unit label used in rendered table headers."""
        return _COLUMN_LABELS[self]


_COLUMN_LABELS = {
    MetricKind.time: "ns/op",
    MetricKind.throughput: "MB/s",
    MetricKind.allocations: "allocs",
    MetricKind.bytes: "bytes",
}


class ExclusionReason(str, Enum):
    """Why a benchmark name was left out of the numeric comparison."""

    only_in_old = "only in old"
    only_in_new = "only in new"
    single_sample = "single sample"
    no_common_metrics = "no common measurements"


class PipelineState(str, Enum):
    """States of the comparison pipeline.

    Attributes:
        pending: Pipeline created but not started.
        validate_workspace: Checking the primary workspace is clean.
        resolve_target: Resolving the comparison target.
        run_current: Benchmarking the current checkout.
        prepare_worktree: Checking out the target revision.
        run_target: Benchmarking the target revision.
        compare: Computing the comparison.
        report: Handing the report to the environment.
        cleanup: Removing the secondary worktree.
        reported: Finished successfully.
        failed: Terminated with an error.
        cancelled: Terminated by an interrupt.
    """

    pending = "pending"
    validate_workspace = "validate_workspace"
    resolve_target = "resolve_target"
    run_current = "run_current"
    prepare_worktree = "prepare_worktree"
    run_target = "run_target"
    compare = "compare"
    report = "report"
    cleanup = "cleanup"
    reported = "reported"
    failed = "failed"
    cancelled = "cancelled"
