"""Models for parsed benchmark samples and computed comparisons.

A benchmark report is parsed into BenchmarkSample objects grouped by
name. Comparing two groups yields BenchmarkMetric rows which are
collected, together with exclusions, into a ComparisonReport.
"""

from __future__ import annotations

from pydantic import Field

from funcbench.models.base import BaseSchema
from funcbench.models.enums import ComparisonMode, ExclusionReason, MetricKind
from funcbench.models.revision import Revision

__all__ = [
    "BenchmarkMetric",
    "BenchmarkSample",
    "BenchmarkSet",
    "ComparisonReport",
    "ExcludedBenchmark",
    "MetricDelta",
]


class BenchmarkSample(BaseSchema):
    """One line of ``go test -bench`` output.

    Attributes:
        name: Benchmark name including the GOMAXPROCS suffix (e.g. BenchmarkFoo-8).
        iterations: Number of iterations the measurement is averaged over.
        ord: Position of the line within its report.
        ns_per_op: Nanoseconds per operation.
        mb_per_s: Throughput in MB/s.
        bytes_per_op: Bytes allocated per operation.
        allocs_per_op: Allocations per operation.

    """

    name: str
    iterations: int = Field(..., ge=0)
    ord: int = 0
    ns_per_op: float | None = None
    mb_per_s: float | None = None
    bytes_per_op: float | None = None
    allocs_per_op: float | None = None

    def value(self, kind: MetricKind) -> float | None:
        """Return the measurement for a metric kind, or None if not reported."""
        return getattr(self, _SAMPLE_FIELDS[kind])

    def measured(self, kind: MetricKind) -> bool:
        return self.value(kind) is not None


_SAMPLE_FIELDS = {
    MetricKind.time: "ns_per_op",
    MetricKind.throughput: "mb_per_s",
    MetricKind.allocations: "allocs_per_op",
    MetricKind.bytes: "bytes_per_op",
}

# Benchmark name -> samples in report order
BenchmarkSet = dict[str, list[BenchmarkSample]]


class MetricDelta(BaseSchema):
    """Old/new values of one metric column and their relative change.

    Attributes:
        kind: The metric column.
        old: Baseline value.
        new: Candidate value.
        delta_percent: Signed percentage change, None when undefined
            (zero baseline with a non-zero candidate).

    """

    kind: MetricKind
    old: float
    new: float
    delta_percent: float | None

    @property
    def undefined(self) -> bool:
        """True when the change cannot be expressed relative to the baseline."""
        return self.delta_percent is None


class BenchmarkMetric(BaseSchema):
    """Comparison row for one benchmark name.

    Attributes:
        name: Benchmark name.
        old_samples: Number of baseline samples aggregated.
        new_samples: Number of candidate samples aggregated.
        deltas: Compared columns keyed by metric kind, only for kinds
            measured on both sides.

    """

    name: str
    old_samples: int = Field(default=1, ge=1)
    new_samples: int = Field(default=1, ge=1)
    deltas: dict[MetricKind, MetricDelta] = Field(default_factory=dict)

    def delta(self, kind: MetricKind) -> MetricDelta | None:
        return self.deltas.get(kind)


class ExcludedBenchmark(BaseSchema):
    """A benchmark name left out of the numeric comparison."""

    name: str
    reason: ExclusionReason


class ComparisonReport(BaseSchema):
    """The artifact handed to the reporter and to delivery.

    Attributes:
        label: Human readable description of what was compared.
        mode: Comparison mode that produced the report.
        metrics: Compared benchmarks in report order.
        excluded: Benchmarks that could not be compared.
        current: Revision of the current checkout.
        target: Revision compared against (cross-revision only).

    """

    label: str
    mode: ComparisonMode
    metrics: list[BenchmarkMetric] = Field(default_factory=list)
    excluded: list[ExcludedBenchmark] = Field(default_factory=list)
    current: Revision | None = None
    target: Revision | None = None

    @property
    def kinds(self) -> list[MetricKind]:
        """Metric kinds present in at least one row, in canonical order."""
        return [
            kind
            for kind in MetricKind
            if any(kind in metric.deltas for metric in self.metrics)
        ]
