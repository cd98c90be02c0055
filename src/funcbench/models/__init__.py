"""Data models for the comparison engine."""

from funcbench.models.base import BaseSchema, FrozenSchema
from funcbench.models.benchmark import (
    BenchmarkMetric,
    BenchmarkSample,
    BenchmarkSet,
    ComparisonReport,
    ExcludedBenchmark,
    MetricDelta,
)
from funcbench.models.enums import (
    ComparisonMode,
    ExclusionReason,
    MetricKind,
    PipelineState,
)
from funcbench.models.execution import ExecutionResult
from funcbench.models.revision import ComparisonTarget, Revision, WorkspaceHandle

__all__ = [
    "BaseSchema",
    "BenchmarkMetric",
    "BenchmarkSample",
    "BenchmarkSet",
    "ComparisonMode",
    "ComparisonReport",
    "ComparisonTarget",
    "ExcludedBenchmark",
    "ExclusionReason",
    "ExecutionResult",
    "FrozenSchema",
    "MetricDelta",
    "MetricKind",
    "PipelineState",
    "Revision",
    "WorkspaceHandle",
]
