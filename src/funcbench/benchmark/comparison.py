"""Comparison of parsed benchmark reports.

Two kinds of comparison are supported:

- compare_benchmarks: the report of a target revision ("old") against the
  report of the current checkout ("new"), paired by benchmark name.
- compare_sub_benchmarks: a single report in which benchmarks were sampled
  more than once; the first sample is the baseline for the rest.

Each side of a pair is aggregated to the mean of its samples and every
metric column is compared independently.
"""

from __future__ import annotations

import statistics as stats
from collections.abc import Sequence

from funcbench.benchmark.exceptions import (
    NoComparableBenchmarksError,
    NoSubBenchmarksError,
)
from funcbench.logging_config import get_logger
from funcbench.models.benchmark import (
    BenchmarkMetric,
    BenchmarkSample,
    BenchmarkSet,
    ComparisonReport,
    ExcludedBenchmark,
    MetricDelta,
)
from funcbench.models.enums import ComparisonMode, ExclusionReason, MetricKind
from funcbench.models.revision import Revision

__all__ = [
    "compare_benchmarks",
    "compare_samples",
    "compare_sub_benchmarks",
    "compute_delta",
]

logger = get_logger(__name__)


def compute_delta(old: float, new: float) -> float | None:
    """Signed percentage change from ``old`` to ``new``.

    Returns:
        ``(new - old) / old * 100``; 0.0 when both values are zero; None
        (undefined) when only the baseline is zero.

    """
    if old == 0:
        return 0.0 if new == 0 else None
    return (new - old) / old * 100.0


def _mean(samples: Sequence[BenchmarkSample], kind: MetricKind) -> float | None:
    values = [v for v in (s.value(kind) for s in samples) if v is not None]
    if not values:
        return None
    return stats.fmean(values)


def compare_samples(
    name: str,
    old_samples: Sequence[BenchmarkSample],
    new_samples: Sequence[BenchmarkSample],
) -> BenchmarkMetric | None:
    """Compare two groups of samples of the same benchmark.

    Only metric kinds measured on both sides are compared.

    Returns:
        The comparison row, or None if the sides share no metric kind.

    """
    deltas: dict[MetricKind, MetricDelta] = {}
    for kind in MetricKind:
        old = _mean(old_samples, kind)
        new = _mean(new_samples, kind)
        if old is None or new is None:
            continue
        deltas[kind] = MetricDelta(
            kind=kind,
            old=old,
            new=new,
            delta_percent=compute_delta(old, new),
        )
    if not deltas:
        return None
    return BenchmarkMetric(
        name=name,
        old_samples=len(old_samples),
        new_samples=len(new_samples),
        deltas=deltas,
    )


def compare_benchmarks(
    old: BenchmarkSet,
    new: BenchmarkSet,
    label: str,
    current: Revision | None = None,
    target: Revision | None = None,
) -> ComparisonReport:
    """Compare the report of the target revision with the current one.

    Args:
        old: Parsed report of the target revision.
        new: Parsed report of the current checkout.
        label: Description of the comparison for rendering.
        current: Revision the new report was produced from.
        target: Revision the old report was produced from.

    Returns:
        Report with one row per benchmark name present in both reports,
        in the order of the new report. Names present on one side only are
        listed as excluded.

    Raises:
        NoComparableBenchmarksError: If no benchmark could be compared.

    """
    metrics: list[BenchmarkMetric] = []
    excluded: list[ExcludedBenchmark] = []

    for name, new_samples in new.items():
        old_samples = old.get(name)
        if old_samples is None:
            excluded.append(ExcludedBenchmark(name=name, reason=ExclusionReason.only_in_new))
            continue
        metric = compare_samples(name, old_samples, new_samples)
        if metric is None:
            excluded.append(
                ExcludedBenchmark(name=name, reason=ExclusionReason.no_common_metrics)
            )
            continue
        metrics.append(metric)

    for name in old:
        if name not in new:
            excluded.append(ExcludedBenchmark(name=name, reason=ExclusionReason.only_in_old))

    if not metrics:
        raise NoComparableBenchmarksError(len(old), len(new))

    logger.info(
        "benchmarks_compared",
        compared=len(metrics),
        excluded=len(excluded),
    )
    return ComparisonReport(
        label=label,
        mode=ComparisonMode.cross_revision,
        metrics=metrics,
        excluded=excluded,
        current=current,
        target=target,
    )


def compare_sub_benchmarks(
    results: BenchmarkSet,
    label: str,
    current: Revision | None = None,
) -> ComparisonReport:
    """Compare repeated samples of benchmarks within one report.

    For every name with two or more samples, the first sample is the
    baseline and the mean of the remaining samples is the candidate.

    Raises:
        NoSubBenchmarksError: If no benchmark has two or more samples.

    """
    metrics: list[BenchmarkMetric] = []
    excluded: list[ExcludedBenchmark] = []

    for name, samples in results.items():
        if len(samples) < 2:
            excluded.append(ExcludedBenchmark(name=name, reason=ExclusionReason.single_sample))
            continue
        metric = compare_samples(name, samples[:1], samples[1:])
        if metric is None:
            excluded.append(
                ExcludedBenchmark(name=name, reason=ExclusionReason.no_common_metrics)
            )
            continue
        metrics.append(metric)

    if not metrics:
        raise NoSubBenchmarksError(len(results))

    logger.info(
        "sub_benchmarks_compared",
        compared=len(metrics),
        excluded=len(excluded),
    )
    return ComparisonReport(
        label=label,
        mode=ComparisonMode.self_compare,
        metrics=metrics,
        excluded=excluded,
        current=current,
    )
