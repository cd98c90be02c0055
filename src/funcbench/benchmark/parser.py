"""Parser for ``go test -bench`` text output.

Benchmark lines have the shape::

    BenchmarkName-8   	 1000000	      1234 ns/op	  56.00 MB/s	     100 B/op	       3 allocs/op

i.e. a name starting with ``Benchmark``, an iteration count, then any number
of ``<value> <unit>`` pairs. Every other line (package headers, PASS/ok
trailers, test logs) is ignored.
"""

from __future__ import annotations

from funcbench.logging_config import get_logger
from funcbench.models.benchmark import BenchmarkSample, BenchmarkSet
from funcbench.models.enums import MetricKind

__all__ = ["parse_benchmark_line", "parse_benchmark_output"]

logger = get_logger(__name__)

_UNIT_FIELDS = {
    MetricKind.time.value: "ns_per_op",
    MetricKind.throughput.value: "mb_per_s",
    MetricKind.bytes.value: "bytes_per_op",
    MetricKind.allocations.value: "allocs_per_op",
}


def parse_benchmark_line(line: str, ord: int = 0) -> BenchmarkSample | None:
    """Parse a single benchmark result line.

    Args:
        line: One line of output.
        ord: Position to record on the sample.

    Returns:
        The parsed sample, or None if the line is not a benchmark result.

    """
    fields = line.split()
    if len(fields) < 2 or not fields[0].startswith("Benchmark"):
        return None
    try:
        iterations = int(fields[1])
    except ValueError:
        return None

    measurements: dict[str, float] = {}
    for i in range(2, len(fields) - 1, 2):
        field = _UNIT_FIELDS.get(fields[i + 1])
        if field is None:
            # Custom metrics reported via b.ReportMetric are not compared.
            continue
        try:
            measurements[field] = float(fields[i])
        except ValueError:
            continue

    return BenchmarkSample(
        name=fields[0],
        iterations=iterations,
        ord=ord,
        **measurements,
    )


def parse_benchmark_output(text: str) -> BenchmarkSet:
    """Parse a whole benchmark report.

    Args:
        text: Raw output of ``go test -bench``.

    Returns:
        Mapping from benchmark name to its samples, in the order they
        first appear. A benchmark run several times has several samples.

    """
    result: BenchmarkSet = {}
    ord = 0
    for line in text.splitlines():
        sample = parse_benchmark_line(line, ord)
        if sample is None:
            continue
        result.setdefault(sample.name, []).append(sample)
        ord += 1

    logger.debug(
        "benchmark_output_parsed",
        benchmarks=len(result),
        samples=ord,
    )
    return result
