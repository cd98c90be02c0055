"""Unit tests for the go test -bench output parser."""

import pytest

from funcbench.benchmark.parser import parse_benchmark_line, parse_benchmark_output
from funcbench.models.enums import MetricKind


class TestParseBenchmarkLine:
    """Tests for parse_benchmark_line."""

    def test_parses_all_standard_units(self) -> None:
        """A full line yields every standard measurement."""
        line = "BenchmarkCompact-8   500   4000 ns/op   100.00 MB/s   512 B/op   8 allocs/op"

        sample = parse_benchmark_line(line, ord=3)

        assert sample is not None
        assert sample.name == "BenchmarkCompact-8"
        assert sample.iterations == 500
        assert sample.ord == 3
        assert sample.ns_per_op == 4000
        assert sample.mb_per_s == 100.0
        assert sample.bytes_per_op == 512
        assert sample.allocs_per_op == 8

    def test_missing_units_stay_unset(self) -> None:
        sample = parse_benchmark_line("BenchmarkSingle-8   2000   500 ns/op")

        assert sample is not None
        assert sample.measured(MetricKind.time)
        assert not sample.measured(MetricKind.throughput)
        assert not sample.measured(MetricKind.bytes)
        assert sample.value(MetricKind.allocations) is None

    def test_custom_metrics_are_ignored(self) -> None:
        """Units reported through b.ReportMetric are skipped."""
        line = "BenchmarkQuery-8   100   2500 ns/op   17.5 series/op   3 allocs/op"

        sample = parse_benchmark_line(line)

        assert sample is not None
        assert sample.ns_per_op == 2500
        assert sample.allocs_per_op == 3

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "goos: linux",
            "PASS",
            "ok      github.com/prometheus/prometheus/tsdb   3.012s",
            "BenchmarkQuery-8",
            "BenchmarkQuery-8   --- FAIL: BenchmarkQuery-8",
            "--- BENCH: BenchmarkQuery-8",
        ],
    )
    def test_non_benchmark_lines_are_rejected(self, line: str) -> None:
        assert parse_benchmark_line(line) is None


class TestParseBenchmarkOutput:
    """Tests for parse_benchmark_output."""

    def test_groups_samples_by_name(self, old_report: str) -> None:
        result = parse_benchmark_output(old_report)

        assert list(result) == ["BenchmarkQuery-8", "BenchmarkCompact-8", "BenchmarkRemoved-8"]
        assert all(len(samples) == 1 for samples in result.values())

    def test_repeated_benchmarks_keep_every_sample(self, repeated_report: str) -> None:
        result = parse_benchmark_output(repeated_report)

        samples = result["BenchmarkQuery/series=10-8"]
        assert [s.ns_per_op for s in samples] == [1000, 1100, 1300]
        assert [s.ord for s in samples] == [0, 1, 2]
        assert result["BenchmarkSingle-8"][0].ord == 3

    def test_empty_output(self) -> None:
        assert parse_benchmark_output("PASS\nok  pkg  0.01s\n") == {}
