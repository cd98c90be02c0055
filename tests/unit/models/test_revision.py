"""Unit tests for revision and benchmark models."""

import pytest
from pydantic import ValidationError

from funcbench.models.benchmark import BenchmarkSample, MetricDelta
from funcbench.models.enums import ComparisonMode, MetricKind
from funcbench.models.revision import ComparisonTarget, Revision


class TestRevision:
    """Tests for the Revision model."""

    def test_branch_name_strips_namespace(self) -> None:
        revision = Revision(hash="c" * 40, ref_name="refs/heads/release-2.50")

        assert revision.branch_name == "release-2.50"
        assert revision.short_hash == "ccccccc"
        assert str(revision) == "refs/heads/release-2.50 (ccccccc)"

    def test_detached(self) -> None:
        revision = Revision(hash="c" * 40)

        assert revision.branch_name is None
        assert str(revision) == "c" * 40

    def test_sha256_hashes_are_accepted(self) -> None:
        assert Revision(hash="d" * 64).short_hash == "ddddddd"

    @pytest.mark.parametrize("value", ["", "abc123", "g" * 40, "C" * 40])
    def test_invalid_hash(self, value: str) -> None:
        with pytest.raises(ValidationError):
            Revision(hash=value)

    def test_immutable(self) -> None:
        revision = Revision(hash="c" * 40)

        with pytest.raises(ValidationError):
            revision.hash = "d" * 40


def test_self_compare_target_has_no_revision() -> None:
    target = ComparisonTarget(target=".", mode=ComparisonMode.self_compare)

    assert target.revision is None


class TestBenchmarkSample:
    def test_value_by_kind(self) -> None:
        sample = BenchmarkSample(name="BenchmarkFoo-8", iterations=10, ns_per_op=5, allocs_per_op=0)

        assert sample.value(MetricKind.time) == 5
        assert sample.value(MetricKind.allocations) == 0
        assert sample.measured(MetricKind.allocations)
        assert not sample.measured(MetricKind.bytes)

    def test_negative_iterations_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BenchmarkSample(name="BenchmarkFoo-8", iterations=-1)


def test_metric_kind_column_labels() -> None:
    assert [kind.column_label for kind in MetricKind] == ["ns/op", "MB/s", "allocs", "bytes"]


def test_undefined_delta() -> None:
    delta = MetricDelta(kind=MetricKind.bytes, old=0, new=64, delta_percent=None)

    assert delta.undefined
