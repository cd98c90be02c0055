"""Pytest configuration and shared fixtures for the funcbench test suite.

Provides sample ``go test -bench`` reports, revisions and a fake
environment used across the unit and integration tests.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from funcbench.config.settings import get_settings
from funcbench.environment.base import Environment
from funcbench.environment.context import EnvironmentContext
from funcbench.git.repository import Repository
from funcbench.models.revision import Revision

_ENV_VARS = (
    "FUNCBENCH_BENCH_TIME",
    "FUNCBENCH_TIMEOUT_SECONDS",
    "FUNCBENCH_WORKTREE_DIR_NAME",
    "FUNCBENCH_GO_BINARY",
    "FUNCBENCH_PACKAGES",
    "GITHUB_TOKEN",
    "GITHUB_WORKSPACE",
    "GITHUB_API_URL",
    "GITHUB_REQUEST_TIMEOUT_SECONDS",
)

CURRENT_HASH = "a" * 40
TARGET_HASH = "b" * 40

OLD_REPORT = """\
goos: linux
goarch: amd64
pkg: github.com/prometheus/prometheus/tsdb
BenchmarkQuery-8            1000      1200 ns/op      64 B/op       2 allocs/op
BenchmarkCompact-8           500      4000 ns/op     100.00 MB/s     512 B/op       8 allocs/op
BenchmarkRemoved-8          2000       300 ns/op       0 B/op       0 allocs/op
PASS
ok      github.com/prometheus/prometheus/tsdb   3.012s
"""

NEW_REPORT = """\
goos: linux
goarch: amd64
pkg: github.com/prometheus/prometheus/tsdb
BenchmarkQuery-8            1000      1080 ns/op      64 B/op       1 allocs/op
BenchmarkCompact-8           500      5000 ns/op      80.00 MB/s     512 B/op       8 allocs/op
BenchmarkAdded-8            3000       250 ns/op       0 B/op       0 allocs/op
PASS
ok      github.com/prometheus/prometheus/tsdb   3.104s
"""

REPEATED_REPORT = """\
BenchmarkQuery/series=10-8      1000      1000 ns/op      32 B/op       1 allocs/op
BenchmarkQuery/series=10-8      1000      1100 ns/op      32 B/op       1 allocs/op
BenchmarkQuery/series=10-8      1000      1300 ns/op      32 B/op       1 allocs/op
BenchmarkSingle-8               2000       500 ns/op
PASS
"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep the host environment (e.g. a GitHub Actions runner) out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def old_report() -> str:
    """Benchmark output of the target revision."""
    return OLD_REPORT


@pytest.fixture
def new_report() -> str:
    """Benchmark output of the current checkout."""
    return NEW_REPORT


@pytest.fixture
def repeated_report() -> str:
    """Benchmark output with one benchmark sampled three times."""
    return REPEATED_REPORT


@pytest.fixture
def current_revision() -> Revision:
    return Revision(hash=CURRENT_HASH, ref_name="refs/heads/feature")


@pytest.fixture
def target_revision() -> Revision:
    return Revision(hash=TARGET_HASH, ref_name="refs/heads/main")


@pytest.fixture
def fake_repository(
    tmp_path: Path, current_revision: Revision, target_revision: Revision
) -> MagicMock:
    """Repository double with async git operations mocked out.

    The current checkout is branch ``feature``; branch ``main`` resolves
    to the target revision, anything else is unknown.
    """
    repository = MagicMock(spec=Repository)
    repository.root = tmp_path
    repository.head = AsyncMock(return_value=current_revision)

    async def resolve_branch(name: str) -> Revision | None:
        return target_revision if name == "main" else None

    repository.resolve_branch = AsyncMock(side_effect=resolve_branch)
    repository.is_clean = AsyncMock(return_value=True)
    repository.add_worktree = AsyncMock()
    repository.remove_worktree = AsyncMock()
    repository.prune_worktrees = AsyncMock()
    return repository


def make_environment(repository: MagicMock, target: str = "main") -> MagicMock:
    """Environment double bound to ``repository``."""
    environment = MagicMock(spec=Environment)
    environment.name = "fake"
    environment.context = EnvironmentContext(compare_target=target, bench_func=".*")
    environment.repository = repository
    environment.post_results = AsyncMock()
    environment.post_error = AsyncMock()
    return environment


@pytest.fixture
def fake_environment(fake_repository: MagicMock) -> MagicMock:
    return make_environment(fake_repository)
