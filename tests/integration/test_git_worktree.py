"""Integration tests against a real git repository.

These tests create throwaway repositories in tmp_path and drive the
system ``git`` executable through Repository, RevisionResolver and
WorktreeManager.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from funcbench.environment.context import EnvironmentContext
from funcbench.environment.github import GitHubActionsEnvironment
from funcbench.environment.github_client import GitHubClient
from funcbench.git.exceptions import (
    AmbiguousTargetError,
    RevisionResolutionError,
    WorkspaceDirtyError,
)
from funcbench.git.repository import Repository
from funcbench.git.resolver import RevisionResolver
from funcbench.git.worktree import WorktreeManager
from funcbench.models.enums import ComparisonMode

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed"),
]


def _git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", "-c", "user.name=funcbench", "-c", "user.email=funcbench@example.com", *args],
        cwd=cwd,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    """Repository with branches main (two commits) and feature (checked out)."""
    path = tmp_path / "repo"
    path.mkdir()
    _git(path, "init", "-q")
    _git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    (path / "bench_test.go").write_text("package bench\n")
    _git(path, "add", "bench_test.go")
    _git(path, "commit", "-q", "-m", "initial")
    _git(path, "checkout", "-q", "-b", "feature")
    (path / "bench_test.go").write_text("package bench\n\n// faster\n")
    _git(path, "commit", "-q", "-am", "feature change")
    return path


class TestRepository:
    """Tests for Repository against real git."""

    @pytest.mark.asyncio
    async def test_open_from_subdirectory(self, repo_path: Path) -> None:
        sub = repo_path / "pkg"
        sub.mkdir()

        repository = await Repository.open(sub)

        assert repository.root.resolve() == repo_path.resolve()

    @pytest.mark.asyncio
    async def test_head(self, repo_path: Path) -> None:
        head = await Repository(repo_path).head()

        assert head.hash == _git(repo_path, "rev-parse", "HEAD")
        assert head.ref_name == "refs/heads/feature"
        assert head.branch_name == "feature"

    @pytest.mark.asyncio
    async def test_resolve_branch(self, repo_path: Path) -> None:
        repository = Repository(repo_path)

        revision = await repository.resolve_branch("main")

        assert revision is not None
        assert revision.hash == _git(repo_path, "rev-parse", "main")
        assert revision.ref_name == "refs/heads/main"
        assert await repository.resolve_branch("missing") is None

    @pytest.mark.asyncio
    async def test_is_clean(self, repo_path: Path) -> None:
        repository = Repository(repo_path)
        assert await repository.is_clean()

        (repo_path / "untracked.txt").write_text("ignored\n")
        assert await repository.is_clean()

        (repo_path / "bench_test.go").write_text("package bench\n// dirty\n")
        assert not await repository.is_clean()

    @pytest.mark.asyncio
    async def test_staged_changes_are_dirty(self, repo_path: Path) -> None:
        (repo_path / "new.go").write_text("package bench\n")
        _git(repo_path, "add", "new.go")

        assert not await Repository(repo_path).is_clean()


class TestResolverAndWorktree:
    """Tests for target resolution and secondary worktrees."""

    @pytest.mark.asyncio
    async def test_resolution(self, repo_path: Path) -> None:
        resolver = RevisionResolver(Repository(repo_path))

        assert (await resolver.resolve(".")).mode is ComparisonMode.self_compare
        assert (await resolver.resolve("main")).mode is ComparisonMode.cross_revision
        with pytest.raises(AmbiguousTargetError):
            await resolver.resolve("feature")
        with pytest.raises(AmbiguousTargetError):
            await resolver.resolve(_git(repo_path, "rev-parse", "HEAD"))
        with pytest.raises(RevisionResolutionError):
            await resolver.resolve("missing")

    @pytest.mark.asyncio
    async def test_branch_on_same_commit_is_ambiguous(self, repo_path: Path) -> None:
        _git(repo_path, "branch", "feature-copy")

        with pytest.raises(AmbiguousTargetError):
            await RevisionResolver(Repository(repo_path)).resolve("feature-copy")

    @pytest.mark.asyncio
    async def test_prepare_twice_and_cleanup(self, repo_path: Path) -> None:
        repository = Repository(repo_path)
        manager = WorktreeManager(repository)
        target = await repository.resolve_branch("main")
        path = repo_path / "_funcbench-cmp"

        await manager.prepare(path, target)
        handle = await manager.prepare(path, target)

        assert (path / "bench_test.go").read_text() == "package bench\n"
        assert _git(path, "rev-parse", "HEAD") == target.hash
        assert handle.path == path
        # The primary checkout is untouched.
        assert _git(repo_path, "rev-parse", "--abbrev-ref", "HEAD") == "feature"

        await manager.cleanup()

        assert not path.exists()
        assert manager.handle is None

    @pytest.mark.asyncio
    async def test_worktree_does_not_dirty_primary(self, repo_path: Path) -> None:
        repository = Repository(repo_path)
        manager = WorktreeManager(repository)
        target = await repository.resolve_branch("main")

        await manager.prepare(repo_path / "_funcbench-cmp", target)
        try:
            await manager.ensure_clean()
        finally:
            await manager.cleanup()

    @pytest.mark.asyncio
    async def test_dirty_workspace(self, repo_path: Path) -> None:
        (repo_path / "bench_test.go").write_text("package bench\n// dirty\n")

        with pytest.raises(WorkspaceDirtyError):
            await WorktreeManager(Repository(repo_path)).ensure_clean()

    @pytest.mark.asyncio
    async def test_stale_worktree_directory_is_replaced(self, repo_path: Path) -> None:
        """A worktree left behind by an aborted run does not block the next one."""
        repository = Repository(repo_path)
        target = await repository.resolve_branch("main")
        path = repo_path / "_funcbench-cmp"
        _git(repo_path, "worktree", "add", "-f", "--detach", str(path), "main")

        handle = await WorktreeManager(repository).prepare(path, target)

        assert _git(handle.path, "rev-parse", "HEAD") == target.hash


class TestCloneAndFetch:
    @pytest.mark.asyncio
    async def test_shallow_clone_then_fetch_branch(self, repo_path: Path, tmp_path: Path) -> None:
        url = repo_path.resolve().as_uri()

        clone = await Repository.clone(url, tmp_path / "work" / "repo", depth=1)
        await clone.fetch("+refs/heads/main:refs/heads/pullrequest")
        await clone.checkout("pullrequest")

        head = await clone.head()
        assert head.branch_name == "pullrequest"
        assert head.hash == _git(repo_path, "rev-parse", "main")

    @pytest.mark.asyncio
    async def test_rerun_picks_up_new_pull_request_commits(
        self, repo_path: Path, tmp_path: Path
    ) -> None:
        """A reused Actions checkout follows the updated pull request head."""
        _git(repo_path, "update-ref", "refs/pull/7/head", "main")
        workspace = tmp_path / "workspace"
        workspace.mkdir()
        _git(workspace, "clone", "-q", repo_path.resolve().as_uri(), "repo")
        context = EnvironmentContext(compare_target="main", bench_func=".*")
        client = GitHubClient(owner="acme", repo="repo", pr_number=7, token=None, dry_run=True)
        await GitHubActionsEnvironment(context, workspace=workspace, client=client).setup()

        _git(repo_path, "checkout", "-q", "main")
        (repo_path / "bench_test.go").write_text("package bench\n\n// pr update\n")
        _git(repo_path, "commit", "-q", "-am", "pr update")
        _git(repo_path, "update-ref", "refs/pull/7/head", "main")

        environment = GitHubActionsEnvironment(context, workspace=workspace, client=client)
        await environment.setup()

        checkout = environment.repository
        assert await checkout.is_clean()
        assert (await checkout.head()).hash == _git(repo_path, "rev-parse", "main")
        assert (workspace / "repo" / "bench_test.go").read_text() == (
            "package bench\n\n// pr update\n"
        )
