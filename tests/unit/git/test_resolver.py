"""Unit tests for RevisionResolver."""

from unittest.mock import MagicMock

import pytest

from funcbench.git.exceptions import AmbiguousTargetError, RevisionResolutionError
from funcbench.git.resolver import RevisionResolver
from funcbench.models.enums import ComparisonMode


class TestRevisionResolver:
    """Tests for comparison target resolution."""

    @pytest.mark.asyncio
    async def test_dot_is_self_compare(self) -> None:
        """'.' never touches the repository."""
        repository = MagicMock()

        target = await RevisionResolver(repository).resolve(".")

        assert target.mode is ComparisonMode.self_compare
        assert target.revision is None
        assert repository.method_calls == []

    @pytest.mark.asyncio
    async def test_branch_resolves_to_cross_revision(
        self, fake_repository: MagicMock, target_revision
    ) -> None:
        target = await RevisionResolver(fake_repository).resolve("main")

        assert target.mode is ComparisonMode.cross_revision
        assert target.revision == target_revision
        assert target.target == "main"
        fake_repository.resolve_branch.assert_awaited_once_with("main")

    @pytest.mark.asyncio
    async def test_current_branch_is_ambiguous(self, fake_repository: MagicMock) -> None:
        with pytest.raises(AmbiguousTargetError) as exc_info:
            await RevisionResolver(fake_repository).resolve("feature")

        assert exc_info.value.target == "feature"
        assert "no difference would be observed" in str(exc_info.value)
        fake_repository.resolve_branch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_current_hash_is_ambiguous(
        self, fake_repository: MagicMock, current_revision
    ) -> None:
        with pytest.raises(AmbiguousTargetError):
            await RevisionResolver(fake_repository).resolve(current_revision.hash)

    @pytest.mark.asyncio
    async def test_unknown_branch(self, fake_repository: MagicMock) -> None:
        with pytest.raises(RevisionResolutionError) as exc_info:
            await RevisionResolver(fake_repository).resolve("does-not-exist")

        assert exc_info.value.target == "does-not-exist"
        assert exc_info.value.reason == "no such branch"

    @pytest.mark.asyncio
    async def test_detached_head_only_matches_hash(
        self, fake_repository: MagicMock, current_revision
    ) -> None:
        """With a detached HEAD no branch name can be ambiguous."""
        fake_repository.head.return_value = current_revision.model_copy(
            update={"ref_name": None}
        )

        with pytest.raises(RevisionResolutionError):
            await RevisionResolver(fake_repository).resolve("feature")

    @pytest.mark.asyncio
    async def test_branch_on_current_commit_is_ambiguous(
        self, fake_repository: MagicMock, current_revision
    ) -> None:
        """Another branch name for the checked-out commit cannot show a difference."""
        fake_repository.resolve_branch.side_effect = None
        fake_repository.resolve_branch.return_value = current_revision.model_copy(
            update={"ref_name": "refs/heads/main"}
        )

        with pytest.raises(AmbiguousTargetError) as exc_info:
            await RevisionResolver(fake_repository).resolve("main")

        assert exc_info.value.target == "main"
