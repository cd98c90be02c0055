"""Comparison target resolution.

Turns the user-supplied target string into a ComparisonTarget:

- ``.`` selects self-compare mode and never touches the repository.
- The current branch name, the current head hash or any branch pointing at
  the current head commit is rejected with AmbiguousTargetError.
- Anything else must name a branch.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from funcbench.config.defaults import SELF_COMPARE_TARGET
from funcbench.git.exceptions import AmbiguousTargetError, RevisionResolutionError
from funcbench.logging_config import get_logger
from funcbench.models.enums import ComparisonMode
from funcbench.models.revision import ComparisonTarget

if TYPE_CHECKING:
    from funcbench.git.repository import Repository

__all__ = ["RevisionResolver"]

logger = get_logger(__name__)


class RevisionResolver:
    """Resolves comparison targets against one repository."""

    def __init__(self, repository: Repository) -> None:
        self._repository = repository

    async def resolve(self, target: str) -> ComparisonTarget:
        """Resolve ``target`` into a comparison mode and revision.

        Args:
            target: '.', or a branch name.

        Returns:
            The resolved ComparisonTarget.

        Raises:
            AmbiguousTargetError: If target is, or points at, the current head commit.
            RevisionResolutionError: If target does not name a branch.

        """
        if target == SELF_COMPARE_TARGET:
            logger.info("target_resolved", target=target, mode=ComparisonMode.self_compare.value)
            return ComparisonTarget(target=target, mode=ComparisonMode.self_compare)

        head = await self._repository.head()
        if target == head.branch_name or target == head.hash:
            raise AmbiguousTargetError(target, str(head))

        revision = await self._repository.resolve_branch(target)
        if revision is None:
            raise RevisionResolutionError(target, "no such branch")
        if revision.hash == head.hash:
            raise AmbiguousTargetError(target, str(head))

        logger.info(
            "target_resolved",
            target=target,
            mode=ComparisonMode.cross_revision.value,
            revision=revision.hash,
            current=head.hash,
        )
        return ComparisonTarget(
            target=target,
            mode=ComparisonMode.cross_revision,
            revision=revision,
        )
