"""Secondary worktree management.

The target revision is benchmarked in a separate ``git worktree`` so the
primary checkout is never switched. At most one secondary worktree exists
per manager; preparing a new one always removes the previous one first.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from funcbench.git.exceptions import (
    GitCommandError,
    WorkspaceDirtyError,
    WorktreeCreationError,
)
from funcbench.logging_config import get_logger
from funcbench.models.revision import WorkspaceHandle

if TYPE_CHECKING:
    from funcbench.git.repository import Repository
    from funcbench.models.revision import Revision

__all__ = ["WorktreeManager"]

logger = get_logger(__name__)


class WorktreeManager:
    """Creates and destroys the secondary checkout of one repository.

    Attributes:
        handle: The worktree currently owned by this manager, if any.

    """

    def __init__(self, repository: Repository) -> None:
        self._repository = repository
        self.handle: WorkspaceHandle | None = None

    async def ensure_clean(self) -> None:
        """Fail if the primary workspace has uncommitted changes.

        Raises:
            WorkspaceDirtyError: If tracked files are modified or staged.

        """
        if not await self._repository.is_clean():
            raise WorkspaceDirtyError(self._repository.root)

    async def prepare(self, path: Path, revision: Revision) -> WorkspaceHandle:
        """Create a fresh worktree at ``path`` checked out at ``revision``.

        Any worktree previously at ``path`` is removed first; a missing one
        is not an error.

        Raises:
            WorktreeCreationError: If the checkout cannot be created.

        """
        await self._remove(path)
        if self.handle is not None and self.handle.path != path:
            await self._remove(self.handle.path)
        self.handle = None

        logger.info("worktree_preparing", path=str(path), revision=revision.hash)
        try:
            await self._repository.add_worktree(path, revision)
        except GitCommandError as e:
            raise WorktreeCreationError(revision.hash, path, e.stderr) from e

        self.handle = WorkspaceHandle(path=path, revision=revision)
        logger.info("worktree_prepared", path=str(path), revision=revision.hash)
        return self.handle

    async def cleanup(self) -> None:
        """Remove the current worktree. Never raises."""
        if self.handle is None:
            return
        handle, self.handle = self.handle, None
        await self._remove(handle.path)

    async def _remove(self, path: Path) -> None:
        try:
            await self._repository.remove_worktree(path)
        except (GitCommandError, OSError) as e:
            logger.debug("worktree_remove_skipped", path=str(path), reason=str(e))
        else:
            logger.info("worktree_removed", path=str(path))
        try:
            await self._repository.prune_worktrees()
        except (GitCommandError, OSError) as e:
            logger.warning("worktree_prune_failed", path=str(path), reason=str(e))
