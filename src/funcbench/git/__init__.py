"""Git repository access, target resolution and worktree management."""

from funcbench.git.exceptions import (
    AmbiguousTargetError,
    GitCommandError,
    GitError,
    RevisionResolutionError,
    WorkspaceDirtyError,
    WorktreeCreationError,
)
from funcbench.git.repository import GitOutput, Repository, run_git
from funcbench.git.resolver import RevisionResolver
from funcbench.git.worktree import WorktreeManager

__all__ = [
    "AmbiguousTargetError",
    "GitCommandError",
    "GitError",
    "GitOutput",
    "Repository",
    "RevisionResolutionError",
    "RevisionResolver",
    "WorkspaceDirtyError",
    "WorktreeCreationError",
    "WorktreeManager",
    "run_git",
]
