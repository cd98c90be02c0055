"""Exceptions for repository, target resolution and worktree operations."""

from __future__ import annotations

from pathlib import Path

from funcbench.exceptions import FuncbenchError

__all__ = [
    "AmbiguousTargetError",
    "GitCommandError",
    "GitError",
    "RevisionResolutionError",
    "WorkspaceDirtyError",
    "WorktreeCreationError",
]


class GitError(FuncbenchError):
    """Base exception for git related errors."""

    pass


class GitCommandError(GitError):
    """Raised when a git command exits with a non-zero status.

    Attributes:
        args_: The git arguments that failed.
        cwd: Directory the command ran in.
        returncode: Exit status of git.
        stderr: Error output of git.

    """

    def __init__(
        self,
        args: list[str],
        cwd: Path,
        returncode: int,
        stderr: str,
    ) -> None:
        self.args_ = args
        self.cwd = cwd
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"git {' '.join(args)} failed in {cwd} (exit {returncode}): {stderr}"
        )


class WorkspaceDirtyError(GitError):
    """Raised when the primary workspace has uncommitted changes."""

    def __init__(self, workspace: Path) -> None:
        self.workspace = workspace
        super().__init__(
            f"workspace {workspace} has uncommitted changes; "
            "commit or stash them before benchmarking"
        )


class AmbiguousTargetError(GitError):
    """Raised when the target is the revision that is already checked out.

    Attributes:
        target: The target given by the user.
        current: Description of the current revision.

    """

    def __init__(self, target: str, current: str) -> None:
        self.target = target
        self.current = current
        super().__init__(
            f"target {target!r} is identical to current revision {current}; "
            "no difference would be observed"
        )


class RevisionResolutionError(GitError):
    """Raised when the target cannot be resolved to a commit."""

    def __init__(self, target: str, reason: str | None = None) -> None:
        self.target = target
        self.reason = reason
        message = f"could not resolve target {target!r} to a branch"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class WorktreeCreationError(GitError):
    """Raised when the secondary worktree cannot be created.

    Attributes:
        revision: Commit that was being checked out.
        path: Worktree directory.
        reason: Underlying failure.

    """

    def __init__(self, revision: str, path: Path, reason: str) -> None:
        self.revision = revision
        self.path = path
        self.reason = reason
        super().__init__(
            f"failed to checkout {revision} in worktree {path}: {reason}"
        )
