"""Repository access over the git CLI.

This module provides the Repository class, a thin asynchronous wrapper
around the system ``git`` executable. Every command runs with an explicit
working directory; the process-wide current directory is never changed.

Classes:
    GitOutput: Captured result of a git invocation.
    Repository: Head/ref lookup, cleanliness, worktrees, clone and fetch.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import NamedTuple

from funcbench.git.exceptions import GitCommandError
from funcbench.logging_config import get_logger
from funcbench.models.revision import Revision

__all__ = ["GitOutput", "Repository", "run_git"]

logger = get_logger(__name__)

BRANCH_REF_PREFIX = "refs/heads/"
REMOTE_REF_PREFIX = "refs/remotes/origin/"


class GitOutput(NamedTuple):
    """Captured result of a git invocation."""

    returncode: int
    stdout: str
    stderr: str


async def run_git(*args: str, cwd: Path, check: bool = True) -> GitOutput:
    """Run a git command and capture its output.

    Args:
        *args: Arguments after ``git``.
        cwd: Directory to run the command in.
        check: Raise GitCommandError on a non-zero exit status.

    Returns:
        The exit status with decoded stdout and stderr.

    Raises:
        GitCommandError: If check is set and git fails.

    """
    process = await asyncio.create_subprocess_exec(
        "git",
        *args,
        cwd=cwd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await process.communicate()
    result = GitOutput(
        returncode=process.returncode if process.returncode is not None else -1,
        stdout=stdout.decode("utf-8", errors="replace").strip(),
        stderr=stderr.decode("utf-8", errors="replace").strip(),
    )
    if check and result.returncode != 0:
        raise GitCommandError(list(args), cwd, result.returncode, result.stderr)
    return result


class Repository:
    """A git repository checkout rooted at a directory.

    Attributes:
        root: Top-level directory of the primary working tree.

    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def __repr__(self) -> str:
        return f"Repository(root={str(self.root)!r})"

    @classmethod
    async def open(cls, path: Path) -> Repository:
        """Open the repository containing ``path``.

        Like ``git`` itself, parent directories are searched for the
        repository root.

        Raises:
            GitCommandError: If ``path`` is not inside a git working tree.

        """
        output = await run_git("rev-parse", "--show-toplevel", cwd=path)
        return cls(Path(output.stdout))

    @classmethod
    async def clone(cls, url: str, target: Path, depth: int | None = 1) -> Repository:
        """Clone ``url`` into ``target``.

        Args:
            url: Remote URL.
            target: Destination directory, must not exist or be empty.
            depth: Shallow clone depth, None for full history.

        """
        args = ["clone"]
        if depth is not None:
            args.extend(["--depth", str(depth)])
        args.extend([url, str(target)])
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.info("repository_cloning", url=url, target=str(target), depth=depth)
        await run_git(*args, cwd=target.parent)
        return cls(target)

    async def git(self, *args: str, check: bool = True) -> GitOutput:
        """Run a git command in the repository root."""
        return await run_git(*args, cwd=self.root, check=check)

    async def head(self) -> Revision:
        """Return the checked-out revision.

        ``ref_name`` is None when HEAD is detached.
        """
        commit = await self.git("rev-parse", "--verify", "HEAD")
        symbolic = await self.git("symbolic-ref", "-q", "HEAD", check=False)
        ref_name = symbolic.stdout if symbolic.returncode == 0 else None
        return Revision(hash=commit.stdout, ref_name=ref_name)

    async def resolve_reference(self, ref_name: str) -> Revision | None:
        """Resolve a fully qualified reference to the commit it points to.

        Returns:
            The revision, or None if the reference does not exist.

        """
        output = await self.git(
            "rev-parse", "--verify", "--quiet", f"{ref_name}^{{commit}}", check=False
        )
        if output.returncode != 0 or not output.stdout:
            logger.debug("reference_not_found", ref=ref_name, stderr=output.stderr)
            return None
        return Revision(hash=output.stdout, ref_name=ref_name)

    async def resolve_branch(self, name: str) -> Revision | None:
        """Resolve a branch name, preferring local over remote-tracking branches."""
        for prefix in (BRANCH_REF_PREFIX, REMOTE_REF_PREFIX):
            revision = await self.resolve_reference(f"{prefix}{name}")
            if revision is not None:
                return revision
        return None

    async def is_clean(self) -> bool:
        """Check the working tree and index against HEAD.

        Untracked files are ignored; only staged or unstaged modifications
        of tracked files make the workspace dirty.

        Raises:
            GitCommandError: If git fails for another reason than a difference.

        """
        await self.git("update-index", "-q", "--ignore-submodules", "--refresh", check=False)
        checks = (
            ("diff-files", "--quiet", "--ignore-submodules", "--"),
            ("diff-index", "--cached", "--quiet", "--ignore-submodules", "HEAD", "--"),
        )
        for args in checks:
            output = await self.git(*args, check=False)
            if output.returncode == 1:
                return False
            if output.returncode != 0:
                raise GitCommandError(list(args), self.root, output.returncode, output.stderr)
        return True

    async def add_worktree(self, path: Path, revision: Revision) -> None:
        """Check out ``revision`` as a detached worktree at ``path``."""
        await self.git("worktree", "add", "-f", "--detach", str(path), revision.hash)

    async def remove_worktree(self, path: Path) -> None:
        """Remove the worktree at ``path``, discarding any files in it."""
        await self.git("worktree", "remove", "--force", str(path))

    async def prune_worktrees(self) -> None:
        """Drop administrative data of worktrees whose directory is gone."""
        await self.git("worktree", "prune")

    async def fetch(self, refspec: str, remote: str = "origin") -> None:
        await self.git("fetch", "--update-head-ok", remote, refspec)

    async def checkout(self, branch: str, force: bool = False) -> None:
        """Switch to ``branch``; with ``force`` the working tree is reset to it."""
        args = ["checkout"]
        if force:
            args.append("-f")
        await self.git(*args, branch)
