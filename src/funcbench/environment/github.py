"""GitHub Actions environment.

Clones the repository into the Actions workspace, checks out the pull
request head as a local branch and reports through pull request comments.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from funcbench.config.defaults import PULL_REQUEST_BRANCH
from funcbench.environment.base import Environment
from funcbench.environment.exceptions import EnvironmentSetupError
from funcbench.git.exceptions import GitCommandError
from funcbench.git.repository import Repository
from funcbench.logging_config import get_logger
from funcbench.report.renderer import render_markdown

if TYPE_CHECKING:
    from funcbench.environment.context import EnvironmentContext
    from funcbench.environment.github_client import GitHubClient
    from funcbench.models.benchmark import ComparisonReport

__all__ = ["GitHubActionsEnvironment"]

logger = get_logger(__name__)

ERROR_COMMENT_SUFFIX = "Benchmark did not complete, please check action logs."


class GitHubActionsEnvironment(Environment):
    """Runs on behalf of a pull request inside GitHub Actions.

    Attributes:
        checkout_path: Where the repository is cloned
            (``<GITHUB_WORKSPACE>/<repo>``).

    """

    def __init__(
        self,
        context: EnvironmentContext,
        workspace: Path,
        client: GitHubClient,
    ) -> None:
        self._context = context
        self._client = client
        self.checkout_path = workspace / client.repo
        self._repository: Repository | None = None

    @property
    def name(self) -> str:
        return "github-actions"

    @property
    def context(self) -> EnvironmentContext:
        return self._context

    @property
    def repository(self) -> Repository:
        if self._repository is None:
            raise EnvironmentSetupError("github actions environment has not been set up")
        return self._repository

    @property
    def clone_url(self) -> str:
        return f"https://github.com/{self._client.owner}/{self._client.repo}.git"

    async def setup(self) -> None:
        """Clone the repository and switch to the pull request head.

        An existing checkout at ``checkout_path`` is reused.

        Raises:
            EnvironmentSetupError: If cloning, fetching or checkout fails.

        """
        try:
            if (self.checkout_path / ".git").exists():
                logger.info("repository_reused", path=str(self.checkout_path))
                repository = Repository(self.checkout_path)
            else:
                repository = await Repository.clone(self.clone_url, self.checkout_path, depth=1)
        except (GitCommandError, OSError) as e:
            raise EnvironmentSetupError(f"could not clone repository {self.clone_url}: {e}") from e

        refspec = f"+refs/pull/{self._client.pr_number}/head:refs/heads/{PULL_REQUEST_BRANCH}"
        try:
            await repository.fetch(refspec)
        except GitCommandError as e:
            raise EnvironmentSetupError(
                f"switch (fetch) to pull request branch failed: {e.stderr}"
            ) from e
        try:
            # The fetch may have moved an already checked-out branch.
            await repository.checkout(PULL_REQUEST_BRANCH, force=True)
        except GitCommandError as e:
            raise EnvironmentSetupError(
                f"switch to pull request branch failed: {e.stderr}"
            ) from e

        self._repository = repository
        logger.info(
            "environment_ready",
            environment=self.name,
            root=str(repository.root),
            pr=self._client.pr_number,
        )

    async def post_results(self, report: ComparisonReport) -> None:
        await self._client.post_comment(render_markdown(report))

    async def post_error(self, message: str) -> None:
        await self._client.post_comment(f"{message}. {ERROR_COMMENT_SUFFIX}")
