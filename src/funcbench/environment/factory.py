"""Selection of the environment variant for a run."""

from __future__ import annotations

from pathlib import Path

from funcbench.config.exceptions import ConfigurationError
from funcbench.config.models import RunConfig
from funcbench.config.settings import GitHubSettings
from funcbench.environment.base import Environment
from funcbench.environment.context import EnvironmentContext
from funcbench.environment.github import GitHubActionsEnvironment
from funcbench.environment.github_client import GitHubClient
from funcbench.environment.local import LocalEnvironment

__all__ = ["select_environment"]


def select_environment(
    config: RunConfig,
    github: GitHubSettings,
    local_path: Path | None = None,
) -> Environment:
    """Pick the environment once at startup.

    A pull request number selects GitHub Actions; otherwise the local
    checkout is used.

    Raises:
        ConfigurationError: If GitHub Actions is selected but the runner
            workspace or API token is missing.

    """
    context = EnvironmentContext(
        compare_target=config.target,
        bench_func=config.bench_func,
    )
    if not config.automated:
        return LocalEnvironment(context, path=local_path)

    if github.workspace is None:
        raise ConfigurationError(
            "funcbench is not running inside GitHub Actions (GITHUB_WORKSPACE is not set)"
        )
    if not github.token and not config.dry_run:
        raise ConfigurationError("GITHUB_TOKEN missing")

    client = GitHubClient(
        owner=config.owner,
        repo=config.repo,
        pr_number=config.pr_number,
        token=github.token,
        api_url=github.api_url,
        dry_run=config.dry_run,
        timeout_seconds=github.request_timeout_seconds,
    )
    return GitHubActionsEnvironment(context, workspace=github.workspace, client=client)
