"""Application settings using pydantic-settings.

Settings can be overridden via environment variables with the
appropriate prefix.

Environment Variables:
    FUNCBENCH_BENCH_TIME: Minimum run time per benchmark (Go duration)
    FUNCBENCH_TIMEOUT_SECONDS: Wall-clock bound per benchmark run (0 disables)
    FUNCBENCH_WORKTREE_DIR_NAME: Directory name of the secondary worktree
    FUNCBENCH_GO_BINARY: Go toolchain executable
    FUNCBENCH_PACKAGES: Package pattern passed to ``go test``
    GITHUB_TOKEN: Token used to post pull request comments
    GITHUB_WORKSPACE: Workspace directory provided by GitHub Actions
    GITHUB_API_URL: GitHub REST API base URL
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from funcbench.config.defaults import (
    DEFAULT_BENCH_TIME,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_GITHUB_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_GO_BINARY,
    DEFAULT_PACKAGES,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_WORKTREE_DIR_NAME,
    TIMEOUT_MAX_SECONDS,
)

__all__ = [
    "BenchmarkSettings",
    "GitHubSettings",
    "Settings",
    "get_settings",
]


class BenchmarkSettings(BaseSettings):
    """Settings for benchmark execution.

    Attributes:
        bench_time: Minimum run duration per benchmark, in Go duration format.
        timeout_seconds: Wall-clock timeout per benchmark run. 0 disables it.
        worktree_dir_name: Name of the secondary worktree directory.
        go_binary: Go toolchain executable.
        packages: Package pattern handed to ``go test``.

    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCBENCH_",
        extra="ignore",
    )

    bench_time: str = Field(
        default=DEFAULT_BENCH_TIME,
        min_length=1,
        description="Minimum run duration per benchmark (Go duration)",
    )
    timeout_seconds: int = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        ge=0,
        le=TIMEOUT_MAX_SECONDS,
        description="Wall-clock timeout per benchmark run, 0 disables it",
    )
    worktree_dir_name: str = Field(
        default=DEFAULT_WORKTREE_DIR_NAME,
        min_length=1,
        description="Directory name of the secondary worktree",
    )
    go_binary: str = Field(
        default=DEFAULT_GO_BINARY,
        description="Go toolchain executable",
    )
    packages: str = Field(
        default=DEFAULT_PACKAGES,
        description="Package pattern passed to go test",
    )

    @field_validator("worktree_dir_name")
    @classmethod
    def _hidden_from_go_tooling(cls, value: str) -> str:
        """The go tool ignores directories starting with '_' or '.' in ``./...``."""
        if value[0] not in "_.":
            raise ValueError(
                f"worktree directory {value!r} must start with '_' or '.' so go test ./... skips it"
            )
        if "/" in value or value in (".", ".."):
            raise ValueError(f"worktree directory {value!r} must be a single directory name")
        return value


class GitHubSettings(BaseSettings):
    """Settings for the GitHub Actions environment.

    The variable names match the ones GitHub Actions exports, so no
    extra configuration is needed inside a workflow.

    Attributes:
        token: API token used to post comments.
        workspace: Workspace directory of the Actions runner.
        api_url: Base URL of the REST API.
        request_timeout_seconds: HTTP timeout for API calls.

    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        extra="ignore",
    )

    token: str | None = Field(default=None, description="GitHub API token")
    workspace: Path | None = Field(default=None, description="Actions workspace")
    api_url: str = Field(default=DEFAULT_GITHUB_API_URL, description="REST API URL")
    request_timeout_seconds: float = Field(
        default=DEFAULT_GITHUB_REQUEST_TIMEOUT_SECONDS,
        gt=0,
        description="HTTP timeout for API calls",
    )


class Settings(BaseSettings):
    """Root settings container.

    Use get_settings() to access the cached singleton instance.

    Attributes:
        benchmark: Benchmark execution settings.
        github: GitHub Actions settings.

    """

    model_config = SettingsConfigDict(
        env_prefix="FUNCBENCH_",
        extra="ignore",
    )

    benchmark: BenchmarkSettings = Field(default_factory=BenchmarkSettings)
    github: GitHubSettings = Field(default_factory=GitHubSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    """
    return Settings()
