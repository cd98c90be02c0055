"""Per-invocation run configuration.

RunConfig merges CLI arguments over the environment-driven settings and is
the single configuration object handed to the environments and pipeline.
"""

from __future__ import annotations

import re

from pydantic import Field, field_validator

from funcbench.config.defaults import (
    DEFAULT_BENCH_FUNC,
    DEFAULT_GITHUB_OWNER,
    DEFAULT_GITHUB_REPO,
    TIMEOUT_MAX_SECONDS,
)
from funcbench.models.base import BaseSchema

__all__ = ["RunConfig"]


class RunConfig(BaseSchema):
    """Configuration for one comparison run.

    Attributes:
        target: '.', a branch name or a commit to compare against.
        bench_func: Benchmark name filter, anchored when executed.
        bench_time: Minimum run duration per benchmark (Go duration).
        timeout_seconds: Wall-clock bound per benchmark run, 0 disables it.
        verbose: Stream command output and log at debug level.
        dry_run: Do not call the GitHub API.
        owner: GitHub owner or organisation.
        repo: GitHub repository name.
        pr_number: Pull request number; selects the GitHub Actions environment.

    """

    target: str = Field(..., min_length=1)
    bench_func: str = DEFAULT_BENCH_FUNC
    bench_time: str
    timeout_seconds: int = Field(..., ge=0, le=TIMEOUT_MAX_SECONDS)
    verbose: bool = False
    dry_run: bool = False
    owner: str = DEFAULT_GITHUB_OWNER
    repo: str = DEFAULT_GITHUB_REPO
    pr_number: int | None = Field(default=None, ge=1)

    @field_validator("bench_func")
    @classmethod
    def _default_empty_filter(cls, value: str) -> str:
        """An empty filter means run everything."""
        return value or DEFAULT_BENCH_FUNC

    @field_validator("bench_func")
    @classmethod
    def _compile_filter(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid benchmark filter {value!r}: {e}") from e
        return value

    @property
    def automated(self) -> bool:
        """True when running on behalf of a pull request."""
        return self.pr_number is not None
