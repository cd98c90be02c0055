"""Local environment: benchmark the current checkout and print results."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from funcbench.environment.base import Environment
from funcbench.environment.exceptions import EnvironmentSetupError
from funcbench.git.exceptions import GitCommandError
from funcbench.git.repository import Repository
from funcbench.logging_config import get_logger
from funcbench.report.renderer import render_exclusions, render_plain

if TYPE_CHECKING:
    from funcbench.environment.context import EnvironmentContext
    from funcbench.models.benchmark import ComparisonReport

__all__ = ["LocalEnvironment"]

logger = get_logger(__name__)


class LocalEnvironment(Environment):
    """Runs against the repository containing ``path``.

    Errors are not delivered anywhere: the CLI already reports them on
    the console.
    """

    def __init__(
        self,
        context: EnvironmentContext,
        path: Path | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._context = context
        self._path = path or Path.cwd()
        self._output = output
        self._repository: Repository | None = None

    @property
    def name(self) -> str:
        return "local"

    @property
    def context(self) -> EnvironmentContext:
        return self._context

    @property
    def repository(self) -> Repository:
        if self._repository is None:
            raise EnvironmentSetupError("local environment has not been set up")
        return self._repository

    async def setup(self) -> None:
        try:
            self._repository = await Repository.open(self._path)
        except (GitCommandError, OSError) as e:
            raise EnvironmentSetupError(f"{self._path} is not inside a git repository: {e}") from e
        logger.info("environment_ready", environment=self.name, root=str(self._repository.root))

    async def post_results(self, report: ComparisonReport) -> None:
        print("Results:", file=self._output)
        print(f"Comparing {report.label}", file=self._output)
        print(render_plain(report), file=self._output)
        exclusions = render_exclusions(report)
        if exclusions:
            print("Excluded from comparison:", file=self._output)
            print(exclusions, file=self._output)

    async def post_error(self, message: str) -> None:
        logger.debug("error_delivery_skipped", environment=self.name, message=message)
