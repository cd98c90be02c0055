"""The compare command: environment setup plus one pipeline run."""

from __future__ import annotations

from funcbench.benchmark.executor import BenchmarkExecutor
from funcbench.config.models import RunConfig
from funcbench.config.settings import Settings
from funcbench.environment.exceptions import EnvironmentSetupError
from funcbench.environment.factory import select_environment
from funcbench.logging_config import get_logger
from funcbench.models.benchmark import ComparisonReport
from funcbench.pipeline.cancellation import CancellationToken, run_with_interrupts
from funcbench.pipeline.orchestrator import ComparisonPipeline, post_error_safely
from funcbench.process.runner import ProcessRunner

__all__ = ["CompareCommand"]

logger = get_logger(__name__)


class CompareCommand:
    """Benchmarks the current code and compares it with the target.

    Attributes:
        config: Configuration of this run.
        settings: Environment-driven settings.

    """

    def __init__(self, config: RunConfig, settings: Settings) -> None:
        self.config = config
        self.settings = settings

    @property
    def name(self) -> str:
        return "compare"

    async def execute(self) -> ComparisonReport:
        """Set up the environment and run the comparison pipeline.

        Returns:
            The delivered comparison report.

        Raises:
            ConfigurationError: If the environment is misconfigured.
            EnvironmentSetupError: If the workspace cannot be prepared.
            FuncbenchError: If the comparison fails.

        """
        environment = select_environment(self.config, self.settings.github)
        logger.info(
            "command_starting",
            command=self.name,
            environment=environment.name,
            target=self.config.target,
            bench_func=self.config.bench_func,
        )

        try:
            await environment.setup()
        except EnvironmentSetupError as e:
            await post_error_safely(
                environment, f"{e}. Could not setup environment, please check logs"
            )
            raise

        benchmark = self.settings.benchmark
        executor = BenchmarkExecutor(
            ProcessRunner(verbose=self.config.verbose),
            bench_func=self.config.bench_func,
            bench_time=self.config.bench_time,
            timeout_seconds=self.config.timeout_seconds,
            go_binary=benchmark.go_binary,
            packages=benchmark.packages,
        )
        token = CancellationToken()
        pipeline = ComparisonPipeline(
            environment,
            executor,
            token=token,
            worktree_dir_name=benchmark.worktree_dir_name,
        )
        return await run_with_interrupts(pipeline.run(), token)
