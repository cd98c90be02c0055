"""Benchmark execution for one workspace.

Builds the ``go test`` invocation for the configured filter and durations
and runs it through the ProcessRunner in the given workspace.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from funcbench.config.defaults import DEFAULT_BENCH_FUNC, DEFAULT_GO_BINARY, DEFAULT_PACKAGES
from funcbench.logging_config import get_logger

if TYPE_CHECKING:
    from funcbench.models.revision import Revision
    from funcbench.process.runner import ProcessRunner

__all__ = ["BenchmarkExecutor"]

logger = get_logger(__name__)


class BenchmarkExecutor:
    """Runs the benchmark suite of a checkout.

    Attributes:
        bench_func: Benchmark name filter; anchored with ``^...$``.
        bench_time: Minimum run duration per benchmark (Go duration).
        timeout_seconds: Wall-clock bound per run, 0 disables it.

    """

    def __init__(
        self,
        runner: ProcessRunner,
        bench_func: str,
        bench_time: str,
        timeout_seconds: int,
        go_binary: str = DEFAULT_GO_BINARY,
        packages: str = DEFAULT_PACKAGES,
    ) -> None:
        self._runner = runner
        self.bench_func = bench_func or DEFAULT_BENCH_FUNC
        self.bench_time = bench_time
        self.timeout_seconds = timeout_seconds
        self._go_binary = go_binary
        self._packages = packages

    def build_command(self) -> list[str]:
        """Build the benchmark command.

        Unit tests are skipped (``-run ^$``) and memory statistics are
        always reported. ``go test`` gets the same timeout so the test
        binary panics with a stack trace before it is killed.
        """
        return [
            self._go_binary,
            "test",
            self._packages,
            "-run",
            "^$",
            "-bench",
            f"^{self.bench_func}$",
            "-benchmem",
            "-benchtime",
            self.bench_time,
            "-timeout",
            f"{self.timeout_seconds}s",
        ]

    async def execute(self, workspace: Path, revision: Revision | None = None) -> str:
        """Run the benchmarks in ``workspace``.

        Args:
            workspace: Checkout to benchmark.
            revision: Revision checked out in the workspace, for logging.

        Returns:
            The raw benchmark report.

        Raises:
            ExecutionError: If the command fails or times out.

        """
        command = self.build_command()
        revision_hash = revision.hash if revision is not None else None
        logger.info(
            "benchmark_started",
            workspace=str(workspace),
            revision=revision_hash,
            bench_func=self.bench_func,
        )
        result = await self._runner.run(
            command,
            cwd=workspace,
            timeout=float(self.timeout_seconds) if self.timeout_seconds else None,
        )
        logger.info(
            "benchmark_finished",
            workspace=str(workspace),
            revision=revision_hash,
            elapsed_seconds=round(result.elapsed_seconds, 1),
        )
        return result.output
