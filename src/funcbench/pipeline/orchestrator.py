"""End-to-end comparison pipeline.

The ComparisonPipeline walks through the phases

    validate_workspace -> resolve_target -> run_current
        -> compare -> report                                  (self-compare)
        -> prepare_worktree -> run_target -> compare -> report (cross-revision)
    -> cleanup -> reported | failed | cancelled

Benchmarks of the two sides never run concurrently. Cancellation is
checked before every phase. Failures are reported once to the environment
on a best-effort basis and then re-raised; the secondary worktree is
always removed on the way out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from funcbench.benchmark.comparison import compare_benchmarks, compare_sub_benchmarks
from funcbench.benchmark.parser import parse_benchmark_output
from funcbench.config.defaults import DEFAULT_WORKTREE_DIR_NAME
from funcbench.environment.exceptions import DeliveryError
from funcbench.git.resolver import RevisionResolver
from funcbench.git.worktree import WorktreeManager
from funcbench.logging_config import get_logger
from funcbench.models.enums import ComparisonMode, PipelineState
from funcbench.pipeline.cancellation import CancellationToken
from funcbench.pipeline.exceptions import (
    InvalidPipelineStateError,
    PipelineCancelledError,
)
from funcbench.pipeline.state_machine import StateMachineMixin

if TYPE_CHECKING:
    from funcbench.benchmark.executor import BenchmarkExecutor
    from funcbench.environment.base import Environment
    from funcbench.models.benchmark import ComparisonReport
    from funcbench.models.revision import ComparisonTarget, Revision

__all__ = ["ComparisonPipeline", "describe_revision", "post_error_safely"]

logger = get_logger(__name__)

_S = PipelineState

_FINAL_STATES = {_S.reported, _S.failed, _S.cancelled}


async def post_error_safely(environment: Environment, message: str) -> None:
    """Post a failure message once; delivery problems are only logged."""
    try:
        await environment.post_error(message)
    except Exception as e:
        logger.error(
            "error_delivery_failed",
            environment=environment.name,
            error=str(e),
            original_error=message,
        )


def describe_revision(revision: Revision) -> str:
    """Short human readable name of a revision: branch@hash or hash."""
    if revision.branch_name:
        return f"{revision.branch_name}@{revision.short_hash}"
    return revision.short_hash


class ComparisonPipeline(StateMachineMixin[PipelineState]):
    """Runs one comparison from workspace validation to delivery.

    Each pipeline owns its resolver and worktree manager; instances are
    single use.

    Attributes:
        report: The delivered report once the pipeline reached ``reported``.

    """

    _VALID_TRANSITIONS: dict[PipelineState, set[PipelineState]] = {
        _S.pending: {_S.validate_workspace, _S.cleanup},
        _S.validate_workspace: {_S.resolve_target, _S.cleanup},
        _S.resolve_target: {_S.run_current, _S.cleanup},
        _S.run_current: {_S.compare, _S.prepare_worktree, _S.cleanup},
        _S.prepare_worktree: {_S.run_target, _S.cleanup},
        _S.run_target: {_S.compare, _S.cleanup},
        _S.compare: {_S.report, _S.cleanup},
        _S.report: {_S.cleanup},
        _S.cleanup: _FINAL_STATES,
    }

    def __init__(
        self,
        environment: Environment,
        executor: BenchmarkExecutor,
        token: CancellationToken | None = None,
        worktree_dir_name: str = DEFAULT_WORKTREE_DIR_NAME,
    ) -> None:
        self._environment = environment
        self._executor = executor
        self._token = token or CancellationToken()
        self._repository = environment.repository
        self._resolver = RevisionResolver(self._repository)
        self._worktrees = WorktreeManager(self._repository)
        self._worktree_path = self._repository.root / worktree_dir_name
        self._state = PipelineState.pending
        self.report: ComparisonReport | None = None

    @property
    def state(self) -> PipelineState:
        return self._state

    def _get_current_state(self) -> PipelineState:
        return self._state

    def _transition(self, new_state: PipelineState) -> None:
        if not self.can_transition_to(new_state):
            allowed = sorted(state.value for state in self.get_valid_transitions())
            raise InvalidPipelineStateError(
                f"cannot transition from {self._state.value} to {new_state.value} "
                f"(allowed: {', '.join(allowed) or 'none'})"
            )
        logger.debug("pipeline_state", previous=self._state.value, state=new_state.value)
        self._state = new_state

    def _enter(self, phase: PipelineState) -> None:
        """Start a phase unless cancellation was requested."""
        self._token.raise_if_cancelled(phase.value)
        self._transition(phase)

    async def run(self) -> ComparisonReport:
        """Run the pipeline to completion.

        Returns:
            The comparison report that was handed to the environment.

        Raises:
            FuncbenchError: The first fatal error, after a best-effort
                failure notification through the environment.

        """
        if self._state is not PipelineState.pending:
            raise InvalidPipelineStateError("pipeline instances can only run once")

        outcome = PipelineState.failed
        try:
            report = await self._run_phases()
            outcome = PipelineState.reported
            return report
        except PipelineCancelledError as e:
            outcome = PipelineState.cancelled
            logger.warning("pipeline_cancelled", phase=e.phase, reason=e.reason)
            await self._notify_failure(e)
            raise
        except Exception as e:
            logger.error("pipeline_failed", state=self._state.value, error=str(e))
            await self._notify_failure(e)
            raise
        finally:
            self._transition(PipelineState.cleanup)
            await self._worktrees.cleanup()
            self._transition(outcome)
            logger.info("pipeline_finished", state=outcome.value)

    async def _run_phases(self) -> ComparisonReport:
        self._enter(PipelineState.validate_workspace)
        await self._worktrees.ensure_clean()

        self._enter(PipelineState.resolve_target)
        target = await self._resolver.resolve(self._environment.context.compare_target)

        self._enter(PipelineState.run_current)
        current = await self._repository.head()
        new_output = await self._executor.execute(self._repository.root, current)

        if target.mode is ComparisonMode.self_compare:
            logger.info("comparing_sub_benchmarks", current=current.hash)
            self._enter(PipelineState.compare)
            report = compare_sub_benchmarks(
                parse_benchmark_output(new_output),
                label=f"sub-benchmarks of {describe_revision(current)}",
                current=current,
            )
        else:
            report = await self._run_cross_revision(target, current, new_output)

        self._enter(PipelineState.report)
        await self._deliver(report)
        self.report = report
        return report

    async def _run_cross_revision(
        self,
        target: ComparisonTarget,
        current: Revision,
        new_output: str,
    ) -> ComparisonReport:
        assert target.revision is not None

        self._enter(PipelineState.prepare_worktree)
        handle = await self._worktrees.prepare(self._worktree_path, target.revision)

        self._enter(PipelineState.run_target)
        old_output = await self._executor.execute(handle.path, handle.revision)

        self._enter(PipelineState.compare)
        return compare_benchmarks(
            parse_benchmark_output(old_output),
            parse_benchmark_output(new_output),
            label=(
                f"{target.target}@{target.revision.short_hash} (old) vs "
                f"{describe_revision(current)} (new)"
            ),
            current=current,
            target=target.revision,
        )

    async def _deliver(self, report: ComparisonReport) -> None:
        try:
            await self._environment.post_results(report)
        except DeliveryError as e:
            logger.error("delivery_failed", environment=self._environment.name, error=str(e))

    async def _notify_failure(self, error: BaseException) -> None:
        await post_error_safely(self._environment, str(error))
