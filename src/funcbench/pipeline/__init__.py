"""Comparison pipeline orchestration and cooperative cancellation."""

from funcbench.pipeline.cancellation import (
    CancellationToken,
    listen_for_signals,
    run_with_interrupts,
)
from funcbench.pipeline.exceptions import (
    InvalidPipelineStateError,
    PipelineCancelledError,
    PipelineError,
)
from funcbench.pipeline.orchestrator import (
    ComparisonPipeline,
    describe_revision,
    post_error_safely,
)
from funcbench.pipeline.state_machine import StateMachineMixin

__all__ = [
    "CancellationToken",
    "ComparisonPipeline",
    "InvalidPipelineStateError",
    "PipelineCancelledError",
    "PipelineError",
    "StateMachineMixin",
    "describe_revision",
    "listen_for_signals",
    "post_error_safely",
    "run_with_interrupts",
]
