"""Exceptions for the comparison pipeline."""

from funcbench.exceptions import FuncbenchError

__all__ = [
    "InvalidPipelineStateError",
    "PipelineCancelledError",
    "PipelineError",
]


class PipelineError(FuncbenchError):
    """Base exception for pipeline lifecycle errors."""

    pass


class InvalidPipelineStateError(PipelineError):
    """Raised when an invalid pipeline state transition is attempted."""

    pass


class PipelineCancelledError(PipelineError):
    """Raised at a phase boundary after an interrupt was received.

    Attributes:
        phase: The phase that was about to start.
        reason: What requested the cancellation.

    """

    def __init__(self, phase: str, reason: str) -> None:
        self.phase = phase
        self.reason = reason
        super().__init__(f"cancelled before {phase}: {reason}")
