"""Exceptions for external command execution."""

from __future__ import annotations

from funcbench.exceptions import FuncbenchError

__all__ = ["ExecutionError", "ProcessError"]


class ProcessError(FuncbenchError):
    """Base exception for process execution errors."""

    pass


class ExecutionError(ProcessError):
    """Raised when a command exits non-zero or exceeds its timeout.

    Attributes:
        command: The executed argument vector.
        exit_code: Exit status, None if the process was killed or never started.
        elapsed_seconds: Wall-clock time until failure.
        timed_out: Whether the timeout expired.
        output: Captured output; empty when it was already streamed to the console.

    """

    def __init__(
        self,
        command: list[str],
        exit_code: int | None,
        elapsed_seconds: float,
        timed_out: bool = False,
        output: str = "",
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.elapsed_seconds = elapsed_seconds
        self.timed_out = timed_out
        self.output = output

        if timed_out:
            reason = f"timed out after {elapsed_seconds:.1f}s"
        elif exit_code is None:
            reason = "could not be started"
        else:
            reason = f"exited with status {exit_code} after {elapsed_seconds:.1f}s"
        message = f"command {' '.join(command)!r} {reason}"
        if output:
            message += f"; Command out: {output}"
        super().__init__(message)
