"""Result model for a single external command execution."""

from pathlib import Path

from pydantic import ConfigDict, Field

from funcbench.models.base import BaseSchema

__all__ = ["ExecutionResult"]


class ExecutionResult(BaseSchema):
    """Outcome of one Process Runner invocation.

    Attributes:
        command: The executed argument vector.
        cwd: Working directory the command ran in.
        output: Combined stdout and stderr.
        exit_code: Process exit status; None if the process was killed on timeout.
        elapsed_seconds: Wall-clock duration.
        timed_out: Whether the timeout expired.

    """

    model_config = ConfigDict(str_strip_whitespace=False)

    command: list[str]
    cwd: Path
    output: str = ""
    exit_code: int | None = None
    elapsed_seconds: float = Field(default=0.0, ge=0.0)
    timed_out: bool = False

    @property
    def succeeded(self) -> bool:
        """True when the command exited with status 0 in time."""
        return not self.timed_out and self.exit_code == 0
