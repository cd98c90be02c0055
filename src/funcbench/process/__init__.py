"""External command execution with bounded wall-clock time."""

from funcbench.process.exceptions import ExecutionError, ProcessError
from funcbench.process.runner import ProcessRunner

__all__ = ["ExecutionError", "ProcessError", "ProcessRunner"]
