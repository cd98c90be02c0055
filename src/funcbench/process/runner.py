"""Bounded execution of external commands.

The ProcessRunner starts a command in an explicit working directory,
captures combined stdout/stderr and enforces a wall-clock timeout. In
verbose mode output is also streamed to the console while it is produced.
"""

from __future__ import annotations

import asyncio
import codecs
import os
import signal
import sys
import time
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from funcbench.logging_config import get_logger
from funcbench.models.execution import ExecutionResult
from funcbench.process.exceptions import ExecutionError

__all__ = ["ProcessRunner"]

logger = get_logger(__name__)

_READ_CHUNK_SIZE = 4096


class ProcessRunner:
    """Runs one external command at a time under a timeout.

    Commands run in their own session, so a terminal interrupt aimed at
    funcbench does not reach an in-flight benchmark. On timeout the whole
    process group is killed.

    Attributes:
        verbose: Stream output to ``stream`` while capturing it.

    """

    def __init__(self, verbose: bool = False, stream: TextIO | None = None) -> None:
        self.verbose = verbose
        self._stream = stream

    async def run(
        self,
        command: Sequence[str],
        cwd: Path,
        timeout: float | None = None,
    ) -> ExecutionResult:
        """Execute ``command`` in ``cwd``.

        Args:
            command: Argument vector; the first element is the executable.
            cwd: Working directory.
            timeout: Wall-clock bound in seconds, None or 0 for no bound.

        Returns:
            ExecutionResult of the successful run.

        Raises:
            ExecutionError: On non-zero exit, timeout, or if the command
                cannot be started.

        """
        argv = list(command)
        logger.debug("command_starting", command=argv, cwd=str(cwd), timeout=timeout)
        start = time.monotonic()

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
                start_new_session=True,
            )
        except OSError as e:
            raise ExecutionError(
                argv, None, time.monotonic() - start, output=str(e)
            ) from e

        buffer: list[str] = []
        timed_out = False
        try:
            await asyncio.wait_for(
                self._collect(process, buffer), timeout=timeout or None
            )
        except asyncio.TimeoutError:
            timed_out = True
            await self._kill(process)

        result = ExecutionResult(
            command=argv,
            cwd=cwd,
            output="".join(buffer),
            exit_code=None if timed_out else process.returncode,
            elapsed_seconds=time.monotonic() - start,
            timed_out=timed_out,
        )
        logger.debug(
            "command_finished",
            command=argv,
            exit_code=result.exit_code,
            elapsed_seconds=round(result.elapsed_seconds, 3),
            timed_out=timed_out,
        )

        if not result.succeeded:
            raise ExecutionError(
                argv,
                result.exit_code,
                result.elapsed_seconds,
                timed_out=timed_out,
                # Already visible on the console when streaming.
                output="" if self.verbose else result.output,
            )
        return result

    async def _collect(
        self, process: asyncio.subprocess.Process, buffer: list[str]
    ) -> None:
        """Read output until EOF, then wait for the process to exit."""
        assert process.stdout is not None
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            chunk = await process.stdout.read(_READ_CHUNK_SIZE)
            text = decoder.decode(chunk, final=not chunk)
            if text:
                buffer.append(text)
                if self.verbose:
                    stream = self._stream or sys.stdout
                    stream.write(text)
                    stream.flush()
            if not chunk:
                break
        await process.wait()

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        try:
            if hasattr(os, "killpg"):
                os.killpg(process.pid, signal.SIGKILL)
            else:
                process.kill()
        except ProcessLookupError:
            pass
        await process.wait()
