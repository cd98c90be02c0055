"""Cooperative cancellation driven by termination signals.

A CancellationToken is shared by the signal listener and the pipeline.
The listener only flips the token; the pipeline checks it between phases,
so a benchmark that is already running is allowed to finish.
"""

from __future__ import annotations

import asyncio
import contextlib
import signal
from collections.abc import Awaitable, Iterable
from typing import TypeVar

from funcbench.logging_config import get_logger
from funcbench.pipeline.exceptions import PipelineCancelledError

__all__ = ["CancellationToken", "listen_for_signals", "run_with_interrupts"]

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class CancellationToken:
    """One-shot cancellation flag.

    Attributes:
        reason: Why cancellation was requested, None while not cancelled.

    """

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: str = "cancelled") -> None:
        """Request cancellation. Later calls keep the first reason."""
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()

    def raise_if_cancelled(self, phase: str) -> None:
        """Raise PipelineCancelledError if cancellation was requested.

        Args:
            phase: Name of the phase about to start.

        """
        if self._event.is_set():
            raise PipelineCancelledError(phase, self.reason or "cancelled")

    async def wait(self) -> None:
        await self._event.wait()


async def listen_for_signals(
    token: CancellationToken,
    signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
) -> None:
    """Cancel ``token`` when one of ``signals`` is received.

    Returns once the token is cancelled, by a signal or by anyone else.
    """
    loop = asyncio.get_running_loop()
    installed: list[signal.Signals] = []

    def _on_signal(sig: signal.Signals) -> None:
        logger.warning("signal_received", signal=sig.name)
        token.cancel(f"caught signal {sig.name}")

    for sig in signals:
        try:
            loop.add_signal_handler(sig, _on_signal, sig)
        except (NotImplementedError, RuntimeError):
            logger.debug("signal_handler_unavailable", signal=sig.name)
            continue
        installed.append(sig)

    try:
        await token.wait()
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


async def run_with_interrupts(
    work: Awaitable[T],
    token: CancellationToken,
    signals: Iterable[signal.Signals] = DEFAULT_SIGNALS,
) -> T:
    """Await ``work`` while a signal listener watches ``token``.

    The listener is stopped as soon as ``work`` finishes, whatever the
    outcome.
    """
    listener = asyncio.create_task(listen_for_signals(token, signals))
    try:
        return await work
    finally:
        listener.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await listener
