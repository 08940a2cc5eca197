"""Repeating timer bound to a single asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


class PeriodicTicker:
    """Invokes ``callback`` every ``interval`` seconds until stopped.

    Every firing runs on the event loop the ticker was bound to, so callbacks
    never overlap with each other or with other work scheduled on that loop.

    Each ``start()`` opens a new generation. ``stop()`` cancels the pending
    ``TimerHandle`` and retires the generation, so a firing that was already
    dequeued by the loop is discarded instead of reaching the callback.
    """

    def __init__(
        self,
        interval: float,
        callback: Callable[[], None],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval!r}")
        self.interval = float(interval)
        self._callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._generation = 0
        self._next_at = 0.0

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            # Bind lazily to the loop we're first started on
            self._loop = asyncio.get_running_loop()
        return self._loop

    def start(self) -> None:
        """Begin firing. Calling ``start`` on a running ticker does nothing."""
        if self.is_running():
            logger.debug("start() ignored, ticker already running")
            return
        self._generation += 1
        self._next_at = self.loop.time() + self.interval
        self._schedule(self._generation)
        logger.debug("ticker started (interval=%.1fs)", self.interval)

    def stop(self) -> None:
        """Cancel future firings. Safe to call on a stopped ticker."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("ticker stopped")
        self._generation += 1

    def restart(self) -> None:
        self.stop()
        self.start()

    def is_running(self) -> bool:
        return self._handle is not None

    def _schedule(self, generation: int) -> None:
        self._handle = self.loop.call_at(self._next_at, self._fire, generation)

    def _fire(self, generation: int) -> None:
        if generation != self._generation:
            return
        now = self.loop.time()
        # Re-arm before the callback so a stop() from inside it cancels the next firing
        self._next_at += self.interval
        if self._next_at <= now:
            # Skip slots missed while the loop was stalled
            missed = int((now - self._next_at) // self.interval) + 1
            logger.debug("ticker skipped %d missed firing(s)", missed)
            self._next_at = now + self.interval
        self._schedule(generation)
        self._callback()
