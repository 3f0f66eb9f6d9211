"""Once-per-second countdown on a single-threaded event loop."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    """The part of ``asyncio.AbstractEventLoop`` the countdown needs."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> Any:
        ...


class Countdown:
    """Decrement *remaining* every *interval* seconds until it reaches zero.

    With a scheduler (usually the running asyncio loop) ticks are scheduled
    with ``call_later``; without one the host calls :meth:`tick` itself.
    At most one tick is ever pending.
    """

    def __init__(
        self,
        seconds: int,
        on_tick: Optional[Callable[[int], None]] = None,
        on_expire: Optional[Callable[[], None]] = None,
        scheduler: Optional[Scheduler] = None,
        interval: float = 1.0,
    ):
        self.remaining = max(0, seconds)
        self._on_tick = on_tick
        self._on_expire = on_expire
        self._scheduler = scheduler
        self._interval = interval
        self._handle = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    @property
    def expired(self) -> bool:
        return self.remaining <= 0

    def start(self) -> None:
        if self._running or self.expired:
            return
        self._running = True
        self._schedule()

    def cancel(self) -> None:
        self._running = False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def tick(self) -> None:
        """Advance by one step. No-op once expired or cancelled."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if not self._running or self.expired:
            return

        self.remaining -= 1
        if self._on_tick is not None:
            self._on_tick(self.remaining)

        if self.expired:
            self._running = False
            logger.debug("Countdown expired")
            if self._on_expire is not None:
                self._on_expire()
            return

        if self._running:
            self._schedule()

    def _schedule(self) -> None:
        if self._scheduler is None:
            return
        self._handle = self._scheduler.call_later(self._interval, self.tick)
