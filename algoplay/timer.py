"""Single cancellable repeating timer driven by an asyncio event loop."""

import asyncio
from typing import Callable, Optional


class IntervalTimer:
    """
    Repeating timer with at most one pending callback.

    Ticks are scheduled with the loop's `call_at`. `start` always cancels any
    pending tick first, and `cancel` bumps a generation counter so a handle
    that fires after cancellation is ignored before it can touch anything.
    Deadlines are anchored to the previous deadline and never lie in the
    past, so ticks neither drift nor burst after a stall.
    """

    def __init__(self, callback: Callable[[], None],
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        """
        Initialize timer.

        Args:
            callback: Function called once per tick
            loop: Event loop to schedule on (default: the running loop at start)
        """
        self.callback = callback
        self.interval: Optional[float] = None
        self.tick_count = 0

        self._loop = loop
        self._active_loop: Optional[asyncio.AbstractEventLoop] = None
        self._handle: Optional[asyncio.TimerHandle] = None
        self._deadline = 0.0
        self._generation = 0

    @property
    def active(self) -> bool:
        """True while a tick is pending."""
        return self._handle is not None

    @property
    def next_deadline(self) -> Optional[float]:
        """Loop time of the pending tick."""
        return self._deadline if self._handle is not None else None

    def start(self, interval: float):
        """
        Start ticking every `interval` seconds, replacing any running schedule.

        Args:
            interval: Seconds between ticks (> 0)
        """
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        loop = self.resolve_loop()
        self.cancel()

        self._active_loop = loop
        self.interval = interval
        self._deadline = self._active_loop.time() + interval
        self._handle = self._active_loop.call_at(self._deadline, self._fire, self._generation)

    def resolve_loop(self) -> asyncio.AbstractEventLoop:
        """
        Loop the next `start` will schedule on.

        Raises:
            RuntimeError: no loop was injected and none is running
        """
        return self._loop if self._loop is not None else asyncio.get_running_loop()

    def cancel(self):
        """Cancel the pending tick, if any. Safe to call repeatedly."""
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, generation: int):
        """Tick handler; stale generations are dropped."""
        if generation != self._generation or self._handle is None:
            return

        now = self._active_loop.time()
        self._deadline += self.interval
        if self._deadline <= now:
            self._deadline = now + self.interval
        # Re-arm before the callback so the callback may cancel this timer
        self._handle = self._active_loop.call_at(self._deadline, self._fire, generation)

        self.tick_count += 1
        self.callback()
