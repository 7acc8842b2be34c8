"""Beat timer running on a Tk-style scheduler."""

import time
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class BeatTimer:
    """Invokes a callback once per period on the scheduler's event loop.

    The scheduler is anything with Tk's ``after(ms, func)`` and
    ``after_cancel(id)`` methods, normally the root window.
    """

    def __init__(
        self,
        scheduler: Any,
        callback: Callable[[], None],
        period: float,
        clock: Callable[[], float] = time.perf_counter
    ):
        """
        Initialize the timer.

        Args:
            scheduler: Object providing after/after_cancel
            callback: Called on every tick
            period: Seconds between ticks
            clock: Monotonic clock in seconds
        """
        self.scheduler = scheduler
        self.callback = callback
        self.clock = clock
        self.period = self._checked(period)
        self.is_running = False
        self._pending: Optional[Any] = None
        self._next_tick = 0.0

    @staticmethod
    def _checked(period: float) -> float:
        if period <= 0:
            raise ValueError("Timer period must be positive")
        return float(period)

    def start(self):
        """Start ticking; the first tick fires immediately."""
        if self.is_running:
            logger.warning("Beat timer is already running")
            return

        self.is_running = True
        self._next_tick = self.clock()
        logger.info(f"Beat timer started with period {self.period:.3f}s")
        self._tick()

    def stop(self):
        """Stop ticking and drop the pending tick."""
        if not self.is_running:
            return

        self.is_running = False
        self._cancel_pending()
        logger.info("Beat timer stopped")

    def set_period(self, period: float):
        """
        Change the tick period.

        A running timer is re-armed so the next tick lands one new period
        from now.

        Args:
            period: Seconds between ticks
        """
        self.period = self._checked(period)
        if not self.is_running:
            return

        self._cancel_pending()
        self._next_tick = self.clock() + self.period
        self._arm()

    def _cancel_pending(self):
        if self._pending is not None:
            self.scheduler.after_cancel(self._pending)
            self._pending = None

    def _arm(self):
        delay = max(0.0, self._next_tick - self.clock())
        self._pending = self.scheduler.after(int(round(delay * 1000)), self._tick)

    def _tick(self):
        self._pending = None
        if not self.is_running:
            return

        # Arm before the callback so a period change made inside it wins
        now = self.clock()
        self._next_tick += self.period
        if self._next_tick <= now:
            # A whole beat was missed; skip ahead instead of replaying it
            logger.warning(f"Beat timer running behind by {now - self._next_tick + self.period:.3f}s")
            self._next_tick = now + self.period
        self._arm()
        self.callback()
