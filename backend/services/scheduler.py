"""
One-shot tick timers.

The engine re-arms the timer after every successful tick and after resuming
from pause. Nothing here runs on a thread: whoever owns the scheduler decides
when the pending callback fires.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class TickScheduler:
    """Interface for a re-armable one-shot timer."""

    def schedule(self, delay_ms: float, callback: TickCallback):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError


class ManualScheduler(TickScheduler):
    """
    Holds at most one pending callback.

    Scheduling again replaces the pending callback, so a timer can never be
    armed twice and the tick rate cannot double.
    """

    def __init__(self):
        self._callback: Optional[TickCallback] = None
        self._delay_ms: Optional[float] = None

    @property
    def pending_delay_ms(self) -> Optional[float]:
        return self._delay_ms

    def has_pending(self) -> bool:
        return self._callback is not None

    def schedule(self, delay_ms: float, callback: TickCallback):
        self._callback = callback
        self._delay_ms = delay_ms

    def cancel(self):
        self._callback = None
        self._delay_ms = None

    def run_pending(self) -> bool:
        """Fire the pending callback, if any. Returns whether one fired."""
        callback = self._callback
        if callback is None:
            return False
        self.cancel()
        callback()
        return True

    def run_until_idle(
        self,
        sleep: Optional[Callable[[float], None]] = None,
        max_ticks: Optional[int] = None,
        before_tick: Optional[Callable[[], None]] = None
    ) -> int:
        """
        Keep firing callbacks until nothing is armed.

        Args:
            sleep: called with the delay in seconds before each tick
                (e.g. time.sleep); None runs as fast as possible
            max_ticks: stop after this many callbacks
            before_tick: hook called right before each callback fires

        Returns:
            Number of callbacks fired
        """
        fired = 0
        while self.has_pending():
            if max_ticks is not None and fired >= max_ticks:
                logger.info(f"Stopping after {fired} ticks (limit reached)")
                break
            if sleep is not None:
                sleep(self._delay_ms / 1000.0)
            if before_tick is not None:
                before_tick()
            self.run_pending()
            fired += 1
        return fired
