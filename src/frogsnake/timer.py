# timer.py
from __future__ import annotations

import heapq
import itertools
import logging
from typing import Any, Callable, List, Optional, Tuple

logger = logging.getLogger(__name__)


class TimerHandle:
    """A scheduled callback that can be cancelled before it fires."""

    def __init__(
        self,
        callback: Callable[..., Any],
        args: Tuple[Any, ...],
        due_ms: int,
        interval_ms: Optional[int] = None,
    ):
        self.callback = callback
        self.args = args
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def repeating(self) -> bool:
        return self.interval_ms is not None

    def __repr__(self):
        state = "cancelled" if self.cancelled else f"due={self.due_ms}"
        every = f" every={self.interval_ms}" if self.repeating else ""
        return f"<TimerHandle {getattr(self.callback, '__name__', self.callback)} {state}{every}>"


class Scheduler:
    """
    Timer queue driven by an external clock.

    Nothing here sleeps or spawns threads: the owner of the main loop reads a
    clock (``pygame.time.get_ticks()`` in the game, a plain integer in tests)
    and hands it to :meth:`advance`, which runs every callback that is due,
    one at a time and in due order.

    While a callback runs, :attr:`now` is that callback's due time, so timers
    it schedules are measured from when it was meant to fire rather than from
    when the loop got around to it.

    A repeating timer that falls more than one interval behind does not
    replay what it missed; its next run is one interval after the current
    clock.
    """

    def __init__(self, now_ms: int = 0):
        self._now = now_ms
        self._queue: List[Tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> int:
        return self._now

    def _push(self, handle: TimerHandle) -> TimerHandle:
        heapq.heappush(self._queue, (handle.due_ms, next(self._seq), handle))
        return handle

    def call_later(self, delay_ms: int, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Run ``callback(*args)`` once, ``delay_ms`` from now."""
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        return self._push(TimerHandle(callback, args, self._now + delay_ms))

    def call_every(self, interval_ms: int, callback: Callable[..., Any], *args: Any) -> TimerHandle:
        """Run ``callback(*args)`` every ``interval_ms``, first one interval from now."""
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        return self._push(TimerHandle(callback, args, self._now + interval_ms, interval_ms))

    def advance(self, now_ms: int) -> int:
        """Fire everything due at or before ``now_ms``. Returns the number fired."""
        if now_ms < self._now:
            raise ValueError(f"clock went backwards: {now_ms} < {self._now}")
        fired = 0
        while self._queue and self._queue[0][0] <= now_ms:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = due
            handle.callback(*handle.args)
            fired += 1
            if handle.repeating and not handle.cancelled:
                handle.due_ms = due + handle.interval_ms
                if handle.due_ms <= now_ms:
                    # the loop stalled: skip the missed repeats, fire once per advance
                    logger.debug("%r fell behind, skipping to %d", handle, now_ms + handle.interval_ms)
                    handle.due_ms = now_ms + handle.interval_ms
                self._push(handle)
        self._now = now_ms
        return fired
