# throttle.py
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Tuple

from .timer import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class Throttler:
    """
    Trailing-edge coalescing throttle for key presses.

    - the first call in a window runs immediately and opens the window
    - calls made while the window is open are held; only the last one is kept
    - when the window closes the held call (if any) is replayed, which opens
      a new window of its own

    The window length is fixed when the throttler is built.
    """

    def __init__(self, callback: Callable[..., Any], window_ms: int, scheduler: Scheduler):
        if window_ms <= 0:
            raise ValueError(f"window must be positive, got {window_ms}")
        self.callback = callback
        self.window_ms = window_ms
        self.scheduler = scheduler
        self._window: Optional[TimerHandle] = None
        self._held: Optional[Tuple[Any, ...]] = None

    @property
    def throttled(self) -> bool:
        return self._window is not None

    def __call__(self, *args: Any) -> None:
        if self._window is not None:
            self._held = args
            logger.debug("input %s held until window closes", args)
            return
        self._window = self.scheduler.call_later(self.window_ms, self._close_window)
        self.callback(*args)

    def _close_window(self) -> None:
        self._window = None
        if self._held is not None:
            args, self._held = self._held, None
            self(*args)

    def cancel(self) -> None:
        """Drop any held call and close the window without replaying."""
        if self._window is not None:
            self._window.cancel()
        self._window = None
        self._held = None
