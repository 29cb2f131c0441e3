"""
Tests for the cooperative scheduler and the input throttler.
"""

import pytest

from frogsnake.throttle import Throttler
from frogsnake.timer import Scheduler


class TestScheduler:
    """Tests for Scheduler and TimerHandle."""

    def test_call_later_fires_once_when_due(self):
        sched = Scheduler(0)
        fired = []
        sched.call_later(100, fired.append, "x")
        assert sched.advance(99) == 0
        assert sched.advance(100) == 1
        assert sched.advance(1000) == 0
        assert fired == ["x"]

    def test_call_every_repeats(self):
        sched = Scheduler(0)
        times = []
        sched.call_every(50, lambda: times.append(sched.now))
        for now in range(0, 201, 10):
            sched.advance(now)
        assert times == [50, 100, 150, 200]

    def test_stalled_repeat_fires_once(self):
        """A repeat that fell several intervals behind runs once, then one interval after the clock."""
        sched = Scheduler(0)
        times = []
        handle = sched.call_every(200, lambda: times.append(sched.now))
        assert sched.advance(1000) == 1
        assert times == [200]
        assert handle.due_ms == 1200
        sched.advance(1199)
        assert times == [200]
        sched.advance(1200)
        assert times == [200, 1200]

    def test_cancelled_never_fires(self):
        sched = Scheduler(0)
        fired = []
        handle = sched.call_every(10, fired.append, 1)
        handle.cancel()
        sched.advance(100)
        assert fired == []
        assert handle.cancelled

    def test_cancel_from_inside_callback_stops_repeats(self):
        sched = Scheduler(0)
        fired = []

        def cb():
            fired.append(sched.now)
            if len(fired) == 2:
                handle.cancel()

        handle = sched.call_every(10, cb)
        for now in range(0, 101, 10):
            sched.advance(now)
        assert fired == [10, 20]

    def test_runs_in_due_order(self):
        sched = Scheduler(0)
        order = []
        sched.call_later(30, order.append, "c")
        sched.call_later(10, order.append, "a")
        sched.call_later(20, order.append, "b")
        sched.advance(30)
        assert order == ["a", "b", "c"]

    def test_nested_timers_measured_from_due_time(self):
        """A callback running late still schedules relative to when it was due."""
        sched = Scheduler(0)
        times = []
        sched.call_later(10, lambda: sched.call_later(10, lambda: times.append(sched.now)))
        sched.advance(100)
        assert times == [20]

    def test_now_after_advance(self):
        sched = Scheduler(5)
        sched.advance(42)
        assert sched.now == 42

    def test_clock_backwards(self):
        sched = Scheduler(10)
        with pytest.raises(ValueError):
            sched.advance(5)

    def test_bad_intervals(self):
        sched = Scheduler(0)
        with pytest.raises(ValueError):
            sched.call_every(0, print)
        with pytest.raises(ValueError):
            sched.call_later(-1, print)


class TestThrottler:
    """Tests for the trailing-edge throttle."""

    def _feed(self, sched, throttler, calls):
        for at, value in calls:
            sched.advance(at)
            throttler(value)

    def test_burst_fires_first_and_last(self):
        """Calls at 0, 5, 12, 18 in a 20 ms window fire at 0 and at 20 with the last args."""
        sched = Scheduler(0)
        seen = []
        throttler = Throttler(lambda v: seen.append((sched.now, v)), 20, sched)
        self._feed(sched, throttler, [(0, "a"), (5, "b"), (12, "c"), (18, "d")])
        sched.advance(100)
        assert seen == [(0, "a"), (20, "d")]

    def test_single_call_no_replay(self):
        sched = Scheduler(0)
        seen = []
        throttler = Throttler(seen.append, 20, sched)
        throttler("a")
        sched.advance(100)
        assert seen == ["a"]
        assert not throttler.throttled

    def test_replay_opens_new_window(self):
        """The replayed call starts its own window, so a call right after it is held."""
        sched = Scheduler(0)
        seen = []
        throttler = Throttler(lambda v: seen.append((sched.now, v)), 20, sched)
        self._feed(sched, throttler, [(0, "a"), (10, "b"), (25, "c")])
        assert seen == [(0, "a"), (20, "b")]
        sched.advance(100)
        assert seen == [(0, "a"), (20, "b"), (40, "c")]

    def test_calls_after_window_fire_immediately(self):
        sched = Scheduler(0)
        seen = []
        throttler = Throttler(seen.append, 20, sched)
        self._feed(sched, throttler, [(0, "a"), (20, "b"), (45, "c")])
        assert seen == ["a", "b", "c"]

    def test_cancel_drops_held_call(self):
        sched = Scheduler(0)
        seen = []
        throttler = Throttler(seen.append, 20, sched)
        self._feed(sched, throttler, [(0, "a"), (5, "b")])
        throttler.cancel()
        sched.advance(100)
        assert seen == ["a"]

    def test_window_must_be_positive(self):
        with pytest.raises(ValueError):
            Throttler(print, 0, Scheduler())
