"""Tests for VirtualScheduler."""

import pytest

from tapout.game.scheduler import VirtualScheduler


class TestCallLater:
    def test_nothing_runs_until_time_advances(self) -> None:
        sched = VirtualScheduler()
        calls: list[str] = []
        sched.call_later(1.0, lambda: calls.append("a"))
        assert calls == []
        assert sched.pending_count == 1

    def test_fires_in_due_order(self) -> None:
        sched = VirtualScheduler()
        calls: list[str] = []
        sched.call_later(3.0, lambda: calls.append("late"))
        sched.call_later(1.0, lambda: calls.append("early"))
        assert sched.advance(5.0) == 2
        assert calls == ["early", "late"]
        assert sched.now == 5.0

    def test_ties_fire_in_scheduling_order(self) -> None:
        sched = VirtualScheduler()
        calls: list[int] = []
        for i in range(4):
            sched.call_later(2.0, lambda i=i: calls.append(i))
        sched.advance(2.0)
        assert calls == [0, 1, 2, 3]

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            VirtualScheduler().call_later(-0.1, lambda: None)

    def test_cannot_go_backwards(self) -> None:
        with pytest.raises(ValueError):
            VirtualScheduler().advance(-1.0)


class TestCancel:
    def test_cancelled_timer_never_fires(self) -> None:
        sched = VirtualScheduler()
        calls: list[str] = []
        handle = sched.call_later(1.0, lambda: calls.append("x"))
        handle.cancel()
        assert not handle.is_pending
        assert sched.advance(10.0) == 0
        assert calls == []
        assert sched.pending_count == 0

    def test_cancel_is_idempotent(self) -> None:
        sched = VirtualScheduler()
        handle = sched.call_later(1.0, lambda: None)
        handle.cancel()
        handle.cancel()
        assert sched.cancelled_count == 1

    def test_cancel_after_fire_is_noop(self) -> None:
        sched = VirtualScheduler()
        handle = sched.call_later(1.0, lambda: None)
        sched.run_next()
        handle.cancel()
        assert sched.cancelled_count == 0
        assert sched.fired_count == 1


class TestRunNext:
    def test_jumps_clock_to_due_time(self) -> None:
        sched = VirtualScheduler()
        sched.call_later(4.0, lambda: None)
        assert sched.run_next()
        assert sched.now == 4.0
        assert not sched.run_next()

    def test_callback_may_schedule_more(self) -> None:
        sched = VirtualScheduler()
        calls: list[float] = []

        def tick() -> None:
            calls.append(sched.now)
            if len(calls) < 3:
                sched.call_later(1.0, tick)

        sched.call_later(1.0, tick)
        sched.advance(10.0)
        assert calls == [1.0, 2.0, 3.0]
        assert sched.scheduled_count == 3

    def test_next_due_skips_cancelled(self) -> None:
        sched = VirtualScheduler()
        first = sched.call_later(1.0, lambda: None)
        sched.call_later(2.0, lambda: None)
        first.cancel()
        assert sched.next_due() == 2.0
