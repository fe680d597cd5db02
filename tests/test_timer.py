"""IntervalTimer scheduling tests on a fake clock."""

import pytest

from algoplay.timer import IntervalTimer


def _counting_timer(loop):
    ticks = []
    timer = IntervalTimer(lambda: ticks.append(loop.time()), loop=loop)
    return timer, ticks


def test_ticks_once_per_interval(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)
    assert timer.active
    assert timer.next_deadline == 0.25

    fake_loop.advance(0.25)
    assert ticks == [0.25]
    fake_loop.advance(0.75)
    assert ticks == [0.25, 0.5, 0.75, 1.0]
    assert timer.tick_count == 4


def test_restart_keeps_a_single_pending_tick(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.5)
    timer.start(0.5)
    timer.start(0.5)
    assert len(fake_loop.pending()) == 1

    fake_loop.advance(1.0)
    assert len(ticks) == 2


def test_cancel_stops_ticks(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)
    fake_loop.advance(0.25)
    timer.cancel()
    timer.cancel()

    fake_loop.advance(2.0)
    assert len(ticks) == 1
    assert not timer.active
    assert timer.next_deadline is None


def test_late_tick_after_cancel_is_ignored(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)
    stale = fake_loop.pending()[0]
    timer.cancel()

    # A handle that slipped past cancellation still fires
    stale.run()
    assert ticks == []
    assert not timer.active


def test_late_tick_from_previous_schedule_is_ignored(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)
    stale = fake_loop.pending()[0]
    timer.start(1.0)

    stale.run()
    assert ticks == []
    assert len(fake_loop.pending()) == 1


def test_deadlines_do_not_drift(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)

    # The first tick runs late; the next one stays on the original grid
    fake_loop.now = 0.3
    fake_loop.run_next()
    assert timer.next_deadline == 0.5


def test_no_burst_after_stall(fake_loop):
    timer, ticks = _counting_timer(fake_loop)
    timer.start(0.25)

    fake_loop.now = 10.0
    fake_loop.run_next()
    assert len(ticks) == 1
    assert timer.next_deadline == 10.25

    fake_loop.advance(0.2)
    assert len(ticks) == 1


def test_callback_may_cancel_its_own_timer(fake_loop):
    holder = {}

    def on_tick():
        holder["ticks"] = holder.get("ticks", 0) + 1
        holder["timer"].cancel()

    timer = IntervalTimer(on_tick, loop=fake_loop)
    holder["timer"] = timer
    timer.start(0.5)

    fake_loop.advance(3.0)
    assert holder["ticks"] == 1
    assert not timer.active
    assert fake_loop.pending() == []


@pytest.mark.parametrize("interval", [0, -0.5])
def test_rejects_non_positive_interval(fake_loop, interval):
    timer, _ = _counting_timer(fake_loop)
    with pytest.raises(ValueError):
        timer.start(interval)
    assert not timer.active
