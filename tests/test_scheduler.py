import asyncio

import pytest

from colorfall.scheduler import AsyncioScheduler, ManualScheduler


def test_manual_call_later_fires_once_when_due():
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(100, lambda: fired.append(scheduler.now))
    scheduler.advance(99)
    assert fired == []
    scheduler.advance(1)
    scheduler.advance(500)
    assert fired == [100]


def test_manual_callbacks_fire_in_time_order():
    scheduler = ManualScheduler()
    order = []
    scheduler.call_later(30, lambda: order.append("b"))
    scheduler.call_later(10, lambda: order.append("a"))
    scheduler.call_later(30, lambda: order.append("c"))
    scheduler.advance(50)
    assert order == ["a", "b", "c"]
    assert scheduler.now == 50


def test_manual_periodic_timer_and_cancel():
    scheduler = ManualScheduler()
    ticks = []
    handle = scheduler.call_every(100, lambda: ticks.append(scheduler.now))
    scheduler.advance(350)
    assert ticks == [100, 200, 300]
    handle.cancel()
    scheduler.advance(500)
    assert ticks == [100, 200, 300]
    assert scheduler.pending() == []


def test_manual_timer_cancelled_from_its_own_callback():
    scheduler = ManualScheduler()
    ticks = []
    handles = []

    def tick():
        ticks.append(scheduler.now)
        handles[0].cancel()
        handles[0] = scheduler.call_every(50, tick)

    handles.append(scheduler.call_every(100, tick))
    scheduler.advance(200)
    assert ticks == [100, 150, 200]
    assert len(scheduler.pending()) == 1


def test_manual_rejects_non_positive_interval():
    with pytest.raises(ValueError):
        ManualScheduler().call_every(0, lambda: None)


def test_asyncio_scheduler_runs_and_cancels():
    async def scenario():
        scheduler = AsyncioScheduler()
        once = []
        ticks = []
        scheduler.call_later(5, lambda: once.append(True))
        cancelled = scheduler.call_later(5, lambda: once.append(False))
        cancelled.cancel()
        handle = scheduler.call_every(5, lambda: ticks.append(True))
        await asyncio.sleep(0.2)
        handle.cancel()
        count = len(ticks)
        await asyncio.sleep(0.05)
        return once, count, len(ticks)

    once, count, after = asyncio.run(scenario())
    assert once == [True]
    assert count >= 2
    assert after == count
