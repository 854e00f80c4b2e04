"""Timer back-ends driving the game loop.

Both schedulers expose the same two calls, taking delays in milliseconds and
returning a handle with ``cancel()``:

* ``call_later(delay_ms, callback)`` runs ``callback`` once.
* ``call_every(interval_ms, callback)`` runs it repeatedly until cancelled.

:class:`AsyncioScheduler` runs on the current asyncio event loop and is what
the pygame front-end uses.  :class:`ManualScheduler` keeps a virtual clock that
only moves when :meth:`ManualScheduler.advance` is called, which makes timing
fully deterministic for tests and headless simulation.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: float, callback: Callback) -> TimerHandle:
        ...

    def call_every(self, interval_ms: float, callback: Callback) -> TimerHandle:
        ...


class _PeriodicTimer:
    """Repeating timer built from chained ``loop.call_later`` calls."""

    def __init__(self, loop: asyncio.AbstractEventLoop, interval_ms: float, callback: Callback) -> None:
        self._loop = loop
        self._interval = interval_ms / 1000.0
        self._callback = callback
        self._cancelled = False
        self._handle: Optional[asyncio.TimerHandle] = loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        self._handle = None
        self._callback()
        if not self._cancelled:
            self._handle = self._loop.call_later(self._interval, self._fire)

    def cancel(self) -> None:
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class AsyncioScheduler:
    """Schedule callbacks on an asyncio event loop.

    The loop is looked up lazily so the scheduler can be created outside of a
    coroutine as long as timers are only started while the loop runs.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: float, callback: Callback) -> asyncio.TimerHandle:
        return self._get_loop().call_later(delay_ms / 1000.0, callback)

    def call_every(self, interval_ms: float, callback: Callback) -> _PeriodicTimer:
        return _PeriodicTimer(self._get_loop(), interval_ms, callback)


@dataclass(order=True)
class ManualTimer:
    """Timer entry for :class:`ManualScheduler`."""

    when: float
    seq: int
    callback: Callback = field(compare=False)
    interval: Optional[float] = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler on a virtual millisecond clock."""

    def __init__(self) -> None:
        self.now: float = 0.0
        self._queue: List[ManualTimer] = []
        self._seq = itertools.count()

    def _push(self, delay_ms: float, callback: Callback, interval: Optional[float]) -> ManualTimer:
        timer = ManualTimer(self.now + delay_ms, next(self._seq), callback, interval)
        heapq.heappush(self._queue, timer)
        return timer

    def call_later(self, delay_ms: float, callback: Callback) -> ManualTimer:
        return self._push(delay_ms, callback, None)

    def call_every(self, interval_ms: float, callback: Callback) -> ManualTimer:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        return self._push(interval_ms, callback, interval_ms)

    def pending(self) -> List[ManualTimer]:
        """Return live timers ordered by due time."""

        return sorted(t for t in self._queue if not t.cancelled)

    def advance(self, ms: float) -> None:
        """Move the clock forward by ``ms``, firing every timer that comes due.

        Timers fire in due-time order; timers scheduled by a callback fire in
        the same call if they fall inside the window.
        """

        target = self.now + ms
        while self._queue and self._queue[0].when <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.now = timer.when
            timer.callback()
            if timer.interval is not None and not timer.cancelled:
                timer.when += timer.interval
                timer.seq = next(self._seq)
                heapq.heappush(self._queue, timer)
        self.now = target
