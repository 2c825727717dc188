"""
Event sink and scheduler capabilities used by the table engine.

The engine only ever calls ``event_sink(name, payload)`` and
``scheduler.schedule(delay, callback)``. What happens behind them is up
to the presentation layer: tests use the inline scheduler and a list,
the server uses the asyncio event loop and a websocket broadcaster.
"""

from __future__ import annotations
import asyncio
from collections import deque
from typing import Any, Callable, Deque, Dict, Optional, Protocol, Set


EventSink = Callable[[str, Dict[str, Any]], None]


def null_sink(event: str, payload: Dict[str, Any]) -> None:
    """Discard events."""


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        ...

    def cancel_all(self) -> None:
        ...


class InlineScheduler:
    """
    Runs continuations immediately, ignoring delays.

    Callbacks scheduled while another callback is running are queued and
    run in FIFO order once it returns, so a whole hand of bot actions
    executes without growing the call stack.
    """

    def __init__(self):
        self._queue: Deque[Callable[[], None]] = deque()
        self._running = False

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._queue.append(callback)
        if self._running:
            return

        self._running = True
        try:
            while self._queue:
                self._queue.popleft()()
        except BaseException:
            self._queue.clear()
            raise
        finally:
            self._running = False

    def cancel_all(self) -> None:
        """Drop queued callbacks; the one running, if any, finishes."""
        self._queue.clear()

    @property
    def pending(self) -> int:
        return len(self._queue)


class AsyncioScheduler:
    """
    Runs continuations on the event loop after their delay.

    Handles of callbacks that have not fired yet are kept so a table that
    is replaced or reset can be stopped with ``cancel_all``.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop
        self._handles: Set[asyncio.TimerHandle] = set()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        handle: Optional[asyncio.TimerHandle] = None

        def run() -> None:
            self._handles.discard(handle)
            callback()

        handle = loop.call_later(max(delay, 0), run)
        self._handles.add(handle)

    def cancel_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()

    @property
    def pending(self) -> int:
        return len(self._handles)
