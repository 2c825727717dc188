"""
Tests for the scheduler capabilities.
"""

import asyncio

import pytest
from pokertable.core.events import AsyncioScheduler, InlineScheduler


class TestInlineScheduler:
    """Tests for the inline trampoline."""

    def test_runs_immediately(self):
        calls = []
        InlineScheduler().schedule(5.0, lambda: calls.append("ran"))
        assert calls == ["ran"]

    def test_nested_callbacks_run_in_order(self):
        """Callbacks scheduled from a callback run after it returns."""
        scheduler = InlineScheduler()
        calls = []

        def first():
            scheduler.schedule(0, lambda: calls.append("second"))
            scheduler.schedule(0, lambda: calls.append("third"))
            calls.append("first")

        scheduler.schedule(0, first)

        assert calls == ["first", "second", "third"]
        assert scheduler.pending == 0

    def test_deep_chains_do_not_recurse(self):
        scheduler = InlineScheduler()
        count = [0]

        def step():
            count[0] += 1
            if count[0] < 10000:
                scheduler.schedule(0, step)

        scheduler.schedule(0, step)
        assert count[0] == 10000

    def test_error_clears_queue(self):
        scheduler = InlineScheduler()

        def boom():
            scheduler.schedule(0, lambda: None)
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            scheduler.schedule(0, boom)
        assert scheduler.pending == 0

    def test_cancel_all_drops_queued(self):
        scheduler = InlineScheduler()
        calls = []

        def first():
            scheduler.schedule(0, lambda: calls.append("dropped"))
            scheduler.cancel_all()
            calls.append("first")

        scheduler.schedule(0, first)

        assert calls == ["first"]
        assert scheduler.pending == 0


class TestAsyncioScheduler:
    """Tests for event-loop scheduling."""

    def test_runs_after_delay(self):
        calls = []

        async def main():
            scheduler = AsyncioScheduler()
            scheduler.schedule(0.01, lambda: calls.append("late"))
            scheduler.schedule(0, lambda: calls.append("early"))
            assert calls == []
            await asyncio.sleep(0.05)

        asyncio.run(main())
        assert calls == ["early", "late"]

    def test_cancel_all_stops_pending_callbacks(self):
        calls = []

        async def main():
            scheduler = AsyncioScheduler()
            scheduler.schedule(0.01, lambda: calls.append("late"))
            scheduler.schedule(0.02, lambda: calls.append("later"))
            assert scheduler.pending == 2

            scheduler.cancel_all()
            assert scheduler.pending == 0
            await asyncio.sleep(0.05)

        asyncio.run(main())
        assert calls == []

    def test_fired_handles_are_released(self):
        async def main():
            scheduler = AsyncioScheduler()
            scheduler.schedule(0, lambda: None)
            await asyncio.sleep(0.01)
            return scheduler.pending

        assert asyncio.run(main()) == 0
