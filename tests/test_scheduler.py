# File: tests/test_scheduler.py
"""
Test the frame schedulers that drive the simulation loop.
"""

import asyncio

import pytest

from jam_seismic import AsyncioFrameScheduler, ManualFrameScheduler, SimulationLoop


def test_manual_scheduler_runs_pending_in_order():
    scheduler = ManualFrameScheduler()
    calls = []
    scheduler.request_frame(lambda: calls.append('a'))
    scheduler.request_frame(lambda: calls.append('b'))

    assert scheduler.advance() == 2
    assert calls == ['a', 'b']
    assert scheduler.frames_run == 1
    assert scheduler.pending == []


def test_manual_scheduler_cancel():
    scheduler = ManualFrameScheduler()
    calls = []
    handle = scheduler.request_frame(lambda: calls.append('x'))
    scheduler.cancel_frame(handle)
    scheduler.cancel_frame(handle)  # cancelling twice is harmless

    assert scheduler.advance() == 0
    assert calls == []


def test_manual_scheduler_requests_during_frame_wait():
    """
    A callback that asks for another frame (as the simulation loop does)
    gets it on the NEXT frame, not in the same one.
    """
    scheduler = ManualFrameScheduler()
    calls = []

    def again():
        calls.append(len(calls))
        scheduler.request_frame(again)

    scheduler.request_frame(again)
    scheduler.advance()
    assert calls == [0]
    scheduler.advance(3)
    assert calls == [0, 1, 2, 3]
    assert scheduler.frames_run == 4


def test_asyncio_scheduler_rejects_bad_interval():
    with pytest.raises(ValueError):
        AsyncioFrameScheduler(interval=0.0)


def test_asyncio_scheduler_cancel():
    async def run():
        scheduler = AsyncioFrameScheduler(interval=0.001)
        calls = []
        handle = scheduler.request_frame(lambda: calls.append(1))
        scheduler.cancel_frame(handle)
        await asyncio.sleep(0.02)
        return calls

    assert asyncio.run(run()) == []


def test_asyncio_scheduler_drives_loop():
    """
    WHAT IS THIS TEST?
    ==================
    Run the simulation on a real event loop for a short while, then stop it.
    Some frames must have run, and none may run after stop().
    """
    async def run():
        scheduler = AsyncioFrameScheduler(interval=0.001)
        loop = SimulationLoop(scheduler=scheduler)
        loop.start()
        await asyncio.sleep(0.05)
        loop.stop()
        stopped_at = loop.state.tick_count
        await asyncio.sleep(0.02)
        return stopped_at, loop.state.tick_count

    stopped_at, final = asyncio.run(run())
    assert stopped_at > 0
    assert final == stopped_at
