# jam_seismic/simulation/scheduler.py
"""
Frame schedulers that drive the simulation loop.

A scheduler runs a callback "before the next frame" and can cancel a pending
request, nothing more. The loop re-requests a frame at the end of every tick,
so only one callback per running simulation is ever pending.

    AsyncioFrameScheduler   real time, on an asyncio event loop (~50 Hz)
    ManualFrameScheduler    frames advance only when told to (tests, exports)
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Protocol


FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    """Anything that can run a callback on the next frame and cancel it."""

    def request_frame(self, callback: FrameCallback) -> Any:
        ...

    def cancel_frame(self, handle: Any) -> None:
        ...


class AsyncioFrameScheduler:
    """
    Schedule frames with loop.call_later() on an asyncio event loop.

    Args:
        interval: Wall-clock seconds between frames
        loop: Event loop to use; defaults to the running loop at request time
    """

    def __init__(self, interval: float = 0.02, loop: Optional[asyncio.AbstractEventLoop] = None):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._loop = loop

    def request_frame(self, callback: FrameCallback) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(self.interval, callback)

    def cancel_frame(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class ManualFrameScheduler:
    """
    Deterministic scheduler: nothing runs until advance() is called.

    Each frame runs the callbacks that were pending when the frame began;
    callbacks requested during a frame wait for the next one.
    """

    def __init__(self):
        self._pending: Dict[int, FrameCallback] = {}
        self._next_handle = 0
        self.frames_run = 0

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    @property
    def pending(self) -> List[FrameCallback]:
        """Callbacks waiting for the next frame, in request order."""
        return list(self._pending.values())

    def advance(self, frames: int = 1) -> int:
        """
        Run the given number of frames.

        Returns:
            How many callbacks were executed
        """
        executed = 0
        for _ in range(frames):
            batch = list(self._pending)
            for handle in batch:
                callback = self._pending.pop(handle, None)
                if callback is not None:
                    callback()
                    executed += 1
            self.frames_run += 1
        return executed
