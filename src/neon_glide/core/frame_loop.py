"""One-shot frame callbacks, in the spirit of requestAnimationFrame.

At most one callback is pending. The engine runs it once per frame; a callback
that wants the next frame must request it again. `cancel()` guarantees the
revoked callback never runs.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

FrameCallback = Callable[[float], None]


class FrameScheduler:
    def __init__(self) -> None:
        self._pending: Optional[Tuple[int, FrameCallback]] = None
        self._next_handle = 1

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending = (handle, callback)
        return handle

    def cancel(self, handle: Optional[int] = None) -> None:
        """Revoke the pending callback (only if it matches `handle`, when given)."""
        if self._pending is None:
            return
        if handle is None or self._pending[0] == handle:
            self._pending = None

    def run_pending(self, timestamp_ms: float) -> bool:
        """Run the pending callback, if any. Returns True if one ran."""
        if self._pending is None:
            return False
        _, callback = self._pending
        self._pending = None
        callback(timestamp_ms)
        return True


__all__ = ["FrameCallback", "FrameScheduler"]
