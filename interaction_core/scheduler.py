"""
Delayed-callback primitives the engine relies on.

The engine never runs its own loop. It hands a delay and a callback to a
scheduler that belongs to the host event loop and later cancels the
returned token if the countdown must be abandoned.
"""

from __future__ import annotations

import asyncio
import itertools
from functools import partial
from typing import Callable, Dict, Optional, Protocol

from PySide6.QtCore import QObject, QTimer


class Scheduler(Protocol):
    """Single-shot delayed callback on the host event loop."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> object:
        ...

    def cancel(self, token: object) -> None:
        ...


class QtScheduler(QObject):
    """
    Scheduler backed by one single-shot ``QTimer`` per pending callback.

    Tokens are plain integers. A token is forgotten as soon as its timer
    fires or is cancelled, so cancelling twice or cancelling after the fire
    is harmless.
    """

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._ids = itertools.count(1)
        self._timers: Dict[int, QTimer] = {}

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> int:
        token = next(self._ids)
        timer = QTimer(self)
        timer.setSingleShot(True)
        timer.setInterval(max(0, int(delay_ms)))
        timer.timeout.connect(partial(self._fire, token, callback))  # type: ignore[arg-type]
        self._timers[token] = timer
        timer.start()
        return token

    def cancel(self, token: object) -> None:
        timer = self._timers.pop(token, None)  # type: ignore[arg-type]
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()

    def pending_count(self) -> int:
        return len(self._timers)

    def _fire(self, token: int, callback: Callable[[], None]) -> None:
        timer = self._timers.pop(token, None)
        if timer is None:
            # Cancelled after Qt had already queued the timeout.
            return
        timer.deleteLater()
        callback()


class AsyncioScheduler:
    """Scheduler for hosts that drive their UI from an asyncio loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(max(0, delay_ms) / 1000.0, callback)

    def cancel(self, token: object) -> None:
        if isinstance(token, asyncio.TimerHandle):
            token.cancel()
