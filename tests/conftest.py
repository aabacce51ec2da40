"""Shared test fixtures."""

import heapq
import itertools
import os
import tempfile

# Must be set before any project module configures logging or Qt.
os.environ.setdefault("INTERACTION_MONITOR_LOG_DIR", tempfile.mkdtemp(prefix="interaction-monitor-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402


class ManualScheduler:
    """Deterministic scheduler driven by an explicit clock."""

    def __init__(self):
        self.now = 0
        self._ids = itertools.count(1)
        self._queue = []
        self._cancelled = set()
        self.scheduled = 0

    def schedule(self, delay_ms, callback):
        token = next(self._ids)
        heapq.heappush(self._queue, (self.now + delay_ms, token, callback))
        self.scheduled += 1
        return token

    def cancel(self, token):
        self._cancelled.add(token)

    def pending(self):
        return sum(1 for _, token, _ in self._queue if token not in self._cancelled)

    def advance(self, ms):
        """Move the clock forward, firing due timers in order."""
        target = self.now + ms
        while self._queue and self._queue[0][0] <= target:
            due, token, callback = heapq.heappop(self._queue)
            self.now = due
            if token in self._cancelled:
                continue
            callback()
        self.now = target

    def advance_to(self, when):
        self.advance(when - self.now)

    def fire_cancelled(self):
        """Deliver every cancelled timer anyway, like a late host scheduler."""
        for _, token, callback in list(self._queue):
            if token in self._cancelled:
                callback()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def dispatcher(scheduler):
    from interaction_core import create_dispatcher

    return create_dispatcher(scheduler)


class Recorder:
    """Callable that logs the clock time of each call."""

    def __init__(self, scheduler):
        self._scheduler = scheduler
        self.calls = []

    def __call__(self):
        self.calls.append(self._scheduler.now)

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def recorder(scheduler):
    return lambda: Recorder(scheduler)


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app
