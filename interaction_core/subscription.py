"""
A single timed observer of the interaction signal stream.
"""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Callable, Optional

from loguru import logger

from .errors import validate_duration
from .scheduler import Scheduler

Callback = Callable[[], None]


class SubscriptionStatus(Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class InteractionSubscription:
    """
    Owns one countdown and the pair of callbacks fired on state changes.

    The subscription starts out pending: it has neither gone idle nor been
    promoted to active. Only a subscription that has left the pending state
    can report a return to activity, which keeps the very first interaction
    after subscribing from looking like a resumption.
    """

    def __init__(
        self,
        duration_ms: int,
        on_active: Optional[Callback] = None,
        on_inactive: Optional[Callback] = None,
        *,
        scheduler: Scheduler,
    ) -> None:
        self._duration_ms = validate_duration(duration_ms)
        self._on_active = on_active
        self._on_inactive = on_inactive
        self._scheduler = scheduler
        self._status = SubscriptionStatus.PENDING
        self._timer_token: Optional[object] = None
        self._generation = 0

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def status(self) -> SubscriptionStatus:
        return self._status

    @property
    def has_timer(self) -> bool:
        return self._timer_token is not None

    def refresh_timeout(self) -> None:
        """Restart the countdown from now, replacing any outstanding timer."""
        self.clear_timeout()
        generation = self._generation
        self._timer_token = self._scheduler.schedule(
            self._duration_ms, partial(self._on_timeout, generation)
        )

    def clear_timeout(self) -> None:
        """Cancel the outstanding timer without touching the status."""
        token = self._timer_token
        if token is None:
            return
        self._timer_token = None
        self._generation += 1
        self._scheduler.cancel(token)

    def active(self) -> None:
        """Promote to active, firing the activity callback once per period."""
        if self._status is SubscriptionStatus.ACTIVE:
            return
        logger.debug("Subscription ({} ms) became active.", self._duration_ms)
        self._status = SubscriptionStatus.ACTIVE
        if self._on_active is not None:
            self._on_active()

    def is_pending(self) -> bool:
        return self._status is SubscriptionStatus.PENDING

    def _on_timeout(self, generation: int) -> None:
        # A replaced or cancelled timer may still be delivered by the host.
        if generation != self._generation or self._timer_token is None:
            return
        self._generation += 1
        self._timer_token = None
        logger.debug("Subscription ({} ms) went inactive.", self._duration_ms)
        self._status = SubscriptionStatus.INACTIVE
        if self._on_inactive is not None:
            self._on_inactive()

    def __repr__(self) -> str:
        return f"InteractionSubscription(duration_ms={self._duration_ms}, status={self._status.name})"
