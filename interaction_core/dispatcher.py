"""
Registry of live subscriptions and fan-out point for interaction signals.
"""

from __future__ import annotations

from typing import Dict, Optional

from loguru import logger

from .scheduler import QtScheduler, Scheduler
from .subscription import Callback, InteractionSubscription


class SubscriptionHandle:
    """Opaque handle returned by :meth:`InteractionDispatcher.subscribe`."""

    __slots__ = ("_dispatcher", "_subscription")

    def __init__(self, dispatcher: "InteractionDispatcher", subscription: InteractionSubscription) -> None:
        self._dispatcher = dispatcher
        self._subscription = subscription

    @property
    def removed(self) -> bool:
        return self._subscription not in self._dispatcher._subscriptions

    def remove(self) -> None:
        """Stop the subscription. Safe to call more than once."""
        self._dispatcher._remove(self._subscription)


class InteractionDispatcher:
    """
    Owns every live subscription for one UI scope.

    The host forwards each raw interaction to :meth:`notify_interaction`
    and calls :meth:`dispose_all` when the scope goes away.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None) -> None:
        self._scheduler: Scheduler = scheduler if scheduler is not None else QtScheduler()
        # Keys only; subscriptions hash by identity.
        self._subscriptions: Dict[InteractionSubscription, None] = {}

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    def subscribe(
        self,
        duration_ms: int,
        on_active: Optional[Callback] = None,
        on_inactive: Optional[Callback] = None,
    ) -> SubscriptionHandle:
        subscription = InteractionSubscription(
            duration_ms, on_active, on_inactive, scheduler=self._scheduler
        )
        subscription.refresh_timeout()
        self._subscriptions[subscription] = None
        logger.debug(
            "Subscribed for {} ms of inactivity ({} live).",
            subscription.duration_ms,
            len(self._subscriptions),
        )
        return SubscriptionHandle(self, subscription)

    def subscribe_for_activity(self, duration_ms: int, on_active: Optional[Callback]) -> SubscriptionHandle:
        return self.subscribe(duration_ms, on_active, None)

    def subscribe_for_inactivity(self, duration_ms: int, on_inactive: Optional[Callback]) -> SubscriptionHandle:
        return self.subscribe(duration_ms, None, on_inactive)

    def notify_interaction(self) -> None:
        """Fan one interaction signal out to every live subscription."""
        for subscription in list(self._subscriptions):
            # A callback earlier in this pass may have removed it.
            if subscription not in self._subscriptions:
                continue
            if not subscription.is_pending():
                subscription.active()
                if subscription not in self._subscriptions:
                    continue
            subscription.refresh_timeout()

    def dispose_all(self) -> None:
        """Cancel every timer and forget all subscriptions without callbacks."""
        subscriptions, self._subscriptions = self._subscriptions, {}
        for subscription in subscriptions:
            subscription.clear_timeout()
        if subscriptions:
            logger.debug("Disposed {} subscription(s).", len(subscriptions))

    def __len__(self) -> int:
        return len(self._subscriptions)

    def _remove(self, subscription: InteractionSubscription) -> None:
        subscription.clear_timeout()
        if subscription not in self._subscriptions:
            return
        del self._subscriptions[subscription]
        logger.debug("Removed subscription ({} live).", len(self._subscriptions))


def create_dispatcher(scheduler: Optional[Scheduler] = None) -> InteractionDispatcher:
    """Build a dispatcher bound to ``scheduler`` (a Qt scheduler by default)."""
    return InteractionDispatcher(scheduler)
