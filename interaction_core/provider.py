"""
Scope object wiring a widget subtree to one interaction dispatcher.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger
from PySide6.QtCore import QCoreApplication, QObject
from PySide6.QtWidgets import QWidget

from .dispatcher import InteractionDispatcher, SubscriptionHandle, create_dispatcher
from .interaction_filter import InteractionFilter
from .scheduler import QtScheduler, Scheduler
from .settings import MonitorSettings
from .subscription import Callback


class InteractionProvider(QObject):
    """
    Owns the dispatcher and the input filter for one widget subtree.

    Nothing happens on construction. The host calls :meth:`init` once the
    scope is shown and :meth:`teardown` when it goes away; components that
    need to observe inactivity are handed :attr:`dispatcher` explicitly.
    """

    def __init__(
        self,
        scope: Optional[QWidget] = None,
        *,
        settings: Optional[MonitorSettings] = None,
        scheduler: Optional[Scheduler] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or MonitorSettings()
        self._dispatcher = create_dispatcher(scheduler if scheduler is not None else QtScheduler(self))
        self._filter = InteractionFilter(
            self._dispatcher.notify_interaction,
            scope=scope,
            capture_moves=self._settings.capture_moves,
            parent=self,
        )
        self._installed_on: Optional[QCoreApplication] = None

    @property
    def dispatcher(self) -> InteractionDispatcher:
        return self._dispatcher

    @property
    def settings(self) -> MonitorSettings:
        return self._settings

    @property
    def is_initialised(self) -> bool:
        return self._installed_on is not None

    def init(self) -> None:
        """Start forwarding user input to the dispatcher."""
        if self._installed_on is not None:
            return
        app = QCoreApplication.instance()
        if app is None:
            raise RuntimeError("InteractionProvider.init() requires a running Qt application.")
        app.installEventFilter(self._filter)
        self._installed_on = app
        logger.info(
            "Interaction monitoring started (default timeout {} ms, moves captured: {}).",
            self._settings.default_timeout_ms,
            self._settings.capture_moves,
        )

    def teardown(self) -> None:
        """Stop forwarding input and dispose every subscription silently."""
        if self._installed_on is not None:
            self._installed_on.removeEventFilter(self._filter)
            self._installed_on = None
            logger.info("Interaction monitoring stopped.")
        self._dispatcher.dispose_all()

    def watch(
        self,
        on_active: Optional[Callback] = None,
        on_inactive: Optional[Callback] = None,
        timeout_ms: Optional[int] = None,
    ) -> SubscriptionHandle:
        """Subscribe with the configured default timeout unless one is given."""
        duration = self._settings.default_timeout_ms if timeout_ms is None else timeout_ms
        return self._dispatcher.subscribe(duration, on_active, on_inactive)

    def notify_interaction(self) -> None:
        """Report an interaction that did not arrive through Qt input events."""
        self._dispatcher.notify_interaction()
