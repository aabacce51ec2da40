"""
Active/inactive flags for widgets that change appearance when idle.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from .dispatcher import InteractionDispatcher, SubscriptionHandle


class InteractionState(QObject):
    """
    Mirrors one subscription as a pair of booleans.

    Starts out active. ``activeChanged`` carries the new value of
    :attr:`active` and is only emitted when it actually flips.
    """

    activeChanged = Signal(bool)

    def __init__(
        self,
        dispatcher: InteractionDispatcher,
        duration_ms: int,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._dispatcher = dispatcher
        self._duration_ms = duration_ms
        self._active = True
        self._handle: Optional[SubscriptionHandle] = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def inactive(self) -> bool:
        return not self._active

    @property
    def attached(self) -> bool:
        return self._handle is not None

    def attach(self) -> None:
        if self._handle is not None:
            return
        self._handle = self._dispatcher.subscribe(
            self._duration_ms, self._mark_active, self._mark_inactive
        )

    def detach(self) -> None:
        if self._handle is None:
            return
        self._handle.remove()
        self._handle = None

    def _mark_active(self) -> None:
        self._set_active(True)

    def _mark_inactive(self) -> None:
        self._set_active(False)

    def _set_active(self, value: bool) -> None:
        if self._active == value:
            return
        self._active = value
        self.activeChanged.emit(value)
