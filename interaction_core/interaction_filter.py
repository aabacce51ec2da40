"""
Qt event filter turning raw user input into interaction signals.
"""

from __future__ import annotations

from typing import Callable, FrozenSet, Optional, Tuple

import shiboken6
from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget

_START_EVENTS = frozenset(
    {
        QEvent.Type.MouseButtonPress,
        QEvent.Type.MouseButtonDblClick,
        QEvent.Type.KeyPress,
        QEvent.Type.Wheel,
        QEvent.Type.TouchBegin,
    }
)
_MOVE_EVENTS = frozenset(
    {
        QEvent.Type.MouseMove,
        QEvent.Type.TouchUpdate,
    }
)

_EventKey = Tuple[int, QEvent.Type, int]


class InteractionFilter(QObject):
    """
    Reports one interaction per raw input event without consuming it.

    Installed on the application so that events reaching any widget are
    seen; deliveries to the underlying ``QWindow`` are skipped because Qt
    hands every such event on to a widget. With a ``scope`` widget only
    events aimed at that widget or one of its descendants are reported.

    Qt offers an input event the target widget ignored to each parent in
    turn. Those repeats carry the same event object and go to an ancestor
    of the widget that was last reported, and are not counted again. Two
    separate events are always counted, even with equal timestamps.
    """

    def __init__(
        self,
        on_interaction: Callable[[], None],
        *,
        scope: Optional[QWidget] = None,
        capture_moves: bool = True,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._on_interaction = on_interaction
        self._scope = scope
        self._monitored = _START_EVENTS | _MOVE_EVENTS if capture_moves else _START_EVENTS
        self._last_key: Optional[_EventKey] = None
        self._propagation_path: FrozenSet[int] = frozenset()

    @property
    def capture_moves(self) -> bool:
        return _MOVE_EVENTS <= self._monitored

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if event.type() in self._monitored and isinstance(watched, QWidget) and self._in_scope(watched):
            key = _event_key(event)
            if not (key == self._last_key and shiboken6.getCppPointer(watched)[0] in self._propagation_path):
                self._last_key = key
                self._propagation_path = _parent_chain(watched)
                self._on_interaction()
        return super().eventFilter(watched, event)

    def _in_scope(self, watched: QWidget) -> bool:
        if self._scope is None or watched is self._scope:
            return True
        return self._scope.isAncestorOf(watched)


def _event_key(event: QEvent) -> _EventKey:
    timestamp = getattr(event, "timestamp", None)
    stamp = int(timestamp()) if callable(timestamp) else -1
    return shiboken6.getCppPointer(event)[0], event.type(), stamp


def _parent_chain(widget: QWidget) -> FrozenSet[int]:
    """Pointers of the widgets Qt may hand an ignored event on to."""
    pointers = set()
    current = widget
    while not current.isWindow():
        current = current.parentWidget()
        if current is None:
            break
        pointers.add(shiboken6.getCppPointer(current)[0])
    return frozenset(pointers)
