"""
QSettings-backed configuration for the interaction monitor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger
from PySide6.QtCore import QSettings

ORGANIZATION_NAME = "InteractionMonitor"
APPLICATION_NAME = "Core"
DEFAULT_TIMEOUT_MS = 60 * 1000
_MIN_TIMEOUT_MS = 0
_MAX_TIMEOUT_MS = 24 * 60 * 60 * 1000

_KEY_DEFAULT_TIMEOUT = "DefaultTimeoutMs"
_KEY_CAPTURE_MOVES = "CaptureMoves"


@dataclass(eq=True)
class MonitorSettings:
    default_timeout_ms: int = DEFAULT_TIMEOUT_MS
    capture_moves: bool = True


class MonitorSettingsManager:
    """Loads persisted settings and clamps invalid data."""

    def __init__(self, store: Optional[Any] = None) -> None:
        self._store = store if store is not None else QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    def read_settings(self) -> MonitorSettings:
        return MonitorSettings(
            default_timeout_ms=self._read_timeout(),
            capture_moves=self._read_bool(_KEY_CAPTURE_MOVES, True),
        )

    def write_settings(self, settings: MonitorSettings) -> None:
        self._store.setValue(_KEY_DEFAULT_TIMEOUT, int(settings.default_timeout_ms))
        self._store.setValue(_KEY_CAPTURE_MOVES, bool(settings.capture_moves))
        self._store.sync()

    def _read_timeout(self) -> int:
        raw = self._read_value(_KEY_DEFAULT_TIMEOUT)
        if raw is None:
            return DEFAULT_TIMEOUT_MS
        try:
            value = int(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparsable default timeout {!r}.", raw)
            return DEFAULT_TIMEOUT_MS
        if value < _MIN_TIMEOUT_MS or value > _MAX_TIMEOUT_MS:
            logger.warning(
                "Invalid default timeout {} found in settings. Clamping to safe bounds.",
                value,
            )
        return max(_MIN_TIMEOUT_MS, min(_MAX_TIMEOUT_MS, value))

    def _read_bool(self, name: str, default: bool) -> bool:
        raw = self._read_value(name)
        if raw is None:
            return default
        if isinstance(raw, bool):
            return raw
        # INI-backed stores hand values back as strings.
        text = str(raw).strip().lower()
        if text in {"true", "1", "yes", "on"}:
            return True
        if text in {"false", "0", "no", "off"}:
            return False
        logger.warning("Ignoring unparsable value {!r} for {}.", raw, name)
        return default

    def _read_value(self, name: str) -> Optional[Any]:
        if not self._store.contains(name):
            return None
        return self._store.value(name)
