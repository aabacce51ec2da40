"""
Logging setup for the interaction monitor application.

The engine in :mod:`interaction_core` logs through loguru but stays silent
until an application opts in. :func:`configure` is that opt-in: it owns the
process sinks, so only an entry point such as ``interaction_monitor.main``
may call it. Hosts embedding the engine keep their own sinks and can call
``logger.enable("interaction_core")`` themselves instead.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

ENGINE_PACKAGE = "interaction_core"
LOG_DIR = Path(
    os.environ.get(
        "INTERACTION_MONITOR_LOG_DIR",
        str(Path.home() / ".interaction_monitor" / "logs"),
    )
)
DEFAULT_LOG_PATH = LOG_DIR / "monitor.log"

_LOG_INITIALISED = False


def configure(log_path: Optional[Path] = None, *, console_level: str = "INFO") -> Path:
    """
    Replace the process sinks with console + rotating file output.

    Runs once per process and returns the log file in use; later calls are
    ignored and return the same path.
    """
    global _LOG_INITIALISED, _ACTIVE_LOG_PATH
    if _LOG_INITIALISED:
        return _ACTIVE_LOG_PATH
    target = Path(log_path) if log_path is not None else DEFAULT_LOG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    if sys.stderr is not None:
        _logger.add(sys.stderr, level=console_level)
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        backtrace=True,
        diagnose=False,
    )
    _logger.enable(ENGINE_PACKAGE)
    _ACTIVE_LOG_PATH = target
    _LOG_INITIALISED = True
    return target


def is_configured() -> bool:
    return _LOG_INITIALISED


def get_logger():
    """Return the shared logger without touching its sinks."""
    return _logger


_ACTIVE_LOG_PATH: Path = DEFAULT_LOG_PATH
