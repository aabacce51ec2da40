"""
Entry point for the interaction monitor demo window.
"""

from __future__ import annotations

import sys
from typing import Optional

import typer
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QApplication, QLabel, QVBoxLayout, QWidget

from interaction_core.interaction_state import InteractionState
from interaction_core.provider import InteractionProvider
from interaction_core.settings import MonitorSettingsManager
from interaction_monitor import logger as app_logger

_LOGGER = app_logger.get_logger()
_ACTIVE_STYLE = "font-size: 18px; color: #202020;"
_IDLE_STYLE = "font-size: 18px; color: #a0a0a0;"


class DemoWindow(QWidget):
    """Label that dims after the configured idle period."""

    def __init__(self, timeout_override_ms: Optional[int] = None) -> None:
        super().__init__()
        self.setWindowTitle("Interaction Monitor")
        self.resize(360, 160)

        self._label = QLabel()
        self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout = QVBoxLayout(self)
        layout.addWidget(self._label)

        settings = MonitorSettingsManager().read_settings()
        self.provider = InteractionProvider(self, settings=settings, parent=self)
        timeout_ms = timeout_override_ms if timeout_override_ms is not None else settings.default_timeout_ms
        self.state = InteractionState(self.provider.dispatcher, timeout_ms, parent=self)
        self.state.activeChanged.connect(self._render)
        self._timeout_ms = timeout_ms
        self._render(self.state.active)

    def showEvent(self, event) -> None:  # noqa: N802 - Qt override
        super().showEvent(event)
        self.provider.init()
        self.state.attach()

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self.state.detach()
        self.provider.teardown()
        super().closeEvent(event)

    def _render(self, active: bool) -> None:
        if active:
            _LOGGER.info("User is interacting.")
            self._label.setText("Active")
            self._label.setStyleSheet(_ACTIVE_STYLE)
        else:
            _LOGGER.info("No interaction for {} ms.", self._timeout_ms)
            self._label.setText("Idle - move the mouse or press a key")
            self._label.setStyleSheet(_IDLE_STYLE)


cli = typer.Typer(add_completion=False, help="Show a window that dims when the user stops interacting.")


@cli.command()
def run(
    timeout_ms: Optional[int] = typer.Option(
        None,
        "--timeout-ms",
        min=0,
        help="Milliseconds without input before the window counts as idle. Defaults to the stored setting.",
    ),
) -> None:
    """Launch the demo window."""
    app_logger.configure()
    _LOGGER.info("Starting interaction monitor demo.")
    app = QApplication(sys.argv[:1])
    window = DemoWindow(timeout_ms)
    window.show()
    exit_code = app.exec()
    if exit_code:
        raise typer.Exit(exit_code)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
