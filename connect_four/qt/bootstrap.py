"""QApplication setup and Qt frontend assembly."""

from __future__ import annotations

from connect_four.app.controller import SessionController
from connect_four.app.frontend import FrontendBundle
from connect_four.infra.config import AppConfig
from connect_four.qt.timer import QtTimerScheduler
from connect_four.qt.window import MainWindow, QtFrontendWindow

try:
    from PyQt6.QtWidgets import QApplication
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc


def create_qt_application() -> QApplication:
    """Return the process-wide QApplication, creating it on first use."""
    app = QApplication.instance()
    if isinstance(app, QApplication):
        return app
    return QApplication([])


def create_qt_frontend(
    controller: SessionController,
    config: AppConfig,
    scheduler: QtTimerScheduler | None = None,
) -> FrontendBundle:
    """Build the main window and the hooks that run and stop the Qt loop."""
    app = create_qt_application()
    app.setStyleSheet(
        """
        QWidget { font-size: 16px; }
        QPushButton { padding: 6px 14px; }
        """
    )
    window = QtFrontendWindow(MainWindow(controller, config, scheduler))
    shutdown = scheduler.cancel_all if scheduler is not None else _no_timers
    return FrontendBundle(window=window, run_event_loop=lambda: app.exec(), shutdown=shutdown)


def _no_timers() -> None:
    return None
