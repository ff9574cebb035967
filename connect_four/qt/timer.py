"""QTimer-backed task scheduler for the Qt event loop."""

from __future__ import annotations

import logging

from connect_four.app.ports import TaskCallback

try:
    from PyQt6.QtCore import QObject, QTimer
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)


class QtTimerScheduler:
    """One-shot callbacks on the GUI thread, cancellable by task id."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._next_task_id = 1
        self._timers: dict[int, QTimer] = {}

    @property
    def queued_task_count(self) -> int:
        return len(self._timers)

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(task_id, callback))
        self._timers[task_id] = timer
        timer.start(max(0, round(delay_seconds * 1000.0)))
        return task_id

    def cancel(self, task_id: int) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()
        logger.debug("qt_task_cancelled task=%d", task_id)

    def cancel_all(self) -> None:
        for task_id in list(self._timers):
            self.cancel(task_id)

    def _fire(self, task_id: int, callback: TaskCallback) -> None:
        timer = self._timers.pop(task_id, None)
        if timer is None:
            return
        timer.deleteLater()
        callback()
