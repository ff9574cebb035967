"""Main Qt window: status line, board canvas, and new-game button."""

from __future__ import annotations

from connect_four.app.controller import SessionController
from connect_four.app.status import active_owner
from connect_four.core.models import GameState, GameStatus
from connect_four.infra.config import AppConfig
from connect_four.qt.canvas import GameCanvas
from connect_four.qt.timer import QtTimerScheduler
from connect_four.ui.board_renderer import OWNER_COLORS

try:
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QCloseEvent
    from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QPushButton, QVBoxLayout, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

_INDICATOR_SIZE = 16


class MainWindow(QMainWindow):
    def __init__(
        self,
        controller: SessionController,
        config: AppConfig,
        scheduler: QtTimerScheduler | None = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._scheduler = scheduler
        width, height = config.canvas_size
        self._canvas = GameCanvas(controller, width, height, debug_input=config.debug_input)

        self._status = QLabel("")
        self._status.setStyleSheet("font-size: 18px;")
        self._indicator = QLabel()
        self._indicator.setFixedSize(_INDICATOR_SIZE, _INDICATOR_SIZE)
        self._new_game = QPushButton("New Game")
        self._new_game.clicked.connect(self._on_new_game)

        status_row = QHBoxLayout()
        status_row.addWidget(self._status)
        status_row.addWidget(self._indicator)
        status_row.addStretch(1)
        status_row.addWidget(self._new_game)

        title = QLabel("Connect 4")
        title.setStyleSheet("font-size: 28px; font-weight: bold;")

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(title)
        layout.addLayout(status_row)
        layout.addWidget(self._canvas, 1)
        self.setCentralWidget(root)
        self.setWindowTitle("Connect 4")

        controller.set_state_listener(self._on_state_changed)
        controller.bind_surface(self._canvas.surface)

    def sync_ui(self) -> None:
        state = self._controller.current_state
        self._status.setText(self._controller.status_text())
        if state is not None and state.status is GameStatus.ONGOING:
            color = OWNER_COLORS[active_owner(state.turn_parity)]
            self._indicator.setStyleSheet(
                f"background: {color}; border-radius: {_INDICATOR_SIZE // 2}px; border: 1px solid #999999;"
            )
            self._indicator.show()
        else:
            self._indicator.hide()
        self._canvas.update()

    def _on_state_changed(self, state: GameState) -> None:
        del state
        self.sync_ui()
        # Paint now: the automated reply is computed right after a human commit.
        self.repaint()

    def _on_new_game(self) -> None:
        self._controller.restart()
        self.sync_ui()

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        self._controller.close()
        if self._scheduler is not None:
            self._scheduler.cancel_all()
        super().closeEvent(event)


class QtFrontendWindow:
    """FrontendWindow adapter over the Qt main window."""

    def __init__(self, window: MainWindow) -> None:
        self._window = window

    def show_windowed(self, width: int, height: int) -> None:
        self._window.resize(width, height)
        self._window.setWindowState(Qt.WindowState.WindowNoState)
        self._window.show()

    def sync_ui(self) -> None:
        self._window.sync_ui()
