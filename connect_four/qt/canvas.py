"""Qt canvas: intrinsic raster image shown scaled inside a widget."""

from __future__ import annotations

import logging

from connect_four.app.controller import SessionController
from connect_four.app.events import PointerPressed
from connect_four.ui.geometry import Rect

try:
    from PyQt6.QtCore import QRectF, Qt
    from PyQt6.QtGui import QColor, QImage, QMouseEvent, QPainter, QPen
    from PyQt6.QtWidgets import QSizePolicy, QWidget
except Exception as exc:  # pragma: no cover
    raise RuntimeError("PyQt6 is required for the UI. Install dependency 'PyQt6'.") from exc

logger = logging.getLogger(__name__)

BACKGROUND = "#ffffff"
BORDER = "#000000"


class ImagePainterContext:
    """Drawing context writing straight into a QImage."""

    def __init__(self, image: QImage) -> None:
        self._image = image

    def clear_rect(self, rect: Rect) -> None:
        painter = QPainter(self._image)
        painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
        painter.fillRect(_to_qrect(rect), Qt.GlobalColor.transparent)
        painter.end()

    def fill_ellipse(self, rect: Rect, color: str) -> None:
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(color))
        painter.drawEllipse(_to_qrect(rect))
        painter.end()


class CanvasSurface:
    """Render surface over a canvas widget's backing image."""

    def __init__(self, canvas: GameCanvas) -> None:
        self._canvas = canvas

    @property
    def height(self) -> int:
        return self._canvas.image.height()

    @property
    def width(self) -> int:
        return self._canvas.image.width()

    def display_rect(self) -> Rect:
        return self._canvas.display_rect()

    def context(self) -> ImagePainterContext:
        return ImagePainterContext(self._canvas.image)


class GameCanvas(QWidget):
    """Shows the board image letterboxed into the widget and forwards clicks."""

    def __init__(
        self,
        controller: SessionController,
        intrinsic_width: int,
        intrinsic_height: int,
        *,
        debug_input: bool = False,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._debug_input = debug_input
        self.image = QImage(intrinsic_width, intrinsic_height, QImage.Format.Format_ARGB32_Premultiplied)
        self.image.fill(Qt.GlobalColor.transparent)
        self.surface = CanvasSurface(self)
        self.setMinimumSize(intrinsic_width // 4, intrinsic_height // 4)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

    def display_rect(self) -> Rect:
        """Return where the image is shown, in widget coordinates."""
        img_w = float(self.image.width())
        img_h = float(self.image.height())
        w = max(1.0, float(self.width()))
        h = max(1.0, float(self.height()))
        scale = min(w / img_w, h / img_h)
        shown_w = img_w * scale
        shown_h = img_h * scale
        return Rect(x=(w - shown_w) * 0.5, y=(h - shown_h) * 0.5, w=shown_w, h=shown_h)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        del event
        target = _to_qrect(self.display_rect())
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)
        painter.fillRect(target, QColor(BACKGROUND))
        painter.drawImage(target, self.image)
        painter.setPen(QPen(QColor(BORDER), 1))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(target)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        x = event.position().x()
        y = event.position().y()
        if self._debug_input:
            logger.debug("input_click x=%.1f y=%.1f display=%s", x, y, self.display_rect())
        if self._controller.handle_pointer_input(PointerPressed(x=x, y=y)):
            self.update()


def _to_qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.w, rect.h)
