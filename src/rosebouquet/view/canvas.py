"""
Roses Canvas Widget
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from rosebouquet import config
from rosebouquet.controller.animation import AnimationController
from rosebouquet.view.qt_surface import QPainterSurface


def canvas_size_for(available_width: float, available_height: float) -> tuple[int, int]:
    """Canvas dimensions for the available screen area, capped at 1000x600."""
    width = min(available_width * config.CANVAS_WIDTH_FRACTION, config.CANVAS_MAX_WIDTH)
    height = min(available_height * config.CANVAS_HEIGHT_FRACTION, config.CANVAS_MAX_HEIGHT)
    return int(width), int(height)


class RosesCanvas(QWidget):
    """Fixed-size widget that paints the controller's bouquet on every frame."""

    def __init__(self, controller: AnimationController, size: QSize, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setFixedSize(size)
        self.controller.frame_requested.connect(self.update)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            surface = QPainterSurface(painter, self.width(), self.height())
            self.controller.paint(surface)
        finally:
            painter.end()
