"""
Main Application Window
=======================
The window that holds the intro page and the roses canvas.

Why is this file needed?
------------------------
1. Layout: It stacks the intro page (message + "Open" button) and the canvas.
2. Routing: The button is the only trigger in the application; it fades the
   intro out, then builds the bouquet and starts the frame drive.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QSize, QPropertyAnimation
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QPushButton, QStackedWidget,
    QGraphicsOpacityEffect
)

from rosebouquet import config
from rosebouquet.controller.animation import AnimationController
from rosebouquet.view.canvas import RosesCanvas, canvas_size_for

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Rose Bouquet"


class MainWindow(QMainWindow):
    def __init__(self, controller: Optional[AnimationController] = None) -> None:
        super().__init__()
        self.controller = controller if controller is not None else AnimationController(parent=self)
        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- CANVAS SIZE (looked up once) ---
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            available = screen.availableGeometry().size()
            width, height = canvas_size_for(available.width(), available.height())
        else:
            width, height = config.CANVAS_MAX_WIDTH, config.CANVAS_MAX_HEIGHT

        # --- MAIN CONTAINER ---
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self.setStyleSheet(f"QMainWindow {{ background-color: {config.BACKGROUND_COLOR}; }}")

        # --- 1. INTRO PAGE ---
        self.intro_page = QWidget()
        intro_layout = QVBoxLayout(self.intro_page)
        intro_layout.addStretch()

        title = QLabel("A bouquet for you")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("font-size: 28px; font-weight: bold; color: #ff3366;")
        intro_layout.addWidget(title)

        message = QLabel("Press the button to open it.")
        message.setAlignment(Qt.AlignCenter)
        message.setStyleSheet("font-size: 16px; color: #555555;")
        intro_layout.addWidget(message)

        self.btn_open = QPushButton("Open")
        self.btn_open.setMinimumHeight(40)
        self.btn_open.clicked.connect(self.on_open_clicked)
        intro_layout.addWidget(self.btn_open, alignment=Qt.AlignCenter)
        intro_layout.addStretch()

        self._intro_effect = QGraphicsOpacityEffect(self.intro_page)
        self._intro_effect.setOpacity(1.0)
        self.intro_page.setGraphicsEffect(self._intro_effect)

        self._fade = QPropertyAnimation(self._intro_effect, b"opacity", self)
        self._fade.setDuration(config.INTRO_FADE_MS)
        self._fade.setStartValue(1.0)
        self._fade.setEndValue(0.0)
        self._fade.finished.connect(self.open_bouquet)

        # --- 2. CANVAS PAGE ---
        self.canvas_page = QWidget()
        canvas_layout = QVBoxLayout(self.canvas_page)
        self.canvas = RosesCanvas(self.controller, QSize(width, height))
        canvas_layout.addWidget(self.canvas, alignment=Qt.AlignCenter)

        self.stack.addWidget(self.intro_page)  # Index 0
        self.stack.addWidget(self.canvas_page)  # Index 1

        self.resize(width + 40, height + 40)

    # --- SLOTS ---

    def on_open_clicked(self) -> None:
        self.btn_open.setEnabled(False)
        self._fade.start()

    def open_bouquet(self) -> None:
        """Show the canvas, (re)build the bouquet and start the animation."""
        self.stack.setCurrentWidget(self.canvas_page)
        bouquet = self.controller.start(self.canvas.width(), self.canvas.height())
        logger.debug(f"Canvas shown with {len(bouquet)} roses.")

    def closeEvent(self, event) -> None:
        self.controller.stop()
        super().closeEvent(event)
