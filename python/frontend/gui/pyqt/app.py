"""PyQt6 GUI frontend.

Tiles are painted into an offscreen ``QPixmap`` that the canvas widget blits
in ``paintEvent``.  A ``QTimer`` firing once per frame ticks the animation
controller.
"""

from __future__ import annotations

import logging
import sys

from PyQt6.QtCore import QRect, Qt, QTimer
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QPen, QPixmap
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from backend.config import PuzzleConfig
from backend.engine.gameplay import GamePlay

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_OVERLAY0 = "#6c7086"
_TILE = "#E54B4B"
_TILE_EDGE = "#FFFFFF"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_OVERLAY0}; }}
"""


# ═══════════════════════════════════════════════════════════════════════════
# Render collaborator
# ═══════════════════════════════════════════════════════════════════════════


class PixmapRenderer:
    """Draws tiles into a ``QPixmap``."""

    def __init__(self, pixmap: QPixmap, tile_size: int) -> None:
        self._pixmap = pixmap
        self._font = QFont("Arial", max(12, tile_size // 4), QFont.Weight.Bold)

    def render_tile(self, number: int, x: int, y: int, size: int) -> None:
        painter = QPainter(self._pixmap)
        try:
            rect = QRect(x, y, size, size)
            painter.fillRect(rect, QColor(_TILE))
            painter.setPen(QPen(QColor(_TILE_EDGE)))
            painter.drawRect(rect.adjusted(0, 0, -1, -1))
            painter.setFont(self._font)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(number))
        finally:
            painter.end()

    def clear_region(self, x: int, y: int, width: int, height: int) -> None:
        painter = QPainter(self._pixmap)
        try:
            painter.fillRect(QRect(x, y, width, height), QColor(_MANTLE))
        finally:
            painter.end()


# ═══════════════════════════════════════════════════════════════════════════
# Canvas
# ═══════════════════════════════════════════════════════════════════════════


class _Canvas(QWidget):
    """The puzzle board: pointer clicks in, pixmap out."""

    def __init__(self, config: PuzzleConfig) -> None:
        super().__init__()
        width = config.canvas_width
        self.setFixedSize(width, width)

        self._pixmap = QPixmap(width, width)
        self._pixmap.fill(QColor(_MANTLE))
        self.game = GamePlay.from_config(
            config, PixmapRenderer(self._pixmap, config.tile_size)
        )
        self.game.start()

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick)
        self._timer.start(max(1, 1000 // config.fps))

    # -- frame --

    def _tick(self) -> None:
        if self.game.animator.idle:
            return
        self.game.tick()
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:  # noqa: N802
        painter = QPainter(self)
        try:
            painter.drawPixmap(0, 0, self._pixmap)
        finally:
            painter.end()

    # -- input --

    def mousePressEvent(self, event: QMouseEvent | None) -> None:  # noqa: N802
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position().toPoint()
        self.game.click(self.game.cell_at_pixel(pos.x(), pos.y()))

    # -- actions --

    def scramble(self, count: int) -> None:
        self.game.scramble(count)
        self.update()

    def reset(self) -> None:
        self.game.reset()
        self.update()


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════


class _MainWindow(QMainWindow):
    def __init__(self, config: PuzzleConfig, scramble: bool) -> None:
        super().__init__()
        self._config = config.validate()

        self.setWindowTitle(f"Puzzle {config.size}×{config.size}")
        self.setStyleSheet(_GLOBAL_CSS)

        page = QWidget()
        page.setObjectName("page")
        root = QVBoxLayout(page)
        root.setSpacing(6)
        root.setContentsMargins(10, 10, 10, 10)

        self._canvas = _Canvas(config)
        root.addWidget(self._canvas, alignment=Qt.AlignmentFlag.AlignCenter)

        hint = QLabel("Click  slide     R  scramble     N  new     Esc  quit")
        hint.setFont(QFont("Helvetica", 11))
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(hint)

        self.setCentralWidget(page)

        if scramble:
            self._canvas.scramble(config.scramble_moves)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key == Qt.Key.Key_R:
            self._canvas.scramble(self._config.scramble_moves)
        elif key == Qt.Key.Key_N:
            self._canvas.reset()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: PuzzleConfig, scramble: bool = True) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config, scramble)
    window.show()
    log.debug("qt event loop starting")
    qapp.exec()
