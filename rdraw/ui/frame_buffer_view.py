# File: rdraw/ui/frame_buffer_view.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Preview de un FrameBuffer (QLabel) + panel con acciones set/regenerate/clear.
# Notes:
# - El view NO observa el buffer: muestra el último snapshot y solo cambia al pedir regenerate().
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from rdraw.core.buffers import Bitmap, FrameBuffer, PixelData
from rdraw.ui.size_readers import shared_width_using_max
from rdraw.utils.log import get_logger

log = get_logger(__name__)


class FrameBufferView(QLabel):
    """Muestra el snapshot (Bitmap) de un FrameBuffer."""

    def __init__(self, frame_buffer: FrameBuffer, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._fb = frame_buffer
        self._shown_version = -1
        self.setAlignment(Qt.AlignCenter)
        self.setMinimumSize(frame_buffer.width, frame_buffer.height)

    @property
    def frame_buffer(self) -> FrameBuffer:
        return self._fb

    @property
    def shown_version(self) -> int:
        return self._shown_version

    def show_bitmap(self, bmp: Bitmap) -> None:
        if bmp.version == self._shown_version:
            return
        self.setPixmap(QPixmap.fromImage(bmp.image))
        self._shown_version = bmp.version

    def regenerate(self) -> Bitmap:
        bmp = self._fb.generate_image()
        if bmp.placeholder:
            log.warning("FrameBufferView: mostrando placeholder (v%d)", bmp.version)
        self.show_bitmap(bmp)
        return bmp


class FrameBufferPanel(QWidget):
    """Preview + botones: pintar banda, regenerar y limpiar."""

    BAND_ROWS = range(45, 56)

    def __init__(self, frame_buffer: FrameBuffer | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.view = FrameBufferView(frame_buffer or FrameBuffer(500, 500, PixelData.CLEAR), self)

        root = QVBoxLayout(self)
        root.addWidget(self.view, 1)

        bar = QWidget(self)
        bl = QHBoxLayout(bar)
        bl.setContentsMargins(0, 0, 0, 0)

        self.btn_set = QPushButton("set", bar)
        self.btn_regenerate = QPushButton("regenerate", bar)
        self.btn_clear = QPushButton("clear", bar)
        buttons = (self.btn_set, self.btn_regenerate, self.btn_clear)
        for b in buttons:
            bl.addWidget(b)
        root.addWidget(bar, 0)

        # Mismo ancho para los tres botones (el del más ancho).
        self._shared_width = shared_width_using_max(
            buttons, lambda w: [b.setMinimumWidth(w or 0) for b in buttons]
        )

        self.btn_set.clicked.connect(self.paint_band)
        self.btn_regenerate.clicked.connect(self.view.regenerate)
        self.btn_clear.clicked.connect(self.clear)

        self.view.regenerate()

    def paint_band(self) -> None:
        """Pinta una banda azul; no se ve hasta regenerar."""
        fb = self.view.frame_buffer
        for row in self.BAND_ROWS:
            if row >= fb.height:
                break
            for col in range(fb.width):
                fb[row, col] = PixelData.BLUE

    def clear(self) -> None:
        self.view.frame_buffer.clear(PixelData.GREEN)
        self.view.regenerate()
