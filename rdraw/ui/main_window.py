# File: rdraw/ui/main_window.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Ventana demo: pestaña FrameBuffer (set/regenerate/clear) y pestaña Formas.
# Notes: La escena de formas puede venir de un JSON (rdraw.core.serialization).
from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSize
from PySide6.QtWidgets import QLabel, QMainWindow, QStatusBar, QTabWidget

from rdraw.core.draw_style import Color, DrawStyle, Style
from rdraw.core.serialization import load_scene
from rdraw.core.shapes import Shape, UnitCircle, UnitSquare
from rdraw.core.transform import r, s, t
from rdraw.core.version import APP_NAME, APP_VERSION
from rdraw.ui.frame_buffer_view import FrameBufferPanel
from rdraw.ui.shapes_view import ShapesView
from rdraw.ui.size_readers import size_reader
from rdraw.utils.errors import RdrError
from rdraw.utils.log import get_logger

log = get_logger(__name__)


def demo_scene() -> list[Shape]:
    return [
        UnitSquare(DrawStyle(Style.FILLED, Color.MINT), [s(3, 3), t(-1.5, 0)]),
        UnitSquare(DrawStyle(Style.OUTLINE, Color.INDIGO), [s(2, 1), r(30), t(1.5, -1)]),
        UnitCircle(DrawStyle(Style.CLOSED_OUTLINE, Color.RED), [s(0.8, 0.8), t(1.5, 1.2)]),
    ]


class MainWindow(QMainWindow):
    def __init__(self, scene_path: str | Path | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
        self.resize(800, 700)

        self._tabs = QTabWidget(self)
        self.frame_buffer_panel = FrameBufferPanel(parent=self._tabs)
        self.shapes_view = ShapesView(self._load_scene(scene_path), parent=self._tabs)
        self._tabs.addTab(self.frame_buffer_panel, "FrameBuffer")
        self._tabs.addTab(self.shapes_view, "Formas")
        self.setCentralWidget(self._tabs)

        self._size_lbl = QLabel("", self)
        sb = QStatusBar(self)
        sb.addPermanentWidget(self._size_lbl)
        self.setStatusBar(sb)
        self._size_reader = size_reader(self.shapes_view, self._on_shapes_size)

    def _load_scene(self, scene_path: str | Path | None) -> list[Shape]:
        if not scene_path:
            return demo_scene()
        try:
            shapes = load_scene(scene_path)
            log.info("Escena cargada: %s (%d formas)", scene_path, len(shapes))
            return shapes
        except RdrError as e:
            log.warning("No se pudo cargar escena %s: %s", scene_path, e)
            return demo_scene()

    def _on_shapes_size(self, size: QSize) -> None:
        self._size_lbl.setText(f"{size.width()} x {size.height()}")
