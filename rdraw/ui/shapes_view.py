# File: rdraw/ui/shapes_view.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Widget que dibuja una lista de Drawables con origen al centro y unidades escaladas.
# Notes: El grosor del trazo no escala con `units_px` (lo resuelve draw_path).
from __future__ import annotations

from typing import Iterable

from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from rdraw.core.drawable import Drawable


def paint_drawables(painter: QPainter, drawables: Iterable[Drawable]) -> int:
    n = 0
    for d in drawables:
        d.draw(painter)
        n += 1
    return n


class ShapesView(QWidget):
    def __init__(self, drawables: Iterable[Drawable] = (), *, units_px: float = 40.0, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._drawables = list(drawables)
        self._units_px = float(units_px)
        self.setMinimumSize(200, 200)

    def set_drawables(self, drawables: Iterable[Drawable]) -> None:
        self._drawables = list(drawables)
        self.update()

    def drawables(self) -> list[Drawable]:
        return list(self._drawables)

    def paintEvent(self, event: QPaintEvent) -> None:  # pragma: no cover (UI)
        p = QPainter(self)
        try:
            p.fillRect(self.rect(), QColor(245, 245, 245))
            p.translate(self.width() / 2.0, self.height() / 2.0)
            p.scale(self._units_px, self._units_px)
            paint_drawables(p, self._drawables)
        finally:
            p.end()
