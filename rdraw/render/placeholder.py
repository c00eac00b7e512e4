# File: rdraw/render/placeholder.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Imagen placeholder "warning" cuando un FrameBuffer no se puede convertir a imagen.
# Notes:
# - Solo paths (sin texto): no depende de fuentes instaladas (offscreen/CI).
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen

from rdraw.core import settings


def warning_image(size_px: int | None = None) -> QImage:
    """Cuadrado con borde y un triángulo de advertencia con '!'."""
    n = settings.placeholder_px() if size_px is None else max(16, int(size_px))

    img = QImage(n, n, QImage.Format_ARGB32_Premultiplied)
    img.fill(QColor(0, 0, 0, 0))

    p = QPainter(img)
    p.setRenderHint(QPainter.Antialiasing, True)

    # fondo suave
    p.fillRect(0, 0, n, n, QColor(50, 50, 50, 255))

    # borde
    pen = QPen(QColor(110, 110, 110, 255))
    pen.setWidth(2)
    p.setPen(pen)
    p.drawRect(1, 1, n - 2, n - 2)

    # triángulo
    m = n * 0.18
    tri = QPainterPath(QPointF(n / 2.0, m))
    tri.lineTo(n - m, n - m)
    tri.lineTo(m, n - m)
    tri.closeSubpath()
    p.fillPath(tri, QColor(230, 170, 40, 255))

    # '!' (barra + punto)
    bar_w = max(2.0, n * 0.08)
    bar = QRectF(n / 2.0 - bar_w / 2.0, n * 0.38, bar_w, n * 0.26)
    p.fillRect(bar, QColor(40, 40, 40, 255))
    dot = QPainterPath()
    dot.addEllipse(QPointF(n / 2.0, n * 0.72), bar_w * 0.6, bar_w * 0.6)
    p.fillPath(dot, QColor(40, 40, 40, 255))

    p.end()
    return img
