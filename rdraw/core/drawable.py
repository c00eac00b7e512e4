# File: rdraw/core/drawable.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Contratos Drawable/PathDrawable + render de un path con su estilo contra un QPainter.
# Notes:
#   - Primero la transform de la forma y después la del painter; luego el painter vuelve a identidad.
#   - Se transforman los puntos del path: si se usara el transform del painter,
#     el grosor del trazo también escalaría con la forma.
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, Sequence, runtime_checkable

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen, QTransform

from rdraw.core import settings
from rdraw.core.draw_style import DrawStyle, Style
from rdraw.core.transform import Transform

RenderKind = Literal["stroke", "fill"]


@runtime_checkable
class Drawable(Protocol):
    def draw(self, painter: QPainter) -> None: ...


@runtime_checkable
class PathDrawable(Protocol):
    """Lo necesario para dibujar un path con estilo, color y transforms."""

    draw_style: DrawStyle
    transforms: Sequence[Transform]

    @property
    def path(self) -> QPainterPath: ...

    @property
    def transform(self) -> QTransform: ...


@dataclass(frozen=True)
class RenderOp:
    """Operación lista para ejecutar: el path ya está en coordenadas de dispositivo."""

    kind: RenderKind
    path: QPainterPath
    color: QColor


def path_render_op(shape: PathDrawable, base: QTransform | None = None) -> RenderOp:
    """Arma la operación de dibujo de `shape` bajo el transform `base` (el del contexto)."""
    tfm = shape.transform * (base if base is not None else QTransform())
    p = tfm.map(shape.path)
    color = shape.draw_style.color.qcolor()

    style = shape.draw_style.style
    if style is Style.CLOSED_OUTLINE:
        p.closeSubpath()
        return RenderOp("stroke", p, color)
    if style is Style.FILLED:
        # Regla non-zero (winding) para el interior.
        p.setFillRule(Qt.WindingFill)
        return RenderOp("fill", p, color)
    return RenderOp("stroke", p, color)


def apply_render_op(painter: QPainter, op: RenderOp, *, line_width: float | None = None) -> None:
    """Ejecuta `op` con el painter en identidad; el estado del painter se restaura al salir."""
    lw = settings.line_width() if line_width is None else float(line_width)

    painter.save()
    try:
        painter.resetTransform()
        painter.setRenderHint(QPainter.Antialiasing, settings.antialias())
        if op.kind == "fill":
            painter.fillPath(op.path, QBrush(op.color))
        else:
            pen = QPen(op.color)
            pen.setWidthF(lw)
            painter.strokePath(op.path, pen)
    finally:
        painter.restore()


def draw_path(shape: PathDrawable, painter: QPainter, *, line_width: float | None = None) -> RenderOp:
    """Dibuja `shape` usando path, draw_style y transforms. Devuelve la operación emitida."""
    op = path_render_op(shape, painter.combinedTransform())
    apply_render_op(painter, op, line_width=line_width)
    return op
