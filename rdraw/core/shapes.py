# File: rdraw/core/shapes.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Formas unitarias (cuadrado y círculo) dibujables con draw_path.
# Notes: Las transforms se aplican en el orden de la lista.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence, Union

from PySide6.QtCore import QPointF, QRectF
from PySide6.QtGui import QPainter, QPainterPath

from rdraw.core.draw_style import DrawStyle
from rdraw.core.drawable import RenderOp, draw_path
from rdraw.core.transform import Transform, Transformable, transform_from_dict
from rdraw.utils.errors import RdrSchemaError


@dataclass(frozen=True)
class UnitSquare(Transformable):
    """Cuadrado de lado 1 centrado en (0, 0)."""

    draw_style: DrawStyle
    transforms: Sequence[Transform] = field(default_factory=tuple)

    kind = "square"

    def __post_init__(self) -> None:
        object.__setattr__(self, "transforms", tuple(self.transforms))

    @property
    def path(self) -> QPainterPath:
        p = QPainterPath(QPointF(-0.5, -0.5))
        p.lineTo(-0.5, 0.5)
        p.lineTo(0.5, 0.5)
        p.lineTo(0.5, -0.5)
        p.lineTo(-0.5, -0.5)
        return p

    def draw(self, painter: QPainter) -> RenderOp:
        return draw_path(self, painter)


@dataclass(frozen=True)
class UnitCircle(Transformable):
    """Círculo de radio 1 centrado en (0, 0).

    Ojo: es más grande que UnitSquare; para que sean similares haría falta radio 0.5.
    """

    draw_style: DrawStyle
    transforms: Sequence[Transform] = field(default_factory=tuple)

    kind = "circle"

    def __post_init__(self) -> None:
        object.__setattr__(self, "transforms", tuple(self.transforms))

    @property
    def path(self) -> QPainterPath:
        p = QPainterPath()
        p.addEllipse(QRectF(-1.0, -1.0, 2.0, 2.0))
        return p

    def draw(self, painter: QPainter) -> RenderOp:
        return draw_path(self, painter)


Shape = Union[UnitSquare, UnitCircle]

SHAPE_KINDS: dict[str, type] = {
    UnitSquare.kind: UnitSquare,
    UnitCircle.kind: UnitCircle,
}


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    return {
        "kind": shape.kind,
        "draw_style": shape.draw_style.to_dict(),
        "transforms": [tfm.to_dict() for tfm in shape.transforms],
    }


def shape_from_dict(d: dict[str, Any]) -> Shape:
    if not isinstance(d, dict):
        raise RdrSchemaError("Forma inválida: se esperaba dict")
    kind = d.get("kind")
    cls = SHAPE_KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise RdrSchemaError(f"Forma: kind inválido: {kind!r}")

    t_raw = d.get("transforms") or []
    if not isinstance(t_raw, list):
        raise RdrSchemaError(f"Forma {kind!r}: transforms inválido")
    return cls(
        draw_style=DrawStyle.from_dict(d.get("draw_style")),
        transforms=[transform_from_dict(x) for x in t_raw],
    )
