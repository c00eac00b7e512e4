# File: rdraw/core/transform.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Transformaciones 2D (rotación/escala/traslación) y su composición en un QTransform.
# Notes:
#   - El orden de la lista importa: T1 se aplica primero, luego T2, etc.
#   - Qt usa vectores fila: p' = p * M, por eso componemos result = result * elem.
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Union

from PySide6.QtCore import QPointF
from PySide6.QtGui import QTransform

from rdraw.utils.errors import RdrDecodeError


@dataclass(frozen=True)
class Rotate:
    """Rotación en grados (sentido de Qt: x hacia y)."""

    degrees: float

    def matrix(self) -> QTransform:
        rad = float(self.degrees) * math.pi / 180.0
        c = math.cos(rad)
        s = math.sin(rad)
        return QTransform(c, s, -s, c, 0.0, 0.0)

    def to_dict(self) -> dict[str, Any]:
        return {"r": float(self.degrees)}


@dataclass(frozen=True)
class Scale:
    sx: float
    sy: float

    def matrix(self) -> QTransform:
        return QTransform.fromScale(float(self.sx), float(self.sy))

    def to_dict(self) -> dict[str, Any]:
        return {"s": [float(self.sx), float(self.sy)]}


@dataclass(frozen=True)
class Translate:
    tx: float
    ty: float

    def matrix(self) -> QTransform:
        return QTransform.fromTranslate(float(self.tx), float(self.ty))

    def to_dict(self) -> dict[str, Any]:
        return {"t": [float(self.tx), float(self.ty)]}


Transform = Union[Rotate, Scale, Translate]


# Atajos con los nombres cortos de siempre: r(45), s(2, 2), t(10, 0)
def r(degrees: float) -> Rotate:
    return Rotate(float(degrees))


def s(sx: float, sy: float) -> Scale:
    return Scale(float(sx), float(sy))


def t(tx: float, ty: float) -> Translate:
    return Translate(float(tx), float(ty))


def combined(transforms: Iterable[Transform]) -> QTransform:
    """Aplica las transformaciones en el orden en que están en la lista.

    Sin validación: NaN/inf se propagan por la aritmética de la matriz.
    """
    result = QTransform()
    for tfm in transforms:
        result = result * tfm.matrix()
    return result


def map_point(transform: QTransform, x: float, y: float) -> tuple[float, float]:
    p = transform.map(QPointF(float(x), float(y)))
    return p.x(), p.y()


def transform_from_dict(d: Any) -> Transform:
    """Inverso de `to_dict`: {"r": deg} | {"s": [sx, sy]} | {"t": [tx, ty]}."""
    if not isinstance(d, dict) or len(d) != 1:
        raise RdrDecodeError(f"Transform inválido: {d!r}")
    (key, value), = d.items()
    try:
        if key == "r":
            return r(_as_number(value))
        if key in ("s", "t"):
            if not isinstance(value, (list, tuple)) or len(value) != 2:
                raise RdrDecodeError(f"Transform {key!r}: se esperaban 2 valores, llegó {value!r}")
            a, b = (_as_number(v) for v in value)
            return s(a, b) if key == "s" else t(a, b)
    except TypeError as e:
        raise RdrDecodeError(f"Transform {key!r}: valor inválido {value!r}") from e
    raise RdrDecodeError(f"Transform desconocido: {key!r}")


def _as_number(v: Any) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"no numérico: {v!r}")
    return float(v)


class Transformable:
    """Cualquier tipo con `transforms` obtiene `transform` (la composición en orden)."""

    transforms: Sequence[Transform]

    @property
    def transform(self) -> QTransform:
        return combined(self.transforms)
