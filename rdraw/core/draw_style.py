# File: rdraw/core/draw_style.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: Estilo de dibujo (trazo abierto/cerrado/relleno) + color con nombre.
# Notes:
#   - Los enums son str: el valor es el tag de texto (se serializa tal cual).
#   - parse() NO cae a un default: texto desconocido -> RdrDecodeError.
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from PySide6.QtGui import QColor

from rdraw.utils.errors import RdrDecodeError


class Style(str, Enum):
    """Cómo dibujar la forma.

    - path: contorno abierto (no cierra el último tramo)
    - closed: contorno cerrado (une el último punto con el primero)
    - filled: relleno del interior
    """

    OUTLINE = "path"
    CLOSED_OUTLINE = "closed"
    FILLED = "filled"

    @classmethod
    def parse(cls, v: object) -> "Style":
        return _parse_enum(cls, v)


# RGBA de los colores de sistema (modo claro).
_RGBA: dict[str, tuple[int, int, int, int]] = {
    "black": (0, 0, 0, 255),
    "blue": (0, 122, 255, 255),
    "brown": (162, 132, 94, 255),
    "clear": (0, 0, 0, 0),
    "cyan": (50, 173, 230, 255),
    "gray": (142, 142, 147, 255),
    "green": (52, 199, 89, 255),
    "indigo": (88, 86, 214, 255),
    "mint": (0, 199, 190, 255),
    "orange": (255, 149, 0, 255),
    "pink": (255, 45, 85, 255),
    "purple": (175, 82, 222, 255),
    "red": (255, 59, 48, 255),
    "teal": (48, 176, 199, 255),
    "white": (255, 255, 255, 255),
    "yellow": (255, 204, 0, 255),
}


class Color(str, Enum):
    BLACK = "black"
    BLUE = "blue"
    BROWN = "brown"
    CLEAR = "clear"
    CYAN = "cyan"
    GRAY = "gray"
    GREEN = "green"
    INDIGO = "indigo"
    MINT = "mint"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    TEAL = "teal"
    WHITE = "white"
    YELLOW = "yellow"

    @classmethod
    def parse(cls, v: object) -> "Color":
        return _parse_enum(cls, v)

    def rgba(self) -> tuple[int, int, int, int]:
        return _RGBA[self.value]

    def qcolor(self) -> QColor:
        rr, gg, bb, aa = self.rgba()
        return QColor(rr, gg, bb, aa)


def _parse_enum(cls, v: object):
    # Match exacto contra el tag (sin strip/lower: "Red" no es "red").
    if isinstance(v, cls):
        return v
    if isinstance(v, str):
        for m in cls:
            if m.value == v:
                return m
    raise RdrDecodeError(f"{cls.__name__} inválido: {v!r}")


@dataclass(frozen=True)
class DrawStyle:
    style: Style
    color: Color

    def to_dict(self) -> dict[str, Any]:
        return {"style": self.style.value, "color": self.color.value}

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DrawStyle":
        if not isinstance(d, dict):
            raise RdrDecodeError(f"draw_style inválido: {d!r}")
        return DrawStyle(style=Style.parse(d.get("style")), color=Color.parse(d.get("color")))
