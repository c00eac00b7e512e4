# File: rdraw/core/buffers.py
# Project: RusticDraw (RDW)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-17
# Purpose: FrameBuffer (pixeles ARGB -> QImage) y ZBuffer (profundidad por pixel).
# Notes:
# - Layout fijo: 8 bits por canal, A,R,G,B por pixel, row-major, sin padding.
# - La imagen es un snapshot versionado: NO se actualiza sola al escribir pixeles;
#   el caller llama generate_image() cuando quiere ver los cambios.
# - Índices fuera de rango -> RdrIndexError (fail-fast, no se corrompe memoria).
from __future__ import annotations

import logging
import sys
from array import array
from dataclasses import dataclass
from typing import ClassVar

from PySide6.QtGui import QImage

from rdraw.core.version import DEFAULT_DEPTH
from rdraw.render.placeholder import warning_image
from rdraw.utils.errors import RdrIndexError, RdrValidationError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PixelData:
    """Color de un pixel (alpha primero, como se guarda en el buffer)."""

    a: int
    r: int
    g: int
    b: int

    RED: ClassVar["PixelData"]
    ORANGE: ClassVar["PixelData"]
    YELLOW: ClassVar["PixelData"]
    GREEN: ClassVar["PixelData"]
    BLUE: ClassVar["PixelData"]
    INDIGO: ClassVar["PixelData"]
    VIOLET: ClassVar["PixelData"]
    BLACK: ClassVar["PixelData"]
    WHITE: ClassVar["PixelData"]
    CLEAR: ClassVar["PixelData"]

    def __post_init__(self) -> None:
        for name in ("a", "r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
                raise RdrValidationError(f"PixelData.{name} fuera de rango (0..255): {v!r}")

    def to_bytes(self) -> bytes:
        return bytes((self.a, self.r, self.g, self.b))

    @staticmethod
    def from_bytes(raw: bytes | bytearray | memoryview) -> "PixelData":
        return PixelData(a=raw[0], r=raw[1], g=raw[2], b=raw[3])


# Colores de ejemplo
PixelData.RED = PixelData(a=255, r=200, g=0, b=0)
PixelData.ORANGE = PixelData(a=255, r=255, g=165, b=0)
PixelData.YELLOW = PixelData(a=255, r=255, g=255, b=0)
PixelData.GREEN = PixelData(a=255, r=0, g=200, b=0)
PixelData.BLUE = PixelData(a=255, r=0, g=0, b=200)
PixelData.INDIGO = PixelData(a=255, r=75, g=0, b=130)
PixelData.VIOLET = PixelData(a=255, r=160, g=32, b=240)
PixelData.BLACK = PixelData(a=255, r=0, g=0, b=0)
PixelData.WHITE = PixelData(a=255, r=255, g=255, b=255)
PixelData.CLEAR = PixelData(a=0, r=0, g=0, b=0)


@dataclass(frozen=True)
class Bitmap:
    """Snapshot de un FrameBuffer.

    - version: 0 = nunca generado; +1 por cada generate_image().
    - placeholder: True si la conversión falló y `image` es el "warning".
    """

    image: QImage
    version: int = 0
    placeholder: bool = False


def _check_size(width: int, height: int) -> tuple[int, int]:
    w = int(width)
    h = int(height)
    if w < 0 or h < 0:
        raise RdrValidationError(f"Tamaño inválido: {w}x{h}")
    return w, h


class FrameBuffer:
    """Buffer de pixeles para crear una imagen pixel a pixel.

    Uso típico:
        fb = FrameBuffer(200, 100, PixelData.WHITE)
        fb[10, 20] = PixelData.BLUE
        bmp = fb.generate_image()   # QImage ARGB32 premultiplied en bmp.image
    """

    def __init__(self, width: int, height: int, color: PixelData = PixelData.CLEAR) -> None:
        self._width, self._height = _check_size(width, height)
        self._pixels = bytearray(color.to_bytes() * (self._width * self._height))
        self._bitmap = Bitmap(QImage())
        # Contadores para saber si el snapshot quedó viejo.
        self._writes = 0
        self._writes_at_snapshot = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bitmap(self) -> Bitmap:
        return self._bitmap

    @property
    def image(self) -> QImage:
        return self._bitmap.image

    @property
    def stale(self) -> bool:
        """True si hubo escrituras desde el último generate_image()."""
        return self._writes != self._writes_at_snapshot

    def clear(self, color: PixelData = PixelData.CLEAR) -> None:
        """Setea cada pixel a `color`."""
        self._pixels[:] = color.to_bytes() * (self._width * self._height)
        self._writes += 1

    def set_pixel(self, row: int, col: int, color: PixelData) -> None:
        i = self._offset(row, col)
        self._pixels[i : i + 4] = color.to_bytes()
        self._writes += 1

    def get_pixel(self, row: int, col: int) -> PixelData:
        i = self._offset(row, col)
        return PixelData.from_bytes(self._pixels[i : i + 4])

    # fb[row, col] / fb[row, col] = PixelData
    def __getitem__(self, key: tuple[int, int]) -> PixelData:
        row, col = key
        return self.get_pixel(row, col)

    def __setitem__(self, key: tuple[int, int], color: PixelData) -> None:
        row, col = key
        self.set_pixel(row, col, color)

    def pixel_bytes(self) -> bytes:
        """Copia de los bytes crudos (A,R,G,B por pixel, row-major)."""
        return bytes(self._pixels)

    def generate_image(self) -> Bitmap:
        """Genera la imagen desde los pixeles y la publica como nuevo snapshot.

        Si la conversión falla, se usa el placeholder "warning" (no se propaga el error).
        """
        try:
            img = self._image_from_pixel_data()
        except Exception:
            log.warning("FrameBuffer %dx%d: conversión a QImage falló", self._width, self._height, exc_info=True)
            img = None

        placeholder = img is None
        if placeholder:
            log.warning("FrameBuffer %dx%d: se usa placeholder", self._width, self._height)
            img = warning_image()

        self._bitmap = Bitmap(image=img, version=self._bitmap.version + 1, placeholder=placeholder)
        self._writes_at_snapshot = self._writes
        return self._bitmap

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise RdrIndexError(f"Pixel fuera de rango: ({row}, {col}) en {self._width}x{self._height}")
        return (row * self._width + col) * 4

    def _image_from_pixel_data(self) -> QImage | None:
        w, h = self._width, self._height
        if w <= 0 or h <= 0:
            return None

        # Format_ARGB32_Premultiplied es un uint32 0xAARRGGBB en orden nativo:
        # en little-endian los bytes quedan B,G,R,A.
        src = self._pixels
        if sys.byteorder == "little":
            buf = bytearray(len(src))
            buf[0::4] = src[3::4]
            buf[1::4] = src[2::4]
            buf[2::4] = src[1::4]
            buf[3::4] = src[0::4]
            data = bytes(buf)
        else:
            data = bytes(src)

        img = QImage(data, w, h, w * 4, QImage.Format_ARGB32_Premultiplied)
        if img.isNull():
            return None
        # copy(): el QImage no es dueño de `data`.
        return img.copy()


class ZBuffer:
    """Z de pixel más cercano, para z-test manual."""

    def __init__(self, width: int, height: int, value: float = DEFAULT_DEPTH) -> None:
        self._width, self._height = _check_size(width, height)
        self._buffer = array("d", [float(value)]) * (self._width * self._height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def clear(self, value: float = DEFAULT_DEPTH) -> None:
        """Setea todas las posiciones a `value`."""
        self._buffer = array("d", [float(value)]) * (self._width * self._height)

    def get(self, row: int, col: int) -> float:
        return self._buffer[self._offset(row, col)]

    def set(self, row: int, col: int, value: float) -> None:
        self._buffer[self._offset(row, col)] = float(value)

    def test_and_set(self, row: int, col: int, z: float) -> bool:
        """Guarda `z` solo si es más cercano (menor) que el actual. Devuelve si lo guardó."""
        i = self._offset(row, col)
        if float(z) < self._buffer[i]:
            self._buffer[i] = float(z)
            return True
        return False

    # zb[row, col] / zb[row, col] = 0.5
    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self.set(row, col, value)

    def _offset(self, row: int, col: int) -> int:
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise RdrIndexError(f"Z fuera de rango: ({row}, {col}) en {self._width}x{self._height}")
        return row * self._width + col
