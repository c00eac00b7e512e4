from __future__ import annotations

from dataclasses import dataclass

import pytest
from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPainterPath, QPen, QTransform

from rdraw.core.draw_style import Color, DrawStyle, Style
from rdraw.core.drawable import Drawable, PathDrawable, RenderOp, draw_path, path_render_op
from rdraw.core.shapes import UnitCircle, UnitSquare
from rdraw.core.transform import Transformable, s, t


def _canvas(n: int = 100) -> QImage:
    img = QImage(n, n, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)
    return img


def _row_coverage(img: QImage, y: int) -> int:
    return sum(1 for x in range(img.width()) if QColor.fromRgba(img.pixel(x, y)).alpha() > 0)


def _first_point(op: RenderOp) -> tuple[float, float]:
    e = op.path.elementAt(0)
    return e.x, e.y


@dataclass(frozen=True)
class _OpenV(Transformable):
    draw_style: DrawStyle
    transforms: tuple = ()

    @property
    def path(self) -> QPainterPath:
        p = QPainterPath(QPointF(-1.0, 1.0))
        p.lineTo(0.0, -1.0)
        p.lineTo(1.0, 1.0)
        return p

    def draw(self, painter: QPainter) -> RenderOp:
        return draw_path(self, painter)


def test_shapes_satisfy_the_contracts() -> None:
    sq = UnitSquare(DrawStyle(Style.OUTLINE, Color.BLACK))
    assert isinstance(sq, PathDrawable)
    assert isinstance(sq, Drawable)


def test_shape_transform_applies_before_context_transform() -> None:
    sq = UnitSquare(DrawStyle(Style.OUTLINE, Color.BLACK), [t(1, 0)])
    op = path_render_op(sq, QTransform.fromScale(10, 10))
    # (-0.5, -0.5) -> t(1, 0) -> (0.5, -0.5) -> x10
    assert _first_point(op) == pytest.approx((5.0, -5.0))


def test_outline_and_closed_are_strokes_filled_is_fill() -> None:
    for style, kind in ((Style.OUTLINE, "stroke"), (Style.CLOSED_OUTLINE, "stroke"), (Style.FILLED, "fill")):
        op = path_render_op(UnitCircle(DrawStyle(style, Color.BLUE)))
        assert op.kind == kind
        assert op.color == Color.BLUE.qcolor()

    filled = path_render_op(UnitSquare(DrawStyle(Style.FILLED, Color.RED)))
    assert filled.path.fillRule() == Qt.WindingFill


def test_closed_outline_closes_the_open_path() -> None:
    # Un "V" abierto: el contorno cerrado agrega el tramo de vuelta al inicio.
    open_op = path_render_op(_OpenV(DrawStyle(Style.OUTLINE, Color.BLACK)))
    closed_op = path_render_op(_OpenV(DrawStyle(Style.CLOSED_OUTLINE, Color.BLACK)))

    assert open_op.path.elementCount() == 3
    assert closed_op.path.elementCount() == 4
    last = closed_op.path.elementAt(3)
    assert (last.x, last.y) == _first_point(closed_op) == (-1.0, 1.0)

    end = open_op.path.elementAt(2)
    assert (end.x, end.y) == (1.0, 1.0)


def test_draw_restores_painter_state(qapp) -> None:
    img = _canvas()
    p = QPainter(img)
    try:
        p.translate(50, 50)
        p.scale(40, 40)
        before = p.worldTransform()
        UnitSquare(DrawStyle(Style.FILLED, Color.BLACK)).draw(p)
        assert p.worldTransform() == before
    finally:
        p.end()


def test_filled_square_covers_its_interior(qapp) -> None:
    img = _canvas()
    p = QPainter(img)
    try:
        draw_path(UnitSquare(DrawStyle(Style.FILLED, Color.BLACK), [s(40, 40), t(50, 50)]), p)
    finally:
        p.end()
    center = QColor.fromRgba(img.pixel(50, 50))
    corner = QColor.fromRgba(img.pixel(5, 5))
    assert center.alpha() == 255 and center.red() == 0
    assert corner.alpha() == 0


def test_stroke_width_does_not_scale_with_the_shape(qapp) -> None:
    line_width = 2.0

    # Escala en la forma.
    a = _canvas()
    p = QPainter(a)
    try:
        draw_path(
            UnitSquare(DrawStyle(Style.CLOSED_OUTLINE, Color.BLACK), [s(60, 60), t(50, 50)]),
            p,
            line_width=line_width,
        )
    finally:
        p.end()

    # Misma geometría, escala en el contexto.
    b = _canvas()
    p = QPainter(b)
    try:
        p.translate(50, 50)
        p.scale(60, 60)
        draw_path(UnitSquare(DrawStyle(Style.CLOSED_OUTLINE, Color.BLACK)), p, line_width=line_width)
    finally:
        p.end()

    assert _row_coverage(a, 50) == _row_coverage(b, 50)
    # Dos bordes verticales de ~2 px cada uno.
    assert 2 <= _row_coverage(a, 50) <= 6

    # Contraste: trazar con el transform del painter escala el grosor.
    d = _canvas()
    p = QPainter(d)
    try:
        p.translate(50, 50)
        p.scale(60, 60)
        pen = QPen(QColor(0, 0, 0))
        pen.setWidthF(line_width)
        p.strokePath(UnitSquare(DrawStyle(Style.OUTLINE, Color.BLACK)).path, pen)
    finally:
        p.end()
    assert _row_coverage(d, 50) > 6 * _row_coverage(a, 50)


def test_default_line_width_comes_from_settings(qapp, monkeypatch: pytest.MonkeyPatch) -> None:
    def coverage(width: str) -> int:
        monkeypatch.setenv("RDRAW_LINE_WIDTH", width)
        img = _canvas()
        p = QPainter(img)
        try:
            draw_path(UnitSquare(DrawStyle(Style.OUTLINE, Color.BLACK), [s(60, 60), t(50, 50)]), p)
        finally:
            p.end()
        return _row_coverage(img, 50)

    assert coverage("8") > coverage("1")
