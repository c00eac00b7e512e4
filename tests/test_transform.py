from __future__ import annotations

import math

import pytest

from rdraw.core.transform import (
    Rotate,
    Scale,
    Transformable,
    Translate,
    combined,
    map_point,
    r,
    s,
    t,
    transform_from_dict,
)
from rdraw.utils.errors import RdrDecodeError


def _approx(p: tuple[float, float], q: tuple[float, float]) -> None:
    assert p[0] == pytest.approx(q[0], abs=1e-9)
    assert p[1] == pytest.approx(q[1], abs=1e-9)


def test_empty_list_is_identity() -> None:
    m = combined([])
    assert m.isIdentity()
    _approx(map_point(m, 3.5, -7.25), (3.5, -7.25))


def test_rotate_90_maps_x_axis_to_y_axis() -> None:
    _approx(map_point(combined([r(90)]), 1.0, 0.0), (0.0, 1.0))


def test_list_order_is_application_order() -> None:
    rotate_then_move = combined([r(90), t(1, 0)])
    move_then_rotate = combined([t(1, 0), r(90)])

    _approx(map_point(rotate_then_move, 1.0, 0.0), (1.0, 1.0))
    _approx(map_point(move_then_rotate, 1.0, 0.0), (0.0, 2.0))


def test_scale_and_inverse_scale_round_trip() -> None:
    _approx(map_point(combined([s(2, 2), s(0.5, 0.5)]), 3.0, 4.0), (3.0, 4.0))


def test_non_uniform_scale_then_translate() -> None:
    _approx(map_point(combined([s(2, 3), t(10, -1)]), 1.0, 1.0), (12.0, 2.0))


def test_nan_propagates_unchecked() -> None:
    m = combined([s(float("nan"), 1.0)])
    assert math.isnan(m.m11())


def test_shortcuts_build_value_types() -> None:
    assert r(45) == Rotate(45.0)
    assert s(1, 2) == Scale(1.0, 2.0)
    assert t(3, 4) == Translate(3.0, 4.0)
    assert r(45) != r(46)


def test_transformable_composes_its_list() -> None:
    class Marker(Transformable):
        def __init__(self) -> None:
            self.transforms = [s(10, 10), t(5, 0)]

    _approx(map_point(Marker().transform, 1.0, 1.0), (15.0, 10.0))


@pytest.mark.parametrize("tfm", [r(30), s(2, 0.5), t(-1, 7)])
def test_transform_dict_round_trip(tfm) -> None:
    assert transform_from_dict(tfm.to_dict()) == tfm


@pytest.mark.parametrize(
    "raw",
    [
        {"x": 1},
        {"s": [1]},
        {"t": "1,2"},
        {"r": "90"},
        {"r": True},
        {"r": 1, "s": [1, 1]},
        [1, 2],
    ],
)
def test_transform_from_dict_rejects_garbage(raw) -> None:
    with pytest.raises(RdrDecodeError):
        transform_from_dict(raw)
