import math

import pytest

from noisekit.transformers.rotate_point import RotatePoint


class _Identity:
    """Source that hands back the point it was sampled at."""

    def get(self, point):
        return tuple(point)


def _norm(point):
    return math.sqrt(sum(c * c for c in point))


def test_defaults_are_zero_angles():
    rotate = RotatePoint(_Identity())
    assert (rotate.x_angle, rotate.y_angle, rotate.z_angle, rotate.u_angle) == (
        0.0,
        0.0,
        0.0,
        0.0,
    )


def test_zero_angles_leave_2d_point_unchanged():
    assert RotatePoint(_Identity()).get((1.5, -2.5)) == pytest.approx((1.5, -2.5))


def test_zero_angles_leave_3d_point_unchanged():
    assert RotatePoint(_Identity()).get((1.5, -2.5, 0.75)) == pytest.approx((1.5, -2.5, 0.75))


def test_2d_quarter_turn_around_z():
    result = RotatePoint(_Identity()).set_z_angle(90.0).get((1.0, 0.0))
    assert result == pytest.approx((0.0, 1.0), abs=1e-12)


def test_2d_rotation_ignores_other_axes():
    rotate = RotatePoint(_Identity()).set_angles(30.0, 60.0, 0.0, 10.0)
    assert rotate.get((0.3, 0.7)) == pytest.approx((0.3, 0.7))


def test_2d_rotation_round_trip():
    inner = RotatePoint(_Identity()).set_z_angle(-37.0)
    outer = RotatePoint(inner).set_z_angle(37.0)
    assert outer.get((0.4, -1.2)) == pytest.approx((0.4, -1.2))


@pytest.mark.parametrize("axis", ["x", "y", "z"])
def test_3d_single_axis_round_trip(axis):
    inner = RotatePoint(_Identity())
    outer = RotatePoint(inner)
    getattr(inner, f"set_{axis}_angle")(-52.0)
    getattr(outer, f"set_{axis}_angle")(52.0)
    assert outer.get((0.5, -1.25, 2.0)) == pytest.approx((0.5, -1.25, 2.0))


@pytest.mark.parametrize(
    "angles", [(10.0, 20.0, 30.0), (-45.0, 90.0, 135.0), (200.0, -15.0, 7.5)]
)
def test_3d_rotation_preserves_length(angles):
    point = (0.5, -1.25, 2.0)
    rotate = RotatePoint(_Identity()).set_angles(*angles, 0.0)
    assert _norm(rotate.get(point)) == pytest.approx(_norm(point))


def test_2d_rotation_preserves_length():
    point = (3.0, 4.0)
    rotate = RotatePoint(_Identity()).set_z_angle(123.0)
    assert _norm(rotate.get(point)) == pytest.approx(_norm(point))


def test_setters_chain_and_store():
    rotate = RotatePoint(_Identity())
    result = rotate.set_x_angle(1.0).set_y_angle(2.0).set_z_angle(3.0).set_u_angle(4.0)
    assert result is rotate
    assert (rotate.x_angle, rotate.y_angle, rotate.z_angle, rotate.u_angle) == (
        1.0,
        2.0,
        3.0,
        4.0,
    )


def test_set_angles_sets_every_axis():
    rotate = RotatePoint(_Identity()).set_angles(5.0, 6.0, 7.0, 8.0)
    assert (rotate.x_angle, rotate.y_angle, rotate.z_angle, rotate.u_angle) == (
        5.0,
        6.0,
        7.0,
        8.0,
    )


def test_4d_rotation_is_rejected():
    with pytest.raises(ValueError):
        RotatePoint(_Identity()).get((1.0, 2.0, 3.0, 4.0))


@pytest.mark.parametrize("point", [(1.0,), (1.0, 2.0, 3.0, 4.0, 5.0)])
def test_bad_dimensions_are_rejected(point):
    with pytest.raises(ValueError):
        RotatePoint(_Identity()).get(point)