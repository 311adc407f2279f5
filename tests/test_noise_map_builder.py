import math

import pytest

from noisekit.noise_map_builder import (
    CylinderMapBuilder,
    NoiseMapBuilder,
    PlaneMapBuilder,
    SphereMapBuilder,
    lat_lon_to_xyz,
)


class Recorder:
    def __init__(self, value=0.25):
        self.value = value
        self.points = []

    def get(self, point):
        self.points.append(tuple(point))
        return self.value


class Coordinate:
    def __init__(self, axis):
        self.axis = axis

    def get(self, point):
        return point[self.axis]


def test_plane_defaults():
    builder = PlaneMapBuilder(Recorder())
    assert builder.size == (100, 100)
    assert builder.x_bounds == (-1.0, 1.0)
    assert builder.y_bounds == (-1.0, 1.0)
    assert builder.is_seamless is False


def test_set_size_chains_and_updates():
    builder = PlaneMapBuilder(Recorder())
    assert builder.set_size(7, 3) is builder
    assert builder.size == (7, 3)


def test_plane_constant_source_fills_map():
    source = Recorder(0.25)
    noise_map = PlaneMapBuilder(source).set_size(5, 4).build()
    assert noise_map.size == (5, 4)
    assert all(noise_map.get_value(x, y) == 0.25 for x in range(5) for y in range(4))
    assert len(source.points) == 20


def test_plane_samples_start_at_lower_bounds_on_zero_plane():
    source = Recorder()
    builder = PlaneMapBuilder(source).set_x_bounds(2.0, 6.0).set_y_bounds(-3.0, 5.0)
    builder.set_size(4, 2).build()
    assert source.points[0] == (2.0, -3.0, 0.0)
    assert all(z == 0.0 for _, _, z in source.points)
    assert all(2.0 <= x < 6.0 and -3.0 <= y < 5.0 for x, y, _ in source.points)


def test_plane_values_increase_along_row():
    noise_map = PlaneMapBuilder(Coordinate(0)).set_size(6, 2).build()
    row = [noise_map.get_value(x, 1) for x in range(6)]
    assert row == sorted(row)
    assert len(set(row)) == 6


def test_plane_seamless_constant_source_and_call_count():
    source = Recorder(0.5)
    builder = PlaneMapBuilder(source).set_is_seamless(True).set_size(3, 3)
    noise_map = builder.build()
    assert builder.is_seamless is True
    assert all(noise_map.get_value(x, y) == pytest.approx(0.5) for x in range(3) for y in range(3))
    assert len(source.points) == 4 * 9


def test_plane_seamless_edges_match_across_tile():
    source = Coordinate(0)
    seamless = PlaneMapBuilder(source).set_is_seamless(True).set_size(4, 1).build()
    flat = PlaneMapBuilder(source).set_size(4, 1).build()
    assert seamless.get_value(0, 0) != flat.get_value(0, 0)


def test_zero_size_build_is_empty_and_samples_nothing():
    source = Recorder()
    noise_map = SphereMapBuilder(source).set_size(0, 10).build()
    assert noise_map.size == (0, 0)
    assert source.points == []


def test_oversized_build_raises():
    with pytest.raises(ValueError):
        PlaneMapBuilder(Recorder()).set_size(40_000, 1).build()


def test_set_source_module_switches_source():
    first, second = Recorder(1.0), Recorder(-1.0)
    builder = PlaneMapBuilder(first).set_size(2, 2)
    assert builder.set_source_module(second) is builder
    noise_map = builder.build()
    assert builder.source_module is second
    assert first.points == []
    assert noise_map.get_value(1, 1) == -1.0


def test_cylinder_defaults_and_swapped_bounds():
    builder = CylinderMapBuilder(Recorder())
    assert builder.angle_bounds == (-90.0, 90.0)
    assert builder.height_bounds == (-1.0, 1.0)
    with pytest.warns(UserWarning):
        builder.set_angle_bounds(30.0, -30.0)
    with pytest.warns(UserWarning):
        builder.set_height_bounds(2.0, -2.0)
    assert builder.angle_bounds == (-30.0, 30.0)
    assert builder.height_bounds == (-2.0, 2.0)


def test_cylinder_points_lie_on_unit_circle():
    source = Recorder()
    CylinderMapBuilder(source).set_height_bounds(-0.5, 0.5).set_size(8, 3).build()
    assert len(source.points) == 24
    for x, y, z in source.points:
        assert x * x + z * z == pytest.approx(1.0)
        assert -0.5 <= y < 0.5


def test_sphere_points_have_unit_length():
    source = Recorder()
    SphereMapBuilder(source).set_bounds(-60.0, 60.0, -180.0, 180.0).set_size(6, 5).build()
    assert len(source.points) == 30
    assert all(math.hypot(*p) == pytest.approx(1.0) for p in source.points)


def test_sphere_bounds_setters():
    builder = SphereMapBuilder(Recorder())
    assert builder.latitude_bounds == (-1.0, 1.0)
    builder.set_bounds(-10.0, 10.0, -20.0, 20.0)
    assert builder.latitude_bounds == (-10.0, 10.0)
    assert builder.longitude_bounds == (-20.0, 20.0)
    builder.set_latitude_bounds(-5.0, 5.0).set_longitude_bounds(0.0, 90.0)
    assert builder.latitude_bounds == (-5.0, 5.0)
    assert builder.longitude_bounds == (0.0, 90.0)


def test_lat_lon_to_xyz_reference_points():
    assert lat_lon_to_xyz(0.0, 0.0) == pytest.approx((1.0, 0.0, 0.0))
    assert lat_lon_to_xyz(90.0, 0.0) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_base_builder_is_abstract():
    with pytest.raises(TypeError):
        NoiseMapBuilder(Recorder())