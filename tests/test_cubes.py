import random

import pytest

from pvrkit.cubes import (
    MAX_CUBES,
    Cube,
    CubeField,
    face_colors,
    random_between,
    scale_factors,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_random_between_bounds():
    assert random_between(_FixedRng(0.0), -3.0, 3.0) == -3.0
    assert random_between(_FixedRng(1.0), -3.0, 3.0) == 3.0


def test_random_between_in_range():
    rng = random.Random(1)
    values = [random_between(rng, 0.1, 0.5) for _ in range(100)]
    assert all(0.1 <= v <= 0.5 for v in values)


def test_scale_factors_shape():
    factors = scale_factors(MAX_CUBES)
    assert len(factors) == MAX_CUBES
    assert factors[0] == 0.05
    assert all(a < b for a, b in zip(factors, factors[1:]))
    assert factors[-1] < 0.4


def test_scale_factors_rejects_zero():
    with pytest.raises(ValueError):
        scale_factors(0)


def test_face_colors():
    colors = face_colors()
    assert len(colors) == 24
    assert colors[:4] == [(255, 0, 0, 128)] * 4
    assert len(set(colors)) == 6
    assert all(c[3] == 128 for c in colors)


def test_add_respects_capacity():
    field = CubeField(capacity=2)
    assert field.add(0.1, 0, 0, 0, 0, 0, 0)
    assert field.add(0.2, 0, 0, 0, 0, 0, 0)
    assert not field.add(0.3, 0, 0, 0, 0, 0, 0)
    assert len(field) == 2
    assert [c.r for c in field] == [0.1, 0.2]


def test_update_moves_cube():
    field = CubeField()
    field.add(0.1, 1.0, 0.0, 0.0, 2.0, 0.0, 0.0)
    field.update(0.5)
    assert field.cubes[0].x == 2.0
    assert field.cubes[0].vx == 2.0


def test_update_bounces_outside_box():
    field = CubeField()
    field.add(0.1, 2.9, -2.9, 0.0, 1.0, -1.0, 0.0)
    field.update(1.0)
    cube = field.cubes[0]
    assert cube.vx == -1.0
    assert cube.vy == 1.0
    assert cube.vz == 0.0


def test_populate_fills_within_ranges():
    field = CubeField()
    field.populate(random.Random(42))
    assert len(field) == MAX_CUBES
    for cube in field:
        assert isinstance(cube, Cube)
        assert 0.1 <= cube.r <= 0.5
        assert all(-3.0 <= p <= 3.0 for p in (cube.x, cube.y, cube.z))
        assert all(-2.0 <= v <= 2.0 for v in (cube.vx, cube.vy, cube.vz))


def test_populate_is_deterministic_with_seed():
    a, b = CubeField(10), CubeField(10)
    a.populate(random.Random(7))
    b.populate(random.Random(7))
    assert a.cubes == b.cubes