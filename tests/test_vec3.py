import math

import pytest

from weekendtracer.vec3 import (
    Vec3,
    cross,
    degrees_to_radians,
    dot,
    random_double,
    random_in_unit_disk,
    random_int,
    random_on_hemisphere,
    random_unit_vector,
    reflect,
    refract,
    unit_vector,
)


def test_add_then_subtract_round_trips():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_negation_cancels():
    a = Vec3(1.0, 2.0, 3.0)
    assert a + (-a) == Vec3()


def test_scalar_multiplication_commutes():
    a = Vec3(1.0, 2.0, 3.0)
    assert 2 * a == a * 2
    assert (a * 2).x == 2 * a.x


def test_componentwise_multiplication():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    assert list(a * b) == [a.x * b.x, a.y * b.y, a.z * b.z]


def test_indexing_and_iteration():
    v = Vec3(1.0, 2.0, 3.0)
    assert list(v) == [1.0, 2.0, 3.0]
    assert v[1] == 2.0


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0


def test_length_squared_matches_dot():
    v = Vec3(1.0, -2.0, 2.0)
    assert v.length_squared() == dot(v, v)
    assert v.length() == pytest.approx(math.sqrt(dot(v, v)))


def test_near_zero():
    assert Vec3(1e-9, -1e-9, 0.0).near_zero()
    assert not Vec3(1e-7, 0.0, 0.0).near_zero()


def test_cross_of_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0, abs=1e-12)
    assert dot(c, b) == pytest.approx(0.0, abs=1e-12)


def test_unit_vector_has_length_one():
    assert unit_vector(Vec3(3.0, -7.0, 2.0)).length() == pytest.approx(1.0)


def test_degrees_to_radians_half_turn():
    assert degrees_to_radians(180) == pytest.approx(math.pi)


def test_random_double_range():
    values = [random_double(2.0, 3.0) for _ in range(500)]
    assert all(2.0 <= x < 3.0 for x in values)


def test_random_int_inclusive_range():
    values = {random_int(1, 3) for _ in range(1000)}
    assert values == {1, 2, 3}


def test_vec3_random_range():
    for _ in range(200):
        v = Vec3.random(-1, 1)
        assert all(-1 <= c < 1 for c in v)


def test_random_in_unit_disk():
    for _ in range(200):
        p = random_in_unit_disk()
        assert p.z == 0
        assert p.length_squared() < 1


def test_random_unit_vector_length():
    for _ in range(200):
        assert random_unit_vector().length() == pytest.approx(1.0)


def test_random_on_hemisphere_side():
    normal = Vec3(0.0, 0.0, 1.0)
    for _ in range(200):
        assert dot(random_on_hemisphere(normal), normal) >= 0


def test_reflect_flips_normal_component():
    assert reflect(Vec3(1, -1, 0), Vec3(0, 1, 0)) == Vec3(1, 1, 0)


def test_reflect_preserves_length():
    v = Vec3(0.3, -0.8, 0.5)
    n = unit_vector(Vec3(1.0, 2.0, -1.0))
    assert reflect(v, n).length() == pytest.approx(v.length())


def test_refract_with_equal_indices_passes_straight():
    uv = unit_vector(Vec3(0.3, -1.0, 0.2))
    n = Vec3(0.0, 1.0, 0.0)
    assert list(refract(uv, n, 1.0)) == pytest.approx(list(uv))