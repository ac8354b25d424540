import math

import pytest

from rayquest.vector import Vec3


def test_add_then_subtract_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_magnitude_of_pythagorean_triple():
    assert Vec3(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0)


def test_normalized_has_unit_length():
    v = Vec3(2.0, -7.0, 1.5).normalized()
    assert v.magnitude() == pytest.approx(1.0)


def test_normalized_keeps_direction():
    original = Vec3(2.0, -7.0, 1.5)
    unit = original.normalized()
    assert unit.cross(original).magnitude() == pytest.approx(0.0, abs=1e-12)
    assert unit.dot(original) > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3().normalized()


def test_cross_of_unit_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_cross_is_perpendicular_to_operands():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_cross_is_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert a.cross(b) == -(b.cross(a))


def test_dot_with_self_is_squared_magnitude():
    v = Vec3(1.0, -2.0, 2.5)
    assert v.dot(v) == pytest.approx(v.magnitude() ** 2)


def test_scalar_multiply_matches_repeated_add():
    v = Vec3(1.25, -3.0, 0.5)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_negation_cancels():
    v = Vec3(1.0, -2.0, 3.0)
    assert v + (-v) == Vec3()


def test_add_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + 1


def test_magnitude_scales_with_scalar():
    v = Vec3(1.0, 2.0, 2.0)
    assert (v * 3.0).magnitude() == pytest.approx(3.0 * v.magnitude())
    assert not math.isnan(v.magnitude())