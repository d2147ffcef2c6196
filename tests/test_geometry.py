import math

import pytest

from yukifight.geometry import Capsule, Circle, Vec2, hit_capsule, hit_circle


def test_vector_arithmetic():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, -1.0)
    assert a + b == Vec2(4.0, 1.0)
    assert b - a == Vec2(2.0, -3.0)
    assert a * 2 == Vec2(2.0, 4.0)
    assert 2 * a == a * 2
    assert -a == Vec2(-1.0, -2.0)


def test_length_of_three_four():
    assert Vec2(3.0, 4.0).length() == pytest.approx(5.0)


def test_normalized_has_unit_length_and_same_direction():
    v = Vec2(-7.0, 2.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(v) == pytest.approx(v.length())


def test_normalized_zero_stays_zero():
    assert Vec2(0.0, 0.0).normalized() == Vec2(0.0, 0.0)


def test_dot_of_perpendicular_is_zero():
    assert Vec2(1.0, 0.0).dot(Vec2(0.0, 5.0)) == 0.0


def test_hit_circle_overlap_and_touching():
    assert hit_circle(Circle(0, 0, 1), Circle(1.5, 0, 1))
    assert not hit_circle(Circle(0, 0, 1), Circle(2, 0, 1))
    assert not hit_circle(Circle(0, 0, 1), Circle(10, 10, 1))


def test_hit_circle_is_symmetric():
    a = Circle(3, 4, 2)
    b = Circle(5, 5, 1)
    assert hit_circle(a, b) == hit_circle(b, a)


def test_hit_capsule_along_the_body():
    capsule = Capsule(0, 0, 10, 0, 1)
    assert hit_capsule(Circle(5, 1.5, 1), capsule)
    assert not hit_capsule(Circle(5, 3, 1), capsule)


def test_hit_capsule_behind_start_and_past_end():
    capsule = Capsule(0, 0, 10, 0, 1)
    assert not hit_capsule(Circle(-2, 0, 1), capsule)
    assert hit_capsule(Circle(-1.5, 0, 1), capsule)
    assert not hit_capsule(Circle(12, 0, 1), capsule)
    assert hit_capsule(Circle(11.5, 0, 1), capsule)


def test_zero_length_capsule_behaves_like_circle():
    capsule = Capsule(4, 4, 0, 0, 2)
    circle = Circle(4 + math.sqrt(2), 4 + math.sqrt(2), 1)
    assert hit_capsule(circle, capsule) == hit_circle(circle, Circle(4, 4, 2))