"""Tests for the position/vector primitives."""
import pytest

from spaceobjects.model.geometry_primitives import Point, Vector


def test_point_plus_vector_translates():
    assert Point(1, 2, 3) + Vector(2, 3, -1) == Point(3, 5, 2)


def test_vector_defaults_to_planar():
    assert Point() + Vector(1, 1) == Point(1, 1, 0)


def test_point_rejects_point_addition():
    with pytest.raises(TypeError):
        Point() + Point(1, 1, 1)


def test_copy_is_independent():
    p = Point(1, 2, 3)
    q = p.copy()
    q.z = 0
    assert p.z == 3


def test_format():
    assert Point(1, -2.5, 0).format() == "(1.00, -2.50, 0.00)"
    assert Point(1, -2.5, 0).format(precision=1) == "(1.0, -2.5, 0.0)"
