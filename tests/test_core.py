"""Unit tests for vectors, rays, AABBs and sampling helpers."""

import math
import random

import pytest

from conftest import assert_vec_close
from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.core.utils import (clamp, inverse, random_in_unit_sphere, random_unit_vector,
                                reflect, refract, schlick)
from openray.core.vector import Vector3


class TestVector3:
    """Arithmetic and helpers on Vector3."""

    def test_arithmetic(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)
        assert -a == Vector3(-1, -2, -3)
        assert a * 2 == Vector3(2, 4, 6)
        assert 2 * a == Vector3(2, 4, 6)
        assert b / 2 == Vector3(2, 2.5, 3)

    def test_hadamard_product(self):
        assert Vector3(1, 2, 3) * Vector3(0.5, 0.25, 2) == Vector3(0.5, 0.5, 6)

    def test_dot_and_cross(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.dot(y) == 0
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_indexing(self):
        v = Vector3(7, 8, 9)
        assert (v[0], v[1], v[2]) == (7, 8, 9)
        assert list(v) == [7, 8, 9]
        with pytest.raises(IndexError):
            v[3]

    def test_normalize(self):
        n = Vector3(3, 0, 4).normalize()
        assert abs(n.length() - 1.0) < 1e-12
        assert_vec_close(n, Vector3(0.6, 0, 0.8))

    def test_normalize_zero_vector(self):
        assert Vector3(0, 0, 0).normalize() == Vector3(0, 0, 0)

    def test_near_zero(self):
        assert Vector3(1e-9, -1e-9, 0).near_zero()
        assert not Vector3(1e-7, 0, 0).near_zero()

    def test_max_component(self):
        assert Vector3(0.2, 0.9, 0.4).max_component() == 0.9

    def test_operations_return_new_vectors(self):
        a = Vector3(1, 1, 1)
        b = a + Vector3(1, 0, 0)
        assert a == Vector3(1, 1, 1)
        assert b is not a


class TestRay:

    def test_at(self):
        ray = Ray(Vector3(1, 2, 3), Vector3(0, 0, -2))
        assert ray.at(0) == Vector3(1, 2, 3)
        assert ray.at(1.5) == Vector3(1, 2, 0)


class TestAABB:
    """Slab test, union and containment."""

    def setup_method(self):
        self.box = AABB(Vector3(-1, -1, -1), Vector3(1, 1, 1))

    def test_hit_head_on(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_miss(self):
        ray = Ray(Vector3(3, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, math.inf)

    def test_interval_excludes_box(self):
        ray = Ray(Vector3(0, 0, -5), Vector3(0, 0, 1))
        assert not self.box.hit(ray, 0.001, 3.0)

    def test_negative_direction(self):
        ray = Ray(Vector3(0, 0, 5), Vector3(0, 0, -1))
        assert self.box.hit(ray, 0.001, math.inf)

    def test_axis_parallel_ray_does_not_raise(self):
        # Zero x and y components exercise the infinite slab bounds.
        inside = Ray(Vector3(0.5, 0.5, -5), Vector3(0, 0, 1))
        outside = Ray(Vector3(1.5, 0.5, -5), Vector3(0, 0, 1))
        assert self.box.hit(inside, 0.001, math.inf)
        assert not self.box.hit(outside, 0.001, math.inf)

    def test_surrounding_box(self):
        other = AABB(Vector3(0, 2, -3), Vector3(4, 3, 0))
        union = AABB.surrounding_box(self.box, other)
        assert union.minimum == Vector3(-1, -1, -3)
        assert union.maximum == Vector3(4, 3, 1)
        assert union.contains(self.box)
        assert union.contains(other)
        assert not self.box.contains(union)


class TestSampling:
    """Random helpers and optics formulas."""

    def test_random_in_unit_sphere(self):
        rng = random.Random(1)
        for _ in range(500):
            assert random_in_unit_sphere(rng).length_squared() < 1.0

    def test_random_unit_vector(self):
        rng = random.Random(2)
        for _ in range(200):
            assert abs(random_unit_vector(rng).length() - 1.0) < 1e-9

    def test_same_seed_same_samples(self):
        a = [random_unit_vector(random.Random(5)) for _ in range(3)]
        b = [random_unit_vector(random.Random(5)) for _ in range(3)]
        assert a == b

    def test_reflect(self):
        assert reflect(Vector3(1, -1, 0), Vector3(0, 1, 0)) == Vector3(1, 1, 0)

    def test_refract_straight_through(self):
        out = refract(Vector3(0, -1, 0), Vector3(0, 1, 0), 1 / 1.5)
        assert_vec_close(out, Vector3(0, -1, 0))

    def test_schlick_bounds(self):
        assert abs(schlick(1.0, 1.5) - 0.04) < 1e-12
        assert abs(schlick(0.0, 1.5) - 1.0) < 1e-12

    def test_clamp(self):
        assert clamp(-1, 0, 1) == 0
        assert clamp(2, 0, 1) == 1
        assert clamp(0.3, 0, 1) == 0.3

    def test_inverse_of_zero_is_signed_infinity(self):
        assert inverse(0.0) == math.inf
        assert inverse(-0.0) == -math.inf
        assert inverse(4.0) == 0.25
