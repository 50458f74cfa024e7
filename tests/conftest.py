"""Pytest configuration for openray tests.

Shared fixtures: seeded random generators, simple materials and a small
random scene used by the BVH and renderer tests.
"""

import random

import pytest

from openray.core.ray import Ray
from openray.core.vector import Vector3
from openray.geometry.box import Box
from openray.geometry.sphere import Sphere
from openray.materials.lambertian import Lambertian
from openray.materials.material import Material, ScatterResult


class FixedScatter(Material):
    """Scatters every hit straight up with a fixed attenuation."""

    def __init__(self, attenuation):
        self.attenuation = attenuation

    def scatter(self, ray_in, rec, rng):
        return ScatterResult(Ray(rec.p, Vector3(0, 1, 0)), self.attenuation)


class Absorb(Material):
    """Absorbs every ray."""

    def scatter(self, ray_in, rec, rng):
        return None


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def gray():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


@pytest.fixture
def random_scene(gray):
    """Forty non-degenerate spheres and boxes scattered in a 20-unit cube."""
    gen = random.Random(7)
    objects = []
    for i in range(40):
        center = Vector3(gen.uniform(-10, 10), gen.uniform(-10, 10), gen.uniform(-10, 10))
        if i % 2 == 0:
            objects.append(Sphere(center, gen.uniform(0.2, 1.5), gray))
        else:
            size = Vector3(gen.uniform(0.3, 2.0), gen.uniform(0.3, 2.0), gen.uniform(0.3, 2.0))
            objects.append(Box.from_center(center, size, gray))
    return objects


def assert_vec_close(actual, expected, tol=1e-9):
    assert abs(actual.x - expected.x) < tol, (actual, expected)
    assert abs(actual.y - expected.y) < tol, (actual, expected)
    assert abs(actual.z - expected.z) < tol, (actual, expected)
