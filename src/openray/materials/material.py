# materials/material.py
import random
from typing import NamedTuple, Optional

from openray.core.ray import Ray
from openray.core.vector import Vector3
from openray.geometry.hittable import HitRecord


class ScatterResult(NamedTuple):
    """Outgoing ray and the fraction of each color channel that survives."""
    scattered: Ray
    attenuation: Vector3


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterResult, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
