# materials/metal.py
import random
from typing import Optional, Union

from openray.core.ray import Ray
from openray.core.utils import clamp, random_in_unit_sphere, reflect
from openray.core.vector import Vector3
from openray.geometry.hittable import HitRecord
from openray.materials.material import Material, ScatterResult
from openray.materials.textures import Texture, as_texture


class Metal(Material):
    """
    Metal material with reflective properties and optional texture support.
    fuzz = 0 is a perfect mirror; it is clamped to [0, 1].
    """
    def __init__(self, albedo: Union[Vector3, Texture], fuzz: float = 0.0):
        self.texture = as_texture(albedo)
        self.fuzz = clamp(fuzz, 0.0, 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterResult(scattered, self.texture.value(rec.u, rec.v, rec.p))

        return None  # Absorb the ray if it does not scatter forward
