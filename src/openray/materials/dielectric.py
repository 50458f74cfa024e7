# materials/dielectric.py
import math
import random

from openray.core.ray import Ray
from openray.core.utils import reflect, refract, schlick
from openray.core.vector import Vector3
from openray.geometry.hittable import HitRecord
from openray.materials.material import Material, ScatterResult


class Dielectric(Material):
    """
    A clear refractive material (glass, water, diamond) with index ``ref_idx``.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> ScatterResult:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if cannot_refract or schlick(cos_theta, refraction_ratio) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return ScatterResult(Ray(rec.p, direction), attenuation)
