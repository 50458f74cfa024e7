# materials/lambertian.py
import random
from typing import Optional, Union

from openray.core.ray import Ray
from openray.core.utils import random_unit_vector
from openray.core.vector import Vector3
from openray.geometry.hittable import HitRecord
from openray.materials.material import Material, ScatterResult
from openray.materials.textures import Texture, as_texture


class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.

    ``tint`` multiplies whatever the texture returns, so a shared image or
    checker texture can be recolored per object.
    """

    def __init__(self, albedo: Union[Vector3, Texture], tint: Optional[Vector3] = None):
        self.texture = as_texture(albedo)
        self.tint = tint

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: random.Random) -> ScatterResult:
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # The random vector can cancel the normal almost exactly.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        if self.tint is not None:
            attenuation = attenuation * self.tint

        return ScatterResult(Ray(rec.p, scatter_direction), attenuation)
