# geometry/sphere.py
import math
from typing import Optional, Tuple

from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.core.vector import Vector3
from openray.geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material, name: Optional[str] = None):
        self.center = center
        self.radius = radius
        self.material = material
        if name is not None:
            self.name = name

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root < t_min or root > t_max:
            root = (-half_b + sqrt_disc) / a
            if root < t_min or root > t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.u, rec.v = sphere_uv(outward_normal)
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        offset = Vector3(self.radius, self.radius, self.radius)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"


def sphere_uv(p: Vector3) -> Tuple[float, float]:
    """
    Maps a point on the unit sphere to (u, v) in [0,1]x[0,1].

    u is the angle around the Y axis measured from X=-1, v the angle from
    Y=-1 to Y=+1:

        ( 1  0  0) -> (0.50, 0.50)    (-1  0  0) -> (0.00, 0.50)
        ( 0  1  0) -> (0.50, 1.00)    ( 0 -1  0) -> (0.50, 0.00)
        ( 0  0  1) -> (0.25, 0.50)    ( 0  0 -1) -> (0.75, 0.50)
    """
    # acos is undefined just outside [-1, 1], which rounding can produce.
    theta = math.acos(max(-1.0, min(1.0, -p.y)))
    phi = math.atan2(-p.z, p.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi
