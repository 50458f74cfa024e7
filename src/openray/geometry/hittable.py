# geometry/hittable.py
from typing import Optional

from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.

    A record is created by the primitive that was struck and is owned by the
    caller of ``hit``; it is never shared between traversals.
    """
    __slots__ = ("p", "normal", "t", "front_face", "u", "v", "material")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal, always against the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the hit was on the outward side
        self.u = u              # Surface coordinates
        self.v = v
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    ``name`` labels the object for the authoring layer; the renderer ignores it.
    """
    material = None
    name = "Object"

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self) -> Optional[AABB]:
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
