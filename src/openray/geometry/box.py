# geometry/box.py
import math
from typing import Optional, Tuple

from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.core.utils import inverse
from openray.core.vector import Vector3
from openray.geometry.hittable import Hittable, HitRecord

# Outward normals indexed by (axis, side) where side 0 is the min face.
FACE_NORMALS = (
    (Vector3(-1, 0, 0), Vector3(1, 0, 0)),
    (Vector3(0, -1, 0), Vector3(0, 1, 0)),
    (Vector3(0, 0, -1), Vector3(0, 0, 1)),
)


class Box(Hittable):
    """
    A solid axis-aligned box between two corners.
    """
    def __init__(self, p_min: Vector3, p_max: Vector3, material, name: Optional[str] = None):
        self.p_min = p_min
        self.p_max = p_max
        self.material = material
        if name is not None:
            self.name = name

    @classmethod
    def from_center(cls, center: Vector3, size: Vector3, material,
                    name: Optional[str] = None) -> "Box":
        half = size * 0.5
        return cls(center - half, center + half, material, name)

    @property
    def center(self) -> Vector3:
        return (self.p_min + self.p_max) * 0.5

    @property
    def size(self) -> Vector3:
        return self.p_max - self.p_min

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Slab method, keeping the full [t_enter, t_exit] span so that a ray
        # starting inside the box reports its exit face.
        t_enter = -math.inf
        t_exit = math.inf
        for a in range(3):
            inv_d = inverse(ray.direction[a])
            t_near = (self.p_min[a] - ray.origin[a]) * inv_d
            t_far = (self.p_max[a] - ray.origin[a]) * inv_d
            if inv_d < 0.0:
                t_near, t_far = t_far, t_near
            if t_near > t_enter:
                t_enter = t_near
            if t_far < t_exit:
                t_exit = t_far
            if t_exit <= t_enter:
                return None

        if t_min <= t_enter <= t_max:
            t = t_enter
        elif t_min <= t_exit <= t_max:
            t = t_exit
        else:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        axis, side = self._closest_face(rec.p)
        rec.set_face_normal(ray, FACE_NORMALS[axis][side])
        rec.u, rec.v = self._face_uv(rec.p, axis, side)
        rec.material = self.material
        return rec

    def _closest_face(self, p: Vector3) -> Tuple[int, int]:
        """
        Picks the face whose plane is nearest to p.
        """
        best = (0, 0)
        best_dist = math.inf
        for a in range(3):
            for side, bound in enumerate((self.p_min[a], self.p_max[a])):
                dist = abs(p[a] - bound)
                if dist < best_dist:
                    best_dist = dist
                    best = (a, side)
        return best

    def _face_uv(self, p: Vector3, axis: int, side: int) -> Tuple[float, float]:
        lx = _local(p.x, self.p_min.x, self.p_max.x)
        ly = _local(p.y, self.p_min.y, self.p_max.y)
        lz = _local(p.z, self.p_min.z, self.p_max.z)
        # Flips keep the texture running the same way around the box.
        if axis == 0:
            return (1.0 - lz if side == 1 else lz), ly
        if axis == 1:
            return lx, (1.0 - lz if side == 1 else lz)
        return (1.0 - lx if side == 0 else lx), ly

    def bounding_box(self) -> AABB:
        return AABB(self.p_min, self.p_max)

    def __repr__(self) -> str:
        return f"Box({self.p_min!r}, {self.p_max!r})"


def _local(x: float, lo: float, hi: float) -> float:
    extent = hi - lo
    if extent == 0:
        return 0.0
    return (x - lo) / extent
