# geometry/world.py
from typing import Iterable, List, Optional

from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A flat list of Hittable objects, intersected by linear scan.
    """
    def __init__(self, objects: Iterable[Hittable] = ()):
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def remove(self, obj: Hittable):
        self.objects.remove(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        output_box = None
        for obj in self.objects:
            box = obj.bounding_box()
            if box is None:
                return None
            output_box = box if output_box is None else AABB.surrounding_box(output_box, box)
        return output_box
