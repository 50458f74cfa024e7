# geometry/bvh.py
import logging
import random
import time
from typing import List, Optional, Sequence

from openray.core.aabb import AABB
from openray.core.ray import Ray
from openray.geometry.hittable import Hittable, HitRecord
from openray.geometry.world import HittableList

logger = logging.getLogger(__name__)


def _min_corner(obj: Hittable, axis: int) -> float:
    return obj.bounding_box().minimum[axis]


class BVHNode(Hittable):
    """
    A node of a bounding volume hierarchy.

    Every object handed to the builder must report a bounding box; a node's
    box is the union of its children's boxes, computed once at build time.
    The tree is never refit: rebuild it when the geometry changes.
    """
    def __init__(self, objects: List[Hittable], start: int, end: int, rng: random.Random):
        axis = rng.randrange(3)
        object_span = end - start

        if object_span == 1:
            self.left = self.right = objects[start]
        elif object_span == 2:
            first, second = objects[start], objects[start + 1]
            if _min_corner(first, axis) < _min_corner(second, axis):
                self.left, self.right = first, second
            else:
                self.left, self.right = second, first
        else:
            # Median of the sorted order, not a spatial median.
            objects[start:end] = sorted(objects[start:end], key=lambda obj: _min_corner(obj, axis))
            mid = start + object_span // 2
            self.left = BVHNode(objects, start, mid, rng)
            self.right = BVHNode(objects, mid, end, rng)

        self.box = AABB.surrounding_box(self.left.bounding_box(), self.right.bounding_box())

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max)
        # Only hits closer than the left one can matter on the right.
        if hit_left is not None:
            t_max = hit_left.t
        if self.right is self.left:
            return hit_left
        hit_right = self.right.hit(ray, t_min, t_max)

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box


def build_bvh(objects: Sequence[Hittable], rng: random.Random) -> BVHNode:
    """
    Builds a fresh hierarchy over a copy of ``objects``.

    The split axis of every node is drawn from ``rng``, so a seeded generator
    gives a reproducible tree. Raises ValueError for an empty collection.
    """
    if len(objects) == 0:
        raise ValueError("Cannot build a BVH over an empty object collection")
    start = time.perf_counter()
    root = BVHNode(list(objects), 0, len(objects), rng)
    logger.debug("BVH built over %d objects (%d nodes) in %.2f ms",
                 len(objects), count_nodes(root), (time.perf_counter() - start) * 1000.0)
    return root


def count_nodes(node: Hittable) -> int:
    """
    Number of interior BVHNode instances below and including ``node``.
    """
    if not isinstance(node, BVHNode):
        return 0
    if node.right is node.left:
        return 1 + count_nodes(node.left)
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def build_world(objects: Sequence[Hittable], rng: random.Random) -> Hittable:
    """
    Render world for one frame: a BVH over ``objects``, or an empty
    HittableList when there is nothing to render.
    """
    if len(objects) == 0:
        return HittableList()
    return build_bvh(objects, rng)
