"""
Geometry kit: primitives, the flat aggregate and the bounding volume hierarchy.
All of them satisfy the same hit/bounding_box contract and are interchangeable
as a render world.
"""
from openray.geometry.box import Box
from openray.geometry.bvh import BVHNode, build_bvh, build_world
from openray.geometry.hittable import Hittable, HitRecord
from openray.geometry.sphere import Sphere
from openray.geometry.world import HittableList

__all__ = [
    "Box",
    "BVHNode",
    "build_bvh",
    "build_world",
    "Hittable",
    "HitRecord",
    "HittableList",
    "Sphere",
]
