# scene.py
from typing import List, Optional

from openray.core.vector import Vector3
from openray.geometry.box import Box
from openray.geometry.hittable import Hittable
from openray.geometry.sphere import Sphere
from openray.materials.dielectric import Dielectric
from openray.materials.lambertian import Lambertian
from openray.materials.metal import Metal
from openray.materials.textures import CheckerTexture


class Scene:
    """
    The editable collection of objects owned by the authoring layer.

    Names live on the objects themselves. An object without a name of its
    own is labelled after its type when added.

    The renderer never sees this container: each render pass takes a
    ``snapshot`` and builds its own acceleration structure from it, so edits
    made while a frame is in flight do not affect that frame.
    """
    def __init__(self):
        self._objects: List[Hittable] = []

    def add(self, obj: Hittable, name: Optional[str] = None) -> Hittable:
        if self._contains(obj):
            raise ValueError(f"{obj!r} is already in the scene")
        self._objects.append(obj)
        if name is not None:
            obj.name = name
        elif obj.name == Hittable.name:
            obj.name = f"{type(obj).__name__} {len(self._objects)}"
        return obj

    def remove(self, obj: Hittable):
        for i, candidate in enumerate(self._objects):
            if candidate is obj:
                del self._objects[i]
                return
        raise ValueError(f"{obj!r} is not in the scene")

    def clear(self):
        self._objects.clear()

    def name_of(self, obj: Hittable) -> str:
        if not self._contains(obj):
            raise ValueError(f"{obj!r} is not in the scene")
        return obj.name

    def find(self, name: str) -> Optional[Hittable]:
        for obj in self._objects:
            if obj.name == name:
                return obj
        return None

    def _contains(self, obj: Hittable) -> bool:
        return any(candidate is obj for candidate in self._objects)

    @property
    def objects(self) -> List[Hittable]:
        return list(self._objects)

    def snapshot(self) -> List[Hittable]:
        """Object list to hand to one render pass."""
        return list(self._objects)

    def __len__(self) -> int:
        return len(self._objects)


def default_scene() -> Scene:
    """
    A ground plane with a matte, a glass and a gold sphere, and a checkered box.
    """
    scene = Scene()
    scene.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, Lambertian(Vector3(0.8, 0.8, 0.0)), name="Ground"))
    scene.add(Sphere(Vector3(0.0, 0.0, -1.0), 0.5, Lambertian(Vector3(0.1, 0.2, 0.5)), name="Center"))
    scene.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, Dielectric(1.5), name="Left"))
    scene.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, Metal(Vector3(0.8, 0.6, 0.2), 0.0), name="Right"))
    checker = CheckerTexture(Vector3(0.9, 0.9, 0.9), Vector3(0.2, 0.3, 0.1), scale=10.0)
    scene.add(Box.from_center(Vector3(0.0, -0.3, -2.2), Vector3(0.4, 0.4, 0.4),
                              Lambertian(checker), name="Box"))
    return scene
