# materials/textures.py
import logging
import math
from typing import Optional, Union

import numpy as np
from PIL import Image

from openray.core.vector import Vector3

logger = logging.getLogger(__name__)

# Returned by an ImageTexture whose bitmap could not be loaded.
MISSING_TEXTURE_COLOR = Vector3(1.0, 0.0, 1.0)


class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        """Color at surface coordinates (u, v) and world point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")


class SolidColor(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


def as_texture(source: Union[Vector3, Texture]) -> Texture:
    """Wraps a plain color in a SolidColor; textures pass through."""
    if isinstance(source, Vector3):
        return SolidColor(source)
    return source


class CheckerTexture(Texture):
    """
    A 3D checker pattern.

    The pattern is evaluated on the world point rather than on (u, v) so that
    seams and per-face box mappings do not break it near edges and corners.
    """
    def __init__(self, even: Union[Vector3, Texture], odd: Union[Vector3, Texture],
                 scale: float = 1.0):
        self.even = as_texture(even)
        self.odd = as_texture(odd)
        self.scale = scale

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = (math.sin(self.scale * p.x) *
                 math.sin(self.scale * p.y) *
                 math.sin(self.scale * p.z))
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class ImageTexture(Texture):
    """
    A texture sampled from a bitmap, tiled ``scale`` times across (u, v).
    """
    def __init__(self, image_path: Optional[str] = None, scale: float = 1.0):
        self.image_path = image_path
        self.scale = scale
        self.data: Optional[np.ndarray] = None
        if image_path is not None:
            self.data = _load_image(image_path)

    @classmethod
    def from_array(cls, pixels: np.ndarray, scale: float = 1.0) -> "ImageTexture":
        """
        Builds a texture from an (height, width, 3) array of 0..255 integers
        or 0..1 floats.
        """
        texture = cls(scale=scale)
        pixels = np.asarray(pixels)
        if np.issubdtype(pixels.dtype, np.integer):
            pixels = pixels / 255.0
        texture.data = pixels.astype(np.float64)
        return texture

    @property
    def width(self) -> int:
        return 0 if self.data is None else self.data.shape[1]

    @property
    def height(self) -> int:
        return 0 if self.data is None else self.data.shape[0]

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        if self.data is None:
            return MISSING_TEXTURE_COLOR

        # Wrap for tiling; floor keeps negative coordinates in [0, 1).
        u = u * self.scale
        v = v * self.scale
        u = u - math.floor(u)
        v = v - math.floor(v)

        # Image rows run top-down, v runs bottom-up.
        v = 1.0 - v

        x = int(u * (self.width - 1))
        y = int(v * (self.height - 1))
        color = self.data[y, x]
        return Vector3(float(color[0]), float(color[1]), float(color[2]))


def _load_image(image_path: str) -> Optional[np.ndarray]:
    try:
        with Image.open(image_path) as img:
            if img.mode != 'RGB':
                img = img.convert('RGB')
            data = np.asarray(img, dtype=np.float64) / 255.0
    except OSError as e:
        logger.warning("Error loading texture %s: %s", image_path, e)
        return None
    logger.info("Texture loaded: %s (%dx%d)", image_path, data.shape[1], data.shape[0])
    return data
