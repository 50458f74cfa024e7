# camera/camera.py
import math

from openray.core.ray import Ray
from openray.core.vector import Vector3


class Camera:
    """
    A pinhole camera looking from ``look_from`` towards ``look_at``.

    ``vfov`` is the vertical field of view in degrees. The viewport sits at
    unit distance in front of the eye; there is no lens or aperture.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vfov: float,
                 aspect_ratio: float, vup: Vector3 = Vector3(0, 1, 0)):
        self.look_from = look_from
        self.look_at = look_at
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.vup = vup
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        # w points backwards, away from the scene.
        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.look_from
        self.horizontal = self.u * viewport_width
        self.vertical = self.v * viewport_height
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w)

    @property
    def forward(self) -> Vector3:
        return -self.w

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Generates a ray through viewport coordinates (s, t) in [0, 1],
        (0, 0) being the lower-left corner.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * t -
                     self.origin)
        return Ray(self.origin, direction)
