# renderer/raytracer.py
import logging
import math
import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Optional, Sequence

import numpy as np

from openray.camera.camera import Camera
from openray.core.ray import Ray
from openray.core.utils import clamp, make_rng
from openray.core.vector import Vector3
from openray.geometry.bvh import build_world
from openray.geometry.hittable import Hittable
from openray.renderer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Smallest accepted hit distance; keeps a scattered ray from re-hitting the
# surface it just left because of rounding in its origin.
T_MIN = 0.001

# Survival probability never drops below this, bounding the rescale factor.
MIN_SURVIVAL = 0.05

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def background(ray: Ray) -> Vector3:
    """
    Vertical sky gradient: white looking straight up, sky blue straight down.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * t + SKY_BLUE * (1.0 - t)


def ray_color(ray: Ray, world: Hittable, depth: int, rng: random.Random,
              bounce: int = 0, russian_roulette: bool = True,
              roulette_start: int = 3) -> Vector3:
    """
    Returns the radiance seen along ``ray``.

    ``depth`` is the remaining bounce budget and ``bounce`` the number of
    bounces already taken. Once ``bounce`` reaches ``roulette_start`` a path
    may be ended early with probability 1 - p, p being the largest channel of
    the attenuation; surviving paths are divided by p, which leaves the
    expected value unchanged.
    """
    if depth <= 0:
        return BLACK  # Exceeded recursion depth

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    scatter_result = rec.material.scatter(ray, rec, rng)
    if scatter_result is None:
        return BLACK
    scattered, attenuation = scatter_result

    if russian_roulette and bounce >= roulette_start:
        survival = clamp(attenuation.max_component(), MIN_SURVIVAL, 1.0)
        if rng.random() > survival:
            return BLACK
        attenuation = attenuation / survival

    return attenuation * ray_color(scattered, world, depth - 1, rng,
                                   bounce + 1, russian_roulette, roulette_start)


class Renderer:
    """
    Renders frames on a thread pool, one scanline per task.

    Every scanline draws from its own random generator. With a configured
    seed the generators are derived from (seed, row), so the image does not
    depend on how rows are scheduled across workers.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings

    def make_camera(self) -> Camera:
        s = self.settings
        return Camera(s.look_from, s.look_at, s.vfov, s.aspect_ratio)

    def _row_rng(self, row: int) -> random.Random:
        if self.settings.seed is None:
            return make_rng()
        return make_rng(self.settings.seed * 1_000_003 + row)

    def render(self, objects: Sequence[Hittable], camera: Optional[Camera] = None,
               stop_event: Optional[threading.Event] = None,
               on_row: Optional[Callable[[int], None]] = None,
               buffer: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Renders one frame of ``objects`` and returns averaged linear radiance
        as a (height, width, 3) array, row 0 at the top.

        The BVH is rebuilt from ``objects`` on every call. Setting
        ``stop_event`` stops the frame between pixels; rows not yet finished
        stay black. ``on_row`` is called with each completed row index.
        Pass ``buffer`` to watch rows land in a caller-owned array.
        """
        s = self.settings
        camera = camera if camera is not None else self.make_camera()
        world = build_world(objects, make_rng(s.seed))
        if buffer is None:
            buffer = np.zeros((s.height, s.width, 3), dtype=np.float64)

        logger.info("Render started: %r, %d objects", s, len(objects))
        start = time.perf_counter()
        completed = 0
        with ThreadPoolExecutor(max_workers=s.workers) as executor:
            futures = {
                executor.submit(self.render_row, world, camera, row, buffer, stop_event): row
                for row in range(s.height)
            }
            try:
                for future in as_completed(futures):
                    if future.result():
                        completed += 1
                        if on_row is not None:
                            on_row(futures[future])
            except BaseException:
                # Queued rows are dropped; rows already in flight still finish.
                for pending in futures:
                    pending.cancel()
                logger.error("Render aborted after %d/%d rows", completed, s.height)
                raise

        elapsed = time.perf_counter() - start
        if completed < s.height:
            logger.info("Render cancelled after %d/%d rows (%.2fs)", completed, s.height, elapsed)
        else:
            logger.info("Render finished in %.2fs", elapsed)
        return buffer

    def render_row(self, world: Hittable, camera: Camera, row: int, buffer: np.ndarray,
                   stop_event: Optional[threading.Event] = None) -> bool:
        """
        Traces every pixel of image row ``row`` into ``buffer``.
        Returns False when the row was abandoned because of ``stop_event``.
        """
        s = self.settings
        rng = self._row_rng(row)
        # Viewport t grows upwards while image rows grow downwards.
        j = s.height - 1 - row
        u_scale = 1.0 / max(1, s.width - 1)
        v_scale = 1.0 / max(1, s.height - 1)
        inv_samples = 1.0 / s.samples_per_pixel

        for i in range(s.width):
            if stop_event is not None and stop_event.is_set():
                return False
            pixel_color = BLACK
            for _ in range(s.samples_per_pixel):
                ray = camera.get_ray((i + rng.random()) * u_scale, (j + rng.random()) * v_scale)
                pixel_color = pixel_color + ray_color(ray, world, s.max_depth, rng, 0,
                                                      s.russian_roulette, s.roulette_start)
            buffer[row, i] = (pixel_color.x * inv_samples,
                              pixel_color.y * inv_samples,
                              pixel_color.z * inv_samples)
        return True
