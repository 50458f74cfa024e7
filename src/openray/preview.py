# preview.py
import threading
from typing import Sequence

import numpy as np
import pygame

from openray.camera.camera import Camera
from openray.geometry.hittable import Hittable
from openray.renderer.raytracer import Renderer
from openray.renderer.tone_mapping import gamma_correct


def run_preview(renderer: Renderer, objects: Sequence[Hittable], camera: Camera,
                window_scale: int = 2) -> np.ndarray:
    """
    Shows the frame in a Pygame window while it renders.

    Closing the window stops the render between pixels; the window stays open
    after the frame completes until it is closed. Returns the linear buffer,
    partial if the render was stopped.
    """
    s = renderer.settings
    buffer = np.zeros((s.height, s.width, 3), dtype=np.float64)
    stop_event = threading.Event()
    failure = []

    def work():
        try:
            renderer.render(objects, camera, stop_event=stop_event, buffer=buffer)
        except Exception as e:
            failure.append(e)

    worker = threading.Thread(target=work, name="openray-render", daemon=True)

    pygame.init()
    window_size = (s.width * window_scale, s.height * window_scale)
    screen = pygame.display.set_mode(window_size)
    pygame.display.set_caption("openray")
    clock = pygame.time.Clock()
    worker.start()

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            # surfarray wants (width, height, 3).
            image = gamma_correct(buffer).swapaxes(0, 1)
            surf = pygame.surfarray.make_surface(image)
            screen.blit(pygame.transform.scale(surf, window_size), (0, 0))
            status = "done" if not worker.is_alive() else "rendering"
            pygame.display.set_caption(f"openray - {status}")
            pygame.display.flip()
            clock.tick(10)
    finally:
        stop_event.set()
        worker.join()
        pygame.quit()

    if failure:
        raise failure[0]
    return buffer
