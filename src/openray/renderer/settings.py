# renderer/settings.py
from typing import Optional

from openray.core.vector import Vector3

# Samples per pixel and bounce budget for each named quality level.
QUALITY_PRESETS = {
    "interactive": {"samples_per_pixel": 1, "max_depth": 4},
    "balanced": {"samples_per_pixel": 10, "max_depth": 20},
    "high_quality": {"samples_per_pixel": 100, "max_depth": 50},
}


class RenderSettings:
    """
    Parameters of one render pass. A settings object is passed explicitly to
    the renderer; nothing reads it from global state.
    """
    def __init__(self,
                 width: int = 400,
                 height: int = 225,
                 samples_per_pixel: int = 10,
                 max_depth: int = 20,
                 look_from: Vector3 = Vector3(0, 0, 1),
                 look_at: Vector3 = Vector3(0, 0, -1),
                 vfov: float = 90.0,
                 seed: Optional[int] = None,
                 workers: int = 4,
                 russian_roulette: bool = True,
                 roulette_start: int = 3):
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.look_from = look_from
        self.look_at = look_at
        self.vfov = vfov
        self.seed = seed
        self.workers = workers
        self.russian_roulette = russian_roulette
        self.roulette_start = roulette_start  # Bounces traced before roulette may end a path
        self.validate()

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_PRESETS:
            raise ValueError(f"Unknown quality preset {name!r}; "
                             f"expected one of {', '.join(QUALITY_PRESETS)}")
        params = dict(QUALITY_PRESETS[name])
        params.update(overrides)
        return cls(**params)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def validate(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image size must be positive, got {self.width}x{self.height}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        if self.roulette_start < 0:
            raise ValueError(f"roulette_start must not be negative, got {self.roulette_start}")
        if not 0.0 < self.vfov < 180.0:
            raise ValueError(f"vfov must lie in (0, 180) degrees, got {self.vfov}")

    def __repr__(self) -> str:
        return (f"RenderSettings({self.width}x{self.height}, spp={self.samples_per_pixel}, "
                f"depth={self.max_depth}, seed={self.seed}, workers={self.workers})")
