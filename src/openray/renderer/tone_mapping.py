# renderer/tone_mapping.py
import numpy as np


def gamma_correct(image: np.ndarray) -> np.ndarray:
    """
    Convert averaged linear radiance to 8-bit with gamma 2.0.

    Channels are square-rooted, clamped to [0, 0.999] and scaled by 256, so
    every value in [0, 1) lands in a distinct bucket of 0..255.
    """
    mapped = np.sqrt(np.maximum(image, 0.0))
    mapped = np.clip(mapped, 0.0, 0.999)
    return (mapped * 256).astype(np.uint8)


def reinhard_tone_mapping(image: np.ndarray, exposure: float = 1.0,
                          white_point: float = 1.0, gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.maximum(image, 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return (mapped * 255).clip(0, 255).astype(np.uint8)


TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
}
