# raytracer/renderer/tone_mapping.py
import numpy as np
from numba import njit


@njit(cache=True)
def _tone_map_kernel(framebuffer, output):
    height, width = framebuffer.shape[0], framebuffer.shape[1]
    for y in range(height):
        for x in range(width):
            r = framebuffer[y, x, 0]
            g = framebuffer[y, x, 1]
            b = framebuffer[y, x, 2]

            # Keep the hue of over-bright pixels by scaling by the brightest channel
            peak = max(r, max(g, b))
            if peak > 1.0:
                r = r / peak
                g = g / peak
                b = b / peak

            output[y, x, 0] = int(min(255.0, max(0.0, r * 255.0)))
            output[y, x, 1] = int(min(255.0, max(0.0, g * 255.0)))
            output[y, x, 2] = int(min(255.0, max(0.0, b * 255.0)))


def to_rgb8(framebuffer: np.ndarray) -> np.ndarray:
    """
    Converts a linear float framebuffer of shape (height, width, 3) into an
    8-bit RGB image of the same shape.

    A pixel whose largest channel exceeds 1.0 is divided by that channel;
    every channel is then scaled to [0, 255], clamped and truncated.
    """
    framebuffer = np.ascontiguousarray(framebuffer, dtype=np.float64)
    if framebuffer.ndim != 3 or framebuffer.shape[2] != 3:
        raise ValueError(f"expected a (height, width, 3) framebuffer, got shape {framebuffer.shape}")
    output = np.zeros(framebuffer.shape, dtype=np.uint8)
    _tone_map_kernel(framebuffer, output)
    return output
