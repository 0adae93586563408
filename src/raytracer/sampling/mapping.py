# raytracer/sampling/mapping.py
"""
Warps of unit-square samples onto other domains.
"""
import math
from typing import List

from raytracer.core.errors import ConfigurationError
from raytracer.core.vector import Vector2, Vector3


def square_to_unit_disk(sample: Vector2) -> Vector2:
    """
    Maps a sample on the unit square to the unit disc centred on the origin
    using Shirley's concentric mapping, which keeps the relative area of
    regions and so preserves the distribution of the input set.
    """
    a = 2.0 * sample.x - 1.0
    b = 2.0 * sample.y - 1.0

    if a > -b:
        if a > b:
            r = a
            phi = b / a
        else:
            r = b
            phi = 2.0 - a / b
    else:
        if a < b:
            r = -a
            phi = 4.0 + b / a
        else:
            r = -b
            if b != 0.0:
                phi = 6.0 - a / b
            else:
                phi = 0.0

    phi *= math.pi / 4.0
    return Vector2(r * math.cos(phi), r * math.sin(phi))


def square_to_hemisphere(sample: Vector2, e: float) -> Vector3:
    """
    Maps a sample on the unit square to the unit hemisphere with z >= 0,
    following a cosine-power distribution with exponent e.

    e = 0 spreads samples evenly; larger values pull them towards the pole.
    """
    phi = 2.0 * math.pi * sample.x
    cos_theta = (1.0 - sample.y) ** (1.0 / (e + 1.0))
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    return Vector3(sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta)


def map_square_to_unit_disk(samples: List[Vector2]) -> List[Vector2]:
    return [square_to_unit_disk(s) for s in samples]


def map_square_to_hemisphere(samples: List[Vector2], e: float) -> List[Vector3]:
    if e < 0:
        raise ConfigurationError(f"hemisphere exponent must be non-negative, got {e}")
    return [square_to_hemisphere(s, e) for s in samples]
