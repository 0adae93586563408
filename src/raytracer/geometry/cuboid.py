# raytracer/geometry/cuboid.py
import math
from typing import Optional

from raytracer import config
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Geometry


class Cuboid(Geometry):
    """
    An axis-aligned box spanning the corners ``minimum`` and ``maximum``.
    """

    def __init__(self, minimum: Vector3, maximum: Vector3, material):
        self.minimum = minimum
        self.maximum = maximum
        self.material = material

    @classmethod
    def with_size(cls, origin: Vector3, size: Vector3, material) -> "Cuboid":
        return cls(origin, origin + size, material)

    def hit(self, ray: Ray) -> Optional[float]:
        # Slab method: intersect the ray's parameter interval with each axis slab.
        t_min = -math.inf
        t_max = math.inf
        for a in ("x", "y", "z"):
            d = getattr(ray.direction, a)
            o = getattr(ray.origin, a)
            lo = getattr(self.minimum, a)
            hi = getattr(self.maximum, a)
            if d == 0.0:
                # parallel to this slab: either always inside it or never
                if o < min(lo, hi) or o > max(lo, hi):
                    return None
                continue
            inv_d = 1.0 / d
            t0 = (lo - o) * inv_d
            t1 = (hi - o) * inv_d
            if t0 > t1:
                t0, t1 = t1, t0
            t_min = max(t_min, t0)
            t_max = min(t_max, t1)

        if t_min < t_max and t_max > config.EPSILON:
            return t_max if t_min < 0.0 else t_min
        return None

    def normal(self, point: Vector3) -> Vector3:
        """
        Snaps the offset from the centre onto the face axis.

        Each component of the offset, divided by the half extent and scaled
        by ``1 + EPSILON``, truncates to ±1 on the face it lies on and to 0
        elsewhere. On exact edges and corners more than one component
        survives, giving a diagonal normal; this is undefined behaviour.
        """
        centre = (self.minimum + self.maximum) * 0.5
        offset = point - centre
        divisor = (self.minimum - self.maximum) * 0.5
        bias = 1.0 + config.EPSILON

        return Vector3(
            math.trunc(offset.x / abs(divisor.x) * bias),
            math.trunc(offset.y / abs(divisor.y) * bias),
            math.trunc(offset.z / abs(divisor.z) * bias),
        ).normalize()

    def __repr__(self) -> str:
        return f"Cuboid({self.minimum!r}, {self.maximum!r})"
