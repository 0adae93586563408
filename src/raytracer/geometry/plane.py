# raytracer/geometry/plane.py
import math
from typing import Optional

from raytracer import config
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.hittable import Geometry


class Plane(Geometry):
    """
    An infinite plane through ``point`` with unit normal ``normal``.
    """

    def __init__(self, point: Vector3, normal: Vector3, material):
        self.point = point
        self.normal_vector = normal.normalize()
        self.material = material

    def hit(self, ray: Ray) -> Optional[float]:
        denominator = ray.direction.dot(self.normal_vector)
        if denominator == 0.0:
            # parallel to the plane
            return None
        t = (self.point - ray.origin).dot(self.normal_vector) / denominator
        if math.isfinite(t) and t > config.EPSILON:
            return t
        return None

    def normal(self, point: Vector3) -> Vector3:
        return self.normal_vector

    def __repr__(self) -> str:
        return f"Plane({self.point!r}, {self.normal_vector!r})"
